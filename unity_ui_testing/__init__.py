"""Page-object UI test toolkit for Unity games driven through AltTester."""

__version__ = "0.1.0"
