"""Page objects for the game under test."""

from .base import BaseView
from .gameplay import GamePlayView
from .main_menu import MainMenuView

__all__ = [
    "BaseView",
    "GamePlayView",
    "MainMenuView",
]
