"""Game automation: drivers, views, reporting and run context."""

from .context import RunContext
from .locator import Locator, LookupResult, LookupStatus
from .reporting import Reporter
from .views import BaseView, GamePlayView, MainMenuView
from .waits import PollResult, wait_until
