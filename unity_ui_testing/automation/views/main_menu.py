"""Page object for the game's main menu."""

from __future__ import annotations

import allure

from ..driver import ViewStateError
from ..locator import Locator
from .base import BaseView


class MainMenuView(BaseView):
    """Encapsulates common main menu actions."""

    PLAY_BUTTON = Locator.by_name("PlayButton")
    MAIN_MENU_PANEL = Locator.by_name("MainMenuPanel")
    PLAYER_NAME_INPUT = Locator.by_name("PlayerNameInput")
    SETTINGS_BUTTON = Locator.by_name("SettingsButton")

    @allure.step("Click play button")
    def click_play_button(self) -> None:
        self.find(self.PLAY_BUTTON).click()
        self.reporter.log("Clicked play button")

    @allure.step("Check if main menu is visible")
    def is_main_menu_visible(self) -> bool:
        result = self.lookup(self.MAIN_MENU_PANEL)
        if not result.found:
            self.reporter.log("Main menu panel not found")
            return False
        visible = bool(result.element.enabled)
        self.reporter.log(f"Main menu panel visible: {visible}")
        return visible

    @allure.step("Enter player name")
    def enter_player_name(self, player_name: str) -> None:
        self.find(self.PLAYER_NAME_INPUT).set_text(player_name, submit=True)
        self.reporter.log(f"Entered player name: {player_name}")

    @allure.step("Navigate to settings")
    def navigate_to_settings(self) -> None:
        self.find(self.SETTINGS_BUTTON).click()
        self.reporter.log("Navigated to settings")

    @allure.step("Wait for main menu to be ready")
    def wait_for_main_menu_ready(self, timeout: float = 10) -> None:
        self.wait_for(self.MAIN_MENU_PANEL, timeout)
        self.reporter.log("Main menu is ready")

    @allure.step("Start new game")
    def start_new_game(self, player_name: str, timeout: float = 10) -> None:
        if not self.lookup(self.MAIN_MENU_PANEL, timeout=timeout).found or not self.is_main_menu_visible():
            raise ViewStateError("Main menu is not visible, cannot start new game")

        self.enter_player_name(player_name)
        self.click_play_button()
        self.reporter.log(f"Started new game for player: {player_name}")
