"""Page object for the in-game HUD and player character."""

from __future__ import annotations

from typing import Tuple

import allure

from ..locator import Locator
from .base import BaseView


class GamePlayView(BaseView):
    PAUSE_BUTTON = Locator.by_name("PauseButton")
    RESUME_BUTTON = Locator.by_name("ResumeButton")
    MAIN_CHARACTER = Locator.by_name("MainCharacter")
    GAME_HUD = Locator.by_name("GameHUD")

    @allure.step("Pause the game")
    def pause_game(self) -> None:
        self.find(self.PAUSE_BUTTON).click()
        self.reporter.log("Game paused")

    @allure.step("Resume the game")
    def resume_game(self) -> None:
        self.find(self.RESUME_BUTTON).click()
        self.reporter.log("Game resumed")

    @allure.step("Check if game is paused")
    def is_game_paused(self) -> bool:
        return self._is_enabled(self.RESUME_BUTTON, "Game paused", "Resume button not found - game is not paused")

    @allure.step("Check if main character is present")
    def is_main_character_present(self) -> bool:
        return self._is_enabled(self.MAIN_CHARACTER, "Main character present", "Main character not found")

    @allure.step("Check if gameplay HUD is visible")
    def is_gameplay_hud_visible(self) -> bool:
        return self._is_enabled(self.GAME_HUD, "Gameplay HUD visible", "Gameplay HUD not found")

    @allure.step("Get main character position")
    def get_main_character_position(self) -> Tuple[float, float, float]:
        x, y, z = self.find(self.MAIN_CHARACTER).get_world_position()
        self.reporter.log(f"Main character position: {x}, {y}, {z}")
        return x, y, z

    @allure.step("Wait for gameplay to be ready")
    def wait_for_gameplay_ready(self, timeout: float = 10) -> None:
        self.wait_for(self.GAME_HUD, timeout)
        self.reporter.log("Gameplay is ready")

    def _is_enabled(self, locator: Locator, label: str, missing_message: str) -> bool:
        result = self.lookup(locator)
        if not result.found:
            self.reporter.log(missing_message)
            return False
        enabled = bool(result.element.enabled)
        self.reporter.log(f"{label}: {enabled}")
        return enabled
