"""AltTester driver start/stop helpers."""

from __future__ import annotations

import logging
from typing import Any, Callable

from alttester import AltDriver

from ...app.configuration import TestConfiguration

logger = logging.getLogger(__name__)

LogCallback = Callable[[Any], None]


def start_alttester_driver(config: TestConfiguration) -> AltDriver:
    """Connect to the AltTester server for the game under test."""
    logger.info("Connecting to AltTester at %s:%s (app=%s)", config.server_host, config.server_port, config.app_name)
    driver = AltDriver(
        host=config.server_host,
        port=config.server_port,
        app_name=config.app_name,
        enable_logging=False,
        timeout=config.connect_timeout,
    )
    logger.info("Connected to the game.")
    return driver


def subscribe_to_game_logs(driver: AltDriver, callback: LogCallback) -> None:
    """Forward every Unity log record received by ``driver`` to ``callback``.

    AltTester delivers notifications from its websocket thread, so the callback
    may run while a test is executing.
    """
    from alttester.commands.Notifications.notification_type import NotificationType

    driver.add_notification_listener(NotificationType.LOG, callback, overwrite=False)


def stop_alttester_driver(driver: AltDriver) -> None:
    driver.stop()
