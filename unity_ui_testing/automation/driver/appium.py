"""Appium driver scaffolding for mobile runs."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from appium import webdriver
from appium.options.common.base import AppiumOptions

from ...app.configuration import PlatformType, TestConfiguration

logger = logging.getLogger(__name__)


def appium_capabilities(config: TestConfiguration) -> Optional[Dict[str, Any]]:
    """Return the capabilities for ``config.platform`` or None when Appium does not apply."""
    if config.platform is PlatformType.ANDROID:
        return {
            "platformName": "Android",
            "appium:automationName": "UiAutomator2",
            "appium:newCommandTimeout": 2000,
            "appium:autoGrantPermissions": True,
            "appium:deviceName": config.device_name,
            "appium:appPackage": config.app_bundle_id,
        }
    if config.platform is PlatformType.IOS:
        return {
            "platformName": "iOS",
            "appium:automationName": "XCUITest",
            "appium:deviceName": config.device_name,
            "appium:bundleId": config.app_bundle_id,
        }
    return None


def start_appium_driver(config: TestConfiguration) -> Optional[webdriver.Remote]:
    capabilities = appium_capabilities(config)
    if capabilities is None:
        logger.warning("Appium not supported for platform %s", config.platform.value)
        return None
    logger.info("Starting Appium session at %s for %s", config.appium_server_url, config.platform.value)
    options = AppiumOptions()
    options.load_capabilities(capabilities)
    return webdriver.Remote(command_executor=config.appium_server_url, options=options)


def stop_appium_driver(driver: webdriver.Remote) -> None:
    driver.quit()
