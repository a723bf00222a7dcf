"""Selenium browser session used to host WebGL builds."""

from __future__ import annotations

import logging
from typing import Optional

from selenium import webdriver
from selenium.webdriver.chrome.options import Options as ChromeOptions

from ...app.configuration import PlatformType, TestConfiguration

logger = logging.getLogger(__name__)

CHROME_ARGUMENTS = ("--no-sandbox", "--disable-dev-shm-usage")


def chrome_options() -> ChromeOptions:
    options = ChromeOptions()
    for argument in CHROME_ARGUMENTS:
        options.add_argument(argument)
    return options


def start_browser_driver(config: TestConfiguration) -> Optional[webdriver.Chrome]:
    """Open Chrome on the WebGL build, or return None for native platforms."""
    if config.platform is not PlatformType.WEBGL:
        logger.info("Selenium not needed for platform %s", config.platform.value)
        return None
    logger.info("Starting Chrome for WebGL build at %s", config.webgl_url)
    driver = webdriver.Chrome(options=chrome_options())
    driver.get(config.webgl_url)
    return driver


def stop_browser_driver(driver: webdriver.Chrome) -> None:
    driver.quit()
