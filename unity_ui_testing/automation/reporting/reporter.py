"""
Progress logging, screenshots and attachments for a suite run.

Every public method here is safe to call from test code: failures while
capturing or attaching are logged and never propagate, so they cannot mask
the outcome of the test that triggered them.
"""

from __future__ import annotations

import logging
import time
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

import allure

from ...app.environment import ensure_dir
from ..context import RunContext
from .allure_helpers import attach_file, attach_image, content_type_for, record_step

logger = logging.getLogger(__name__)
progress_logger = logging.getLogger("unity_ui_testing.progress")

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class Reporter:
    """Writes progress lines and Allure steps for the run described by ``context``."""

    def __init__(self, context: RunContext) -> None:
        self.context = context

    def log(self, message: str, with_screenshot: bool = False, suppress_step: bool = False) -> None:
        stamp = datetime.now().strftime(TIMESTAMP_FORMAT)
        progress_logger.info("[%s] %s", stamp, message)
        if not suppress_step:
            try:
                record_step(message)
            except Exception as exc:
                logger.warning("Could not record report step: %s", exc)
        if with_screenshot:
            self.take_screenshot()

    def take_screenshot(self, name: Optional[str] = None) -> Optional[Path]:
        driver = self.context.alt_driver
        if driver is None:
            self.log("Cannot take screenshot: AltDriver not set")
            return None
        file_name = name or f"screenshot_{int(time.time())}"
        try:
            directory = ensure_dir(self.context.paths.screenshots_dir)
            path = directory / f"{file_name}.png"
            driver.get_png_screenshot(str(path))
            with allure.step(f"Screenshot taken: {file_name}"):
                attach_image(file_name, path)
        except Exception as exc:
            self.log(f"Failed to take screenshot: {exc}")
            return None
        return path

    def attach_file(self, path: Union[str, Path], name: Optional[str] = None) -> bool:
        file_path = Path(path)
        attachment_name = name or file_path.stem
        try:
            with allure.step(f"Attach file: {attachment_name}"):
                if not file_path.is_file():
                    self.log(f"Cannot attach file: File not found at {file_path}")
                    return False
                attach_file(attachment_name, file_path, content_type_for(file_path))
        except Exception as exc:
            self.log(f"Failed to attach file to Allure: {exc}")
            return False
        self.log(f"File attached to Allure report: {attachment_name}")
        return True
