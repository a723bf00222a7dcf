from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import pytest
from alttester.exceptions import NotFoundException, WaitTimeOutException

from unity_ui_testing.app.configuration import TestConfiguration
from unity_ui_testing.app.environment import build_default_paths
from unity_ui_testing.automation.context import RunContext
from unity_ui_testing.automation.reporting import Reporter


class FakeAltObject:
    def __init__(self, name: str, calls: List[Tuple[str, Any]], enabled: bool = True) -> None:
        self.name = name
        self.enabled = enabled
        self.text = ""
        self.world_position = (1.0, 2.0, 3.0)
        self._calls = calls

    def click(self, wait: bool = True) -> None:
        self._calls.append(("click", self.name))

    def tap(self, count: int = 1) -> None:
        self._calls.append(("tap", (self.name, count)))

    def set_text(self, text: str, submit: bool = False) -> None:
        self.text = text
        self._calls.append(("set_text", (self.name, text)))

    def get_text(self) -> str:
        return self.text

    def get_world_position(self) -> Tuple[float, float, float]:
        return self.world_position


class FakeAltDriver:
    """In-memory stand-in for AltDriver; objects exist once added by name."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, Any]] = []
        self.objects: Dict[str, FakeAltObject] = {}
        self.scene = "MainMenu"
        self.screenshots: List[str] = []
        self.screenshot_error: Optional[Exception] = None
        self.stopped = False

    def add(self, name: str, enabled: bool = True) -> FakeAltObject:
        obj = FakeAltObject(name, self.calls, enabled=enabled)
        self.objects[name] = obj
        return obj

    def find_object(self, by, value):  # type: ignore[no-untyped-def]
        self.calls.append(("find_object", value))
        if value not in self.objects:
            raise NotFoundException(f"Object {value} not found")
        return self.objects[value]

    def wait_for_object(self, by, value, timeout=20, interval=0.5):  # type: ignore[no-untyped-def]
        self.calls.append(("wait_for_object", value))
        if value not in self.objects:
            raise WaitTimeOutException(f"Element {value} not found after {timeout} seconds")
        return self.objects[value]

    def wait_for_object_which_contains(self, by, value, timeout=20):  # type: ignore[no-untyped-def]
        self.calls.append(("wait_for_object_which_contains", value))
        for name, obj in self.objects.items():
            if value in name:
                return obj
        raise WaitTimeOutException(f"No element containing {value}")

    def wait_for_object_to_not_be_present(self, by, value, timeout=20):  # type: ignore[no-untyped-def]
        self.calls.append(("wait_for_object_to_not_be_present", value))
        if value in self.objects:
            raise WaitTimeOutException(f"Element {value} still found after {timeout} seconds")

    def get_current_scene(self) -> str:
        return self.scene

    def load_scene(self, scene_name: str) -> None:
        self.scene = scene_name

    def get_png_screenshot(self, path: str) -> None:
        self.screenshots.append(path)
        if self.screenshot_error is not None:
            raise self.screenshot_error
        Path(path).write_bytes(b"\x89PNG\r\n\x1a\n")

    def stop(self) -> None:
        self.stopped = True


@pytest.fixture
def fake_alt() -> FakeAltDriver:
    return FakeAltDriver()


@pytest.fixture
def run_context(tmp_path: Path, fake_alt: FakeAltDriver) -> RunContext:
    config = TestConfiguration(screenshots_dir=str(tmp_path / "screenshots"))
    return RunContext(config=config, paths=build_default_paths(config.screenshots_dir), alt_driver=fake_alt)


@pytest.fixture
def attachments(monkeypatch: pytest.MonkeyPatch) -> List[Tuple[str, str, str]]:
    """Capture Allure attachments as (name, file name, content type)."""
    from unity_ui_testing.automation.reporting import reporter as reporter_module

    captured: List[Tuple[str, str, str]] = []

    def _attach_image(name: str, path: Path, attachment_type: Optional[str] = None) -> None:
        captured.append((name, path.name, attachment_type or "image/png"))

    def _attach_file(name: str, path: Path, attachment_type: Optional[str] = None) -> None:
        path.read_bytes()
        captured.append((name, path.name, attachment_type or "application/octet-stream"))

    monkeypatch.setattr(reporter_module, "attach_image", _attach_image)
    monkeypatch.setattr(reporter_module, "attach_file", _attach_file)
    return captured


@pytest.fixture
def reporter(run_context: RunContext, attachments) -> Reporter:  # type: ignore[no-untyped-def]
    return Reporter(run_context)
