"""Test configuration resolved from environment variables."""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional


class PlatformType(str, Enum):
    """Supported platforms for test execution."""

    ANDROID = "Android"
    IOS = "iOS"
    WEBGL = "WebGL"

    @classmethod
    def parse(cls, value: Optional[str], default: "PlatformType") -> "PlatformType":
        if not value:
            return default
        lowered = value.strip().lower()
        for member in cls:
            if member.value.lower() == lowered or member.name.lower() == lowered:
                return member
        return default


@dataclass(frozen=True, slots=True)
class TestConfiguration:
    """Snapshot of the settings that drive one test run."""

    __test__ = False

    server_host: str = "127.0.0.1"
    server_port: int = 13000
    app_name: str = "__default__"
    connect_timeout: int = 60
    platform: PlatformType = PlatformType.ANDROID
    device_name: str = "android"
    app_bundle_id: str = "com.example.app"
    run_with_appium: bool = False
    run_with_selenium: bool = False
    webgl_url: str = "https://example.com/game"
    appium_server_url: str = "http://127.0.0.1:4723"
    screenshots_dir: str = "screenshots"

    def as_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["platform"] = self.platform.value
        return data


def load_test_configuration(env: Mapping[str, str] | None = None) -> TestConfiguration:
    """Resolve a TestConfiguration from ``env`` (defaults to ``os.environ``).

    Missing, empty or unparsable values fall back to the dataclass defaults.
    """

    source = os.environ if env is None else env
    defaults = TestConfiguration()
    return TestConfiguration(
        server_host=_get_str(source, "ALT_TESTER_SERVER_URL", defaults.server_host),
        server_port=_get_int(source, "ALT_TESTER_SERVER_PORT", defaults.server_port),
        app_name=_get_str(source, "ALT_TESTER_APP_NAME", defaults.app_name),
        connect_timeout=_get_int(source, "ALT_TESTER_CONNECT_TIMEOUT", defaults.connect_timeout),
        platform=PlatformType.parse(source.get("TEST_PLATFORM"), defaults.platform),
        device_name=_get_str(source, "DEVICE_NAME", defaults.device_name),
        app_bundle_id=_get_str(source, "APP_BUNDLE_ID", defaults.app_bundle_id),
        run_with_appium=_get_flag(source, "RUN_TESTS_WITH_APPIUM"),
        run_with_selenium=_get_flag(source, "RUN_TESTS_WITH_SELENIUM"),
        webgl_url=_get_str(source, "WEBGL_URL", defaults.webgl_url),
        appium_server_url=_get_str(source, "APPIUM_SERVER_URL", defaults.appium_server_url),
        screenshots_dir=_get_str(source, "SCREENSHOTS_DIR", defaults.screenshots_dir),
    )


def _get_str(source: Mapping[str, str], key: str, default: str) -> str:
    raw = source.get(key)
    if raw is None or raw == "":
        return default
    return raw


def _get_int(source: Mapping[str, str], key: str, default: int) -> int:
    raw = _get_str(source, key, "")
    if not raw:
        return default
    try:
        return int(raw.strip())
    except (TypeError, ValueError):
        return default


def _get_flag(source: Mapping[str, str], key: str) -> bool:
    # Only the literal "true" switches a driver on.
    return _get_str(source, key, "false") == "true"
