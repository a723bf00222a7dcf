# unity_ui_testing/app/environment.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class Paths:
    """Resolved filesystem locations used during a test run."""

    root: Path
    screenshots_dir: Path

    def screenshot_path(self, name: str) -> Path:
        return self.screenshots_dir / f"{name}.png"

    def game_log_path(self, test_name: str) -> Path:
        return self.screenshots_dir / game_log_file_name(test_name)


def game_log_file_name(test_name: str) -> str:
    return f"{test_name}-UnityLogs.txt"


def build_default_paths(screenshots_dir: str = "screenshots", root: Optional[Path] = None) -> Paths:
    """Resolve run paths relative to ``root`` (the working directory by default).

    Directories are not created here; writers create them on first use.
    """
    base = Path.cwd() if root is None else root
    target = Path(screenshots_dir)
    if not target.is_absolute():
        target = base / target
    return Paths(root=base, screenshots_dir=target)


def ensure_dir(directory: Path) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    return directory
