"""Capture of Unity log notifications into per-test text files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Tuple

from ..app.environment import ensure_dir, game_log_file_name

logger = logging.getLogger(__name__)


class GameLogRegistry:
    """Maps generated log file names to their paths for one suite run.

    Not synchronised: AltTester may deliver log notifications from its own
    thread while a test is running.
    """

    def __init__(self, directory: Path) -> None:
        self.directory = directory
        self._files: Dict[str, Path] = {}

    def __len__(self) -> int:
        return len(self._files)

    def __contains__(self, file_name: object) -> bool:
        return file_name in self._files

    def get(self, file_name: str) -> Optional[Path]:
        return self._files.get(file_name)

    def register(self, file_name: str, path: Path) -> None:
        self._files.setdefault(file_name, path)

    def append(self, test_name: str, record: Any) -> Optional[Path]:
        """Write ``record`` to the log file of ``test_name`` and register that file.

        Runs on the AltTester notification thread, so write failures are logged
        and ``None`` is returned instead of raising into the websocket client.
        """
        file_name = game_log_file_name(test_name)
        try:
            path = ensure_dir(self.directory) / file_name
            with path.open("a", encoding="utf-8", errors="replace") as handle:
                handle.write(f"{getattr(record, 'message', '')}\n")
                handle.write(f"StackTrace : {getattr(record, 'stack_trace', '')}\n")
                handle.write(f"Level : {getattr(record, 'type', '')}\n")
        except (OSError, UnicodeError) as exc:
            logger.warning("Could not write Unity log for %s: %s", test_name, exc)
            return None
        if file_name not in self._files:
            logger.debug("Capturing Unity logs for %s in %s", test_name, path)
        self.register(file_name, path)
        return path

    def drain(self) -> Iterator[Tuple[str, Path]]:
        """Yield and remove each entry; removal happens even if the consumer fails."""
        for file_name in list(self._files):
            path = self._files[file_name]
            try:
                yield file_name, path
            finally:
                self._files.pop(file_name, None)
