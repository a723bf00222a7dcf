"""Allure reporting helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import allure

_CONTENT_TYPES = {
    ".txt": "text/plain",
    ".log": "text/plain",
    ".json": "application/json",
    ".xml": "application/xml",
    ".html": "text/html",
    ".csv": "text/csv",
}
DEFAULT_CONTENT_TYPE = "application/octet-stream"


def content_type_for(path: Path) -> str:
    return _CONTENT_TYPES.get(path.suffix.lower(), DEFAULT_CONTENT_TYPE)


def record_step(title: str) -> None:
    """Add an empty step to the running Allure test."""
    with allure.step(title):
        pass


def attach_bytes(name: str, body: bytes, attachment_type: Optional[str] = None) -> None:
    allure.attach(body, name=name, attachment_type=attachment_type or DEFAULT_CONTENT_TYPE)


def attach_image(name: str, path: Path, attachment_type: Optional[str] = None) -> None:
    attach_bytes(name, path.read_bytes(), attachment_type or "image/png")


def attach_file(name: str, path: Path, attachment_type: Optional[str] = None) -> None:
    attach_bytes(name, path.read_bytes(), attachment_type or content_type_for(path))
