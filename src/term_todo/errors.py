"""Exceptions raised by the todo store."""

from __future__ import annotations

from pathlib import Path


class TodoError(Exception):
    """Base class for fatal todo errors."""


class StoreError(TodoError):
    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


class StoreLoadError(StoreError):
    """The todo file exists but could not be read or parsed."""


class StoreWriteError(StoreError):
    """The todo file could not be written."""
