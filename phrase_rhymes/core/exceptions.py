"""Errors raised while loading the pronunciation dictionary."""

from __future__ import annotations

from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


class DictionaryError(Exception):
    """Base class for dictionary load failures."""


class FileAccessError(DictionaryError):
    """A dictionary file is missing or cannot be read."""

    def __init__(self, path: PathLike, reason: str = "") -> None:
        self.path = Path(path)
        self.reason = reason
        message = f"Cannot read dictionary file {self.path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class FormatError(DictionaryError):
    """A dictionary line does not match the expected field layout."""

    def __init__(self, path: PathLike, line_number: int, reason: str) -> None:
        self.path = Path(path)
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"{self.path}:{line_number}: {reason}")


__all__ = ["DictionaryError", "FileAccessError", "FormatError"]
