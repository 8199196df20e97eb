"""Exceptions raised by the docblock package."""

from __future__ import annotations


class DocblockError(Exception):
    """Base exception for docblock operations."""

    def __init__(self, message: str, setting: str | None = None):
        super().__init__(message)
        self.setting = setting


class ConfigError(DocblockError):
    """Raised when parser configuration is invalid (e.g., tag without '@')."""

    pass
