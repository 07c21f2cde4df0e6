"""Errors raised before any file is touched."""

from pathlib import Path


class ExtswapError(Exception):
    """Base class for extswap errors."""


class ConfigurationError(ExtswapError):
    """The run cannot start with the given configuration."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class DirectoryReadError(ConfigurationError):
    """The top-level directory could not be listed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to read directory '{path}': {reason}", path=path)
        self.reason = reason
