"""Run configuration model."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


EXTENSION_SEPARATOR = "."


def normalize_extension(extension: str) -> str:
    """Strip a single leading separator from an extension string."""
    if extension.startswith(EXTENSION_SEPARATOR):
        return extension[len(EXTENSION_SEPARATOR) :]
    return extension


class RenameConfig(BaseModel):
    """Immutable settings for a single rename run."""

    model_config = ConfigDict(frozen=True)

    directory_path: Path = Field(description="Directory to scan for candidate files")
    source_extension: str = Field(description="Extension to rename from, without leading separator")
    target_extension: str = Field(description="Extension to rename to, without leading separator")
    recursive: bool = Field(default=False, description="Scan subdirectories as well")
    skip_confirmation: bool = Field(default=False, description="Rename without asking first")

    @field_validator("directory_path", mode="before")
    @classmethod
    def _reject_empty_path(cls, value: str | Path) -> str | Path:
        # Path("") is the current directory; an empty argument must not mean that.
        if isinstance(value, str) and not value.strip():
            raise ValueError("directory path must not be empty")
        return value

    @field_validator("source_extension", "target_extension", mode="before")
    @classmethod
    def _strip_separator(cls, value: str) -> str:
        if isinstance(value, str):
            return normalize_extension(value)
        return value

    def __str__(self) -> str:
        mode = "recursive" if self.recursive else "flat"
        return (
            f"RenameConfig('{self.directory_path}', '.{self.source_extension}' -> '.{self.target_extension}', {mode})"
        )
