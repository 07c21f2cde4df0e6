"""Rename outcome data models."""

from pathlib import Path

from pydantic import BaseModel, Field


class RenameOutcome(BaseModel):
    """Result of renaming a single file."""

    source: Path = Field(description="Path of the file before renaming")
    target: Path = Field(description="Path the file was (or would have been) renamed to")
    error: str | None = Field(default=None, description="Reason the rename failed, if it did")

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def __str__(self) -> str:
        status = "renamed" if self.succeeded else f"failed: {self.error}"
        return f"RenameOutcome('{self.source}' -> '{self.target}', {status})"


class RenameReport(BaseModel):
    """Aggregated outcomes of a rename batch, in processing order."""

    outcomes: list[RenameOutcome] = Field(default_factory=list)

    @property
    def success_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.succeeded)

    @property
    def failures(self) -> list[RenameOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.succeeded]

    def summary(self) -> str:
        """Human readable tally with singular/plural phrasing."""
        count = self.success_count
        if count == 0:
            return "No files were renamed."
        if count == 1:
            return "Done. Successfully renamed 1 file."
        return f"Done. Successfully renamed {count} files."

    def __len__(self) -> int:
        return len(self.outcomes)
