"""Run coordinator tying scanning, confirmation and renaming together."""

from collections.abc import Callable
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from extswap.exceptions import ConfigurationError
from extswap.models.config import RenameConfig
from extswap.models.rename import RenameOutcome, RenameReport
from extswap.processors.rename_executor import RenameExecutor
from extswap.processors.scanner import ScanStrategy, get_scan_strategy


class RunStatus(str, Enum):
    """Terminal state of a run."""

    NO_MATCHES = "no_matches"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class RunResult(BaseModel):
    """What a run found and did."""

    status: RunStatus
    candidates: list[Path] = Field(default_factory=list)
    report: RenameReport | None = None


class RunCoordinator:
    """Coordinator for a single validate, scan, confirm and rename pass."""

    def __init__(
        self,
        config: RenameConfig,
        scanner: ScanStrategy | None = None,
        executor: RenameExecutor | None = None,
    ) -> None:
        """Initialize the coordinator.

        Args:
            config: Settings for this run.
            scanner: Traversal strategy. Defaults to the one selected by
                config.recursive.
            executor: Rename executor. Defaults to a fresh RenameExecutor.
        """
        self.config = config
        self.scanner = scanner or get_scan_strategy(config.recursive)
        self.executor = executor or RenameExecutor()

    def validate(self) -> None:
        """Check that the configured directory exists and is a directory.

        Raises:
            ConfigurationError: If the path is not a directory.
        """
        path = self.config.directory_path
        if not path.is_dir():
            raise ConfigurationError(f"The provided path is not a valid directory: {path}", path=path)

    def scan(self) -> list[Path]:
        """Collect the candidate files for this run."""
        return self.scanner.scan(self.config.directory_path, self.config.source_extension)

    def run(
        self,
        on_scan: Callable[[Path], None] | None = None,
        preview: Callable[[list[Path]], None] | None = None,
        confirm: Callable[[list[Path]], bool] | None = None,
        on_outcome: Callable[[RenameOutcome], None] | None = None,
    ) -> RunResult:
        """Execute the run from validation through to the rename report.

        Args:
            on_scan: Called with the directory once it has been validated,
                just before scanning starts.
            preview: Called with the candidate list whenever it is non-empty.
            confirm: Asked to approve the candidate list unless the config
                skips confirmation. A missing callback declines.
            on_outcome: Passed through to the executor for per-file progress.

        Returns:
            RunResult describing where the run stopped.

        Raises:
            ConfigurationError: If the directory is invalid or unreadable.
        """
        self.validate()

        if on_scan is not None:
            on_scan(self.config.directory_path)

        candidates = self.scan()
        if not candidates:
            return RunResult(status=RunStatus.NO_MATCHES)

        if preview is not None:
            preview(candidates)

        if not self.config.skip_confirmation:
            if confirm is None or not confirm(candidates):
                return RunResult(status=RunStatus.CANCELLED, candidates=candidates)

        report = self.executor.execute(candidates, self.config.target_extension, on_outcome=on_outcome)
        return RunResult(status=RunStatus.COMPLETED, candidates=candidates, report=report)
