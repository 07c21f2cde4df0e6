"""Rename executor that swaps file extensions on disk."""

from collections.abc import Callable, Iterable
from pathlib import Path

from extswap.models.rename import RenameOutcome, RenameReport
from extswap.processors.matcher import split_extension


def build_target_path(path: Path, target_extension: str) -> Path:
    """Compute the renamed path for a candidate file.

    The parent directory and stem are kept; the extension is replaced by
    target_extension. An empty target_extension drops the extension.

    Args:
        path: Candidate file path.
        target_extension: New extension, without leading separator.

    Returns:
        Path of the renamed file.
    """
    stem, _ = split_extension(path.name)
    new_name = f"{stem}.{target_extension}" if target_extension else stem
    return path.with_name(new_name)


class RenameExecutor:
    """Executor that renames candidate files one at a time."""

    def rename(self, source: Path, target_extension: str) -> RenameOutcome:
        """Rename a single file, capturing any OS error in the outcome.

        A rename whose target equals the source is treated as already done.
        """
        target = build_target_path(source, target_extension)
        if target == source:
            return RenameOutcome(source=source, target=target)

        try:
            source.rename(target)
        except OSError as e:
            return RenameOutcome(source=source, target=target, error=e.strerror or str(e))

        return RenameOutcome(source=source, target=target)

    def execute(
        self,
        candidates: Iterable[Path],
        target_extension: str,
        on_outcome: Callable[[RenameOutcome], None] | None = None,
    ) -> RenameReport:
        """Rename every candidate in order.

        A failed rename is recorded and the batch continues.

        Args:
            candidates: Files to rename, in the order to process them.
            target_extension: New extension, without leading separator.
            on_outcome: Optional callback invoked after each file.

        Returns:
            RenameReport with one outcome per candidate.
        """
        report = RenameReport()
        for source in candidates:
            outcome = self.rename(source, target_extension)
            report.outcomes.append(outcome)
            if on_outcome is not None:
                on_outcome(outcome)
        return report
