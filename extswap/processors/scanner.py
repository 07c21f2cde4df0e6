"""Directory scanning strategies for collecting candidate files."""

import os
from abc import ABC, abstractmethod
from pathlib import Path

from extswap.exceptions import DirectoryReadError
from extswap.processors.matcher import matches


def _is_regular_file(entry: os.DirEntry) -> bool:
    try:
        return entry.is_file()
    except OSError:
        return False


def _is_directory(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False


def _list_root(root: Path) -> list[os.DirEntry]:
    """List the top-level directory, raising if it cannot be read."""
    try:
        with os.scandir(root) as entries:
            return list(entries)
    except OSError as e:
        raise DirectoryReadError(root, e.strerror or str(e)) from e


class ScanStrategy(ABC):
    """Base class for directory traversal strategies.

    Strategies walk a directory and collect the regular files whose
    extension matches the source extension, in listing order.
    """

    @abstractmethod
    def scan(self, root: Path, source_extension: str) -> list[Path]:
        """Collect matching files under root.

        Args:
            root: Directory to scan.
            source_extension: Extension to match, without leading separator.

        Returns:
            Matching file paths in the order they were encountered.

        Raises:
            DirectoryReadError: If root itself cannot be listed.
        """
        pass


class FlatScanStrategy(ScanStrategy):
    """Strategy that only looks at the direct children of the root."""

    def scan(self, root: Path, source_extension: str) -> list[Path]:
        return [
            Path(entry.path)
            for entry in _list_root(root)
            if _is_regular_file(entry) and matches(entry.name, source_extension)
        ]


class RecursiveScanStrategy(ScanStrategy):
    """Strategy that walks the whole subtree depth-first.

    A subdirectory is descended into as soon as it is encountered, before
    its later siblings are visited. Subdirectories that cannot be listed are
    skipped without error, so their contents simply do not appear in the
    result. Symbolic links to directories are not followed.
    """

    def scan(self, root: Path, source_extension: str) -> list[Path]:
        found: list[Path] = []
        self._visit(_list_root(root), source_extension, found)
        return found

    def _visit(self, entries, source_extension: str, found: list[Path]) -> None:
        for entry in entries:
            if _is_regular_file(entry):
                if matches(entry.name, source_extension):
                    found.append(Path(entry.path))
            elif _is_directory(entry):
                self._visit_subdirectory(entry.path, source_extension, found)

    def _visit_subdirectory(self, directory: str, source_extension: str, found: list[Path]) -> None:
        try:
            with os.scandir(directory) as entries:
                self._visit(entries, source_extension, found)
        except OSError:
            # Unreadable subtrees are skipped; the scan is best-effort below the root.
            return


def get_scan_strategy(recursive: bool) -> ScanStrategy:
    """Select the traversal strategy for the given recursion flag."""
    if recursive:
        return RecursiveScanStrategy()
    return FlatScanStrategy()


def scan(root: Path, source_extension: str, recursive: bool = False) -> list[Path]:
    """Collect files under root whose extension matches source_extension."""
    return get_scan_strategy(recursive).scan(Path(root), source_extension)
