"""Filename extension matching."""

import os
import string


_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _ascii_casefold(value: str) -> str:
    return value.translate(_ASCII_LOWER)


def split_extension(filename: str) -> tuple[str, str | None]:
    """Split a filename into its stem and extension.

    The extension is whatever follows the final ``.``. A name without a dot,
    a dotfile whose only dot is the first character (``.bashrc``) and a name
    ending in a dot (``notes.``) have no extension.

    Args:
        filename: Bare filename, without directory components.

    Returns:
        Tuple of (stem, extension). Extension is None when absent, in which
        case the stem is the whole filename.
    """
    stem, dot, extension = filename.rpartition(".")
    if not dot or not stem or not extension:
        return filename, None
    return stem, extension


def get_extension(filename: str) -> str | None:
    """Return the extension of a bare filename, or None if it has none."""
    return split_extension(filename)[1]


def matches(path: str | os.PathLike[str], source_extension: str) -> bool:
    """Check whether a file's extension equals the source extension.

    Only the final path component is inspected. Comparison ignores ASCII case.
    """
    extension = get_extension(os.path.basename(os.fspath(path)))
    if extension is None:
        return False
    return _ascii_casefold(extension) == _ascii_casefold(source_extension)
