"""Logic for computing the nested directories searched during resolution."""

import os
from collections.abc import Sequence
from os import PathLike
from pathlib import Path, PurePath

SEPARATORS = {sep for sep in ("/", os.sep, os.altsep) if sep}


def build_candidate_directories(
    root: str | PathLike[str], segments: Sequence[str]
) -> list[Path]:
    """Return one directory per segment, each nested one level deeper.

    For segments ``[a, b, c]`` this yields ``root/a``, ``root/a/b`` and
    ``root/a/b/c``, in that order. No filesystem access takes place.
    """
    current = Path(root)
    candidates = []
    for segment in segments:
        current = current / segment
        candidates.append(current)
    return candidates


def is_single_level(segment: str) -> bool:
    """Return True if ``segment`` names exactly one directory below its parent."""
    if segment in (".", ".."):
        return False
    if any(sep in segment for sep in SEPARATORS):
        return False
    pure = PurePath(segment)
    return not pure.is_absolute() and not pure.drive
