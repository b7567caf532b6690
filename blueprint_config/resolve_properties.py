"""Cascading resolution of properties files along a nested directory path."""

import logging
import stat
from collections.abc import Sequence
from os import PathLike
from pathlib import Path

from blueprint_config.build_candidate_directories import (
    build_candidate_directories,
    is_single_level,
)
from blueprint_config.errors import InvalidInputError, PropertiesIOError
from blueprint_config.load_properties import load_properties

logger = logging.getLogger(__name__)


def resolve_properties(
    root: str | PathLike[str], segments: Sequence[str], file_name: str
) -> dict[str, str]:
    """Merge every ``file_name`` found from ``root`` down along ``segments``.

    Candidate directories are visited root-first, so a key defined at several
    levels takes the value of the deepest one. Values are stripped of
    surrounding whitespace. Directories without the file are skipped; finding
    no file at all yields an empty mapping.

    Raises:
        InvalidInputError: ``root``, ``segments`` or ``file_name`` is unusable.
        MalformedSourceError: a file exists but cannot be parsed.
        PropertiesIOError: a candidate path exists but cannot be read.
    """
    path_segments = _validate(root, segments, file_name)

    resolved: dict[str, str] = {}
    for directory in build_candidate_directories(root, path_segments):
        candidate = directory / file_name
        if not _is_present(candidate):
            logger.debug("Skipping %s: not present", candidate)
            continue

        loaded = load_properties(candidate)
        logger.debug("Loaded %d properties from %s", len(loaded), candidate)
        for key, value in loaded.items():
            resolved[key] = value.strip()

    return resolved


def _validate(
    root: str | PathLike[str], segments: Sequence[str], file_name: str
) -> tuple[str, ...]:
    """Reject unusable arguments before touching the filesystem."""
    if root is None:
        raise InvalidInputError("root directory must not be None")
    if not isinstance(file_name, str) or not file_name.strip():
        msg = f"file name must be a non-empty string, got {file_name!r}"
        raise InvalidInputError(msg)
    if segments is None or isinstance(segments, (str, bytes)):
        msg = f"segments must be a sequence of strings, got {segments!r}"
        raise InvalidInputError(msg)

    try:
        frozen = tuple(segments)
    except TypeError as exc:
        msg = f"segments must be a sequence of strings, got {segments!r}"
        raise InvalidInputError(msg) from exc

    for index, segment in enumerate(frozen):
        if not isinstance(segment, str) or not segment.strip():
            msg = f"segment {index} must be a non-empty string, got {segment!r}"
            raise InvalidInputError(msg)
        if not is_single_level(segment):
            msg = f"segment {index} must name a single directory, got {segment!r}"
            raise InvalidInputError(msg)
    return frozen


def _is_present(path: Path) -> bool:
    """Return True if a regular file exists at ``path``.

    Only a missing path counts as absent. A path blocked by a file where a
    directory is expected, an unreadable directory or a non-regular file at
    ``path`` raises ``PropertiesIOError``.
    """
    try:
        mode = path.stat().st_mode
    except FileNotFoundError:
        return False
    except OSError as exc:
        raise PropertiesIOError(path, exc.strerror or str(exc)) from exc

    if not stat.S_ISREG(mode):
        raise PropertiesIOError(path, "not a regular file")
    return True
