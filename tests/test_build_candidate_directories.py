"""Tests for candidate directory computation."""

from pathlib import Path

import pytest

from blueprint_config.build_candidate_directories import (
    SEPARATORS,
    build_candidate_directories,
    is_single_level,
)


def test_candidates_are_nested() -> None:
    """Verify each candidate nests one segment deeper than the last."""
    root = Path("envs")
    candidates = build_candidate_directories(root, ["tenant", "site", "app", "scope"])
    assert candidates == [
        root / "tenant",
        root / "tenant" / "site",
        root / "tenant" / "site" / "app",
        root / "tenant" / "site" / "app" / "scope",
    ]


def test_empty_segments_yield_no_candidates() -> None:
    """Verify that no segments produce no candidates."""
    assert build_candidate_directories(Path("envs"), []) == []


def test_root_may_be_missing_and_a_string(tmp_path: Path) -> None:
    """Verify that the root is not required to exist."""
    missing = tmp_path / "does-not-exist"
    candidates = build_candidate_directories(str(missing), ["a"])
    assert candidates == [missing / "a"]
    assert not missing.exists()


def test_candidates_are_deterministic() -> None:
    """Verify identical inputs give identical outputs."""
    segments = ("x", "y")
    first = build_candidate_directories("root", segments)
    second = build_candidate_directories("root", segments)
    assert first == second


@pytest.mark.parametrize("segment", ["tenant", "my.app", "site-1"])
def test_single_level_segments(segment: str) -> None:
    """Verify plain directory names are accepted."""
    assert is_single_level(segment)


@pytest.mark.parametrize("segment", [".", "..", "a/b", "/etc", "a\\b"])
def test_multi_level_segments(segment: str) -> None:
    """Verify segments that add more or fewer than one level are refused."""
    if segment == "a\\b" and "\\" not in SEPARATORS:
        pytest.skip("backslash is an ordinary character on this platform")
    assert not is_single_level(segment)
