# topmark:header:start
#
#   project      : StyleMark
#   file         : test_file_resolver.py
#   file_relpath : tests/resolver/test_file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for `resolve_file_list`.

These tests verify directory expansion, include/exclude filtering with
gitwildmatch patterns, explicit files, missing paths and de-duplication.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from stylemark.file_resolver import resolve_file_list
from tests.conftest import make_config, write_source

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def project(tmp_path: Path) -> Path:
    for name in (
        "src/Main.elm",
        "src/Page/Home.elm",
        "src/notes.txt",
        "src/elm-stuff/Cached.elm",
        "tests/MainTest.elm",
    ):
        write_source(tmp_path, name, "main =\n    1\n")
    return tmp_path


def test_directory_walk_uses_default_patterns(project: Path) -> None:
    files: list[Path] = resolve_file_list([project / "src"], make_config())

    assert files == [project / "src/Main.elm", project / "src/Page/Home.elm"]


def test_custom_include_and_exclude(project: Path) -> None:
    config = make_config(include_patterns=["*.elm", "*.txt"], exclude_patterns=["Page/"])

    files: list[Path] = resolve_file_list([project / "src"], config)

    assert files == [
        project / "src/Main.elm",
        project / "src/elm-stuff/Cached.elm",
        project / "src/notes.txt",
    ]


def test_patterns_are_relative_to_the_directory_argument(project: Path) -> None:
    config = make_config(exclude_patterns=["/Main.elm"])

    files: list[Path] = resolve_file_list([project / "src"], config)

    # The default ``elm-stuff/`` exclusion was replaced, not extended.
    assert files == [project / "src/Page/Home.elm", project / "src/elm-stuff/Cached.elm"]


def test_explicit_file_bypasses_patterns(project: Path) -> None:
    files: list[Path] = resolve_file_list([project / "src/notes.txt"], make_config())

    assert files == [project / "src/notes.txt"]


def test_missing_path_is_kept(tmp_path: Path) -> None:
    files: list[Path] = resolve_file_list([tmp_path / "Nope.elm"], make_config())

    assert files == [tmp_path / "Nope.elm"]


def test_argument_order_and_deduplication(project: Path) -> None:
    files: list[Path] = resolve_file_list(
        [project / "tests", project / "src", project / "src/Main.elm", str(project / "tests")],
        make_config(),
    )

    assert files == [
        project / "tests/MainTest.elm",
        project / "src/Main.elm",
        project / "src/Page/Home.elm",
    ]
