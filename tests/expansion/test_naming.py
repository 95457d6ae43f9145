"""Tests for expanded-source naming."""

from pathlib import Path
from unittest.mock import patch

import pytest

from cobolassist.expansion.naming import (
    build_cache_file_name,
    file_name_from_uri,
    source_path_from_uri,
)


class TestSourcePathFromUri:
    @pytest.mark.parametrize(
        ("uri", "expected"),
        [
            ("file:///home/dev/src/PROG.CBL", "/home/dev/src/PROG.CBL"),
            ("file:///F%3A/src/PROG.CBL", "F:/src/PROG.CBL"),
            ("file:///c:/src/MY%20PROG.CBL", "c:/src/MY PROG.CBL"),
            ("/plain/path/PROG.CBL", "/plain/path/PROG.CBL"),
        ],
    )
    def test_paths(self, uri: str, expected: str) -> None:
        assert source_path_from_uri(uri) == expected


class TestFileNameFromUri:
    def test_uri(self) -> None:
        assert file_name_from_uri("file:///home/dev/src/PROG.CBL") == "PROG.CBL"

    def test_windows_path(self) -> None:
        assert file_name_from_uri("C:\\src\\PROG.CBL") == "PROG.CBL"


class TestBuildCacheFileName:
    def test_user_lowercased(self, tmp_path: Path) -> None:
        result = build_cache_file_name("file:///src/PROG.CBL", tmp_path, user="JDoe")

        assert result == str(tmp_path / "jdoe" / "PROG.CBL")

    def test_default_user_from_environment(self, tmp_path: Path) -> None:
        with patch("cobolassist.expansion.naming.getpass.getuser", return_value="Builder"):
            result = build_cache_file_name("/src/PROG.CBL", str(tmp_path))

        assert result == str(tmp_path / "builder" / "PROG.CBL")

    def test_same_file_same_identity(self, tmp_path: Path) -> None:
        first = build_cache_file_name("file:///a/PROG.CBL", tmp_path, user="u")
        second = build_cache_file_name("file:///a/PROG.CBL", tmp_path, user="u")

        assert first == second
