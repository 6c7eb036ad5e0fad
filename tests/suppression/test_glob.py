"""Tests for Valgrind-style glob matching."""

import pytest

from vgsuppress.suppression.glob import glob_matches


class TestGlobLiterals:
    """Patterns without wildcards behave as exact equality."""

    @pytest.mark.parametrize("text", ["", "malloc", "operator new(unsigned long)", "/usr/lib/libc.so.6"])
    def test_literal_matches_itself(self, text):
        assert glob_matches(text, text)

    @pytest.mark.parametrize("text", ["", "malloc", "/usr/lib/libc.so.6"])
    def test_literal_rejects_longer_text(self, text):
        assert not glob_matches(text, text + "x")

    def test_case_sensitive(self):
        assert not glob_matches("Malloc", "malloc")

    def test_empty_pattern_matches_only_empty_text(self):
        assert glob_matches("", "")
        assert not glob_matches("", "a")

    def test_brackets_are_literal(self):
        """Unlike fnmatch, '[' starts no character class."""
        assert glob_matches("f[ab]", "f[ab]")
        assert not glob_matches("f[ab]", "fa")


class TestGlobStar:
    """'*' matches any run of characters."""

    @pytest.mark.parametrize("text", ["", "x", "malloc", "/lib/x86_64-linux-gnu/libc.so.6"])
    def test_star_matches_anything(self, text):
        assert glob_matches("*", text)

    @pytest.mark.parametrize("pattern,text,expected", [
        ("_IO_file_write*", "_IO_file_write@@GLIBC_2.2.5", True),
        ("_IO_file_write*", "_IO_file_write", True),
        ("_IO_file_write*", "_IO_file_xsputn", False),
        ("*alloc", "malloc", True),
        ("*alloc", "calloc", True),
        ("*alloc", "allocate", False),
        ("/lib*/ld-2.*.so", "/lib64/ld-2.31.so", True),
        ("/lib*/ld-2.*.so", "/lib/x86_64-linux-gnu/ld-2.31.so", True),
        ("/lib*/ld-2.*.so", "/usr/lib64/ld-2.31.so", False),
        ("a*b*c", "abc", True),
        ("a*b*c", "aXbYc", True),
        ("a*b*c", "aXbY", False),
        ("**", "", True),
        ("a**", "abc", True),
    ])
    def test_star_patterns(self, pattern, text, expected):
        assert glob_matches(pattern, text) == expected

    def test_many_stars_stay_fast(self):
        """Pathological input that is exponential for naive backtracking."""
        pattern = "a*" * 30 + "b"
        text = "a" * 200
        assert not glob_matches(pattern, text)


class TestGlobQuestionMark:
    """'?' matches exactly one character."""

    @pytest.mark.parametrize("pattern,text,expected", [
        ("?", "a", True),
        ("?", "", False),
        ("?", "ab", False),
        ("m?lloc", "malloc", True),
        ("libc-2.??.so", "libc-2.31.so", True),
        ("libc-2.??.so", "libc-2.9.so", False),
        ("?*", "", False),
        ("?*", "x", True),
        ("*?", "xyz", True),
    ])
    def test_question_mark_patterns(self, pattern, text, expected):
        assert glob_matches(pattern, text) == expected
