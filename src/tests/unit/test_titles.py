"""Tests for title derivation and filename sanitizing."""

import pytest

from hexnote.cards.titles import (
    MAX_FILENAME_LENGTH,
    MAX_STEM_BYTES,
    derive_title,
    filename_stem,
    sanitize_filename,
)


class TestDeriveTitle:
    """Tests for derive_title()."""

    @pytest.mark.parametrize(
        "body,expected",
        [
            ("# Hello\nworld", "Hello"),
            ("no heading\nsecond line", "no heading"),
            ("", "Untitled"),
            ("   \n\t\n", "Untitled"),
            ("intro line\n## Second level", "Second level"),
            ("   ###   Spaced out   \nbody", "Spaced out"),
            ("\n\n  first text  \nmore", "first text"),
            ("#\nplain", "#"),
            ("#Tight", "Tight"),
        ],
    )
    def test_derive_title(self, body, expected):
        """Headings win, then the first non-empty line, then Untitled."""
        assert derive_title(body) == expected

    def test_first_heading_wins(self):
        """Only the first heading is used."""
        assert derive_title("# One\n# Two") == "One"

    @pytest.mark.parametrize(
        "separator", ["\x0c", "\x0b", "\x1e", "\x85", "\u2028"]
    )
    def test_only_newline_splits_lines(self, separator):
        """Other line-break characters stay inside the first line."""
        body = f"first{separator}second\nthird"
        assert derive_title(body) == f"first{separator}second"

    def test_crlf_line_endings(self):
        """A carriage return before the newline is not part of the title."""
        assert derive_title("# Windows\r\nbody\r\n") == "Windows"


class TestSanitizeFilename:
    """Tests for sanitize_filename()."""

    def test_removes_reserved_characters(self):
        """Path separators and wildcard characters never survive."""
        name = sanitize_filename("a/b:c*d?e")

        for ch in '/:*?':
            assert ch not in name
        assert len(name) <= MAX_FILENAME_LENGTH
        assert name == "a-b-c-de"

    @pytest.mark.parametrize(
        "title,expected",
        [
            ('say "hi"', "say 'hi'"),
            ("<tag>", "(tag)"),
            ("a|b\\c", "a-b-c"),
            ("why?", "why"),
            ("  padded  ", "padded"),
            ("ends with dots...", "ends with dots"),
            ("dot then space. .", "dot then space"),
            ("tab\there", "tabhere"),
        ],
    )
    def test_substitutions(self, title, expected):
        """Unsafe characters map to look-alikes or are removed."""
        assert sanitize_filename(title) == expected

    @pytest.mark.parametrize("title", ["", "   ", "???", "...", "?. ?"])
    def test_empty_falls_back_to_untitled(self, title):
        """Nothing left after cleaning gives Untitled."""
        assert sanitize_filename(title) == "Untitled"

    def test_truncates_long_titles(self):
        """Titles are cut to the maximum length."""
        name = sanitize_filename("x" * 250)
        assert name == "x" * MAX_FILENAME_LENGTH

    def test_truncation_does_not_leave_trailing_space(self):
        """Whitespace exposed by truncation is trimmed."""
        name = sanitize_filename("y" * 99 + " tail")
        assert name == "y" * 99

    @pytest.mark.parametrize("char", ["日", "\U0001f600", "é"])
    def test_multibyte_titles_fit_byte_limit(self, char):
        """Long non-ASCII titles are cut to fit the filename byte limit."""
        name = sanitize_filename(char * MAX_FILENAME_LENGTH)

        assert len(name) <= MAX_FILENAME_LENGTH
        assert len(name.encode("utf-8")) <= MAX_STEM_BYTES
        assert len(f"{name} (999).md".encode("utf-8")) <= 255
        assert set(name) == {char}

    def test_byte_truncation_trims_trailing_space(self):
        """Whitespace exposed by byte truncation is trimmed."""
        name = sanitize_filename("日" * 81 + " " + "日" * 18)
        assert name == "日" * 81


def test_filename_stem_combines_both_steps():
    """filename_stem derives and sanitizes in one go."""
    assert filename_stem("# Plans: 2024/25?\nbody") == "Plans- 2024-25"
