"""
Unit tests for dictionary text normalization.
"""

import pytest

from content_normalizer import force_utf8_encoding, normalize_content

SAMPLES = [
    "",
    "\n",
    "\n\n\n",
    "word",
    "\ufeffword\r\n",
    "one \t\r\ntwo\rthree\t\n\n\n",
    "  \n\t\n",
    "a\r\r\nb  \r",
    "\ufeff\ufeffdouble bom\n",
    "trailing spaces at end   ",
]


class TestNormalizeContent:
    """Test normalize_content."""

    def test_strips_bom(self):
        assert normalize_content("\ufeffhello\n") == "hello\n"

    def test_strips_repeated_bom(self):
        assert normalize_content("\ufeff\ufeffhello\n") == "hello\n"

    def test_only_leading_bom_removed(self):
        assert normalize_content("a\ufeffb\n") == "a\ufeffb\n"

    def test_unifies_line_endings(self):
        assert normalize_content("a\r\nb\rc\n") == "a\nb\nc\n"

    def test_strips_trailing_whitespace(self):
        assert normalize_content("a  \nb\t\t\nc \t \n") == "a\nb\nc\n"

    def test_keeps_leading_whitespace(self):
        assert normalize_content("  indented\n") == "  indented\n"

    def test_adds_missing_final_newline(self):
        assert normalize_content("no newline") == "no newline\n"

    def test_collapses_final_newlines(self):
        assert normalize_content("text\n\n\n\n") == "text\n"

    def test_keeps_inner_blank_lines(self):
        assert normalize_content("a\n\n\nb\n") == "a\n\n\nb\n"

    def test_empty_input(self):
        assert normalize_content("") == "\n"

    @pytest.mark.parametrize("text", SAMPLES)
    def test_output_is_canonical(self, text):
        result = normalize_content(text)
        assert "\r" not in result
        assert result.endswith("\n")
        assert not result.endswith("\n\n")
        for line in result.split("\n"):
            assert line == line.rstrip(" \t")

    @pytest.mark.parametrize("text", SAMPLES)
    def test_idempotent(self, text):
        once = normalize_content(text)
        assert normalize_content(once) == once


class TestForceUtf8Encoding:
    """Test force_utf8_encoding."""

    def test_replaces_first_line(self):
        aff = "SET ISO8859-1\nTRY esianrtolcdugmphbyfvkwzESIANRTOLCDUGMPHBYFVKWZ'\n"
        result = force_utf8_encoding(aff)
        assert result == "SET UTF-8\nTRY esianrtolcdugmphbyfvkwzESIANRTOLCDUGMPHBYFVKWZ'\n"

    def test_replaces_declaration_after_comments(self):
        aff = "# Affix file\nSET KOI8-R\nFLAG long\n"
        assert force_utf8_encoding(aff) == "# Affix file\nSET UTF-8\nFLAG long\n"

    def test_only_first_declaration(self):
        aff = "SET ISO8859-2\nSET ISO8859-2\n"
        assert force_utf8_encoding(aff) == "SET UTF-8\nSET ISO8859-2\n"

    def test_crlf_line_kept_intact(self):
        assert force_utf8_encoding("SET cp1251\r\nPFX A Y 1\r\n") == "SET UTF-8\r\nPFX A Y 1\r\n"

    def test_bare_cr_lines(self):
        assert force_utf8_encoding("# c\rSET ISO8859-1\rSFX\r") == "# c\rSET UTF-8\rSFX\r"

    def test_declaration_behind_bom(self):
        result = normalize_content(force_utf8_encoding("\ufeffSET ISO8859-15\nKEY qwe\n"))
        assert result == "SET UTF-8\nKEY qwe\n"

    def test_mid_line_set_not_touched(self):
        aff = "# uses SET ISO8859-1\nFLAG num\n"
        assert force_utf8_encoding(aff) == aff

    def test_no_declaration(self):
        aff = "FLAG long\nTRY abc\n"
        assert force_utf8_encoding(aff) == aff

    def test_already_utf8(self):
        assert force_utf8_encoding("SET UTF-8\n") == "SET UTF-8\n"
