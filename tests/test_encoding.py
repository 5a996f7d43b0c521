"""
Tests for color code stripping
"""

import pytest

from q3status.utils.encoding import sanitize_string


class TestSanitizeString:
    """Examples from real player names"""

    def test_color_codes_removed(self):
        assert sanitize_string("^1Player^7Name") == "PlayerName"

    def test_double_caret(self):
        assert sanitize_string("^1Player^^7Name") == "Player^Name"

    def test_triple_caret(self):
        assert sanitize_string("^1Player^^^7Name") == "Player^^Name"

    def test_no_caret(self):
        assert sanitize_string("PlayerName") == "PlayerName"

    def test_escaped_caret_before_letter(self):
        assert sanitize_string("^2Bob^^Cool") == "Bob^Cool"

    def test_trailing_caret_dropped(self):
        assert sanitize_string("Name^") == "Name"

    def test_trailing_double_caret(self):
        assert sanitize_string("Name^^") == "Name^"

    def test_lone_caret(self):
        assert sanitize_string("^") == ""

    def test_empty(self):
        assert sanitize_string("") == ""

    def test_non_ascii_code_points(self):
        assert sanitize_string("^3Jürgen^7ñ") == "Jürgenñ"

    def test_color_code_on_non_ascii(self):
        assert sanitize_string("^éName") == "Name"


class TestSanitizeProperties:

    @pytest.mark.parametrize("text", [
        "PlayerName",
        "",
        "spaces and [tags]",
        "Ünïcödé 名前",
        "back\\slash \"quote\"",
    ])
    def test_identity_without_caret(self, text):
        assert sanitize_string(text) == text

    @pytest.mark.parametrize("text", [
        "^1Player^7Name",
        "^^^^",
        "^^^^^",
        "a^b^^c^^^d^",
        "^^7^^x^",
        "^",
    ])
    def test_never_longer_than_input(self, text):
        assert len(sanitize_string(text)) <= len(text)
