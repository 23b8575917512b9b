"""Tests for spanlex utility modules."""

import pytest
from hypothesis import given
from hypothesis import strategies as st


class TestEscapeMarkup:
    """Tests for escape_markup / unescape_markup."""

    def test_three_characters(self) -> None:
        from spanlex.utils.text import escape_markup

        assert escape_markup("a < b && c > d") == "a &lt; b &amp;&amp; c &gt; d"

    def test_ampersand_escaped_first(self) -> None:
        from spanlex.utils.text import escape_markup

        assert escape_markup("<") == "&lt;"
        assert escape_markup("&lt;") == "&amp;lt;"

    @pytest.mark.parametrize("text", ['"', "'", "`", "ü", "🙂", "\\", "\t", ""])
    def test_other_characters_untouched(self, text: str) -> None:
        from spanlex.utils.text import escape_markup

        assert escape_markup(text) == text

    def test_unescape_only_known_entities(self) -> None:
        from spanlex.utils.text import unescape_markup

        assert unescape_markup("&lt;T&gt; &amp;&amp; &quot;") == '<T> && &quot;'
        assert unescape_markup("&amp;lt;") == "&lt;"

    @given(st.text())
    def test_round_trip(self, text: str) -> None:
        from spanlex.utils.text import escape_markup, unescape_markup

        assert unescape_markup(escape_markup(text)) == text


class TestEscapeHtml:
    def test_quotes_escaped(self) -> None:
        from spanlex.utils.text import escape_html

        assert escape_html("<a href='x'>") == "&lt;a href=&#x27;x&#x27;&gt;"

    def test_empty_string(self) -> None:
        from spanlex.utils.text import escape_html

        assert escape_html("") == ""


class TestLogger:
    def test_prefix_added(self) -> None:
        from spanlex.utils.logger import get_logger

        assert get_logger("mymodule").name == "spanlex.mymodule"

    def test_prefix_not_doubled(self) -> None:
        from spanlex.utils.logger import get_logger

        assert get_logger("spanlex.lexer.core").name == "spanlex.lexer.core"
        assert get_logger("spanlex").name == "spanlex"
