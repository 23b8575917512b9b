"""Tests for comment, string and template literal classification.

Includes the degenerate cases: unterminated literals run to end of line,
and a // inside a literal never opens a comment.
"""

import pytest

from spanlex import classify_line
from spanlex.tokens import Category

C = Category


def spans(source: str) -> list[tuple[Category, str]]:
    return [(span.category, span.text) for span in classify_line(source)]


class TestComments:
    """Line comments short-circuit the rest of the line."""

    def test_whole_line_comment(self) -> None:
        assert spans("// hello") == [(C.COMMENT, "// hello")]

    def test_comment_content_not_classified(self) -> None:
        assert spans("// const x = foo(42)") == [(C.COMMENT, "// const x = foo(42)")]

    def test_trailing_comment(self) -> None:
        assert spans("a / b // c") == [(C.PLAIN, "a / b "), (C.COMMENT, "// c")]

    def test_first_double_slash_wins(self) -> None:
        assert spans("x ///// y // z") == [(C.PLAIN, "x "), (C.COMMENT, "///// y // z")]

    def test_comment_text_is_escaped(self) -> None:
        assert spans("// a < b && c") == [(C.COMMENT, "// a &lt; b &amp;&amp; c")]

    def test_single_slash_is_plain(self) -> None:
        assert spans("a / b") == [(C.PLAIN, "a / b")]

    def test_quote_inside_comment_is_comment(self) -> None:
        assert spans("x // don't") == [(C.PLAIN, "x "), (C.COMMENT, "// don't")]

    def test_trailing_carriage_return_stays_in_comment(self) -> None:
        assert spans("// note\r") == [(C.COMMENT, "// note\r")]


class TestStringPrecedence:
    """A // inside a literal does not start a comment."""

    def test_url_in_double_quoted_string(self) -> None:
        assert spans('"http://x" // c') == [
            (C.STRING, '"http://x"'),
            (C.PLAIN, " "),
            (C.COMMENT, "// c"),
        ]

    def test_slashes_in_single_quoted_string(self) -> None:
        assert spans("'a // b'") == [(C.STRING, "'a // b'")]

    def test_slashes_in_template(self) -> None:
        assert spans("`a // b`") == [(C.TEMPLATE_STRING, "`a // b`")]

    def test_unterminated_string_swallows_slashes(self) -> None:
        assert spans("x = 'a // b") == [(C.PLAIN, "x = "), (C.STRING, "'a // b")]


class TestTemplates:
    """Backtick literals: no escapes, first backtick closes."""

    def test_template_is_single_span(self) -> None:
        assert spans("`Hello ${name}`") == [(C.TEMPLATE_STRING, "`Hello ${name}`")]

    def test_template_may_contain_quotes(self) -> None:
        assert spans('`a "b" \'c\'`') == [(C.TEMPLATE_STRING, '`a "b" \'c\'`')]

    def test_backslash_does_not_escape_backtick(self) -> None:
        assert spans("`a\\`b`") == [
            (C.TEMPLATE_STRING, "`a\\`"),
            (C.PLAIN, "b"),
            (C.TEMPLATE_STRING, "`"),
        ]

    def test_unterminated_template_runs_to_end(self) -> None:
        assert spans("y = `abc <b>") == [(C.PLAIN, "y = "), (C.TEMPLATE_STRING, "`abc &lt;b&gt;")]

    def test_lone_backtick(self) -> None:
        assert spans("`") == [(C.TEMPLATE_STRING, "`")]


class TestQuotedStrings:
    """Double and single quoted literals with backslash escapes."""

    @pytest.mark.parametrize(
        "source",
        [
            '"plain"',
            "'plain'",
            '"say \\"hi\\""',
            "'it\\'s'",
            '"back\\\\"',
            '"a `b` c"',
            "'<div>'",
        ],
    )
    def test_string_is_single_span(self, source: str) -> None:
        line = classify_line(source)
        assert line.categories() == (C.STRING,)
        assert line.source == source

    def test_escaped_backslash_then_close(self) -> None:
        assert spans('"a\\\\" + b') == [(C.STRING, '"a\\\\"'), (C.PLAIN, " + b")]

    def test_adjacent_strings_stay_separate(self) -> None:
        assert spans('"a""b"') == [(C.STRING, '"a"'), (C.STRING, '"b"')]

    def test_unterminated_runs_to_end(self) -> None:
        assert spans('x = "abc') == [(C.PLAIN, "x = "), (C.STRING, '"abc')]

    def test_trailing_backslash(self) -> None:
        assert spans('"abc\\') == [(C.STRING, '"abc\\')]

    def test_mismatched_quote_does_not_close(self) -> None:
        assert spans("\"it's\" x") == [(C.STRING, "\"it's\""), (C.PLAIN, " x")]

    def test_string_contents_not_reclassified(self) -> None:
        assert spans('"const Foo = bar(1)"') == [(C.STRING, '"const Foo = bar(1)"')]

    def test_string_before_comment(self) -> None:
        assert spans("import x from 'y'; // z") == [
            (C.KEYWORD, "import"),
            (C.PLAIN, " x "),
            (C.KEYWORD, "from"),
            (C.PLAIN, " "),
            (C.STRING, "'y'"),
            (C.PLAIN, "; "),
            (C.COMMENT, "// z"),
        ]
