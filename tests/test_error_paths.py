"""Error-path and malformed input tests.

Classification has no failure mode: malformed snippets still produce a
Document that rebuilds the input. The exception classes cover verification,
rendering, serialization and configuration.
"""

import pytest

from spanlex import classify
from spanlex.errors import (
    ConfigError,
    PartitionError,
    RenderError,
    SerializationError,
    SpanlexError,
)
from spanlex.nodes import Line
from spanlex.tokens import Category, Span

# =========================================================================
# Malformed input never raises
# =========================================================================


class TestMalformedInput:
    @pytest.mark.parametrize(
        "source",
        [
            "",
            "\n",
            '"',
            "'",
            "`",
            "\\",
            "/",
            "//",
            "&",
            "&amp;",
            "&lt;&gt;",
            "\r\n\r\n",
            "\x00\x01",
            "🙂 const ü = '✓'",
            "\ud800",
            "a" * 10_000,
            "<<<>>>",
            "'a\\",
            '"unterminated // and `tick',
            "``````",
            "1__2..3",
        ],
    )
    def test_round_trip_on_malformed(self, source: str) -> None:
        doc = classify(source)
        assert doc.source == source
        for line, raw in zip(doc, source.split("\n")):
            line.verify(raw)


# =========================================================================
# PartitionError construction and formatting
# =========================================================================


class TestPartitionError:
    def test_message_only(self) -> None:
        err = PartitionError("bad split")
        assert str(err) == "bad split"
        assert err.lineno is None
        assert err.col_offset is None

    def test_with_line_and_column(self) -> None:
        err = PartitionError("bad split", lineno=10, col_offset=5)
        assert str(err) == "10:5 bad split"

    def test_verify_reports_first_mismatch(self) -> None:
        line = Line(spans=(Span("abd", Category.PLAIN),), lineno=4)
        with pytest.raises(PartitionError) as exc_info:
            line.verify("abc")
        assert exc_info.value.lineno == 4
        assert exc_info.value.col_offset == 3

    def test_verify_rejects_empty_span(self) -> None:
        line = Line(spans=(Span("", Category.KEYWORD), Span("a", Category.PLAIN)))
        with pytest.raises(PartitionError, match="empty KEYWORD span"):
            line.verify("a")

    def test_verify_compares_unescaped_text(self) -> None:
        Line(spans=(Span("a &lt; b", Category.PLAIN),)).verify("a < b")


# =========================================================================
# Hierarchy
# =========================================================================


class TestHierarchy:
    @pytest.mark.parametrize(
        "err",
        [
            PartitionError("x"),
            RenderError("x"),
            SerializationError("x"),
            ConfigError("max_line_length", "x"),
        ],
    )
    def test_all_are_spanlex_errors(self, err: Exception) -> None:
        assert isinstance(err, SpanlexError)

    def test_config_error_format(self) -> None:
        err = ConfigError("max_line_length", "must be >= 0 or None")
        assert err.field_name == "max_line_length"
        assert str(err) == "Config 'max_line_length': must be >= 0 or None"
