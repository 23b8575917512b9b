"""Line-oriented lexer with an index-range ownership map.

Each line is escaped once, then classified by a fixed sequence of rules.
Every rule claims ranges of the escaped line that no earlier rule has
claimed; claimed ranges are never re-scanned. Unclaimed gaps become Plain.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from spanlex.config import HighlightConfig, get_highlight_config
from spanlex.lexer.classifiers import (
    LiteralClassifierMixin,
    NumberClassifierMixin,
    WordClassifierMixin,
)
from spanlex.nodes import Line
from spanlex.tokens import Category, Span
from spanlex.utils.logger import get_logger
from spanlex.utils.text import escape_markup

logger = get_logger(__name__)


class Lexer(
    LiteralClassifierMixin,
    WordClassifierMixin,
    NumberClassifierMixin,
):
    """Classifies a snippet line by line.

    Rule order per line (the conflict-resolution policy):
    1. Escape ``&``, ``<``, ``>``
    2. Comment (short-circuits the rest of the line)
    3. Template and quoted-string literals
    4. Keyword, type name, number, function call, property key
    5. Plain for everything left

    Usage:
        >>> lexer = Lexer("const x = 5; // note")
        >>> for line in lexer.tokenize():
        ...     print(line.spans)
        (Span(KEYWORD, 'const'), Span(PLAIN, ' x = '), Span(NUMBER, '5'), ...)

    Thread Safety:
        Lexer instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_config",
        "_lineno",
        # Per-line state
        "_text",  # Escaped line
        "_code_end",  # Start of the comment, or len(_text)
        "_owner",  # Category claiming each position, None if unclaimed
        "_claims",  # (start, end, category) in claim order
        "_words",  # Identifier runs in the code region
    )

    def __init__(self, source: str, config: HighlightConfig | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Raw snippet text
            config: Configuration; the context's active config if None
        """
        self._config = config if config is not None else get_highlight_config()
        if self._config.trim_snippet:
            source = source.strip()
        self._source = source
        self._lineno = 0
        self._reset_line("")

    def lines(self) -> list[str]:
        """Split the source on ``\\n``, keeping empty lines.

        Empty source has no lines. ``\\r`` is not special.
        """
        if not self._source:
            return []
        return self._source.split("\n")

    def tokenize(self) -> Iterator[Line]:
        """Classify each source line.

        Yields:
            One Line per source line, in order
        """
        for raw in self.lines():
            self._lineno += 1
            yield self.classify_line(raw, lineno=self._lineno)

    def classify_line(self, raw: str, lineno: int = 1) -> Line:
        """Classify one physical line (must not contain ``\\n``).

        Args:
            raw: Raw line text
            lineno: Line number recorded on the result (1-indexed)

        Returns:
            Line whose spans reconstruct ``raw`` after un-escaping
        """
        if not raw:
            return Line(spans=(), lineno=lineno)

        self._reset_line(escape_markup(raw))

        limit = self._config.max_line_length
        if limit is not None and len(raw) > limit:
            logger.debug(
                "Line %d has %d characters (limit %d); emitting as plain text",
                lineno,
                len(raw),
                limit,
            )
            return Line(spans=(Span(self._text, Category.PLAIN),), lineno=lineno)

        self._classify_comment()
        self._classify_literals()
        self._collect_words()
        self._classify_keywords()
        self._classify_type_names()
        self._classify_numbers()
        self._classify_calls_and_keys()

        return Line(spans=self._assemble(), lineno=lineno)

    # =========================================================================
    # Ownership map
    # =========================================================================

    def _reset_line(self, text: str) -> None:
        self._text = text
        self._code_end = len(text)
        self._owner = [None] * len(text)
        self._claims = []
        self._words = []

    def _claim(self, start: int, end: int, category: Category) -> None:
        """Record that ``category`` owns text[start:end].

        Callers only claim unowned ranges; overlapping claims are a
        classifier defect.
        """
        owner = self._owner
        for pos in range(start, end):
            assert owner[pos] is None, f"position {pos} already claimed"
            owner[pos] = category
        self._claims.append((start, end, category))

    def _assemble(self) -> tuple[Span, ...]:
        """Turn claims plus unclaimed gaps into an ordered span tuple."""
        text = self._text
        spans: list[Span] = []
        pos = 0
        for start, end, category in sorted(self._claims, key=lambda claim: claim[0]):
            if start > pos:
                spans.append(Span(text[pos:start], Category.PLAIN))
            spans.append(Span(text[start:end], category))
            pos = end
        if pos < len(text):
            spans.append(Span(text[pos:], Category.PLAIN))
        return tuple(spans)
