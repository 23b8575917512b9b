"""Identifier classifier mixin: keywords, type names, calls, property keys."""

from spanlex.lexer.vocabulary import (
    CALLABLE_START,
    CLOSE_ANGLE,
    IDENT_CHARS,
    INLINE_WHITESPACE,
    KEYWORDS,
    OPEN_ANGLE,
    UPPERCASE,
)
from spanlex.tokens import Category
from spanlex.utils.text import ENTITY_TO_CHAR


class WordClassifierMixin:
    """Mixin providing identifier-based classification.

    A word is a maximal run of identifier characters in unclaimed text.
    Entity sequences (``&lt;`` etc.) are stepped over as single units, so
    their letters never form words.
    """

    # These will be set by the Lexer class
    _text: str
    _code_end: int
    _owner: list[Category | None]
    _words: list[tuple[int, int]]

    def _claim(self, start: int, end: int, category: Category) -> None:
        """Record ownership of text[start:end]. Implemented by Lexer."""
        raise NotImplementedError

    def _entity_length(self, pos: int) -> int:
        """Length of the entity starting at ``pos``, or 0."""
        text = self._text
        if text[pos] != "&":
            return 0
        for entity in ENTITY_TO_CHAR:
            if text.startswith(entity, pos):
                return len(entity)
        return 0

    def _collect_words(self) -> None:
        """Find every identifier run in the unclaimed code region."""
        text = self._text
        owner = self._owner
        end = self._code_end
        words: list[tuple[int, int]] = []
        pos = 0
        while pos < end:
            if owner[pos] is not None:
                pos += 1
                continue
            entity = self._entity_length(pos)
            if entity:
                pos += entity
                continue
            if text[pos] not in IDENT_CHARS:
                pos += 1
                continue
            start = pos
            while pos < end and owner[pos] is None and text[pos] in IDENT_CHARS:
                pos += 1
            words.append((start, pos))
        self._words = words

    def _unclaimed_words(self) -> list[tuple[int, int]]:
        owner = self._owner
        return [(start, end) for start, end in self._words if owner[start] is None]

    def _classify_keywords(self) -> None:
        text = self._text
        for start, end in self._unclaimed_words():
            if text[start:end] in KEYWORDS:
                self._claim(start, end, Category.KEYWORD)

    def _classify_type_names(self) -> None:
        """Claim capitalized words, except those closing a generic argument.

        A candidate is suppressed when the escaped text after it reaches
        ``&gt;`` before any ``&lt;``. The lookahead stops at the first
        literal or comment region.
        """
        text = self._text
        closes = self._angle_closers()
        for start, end in self._unclaimed_words():
            if text[start] not in UPPERCASE:
                continue
            if closes[end]:
                continue
            self._claim(start, end, Category.TYPE_NAME)

    def _angle_closers(self) -> list[bool]:
        """For each position, whether the lookahead from there meets ``&gt;``.

        One right-to-left pass over the code region. Entry ``i`` is True when
        ``&gt;`` comes before any ``&lt;``, literal region or the comment
        start, scanning forward from ``i``.
        """
        text = self._text
        owner = self._owner
        limit = self._code_end
        closes = [False] * (limit + 1)
        for pos in range(limit - 1, -1, -1):
            if owner[pos] in (Category.STRING, Category.TEMPLATE_STRING):
                closes[pos] = False
            elif text.startswith(OPEN_ANGLE, pos):
                closes[pos] = False
            elif text.startswith(CLOSE_ANGLE, pos):
                closes[pos] = True
            else:
                closes[pos] = closes[pos + 1]
        return closes

    def _next_significant(self, pos: int) -> str:
        """First character at or after ``pos`` that is not inline whitespace."""
        text = self._text
        end = len(text)
        while pos < end and text[pos] in INLINE_WHITESPACE:
            pos += 1
        return text[pos] if pos < end else ""

    def _classify_calls_and_keys(self) -> None:
        """Claim ``name(`` as FUNCTION_CALL and ``name:`` as PROPERTY_KEY."""
        text = self._text
        for start, end in self._unclaimed_words():
            if text[start] not in CALLABLE_START:
                continue
            follower = self._next_significant(end)
            if follower == "(":
                self._claim(start, end, Category.FUNCTION_CALL)
            elif follower == ":":
                self._claim(start, end, Category.PROPERTY_KEY)
