"""Numeric literal classifier mixin."""

from spanlex.lexer.vocabulary import DIGITS, NUMBER_GUARD_CHARS
from spanlex.tokens import Category
from spanlex.utils.text import ENTITY_TO_CHAR


class NumberClassifierMixin:
    """Mixin providing decimal number classification.

    Matches ``digit (digit | _)* (. digit+)?``. Hex, binary, octal and
    exponent forms are left to the other rules.
    """

    # These will be set by the Lexer class
    _text: str
    _code_end: int
    _owner: list[Category | None]

    def _claim(self, start: int, end: int, category: Category) -> None:
        """Record ownership of text[start:end]. Implemented by Lexer."""
        raise NotImplementedError

    def _unclaimed_words(self) -> list[tuple[int, int]]:
        """Identifier runs not yet claimed. Implemented by Lexer."""
        raise NotImplementedError

    def _raw_char_before(self, pos: int) -> str:
        """Unescaped character ending just before ``pos`` ("" at line start)."""
        if pos == 0:
            return ""
        text = self._text
        if text[pos - 1] == ";":
            for entity, char in ENTITY_TO_CHAR.items():
                if pos >= len(entity) and text.startswith(entity, pos - len(entity)):
                    return char
        return text[pos - 1]

    def _raw_char_at(self, pos: int) -> str:
        """Unescaped character starting at ``pos`` ("" at line end)."""
        text = self._text
        if pos >= len(text):
            return ""
        if text[pos] == "&":
            for entity, char in ENTITY_TO_CHAR.items():
                if text.startswith(entity, pos):
                    return char
        return text[pos]

    def _digit_run_end(self, pos: int, *, underscores: bool) -> int:
        text = self._text
        owner = self._owner
        end = self._code_end
        while pos < end and owner[pos] is None:
            char = text[pos]
            if char in DIGITS or (underscores and char == "_"):
                pos += 1
            else:
                break
        return pos

    def _number_end(self, start: int) -> int | None:
        """End of the number starting at ``start``, or None if guards fail."""
        text = self._text
        int_end = self._digit_run_end(start + 1, underscores=True)

        candidates = [int_end]
        if int_end + 1 < self._code_end and text[int_end] == ".":
            frac_end = self._digit_run_end(int_end + 1, underscores=False)
            if frac_end > int_end + 1:
                candidates.insert(0, frac_end)

        for end in candidates:
            if self._raw_char_at(end) not in NUMBER_GUARD_CHARS:
                return end
        return None

    def _classify_numbers(self) -> None:
        text = self._text
        for start, _ in self._unclaimed_words():
            # A fraction claimed earlier may have absorbed this word
            if self._owner[start] is not None or text[start] not in DIGITS:
                continue
            if self._raw_char_before(start) in NUMBER_GUARD_CHARS:
                continue
            end = self._number_end(start)
            if end is not None:
                self._claim(start, end, Category.NUMBER)
