"""Comment and string/template literal classifier mixin."""

from spanlex.lexer.vocabulary import BACKTICK, COMMENT_START, QUOTE_CHARS
from spanlex.tokens import Category


class LiteralClassifierMixin:
    """Mixin providing comment detection and literal region claiming.

    Literals are line-bounded. An unterminated literal runs to the end of
    the line. A backtick is checked before a quote at each position, and
    whichever delimiter opens first owns the region.
    """

    # These will be set by the Lexer class
    _text: str
    _code_end: int

    def _claim(self, start: int, end: int, category: Category) -> None:
        """Record ownership of text[start:end]. Implemented by Lexer."""
        raise NotImplementedError

    def _literal_end(self, pos: int) -> int | None:
        """Return the end of the literal opening at ``pos``.

        Args:
            pos: Position in the escaped line

        Returns:
            Exclusive end of the literal, or None if ``pos`` does not open one.
        """
        text = self._text
        char = text[pos]

        if char == BACKTICK:
            # No escape processing inside templates
            close = text.find(BACKTICK, pos + 1)
            return len(text) if close == -1 else close + 1

        if char in QUOTE_CHARS:
            end = len(text)
            i = pos + 1
            while i < end:
                c = text[i]
                if c == "\\":
                    i += 2
                    continue
                if c == char:
                    return i + 1
                i += 1
            return end

        return None

    def _classify_comment(self) -> None:
        """Claim the line comment, if any, and shorten the code region.

        Walks the line left to right, stepping over literal regions, so a
        ``//`` inside a string or template never starts a comment.
        """
        text = self._text
        end = len(text)
        pos = 0
        while pos < end:
            literal_end = self._literal_end(pos)
            if literal_end is not None:
                pos = literal_end
                continue
            if text.startswith(COMMENT_START, pos):
                self._claim(pos, end, Category.COMMENT)
                self._code_end = pos
                return
            pos += 1

    def _classify_literals(self) -> None:
        """Claim template and quoted-string regions before the comment."""
        text = self._text
        pos = 0
        while pos < self._code_end:
            literal_end = self._literal_end(pos)
            if literal_end is None:
                pos += 1
                continue
            category = (
                Category.TEMPLATE_STRING if text[pos] == BACKTICK else Category.STRING
            )
            self._claim(pos, literal_end, category)
            pos = literal_end
