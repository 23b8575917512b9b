"""Line and Document nodes produced by the classifier.

A Document is an ordered tuple of Lines, one per input line. A Line is an
ordered tuple of Spans that together reconstruct the line exactly.

Thread Safety:
All nodes are frozen dataclasses. A Document returned by ``classify()`` owns
no references back into caller state and can be shared freely.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from spanlex.errors import PartitionError
from spanlex.tokens import Category, Span
from spanlex.utils.text import unescape_markup


@dataclass(frozen=True, slots=True)
class Line:
    """One classified source line.

    Attributes:
        spans: Contiguous, non-overlapping spans covering the escaped line
        lineno: Line number in the source snippet (1-indexed)

    An empty source line has no spans.
    """

    spans: tuple[Span, ...] = ()
    lineno: int = 1

    @property
    def text(self) -> str:
        """Escaped line text (concatenation of span texts)."""
        return "".join(span.text for span in self.spans)

    @property
    def source(self) -> str:
        """Original, unescaped line text."""
        return unescape_markup(self.text)

    def categories(self) -> tuple[Category, ...]:
        """Categories of the spans, in order."""
        return tuple(span.category for span in self.spans)

    def verify(self, source: str) -> None:
        """Check that this line reconstructs ``source`` exactly.

        Args:
            source: The raw line this Line was classified from

        Raises:
            PartitionError: Spans are empty strings, or the un-escaped
                concatenation differs from ``source``.
        """
        for span in self.spans:
            if not span.text:
                raise PartitionError(
                    f"empty {span.category.name} span", lineno=self.lineno
                )
        rebuilt = self.source
        if rebuilt == source:
            return
        col = 1
        for expected, actual in zip(source, rebuilt):
            if expected != actual:
                break
            col += 1
        raise PartitionError(
            f"spans rebuild {rebuilt!r}, expected {source!r}",
            lineno=self.lineno,
            col_offset=col,
        )

    def __iter__(self) -> Iterator[Span]:
        return iter(self.spans)

    def __len__(self) -> int:
        return len(self.spans)


@dataclass(frozen=True, slots=True)
class Document:
    """Classified snippet: one Line per input line.

    Attributes:
        lines: Lines in source order

    Empty input produces a Document with no lines.
    """

    lines: tuple[Line, ...] = ()

    @property
    def source(self) -> str:
        """Original snippet text, lines joined with ``\\n``."""
        return "\n".join(line.source for line in self.lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def __getitem__(self, index: int) -> Line:
        return self.lines[index]
