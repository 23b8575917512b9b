"""Category and Span definitions for the spanlex classifier.

The lexer partitions each escaped line into Span objects. Each Span carries
its (escaped) text and one lexical Category.

Thread Safety:
Span is frozen (immutable) and safe to share across threads.
Category is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto


class Category(Enum):
    """Lexical categories a span can carry.

    Listed in precedence order: a rule earlier in this list claims
    characters before any later rule sees them. PLAIN is the residue.

    """

    COMMENT = auto()  # // to end of line
    TEMPLATE_STRING = auto()  # `...`
    STRING = auto()  # "..." or '...'
    KEYWORD = auto()  # const, return, ...
    TYPE_NAME = auto()  # Capitalized identifier
    NUMBER = auto()  # 42, 3.14, 1_000
    FUNCTION_CALL = auto()  # name(
    PROPERTY_KEY = auto()  # name:
    PLAIN = auto()  # Everything else


@dataclass(frozen=True, slots=True)
class Span:
    """A run of escaped line text tagged with one Category.

    Attributes:
        text: Escaped text (``&``, ``<``, ``>`` already replaced by entities)
        category: Lexical category of the run

    """

    text: str
    category: Category

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.text
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Span({self.category.name}, {val!r})"
