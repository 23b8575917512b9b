"""Category classifiers for the spanlex lexer.

Each classifier is a mixin that claims ranges of the escaped line for one
group of categories. Classifiers only ever claim characters nobody has
claimed yet; the Lexer calls them in precedence order.
"""

from spanlex.lexer.classifiers.literal import (
    LiteralClassifierMixin,
)
from spanlex.lexer.classifiers.number import (
    NumberClassifierMixin,
)
from spanlex.lexer.classifiers.word import (
    WordClassifierMixin,
)

__all__ = [
    "LiteralClassifierMixin",
    "NumberClassifierMixin",
    "WordClassifierMixin",
]
