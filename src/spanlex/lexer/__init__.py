"""Line-oriented lexer for the spanlex classifier.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer
├── core.py              # Lexer class (ownership map + rule order)
├── vocabulary.py        # Keyword set and character sets
└── classifiers/         # Category rules as mixins
    ├── literal.py       # Comment, template and quoted strings
    ├── word.py          # Keyword, type name, call, property key
    └── number.py        # Decimal numbers

Usage:
    >>> from spanlex.lexer import Lexer
    >>> for line in Lexer("let a = 1\\nfoo()").tokenize():
    ...     print(line.categories())
(<Category.KEYWORD: 4>, <Category.PLAIN: 9>, <Category.NUMBER: 6>)
(<Category.FUNCTION_CALL: 7>, <Category.PLAIN: 9>)

"""

from spanlex.lexer.core import Lexer

__all__ = ["Lexer"]
