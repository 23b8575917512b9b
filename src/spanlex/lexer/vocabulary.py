"""Fixed vocabulary and character sets for the classifier.

All sets are frozensets for O(1) membership testing and module-level
caching. Identifier characters are ASCII only; any other character is a
word boundary.
"""

from __future__ import annotations

import string

# Reserved words tagged KEYWORD (case-sensitive, whole word only)
KEYWORDS: frozenset[str] = frozenset(
    {
        "import",
        "export",
        "from",
        "const",
        "let",
        "var",
        "async",
        "await",
        "return",
        "new",
        "class",
        "interface",
        "type",
        "function",
        "extends",
        "implements",
        "typeof",
        "void",
        "null",
        "undefined",
        "true",
        "false",
        "default",
        "if",
        "else",
        "for",
        "while",
        "of",
        "in",
        "break",
        "continue",
    }
)

DIGITS: frozenset[str] = frozenset(string.digits)

UPPERCASE: frozenset[str] = frozenset(string.ascii_uppercase)

IDENT_CHARS: frozenset[str] = frozenset(string.ascii_letters + string.digits + "_$")

# Identifiers eligible for FUNCTION_CALL / PROPERTY_KEY
CALLABLE_START: frozenset[str] = frozenset(string.ascii_lowercase + "_$")

QUOTE_CHARS: frozenset[str] = frozenset("\"'")

BACKTICK = "`"

COMMENT_START = "//"

# A number may not touch any of these on either side
NUMBER_GUARD_CHARS: frozenset[str] = IDENT_CHARS | QUOTE_CHARS | frozenset(BACKTICK)

# Whitespace skipped when looking for "(" or ":" after an identifier
INLINE_WHITESPACE: frozenset[str] = frozenset(" \t\r\f\v")

# Escaped angle brackets, as they appear in the classified text
OPEN_ANGLE = "&lt;"
CLOSE_ANGLE = "&gt;"
