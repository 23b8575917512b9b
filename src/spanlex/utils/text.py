"""Text escaping utilities for spanlex.

The classifier works on markup-escaped text so renderers can emit span text
verbatim. Only the three markup-significant characters are touched.

Example:
    >>> from spanlex.utils.text import escape_markup, unescape_markup
    >>> escape_markup("a < b && c > d")
    'a &lt; b &amp;&amp; c &gt; d'
    >>> unescape_markup("a &lt; b")
    'a < b'
"""

from __future__ import annotations

import html as html_module

# Entity produced for each escaped character. Order matters: "&" first so
# entities introduced for "<" and ">" are never re-escaped.
MARKUP_ENTITIES: tuple[tuple[str, str], ...] = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
)

# Entity sequence -> raw character, used by the lexer to see through
# entities when checking neighbouring characters.
ENTITY_TO_CHAR: dict[str, str] = {entity: char for char, entity in MARKUP_ENTITIES}


def escape_markup(text: str) -> str:
    """Replace ``&``, ``<`` and ``>`` with their entities.

    Quotes, backticks and non-ASCII characters pass through unchanged.

    Args:
        text: Raw text

    Returns:
        Escaped text

    Examples:
        >>> escape_markup("<T>")
        '&lt;T&gt;'
        >>> escape_markup('"quoted" `tick`')
        '"quoted" `tick`'
    """
    if not text:
        return ""
    for char, entity in MARKUP_ENTITIES:
        text = text.replace(char, entity)
    return text


def unescape_markup(text: str) -> str:
    """Reverse :func:`escape_markup`.

    Only ``&amp;``, ``&lt;`` and ``&gt;`` are decoded; any other entity-like
    text is left alone.

    Examples:
        >>> unescape_markup("&lt;T&gt; &amp;&amp; x")
        '<T> && x'
        >>> unescape_markup("&amp;lt;")
        '&lt;'
    """
    if not text:
        return ""
    for char, entity in reversed(MARKUP_ENTITIES):
        text = text.replace(entity, char)
    return text


def escape_html(text: str) -> str:
    """Escape HTML special characters for safe use in attributes.

    Converts ``& < > " '`` to entities. Used for renderer chrome (header
    labels, language attributes), never for span text.

    Examples:
        >>> escape_html("<script>alert('xss')</script>")
        "&lt;script&gt;alert(&#x27;xss&#x27;)&lt;/script&gt;"
    """
    if not text:
        return ""

    escaped = html_module.escape(text, quote=True)
    return escaped.replace("'", "&#x27;")
