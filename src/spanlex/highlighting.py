"""Syntax highlighting protocol and the built-in script highlighter.

Exposes the classifier through the common ``Highlighter`` protocol used by
Markdown renderers for fenced code blocks:

- highlight(code, language, hl_lines, show_linenos) -> str
- supports_language(language) -> bool

Usage:
    from spanlex.highlighting import highlight

    html = highlight("const x = 1", "js")

    # Swap in another implementation
    from spanlex.highlighting import set_highlighter

    def my_highlighter(code: str, language: str) -> str:
        return f'<pre class="language-{language}"><code>{code}</code></pre>'

    set_highlighter(my_highlighter)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from spanlex.config import HighlightConfig
from spanlex.lexer import Lexer
from spanlex.nodes import Document
from spanlex.renderers.html import HtmlRenderer
from spanlex.utils.logger import get_logger
from spanlex.utils.text import escape_html, escape_markup

logger = get_logger(__name__)

# Language identifiers served by the single JavaScript-like grammar
SCRIPT_LANGUAGES: frozenset[str] = frozenset(
    {"javascript", "js", "jsx", "mjs", "cjs", "typescript", "ts", "tsx"}
)


class Highlighter(Protocol):
    """Protocol for syntax highlighters.

    Highlighters take code and language and return HTML markup
    with syntax highlighting applied.

    Thread Safety:
        Implementations must be thread-safe. The highlight() method
        may be called concurrently from multiple render threads.
    """

    def highlight(
        self,
        code: str,
        language: str,
        *,
        hl_lines: list[int] | None = None,
        show_linenos: bool = False,
    ) -> str:
        """Highlight code with syntax colors.

        Args:
            code: Source code to highlight
            language: Language identifier (e.g., "javascript", "ts")
            hl_lines: 1-indexed line numbers to emphasize (optional)
            show_linenos: Include line numbers in output

        Returns:
            HTML markup with highlighting

        Contract:
            - MUST return valid HTML (never raise for bad input)
            - MUST escape HTML entities in code
            - MUST use CSS classes (not inline styles)
            - SHOULD fall back to plain text for unknown languages
        """
        ...

    def supports_language(self, language: str) -> bool:
        """Check if highlighter supports the given language.

        Contract:
            - MUST NOT raise exceptions
            - SHOULD handle common aliases (js -> javascript)
        """
        ...


# Support for simple callable-based highlighters
SimpleHighlighter = Callable[[str, str], str]


class ScriptHighlighter:
    """Highlighter for the JavaScript/TypeScript-like grammar.

    Stateless apart from its config and renderer, both immutable, so one
    instance may serve many threads.
    """

    __slots__ = ("_config", "_renderer")

    def __init__(
        self,
        config: HighlightConfig | None = None,
        renderer: HtmlRenderer | None = None,
    ) -> None:
        self._config = config
        self._renderer = renderer or HtmlRenderer()

    def supports_language(self, language: str) -> bool:
        return (language or "").strip().lower() in SCRIPT_LANGUAGES

    def classify(self, code: str) -> Document:
        return Document(lines=tuple(Lexer(code, config=self._config).tokenize()))

    def highlight(
        self,
        code: str,
        language: str,
        *,
        hl_lines: list[int] | None = None,
        show_linenos: bool = False,
    ) -> str:
        if not self.supports_language(language):
            logger.debug("No grammar for language %r; rendering plain", language)
            return _plain_block(code, language)
        return self._renderer.render_code_block(
            self.classify(code),
            language=language,
            hl_lines=hl_lines,
            show_linenos=show_linenos,
        )


# Override installed by set_highlighter()
_highlighter: Highlighter | SimpleHighlighter | None = None


def set_highlighter(highlighter: Highlighter | SimpleHighlighter | None) -> None:
    """Set the global syntax highlighter.

    Args:
        highlighter: A Highlighter protocol implementation, or a simple
            function that takes (code, language) and returns HTML.
            Pass None to restore the built-in ScriptHighlighter.
    """
    global _highlighter
    _highlighter = highlighter


def get_highlighter() -> Highlighter | SimpleHighlighter:
    """Get the active highlighter (the built-in one unless overridden)."""
    if _highlighter is not None:
        return _highlighter
    return ScriptHighlighter()


def has_highlighter() -> bool:
    """Check whether a custom highlighter has been installed."""
    return _highlighter is not None


def highlight(
    code: str,
    language: str,
    *,
    hl_lines: list[int] | None = None,
    show_linenos: bool = False,
) -> str:
    """Highlight code using the active highlighter.

    Args:
        code: Source code to highlight
        language: Language identifier
        hl_lines: 1-indexed line numbers to emphasize (optional)
        show_linenos: Include line numbers in output

    Returns:
        HTML markup (highlighted if the language is supported, plain otherwise)
    """
    active = get_highlighter()

    # Full protocol or a simple callable
    if hasattr(active, "highlight") and callable(active.highlight):
        return active.highlight(code, language, hl_lines=hl_lines, show_linenos=show_linenos)
    return active(code, language)


def _plain_block(code: str, language: str) -> str:
    lang_class = f' class="language-{escape_html(language)}"' if language else ""
    return f'<div class="code-block"><pre><code{lang_class}>{escape_markup(code)}</code></pre></div>'
