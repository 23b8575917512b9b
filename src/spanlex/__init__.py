"""
spanlex: Line-oriented syntax classifier for JavaScript-like snippets.

Partitions each line of a code snippet into non-overlapping lexical spans
(comment, string, template string, keyword, type name, number, function
call, property key, plain) for rendering with distinct styles. Pure,
deterministic, never raises on input, zero runtime dependencies.

Quick Start:
    >>> from spanlex import classify, render
    >>> doc = classify("const x = 5; // note")
    >>> [span.category.name for span in doc[0]]
    ['KEYWORD', 'PLAIN', 'NUMBER', 'PLAIN', 'COMMENT']
    >>> render(doc)
    '<span class="hl-kw">const</span> x = <span class="hl-num">5</span>; <span class="hl-cmt">// note</span>'

    >>> # Or use the high-level SnippetHighlighter
    >>> from spanlex import SnippetHighlighter
    >>> hl = SnippetHighlighter(trim=True)
    >>> html = hl("\\n  let a = 1\\n")
"""

from collections.abc import Iterable, Mapping

from spanlex.config import (
    HighlightConfig,
    get_highlight_config,
    highlight_config_context,
    reset_highlight_config,
    set_highlight_config,
)
from spanlex.errors import (
    ConfigError,
    PartitionError,
    RenderError,
    SerializationError,
    SpanlexError,
)
from spanlex.lexer import Lexer
from spanlex.nodes import Document, Line
from spanlex.renderers.html import DEFAULT_CLASS_MAP, HtmlRenderer
from spanlex.renderers.protocol import SpanRenderer
from spanlex.serialization import from_dict, from_json, to_dict, to_json
from spanlex.tokens import Category, Span
from spanlex.utils.text import escape_markup, unescape_markup

__version__ = "0.1.0"


def classify(source: str, *, config: HighlightConfig | None = None) -> Document:
    """Classify a snippet into a Document of span lines.

    Args:
        source: Raw snippet text
        config: Configuration for this call only (uses the context's active
            config if None)

    Returns:
        Document with one Line per ``\\n``-separated input line; empty input
        gives an empty Document

    Example:
        >>> doc = classify("`Hello ${name}`")
        >>> doc[0].spans
        (Span(TEMPLATE_STRING, '`Hello ${name}`'),)
    """
    return Document(lines=tuple(Lexer(source, config=config).tokenize()))


def classify_line(line: str, *, lineno: int = 1) -> Line:
    """Classify a single physical line (no ``\\n``).

    Example:
        >>> classify_line("foo(1)").categories()
        (<Category.FUNCTION_CALL: 7>, <Category.PLAIN: 9>, <Category.NUMBER: 6>, <Category.PLAIN: 9>)
    """
    return Lexer(line).classify_line(line, lineno=lineno)


def render(doc: Document, *, class_map: Mapping[Category, str | None] | None = None) -> str:
    """Render a Document to HTML span markup, lines joined with ``\\n``.

    Args:
        doc: Classified document
        class_map: CSS class per category (defaults to ``DEFAULT_CLASS_MAP``)
    """
    return HtmlRenderer(class_map=class_map).render(doc)


def highlight(source: str) -> str:
    """Classify and render in one call."""
    return render(classify(source))


class SnippetHighlighter:
    """High-level processor combining classifier and renderer.

    Usage:
        >>> hl = SnippetHighlighter()
        >>> hl("let a")
        '<span class="hl-kw">let</span> a'

        >>> # Trim surrounding whitespace like a page code block does
        >>> hl = SnippetHighlighter(trim=True)
        >>> hl.copy_text("\\n  let a\\n")
        'let a'

    Thread Safety:
        Config is immutable and passed to each Lexer explicitly. Safe to
        share one instance across threads.

    """

    __slots__ = ("_config", "_renderer")

    def __init__(
        self,
        *,
        trim: bool = False,
        max_line_length: int | None = None,
        class_map: Mapping[Category, str | None] | None = None,
        renderer: SpanRenderer | None = None,
    ) -> None:
        """Initialize the highlighter.

        Args:
            trim: Strip surrounding whitespace from snippets before classifying
            max_line_length: Lines longer than this are emitted as plain text
            class_map: CSS classes for the default HtmlRenderer
            renderer: Custom renderer (``class_map`` is ignored when given)
        """
        self._config = HighlightConfig(max_line_length=max_line_length, trim_snippet=trim)
        self._renderer = renderer or HtmlRenderer(class_map=class_map)

    @property
    def config(self) -> HighlightConfig:
        return self._config

    def __call__(self, source: str) -> str:
        """Classify and render ``source``."""
        return self.render(self.classify(source))

    def classify(self, source: str) -> Document:
        return classify(source, config=self._config)

    def classify_many(self, sources: Iterable[str]) -> list[Document]:
        """Classify several snippets with the same configuration."""
        return [self.classify(source) for source in sources]

    def render(self, doc: Document) -> str:
        return self._renderer.render(doc)

    def copy_text(self, source: str) -> str:
        """Raw text a copy-to-clipboard control should hand out.

        This is the unescaped snippet after the same trimming the classifier
        applies, never the rendered markup.
        """
        return source.strip() if self._config.trim_snippet else source


__all__ = [  # noqa: RUF022 - grouped by category
    # Version
    "__version__",
    # Core API
    "classify",
    "classify_line",
    "render",
    "highlight",
    "SnippetHighlighter",
    # Data model
    "Category",
    "Span",
    "Line",
    "Document",
    # Components
    "Lexer",
    "HtmlRenderer",
    "SpanRenderer",
    "DEFAULT_CLASS_MAP",
    # Escaping
    "escape_markup",
    "unescape_markup",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "HighlightConfig",
    "get_highlight_config",
    "set_highlight_config",
    "reset_highlight_config",
    "highlight_config_context",
    # Errors
    "SpanlexError",
    "PartitionError",
    "RenderError",
    "SerializationError",
    "ConfigError",
]
