"""HTML renderer for classified Documents.

Maps each span's Category to a CSS class and wraps the (already escaped)
span text in ``<span class="...">``. Plain spans are emitted unwrapped.

Thread Safety:
HtmlRenderer holds only its immutable class map. Multiple threads can share
one instance and call render() concurrently.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from spanlex.errors import RenderError
from spanlex.nodes import Document, Line
from spanlex.tokens import Category
from spanlex.utils.text import escape_html


# CSS class per category; None means "emit unwrapped"
DEFAULT_CLASS_MAP: Mapping[Category, str | None] = MappingProxyType(
    {
        Category.COMMENT: "hl-cmt",
        Category.TEMPLATE_STRING: "hl-str",
        Category.STRING: "hl-str",
        Category.KEYWORD: "hl-kw",
        Category.TYPE_NAME: "hl-cls",
        Category.NUMBER: "hl-num",
        Category.FUNCTION_CALL: "hl-fn",
        Category.PROPERTY_KEY: "hl-prop",
        Category.PLAIN: None,
    }
)


class HtmlRenderer:
    """Render classified Documents to HTML markup.

    Usage:
        >>> from spanlex import classify
        >>> HtmlRenderer().render(classify("let a"))
        '<span class="hl-kw">let</span> a'

    Args:
        class_map: CSS class for every Category. Must cover each category
            that appears in rendered documents; start from
            ``DEFAULT_CLASS_MAP`` to override a few entries.
    """

    __slots__ = ("_class_map",)

    def __init__(self, class_map: Mapping[Category, str | None] | None = None) -> None:
        self._class_map = MappingProxyType(
            dict(class_map if class_map is not None else DEFAULT_CLASS_MAP)
        )

    @property
    def class_map(self) -> Mapping[Category, str | None]:
        return self._class_map

    def render(self, doc: Document) -> str:
        """Render every line, joined with ``\\n``.

        Raises:
            RenderError: A span's category has no entry in the class map.
        """
        return "\n".join(self.render_line(line) for line in doc)

    def render_line(self, line: Line) -> str:
        """Render one line's spans. Span text is emitted without re-escaping."""
        parts: list[str] = []
        for span in line:
            try:
                css_class = self._class_map[span.category]
            except KeyError:
                raise RenderError(
                    f"No CSS class for category {span.category!r} on line {line.lineno}"
                ) from None
            if css_class is None:
                parts.append(span.text)
            else:
                parts.append(f'<span class="{css_class}">{span.text}</span>')
        return "".join(parts)

    def render_code_block(
        self,
        doc: Document,
        *,
        header: str | None = None,
        language: str | None = None,
        hl_lines: Iterable[int] | None = None,
        show_linenos: bool = False,
    ) -> str:
        """Render a Document inside ``<pre><code>`` with optional chrome.

        Args:
            doc: Classified document
            header: Label shown above the code (escaped)
            language: Added as ``language-<name>`` class on ``<code>``
            hl_lines: 1-indexed line numbers to emphasize
            show_linenos: Prefix each line with its line number

        Returns:
            HTML markup for the whole block
        """
        emphasized = set(hl_lines) if hl_lines else set()
        rendered: list[str] = []
        for line in doc:
            body = self.render_line(line)
            if show_linenos:
                body = f'<span class="lineno">{line.lineno}</span>{body}'
            if line.lineno in emphasized:
                body = f'<span class="hll">{body}</span>'
            rendered.append(body)

        lang_class = f' class="language-{escape_html(language)}"' if language else ""
        code = f"<pre><code{lang_class}>" + "\n".join(rendered) + "</code></pre>"
        if header is None:
            return f'<div class="code-block">{code}</div>'

        label = f'<div class="code-header"><span class="code-label">{escape_html(header)}</span></div>'
        return f'<div class="code-block">{label}{code}</div>'
