"""SpanRenderer protocol: stable interface for Document renderers.

Any renderer that implements ``render(doc) -> str`` conforms to this protocol.
The built-in ``HtmlRenderer`` is the reference implementation.

Example:
    from spanlex.renderers.protocol import SpanRenderer

    def render_snippet(renderer: SpanRenderer, doc: Document) -> str:
        return renderer.render(doc)

"""

from typing import Protocol

from spanlex.nodes import Document


class SpanRenderer(Protocol):
    """Protocol for Document renderers.

    Span text is already escaped. Implementations must emit it as is and
    never escape it a second time.

    """

    def render(self, doc: Document) -> str:
        """Render a classified Document to a string.

        Args:
            doc: The classified document to render.

        Returns:
            Rendered string output.

        """
        ...
