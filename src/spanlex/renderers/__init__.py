"""Renderers turning classified Documents into presentation markup."""

from spanlex.renderers.html import DEFAULT_CLASS_MAP, HtmlRenderer
from spanlex.renderers.protocol import SpanRenderer

__all__ = ["DEFAULT_CLASS_MAP", "HtmlRenderer", "SpanRenderer"]
