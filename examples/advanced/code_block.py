"""Render a labelled code block with a copy payload, as a docs page would."""

from spanlex import HtmlRenderer, SnippetHighlighter
from spanlex.highlighting import highlight

SNIPPET = """
import { useState } from "react";

export function Counter(): Element {
  const [count, setCount] = useState(0);
  return { label: "count", value: count };
}
"""

hl = SnippetHighlighter(trim=True, max_line_length=500)
doc = hl.classify(SNIPPET)

print(HtmlRenderer().render_code_block(doc, header="counter.tsx", language="tsx", hl_lines=[4]))
print()
print("Copy payload:")
print(hl.copy_text(SNIPPET))
print()

# Same grammar through the fenced-code highlighter protocol
print(highlight("let ready = true", "js", show_linenos=True))
