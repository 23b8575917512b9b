"""Classify and render a snippet in 2 lines, zero deps."""

from spanlex import classify, render

doc = classify("const greeting = `Hello ${name}`; // says hi")
print(render(doc))

for span in doc[0]:
    print(f"{span.category.name:<16} {span.text!r}")
