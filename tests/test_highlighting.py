"""Tests for the Highlighter protocol integration."""

import pytest

from spanlex import HtmlRenderer, classify
from spanlex.config import HighlightConfig
from spanlex.highlighting import (
    ScriptHighlighter,
    get_highlighter,
    has_highlighter,
    highlight,
    set_highlighter,
)


@pytest.fixture(autouse=True)
def _restore_highlighter():
    yield
    set_highlighter(None)


class TestScriptHighlighter:
    @pytest.mark.parametrize(
        "language", ["javascript", "js", "JSX", "mjs", "cjs", "typescript", " ts ", "tsx"]
    )
    def test_supported_languages(self, language: str) -> None:
        assert ScriptHighlighter().supports_language(language)

    @pytest.mark.parametrize("language", ["python", "", "java", "json"])
    def test_unsupported_languages(self, language: str) -> None:
        assert not ScriptHighlighter().supports_language(language)

    def test_highlight_matches_renderer(self) -> None:
        html = ScriptHighlighter().highlight("let a = 1", "js")
        assert html == HtmlRenderer().render_code_block(classify("let a = 1"), language="js")

    def test_line_options_forwarded(self) -> None:
        html = ScriptHighlighter().highlight("a\nb", "ts", hl_lines=[1], show_linenos=True)
        assert '<span class="hll"><span class="lineno">1</span>a</span>' in html
        assert '<span class="lineno">2</span>b' in html

    def test_unsupported_language_is_escaped_plain(self) -> None:
        html = ScriptHighlighter().highlight("if a < b:", "python")
        assert html == (
            '<div class="code-block"><pre><code class="language-python">'
            "if a &lt; b:</code></pre></div>"
        )
        assert "hl-kw" not in html

    def test_config_is_used(self) -> None:
        hl = ScriptHighlighter(config=HighlightConfig(trim_snippet=True))
        assert hl.classify("\n  let a\n").source == "let a"

    def test_never_raises_on_odd_input(self) -> None:
        assert ScriptHighlighter().highlight("'\"`//\\", "js").startswith("<div")


class TestModuleLevelHooks:
    def test_default_is_script_highlighter(self) -> None:
        assert not has_highlighter()
        assert isinstance(get_highlighter(), ScriptHighlighter)
        assert 'class="hl-kw"' in highlight("const a", "javascript")

    def test_simple_callable_override(self) -> None:
        set_highlighter(lambda code, language: f"<{language}>{code}")
        assert has_highlighter()
        assert highlight("x", "js") == "<js>x"

    def test_protocol_override(self) -> None:
        class Upper:
            def highlight(self, code, language, *, hl_lines=None, show_linenos=False):  # type: ignore[no-untyped-def]
                return code.upper()

            def supports_language(self, language):  # type: ignore[no-untyped-def]
                return True

        set_highlighter(Upper())
        assert highlight("abc", "js") == "ABC"

    def test_reset(self) -> None:
        set_highlighter(lambda code, language: code)
        set_highlighter(None)
        assert not has_highlighter()
