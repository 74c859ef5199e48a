"""Tests for the parallel generation pass and the Celery task."""

from __future__ import annotations

from xmldoc.comments import DocumentedSymbol, XmlDocumentationParser
from xmldoc.generation import empty_sections, render_symbol, render_symbols, select_symbols
from xmldoc.tasks import render_comment_sections


def _symbols(count: int):
    symbols = []
    for i in range(count):
        xml = f'<summary>Type {i} uses <see cref="T:Foo"/>.</summary>'
        if i % 10 == 3:
            xml = "<summary>broken"
        symbols.append(DocumentedSymbol(comment_id=f"T:Type{i}", name=f"Type{i}", documentation_xml=xml))
    return symbols


class TestRenderSymbols:
    """render_symbols()."""

    def test_results_follow_input_order(self, crefs, trace) -> None:
        """Every symbol is rendered, keyed and ordered by comment id."""
        symbols = _symbols(40)
        rendered = render_symbols(symbols, crefs, {"a": "ref"}, workers=4, trace=trace)
        assert list(rendered) == [symbol.comment_id for symbol in symbols]
        assert rendered["T:Type0"]["summary"][0]["html"] == 'Type 0 uses <a href="/foo.html" class="ref">Foo</a>.'

    def test_bad_comments_are_isolated(self, crefs, trace) -> None:
        """Malformed comments render empty without stopping the pass."""
        rendered = render_symbols(_symbols(40), crefs, workers=4, trace=trace)
        assert rendered["T:Type3"] == empty_sections()
        assert rendered["T:Type4"]["summary"]
        assert len(trace.warnings) == 4

    def test_single_worker(self, crefs) -> None:
        """A worker count below one still runs."""
        rendered = render_symbols(_symbols(2), crefs, workers=0)
        assert len(rendered) == 2

    def test_render_symbol_contains_unexpected_errors(self, crefs) -> None:
        """An exception from the source yields empty sections."""

        class ExplodingSymbol:
            comment_id = "T:Boom"
            name = "Boom"

            def get_documentation_comment_xml(self):
                raise RuntimeError("source unavailable")

        assert render_symbol(ExplodingSymbol(), crefs, {}) == empty_sections()

    def test_render_failure_without_comment_id(self, crefs, monkeypatch, caplog) -> None:
        """A failing symbol without a comment id is logged as itself."""

        class ExplodingParser(XmlDocumentationParser):
            def to_dict(self):
                if self._symbol is None:
                    return super().to_dict()
                raise RuntimeError("render failed")

        monkeypatch.setattr("xmldoc.generation.XmlDocumentationParser", ExplodingParser)

        with caplog.at_level("ERROR", logger="xmldoc.generation"):
            result = render_symbol("T:Bare", crefs, {})

        monkeypatch.undo()
        assert result == empty_sections()
        assert "Rendering documentation for T:Bare failed: render failed" in caplog.text

    def test_select_symbols(self) -> None:
        """Symbols can be filtered by comment id."""
        symbols = _symbols(3)
        assert select_symbols(symbols) == symbols
        assert select_symbols(symbols, "T:Type1") == [symbols[1]]
        assert select_symbols(symbols, "T:Nope") == []


class TestRenderCommentSectionsTask:
    """The Celery task, called synchronously."""

    def test_task_renders_sections(self) -> None:
        """The task takes and returns plain data."""
        result = render_comment_sections(
            "T:Widget",
            "Widget",
            '<summary><c>x</c></summary><seealso cref="T:Foo"/>',
            {"T:Foo": {"link": "/foo.html", "display_name": "Foo"}},
            {"code": "lang-cs"},
        )
        assert result["comment_id"] == "T:Widget"
        assert result["summary"] == [{"html": '<code class="lang-cs">x</code>', "see_also": []}]
        assert result["see_also"] == ['<a href="/foo.html">Foo</a>']

    def test_task_without_comment(self) -> None:
        """A missing comment gives empty sections."""
        result = render_comment_sections("T:Widget", "Widget", None)
        assert result["summary"] == []
        assert result["params"] == []
