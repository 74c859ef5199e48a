"""Tests for the cross-reference and styling class registries."""

from __future__ import annotations

import json
from concurrent.futures import ThreadPoolExecutor

import pytest

from xmldoc.comments import CrefTarget, CrossReferenceRegistry, DocumentationFileError, StylingClassRegistry
from xmldoc.comments.registry import as_cref_registry, as_styling_registry


class TestCrossReferenceRegistry:
    """CrossReferenceRegistry."""

    def test_lookup(self, crefs) -> None:
        """Registered ids return their target."""
        assert crefs.lookup("T:Foo") == CrefTarget(link="/foo.html", display_name="Foo")
        assert crefs.lookup("T:Missing") is None
        assert "T:Bar" in crefs
        assert len(crefs) == 3

    def test_copy_on_construction(self) -> None:
        """Later changes to the source mapping are not visible."""
        source = {"T:A": CrefTarget("/a.html", "A")}
        registry = CrossReferenceRegistry(source)
        source["T:B"] = CrefTarget("/b.html", "B")
        assert registry.lookup("T:B") is None

    def test_from_dict_accepts_both_spellings(self) -> None:
        """display_name and displayName are both accepted."""
        registry = CrossReferenceRegistry.from_dict(
            {
                "T:A": {"link": "/a.html", "display_name": "A"},
                "T:B": {"link": "/b.html", "displayName": "B"},
            }
        )
        assert registry.lookup("T:A").display_name == "A"
        assert registry.lookup("T:B").display_name == "B"

    def test_from_json(self, tmp_path) -> None:
        """Registries load from JSON files."""
        path = tmp_path / "crefs.json"
        path.write_text(json.dumps({"T:A": {"link": "/a.html", "display_name": "A"}}), encoding="utf-8")
        assert CrossReferenceRegistry.from_json(path).lookup("T:A").link == "/a.html"

    def test_from_json_rejects_lists(self, tmp_path) -> None:
        """A JSON file must hold an object."""
        path = tmp_path / "crefs.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(DocumentationFileError):
            CrossReferenceRegistry.from_json(path)

    def test_from_json_missing_file(self, tmp_path) -> None:
        """A missing file raises DocumentationFileError."""
        with pytest.raises(DocumentationFileError):
            CrossReferenceRegistry.from_json(tmp_path / "missing.json")

    def test_concurrent_reads(self) -> None:
        """Many threads can read the same registry."""
        registry = CrossReferenceRegistry(
            {f"T:Type{i}": CrefTarget(f"/type{i}.html", f"Type{i}") for i in range(200)}
        )
        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(lambda i: registry.lookup(f"T:Type{i}").link, range(200)))
        assert results == [f"/type{i}.html" for i in range(200)]

    def test_as_cref_registry(self, crefs) -> None:
        """Registries, target mappings and plain dicts are all accepted."""
        assert as_cref_registry(crefs) is crefs
        assert len(as_cref_registry(None)) == 0
        assert as_cref_registry({"T:A": CrefTarget("/a", "A")}).lookup("T:A").link == "/a"
        assert as_cref_registry({"T:A": {"link": "/a", "display_name": "A"}}).lookup("T:A").link == "/a"


class TestStylingClassRegistry:
    """StylingClassRegistry."""

    def test_lookup(self) -> None:
        """Blank and missing entries look up as None."""
        registry = StylingClassRegistry({"code": "lang-cs", "pre": " "})
        assert registry.lookup("code") == "lang-cs"
        assert registry.lookup("pre") is None
        assert registry.lookup("table") is None

    def test_as_styling_registry(self) -> None:
        """Mappings are wrapped, registries passed through."""
        registry = StylingClassRegistry({"a": "b"})
        assert as_styling_registry(registry) is registry
        assert as_styling_registry({"a": "b"}).as_dict() == {"a": "b"}
        assert len(as_styling_registry(None)) == 0
