# xmldoc/comments/parser.py
"""
Transforms one symbol's XML documentation comment into HTML fragments.

A comment such as

    <member name="M:Widget.Resize(System.Int32)">
        <summary>Resizes the <see cref="T:Widget"/>.</summary>
        <param name="width">New width in <c>px</c>.</param>
        <seealso cref="T:Layout"/>
    </member>

is parsed once, on first access to any section, and every section is
rewritten into HTML:

- <summary>, <remarks>, <example>, <returns>: one entry per occurrence,
  each with the inner HTML and the <seealso> references found directly in it
- <exception>, <permission>: keyed by the resolved cref
- <param>: keyed by the parameter name
- <seealso> directly under the comment root: comment-level see-also list

A comment that is missing yields empty sections. A comment that is not
well-formed XML yields empty sections plus a single warning on the trace;
nothing is ever raised to the caller.
"""

import logging
import re
import xml.etree.ElementTree as ET
from typing import Dict, List, NamedTuple, Tuple

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from .exceptions import MalformedCommentError
from .registry import as_cref_registry, as_styling_registry
from .resolver import apply_css_classes, resolve_cref_or_name
from .rewriters import DEFAULT_MAX_DEPTH, RewriteContext, apply_rewriters, extract_see_also

logger = logging.getLogger(__name__)

# Sections that may appear any number of times and carry their own see-also
SECTION_TAGS = ("example", "remarks", "summary", "returns")
KEYED_TAGS = ("exception", "param", "permission")
COMMENT_TAGS = frozenset(SECTION_TAGS + KEYED_TAGS + ("seealso", "typeparam", "value"))

_WRAPPER_TAG = "xmldoc"
_XML_DECLARATION_RE = re.compile(r"^\s*<\?xml[^>]*\?>")

# Only these serialize as <name/> when empty; everything else gets a closing tag
HTML_VOID_TAGS = frozenset((
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "source", "track", "wbr",
))


class SectionEntry(NamedTuple):
    html: str
    see_also: Tuple[str, ...]


class KeyedEntry(NamedTuple):
    key: str
    html: str


def parse_comment_root(text: str) -> Tag:
    """
    Parse raw comment XML and return the element holding the sections.

    The text is wrapped in a synthetic root so that bare fragments
    (``<summary/><remarks/>``) parse as well as the compiler's single
    ``<member>`` element. When the wrapper holds nothing but one non-section
    element, that element is the comment root.

    Raises:
        MalformedCommentError: The text is not well-formed XML
    """
    text = _XML_DECLARATION_RE.sub("", text, count=1)
    wrapped = f"<{_WRAPPER_TAG}>{text}</{_WRAPPER_TAG}>"

    # bs4 tree builders recover from anything, so well-formedness is checked strictly first
    try:
        ET.fromstring(wrapped)
    except ET.ParseError as e:
        raise MalformedCommentError(str(e)) from e

    # XML builder: names keep their case and HTML void names such as <param> keep their content
    soup = BeautifulSoup(wrapped, "xml")
    root = soup.find(_WRAPPER_TAG)

    elements = root.find_all(True, recursive=False)
    has_text = any(
        isinstance(child, NavigableString) and not isinstance(child, PreformattedString) and child.strip()
        for child in root.children
    )
    if len(elements) == 1 and not has_text and elements[0].name not in COMMENT_TAGS:
        return elements[0]
    return root


def html_fragment(element: Tag) -> str:
    """Serialize the children of an XML-built element as HTML."""
    for tag in element.find_all(True):
        tag.can_be_empty_element = tag.name in HTML_VOID_TAGS
    return element.decode_contents()


class XmlDocumentationParser:
    """
    Lazily transforms the documentation comment of a single symbol.

    One instance belongs to one symbol and one generation task; it is not
    safe to call its getters from several threads at once. The registries
    are shared and only ever read.

    Args:
        symbol: Object with ``get_documentation_comment_xml()`` and a
            ``display_name`` (or ``name``) used in diagnostics; may be None
        cref_registry: CrossReferenceRegistry or a mapping accepted by it
        css_classes: StylingClassRegistry or a tag -> classes mapping
        trace: Diagnostic sink with a ``warning(message)`` method; defaults
            to this module's logger
        max_depth: Maximum nesting of rewritten markup
    """

    def __init__(self, symbol, cref_registry=None, css_classes=None, trace=None,
                 max_depth: int = DEFAULT_MAX_DEPTH):
        self._symbol = symbol
        self._cref_registry = as_cref_registry(cref_registry)
        self._css_classes = as_styling_registry(css_classes)
        self._trace = trace or logger
        self._max_depth = max_depth
        self._parsed = False

        self._example: Tuple[SectionEntry, ...] = ()
        self._remarks: Tuple[SectionEntry, ...] = ()
        self._summary: Tuple[SectionEntry, ...] = ()
        self._returns: Tuple[SectionEntry, ...] = ()
        self._exceptions: Tuple[KeyedEntry, ...] = ()
        self._params: Tuple[KeyedEntry, ...] = ()
        self._permissions: Tuple[KeyedEntry, ...] = ()
        self._see_also: Tuple[str, ...] = ()

    @property
    def parsed(self) -> bool:
        return self._parsed

    def summary(self) -> Tuple[SectionEntry, ...]:
        self._parse()
        return self._summary

    def remarks(self) -> Tuple[SectionEntry, ...]:
        self._parse()
        return self._remarks

    def example(self) -> Tuple[SectionEntry, ...]:
        self._parse()
        return self._example

    def returns(self) -> Tuple[SectionEntry, ...]:
        self._parse()
        return self._returns

    def exceptions(self) -> Tuple[KeyedEntry, ...]:
        self._parse()
        return self._exceptions

    def params(self) -> Tuple[KeyedEntry, ...]:
        self._parse()
        return self._params

    def permissions(self) -> Tuple[KeyedEntry, ...]:
        self._parse()
        return self._permissions

    def see_also(self) -> Tuple[str, ...]:
        self._parse()
        return self._see_also

    def section(self, name: str) -> Tuple[SectionEntry, ...]:
        """Return one of the repeatable sections by tag name."""
        if name not in SECTION_TAGS:
            raise ValueError(f"Unknown section '{name}', expected one of {', '.join(SECTION_TAGS)}")
        return getattr(self, name)()

    def to_dict(self) -> Dict[str, list]:
        """All sections as plain, JSON-serializable data."""
        data = {}
        for name in SECTION_TAGS:
            data[name] = [
                {"html": entry.html, "see_also": list(entry.see_also)} for entry in self.section(name)
            ]
        data["exceptions"] = [entry._asdict() for entry in self.exceptions()]
        data["params"] = [entry._asdict() for entry in self.params()]
        data["permissions"] = [entry._asdict() for entry in self.permissions()]
        data["see_also"] = list(self.see_also())
        return data

    def _symbol_name(self) -> str:
        name = getattr(self._symbol, "display_name", None) or getattr(self._symbol, "name", None)
        return name or str(self._symbol)

    def _parse(self) -> None:
        if self._parsed:
            return
        self._parsed = True

        if self._symbol is None:
            return

        try:
            text = self._symbol.get_documentation_comment_xml()
            if not text or not text.strip():
                return
            root = parse_comment_root(text)
            example = self._process_sections(root, "example")
            remarks = self._process_sections(root, "remarks")
            summary = self._process_sections(root, "summary")
            exceptions = self._process_cref_elements(root, "exception")
            params = self._process_param_elements(root)
            permissions = self._process_cref_elements(root, "permission")
            returns = self._process_sections(root, "returns")
            see_also = tuple(extract_see_also(root, self._cref_registry))
        except Exception as e:
            # Malformed or over-nested markup leaves every section empty
            self._trace.warning(f"Could not parse XML documentation comments for {self._symbol_name()}: {e}")
            return

        self._example = example
        self._remarks = remarks
        self._summary = summary
        self._returns = returns
        self._exceptions = exceptions
        self._params = params
        self._permissions = permissions
        self._see_also = see_also
        logger.debug(
            f"Parsed documentation for {self._symbol_name()}: "
            f"{len(summary)} summary, {len(remarks)} remarks, {len(example)} example, "
            f"{len(returns)} returns, {len(params)} param, {len(exceptions)} exception entries"
        )

    def _render(self, element: Tag) -> str:
        apply_rewriters(element, RewriteContext(self._cref_registry, self._max_depth))
        apply_css_classes(element, self._css_classes)
        return html_fragment(element)

    # <example>, <remarks>, <summary>, <returns>
    def _process_sections(self, root: Tag, name: str) -> Tuple[SectionEntry, ...]:
        entries: List[SectionEntry] = []
        for element in root.find_all(name, recursive=False):
            see_also = extract_see_also(element, self._cref_registry)
            entries.append(SectionEntry(self._render(element), tuple(see_also)))
        return tuple(entries)

    # <exception>, <permission>
    def _process_cref_elements(self, root: Tag, name: str) -> Tuple[KeyedEntry, ...]:
        entries = []
        for element in root.find_all(name, recursive=False):
            key, _ = resolve_cref_or_name(element, self._cref_registry)
            entries.append(KeyedEntry(key, self._render(element)))
        return tuple(entries)

    # <param>
    def _process_param_elements(self, root: Tag) -> Tuple[KeyedEntry, ...]:
        entries = []
        for element in root.find_all("param", recursive=False):
            entries.append(KeyedEntry(element.get("name", ""), self._render(element)))
        return tuple(entries)
