# xmldoc/comments/rewriters/lists.py
"""
Rewriter for <list> elements.

The ``type`` attribute selects the output structure:

    type="table":
        <list type="table">
            <listheader><term>Name</term></listheader>
            <item><term>Value</term></item>
        </list>
    becomes
        <table>
            <tr><th>Name</th></tr>
            <tr><td>Value</td></tr>
        </table>

    type="number" (or "bullet" / missing for <ul>):
        <list type="number">
            <item><term>A</term><description>First</description></item>
        </list>
    becomes
        <ol>
            <li><span class="term">A</span><span class="description">First</span></li>
        </ol>
"""

from typing import List

from bs4 import Tag

from ..resolver import add_css_classes
from .context import RewriteContext, rewrite_children

ROW_TAGS = ("listheader", "item")


def _rows(list_element: Tag) -> List[Tag]:
    # Header rows first, then items
    rows = []
    for name in ROW_TAGS:
        rows.extend(list_element.find_all(name, recursive=False))
    return rows


def _rewrite_table(list_element: Tag, context: RewriteContext) -> None:
    list_element.name = "table"
    del list_element["type"]

    for row in _rows(list_element):
        cell_name = "th" if row.name == "listheader" else "td"
        for term in row.find_all("term", recursive=False):
            term.name = cell_name
            rewrite_children(term, context)
        row.name = "tr"


def _rewrite_list(list_element: Tag, list_type: str, context: RewriteContext) -> None:
    list_element.name = "ol" if list_type == "number" else "ul"
    del list_element["type"]

    for row in _rows(list_element):
        for term in row.find_all("term", recursive=False):
            term.name = "span"
            add_css_classes(term, "term")
            rewrite_children(term, context)
        for description in row.find_all("description", recursive=False):
            description.name = "span"
            add_css_classes(description, "description")
            rewrite_children(description, context)
        row.name = "li"


def rewrite_list(parent: Tag, context: RewriteContext) -> None:
    for list_element in parent.find_all("list", recursive=False):
        list_type = list_element.get("type")
        if list_type == "table":
            _rewrite_table(list_element, context)
        else:
            _rewrite_list(list_element, list_type, context)
