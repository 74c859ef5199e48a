# xmldoc/comments/rewriters/paramref.py
"""
Rewriter for parameter references.

    <paramref name="count"/>  ->  <span name="count" class="paramref">count</span>
"""

from bs4 import Tag

from ..resolver import add_css_classes
from .context import RewriteContext


def rewrite_paramref(parent: Tag, context: RewriteContext) -> None:
    for paramref in parent.find_all("paramref", recursive=False):
        paramref.string = paramref.get("name", "")
        paramref.name = "span"
        add_css_classes(paramref, "paramref")
