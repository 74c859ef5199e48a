# xmldoc/comments/rewriters/see.py
"""
Rewriters for cross-references.

``<see cref="..."/>`` is replaced in place by a link (registered ids) or by
the bare name. ``<seealso>`` is never rendered inline: the transformer pulls
it out of a section with ``extract_see_also`` before the other rewriters run.
"""

from typing import List

from bs4 import NavigableString, Tag

from ..registry import CrossReferenceRegistry
from ..resolver import lookup_cref, make_link, resolve_cref_or_name
from .context import RewriteContext


def rewrite_see(parent: Tag, context: RewriteContext) -> None:
    for see in parent.find_all("see", recursive=False):
        target = lookup_cref(see, context.cref_registry)
        if target is not None:
            see.replace_with(make_link(target))
        else:
            name, _ = resolve_cref_or_name(see, context.cref_registry)
            see.replace_with(NavigableString(name))


def extract_see_also(parent: Tag, registry: CrossReferenceRegistry) -> List[str]:
    """
    Resolve and remove the direct ``<seealso>`` children of ``parent``.

    Returns the resolved links or names in document order. Nested
    ``<seealso>`` elements (inside a paragraph, for example) are left alone.
    """
    see_also = []
    for element in parent.find_all("seealso", recursive=False):
        text, _ = resolve_cref_or_name(element, registry)
        see_also.append(text)
        element.decompose()
    return see_also
