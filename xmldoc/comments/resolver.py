# xmldoc/comments/resolver.py
"""
Cross-reference resolution and styling class augmentation.

Cross-reference attributes use the compiler's comment id format,
``<kind>:<id>`` (``T:`` types, ``M:`` methods, ``P:`` properties, ...).
A registered id resolves to an anchor; anything else degrades to the id with
its kind prefix removed. Resolution never fails.
"""

from typing import List, Optional, Tuple

from bs4 import BeautifulSoup, Tag

from .registry import CrefTarget, CrossReferenceRegistry, StylingClassRegistry

CREF_ATTRIBUTE = "cref"

# Used only as a tag factory, never rendered
_TAG_FACTORY = BeautifulSoup("", "html.parser")


def strip_cref_prefix(cref: str) -> str:
    """Drop everything up to and including the first colon."""
    return cref[cref.find(":") + 1:]


def lookup_cref(element: Tag, registry: CrossReferenceRegistry) -> Optional[CrefTarget]:
    cref = element.get(CREF_ATTRIBUTE)
    if cref is None:
        return None
    return registry.lookup(cref)


def make_link(target: CrefTarget) -> Tag:
    """Create a detached ``<a>`` tag pointing at a registry target."""
    link = _TAG_FACTORY.new_tag("a", href=target.link)
    link.string = target.display_name
    return link


def resolve_cref_or_name(element: Tag, registry: CrossReferenceRegistry) -> Tuple[str, bool]:
    """
    Resolve the ``cref`` attribute of an element.

    Args:
        element: Element that may carry a ``cref`` attribute
        registry: Cross-reference registry to resolve against

    Returns:
        ``(markup, True)`` with an anchor fragment when the id is registered,
        ``(name, False)`` with the prefix-stripped id when it is not, and
        ``("", False)`` when the element has no ``cref`` at all.
    """
    cref = element.get(CREF_ATTRIBUTE)
    if cref is None:
        return "", False

    target = registry.lookup(cref)
    if target is not None:
        return str(make_link(target)), True

    return strip_cref_prefix(cref), False


def _class_list(element: Tag) -> List[str]:
    existing = element.get("class", [])
    if isinstance(existing, str):
        existing = existing.split()
    return list(existing)


def add_css_classes(element: Tag, classes: str) -> None:
    """Append classes to an element's class attribute, creating it if absent."""
    element["class"] = _class_list(element) + classes.split()


def apply_css_classes(root: Tag, registry: StylingClassRegistry) -> None:
    """
    Add configured classes to every element below ``root``.

    The root itself is not styled; only its descendants are.
    """
    for element in root.find_all(True):
        classes = registry.lookup(element.name)
        if classes:
            add_css_classes(element, classes)
