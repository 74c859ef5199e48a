# xmldoc/comments/registry.py
"""
Shared lookup tables consulted while transforming comments.

Both registries are populated once, before any comment is transformed, and
are read-only afterwards. The backing mapping is copied on construction and
exposed through a ``MappingProxyType`` so that many transformers running on
different threads can read them without locking.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Union

from .exceptions import DocumentationFileError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CrefTarget:
    """Destination of a resolved cross-reference."""

    link: str
    display_name: str


class CrossReferenceRegistry:
    """
    Maps comment ids (``T:Foo.Bar``, ``M:Foo.Bar.Baz(System.Int32)``) to the
    page that documents them.
    """

    def __init__(self, targets: Optional[Mapping[str, CrefTarget]] = None):
        self._targets = MappingProxyType(dict(targets or {}))

    @classmethod
    def from_dict(cls, data: Mapping[str, Mapping[str, str]]) -> "CrossReferenceRegistry":
        """
        Build a registry from plain dictionaries.

        Each value needs a ``link`` and a display name under either
        ``display_name`` or ``displayName``.
        """
        targets = {}
        for comment_id, value in data.items():
            display_name = value.get("display_name", value.get("displayName", ""))
            targets[comment_id] = CrefTarget(link=value.get("link", ""), display_name=display_name)
        return cls(targets)

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "CrossReferenceRegistry":
        """Load a registry from a JSON file produced by the link computation step."""
        try:
            with open(path, encoding="utf-8") as handle:
                data = json.load(handle)
        except (OSError, ValueError) as e:
            raise DocumentationFileError(f"Could not read cross-reference file {path}: {e}") from e

        if not isinstance(data, dict):
            raise DocumentationFileError(f"Cross-reference file {path} must contain a JSON object")

        registry = cls.from_dict(data)
        logger.debug(f"Loaded {len(registry)} cross-references from {path}")
        return registry

    def lookup(self, comment_id: str) -> Optional[CrefTarget]:
        return self._targets.get(comment_id)

    def __contains__(self, comment_id: object) -> bool:
        return comment_id in self._targets

    def __len__(self) -> int:
        return len(self._targets)

    def __iter__(self) -> Iterator[str]:
        return iter(self._targets)


class StylingClassRegistry:
    """Maps an output tag name to extra CSS classes (space-separated)."""

    def __init__(self, classes: Optional[Mapping[str, str]] = None):
        self._classes = MappingProxyType(dict(classes or {}))

    def lookup(self, tag_name: str) -> Optional[str]:
        classes = self._classes.get(tag_name)
        if not classes or not classes.strip():
            return None
        return classes

    def as_dict(self) -> Dict[str, str]:
        return dict(self._classes)

    def __len__(self) -> int:
        return len(self._classes)


def as_cref_registry(value) -> CrossReferenceRegistry:
    """Accept a registry, a mapping of ``CrefTarget`` or a mapping of dicts."""
    if isinstance(value, CrossReferenceRegistry):
        return value
    if not value:
        return CrossReferenceRegistry()
    if all(isinstance(target, CrefTarget) for target in value.values()):
        return CrossReferenceRegistry(value)
    return CrossReferenceRegistry.from_dict(value)


def as_styling_registry(value) -> StylingClassRegistry:
    if isinstance(value, StylingClassRegistry):
        return value
    return StylingClassRegistry(value)
