# xmldoc/comments/rewriters/context.py
"""State shared by the element rewriters while processing one comment."""

from dataclasses import dataclass, replace

from bs4 import Tag

from ..exceptions import CommentNestingError
from ..registry import CrossReferenceRegistry

DEFAULT_MAX_DEPTH = 200


@dataclass(frozen=True)
class RewriteContext:
    cref_registry: CrossReferenceRegistry
    max_depth: int = DEFAULT_MAX_DEPTH
    depth: int = 0

    def nested(self) -> "RewriteContext":
        """Return a context one level deeper, enforcing the nesting cap."""
        depth = self.depth + 1
        if depth > self.max_depth:
            raise CommentNestingError(self.max_depth)
        return replace(self, depth=depth)


def rewrite_children(element: Tag, context: RewriteContext) -> None:
    """Run the full rewriter pipeline over the children of ``element``."""
    # Imported here to avoid a circular import with the pipeline module
    from . import apply_rewriters

    apply_rewriters(element, context.nested())
