"""
Celery tasks for rendering documentation comments asynchronously.

Run a worker with:
    celery -A DocSite worker -l info
"""

from celery import shared_task

from .comments.source import DocumentedSymbol
from .generation import render_symbol


@shared_task
def render_comment_sections(comment_id, name, documentation_xml, crefs=None, css_classes=None):
    """
    Render all sections of one symbol's documentation comment.

    Arguments are plain JSON-serializable values so the task can cross the
    broker.

    Args:
        comment_id: The symbol's comment id, e.g. "T:MyLibrary.Widget"
        name: Display name used in diagnostics
        documentation_xml: Raw comment XML, or None
        crefs: Dict of comment id -> {"link": ..., "display_name": ...}
        css_classes: Dict of tag name -> extra CSS classes

    Returns:
        Dict with the rendered sections plus the comment id
    """
    symbol = DocumentedSymbol(comment_id=comment_id, name=name, documentation_xml=documentation_xml)
    result = render_symbol(symbol, crefs or {}, css_classes or {})
    result["comment_id"] = comment_id
    return result
