"""
Parallel generation pass over many documented symbols.

Each symbol gets its own XmlDocumentationParser, owned by exactly one worker
task. The cross-reference and styling registries are built once and shared
read-only across all workers.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, Iterable, List, Optional

from .comments.parser import XmlDocumentationParser
from .comments.registry import as_cref_registry, as_styling_registry
from .comments.rewriters import DEFAULT_MAX_DEPTH

logger = logging.getLogger(__name__)


def empty_sections() -> Dict[str, list]:
    """The rendered form of a symbol without usable documentation."""
    return XmlDocumentationParser(None).to_dict()


def render_symbol(symbol, cref_registry, css_classes, trace=None,
                  max_depth: int = DEFAULT_MAX_DEPTH) -> Dict[str, list]:
    """Render every section of one symbol's documentation comment."""
    try:
        parser = XmlDocumentationParser(symbol, cref_registry, css_classes, trace=trace, max_depth=max_depth)
        return parser.to_dict()
    except Exception as e:
        logger.error(f"Rendering documentation for {getattr(symbol, 'comment_id', symbol)} failed: {e}", exc_info=True)
        return empty_sections()


def render_symbols(
    symbols: Iterable,
    cref_registry=None,
    css_classes=None,
    workers: int = 4,
    trace=None,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Dict[str, Dict[str, list]]:
    """
    Render the documentation of many symbols concurrently.

    Args:
        symbols: DocumentedSymbol instances (anything with ``comment_id`` and
            ``get_documentation_comment_xml()``)
        cref_registry: Shared cross-reference registry or mapping
        css_classes: Shared styling class registry or mapping
        workers: Number of worker threads
        trace: Diagnostic sink passed to every parser
        max_depth: Maximum nesting of rewritten markup

    Returns:
        Dict of comment id -> rendered sections, in input order
    """
    symbols: List = list(symbols)
    cref_registry = as_cref_registry(cref_registry)
    css_classes = as_styling_registry(css_classes)

    with ThreadPoolExecutor(max_workers=max(1, workers)) as executor:
        results = executor.map(
            lambda symbol: render_symbol(symbol, cref_registry, css_classes, trace, max_depth),
            symbols,
        )
        rendered = {symbol.comment_id: result for symbol, result in zip(symbols, results)}

    logger.debug(f"Rendered documentation for {len(rendered)} symbols with {workers} workers")
    return rendered


def select_symbols(symbols: Iterable, comment_id: Optional[str] = None) -> List:
    if comment_id is None:
        return list(symbols)
    return [symbol for symbol in symbols if symbol.comment_id == comment_id]
