# xmldoc/comments/rewriters/__init__.py

from .code import rewrite_c, rewrite_code
from .context import DEFAULT_MAX_DEPTH, RewriteContext, rewrite_children
from .lists import rewrite_list
from .para import rewrite_para
from .paramref import rewrite_paramref
from .see import extract_see_also, rewrite_see

REWRITERS = [
    rewrite_code,  # Wrap block code in <pre>
    rewrite_c,  # Inline code, after block code so it is not wrapped
    rewrite_list,  # Tables, numbered and bulleted lists
    rewrite_para,  # Paragraphs, recursing into their content
    rewrite_paramref,  # Parameter references
    rewrite_see,  # Inline cross-references
    # Order matters - they run sequentially
]

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "REWRITERS",
    "RewriteContext",
    "apply_rewriters",
    "extract_see_also",
    "rewrite_children",
]


def apply_rewriters(parent, context):
    """Apply all rewriters in order to the direct children of ``parent``"""
    for rewriter in REWRITERS:
        rewriter(parent, context)
