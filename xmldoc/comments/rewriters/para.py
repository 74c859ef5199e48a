# xmldoc/comments/rewriters/para.py
"""Rewriter for <para> blocks, which may hold any other supported markup."""

from bs4 import Tag

from .context import RewriteContext, rewrite_children


def rewrite_para(parent: Tag, context: RewriteContext) -> None:
    for para in parent.find_all("para", recursive=False):
        para.name = "p"
        rewrite_children(para, context)
