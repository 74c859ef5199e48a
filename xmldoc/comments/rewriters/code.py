# xmldoc/comments/rewriters/code.py
"""
Rewriters for code markup.

    <code>block</code>  ->  <pre><code>block</code></pre>
    <c>inline</c>       ->  <code>inline</code>

Block code runs before inline code so that renamed ``<c>`` elements are not
wrapped in a ``<pre>`` as well.
"""

from bs4 import BeautifulSoup, Tag

from .context import RewriteContext

_TAG_FACTORY = BeautifulSoup("", "html.parser")


def rewrite_code(parent: Tag, context: RewriteContext) -> None:
    for code in parent.find_all("code", recursive=False):
        code.wrap(_TAG_FACTORY.new_tag("pre"))


def rewrite_c(parent: Tag, context: RewriteContext) -> None:
    for c in parent.find_all("c", recursive=False):
        c.name = "code"
