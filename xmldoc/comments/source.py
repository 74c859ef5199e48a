# xmldoc/comments/source.py
"""
Documentation comment sources.

The transformer only needs an object that can hand back a symbol's raw
comment XML. ``DocumentedSymbol`` is the in-memory form; the compiler's
documentation file (``MyLibrary.xml``) can be read into a list of them:

    <doc>
        <assembly><name>MyLibrary</name></assembly>
        <members>
            <member name="T:MyLibrary.Widget">
                <summary>A widget.</summary>
            </member>
        </members>
    </doc>
"""

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from .exceptions import DocumentationFileError
from .resolver import strip_cref_prefix

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocumentedSymbol:
    """A program symbol together with its raw documentation comment."""

    comment_id: str
    name: str = ""
    documentation_xml: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.name or self.comment_id

    def get_documentation_comment_xml(self) -> Optional[str]:
        return self.documentation_xml


def read_documentation_file(path: Union[str, Path]) -> List[DocumentedSymbol]:
    """
    Read every ``<member>`` of a compiler documentation file.

    Each member's raw comment is the serialized ``<member>`` element itself,
    which the transformer accepts as the comment root.

    Args:
        path: Path to the documentation XML file

    Returns:
        One DocumentedSymbol per member, in file order

    Raises:
        DocumentationFileError: The file is missing or not well-formed
    """
    try:
        tree = ET.parse(path)
    except (OSError, ET.ParseError) as e:
        raise DocumentationFileError(f"Could not read documentation file {path}: {e}") from e

    symbols = []
    for member in tree.getroot().iter("member"):
        comment_id = member.get("name")
        if not comment_id:
            logger.debug(f"Skipping unnamed member in {path}")
            continue

        # The member carries its own tail whitespace; drop it before serializing
        member.tail = None
        symbols.append(
            DocumentedSymbol(
                comment_id=comment_id,
                name=strip_cref_prefix(comment_id),
                documentation_xml=ET.tostring(member, encoding="unicode"),
            )
        )

    logger.debug(f"Read {len(symbols)} documented members from {path}")
    return symbols
