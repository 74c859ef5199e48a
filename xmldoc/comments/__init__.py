"""
Documentation comment transformation: XML doc comments to HTML fragments.
"""

from .exceptions import (
    CommentNestingError,
    DocumentationFileError,
    MalformedCommentError,
    XmlDocError,
)
from .parser import KeyedEntry, SectionEntry, XmlDocumentationParser
from .registry import CrefTarget, CrossReferenceRegistry, StylingClassRegistry
from .resolver import resolve_cref_or_name
from .source import DocumentedSymbol, read_documentation_file

__all__ = [
    'CommentNestingError',
    'CrefTarget',
    'CrossReferenceRegistry',
    'DocumentationFileError',
    'DocumentedSymbol',
    'KeyedEntry',
    'MalformedCommentError',
    'SectionEntry',
    'StylingClassRegistry',
    'XmlDocError',
    'XmlDocumentationParser',
    'read_documentation_file',
    'resolve_cref_or_name',
]
