# xmldoc/comments/exceptions.py
"""Exceptions raised while reading and transforming documentation comments."""


class XmlDocError(Exception):
    """Base class for all documentation comment errors."""


class MalformedCommentError(XmlDocError):
    """The raw comment text is not well-formed XML."""


class CommentNestingError(XmlDocError):
    """The comment markup is nested deeper than the configured limit."""

    def __init__(self, max_depth: int):
        super().__init__(f"Markup nesting exceeds the maximum depth of {max_depth}")
        self.max_depth = max_depth


class DocumentationFileError(XmlDocError):
    """A compiler documentation file could not be read."""
