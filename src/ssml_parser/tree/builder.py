"""Core tree building implementation for SSML parsing.

This module validates the document root and then builds the tree by
recursive descent: each slice is matched as one element (or as text), its
attributes are parsed, and its inner content is split into top-level pieces
that are parsed the same way one level down.

Structure is detected on the text as written. Entity references are decoded
only when a Text leaf or an attribute value is produced, so a decoded ``<``
or ``>`` is always character data and never markup.
"""

import re
from typing import List, Optional

from ssml_parser.character import unescape
from ssml_parser.shared import (
    InvalidRootError,
    MalformedDocumentError,
    MismatchedTagError,
    get_logger,
)
from ssml_parser.shared.config import DEFAULT_ROOT_TAG
from ssml_parser.tokenization import parse_attributes, split_content

from .nodes import Attribute, Element, Node, Text

# First opening tag through the *last* closing tag in the document
ROOT_PATTERN = re.compile(r"<\s*(\w+)([^>]*)>(.*)<\s*\/\s*(\w+)\s*>", re.DOTALL)
# One element closed by the first closing tag that repeats its name
ELEMENT_PATTERN = re.compile(r"<\s*(\w+)([^>]*)>(.*?)<\s*\/\s*\1\s*>", re.DOTALL)
SELF_CLOSING_PATTERN = re.compile(r"<\s*(\w+)(.*)\/>", re.DOTALL)


class SSMLTreeBuilder:
    """Builds an SSML tree from a document string.

    A builder counts the nodes it creates, so use one instance per document.

    Examples:
        >>> root = SSMLTreeBuilder().build("<speak>hi<break/></speak>")
        >>> [type(child).__name__ for child in root.children]
        ['Text', 'Element']
    """

    def __init__(
        self,
        root_tag: str = DEFAULT_ROOT_TAG,
        trim_whitespace: bool = True,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize the tree builder.

        Args:
            root_tag: Name the top-level element must carry
            trim_whitespace: Strip surrounding whitespace before validation
            correlation_id: Optional correlation ID for request tracking
        """
        self.root_tag = root_tag
        self.trim_whitespace = trim_whitespace
        self.correlation_id = correlation_id
        self.logger = get_logger(__name__, correlation_id, "tree_builder")
        self.elements_built = 0
        self.text_nodes_built = 0

    def build(self, document: str) -> Element:
        """Validate the document root and build the full tree.

        Raises:
            MalformedDocumentError: Not bracketed by '<' and '>', or no tags
            InvalidRootError: Top-level element is not the root tag
            MismatchedTagError: Root closing tag differs, or nested tags do
                not balance
            MalformedAttributeError: An attribute has no quoted value
        """
        span = self.validate_root(document)
        root = self._parse_node(span)
        if not isinstance(root, Element):
            raise MalformedDocumentError("Invalid SSML: No valid tags found", span)

        self.logger.debug(
            "Tree built",
            extra={
                "elements_built": self.elements_built,
                "text_nodes_built": self.text_nodes_built,
            }
        )
        return root

    def validate_root(self, document: str) -> str:
        """Check the outer document shape and return the span to parse.

        The span runs from the first opening tag to the last closing tag;
        anything after the last closing tag is outside it.
        """
        if self.trim_whitespace:
            document = document.strip()

        if not document.startswith("<") or not document.endswith(">"):
            raise MalformedDocumentError(
                "Invalid SSML: Must start with < and end with >",
                document,
            )

        match = ROOT_PATTERN.search(document)
        if match is None:
            raise MalformedDocumentError("Invalid SSML: No valid tags found", document)

        opening_name = match.group(1)
        closing_name = match.group(4)
        if opening_name != self.root_tag:
            raise InvalidRootError(
                f"Invalid SSML: Root tag must be <{self.root_tag}>",
                opening_name,
            )
        if closing_name != opening_name:
            raise MismatchedTagError(
                "Invalid SSML: Mismatched closing tag or multiple top-level tags",
                f"<{opening_name}> ... </{closing_name}>",
            )

        if match.end() < len(document):
            self.logger.debug(
                "Ignoring content after the root closing tag",
                extra={"ignored_length": len(document) - match.end()}
            )
        return match.group(0)

    def _parse_node(self, fragment: str) -> Node:
        """Parse a slice holding exactly one element or a run of text."""
        # An element slice starts with its opening tag; anything else is text.
        match = ELEMENT_PATTERN.match(fragment)
        if match is None:
            match = SELF_CLOSING_PATTERN.match(fragment)
            if match is None:
                self.text_nodes_built += 1
                return Text(unescape(fragment))
            name, attr_string = match.group(1), match.group(2)
            inner = ""
        else:
            name, attr_string, inner = match.group(1), match.group(2), match.group(3)

        attributes = tuple(
            Attribute(attr_name, value)
            for attr_name, value in parse_attributes(attr_string)
        )
        children = tuple(self._parse_children(inner))

        self.elements_built += 1
        return Element(name=name, attributes=attributes, children=children)

    def _parse_children(self, inner: str) -> List[Node]:
        if "<" not in inner and ">" not in inner:
            if not inner:
                return []
            self.text_nodes_built += 1
            return [Text(unescape(inner))]

        return [self._parse_node(piece) for piece in split_content(inner)]
