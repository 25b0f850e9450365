"""Tree building engine for the SSML parser.

Key Components:
    SSMLTreeBuilder: Validates the root and builds the tree by recursive descent
    Element / Text / Attribute: Immutable node types; ``Node`` is their union
    flatten: Concatenates all text leaves in document order
    to_ssml / format_tree: Render a tree as markup or as an outline
"""

from .builder import SSMLTreeBuilder
from .flatten import flatten
from .nodes import Attribute, Element, Node, Text
from .serialize import format_tree, to_ssml

__all__ = [
    "SSMLTreeBuilder",
    "flatten",
    "Attribute",
    "Element",
    "Node",
    "Text",
    "format_tree",
    "to_ssml",
]
