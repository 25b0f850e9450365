"""SSML Parser.

Parses a constrained subset of SSML (Speech Synthesis Markup Language) into an
immutable tree and flattens trees back into plain text, using its own
tokenization and tree building rather than an XML library.

Progressive API Disclosure:
- Level 1: Simple functions - parse(), flatten()
- Level 2: Non-raising parse - parse_document() returning ParseResult
- Level 3: Configured parser - SSMLParser class with ParserConfig
"""

__version__ = "0.1.0"
__author__ = "SSML Parser Team"

from .api import SSMLParser, parse, parse_document
from .character import escape, unescape
from .shared import (
    InvalidRootError,
    MalformedAttributeError,
    MalformedDocumentError,
    MismatchedTagError,
    ParseResult,
    ParserConfig,
    SSMLParseError,
)
from .tree import Attribute, Element, Node, Text, flatten, to_ssml

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Simple parsing functions
    "parse",
    "flatten",

    # Level 2 and 3
    "parse_document",
    "SSMLParser",
    "ParserConfig",
    "ParseResult",

    # Tree nodes
    "Attribute",
    "Element",
    "Node",
    "Text",

    # Markup helpers
    "to_ssml",
    "escape",
    "unescape",

    # Errors
    "SSMLParseError",
    "MalformedDocumentError",
    "InvalidRootError",
    "MismatchedTagError",
    "MalformedAttributeError",
]
