"""Tokenization layer for the SSML parser.

Key Components:
    parse_attributes: Turns the raw attribute text of a tag into name/value pairs
    split_content: Splits element content into top-level text and child pieces
    tokenize_content: Splits content on tag boundaries into typed fragments
    Fragment / FragmentType: A classified tag or text fragment
"""

from .attributes import parse_attributes
from .splitter import (
    Fragment,
    FragmentType,
    classify_fragment,
    split_content,
    tokenize_content,
)

__all__ = [
    "parse_attributes",
    "Fragment",
    "FragmentType",
    "classify_fragment",
    "split_content",
    "tokenize_content",
]
