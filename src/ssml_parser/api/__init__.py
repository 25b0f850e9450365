"""Public parsing API for the SSML parser."""

from .parser import SSMLParser, parse, parse_document

__all__ = [
    "SSMLParser",
    "parse",
    "parse_document",
]
