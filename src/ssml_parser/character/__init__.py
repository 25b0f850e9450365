"""Character processing layer for the SSML parser.

Decodes and encodes the entity references supported in SSML text and
attribute values.
"""

from .entities import escape, unescape

__all__ = [
    "escape",
    "unescape",
]
