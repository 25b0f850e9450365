"""Error taxonomy for SSML parsing.

Every parse failure is fatal: the first violation found in recursive-descent
order is raised and no partial tree is returned.
"""

from enum import Enum
from typing import Optional

# Max length of the offending fragment kept on an error for diagnostics
FRAGMENT_PREVIEW_LENGTH = 80


class ErrorKind(Enum):
    """Kinds of parse failure."""

    MALFORMED_DOCUMENT = "MalformedDocument"
    INVALID_ROOT = "InvalidRoot"
    MISMATCHED_TAG = "MismatchedTag"
    MALFORMED_ATTRIBUTE = "MalformedAttribute"


class SSMLParseError(Exception):
    """Base exception for all SSML parse failures."""

    kind: ErrorKind

    def __init__(self, message: str, fragment: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        if fragment is not None and len(fragment) > FRAGMENT_PREVIEW_LENGTH:
            fragment = fragment[:FRAGMENT_PREVIEW_LENGTH] + "..."
        self.fragment = fragment

    def __str__(self) -> str:
        if self.fragment is None:
            return self.message
        return f"{self.message}: {self.fragment!r}"


class MalformedDocumentError(SSMLParseError):
    """Input does not start with '<' / end with '>', or holds no tag structure."""

    kind = ErrorKind.MALFORMED_DOCUMENT


class InvalidRootError(SSMLParseError):
    """The top-level element is not the configured root tag."""

    kind = ErrorKind.INVALID_ROOT


class MismatchedTagError(SSMLParseError):
    """Closing tag does not match, appears without an opening, or is missing."""

    kind = ErrorKind.MISMATCHED_TAG


class MalformedAttributeError(SSMLParseError):
    """An attribute token lacks a quoted value assignment."""

    kind = ErrorKind.MALFORMED_ATTRIBUTE
