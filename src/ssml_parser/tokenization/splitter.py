"""Single-level content splitting for SSML elements.

The splitter breaks an element's inner content into its top-level pieces:
runs of text and complete child elements. A child with nested markup is kept
as one piece from its opening tag through its matching closing tag, so the
tree builder can recurse into it one level at a time.
"""

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional

from ssml_parser.shared.errors import MismatchedTagError

TAG_BOUNDARY_PATTERN = re.compile(r"(<[^>]+>)")
CLOSING_TAG_PATTERN = re.compile(r"<\s*/\s*(\w+)\s*>")
SELF_CLOSING_TAG_PATTERN = re.compile(r"<\s*(\w+).*/>", re.DOTALL)
OPENING_TAG_PATTERN = re.compile(r"<\s*(\w+)[^>]*>")


class FragmentType(Enum):
    """Kinds of fragment produced by splitting on tag boundaries."""

    OPENING_TAG = auto()        # <name attrs>
    CLOSING_TAG = auto()        # </name>
    SELF_CLOSING_TAG = auto()   # <name attrs/>
    TEXT = auto()               # Character content, or a bracket run that is no tag


@dataclass(frozen=True)
class Fragment:
    """A bare tag or a run of text taken from element content."""

    type: FragmentType
    value: str
    name: Optional[str] = None

    @property
    def is_tag(self) -> bool:
        """Check if this fragment is markup rather than text."""
        return self.type != FragmentType.TEXT


def classify_fragment(value: str) -> Fragment:
    """Classify one piece of content as a tag or as text."""
    if value.startswith("<") and value.endswith(">"):
        match = CLOSING_TAG_PATTERN.fullmatch(value)
        if match:
            return Fragment(FragmentType.CLOSING_TAG, value, match.group(1))
        match = SELF_CLOSING_TAG_PATTERN.fullmatch(value)
        if match:
            return Fragment(FragmentType.SELF_CLOSING_TAG, value, match.group(1))
        match = OPENING_TAG_PATTERN.fullmatch(value)
        if match:
            return Fragment(FragmentType.OPENING_TAG, value, match.group(1))
    return Fragment(FragmentType.TEXT, value)


def tokenize_content(content: str) -> List[Fragment]:
    """Split content on tag boundaries into ordered fragments.

    Examples:
        >>> [f.type.name for f in tokenize_content("a<b/>c")]
        ['TEXT', 'SELF_CLOSING_TAG', 'TEXT']
    """
    return [
        classify_fragment(part)
        for part in TAG_BOUNDARY_PATTERN.split(content)
        if part
    ]


def split_content(content: str) -> List[str]:
    """Split inner content into its top-level child pieces.

    Scans the fragments once with a single "currently open child" cursor.
    Fragments seen while a child is open are appended to it verbatim; the
    child ends at the first closing tag whose name equals the cursor.

    Args:
        content: Inner content of one element

    Returns:
        Ordered list of substrings, each either a run of text or one
        complete child element

    Raises:
        MismatchedTagError: If a closing tag appears while no child is open,
            or a child is still open when the content ends
    """
    pieces: List[str] = []
    open_name: Optional[str] = None
    last_was_text = False

    for fragment in tokenize_content(content):
        if open_name is not None:
            pieces[-1] += fragment.value
            if (
                fragment.type == FragmentType.CLOSING_TAG
                and fragment.name == open_name
            ):
                open_name = None
            continue

        if fragment.type == FragmentType.CLOSING_TAG:
            raise MismatchedTagError(
                "Invalid SSML: Closing tag without matching opening tag",
                fragment.value,
            )
        if fragment.type == FragmentType.TEXT:
            if last_was_text:
                pieces[-1] += fragment.value
            else:
                pieces.append(fragment.value)
            last_was_text = True
            continue

        pieces.append(fragment.value)
        last_was_text = False
        if fragment.type == FragmentType.OPENING_TAG:
            open_name = fragment.name

    if open_name is not None:
        raise MismatchedTagError(
            f"Invalid SSML: Tag <{open_name}> is never closed",
            pieces[-1],
        )

    return pieces
