"""Attribute parsing for SSML start tags.

Attributes are ``name="value"`` or ``name='value'`` pairs. Unlike HTML there
are no boolean attributes: a name without a quoted value is malformed.
"""

import re
from typing import List, Tuple

from ssml_parser.character import unescape
from ssml_parser.shared.errors import MalformedAttributeError

# One attribute token: a name of word characters and colons, optionally
# followed by '=' and a single- or double-quoted value.
ATTRIBUTE_PATTERN = re.compile(
    r"""\s*([\w:]+)(?:\s*=\s*(?:"([^"]*)"|'([^']*)'))?""",
    re.DOTALL,
)


def parse_attributes(attr_string: str) -> List[Tuple[str, str]]:
    """Parse the raw text between a tag name and ``>`` or ``/>``.

    Values are returned with one layer of quotes removed and entities
    decoded. Order of appearance is kept and duplicates are not merged.

    Args:
        attr_string: Raw attribute text, e.g. `` time="1s" level='strong'``

    Returns:
        List of ``(name, value)`` pairs

    Raises:
        MalformedAttributeError: If a token has no quoted value or the text
            holds characters that cannot start an attribute name
    """
    attr_string = attr_string.strip()
    attributes: List[Tuple[str, str]] = []
    position = 0

    while position < len(attr_string):
        match = ATTRIBUTE_PATTERN.match(attr_string, position)
        if match is None:
            raise MalformedAttributeError(
                "Invalid SSML: Unexpected characters in attribute list",
                attr_string[position:].strip(),
            )

        name, double_quoted, single_quoted = match.groups()
        if double_quoted is None and single_quoted is None:
            raise MalformedAttributeError("Invalid SSML: Attribute without value", name)

        value = double_quoted if double_quoted is not None else single_quoted
        attributes.append((name, unescape(value)))
        position = match.end()

    return attributes
