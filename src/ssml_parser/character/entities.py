"""Entity decoding and encoding for SSML character content.

Only the three entities ``&lt;``, ``&gt;`` and ``&amp;`` are recognised. Any
other ``&name;`` sequence is left untouched.
"""

from typing import List, Tuple

# Applied in this order, once each. '&amp;' last so '&amp;lt;' yields '&lt;'.
UNESCAPE_SEQUENCE: List[Tuple[str, str]] = [
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&amp;", "&"),
]

# '&' first so the entities produced for '<' and '>' are not re-encoded.
ESCAPE_SEQUENCE: List[Tuple[str, str]] = [
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
]


def unescape(text: str) -> str:
    """Decode the three supported entities in a single pass.

    Examples:
        >>> unescape("a &lt;b&gt; &amp; c")
        'a <b> & c'
        >>> unescape("&amp;lt;")
        '&lt;'
    """
    if "&" not in text:
        return text
    for entity, char in UNESCAPE_SEQUENCE:
        text = text.replace(entity, char)
    return text


def escape(text: str) -> str:
    """Encode ``&``, ``<`` and ``>`` so the text is never read as markup.

    Examples:
        >>> escape("<tag> & more")
        '&lt;tag&gt; &amp; more'
    """
    for char, entity in ESCAPE_SEQUENCE:
        text = text.replace(char, entity)
    return text
