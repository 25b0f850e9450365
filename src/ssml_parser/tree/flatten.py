"""Flattening of SSML trees to plain text."""

from .nodes import Element, Node, Text


def flatten(node: Node) -> str:
    """Concatenate every text leaf under ``node`` in document order.

    Tags are dropped and whitespace is kept exactly as parsed. Total over
    ``Node``; any other input is a caller error.

    Raises:
        TypeError: If ``node`` is neither a Text nor an Element

    Examples:
        >>> flatten(Element("s", children=(Text("a"), Element("b"), Text("c"))))
        'ac'
    """
    if isinstance(node, Text):
        return node.text
    if isinstance(node, Element):
        return "".join(flatten(child) for child in node.children)
    raise TypeError(f"Expected Text or Element, got {type(node).__name__}")
