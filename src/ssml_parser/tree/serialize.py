"""Rendering of SSML trees back to markup and to a readable outline."""

import json
from typing import List

from ssml_parser.character import escape

from .nodes import Attribute, Element, Node, Text


def _format_attribute(attribute: Attribute) -> str:
    value = escape(attribute.value)
    if '"' not in value:
        return f'{attribute.name}="{value}"'
    if "'" not in value:
        return f"{attribute.name}='{value}'"
    raise ValueError(
        f"Attribute {attribute.name!r} mixes both quote characters and cannot be "
        "serialized"
    )


def to_ssml(node: Node) -> str:
    """Render a tree as SSML markup.

    Text is entity-escaped and childless elements below ``node`` are written
    self-closing, so parsing the output gives back an equal tree. ``node``
    itself always gets a closing tag.

    Examples:
        >>> to_ssml(Element("speak", children=(Text("a < b"),)))
        '<speak>a &lt; b</speak>'
        >>> to_ssml(Element("speak"))
        '<speak></speak>'
    """
    if isinstance(node, Text):
        return escape(node.text)
    return _render_element(node, self_closing=False)


def _render_element(element: Element, self_closing: bool = True) -> str:
    attrs = "".join(" " + _format_attribute(attr) for attr in element.attributes)
    if not element.children and self_closing:
        return f"<{element.name}{attrs}/>"
    inner = "".join(
        escape(child.text) if isinstance(child, Text) else _render_element(child)
        for child in element.children
    )
    return f"<{element.name}{attrs}>{inner}</{element.name}>"


def format_tree(node: Node, indent: int = 2) -> str:
    """Render a tree as an indented outline, one node per line.

    Examples:
        >>> print(format_tree(Element("speak", children=(Text("hi"),))))
        <speak>
          "hi"
    """
    lines: List[str] = []

    def _walk(current: Node, depth: int) -> None:
        prefix = " " * (indent * depth)
        if isinstance(current, Text):
            lines.append(prefix + json.dumps(current.text, ensure_ascii=False))
            return
        attrs = "".join(" " + _format_attribute(attr) for attr in current.attributes)
        lines.append(f"{prefix}<{current.name}{attrs}>")
        for child in current.children:
            _walk(child, depth + 1)

    _walk(node, 0)
    return "\n".join(lines)
