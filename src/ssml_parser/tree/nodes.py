"""SSML document tree node types.

A tree is made of exactly two node kinds, ``Text`` and ``Element``, joined in
the closed union ``Node``. Nodes are frozen: a tree is built once, bottom-up,
by the tree builder and is never modified afterwards.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union


@dataclass(frozen=True)
class Attribute:
    """A single ``name="value"`` pair on an element."""

    name: str
    value: str

    def __post_init__(self) -> None:
        """Validate attribute values."""
        if not self.name:
            raise ValueError("Attribute name cannot be empty")

    def to_dict(self) -> Dict[str, str]:
        """Convert attribute to dictionary representation."""
        return {"name": self.name, "value": self.value}


@dataclass(frozen=True)
class Text:
    """A run of character content. Owns no children."""

    text: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert text node to dictionary representation."""
        return {"type": "text", "text": self.text}


@dataclass(frozen=True)
class Element:
    """An SSML element with ordered attributes and children.

    Attributes keep their order of appearance and duplicates are preserved;
    ``get_attribute`` and ``attribute_map`` resolve duplicates with the last
    one winning.
    """

    name: str
    attributes: Tuple[Attribute, ...] = field(default_factory=tuple)
    children: Tuple["Node", ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate element values."""
        if not self.name:
            raise ValueError("Element name cannot be empty")
        for attribute in self.attributes:
            if not isinstance(attribute, Attribute):
                raise TypeError("Attributes must be Attribute instances")
        for child in self.children:
            if not isinstance(child, (Text, Element)):
                raise TypeError("Children must be Text or Element instances")

    @property
    def attribute_map(self) -> Dict[str, str]:
        """Attributes as a dict, later duplicates replacing earlier ones."""
        return {attribute.name: attribute.value for attribute in self.attributes}

    @property
    def text_children(self) -> List[Text]:
        """Direct children that are text nodes."""
        return [child for child in self.children if isinstance(child, Text)]

    @property
    def child_elements(self) -> List["Element"]:
        """Direct children that are elements."""
        return [child for child in self.children if isinstance(child, Element)]

    def get_attribute(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get attribute value with optional default."""
        return self.attribute_map.get(name, default)

    def has_attribute(self, name: str) -> bool:
        """Check if element has specific attribute."""
        return any(attribute.name == name for attribute in self.attributes)

    def iter_elements(self) -> Iterator["Element"]:
        """Iterate over this element and all descendant elements in document order."""
        yield self
        for child in self.child_elements:
            yield from child.iter_elements()

    def find(self, name: str) -> Optional["Element"]:
        """Find first descendant element with matching name."""
        for element in self.iter_elements():
            if element is not self and element.name == name:
                return element
        return None

    def find_all(self, name: str) -> List["Element"]:
        """Find all descendant elements with matching name."""
        return [
            element for element in self.iter_elements()
            if element is not self and element.name == name
        ]

    def get_depth(self) -> int:
        """Get the number of element levels below and including this one."""
        return 1 + max((child.get_depth() for child in self.child_elements), default=0)

    def to_dict(self) -> Dict[str, Any]:
        """Convert element to dictionary representation."""
        return {
            "type": "element",
            "name": self.name,
            "attributes": [attribute.to_dict() for attribute in self.attributes],
            "children": [child.to_dict() for child in self.children],
        }


Node = Union[Text, Element]
