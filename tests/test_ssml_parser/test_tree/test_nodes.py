"""Tests for the immutable node types."""

from dataclasses import FrozenInstanceError

import pytest

from ssml_parser.tree import Attribute, Element, Text


def _sample_tree() -> Element:
    return Element(
        name="speak",
        children=(
            Text("Hello "),
            Element(
                name="s",
                attributes=(Attribute("id", "1"),),
                children=(
                    Element(name="emphasis", children=(Text("there"),)),
                    Element(name="break", attributes=(Attribute("time", "1s"),)),
                ),
            ),
            Element(name="s", attributes=(Attribute("id", "2"),), children=(Text("!"),)),
        ),
    )


class TestElement:
    """Test Element construction, validation and navigation."""

    def test_defaults(self) -> None:
        """Test an element with no attributes or children."""
        element = Element(name="break")
        assert element.attributes == ()
        assert element.children == ()

    def test_empty_name_raises_error(self) -> None:
        """Test that an empty name raises ValueError."""
        with pytest.raises(ValueError, match="Element name cannot be empty"):
            Element(name="")

    def test_invalid_child_raises_error(self) -> None:
        """Test only Text and Element are accepted as children."""
        with pytest.raises(TypeError, match="Children must be Text or Element"):
            Element(name="speak", children=("raw string",))  # type: ignore

    def test_invalid_attribute_raises_error(self) -> None:
        """Test only Attribute instances are accepted as attributes."""
        with pytest.raises(TypeError, match="Attributes must be Attribute"):
            Element(name="speak", attributes=(("time", "1s"),))  # type: ignore

    def test_elements_are_frozen(self) -> None:
        """Test nodes cannot be modified after construction."""
        element = Element(name="speak")
        with pytest.raises(FrozenInstanceError):
            element.name = "other"  # type: ignore

    def test_structural_equality(self) -> None:
        """Test equal trees compare equal."""
        assert _sample_tree() == _sample_tree()
        assert Element("s", children=(Text("a"),)) != Element("s", children=(Text("b"),))

    def test_get_attribute_last_duplicate_wins(self) -> None:
        """Test duplicate attributes resolve to the last value."""
        element = Element(
            name="prosody",
            attributes=(Attribute("rate", "slow"), Attribute("rate", "fast")),
        )
        assert element.get_attribute("rate") == "fast"
        assert element.attribute_map == {"rate": "fast"}
        assert len(element.attributes) == 2

    def test_get_attribute_default(self) -> None:
        """Test missing attributes return the default."""
        element = Element(name="break")
        assert element.get_attribute("time") is None
        assert element.get_attribute("time", "0ms") == "0ms"
        assert not element.has_attribute("time")

    def test_child_views(self) -> None:
        """Test text and element child views."""
        root = _sample_tree()
        assert root.text_children == [Text("Hello ")]
        assert [child.name for child in root.child_elements] == ["s", "s"]

    def test_find_and_find_all(self) -> None:
        """Test descendant search in document order."""
        root = _sample_tree()
        assert root.find("break") == Element(
            name="break", attributes=(Attribute("time", "1s"),)
        )
        assert [e.get_attribute("id") for e in root.find_all("s")] == ["1", "2"]
        assert root.find("speak") is None
        assert root.find("missing") is None

    def test_iter_elements_document_order(self) -> None:
        """Test iteration visits every element depth-first."""
        names = [element.name for element in _sample_tree().iter_elements()]
        assert names == ["speak", "s", "emphasis", "break", "s"]

    def test_get_depth(self) -> None:
        """Test depth counts element levels."""
        assert Element(name="break").get_depth() == 1
        assert _sample_tree().get_depth() == 3

    def test_to_dict(self) -> None:
        """Test dictionary representation."""
        element = Element(
            name="speak",
            attributes=(Attribute("xml:lang", "en"),),
            children=(Text("hi"),),
        )
        assert element.to_dict() == {
            "type": "element",
            "name": "speak",
            "attributes": [{"name": "xml:lang", "value": "en"}],
            "children": [{"type": "text", "text": "hi"}],
        }


class TestAttribute:
    """Test Attribute validation."""

    def test_empty_name_raises_error(self) -> None:
        """Test that an empty attribute name raises ValueError."""
        with pytest.raises(ValueError, match="Attribute name cannot be empty"):
            Attribute("", "value")

    def test_empty_value_allowed(self) -> None:
        """Test empty values are valid."""
        assert Attribute("alt", "").value == ""
