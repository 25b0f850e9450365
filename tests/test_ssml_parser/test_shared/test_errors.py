"""Tests for the parse error taxonomy."""

import pytest

from ssml_parser.shared.errors import (
    FRAGMENT_PREVIEW_LENGTH,
    ErrorKind,
    InvalidRootError,
    MalformedAttributeError,
    MalformedDocumentError,
    MismatchedTagError,
    SSMLParseError,
)


class TestSSMLParseError:
    """Test error construction and formatting."""

    @pytest.mark.parametrize(
        "error_class,kind",
        [
            (MalformedDocumentError, ErrorKind.MALFORMED_DOCUMENT),
            (InvalidRootError, ErrorKind.INVALID_ROOT),
            (MismatchedTagError, ErrorKind.MISMATCHED_TAG),
            (MalformedAttributeError, ErrorKind.MALFORMED_ATTRIBUTE),
        ],
    )
    def test_kinds(self, error_class, kind):
        """Test every subclass carries its kind."""
        error = error_class("Invalid SSML: problem")
        assert isinstance(error, SSMLParseError)
        assert error.kind is kind

    def test_kind_values(self):
        """Test kind values are the public error names."""
        assert [kind.value for kind in ErrorKind] == [
            "MalformedDocument",
            "InvalidRoot",
            "MismatchedTag",
            "MalformedAttribute",
        ]

    def test_message_only(self):
        """Test an error without a fragment."""
        error = MalformedDocumentError("Invalid SSML: No valid tags found")
        assert error.fragment is None
        assert str(error) == "Invalid SSML: No valid tags found"

    def test_message_with_fragment(self):
        """Test the fragment is appended to the message."""
        error = InvalidRootError("Invalid SSML: Root tag must be <speak>", "a")
        assert error.message == "Invalid SSML: Root tag must be <speak>"
        assert str(error) == "Invalid SSML: Root tag must be <speak>: 'a'"

    def test_long_fragment_is_truncated(self):
        """Test fragments are capped for diagnostics."""
        error = MismatchedTagError("Invalid SSML: mismatch", "x" * 200)
        assert error.fragment == "x" * FRAGMENT_PREVIEW_LENGTH + "..."
