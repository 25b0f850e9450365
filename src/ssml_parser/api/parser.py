"""Core parser API with progressive disclosure for SSML parsing.

This module provides the public parsing entry points, from simple
module-level functions to a configured parser class:

- ``parse()`` returns the root element and raises on invalid markup
- ``parse_document()`` never raises on invalid markup and returns a
  ``ParseResult`` with diagnostics and performance metrics
- ``SSMLParser`` carries a ``ParserConfig`` across many documents
"""

import logging
import time
from typing import Optional

from ssml_parser.shared import (
    DiagnosticSeverity,
    ParseResult,
    ParserConfig,
    PerformanceMetrics,
    SSMLParseError,
    get_logger,
)
from ssml_parser.tools.profiling import ParseProfiler
from ssml_parser.tree import Element, SSMLTreeBuilder, flatten

# Constants for API operations
PREVIEW_LENGTH = 100  # Max length for content preview in logs
MS_PER_SECOND = 1000  # Milliseconds per second conversion


def parse(document: str, correlation_id: Optional[str] = None) -> Element:
    """Parse an SSML document into its root ``speak`` element.

    Args:
        document: SSML markup
        correlation_id: Optional correlation ID for request tracking

    Returns:
        The root Element

    Raises:
        MalformedDocumentError, InvalidRootError, MismatchedTagError,
        MalformedAttributeError: On the first violation found

    Examples:
        >>> root = parse("<speak>hello</speak>")
        >>> root.name, root.children
        ('speak', (Text(text='hello'),))
    """
    return SSMLParser(correlation_id=correlation_id).parse(document)


def parse_document(
    document: str,
    correlation_id: Optional[str] = None
) -> ParseResult:
    """Parse an SSML document without raising on invalid markup.

    Examples:
        >>> result = parse_document("<a></a>")
        >>> result.success, result.error_kind
        (False, 'InvalidRoot')
    """
    return SSMLParser(correlation_id=correlation_id).parse_document(document)


class SSMLParser:
    """Configured SSML parser for reuse across documents.

    The parser holds only immutable configuration, so one instance can serve
    any number of documents and threads.

    Examples:
        >>> parser = SSMLParser(ParserConfig(enable_profiling=True))
        >>> result = parser.parse_document("<speak>hi</speak>")
        >>> result.performance.elements_built
        1
    """

    def __init__(
        self,
        config: Optional[ParserConfig] = None,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize the parser.

        Args:
            config: Parser configuration (defaults to ``ParserConfig()``)
            correlation_id: Optional correlation ID for request tracking
        """
        self.config = config or ParserConfig()
        self.correlation_id = correlation_id
        self.logger = get_logger(__name__, correlation_id, "ssml_parser")

    def _new_builder(self) -> SSMLTreeBuilder:
        return SSMLTreeBuilder(
            root_tag=self.config.root_tag,
            trim_whitespace=self.config.trim_whitespace,
            correlation_id=self.correlation_id,
        )

    def parse(self, document: str) -> Element:
        """Parse ``document`` and return the root element, raising on errors."""
        if not isinstance(document, str):
            raise TypeError(
                f"SSML document must be str, got {type(document).__name__}"
            )

        if self.logger.is_enabled_for(logging.DEBUG):
            self.logger.debug(
                "Starting parse operation",
                extra={
                    "content_length": len(document),
                    "preview": (
                        document[:PREVIEW_LENGTH] + "..."
                        if len(document) > PREVIEW_LENGTH else document
                    )
                }
            )
        return self._new_builder().build(document)

    def parse_document(self, document: str) -> ParseResult:
        """Parse ``document`` into a ``ParseResult``; parse errors are captured."""
        if not isinstance(document, str):
            raise TypeError(
                f"SSML document must be str, got {type(document).__name__}"
            )

        builder = self._new_builder()
        profiler = ParseProfiler() if self.config.enable_profiling else None
        start_time = time.perf_counter()
        root: Optional[Element] = None
        error: Optional[SSMLParseError] = None

        try:
            if profiler is not None:
                with profiler.profile("parse_document", input_size=len(document)):
                    root = builder.build(document)
            else:
                root = builder.build(document)
        except SSMLParseError as e:
            error = e

        performance = PerformanceMetrics(
            processing_time_ms=(time.perf_counter() - start_time) * MS_PER_SECOND,
            characters_processed=len(document),
            elements_built=builder.elements_built,
            text_nodes_built=builder.text_nodes_built,
            memory_used_bytes=(
                profiler.reports[-1].memory_delta if profiler is not None else 0
            ),
        )
        result = ParseResult(
            root=root,
            error=error,
            performance=performance,
            correlation_id=self.correlation_id,
            text=flatten(root) if root is not None else None,
        )

        if error is not None:
            result.add_diagnostic(
                DiagnosticSeverity.ERROR,
                str(error),
                "tree_builder",
                details={"kind": error.kind.value},
            )
            self.logger.warning(
                "SSML parse failed",
                extra={
                    "error_kind": error.kind.value,
                    "processing_time_ms": performance.processing_time_ms,
                }
            )
        else:
            self.logger.info(
                "SSML parse completed",
                extra={
                    "elements_built": performance.elements_built,
                    "processing_time_ms": performance.processing_time_ms,
                }
            )

        return result
