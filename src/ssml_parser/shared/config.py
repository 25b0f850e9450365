"""Configuration classes for SSML parsing.

This module provides the immutable configuration object shared by the parser
API and the command-line tool.
"""

import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .logging import VALID_LEVELS

DEFAULT_ROOT_TAG = "speak"


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class ParserConfig:
    """Configuration for the SSML parser.

    Thread-safe due to frozen dataclass implementation; derive variants with
    ``override``.

    Attributes:
        root_tag: Name the top-level element must carry
        trim_whitespace: Strip leading/trailing whitespace before validation
        logging_level: Level applied by the command-line tool
        enable_profiling: Sample wall time and resident memory around parses
        name: Optional configuration name
        description: Optional human-readable description
    """

    root_tag: str = DEFAULT_ROOT_TAG
    trim_whitespace: bool = True
    logging_level: str = "WARNING"
    enable_profiling: bool = False

    name: Optional[str] = None
    description: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate the parser configuration."""
        if not self.root_tag or not all(
            char.isalnum() or char == "_" for char in self.root_tag
        ):
            raise ConfigValidationError(
                "root_tag must be a non-empty word",
                field_name="root_tag",
                suggestions=[f"Use the default root tag '{DEFAULT_ROOT_TAG}'"],
            )
        if self.logging_level not in VALID_LEVELS:
            raise ConfigValidationError(
                f"logging_level must be one of {VALID_LEVELS}",
                field_name="logging_level",
            )

    def override(self, **kwargs: Any) -> "ParserConfig":
        """Create a new configuration with specific overrides.

        Example:
            >>> config = ParserConfig()
            >>> config.override(logging_level="DEBUG").logging_level
            'DEBUG'
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(kwargs) - known)
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration fields: {', '.join(unknown)}",
                field_name=unknown[0],
            )
        return replace(self, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParserConfig":
        """Create configuration from dictionary.

        Raises:
            ConfigValidationError: If the data holds unknown keys or bad values
        """
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration data must be a JSON object")
        return cls().override(**data)

    @classmethod
    def from_json(cls, json_str: str) -> "ParserConfig":
        """Create configuration from JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid configuration JSON: {e}") from e
        return cls.from_dict(data)

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> "ParserConfig":
        """Load configuration from a JSON file."""
        path = Path(config_path)
        if not path.is_file():
            raise ConfigError(f"Configuration file not found: {path}")
        return cls.from_json(path.read_text(encoding="utf-8"))
