"""Command-line interface module for the SSML parser.

Provides the ``ssml-parse`` tool for printing trees, extracting plain text,
and validating SSML documents.
"""

from .main import main

__all__ = ["main"]
