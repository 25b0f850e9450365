"""Developer tools for the SSML parser."""

from .profiling import ParseProfiler, ProfileReport

__all__ = [
    "ParseProfiler",
    "ProfileReport",
]
