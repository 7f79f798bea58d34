"""Projection of resolved artifacts into caller-chosen formats."""

from .processors import (
    FormatProcessor,
    FileFormatProcessor,
    InputStreamFormatProcessor,
    CallableFormatProcessor,
)
from .stage import MavenFormatStage

__all__ = [
    "FormatProcessor",
    "FileFormatProcessor",
    "InputStreamFormatProcessor",
    "CallableFormatProcessor",
    "MavenFormatStage",
]
