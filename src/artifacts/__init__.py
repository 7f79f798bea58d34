"""Resolved artifacts and their mapping to files."""

from .models import Artifact
from .locator import ArtifactLocator, ReactorArtifactLocator
from .packager import package_directories

__all__ = [
    "Artifact",
    "ArtifactLocator",
    "ReactorArtifactLocator",
    "package_directories",
]
