"""Model resolution against a chain of remote repositories."""

from .models import FileModelSource, RemoteRepository, Repository, RepositoryPolicy
from .system import ArtifactRequest, ArtifactResolver, ArtifactResult, RemoteArtifactResolver
from .model_resolver import MavenModelResolver

__all__ = [
    "FileModelSource",
    "RemoteRepository",
    "Repository",
    "RepositoryPolicy",
    "ArtifactRequest",
    "ArtifactResolver",
    "ArtifactResult",
    "RemoteArtifactResolver",
    "MavenModelResolver",
]
