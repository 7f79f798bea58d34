"""Data models for repositories and resolved model sources."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import BinaryIO, Optional

from constants import RepositoryLayout


@dataclass(frozen=True)
class RepositoryPolicy:
    """Whether a repository serves a kind of artifact, and how it is refreshed."""
    enabled: bool = True
    update_policy: str = "daily"
    checksum_policy: str = "warn"


@dataclass(frozen=True)
class RemoteRepository:
    """Repository entry of a resolution chain. Identity within a chain is ``id``."""
    id: str
    url: str
    layout: str = RepositoryLayout.DEFAULT.value
    releases: RepositoryPolicy = field(default_factory=RepositoryPolicy)
    snapshots: RepositoryPolicy = field(default_factory=RepositoryPolicy)

    def policy_for(self, snapshot: bool) -> RepositoryPolicy:
        """Return the policy governing snapshot or release artifacts."""
        return self.snapshots if snapshot else self.releases

    def __str__(self) -> str:
        return f"{self.id} ({self.url})"


@dataclass
class Repository:
    """A ``<repository>`` declaration as read from a POM by the model builder."""
    id: str
    url: str
    layout: str = RepositoryLayout.DEFAULT.value
    releases: Optional[RepositoryPolicy] = None
    snapshots: Optional[RepositoryPolicy] = None


@dataclass(frozen=True)
class FileModelSource:
    """A resolved POM file handed back to the model builder."""
    location: str

    def open(self) -> BinaryIO:
        """Open the descriptor for binary reading; the caller closes it."""
        return open(self.location, "rb")

    def __str__(self) -> str:
        return self.location
