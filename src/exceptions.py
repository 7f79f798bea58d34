"""Error conditions raised by artifact projection and model resolution."""
from __future__ import annotations

from typing import Any, List, Optional, Sequence


class ResolverError(Exception):
    """Base class for resolution failures that are not invalid input."""


class ArtifactMappingError(ValueError):
    """An artifact could not be mapped to a file.

    Args:
        message: Human readable reason.
        artifact: The offending artifact.
    """

    def __init__(self, message: str, artifact: Any = None):
        super().__init__(message)
        self.artifact = artifact


class NoResolvedResultError(ResolverError):
    """A single result was required but nothing was resolved."""


class NonUniqueResultError(ResolverError):
    """A single result was required but several were produced."""

    def __init__(self, message: str, results: Optional[Sequence[Any]] = None):
        super().__init__(message)
        self.results: List[Any] = list(results or [])


class ArtifactResolutionError(ResolverError):
    """An artifact could not be fetched from any repository."""

    def __init__(self, artifact: Any, errors: Optional[Sequence[str]] = None):
        self.artifact = artifact
        self.errors: List[str] = list(errors or [])
        detail = "; ".join(self.errors) if self.errors else "no repositories available"
        super().__init__(f"Could not find artifact {artifact}: {detail}")


class UnresolvableModelError(ResolverError):
    """A POM referenced as parent or import could not be resolved."""

    def __init__(self, message: str, group_id: str, artifact_id: str, version: str):
        super().__init__(message)
        self.group_id = group_id
        self.artifact_id = artifact_id
        self.version = version
