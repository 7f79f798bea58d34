"""Artifact resolution against a local repository and an ordered remote chain."""
from __future__ import annotations

import logging
import os
import tempfile
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from constants import Constants, RepositoryLayout
from common import http_client
from common.logging_utils import extra_context, is_debug_enabled, safe_url, Timer
from exceptions import ArtifactResolutionError
from artifacts.models import Artifact
from resolution.models import RemoteRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArtifactRequest:
    """Resolution input: an artifact and the repositories to try, in priority order."""
    artifact: Artifact
    repositories: Tuple[RemoteRepository, ...] = field(default_factory=tuple)
    context: Optional[str] = None


@dataclass(frozen=True)
class ArtifactResult:
    """Resolution outcome; ``artifact.file`` points at the local copy."""
    artifact: Artifact
    repository: Optional[RemoteRepository] = None


class ArtifactResolver(ABC):
    """Resolves single artifacts; raises ArtifactResolutionError on failure."""

    @abstractmethod
    def resolve_artifact(self, request: ArtifactRequest) -> ArtifactResult:
        raise NotImplementedError


class RemoteArtifactResolver(ArtifactResolver):
    """Resolver backed by a default-layout local repository and HTTP downloads.

    Args:
        local_repository: Local repository root. Defaults to ``Constants.LOCAL_REPOSITORY``.
        offline: Never touch the network. Defaults to ``Constants.OFFLINE``.
    """

    def __init__(self, local_repository: Optional[str] = None, offline: Optional[bool] = None):
        self.local_repository = local_repository or Constants.LOCAL_REPOSITORY
        self.offline = Constants.OFFLINE if offline is None else bool(offline)

    def local_path(self, artifact: Artifact) -> str:
        return os.path.join(self.local_repository, *artifact.repository_path().split("/"))

    def resolve_artifact(self, request: ArtifactRequest) -> ArtifactResult:
        artifact = request.artifact
        local = self.local_path(artifact)
        if os.path.isfile(local):
            if is_debug_enabled(logger):
                logger.debug("Local repository hit", extra=extra_context(
                    event="resolve", component="artifact_resolver", action="resolve_artifact",
                    outcome="local_hit", artifact=str(artifact)
                ))
            return ArtifactResult(artifact.with_file(local))

        if self.offline:
            raise ArtifactResolutionError(artifact, [f"offline and not present in {self.local_repository}"])

        errors: List[str] = []
        for repository in request.repositories:
            if not repository.policy_for(artifact.is_snapshot).enabled:
                kind = "snapshots" if artifact.is_snapshot else "releases"
                errors.append(f"{repository.id}: {kind} disabled")
                continue
            if repository.layout != RepositoryLayout.DEFAULT.value:
                errors.append(f"{repository.id}: unsupported layout '{repository.layout}'")
                continue

            url = f"{repository.url.rstrip('/')}/{artifact.repository_path()}"
            with Timer() as timer:
                status_code, content = http_client.fetch_bytes(url, context=repository.id)
            if status_code == 200:
                try:
                    self._store(local, content)
                except OSError as exc:
                    errors.append(f"{repository.id}: cannot store in local repository: {exc}")
                    raise ArtifactResolutionError(artifact, errors) from exc
                logger.info("Downloaded %s from %s", artifact, repository.id)
                if is_debug_enabled(logger):
                    logger.debug("Artifact downloaded", extra=extra_context(
                        event="resolve", component="artifact_resolver", action="download",
                        outcome="success", target=safe_url(url), duration_ms=timer.duration_ms(),
                        size=len(content)
                    ))
                return ArtifactResult(artifact.with_file(local), repository)

            outcome = f"HTTP {status_code}" if status_code else "connection failed"
            errors.append(f"{repository.id} ({safe_url(url)}): {outcome}")
            if is_debug_enabled(logger):
                logger.debug("Artifact not served by repository", extra=extra_context(
                    event="resolve", component="artifact_resolver", action="download",
                    outcome="miss", status_code=status_code, target=safe_url(url)
                ))

        raise ArtifactResolutionError(artifact, errors)

    @staticmethod
    def _store(path: str, content: bytes) -> None:
        """Atomically write ``content`` to ``path``."""
        directory = os.path.dirname(path)
        os.makedirs(directory, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=directory, suffix=".part")
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(content)
            os.replace(tmp, path)
        except OSError:
            if os.path.exists(tmp):
                os.remove(tmp)
            raise
