"""Resolves parent and imported POMs against a growing repository chain.

Repositories declared by POMs met during model building are appended to the
chain in discovery order, unless a repository with the same id is already
part of it. Each branch of a recursive resolution works on its own copy
obtained from ``new_copy``.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, List, Set, Tuple, FrozenSet

from constants import Constants
from common.logging_utils import extra_context, is_debug_enabled
from exceptions import ArtifactResolutionError, UnresolvableModelError
from artifacts.models import Artifact
from resolution.convert import as_remote_repository
from resolution.models import FileModelSource, RemoteRepository
from resolution.system import ArtifactRequest, ArtifactResolver

logger = logging.getLogger(__name__)


class MavenModelResolver:
    """Model resolver backed by an ArtifactResolver and an ordered repository chain.

    Args:
        system: Collaborator performing the actual artifact resolution.
        remote_repositories: Initial chain, in priority order.
        converter: Maps POM repository declarations to RemoteRepository.
    """

    def __init__(
        self,
        system: ArtifactResolver,
        remote_repositories: Iterable[RemoteRepository] = (),
        converter: Callable[[Any], RemoteRepository] = as_remote_repository,
    ):
        self.system = system
        self.converter = converter
        self._repositories: List[RemoteRepository] = []
        self._repository_ids: Set[str] = set()
        for repository in remote_repositories:
            self._append(repository)

    def _append(self, repository: RemoteRepository) -> bool:
        if repository.id in self._repository_ids:
            return False
        self._repository_ids.add(repository.id)
        self._repositories.append(repository)
        return True

    @property
    def repositories(self) -> Tuple[RemoteRepository, ...]:
        return tuple(self._repositories)

    @property
    def repository_ids(self) -> FrozenSet[str]:
        return frozenset(self._repository_ids)

    def add_repository(self, repository: Any) -> None:
        """Append ``repository`` to the chain unless its id is already known."""
        if repository is None:
            raise ValueError("Repository must not be None")
        remote = self.converter(repository)
        if not self._append(remote):
            return
        if is_debug_enabled(logger):
            logger.debug("Repository added to chain", extra=extra_context(
                event="repository_added", component="model_resolver", action="add_repository",
                repository_id=remote.id, chain_size=len(self._repositories)
            ))

    def new_copy(self) -> "MavenModelResolver":
        """Return an independent resolver seeded with the current chain."""
        return MavenModelResolver(self.system, self._repositories, self.converter)

    def resolve_model(self, group_id: str, artifact_id: str, version: str) -> FileModelSource:
        """Resolve the POM of ``group_id:artifact_id:version`` against the chain.

        Raises:
            UnresolvableModelError: no repository in the chain provides the POM.
        """
        pom = Artifact(group_id, artifact_id, version, classifier="", extension=Constants.POM_EXTENSION)
        request = ArtifactRequest(pom, tuple(self._repositories))
        try:
            result = self.system.resolve_artifact(request)
        except ArtifactResolutionError as exc:
            raise UnresolvableModelError(
                f"Failed to resolve POM for {group_id}:{artifact_id}:{version} due to {exc}",
                group_id,
                artifact_id,
                version,
            ) from exc

        if is_debug_enabled(logger):
            logger.debug("Model resolved", extra=extra_context(
                event="function_exit", component="model_resolver", action="resolve_model",
                outcome="success", artifact=str(pom), target=result.artifact.file
            ))
        return FileModelSource(result.artifact.file)
