"""Conversion of POM repository declarations into chain entries."""
from __future__ import annotations

from typing import Any, Mapping, Optional

from constants import RepositoryLayout
from resolution.models import RemoteRepository, RepositoryPolicy


def _field(source: Any, name: str, default: Any = None) -> Any:
    if isinstance(source, Mapping):
        return source.get(name, default)
    return getattr(source, name, default)


def as_repository_policy(policy: Any) -> RepositoryPolicy:
    """Convert a policy object or mapping; a missing policy means enabled."""
    if policy is None:
        return RepositoryPolicy()
    if isinstance(policy, RepositoryPolicy):
        return policy
    enabled = _field(policy, "enabled", True)
    if isinstance(enabled, str):
        enabled = enabled.strip().lower() != "false"
    return RepositoryPolicy(
        enabled=bool(enabled),
        update_policy=_field(policy, "update_policy", None) or "daily",
        checksum_policy=_field(policy, "checksum_policy", None) or "warn",
    )


def as_remote_repository(repository: Any) -> RemoteRepository:
    """Convert a repository declaration into a RemoteRepository.

    Accepts ``resolution.models.Repository`` or any object/mapping exposing
    ``id`` and ``url`` plus optional ``layout``, ``releases`` and ``snapshots``.
    Pure: the input is never modified.
    """
    if repository is None:
        raise ValueError("Repository must not be None")
    if isinstance(repository, RemoteRepository):
        return repository
    repo_id: Optional[str] = _field(repository, "id")
    url: Optional[str] = _field(repository, "url")
    if not repo_id or not url:
        raise ValueError(f"Repository requires both id and url: {repository!r}")
    return RemoteRepository(
        id=repo_id,
        url=url,
        layout=_field(repository, "layout", None) or RepositoryLayout.DEFAULT.value,
        releases=as_repository_policy(_field(repository, "releases")),
        snapshots=as_repository_policy(_field(repository, "snapshots")),
    )
