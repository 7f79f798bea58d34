"""Tests for environment configuration overrides and repository conversion."""
from __future__ import annotations

import pytest

from constants import Constants
from env_config import apply_env_overrides, default_remote_repositories
from resolution.convert import as_remote_repository
from resolution.models import RemoteRepository, Repository, RepositoryPolicy


@pytest.fixture(autouse=True)
def restore_constants(monkeypatch):
    """Let monkeypatch restore every tunable the tests may touch."""
    for name in ("LOCAL_REPOSITORY", "CENTRAL_REPOSITORY_URL", "OFFLINE",
                 "EXCLUDE_POM_ARTIFACTS", "REQUEST_TIMEOUT", "HTTP_RETRY_MAX"):
        monkeypatch.setattr(Constants, name, getattr(Constants, name))


def test_overrides_are_applied():
    """Well-formed variables update Constants."""
    apply_env_overrides({
        "MVNSTAGE_LOCAL_REPOSITORY": "/tmp/m2",
        "MVNSTAGE_CENTRAL_URL": "https://mirror.example.com/maven2",
        "MVNSTAGE_OFFLINE": "yes",
        "MVNSTAGE_EXCLUDE_POM_ARTIFACTS": "true",
        "MVNSTAGE_REQUEST_TIMEOUT": "5",
        "MVNSTAGE_HTTP_RETRY_MAX": "7",
    })

    assert Constants.LOCAL_REPOSITORY == "/tmp/m2"
    assert Constants.OFFLINE is True
    assert Constants.EXCLUDE_POM_ARTIFACTS is True
    assert Constants.REQUEST_TIMEOUT == 5
    assert Constants.HTTP_RETRY_MAX == 7
    assert default_remote_repositories() == [RemoteRepository("central", "https://mirror.example.com/maven2")]


def test_malformed_values_are_ignored():
    """Bad values keep the previous setting and never raise."""
    apply_env_overrides({
        "MVNSTAGE_OFFLINE": "maybe",
        "MVNSTAGE_REQUEST_TIMEOUT": "soon",
        "MVNSTAGE_HTTP_RETRY_MAX": "-1",
    })

    assert Constants.OFFLINE is False
    assert Constants.REQUEST_TIMEOUT == 30
    assert Constants.HTTP_RETRY_MAX == 3


def test_convert_repository_with_default_policies():
    """Missing policies convert to enabled ones."""
    repo = as_remote_repository(Repository("corp", "https://corp"))

    assert repo == RemoteRepository("corp", "https://corp")
    assert repo.policy_for(snapshot=True).enabled is True


def test_convert_mapping():
    """Mappings are accepted, including string policy flags."""
    repo = as_remote_repository({
        "id": "snap",
        "url": "https://snap",
        "releases": {"enabled": "false"},
        "snapshots": {"enabled": "true", "update_policy": "always"},
    })

    assert repo.releases == RepositoryPolicy(enabled=False)
    assert repo.snapshots == RepositoryPolicy(enabled=True, update_policy="always")


def test_convert_requires_id_and_url():
    """Incomplete declarations are invalid input."""
    with pytest.raises(ValueError):
        as_remote_repository({"id": "x"})
    with pytest.raises(ValueError):
        as_remote_repository(None)
