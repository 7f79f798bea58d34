"""Environment overrides for runtime tunables.

Applies ``MVNSTAGE_*`` environment variables on top of the defaults in
``Constants``. Malformed values are logged and ignored so configuration never
breaks a resolution.
"""

from __future__ import annotations

import logging
import os
from typing import List, Mapping, Optional

from constants import Constants
from resolution.models import RemoteRepository

logger = logging.getLogger(__name__)

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_bool(name: str, raw: str) -> Optional[bool]:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    logger.warning("Ignoring %s=%r: expected a boolean", name, raw)
    return None


def _parse_positive_int(name: str, raw: str) -> Optional[int]:
    try:
        value = int(raw.strip())
    except ValueError:
        logger.warning("Ignoring %s=%r: expected an integer", name, raw)
        return None
    if value <= 0:
        logger.warning("Ignoring %s=%r: expected a positive integer", name, raw)
        return None
    return value


def apply_env_overrides(environ: Optional[Mapping[str, str]] = None) -> None:
    """Apply environment overrides to ``Constants``.

    Args:
        environ: Mapping to read from; defaults to ``os.environ``.
    """
    env = os.environ if environ is None else environ

    local_repo = env.get("MVNSTAGE_LOCAL_REPOSITORY")
    if local_repo and local_repo.strip():
        Constants.LOCAL_REPOSITORY = os.path.expanduser(local_repo.strip())

    central_url = env.get("MVNSTAGE_CENTRAL_URL")
    if central_url and central_url.strip():
        Constants.CENTRAL_REPOSITORY_URL = central_url.strip()

    for name, attr in (
        ("MVNSTAGE_OFFLINE", "OFFLINE"),
        ("MVNSTAGE_EXCLUDE_POM_ARTIFACTS", "EXCLUDE_POM_ARTIFACTS"),
    ):
        raw = env.get(name)
        if raw is not None:
            flag = _parse_bool(name, raw)
            if flag is not None:
                setattr(Constants, attr, flag)

    for name, attr in (
        ("MVNSTAGE_REQUEST_TIMEOUT", "REQUEST_TIMEOUT"),
        ("MVNSTAGE_HTTP_RETRY_MAX", "HTTP_RETRY_MAX"),
    ):
        raw = env.get(name)
        if raw is not None:
            number = _parse_positive_int(name, raw)
            if number is not None:
                setattr(Constants, attr, number)


def default_remote_repositories() -> List[RemoteRepository]:
    """Return the default chain: the central repository only."""
    return [RemoteRepository(id=Constants.CENTRAL_REPOSITORY_ID, url=Constants.CENTRAL_REPOSITORY_URL)]
