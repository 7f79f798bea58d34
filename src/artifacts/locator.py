"""Maps resolved artifacts to files, packaging reactor modules on demand."""
from __future__ import annotations

import atexit
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from typing import Optional

from constants import Constants
from common.logging_utils import extra_context, is_debug_enabled
from exceptions import ArtifactMappingError
from artifacts.models import Artifact
from artifacts.packager import package_directories

logger = logging.getLogger(__name__)


def _delete_quietly(path: str) -> None:
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
    except OSError as exc:
        logger.debug("Could not delete temporary archive %s: %s", path, exc)


def delete_on_exit(path: str) -> None:
    """Remove ``path`` on interpreter shutdown, best effort."""
    atexit.register(_delete_quietly, path)


class ArtifactLocator(ABC):
    """Strategy deciding whether and how an artifact maps to a file.

    ``is_mappable`` is the filtering seam: callers always consult it before
    ``map`` so that implementations can exclude artifacts without changing
    the projection code.
    """

    @abstractmethod
    def is_mappable(self, artifact: Artifact) -> bool:
        """Return True when ``artifact`` can be mapped to a file."""
        raise NotImplementedError

    @abstractmethod
    def map(self, artifact: Artifact) -> str:
        """Return the path of the file backing ``artifact``."""
        raise NotImplementedError


class ReactorArtifactLocator(ArtifactLocator):
    """Locator that packages unpackaged reactor modules into a temporary archive.

    A reactor module is recognised by its backing file being the module's
    ``pom.xml``; its compiled classes directory is zipped instead.

    Args:
        exclude_pom_artifacts: Treat ``pom``-typed artifacts as not mappable.
            Defaults to ``Constants.EXCLUDE_POM_ARTIFACTS``.
    """

    def __init__(self, exclude_pom_artifacts: Optional[bool] = None):
        if exclude_pom_artifacts is None:
            exclude_pom_artifacts = Constants.EXCLUDE_POM_ARTIFACTS
        self.exclude_pom_artifacts = bool(exclude_pom_artifacts)

    def is_mappable(self, artifact: Artifact) -> bool:
        if artifact is None:
            raise ValueError("Artifact must not be None")
        if self.exclude_pom_artifacts and artifact.extension == Constants.POM_EXTENSION:
            return False
        return True

    def map(self, artifact: Artifact) -> str:
        if artifact is None:
            raise ValueError("Artifact must not be None")
        if not self.is_mappable(artifact):
            raise ArtifactMappingError(f"Artifact {artifact} cannot be mapped to a file.", artifact)
        if not artifact.file:
            raise ArtifactMappingError(f"Artifact {artifact} has no backing file.", artifact)

        if os.path.basename(artifact.file) != Constants.POM_XML_FILE:
            return artifact.file

        root = os.path.join(os.path.dirname(os.path.abspath(artifact.file)), Constants.REACTOR_OUTPUT_DIR)
        try:
            fd, archive = tempfile.mkstemp(prefix=f"{artifact.artifact_id}-", suffix=f".{artifact.extension}")
            os.close(fd)
            delete_on_exit(archive)
            package_directories(archive, root)
        except OSError as exc:
            raise ArtifactMappingError(
                f"Unable to get artifact {artifact.artifact_id} from the classpath", artifact
            ) from exc

        if is_debug_enabled(logger):
            logger.debug("Packaged reactor module", extra=extra_context(
                event="map", component="locator", action="package_reactor",
                outcome="success", artifact=str(artifact), target=archive
            ))
        return archive
