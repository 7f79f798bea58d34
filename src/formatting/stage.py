"""Projects a resolved artifact set into files, streams or custom types."""
from __future__ import annotations

import logging
from typing import BinaryIO, Iterable, List, NoReturn, Optional

from common.logging_utils import extra_context, is_debug_enabled
from exceptions import NoResolvedResultError, NonUniqueResultError
from artifacts.locator import ArtifactLocator, ReactorArtifactLocator
from artifacts.models import Artifact
from formatting.processors import (
    FILE_PROCESSOR,
    INPUT_STREAM_PROCESSOR,
    ProcessorLike,
    as_processor,
)

logger = logging.getLogger(__name__)


class MavenFormatStage:
    """Final stage of a resolution: converts resolved artifacts to output values.

    Args:
        artifacts: Resolved artifacts, in resolution order.
        locator: Artifact to file strategy. Defaults to ReactorArtifactLocator.
    """

    def __init__(self, artifacts: Iterable[Artifact], locator: Optional[ArtifactLocator] = None):
        if artifacts is None:
            raise ValueError("Artifacts are required")
        self.artifacts: List[Artifact] = list(artifacts)
        self.locator = locator if locator is not None else ReactorArtifactLocator()

    def _project(self, processor: ProcessorLike) -> list:
        fmt = as_processor(processor)
        results = []
        for artifact in self.artifacts:
            if self.locator.is_mappable(artifact):
                results.append(fmt.process(self.locator.map(artifact)))
            else:
                logger.info("Removed artifact %s from result, it cannot be mapped to a file", artifact)
        if is_debug_enabled(logger):
            logger.debug("Projected artifacts", extra=extra_context(
                event="function_exit", component="format_stage", action="project",
                outcome="success", input_count=len(self.artifacts), output_count=len(results)
            ))
        return results

    def as_list(self, processor: ProcessorLike) -> list:
        """Convert every mappable artifact with ``processor``, preserving order."""
        return self._project(processor)

    def as_single(self, processor: ProcessorLike):
        """Convert the only mappable artifact with ``processor``.

        Raises:
            NoResolvedResultError: nothing survived mapping.
            NonUniqueResultError: more than one value was produced.
        """
        results = self._project(processor)
        if not results:
            raise NoResolvedResultError("Unable to resolve dependencies, none of them were found.")
        if len(results) != 1:
            listing = "\n".join(str(item) for item in results)
            raise NonUniqueResultError(
                f"Resolution resolved more than a single artifact ({len(results)} artifact(s)), "
                f"unable to determine which one should be used.\n"
                f"Complete list of resolved artifacts:\n{listing}",
                results,
            )
        return results[0]

    def as_files(self) -> List[str]:
        return self.as_list(FILE_PROCESSOR)

    def as_file(self) -> str:
        return self.as_single(FILE_PROCESSOR)

    def as_input_streams(self) -> List[BinaryIO]:
        """Open every mappable artifact for reading; callers close the streams."""
        return self.as_list(INPUT_STREAM_PROCESSOR)

    def as_input_stream(self) -> BinaryIO:
        return self.as_single(INPUT_STREAM_PROCESSOR)

    def as_resolved_artifact_info(self) -> NoReturn:
        raise NotImplementedError("Resolved artifact metadata is not supported by this stage")

    def as_single_resolved_artifact_info(self) -> NoReturn:
        raise NotImplementedError("Resolved artifact metadata is not supported by this stage")
