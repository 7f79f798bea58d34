"""Data models for resolved artifacts."""

from __future__ import annotations

import posixpath
import re
from dataclasses import dataclass, replace
from typing import Optional

from constants import Constants

# Deployed snapshot versions replace -SNAPSHOT with -yyyyMMdd.HHmmss-buildNumber
TIMESTAMPED_SNAPSHOT = re.compile(r"^(.*)-(\d{8}\.\d{6})-(\d+)$")


@dataclass(frozen=True)
class Artifact:
    """A resolved (or to-be-resolved) Maven artifact."""
    group_id: str
    artifact_id: str
    version: str
    classifier: str = ""
    extension: str = "jar"
    file: Optional[str] = None  # backing file once resolved

    @property
    def is_snapshot(self) -> bool:
        """Return True for SNAPSHOT versions, timestamped or not."""
        return (self.version.endswith(Constants.SNAPSHOT_SUFFIX)
                or TIMESTAMPED_SNAPSHOT.match(self.version) is not None)

    @property
    def base_version(self) -> str:
        """Version with a snapshot timestamp folded back to ``-SNAPSHOT``."""
        match = TIMESTAMPED_SNAPSHOT.match(self.version)
        if match:
            return f"{match.group(1)}{Constants.SNAPSHOT_SUFFIX}"
        return self.version

    def with_file(self, file: Optional[str]) -> "Artifact":
        """Return a copy of this artifact backed by ``file``."""
        return replace(self, file=file)

    def repository_path(self) -> str:
        """Relative path of this artifact in a default-layout repository.

        Timestamped snapshots live in their base version's directory.
        """
        name = f"{self.artifact_id}-{self.version}"
        if self.classifier:
            name = f"{name}-{self.classifier}"
        name = f"{name}.{self.extension}"
        return posixpath.join(self.group_id.replace(".", "/"), self.artifact_id, self.base_version, name)

    def __str__(self) -> str:
        parts = [self.group_id, self.artifact_id, self.extension]
        if self.classifier:
            parts.append(self.classifier)
        parts.append(self.version)
        return ":".join(parts)
