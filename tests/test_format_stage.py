"""Tests for projecting resolved artifacts into output formats."""
from __future__ import annotations

import os
import tempfile
import zipfile

import pytest

from artifacts.locator import ArtifactLocator, ReactorArtifactLocator
from artifacts.models import Artifact
from exceptions import NoResolvedResultError, NonUniqueResultError
from formatting.processors import FormatProcessor
from formatting.stage import MavenFormatStage


@pytest.fixture
def jars():
    """Two resolved jar artifacts backed by real files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        artifacts = []
        for name in ("alpha", "beta"):
            path = os.path.join(tmpdir, f"{name}-1.0.jar")
            with open(path, "wb") as f:
                f.write(name.encode())
            artifacts.append(Artifact("com.example", name, "1.0", file=path))
        yield artifacts


class _SizeProcessor(FormatProcessor[int]):
    def process(self, path):
        return os.path.getsize(path)


class _SkipBeta(ArtifactLocator):
    def is_mappable(self, artifact):
        return artifact.artifact_id != "beta"

    def map(self, artifact):
        return artifact.file


class TestMultipleResults:
    """as_list and its shortcuts."""

    def test_as_files_preserves_order(self, jars):
        """Files come back in resolution order."""
        assert MavenFormatStage(jars).as_files() == [a.file for a in jars]

    def test_duplicates_are_kept(self, jars):
        """The stage does not de-duplicate its input."""
        stage = MavenFormatStage([jars[0], jars[0]])
        assert stage.as_files() == [jars[0].file, jars[0].file]

    def test_empty_input_gives_empty_list(self):
        """Nothing resolved is not an error for the multi form."""
        assert MavenFormatStage([]).as_files() == []

    def test_custom_processor(self, jars):
        """Caller-supplied processors are applied per artifact."""
        assert MavenFormatStage(jars).as_list(_SizeProcessor()) == [5, 4]

    def test_plain_callable_processor(self, jars):
        """A bare callable works as a processor."""
        assert MavenFormatStage(jars).as_list(os.path.basename) == ["alpha-1.0.jar", "beta-1.0.jar"]

    def test_input_streams(self, jars):
        """Streams are opened for reading on each file."""
        streams = MavenFormatStage(jars).as_input_streams()
        try:
            assert [s.read() for s in streams] == [b"alpha", b"beta"]
        finally:
            for s in streams:
                s.close()

    def test_unmappable_artifacts_are_skipped(self, jars):
        """Artifacts rejected by the locator are left out."""
        assert MavenFormatStage(jars, locator=_SkipBeta()).as_files() == [jars[0].file]

    def test_reactor_module_is_packaged(self):
        """Reactor modules become archives among ordinary files."""
        with tempfile.TemporaryDirectory() as tmpdir:
            classes = os.path.join(tmpdir, "target", "classes")
            os.makedirs(classes)
            with open(os.path.join(classes, "A.class"), "wb") as f:
                f.write(b"A")
            pom = os.path.join(tmpdir, "pom.xml")
            with open(pom, "w") as f:
                f.write("<project/>")

            files = MavenFormatStage([Artifact("g", "mod", "1.0", file=pom)]).as_files()

            assert len(files) == 1 and files[0] != pom
            with zipfile.ZipFile(files[0]) as zf:
                assert zf.namelist() == ["A.class"]
            os.remove(files[0])


class TestSingleResult:
    """as_single and its shortcuts."""

    def test_single_file(self, jars):
        """Exactly one artifact yields its value."""
        assert MavenFormatStage(jars[:1]).as_file() == jars[0].file

    def test_single_stream(self, jars):
        """The single stream form opens the file."""
        with MavenFormatStage(jars[1:]).as_input_stream() as stream:
            assert stream.read() == b"beta"

    def test_none_resolved(self):
        """Zero results raise NoResolvedResultError."""
        with pytest.raises(NoResolvedResultError):
            MavenFormatStage([]).as_file()

    def test_all_filtered_counts_as_none_resolved(self):
        """Pom exclusion leaving nothing is reported as no result."""
        pom = Artifact("g", "parent", "1", extension="pom", file="/x/parent-1.pom")
        stage = MavenFormatStage([pom], locator=ReactorArtifactLocator(exclude_pom_artifacts=True))
        with pytest.raises(NoResolvedResultError):
            stage.as_file()

    def test_more_than_one_lists_every_value(self, jars):
        """The non-unique error names the count and every produced value."""
        with pytest.raises(NonUniqueResultError) as exc_info:
            MavenFormatStage(jars).as_file()

        message = str(exc_info.value)
        assert "(2 artifact(s))" in message
        assert jars[0].file in message
        assert jars[1].file in message
        assert message.endswith(f"{jars[0].file}\n{jars[1].file}")
        assert exc_info.value.results == [jars[0].file, jars[1].file]


def test_resolved_artifact_info_is_unsupported(jars):
    """Metadata output is declared but not implemented."""
    stage = MavenFormatStage(jars)
    with pytest.raises(NotImplementedError):
        stage.as_resolved_artifact_info()
    with pytest.raises(NotImplementedError):
        stage.as_single_resolved_artifact_info()


def test_artifacts_are_required():
    """None is not a valid artifact collection."""
    with pytest.raises(ValueError):
        MavenFormatStage(None)
