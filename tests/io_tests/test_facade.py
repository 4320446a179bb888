"""
Tests for the SpecificationIO facade and its module-level shortcuts.
"""

import pytest

from modelzoo_spec.core.config import Settings
from modelzoo_spec.domain.model import ModelSpecification
from modelzoo_spec.errors import UnrecognizedVersion, UnsupportedWriteTarget
from modelzoo_spec.io import facade
from modelzoo_spec.io.facade import SpecificationIO
from modelzoo_spec.io.registry import LEGACY_REGISTRY
from tests.conftest import example_document, minimal_document


@pytest.fixture
def io():
    return SpecificationIO()


class TestDetectAndRead:
    """Tests for detect_and_read."""

    def test_reads_known_document(self, io, document):
        """Test that a csbdeep document is read into a specification."""
        spec = io.detect_and_read(document)

        assert spec.name == "model name"
        assert spec.format_version == "0.2.1-csbdeep"

    def test_unknown_version_fails_fast(self, io):
        """Test that detection failure propagates."""
        with pytest.raises(UnrecognizedVersion):
            io.detect_and_read(minimal_document("0.4.0"))

    def test_upgrade_on_read(self, io):
        """Test that upgrade=True stamps the newest tag."""
        spec = io.detect_and_read(example_document("0.2.0-csbdeep"), upgrade=True)

        assert spec.format_version == "0.2.1-csbdeep"

    def test_legacy_profile(self):
        """Test that the legacy table applies the n2v rule."""
        spec = SpecificationIO(LEGACY_REGISTRY).detect_and_read(example_document(source="n2v"))

        assert spec.source is None


class TestWrite:
    """Tests for write and its version gate."""

    def test_writes_own_version(self, io, document):
        """Test that a read specification writes under its own tag."""
        data = io.write(io.detect_and_read(document))

        assert data["format_version"] == "0.2.1-csbdeep"

    @pytest.mark.parametrize("version", ["0.3.0", "0.4.0", None])
    def test_unsupported_version_fails(self, io, version):
        """Test that graphs with other tags are never written in the csbdeep layout."""
        spec = ModelSpecification(format_version=version)

        with pytest.raises(UnsupportedWriteTarget):
            io.write(spec)

    def test_target_hint_within_same_writer(self, io, document):
        """Test that a sibling tag selects the same writer without restamping."""
        spec = io.detect_and_read(document)

        data = io.write(spec, "0.2.0-csbdeep")

        assert data["format_version"] == "0.2.1-csbdeep"

    def test_unknown_target_hint_fails(self, io, document):
        """Test that an unregistered target is refused."""
        spec = io.detect_and_read(document)

        with pytest.raises(UnsupportedWriteTarget) as excinfo:
            io.write(spec, "0.4.0")

        assert excinfo.value.version == "0.4.0"

    def test_target_hint_cannot_override_graph_version(self, io):
        """Test that a graph tagged for another revision is refused even with a valid hint."""
        spec = ModelSpecification(format_version="0.3.0")

        with pytest.raises(UnsupportedWriteTarget) as excinfo:
            io.write(spec, "0.2.1-csbdeep")

        assert excinfo.value.version == "0.3.0"


class TestUpgrade:
    """Tests for upgrade and version listing."""

    def test_supported_versions_oldest_first(self, io):
        """Test that registered tags are listed in release order."""
        assert io.supported_versions() == ["0.2.0-csbdeep", "0.2.1-csbdeep"]

    def test_upgrade_returns_copy(self, io):
        """Test that upgrade stamps a copy and leaves the original alone."""
        spec = io.detect_and_read(example_document("0.2.0-csbdeep"))

        upgraded = io.upgrade(spec)

        assert upgraded.format_version == "0.2.1-csbdeep"
        assert spec.format_version == "0.2.0-csbdeep"
        upgraded.inputs[0].name = "renamed"
        assert spec.inputs[0].name == "input"

    def test_upgraded_graph_is_writable(self, io):
        """Test that an upgraded foreign graph can then be written."""
        spec = ModelSpecification(format_version="0.1.0", name="old")

        data = io.write(io.upgrade(spec))

        assert data["format_version"] == "0.2.1-csbdeep"

    def test_upgrade_carries_repository_and_attachments(self, io):
        """Test that upgrade copies git_repo and attachments independently of the original."""
        spec = ModelSpecification(
            format_version="0.2.0-csbdeep",
            git_repo="https://github.com/juglab/n2v",
            attachments={"files": ["README.md", "cover.png"]},
        )

        upgraded = io.upgrade(spec)
        upgraded.attachments["files"].append("extra.png")

        assert upgraded.git_repo == "https://github.com/juglab/n2v"
        assert upgraded.attachments["files"] == ["README.md", "cover.png", "extra.png"]
        assert spec.attachments == {"files": ["README.md", "cover.png"]}


class TestModuleFunctions:
    """Tests for the settings-driven shortcuts."""

    def test_default_profile(self, document):
        """Test that the current profile is used by default."""
        spec = facade.detect_and_read(example_document(source="n2v"), Settings())

        assert spec.source == "n2v"

    def test_legacy_profile_from_settings(self):
        """Test that READER_PROFILE=legacy selects the legacy reader."""
        spec = facade.detect_and_read(
            example_document(source="n2v"), Settings(READER_PROFILE="legacy")
        )

        assert spec.source is None

    def test_profile_from_environment(self, monkeypatch):
        """Test that the profile can be set through the environment."""
        monkeypatch.setenv("MODELZOO_READER_PROFILE", "legacy")

        spec = facade.detect_and_read(example_document(source="n2v"))

        assert spec.source is None

    def test_upgrade_on_read_setting(self):
        """Test that UPGRADE_ON_READ stamps the newest version."""
        spec = facade.detect_and_read(
            example_document("0.2.0-csbdeep"), Settings(UPGRADE_ON_READ=True)
        )

        assert spec.format_version == "0.2.1-csbdeep"

    def test_unknown_profile(self):
        """Test that an unknown profile is a configuration error."""
        with pytest.raises(ValueError):
            facade.get_io(Settings(READER_PROFILE="future"))

    def test_write_and_upgrade_shortcuts(self, document):
        """Test the write and upgrade shortcuts."""
        spec = facade.upgrade(facade.detect_and_read(document))

        assert facade.write(spec)["name"] == "model name"
