"""Tests for project type definitions."""

from reclaim.models import ProjectType, ProjectTypeConfig
from reclaim.project_types import (
    EXCLUDED_DIRECTORIES,
    PROJECT_TYPES,
    config_for,
    identifiers_for,
)


class TestProjectTypes:
    def test_every_type_is_defined(self):
        for project_type in ProjectType:
            assert isinstance(PROJECT_TYPES[project_type], ProjectTypeConfig)

    def test_cargo_identifiers(self):
        assert identifiers_for(ProjectType.CARGO) == ("Cargo.toml", "target")

    def test_npm_identifiers(self):
        assert identifiers_for(ProjectType.NPM) == ("package.json", "node_modules")

    def test_config_for_returns_shared_config(self):
        assert config_for(ProjectType.CARGO) is config_for(ProjectType.CARGO)


class TestExcludedDirectories:
    def test_version_control_is_excluded(self):
        assert {".git", ".hg", ".svn"} <= EXCLUDED_DIRECTORIES

    def test_editor_and_source_dirs_are_excluded(self):
        assert {".vscode", ".idea", "src", "node_modules"} <= EXCLUDED_DIRECTORIES

    def test_cargo_artifact_is_not_excluded(self):
        assert "target" not in EXCLUDED_DIRECTORIES
