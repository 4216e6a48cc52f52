"""Tests for the per-directory partitioning job."""

import logging
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from reclaim.models import ProjectType
from reclaim.partitioner import analyze_artifact, find_projects_in_path
from reclaim.project_types import config_for

real_scandir = os.scandir


class Collector:
    """Records what a partitioning job emits."""

    def __init__(self):
        self.jobs = []
        self.results = []

    def run(self, directory: Path, project_type: ProjectType = ProjectType.CARGO):
        find_projects_in_path(
            directory, config_for(project_type), self.jobs.append, self.results.append
        )
        return self

    @property
    def job_names(self) -> set[str]:
        return {unit.directory_path.name for unit in self.jobs}


@pytest.fixture
def cargo_project(tmp_path):
    project = tmp_path / "proj"
    (project / "target" / "debug").mkdir(parents=True)
    (project / "target" / "debug" / "app").write_bytes(b"x" * 2048)
    (project / "src").mkdir()
    (project / "src" / "main.rs").write_text("fn main() {}")
    (project / "Cargo.toml").write_text("[package]")
    (project / "examples").mkdir()
    return project


class TestFindProjectsInPath:
    def test_reports_confirmed_artifact(self, cargo_project):
        collector = Collector().run(cargo_project)

        assert len(collector.results) == 1
        result = collector.results[0]
        assert result.project_path == cargo_project
        assert result.artifact_path == cargo_project / "target"
        assert result.size_bytes == 2048

    def test_artifact_is_not_queued(self, cargo_project):
        collector = Collector().run(cargo_project)

        assert "target" not in collector.job_names
        assert collector.job_names == {"examples"}

    def test_jobs_carry_same_config(self, cargo_project):
        collector = Collector().run(cargo_project)

        for unit in collector.jobs:
            assert unit.project_type_config == config_for(ProjectType.CARGO)
            assert unit.directory_path.parent == cargo_project

    def test_artifact_without_marker_is_queued(self, tmp_path):
        (tmp_path / "target").mkdir()

        collector = Collector().run(tmp_path)

        assert collector.results == []
        assert collector.job_names == {"target"}

    def test_marker_directory_does_not_count(self, tmp_path):
        (tmp_path / "Cargo.toml").mkdir()
        (tmp_path / "target").mkdir()

        collector = Collector().run(tmp_path)

        assert collector.results == []
        assert collector.job_names == {"Cargo.toml", "target"}

    @pytest.mark.parametrize("name", [".git", ".hg", ".svn", "node_modules", ".vscode", ".idea", "src"])
    def test_excluded_directories_are_skipped(self, tmp_path, name):
        (tmp_path / name).mkdir()
        (tmp_path / "lib").mkdir()

        collector = Collector().run(tmp_path)

        assert collector.job_names == {"lib"}

    def test_npm_node_modules_with_marker(self, tmp_path):
        (tmp_path / "package.json").write_text("{}")
        (tmp_path / "node_modules" / "react").mkdir(parents=True)
        (tmp_path / "node_modules" / "react" / "index.js").write_text("module.exports = {}")

        collector = Collector().run(tmp_path, ProjectType.NPM)

        assert len(collector.results) == 1
        assert collector.results[0].size_bytes == len("module.exports = {}")
        assert collector.jobs == []

    def test_npm_node_modules_without_marker_is_skipped(self, tmp_path):
        (tmp_path / "node_modules").mkdir()

        collector = Collector().run(tmp_path, ProjectType.NPM)

        assert collector.results == []
        assert collector.jobs == []

    def test_symlinked_directory_is_not_queued(self, tmp_path):
        real = tmp_path / "real"
        real.mkdir()
        (tmp_path / "alias").symlink_to(real, target_is_directory=True)

        collector = Collector().run(tmp_path)

        assert collector.job_names == {"real"}

    def test_unreadable_directory_warns_and_emits_nothing(self, tmp_path, caplog):
        def fake_scandir(path):
            if Path(path) == tmp_path:
                raise PermissionError(13, "Permission denied", str(path))
            return real_scandir(path)

        with patch("os.scandir", side_effect=fake_scandir):
            with caplog.at_level(logging.WARNING, logger="reclaim"):
                collector = Collector().run(tmp_path)

        assert collector.jobs == []
        assert collector.results == []
        assert "Error reading directory" in caplog.text
        assert str(tmp_path) in caplog.text

    def test_not_a_directory(self, tmp_path, caplog):
        file_path = tmp_path / "file.txt"
        file_path.write_text("x")

        with caplog.at_level(logging.WARNING, logger="reclaim"):
            collector = Collector().run(file_path)

        assert collector.jobs == []
        assert collector.results == []
        assert "Error reading directory" in caplog.text


class TestAnalyzeArtifact:
    def test_measures_artifact_only(self, cargo_project):
        result = analyze_artifact(cargo_project, cargo_project / "target")

        assert result.project_path == cargo_project
        assert result.size_bytes == 2048
