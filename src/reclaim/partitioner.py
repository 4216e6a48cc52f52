"""Per-directory job: find project artifacts and fan out subdirectories."""

import logging
import os
from pathlib import Path
from typing import Callable

from reclaim.models import AnalysisResult, ProjectTypeConfig, WorkUnit
from reclaim.project_types import EXCLUDED_DIRECTORIES
from reclaim.sizer import scan

logger = logging.getLogger(__name__)


def analyze_artifact(project_path: Path, artifact_path: Path) -> AnalysisResult:
    """Measure an artifact directory and attribute it to its project."""
    size, latest_mtime = scan(artifact_path)
    return AnalysisResult(
        project_path=project_path,
        artifact_path=artifact_path,
        size_bytes=size,
        latest_mtime=latest_mtime,
    )


def find_projects_in_path(
    directory: Path,
    config: ProjectTypeConfig,
    emit_job: Callable[[WorkUnit], None],
    emit_result: Callable[[AnalysisResult], None],
) -> None:
    """
    Partition one directory.

    Subdirectories are handed to ``emit_job`` as new work units, except
    excluded names and a confirmed artifact directory. The artifact directory
    is only confirmed when the marker file sits next to it; it is then
    measured and reported through ``emit_result`` under ``directory``.

    Args:
        directory: Directory to examine
        config: Marker file and artifact directory names for this run
        emit_job: Callback receiving each subdirectory to examine next
        emit_result: Callback receiving the analysis of a confirmed artifact
    """
    dirs: list[str] = []
    files: list[str] = []

    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                try:
                    if entry.is_dir(follow_symlinks=False):
                        dirs.append(entry.name)
                    else:
                        files.append(entry.name)
                except (PermissionError, OSError):
                    continue
    except (PermissionError, OSError) as e:
        logger.warning("Error reading directory at %s: %s", directory, e)
        return

    has_marker = config.marker_file in files
    artifact_path: Path | None = None

    for name in dirs:
        if name == config.artifact_dir_name and has_marker:
            artifact_path = directory / name
        elif name in EXCLUDED_DIRECTORIES:
            continue
        else:
            emit_job(WorkUnit(directory_path=directory / name, project_type_config=config))

    if artifact_path is not None:
        logger.info("Analyzing %s", directory)
        emit_result(analyze_artifact(directory, artifact_path))
