"""Removal of selected artifact directories."""

import logging
import shutil
from pathlib import Path
from typing import Callable

from reclaim.models import AnalysisResult, CleanupResult, ProjectTypeConfig
from reclaim.sizer import scan

logger = logging.getLogger(__name__)


def is_path_safe(artifact_path: Path, config: ProjectTypeConfig) -> bool:
    """
    Check that an artifact directory is still safe to delete.

    The directory must still carry the configured artifact name, be a real
    directory (not a symlink) and sit next to the project's marker file.

    Args:
        artifact_path: Artifact directory about to be removed
        config: Project type configuration of the run

    Returns:
        True if safe to delete, False otherwise
    """
    if artifact_path.name != config.artifact_dir_name:
        return False

    if artifact_path.is_symlink() or not artifact_path.is_dir():
        return False

    return (artifact_path.parent / config.marker_file).is_file()


def delete_path(path: Path, dry_run: bool = False) -> tuple[int, str | None]:
    """
    Delete an artifact directory.

    Args:
        path: Directory to delete
        dry_run: If True, don't actually delete

    Returns:
        Tuple of (bytes_freed, error_message)
    """
    if not path.exists():
        return 0, None

    try:
        size, _ = scan(path)

        if dry_run:
            return size, None

        shutil.rmtree(path)
        return size, None

    except PermissionError as e:
        return 0, f"Permission denied: {e}"
    except OSError as e:
        return 0, f"OS error: {e}"


def clean_projects(
    projects: list[AnalysisResult],
    config: ProjectTypeConfig,
    dry_run: bool = False,
    progress_callback: Callable[[CleanupResult], None] | None = None,
) -> list[CleanupResult]:
    """
    Remove the artifact directory of each selected project.

    A failure on one project does not stop the others.

    Args:
        projects: Selected analysis results
        config: Project type configuration of the run
        dry_run: If True, don't actually delete
        progress_callback: Optional callback(result) after each project

    Returns:
        One CleanupResult per project, in the given order
    """
    results: list[CleanupResult] = []

    for project in projects:
        artifact_path = project.project_path / config.artifact_dir_name

        if not is_path_safe(artifact_path, config):
            logger.warning("Refusing to delete %s", artifact_path)
            result = CleanupResult(
                project_path=str(project.project_path),
                path=str(artifact_path),
                success=False,
                error=f"Blocked path: {artifact_path}",
                dry_run=dry_run,
            )
        else:
            bytes_freed, error = delete_path(artifact_path, dry_run)
            if error:
                logger.warning("Could not delete %s: %s", artifact_path, error)
            result = CleanupResult(
                project_path=str(project.project_path),
                path=str(artifact_path),
                bytes_freed=bytes_freed,
                success=error is None,
                error=error,
                dry_run=dry_run,
            )

        results.append(result)
        if progress_callback:
            progress_callback(result)

    return results
