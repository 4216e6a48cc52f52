"""Project type definitions for reclaim."""

from reclaim.models import ProjectType, ProjectTypeConfig

PROJECT_TYPES: dict[ProjectType, ProjectTypeConfig] = {
    ProjectType.CARGO: ProjectTypeConfig(marker_file="Cargo.toml", artifact_dir_name="target"),
    ProjectType.NPM: ProjectTypeConfig(marker_file="package.json", artifact_dir_name="node_modules"),
}

# Never queued for scanning, never measured as an artifact directory.
# A confirmed project's own artifact directory is matched before this set.
EXCLUDED_DIRECTORIES = frozenset(
    {
        ".git",
        ".hg",
        ".svn",
        "node_modules",
        ".vscode",
        ".idea",
        "src",
    }
)


def config_for(project_type: ProjectType) -> ProjectTypeConfig:
    """Get the frozen configuration for a project type."""
    return PROJECT_TYPES[project_type]


def identifiers_for(project_type: ProjectType) -> tuple[str, str]:
    """
    Get the identifiers for a project type.

    For an npm project these are ``package.json`` and ``node_modules``.

    Returns:
        Tuple of (marker_file_name, artifact_dir_name)
    """
    config = config_for(project_type)
    return config.marker_file, config.artifact_dir_name
