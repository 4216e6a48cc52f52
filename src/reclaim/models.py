"""Data models for reclaim."""

from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


def format_size(size_bytes: int) -> str:
    """Format bytes to human-readable string (decimal units)."""
    if size_bytes >= 1000**3:
        return f"{size_bytes / (1000**3):.1f} GB"
    elif size_bytes >= 1000**2:
        return f"{size_bytes / (1000**2):.1f} MB"
    elif size_bytes >= 1000:
        return f"{size_bytes / 1000:.1f} KB"
    else:
        return f"{size_bytes} B"


class ProjectType(str, Enum):
    """Supported project ecosystems."""

    CARGO = "cargo"  # Rust, Cargo.toml + target/
    NPM = "npm"  # Node, package.json + node_modules/


class ProjectTypeConfig(BaseModel):
    """How to recognise a project and its build-artifact directory."""

    model_config = ConfigDict(frozen=True)

    marker_file: str = Field(..., description="File that marks a project root (e.g. 'Cargo.toml')")
    artifact_dir_name: str = Field(
        ..., description="Build-artifact directory inside the project root (e.g. 'target')"
    )


class WorkUnit(BaseModel):
    """A single directory waiting to be partitioned by a worker."""

    model_config = ConfigDict(frozen=True)

    directory_path: Path = Field(..., description="Directory to examine")
    project_type_config: ProjectTypeConfig = Field(..., description="Project type for this run")


class AnalysisResult(BaseModel):
    """Size analysis of one project's build-artifact directory."""

    model_config = ConfigDict(frozen=True)

    project_path: Path = Field(..., description="Project root containing the marker file")
    artifact_path: Path = Field(..., description="Build-artifact directory that was measured")
    size_bytes: int = Field(..., ge=0, description="Total size of the artifact directory in bytes")
    latest_mtime: datetime = Field(
        ..., description="Most recent modification time found inside the artifact directory"
    )

    @property
    def size_human(self) -> str:
        """Human-readable size string (decimal units)."""
        return format_size(self.size_bytes)


class CleanupResult(BaseModel):
    """Result of removing one artifact directory."""

    project_path: str = Field(..., description="Project the artifact belonged to")
    path: str = Field(..., description="Artifact directory that was removed")
    bytes_freed: int = Field(0, description="Bytes freed by cleanup")
    success: bool = Field(True, description="Whether cleanup succeeded")
    error: Optional[str] = Field(None, description="Error message if failed")
    dry_run: bool = Field(False, description="Whether this was a dry run")
