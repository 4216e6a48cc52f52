"""CLI interface for reclaim."""

import sys
from pathlib import Path

import typer

from reclaim import __version__
from reclaim.cleaner import clean_projects
from reclaim.display import (
    confirm_action,
    console,
    select_projects,
    show_cleanup_result,
    show_cleanup_summary,
    show_projects,
    show_removal_summary,
    show_scanning_progress,
)
from reclaim.errors import PoolStartupError
from reclaim.log import configure_logging
from reclaim.models import AnalysisResult, ProjectType
from reclaim.pool import analyze_all_projects, effective_threads
from reclaim.project_types import config_for

# Create Typer app
app = typer.Typer(
    name="reclaim",
    help="Find project build artifacts (target/, node_modules/) and reclaim their disk space",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"reclaim version {__version__}")
        raise typer.Exit()


@app.command()
def kill_all(
    root_dir: Path = typer.Argument(
        Path("."), metavar="DIR", help="Starting directory to clean"
    ),
    yes: bool = typer.Option(False, "-y", "--yes", help="Don't ask for confirmation"),
    dry_run: bool = typer.Option(
        False, "-d", "--dry-run", help="Show what would be deleted without deleting"
    ),
    threads: int = typer.Option(
        1,
        "-t",
        "--threads",
        min=0,
        envvar="RECLAIM_THREADS",
        help="Worker threads (capped at the number of CPUs)",
    ),
    project_type: ProjectType = typer.Option(
        ProjectType.CARGO,
        "-p",
        "--project-type",
        envvar="RECLAIM_PROJECT_TYPE",
        case_sensitive=False,
        help="Kind of project to look for",
    ),
    log_level: str = typer.Option(
        "WARNING", "--log-level", envvar="RECLAIM_LOG_LEVEL", help="Diagnostic log level"
    ),
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Scan DIR for build artifacts and delete the selected ones."""
    configure_logging(log_level)

    if not root_dir.is_dir():
        console.print(f"[red]Error: {root_dir} is not a directory[/red]")
        raise typer.Exit(1)

    config = config_for(project_type)
    console.print(f"Using {effective_threads(threads)} threads")

    with show_scanning_progress() as progress:
        task = progress.add_task(f"Scanning {root_dir}...", total=None)

        def update_progress(result: AnalysisResult):
            progress.update(task, advance=1, description=f"Analyzed {result.project_path}")

        try:
            projects = analyze_all_projects(
                root_dir, threads, project_type, progress_callback=update_progress
            )
        except PoolStartupError as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(1)

    if not projects:
        console.print(f"[yellow]No {config.artifact_dir_name} folders found.[/yellow]")
        raise typer.Exit(0)

    projects.sort(key=lambda p: p.size_bytes)
    show_projects(projects)

    selected = select_projects(projects)
    if not selected:
        console.print("[yellow]Nothing selected[/yellow]")
        raise typer.Exit(0)

    show_removal_summary(selected)

    if dry_run:
        console.print("[yellow]Dry run[/yellow]")
    elif not yes:
        console.print()
        if not confirm_action("Proceed with deletion?"):
            console.print("[yellow]Cancelled[/yellow]")
            raise typer.Exit(0)

    results = clean_projects(
        selected, config, dry_run=dry_run, progress_callback=show_cleanup_result
    )

    if not dry_run:
        show_cleanup_summary(results)


def main() -> None:
    """Console entry point, also usable as the ``cargo kill-all`` subcommand."""
    args = sys.argv[1:]

    # cargo passes the subcommand name as the first argument
    if args[:1] == ["kill-all"]:
        args = args[1:]

    app(args=args)


if __name__ == "__main__":
    main()
