"""Rich terminal display for reclaim."""

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.table import Table

from reclaim.models import AnalysisResult, CleanupResult, format_size

console = Console()


def show_projects(projects: list[AnalysisResult]) -> None:
    """Display a numbered table of analyzed projects."""
    table = Table(title="Build Artifacts", show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Project")
    table.add_column("Size", justify="right")
    table.add_column("Last Modified", justify="right")

    for i, project in enumerate(projects, 1):
        table.add_row(
            str(i),
            str(project.project_path),
            project.size_human,
            project.latest_mtime.astimezone().strftime("%Y-%m-%d %H:%M"),
        )

    console.print(table)
    total = sum(p.size_bytes for p in projects)
    console.print(f"[bold]Total: {format_size(total)}[/bold]")


def parse_selection(user_input: str, count: int) -> list[int]:
    """
    Interpret a selection such as ``1,3,5-7`` or ``all``.

    Numbers are 1-based; entries out of range or unparseable are ignored.

    Returns:
        Sorted 0-based indices without duplicates
    """
    stripped = user_input.strip().lower()

    if not stripped:
        return []

    if stripped in ("all", "*"):
        return list(range(count))

    selected: set[int] = set()
    for part in stripped.replace(" ", ",").split(","):
        if not part:
            continue

        if "-" in part:
            start, _, end = part.partition("-")
            if not (start.isdigit() and end.isdigit()):
                continue
            numbers = range(int(start), int(end) + 1)
        elif part.isdigit():
            numbers = range(int(part), int(part) + 1)
        else:
            continue

        selected.update(n - 1 for n in numbers if 1 <= n <= count)

    return sorted(selected)


def select_projects(projects: list[AnalysisResult]) -> list[AnalysisResult]:
    """Ask which projects' artifacts should be deleted."""
    console.print(
        "\n[dim]Enter numbers (e.g. 1,3,5-7), 'all', or leave empty to cancel[/dim]"
    )
    user_input = console.input("[bold cyan]Select the folders to delete:[/bold cyan] ")
    return [projects[i] for i in parse_selection(user_input, len(projects))]


def show_removal_summary(selected: list[AnalysisResult]) -> None:
    """Display how much space the selection would free."""
    total = sum(p.size_bytes for p in selected)
    console.print(f"\n{len(selected)} Folders to be removed")
    console.print(f"total space to be freed [bold]{format_size(total)}[/bold]")


def show_cleanup_result(result: CleanupResult) -> None:
    """Display result of a single removal."""
    if result.success:
        verb = "would free" if result.dry_run else "freed"
        console.print(f"  [green]✓[/green] {result.path}: {format_size(result.bytes_freed)} {verb}")
    else:
        console.print(f"  [red]✗[/red] {result.path}: {result.error}")


def show_cleanup_summary(results: list[CleanupResult]) -> None:
    """Display cleanup totals."""
    total_freed = sum(r.bytes_freed for r in results if r.success)
    failure_count = sum(1 for r in results if not r.success)

    console.print()
    console.print(f"[bold green]Space freed: {format_size(total_freed)}[/bold green]")
    if failure_count > 0:
        console.print(f"[red]Failed: {failure_count}[/red]")


def show_scanning_progress() -> Progress:
    """Create spinner for scanning."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        TextColumn("{task.completed} found"),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    )


def confirm_action(message: str) -> bool:
    """Ask for confirmation."""
    from rich.prompt import Confirm

    return Confirm.ask(message, console=console)
