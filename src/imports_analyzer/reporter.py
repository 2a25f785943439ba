"""Console rendering of an imports report using rich."""
from typing import Dict, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn, TimeElapsedColumn

from .analyzer_types import BrokenImport, BrokenImportType, ImportsReport, ImportsSummary, UnusedImport

BROKEN_MESSAGES = {
    BrokenImportType.FILE_NOT_FOUND: "File not found",
    BrokenImportType.MODULE_NOT_INSTALLED: "Module not installed",
    BrokenImportType.INVALID_PATH: "Invalid path",
}


def _group_by_file(report: ImportsReport):
    """Group findings by file, keeping the order files first appear in."""
    order: List[str] = []
    unused: Dict[str, List[UnusedImport]] = {}
    broken: Dict[str, List[BrokenImport]] = {}

    for item in report.unused_imports:
        if item.file not in unused and item.file not in broken:
            order.append(item.file)
        unused.setdefault(item.file, []).append(item)
    for item in report.broken_imports:
        if item.file not in unused and item.file not in broken:
            order.append(item.file)
        broken.setdefault(item.file, []).append(item)

    return order, unused, broken


def print_report(report: ImportsReport, console: Optional[Console] = None, quiet: bool = False) -> None:
    """Print a human-readable report."""
    console = console or Console()

    if not quiet:
        console.print()
        console.print("[bold blue]Imports Analysis Report[/bold blue]")
        console.print("[blue]=======================[/blue]")
        console.print()

    if not report.has_issues:
        console.print("[green]No import issues found! Your imports are clean.[/green]")
        if report.errors:
            console.print(f"[yellow]{len(report.errors)} file(s) could not be read[/yellow]")
        return

    order, unused_by_file, broken_by_file = _group_by_file(report)
    for file in order:
        console.print(f"[bold cyan]{escape(file)}[/bold cyan]")

        for item in unused_by_file.get(file, []):
            console.print(f"  Line [yellow]{item.line}[/yellow]: [dim]{escape(item.import_statement)}[/dim]")
            console.print(f"    [red]Unused: {escape(', '.join(item.unused_items))}[/red]")
            console.print()

        for item in broken_by_file.get(file, []):
            console.print(f"  Line [yellow]{item.line}[/yellow]: [dim]{escape(item.import_statement)}[/dim]")
            console.print(f"    [red]{BROKEN_MESSAGES[item.error_type]}: {escape(item.import_path)}[/red]")
            if item.suggestion:
                console.print(f"    [green]Suggestion: {escape(item.suggestion)}[/green]")
            console.print()

    print_summary(report.summary, console)


def print_summary(summary: ImportsSummary, console: Optional[Console] = None) -> None:
    """Print the summary block and follow-up tips."""
    console = console or Console()

    console.print("[bold white]SUMMARY[/bold white]")
    console.print("[white]-------[/white]")
    console.print(f"  Files scanned: {summary.files_scanned}")
    console.print(f"  Total imports: {summary.total_imports}")
    console.print(f"  [red]Unused imports: {summary.unused_imports}[/red]")
    console.print(f"  [red]Broken imports: {summary.broken_imports}[/red]")
    if summary.unreadable_files:
        console.print(f"  [yellow]Unreadable files: {summary.unreadable_files}[/yellow]")
    console.print(f"  Potential savings: [green]{summary.potential_savings}[/green]")
    console.print()

    if summary.unused_imports > 0:
        console.print("[dim]TIP: Remove unused imports to reduce bundle size and improve build performance[/dim]")
    if summary.broken_imports > 0:
        console.print("[yellow]Fix broken imports to resolve compilation errors[/yellow]")
        console.print("[dim]Check if files were moved/renamed, or if packages need to be installed[/dim]")


class RichProgress:
    """Progress bar usable as the analyzer's progress callback.

    Example:
        with RichProgress("Analyzing imports") as progress:
            analyzer.analyze(files, progress=progress)
    """

    def __init__(self, description: str = "Analyzing imports",
                 console: Optional[Console] = None, disable: bool = False):
        self.description = description
        self._progress = Progress(
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=console,
            transient=True,
            disable=disable,
        )
        self._task_id = None

    def __enter__(self) -> 'RichProgress':
        self._progress.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._progress.stop()

    def __call__(self, completed: int, total: int) -> None:
        if self._task_id is None:
            self._task_id = self._progress.add_task(self.description, total=total)
        self._progress.update(self._task_id, completed=completed)
