# k6ctl/cli/utils/output.py
"""Output formatting utilities"""

from typing import Optional, Dict

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich import box

from ...models import ArchiveResult, ConfigMapResult
from ...utils.file_utils import format_size

console = Console()


def format_archive_result(result: ArchiveResult, size: Optional[int] = None) -> None:
    """Format and display archive operation result"""
    lines = [
        f"[green]✓[/green] Archive created successfully!",
        f"",
        f"[bold]Script:[/bold] {result.script_path}",
        f"[bold]Archive:[/bold] {result.archive_path}",
    ]

    if size is not None:
        lines.append(f"[bold]Size:[/bold] {format_size(size)}")

    panel = Panel(
        "\n".join(lines),
        title="Archive Result",
        border_style="green"
    )
    console.print(panel)


def format_publish_result(result: ConfigMapResult) -> None:
    """Format and display publish operation result"""
    lines = [
        f"[green]✓[/green] ConfigMap created successfully!",
        f"",
        f"[bold]Namespace:[/bold] {result.namespace}",
        f"[bold]ConfigMap:[/bold] {result.config_map_name}",
        f"[bold]File:[/bold] {result.archive_filename}",
    ]

    panel = Panel(
        "\n".join(lines),
        title="Publish Result",
        border_style="green"
    )
    console.print(panel)


def format_script_reference(result: ConfigMapResult) -> None:
    """Display the script block a TestRun should use"""
    reference = result.script_reference()
    snippet = (
        "script:\n"
        "  configMap:\n"
        f"    name: {reference['name']}\n"
        f"    file: {reference['file']}\n"
    )
    console.print(Panel(
        Syntax(snippet, "yaml", theme="monokai"),
        title="TestRun script reference",
        border_style="cyan"
    ))


def format_env_vars(env_vars: Dict[str, str]) -> None:
    """Display validated environment variable names"""
    table = Table(title="Environment", box=box.ROUNDED)
    table.add_column("Name", style="cyan")
    table.add_column("Length", justify="right")

    for key, value in sorted(env_vars.items()):
        table.add_row(key, str(len(value)))

    console.print(table)


def print_error(message: str, title: str = "Error") -> None:
    """Print error message in a panel"""
    console.print(Panel(
        f"[red]{message}[/red]",
        title=f"[bold red]{title}[/bold red]",
        border_style="red"
    ))


def print_warning(message: str) -> None:
    """Print warning message"""
    console.print(f"[yellow]Warning:[/yellow] {message}")
