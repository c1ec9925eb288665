"""Info command implementation."""

import click
from rich.console import Console
from rich.table import Table

from pathkit.cli.error_boundary import cli_error_boundary
from pathkit.path import Path


def _flag(value: bool) -> str:
    return "[green]yes[/green]" if value else "[dim]no[/dim]"


def build_info_table(path: Path) -> Table:
    """Build a table of lexical facts and filesystem predicates for path."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("property", style="cyan", no_wrap=True)
    table.add_column("value", no_wrap=True)

    table.add_row("path", path.string)
    table.add_row("normalized", path.normalize().string)
    table.add_row("absolute", path.absolute().string)
    table.add_row("abbreviated", path.abbreviate().string)
    table.add_row("last component", path.last_component)
    table.add_row("extension", path.extension or "[dim]-[/dim]")

    table.add_row("exists", _flag(path.exists()))
    table.add_row("directory", _flag(path.is_directory()))
    table.add_row("file", _flag(path.is_file()))
    table.add_row("symlink", _flag(path.is_symlink()))
    if path.is_symlink():
        table.add_row("symlink destination", path.symlink_destination().string)
    table.add_row("readable", _flag(path.is_readable()))
    table.add_row("writable", _flag(path.is_writable()))
    table.add_row("executable", _flag(path.is_executable()))
    table.add_row("deletable", _flag(path.is_deletable()))
    return table


@click.command("info")
@click.argument("path")
@cli_error_boundary
def info_cmd(path: str) -> None:
    """Show lexical facts and filesystem status of PATH."""
    console = Console(width=200, highlight=False)
    console.print(build_info_table(Path(path)))
