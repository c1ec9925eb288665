"""Commands that list directory contents."""

import errno
import os

import click

from pathkit.cli.error_boundary import cli_error_boundary
from pathkit.path import Path


@click.command("ls")
@click.argument("path", default=".")
@click.option("-r", "--recursive", is_flag=True, help="List every entry below PATH.")
@cli_error_boundary
def ls_cmd(path: str, recursive: bool) -> None:
    """List the children of PATH."""
    directory = Path(path)
    children = directory.recursive_children() if recursive else directory.children()
    for child in children:
        click.echo(child)


@click.command("walk")
@click.argument("path", default=".")
@click.option(
    "--skip",
    "skip_names",
    multiple=True,
    metavar="NAME",
    help="Do not descend into directories with this name. May be repeated.",
)
@click.option("--skip-hidden", is_flag=True, help="Ignore entries starting with a dot.")
@cli_error_boundary
def walk_cmd(path: str, skip_names: tuple[str, ...], skip_hidden: bool) -> None:
    """Walk PATH depth-first, printing entries indented by depth."""
    root = Path(path)
    # the enumerator itself yields nothing for a missing root
    if not root.exists():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)

    entries = root.iterate_children(skip_hidden=skip_hidden)
    for entry in entries:
        click.echo("  " * (entries.level - 1) + entry.last_component)
        if entry.last_component in skip_names:
            entries.skip_descendants()


@click.command("glob")
@click.argument("pattern")
@cli_error_boundary
def glob_cmd(pattern: str) -> None:
    """Print paths matching PATTERN; "~" and "{a,b}" are expanded."""
    for match in Path.glob_pattern(pattern):
        click.echo(match)
