"""Commands that transform paths without touching their files."""

import click

from pathkit.cli.error_boundary import cli_error_boundary
from pathkit.path import Path


@click.command("join")
@click.argument("base")
@click.argument("fragments", nargs=-1, required=True)
def join_cmd(base: str, fragments: tuple[str, ...]) -> None:
    """Append FRAGMENTS to BASE, resolving "." and ".." lexically."""
    click.echo(Path(base).joinpath(*fragments))


@click.command("normalize")
@click.argument("path")
def normalize_cmd(path: str) -> None:
    """Expand "~" and collapse ".", ".." and repeated separators."""
    click.echo(Path(path).normalize())


@click.command("abbreviate")
@click.argument("path")
def abbreviate_cmd(path: str) -> None:
    """Replace a leading home directory with "~"."""
    click.echo(Path(path).abbreviate())


@click.command("absolute")
@click.argument("path")
@cli_error_boundary
def absolute_cmd(path: str) -> None:
    """Resolve PATH against the current directory."""
    click.echo(Path(path).absolute())


@click.command("components")
@click.argument("path")
def components_cmd(path: str) -> None:
    """Print each component of PATH on its own line."""
    for component in Path(path).components:
        click.echo(component)
