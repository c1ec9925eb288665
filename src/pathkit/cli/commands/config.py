import click

from pathkit.cli.error_boundary import cli_error_boundary
from pathkit.config import (
    PathkitConfig,
    config_from_mapping,
    config_path,
    get_config,
    load_config,
    save_config,
)

CONFIG_KEYS = ("encoding", "case_sensitive", "debug")


def _format_value(value: str | bool | None) -> str:
    if value is None:
        return "(auto)"
    if isinstance(value, bool):
        return str(value).lower()
    return value


@click.group("config")
def config_group() -> None:
    """Manage pathkit configuration."""


@config_group.command("show")
@cli_error_boundary
def config_show() -> None:
    """Print the effective configuration, including environment overrides."""
    cfg = get_config()
    click.echo(click.style("Configuration:", bold=True))
    click.echo(f"  file={config_path()}")
    click.echo(f"  encoding={_format_value(cfg.encoding)}")
    click.echo(f"  case_sensitive={_format_value(cfg.case_sensitive)}")
    click.echo(f"  debug={_format_value(cfg.debug)}")


@config_group.command("set")
@click.argument("key", metavar="KEY", type=click.Choice(CONFIG_KEYS))
@click.argument("value", metavar="VALUE")
@cli_error_boundary
def config_set(key: str, value: str) -> None:
    """Set a key in the config file.

    Use "auto" as the value of case_sensitive to ask the filesystem again.
    """
    # Start from the file alone so environment overrides are not persisted
    current = load_config(environ={})

    if key == "case_sensitive" and value.lower() == "auto":
        updated = PathkitConfig(encoding=current.encoding, case_sensitive=None, debug=current.debug)
    else:
        updated = config_from_mapping({key: value}, base=current)

    path = save_config(updated)
    click.echo(f"Set {key}={_format_value(getattr(updated, key))} in {path}")
