import logging
import os

import click

from pathkit.cli.commands.config import config_group
from pathkit.cli.commands.info import info_cmd
from pathkit.cli.commands.lexical import (
    abbreviate_cmd,
    absolute_cmd,
    components_cmd,
    join_cmd,
    normalize_cmd,
)
from pathkit.cli.commands.listing import glob_cmd, ls_cmd, walk_cmd
from pathkit.cli.error_boundary import cli_error_boundary
from pathkit.config import ENV_DEBUG, get_config

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


def _configure_logging() -> None:
    if os.getenv(ENV_DEBUG) or get_config().debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="pathkit")
@cli_error_boundary
def cli() -> None:
    """Inspect and manipulate paths from the command line."""
    _configure_logging()


# Lexical commands
cli.add_command(join_cmd)
cli.add_command(normalize_cmd)
cli.add_command(abbreviate_cmd)
cli.add_command(absolute_cmd)
cli.add_command(components_cmd)

# Filesystem commands
cli.add_command(info_cmd)
cli.add_command(ls_cmd)
cli.add_command(walk_cmd)
cli.add_command(glob_cmd)

cli.add_command(config_group)


def main() -> None:
    """CLI entry point used by the `pathkit` console script."""
    cli()
