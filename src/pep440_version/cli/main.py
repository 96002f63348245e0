# SPDX-License-Identifier: MIT
"""CLI entry point for the pep440 command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from ..version import VersionError
from .config import CLIConfig, ConfigError, load_config

LOG_FORMAT = "[%(levelname).4s] %(message)s"


class ClickHandler(logging.Handler):
    """Log handler writing to the current stderr through click."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[CLIConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> CLIConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config


pass_context = click.make_pass_decorator(Context, ensure=True)


def setup_logging(verbose: bool = False) -> None:
    """Send library log records to stderr.

    DEBUG level with --verbose, WARNING otherwise. Calling this again only
    adjusts the level.
    """
    logger = logging.getLogger("pep440_version")
    level = logging.DEBUG if verbose else logging.WARNING
    logger.setLevel(level)

    if logger.handlers:
        return

    handler = ClickHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


@click.group()
@click.version_option(package_name="pep440-version")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Change to directory before running command.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """PEP 440 version tool.

    Normalize, compare, sort and validate PEP 440 version strings.

    \b
    Examples:
        pep440 normalize v1.0-ALPHA_2
        pep440 compare 1.0.dev1 1.0
        pep440 sort 1.0 1.0rc1 1.0.post1
        pep440 check
    """
    ctx.verbose = verbose
    ctx.project_dir = directory
    setup_logging(verbose)


# Import and register commands
from .commands import normalize, compare, sort, check

cli.add_command(normalize.normalize)
cli.add_command(compare.compare)
cli.add_command(sort.sort)
cli.add_command(check.check)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    except FileNotFoundError as e:
        echo_error(str(e))
        sys.exit(1)
    except VersionError as e:
        echo_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
