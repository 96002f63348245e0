# SPDX-License-Identifier: MIT
"""Validate a version string or a project's version."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from ...version import InvalidVersionError, Version, parse_version
from ..config import CLIConfig, ConfigError
from ..main import echo_error, echo_info, echo_success, echo_warning, pass_context, Context


def _check_policy(version: Version, config: CLIConfig) -> list[str]:
    """Check a parsed version against the [tool.pep440] policy."""
    errors: list[str] = []

    if version.local and not config.allow_local:
        errors.append(
            f"Local version label '+{'.'.join(version.local)}' is not allowed (allow-local = false)"
        )
    if version.is_devrelease and not config.allow_dev:
        errors.append("Development releases are not allowed (allow-dev = false)")

    return errors


@click.command()
@click.argument("version", required=False)
@click.option(
    "--strict",
    is_flag=True,
    help="Treat warnings as errors.",
)
@pass_context
def check(ctx: Context, version: Optional[str], strict: bool) -> None:
    """Validate VERSION, or the [project] version of the current project.

    Invalid versions are errors. Valid but non-canonical spellings (such as
    "v1.0" or "1.0-alpha") are warnings, and fail the check in strict mode.
    Policy options are read from [tool.pep440] in pyproject.toml.

    \b
    Examples:
        pep440 check                  # Check [project].version
        pep440 check 1.0.post1        # Check a given version
        pep440 check --strict v1.0    # Fails: not canonical
    """
    errors: list[str] = []
    warnings: list[str] = []

    try:
        config = ctx.load_config()
    except (ConfigError, FileNotFoundError) as e:
        if version is None:
            echo_error(str(e))
            raise SystemExit(1)
        # A version given on the command line is checked with default policy
        config = CLIConfig(project_dir=ctx.project_dir or Path.cwd())

    if version is None:
        version = config.version
        if not version:
            echo_error("Missing required field: [project].version")
            raise SystemExit(1)
        echo_info(f"Checking [project].version of {config.name or config.project_dir}")

    echo_info(f"Version: {version}")

    try:
        parsed = parse_version(version)
    except InvalidVersionError as e:
        errors.append(e.message)
    else:
        canonical = str(parsed)
        if canonical != version:
            warnings.append(f"'{version}' is not in canonical form; use '{canonical}'")
        errors.extend(_check_policy(parsed, config))

    # Report results
    echo_info("")

    if warnings:
        echo_warning(f"Warnings ({len(warnings)}):")
        for warning in warnings:
            echo_warning(f"  - {warning}")

    if errors:
        echo_error(f"Errors ({len(errors)}):")
        for error in errors:
            echo_error(f"  - {error}")

    # Determine exit status
    if errors:
        echo_error("\nValidation failed!")
        raise SystemExit(1)

    if warnings and (strict or config.strict):
        echo_error("\nValidation failed (strict mode)!")
        raise SystemExit(1)

    if warnings:
        echo_success("\nValidation passed with warnings.")
    else:
        echo_success("\nValidation passed!")
