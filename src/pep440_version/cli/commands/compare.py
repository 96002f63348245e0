# SPDX-License-Identifier: MIT
"""Compare two versions."""

from __future__ import annotations

import click

from ...compare import compare_versions
from ...version import InvalidVersionError, parse_version
from ..main import echo_error, echo_info, pass_context, Context

_OPERATORS = {-1: "<", 0: "==", 1: ">"}

# Exit statuses for --exit-code
_EXIT_CODES = {-1: 1, 0: 0, 1: 2}


@click.command()
@click.argument("left")
@click.argument("right")
@click.option(
    "--exit-code",
    is_flag=True,
    help="Report the result through the exit status (0 equal, 1 less, 2 greater).",
)
@pass_context
def compare(ctx: Context, left: str, right: str, exit_code: bool) -> None:
    """Compare LEFT and RIGHT by PEP 440 precedence.

    \b
    Examples:
        pep440 compare 1.2.dev1 1.2         # 1.2.dev1 < 1.2
        pep440 compare 1!1 2                # 1!1 > 2
        pep440 compare --exit-code 1.0 v1.0 && echo same
    """
    try:
        left_version = parse_version(left)
        right_version = parse_version(right)
    except InvalidVersionError as e:
        echo_error(e.message)
        raise SystemExit(3 if exit_code else 1)

    result = compare_versions(left_version, right_version)
    echo_info(f"{left_version} {_OPERATORS[result]} {right_version}")

    if exit_code:
        raise SystemExit(_EXIT_CODES[result])
