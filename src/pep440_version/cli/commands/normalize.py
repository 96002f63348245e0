# SPDX-License-Identifier: MIT
"""Print the canonical form of version strings."""

from __future__ import annotations

import click

from ...version import try_parse_version
from ..main import echo_error, echo_info, pass_context, Context


@click.command()
@click.argument("versions", nargs=-1, required=True)
@pass_context
def normalize(ctx: Context, versions: tuple[str, ...]) -> None:
    """Print the canonical form of each VERSION.

    Every valid version is printed, one per line. If any version is
    invalid the command exits with status 1.

    \b
    Examples:
        pep440 normalize v1.2               # 1.2
        pep440 normalize 1.0-ALPHA_2        # 1.0a2
        pep440 normalize 2!5b3post66.dev983 # 2!5b3.post66.dev983
    """
    failed = False
    for text in versions:
        version, ok = try_parse_version(text)
        if not ok:
            echo_error(f"Invalid PEP 440 version: {text!r}")
            failed = True
            continue
        if ctx.verbose and str(version) != text.strip():
            echo_info(f"{text} -> {version}")
        else:
            echo_info(str(version))

    if failed:
        raise SystemExit(1)
