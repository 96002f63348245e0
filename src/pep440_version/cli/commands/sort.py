# SPDX-License-Identifier: MIT
"""Sort versions by PEP 440 precedence."""

from __future__ import annotations

import click

from ...compare import version_key
from ...version import InvalidVersionError, Version, parse_version
from ..main import echo_error, echo_info, pass_context, Context


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--reverse",
    "-r",
    is_flag=True,
    help="Sort from newest to oldest.",
)
@click.option(
    "--canonical",
    is_flag=True,
    help="Print versions in canonical form instead of as given.",
)
@pass_context
def sort(ctx: Context, versions: tuple[str, ...], reverse: bool, canonical: bool) -> None:
    """Print VERSIONS sorted oldest first.

    \b
    Examples:
        pep440 sort 1.0 1.0.post1 1.0rc1 1.0.dev0
        pep440 sort --reverse --canonical v2.0 1.0-1
    """
    parsed: list[tuple[Version, str]] = []
    for text in versions:
        try:
            parsed.append((parse_version(text), text))
        except InvalidVersionError as e:
            echo_error(e.message)
            raise SystemExit(1)

    for version, text in sorted(parsed, key=lambda pair: version_key(pair[0]), reverse=reverse):
        echo_info(str(version) if canonical else text.strip())
