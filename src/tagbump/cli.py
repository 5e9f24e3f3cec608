# Copyright 2026 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# SPDX-License-Identifier: Apache-2.0

"""Command-line entry point for tagbump.

Designed to run as a GitHub Actions step: inputs come from the
``INPUT_*`` environment, outputs go to ``$GITHUB_OUTPUT``, logs go to
stderr and a summary table goes to stdout.  Every input can also be
given as a flag for local use::

    GITHUB_REPOSITORY=octo/hello GITHUB_REF=refs/heads/main \\
        INPUT_GITHUB-TOKEN=... tagbump --dry-run --with-v

Exit codes: ``0`` on success, ``1`` on a :class:`~tagbump.errors.TagBumpError`.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Sequence
from io import StringIO

from rich.console import Console
from rich.table import Table

from tagbump.backends.forge.github import open_github_forge
from tagbump.config import TagBumpConfig, load_config, parse_issue_labels
from tagbump.errors import TagBumpError
from tagbump.logging import configure_logging, get_logger
from tagbump.outputs import ActionOutputs
from tagbump.release import ReleaseResult, run_release

logger = get_logger(__name__)

__all__ = [
    'build_parser',
    'format_summary',
    'main',
    'print_summary',
]


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser."""
    parser = argparse.ArgumentParser(
        prog='tagbump',
        description='Create the next semantic version tag for a branch.',
    )
    parser.add_argument('--branch', help='Branch to tag instead of the one in GITHUB_REF.')
    parser.add_argument('--tag', help='Explicit tag to create.')
    parser.add_argument('--bump', choices=['major', 'minor', 'patch'], help='Default bump level.')
    parser.add_argument('--release-branch', help='Comma-separated release-branch regexes.')
    parser.add_argument('--with-v', action='store_true', default=None, help='Prefix new tags with "v".')
    parser.add_argument('--dry-run', action='store_true', default=None, help='Do not create the tag.')
    parser.add_argument('--issue-labels', help='Comma-separated labels that escalate fixes to minor.')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging.')
    parser.add_argument('-q', '--quiet', action='store_true', help='Only log warnings and errors.')
    parser.add_argument('--json-log', action='store_true', help='Emit JSON log lines.')
    return parser


def _config_from_args(args: argparse.Namespace) -> TagBumpConfig:
    return load_config(
        branch=args.branch,
        tag=args.tag,
        bump=args.bump,
        release_branch=args.release_branch,
        with_v=args.with_v,
        dry_run=args.dry_run,
        issue_labels=parse_issue_labels(args.issue_labels) if args.issue_labels else None,
    )


def print_summary(result: ReleaseResult, *, dry_run: bool, console: Console | None = None) -> None:
    """Print the run outcome as a Rich table."""
    if console is None:
        console = Console()

    plan = result.plan
    table = Table(show_header=True, header_style='bold', show_edge=False, pad_edge=False)
    table.add_column('Output', style='bold')
    table.add_column('Value')
    table.add_row('tag', plan.previous_tag)
    table.add_row('version', plan.previous_version)
    table.add_row('new-tag', plan.next_tag)
    table.add_row('new-version', plan.next_version)
    console.print(table)

    if result.tag_created:
        console.print(f'\n[bold green]Created tag {plan.next_tag}[/] on {result.branch.name} ({result.branch.tip_sha[:8]}).')
    elif not plan.create_tag:
        console.print(f'\n[yellow]No new commits on {result.branch.name} since {plan.previous_tag}; nothing to tag.[/]')
    elif dry_run:
        console.print(f'\n[yellow]Dry run:[/] would create tag {plan.next_tag} on {result.branch.name}.')


def format_summary(result: ReleaseResult, *, dry_run: bool) -> str:
    """Return :func:`print_summary` output as plain text."""
    buf = StringIO()
    print_summary(result, dry_run=dry_run, console=Console(file=buf, force_terminal=False, width=100))
    return buf.getvalue().rstrip('\n')


async def _run(config: TagBumpConfig) -> ReleaseResult:
    async with open_github_forge(config) as forge:
        return await run_release(forge, config, ActionOutputs())


def main(argv: Sequence[str] | None = None) -> int:
    """Run tagbump and return the process exit code."""
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose, quiet=args.quiet, json_log=args.json_log)

    try:
        config = _config_from_args(args)
        logger.info('run', repository=config.repository, dry_run=config.dry_run)
        result = asyncio.run(_run(config))
    except TagBumpError as exc:
        logger.error('tagbump_failed', code=exc.code.value, error=exc.message, hint=exc.hint or None)
        return 1

    print_summary(result, dry_run=config.dry_run)
    return 0


if __name__ == '__main__':
    sys.exit(main())
