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

"""History scanner: fold a branch's commits into one bump level.

Commits are supplied newest first and scanned until the boundary
commit (the commit of the previous stable tag).  For each commit the
checks run in a fixed order, and the first one that applies decides
what the commit contributes::

    ┌──────────────────────────┬───────────────────────────────────────────┐
    │ Check                    │ Effect                                    │
    ├──────────────────────────┼───────────────────────────────────────────┤
    │ sha == boundary          │ stop scanning (boundary excluded)         │
    │ #wip                     │ skip the commit entirely                  │
    │ #major                   │ return MAJOR immediately                  │
    │ #minor                   │ raise to MINOR, next commit               │
    │ #patch (level < MINOR)   │ raise to PATCH, next commit               │
    │ rule table match         │ MAJOR returns immediately, otherwise      │
    │                          │ raise to the rule's level, next commit    │
    │ fix #N (level < MINOR)   │ look up issue N: found → PATCH, and       │
    │                          │ MINOR if it carries an escalation label   │
    └──────────────────────────┴───────────────────────────────────────────┘

The level never decreases.  Issue lookups are the only I/O; they are
injected as an :class:`IssueLabelLookup` and a failed lookup only skips
the escalation, it never aborts the scan.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from tagbump._types import Commit
from tagbump.commit_parsing import (
    FIXES_ISSUE,
    LEGACY_MAJOR,
    LEGACY_MINOR,
    LEGACY_PATCH,
    WIP,
    BumpType,
    RuleTable,
    at_least,
    classify,
    max_bump,
)
from tagbump.logging import get_logger

logger = get_logger(__name__)

__all__ = [
    'DEFAULT_ISSUE_LABELS',
    'IssueFound',
    'IssueLabelLookup',
    'IssueLookupFailed',
    'IssueLookupResult',
    'IssueNotFound',
    'resolve_bump',
]

DEFAULT_ISSUE_LABELS: frozenset[str] = frozenset({'enhancement'})


@dataclass(frozen=True)
class IssueFound:
    """The issue exists; *labels* are its label names (possibly empty)."""

    labels: frozenset[str] = frozenset()


@dataclass(frozen=True)
class IssueNotFound:
    """The issue does not exist (or is not visible)."""


@dataclass(frozen=True)
class IssueLookupFailed:
    """The lookup could not be completed (network, auth, bad payload)."""

    reason: str = ''


IssueLookupResult = IssueFound | IssueNotFound | IssueLookupFailed


class IssueLabelLookup(Protocol):
    """Async callable returning the labels of an issue."""

    async def __call__(self, issue_number: int) -> IssueLookupResult:
        """Look up *issue_number*."""
        ...


async def _lookup(lookup: IssueLabelLookup, issue_number: int) -> IssueLookupResult:
    try:
        return await lookup(issue_number)
    except Exception as exc:  # noqa: BLE001
        return IssueLookupFailed(reason=str(exc) or type(exc).__name__)


async def resolve_bump(
    commits: Iterable[Commit],
    boundary_sha: str,
    issue_labels: frozenset[str],
    rules: RuleTable,
    lookup_issue_labels: IssueLabelLookup,
) -> BumpType:
    """Compute the aggregate bump level of a commit history.

    Args:
        commits: Branch history, newest first.
        boundary_sha: SHA of the previous stable tag's commit.  Empty
            means scan the whole history.
        issue_labels: Labels that escalate a ``fix #N`` commit to MINOR.
        rules: Merged classification table.
        lookup_issue_labels: Issue-tracker lookup.

    Returns:
        The aggregate :class:`BumpType`.
    """
    level = BumpType.NONE

    for commit in commits:
        message = commit.message

        if boundary_sha and commit.sha == boundary_sha:
            logger.debug('boundary_reached', sha=commit.sha)
            break

        if WIP.matches(message):
            logger.debug('wip_commit_skipped', sha=commit.sha, subject=commit.subject)
            continue

        if LEGACY_MAJOR.matches(message):
            logger.info('legacy_marker_found', marker='#major', subject=commit.subject)
            return BumpType.MAJOR

        if LEGACY_MINOR.matches(message):
            logger.info('legacy_marker_found', marker='#minor', subject=commit.subject)
            level = max_bump(level, BumpType.MINOR)
            continue

        if not at_least(level, BumpType.MINOR) and LEGACY_PATCH.matches(message):
            logger.info('legacy_marker_found', marker='#patch', subject=commit.subject)
            level = max_bump(level, BumpType.PATCH)
            continue

        match = classify(message, rules)
        if match is not None:
            logger.info('commit_type_found', type=match.key, bump=match.bump.value, subject=commit.subject)
            if match.bump == BumpType.MAJOR:
                return BumpType.MAJOR
            level = max_bump(level, match.bump)
            continue

        if at_least(level, BumpType.MINOR):
            continue

        issue_number = FIXES_ISSUE.issue_number(message)
        if issue_number is None:
            continue

        logger.info('checking_issue_labels', issue=issue_number)
        result = await _lookup(lookup_issue_labels, issue_number)
        if isinstance(result, IssueFound):
            level = max_bump(level, BumpType.PATCH)
            if result.labels & issue_labels:
                logger.info(
                    'issue_escalation',
                    issue=issue_number,
                    labels=sorted(result.labels & issue_labels),
                )
                level = BumpType.MINOR
        elif isinstance(result, IssueLookupFailed):
            logger.warning(
                'issue_lookup_failed',
                issue=issue_number,
                reason=result.reason,
                hint='Label escalation skipped for this commit.',
            )
        else:
            logger.debug('issue_not_found', issue=issue_number)

    return level
