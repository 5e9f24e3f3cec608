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

"""Version planner: turn a bump level into the next version.

::

    release branch?  msg level   next version
    ───────────────  ──────────  ───────────────────────────────────────
    no               (any)       pre-release of latest, keyed by branch
    yes              NONE        latest + requested default level
    yes              other       latest + msg level

Release-branch membership is a comma-separated list of regular
expressions searched anywhere in the branch name, so ``main`` also
matches ``maintenance``; anchor patterns (``^main$``) to avoid that.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from tagbump.commit_parsing import BumpType
from tagbump.errors import E, TagBumpError
from tagbump.versions import CleanVersion, increment, increment_prerelease

__all__ = [
    'ReleasePlan',
    'is_release_branch',
    'plan_next_version',
    'split_patterns',
]


def split_patterns(patterns: str) -> list[str]:
    """Split a comma-separated pattern list, dropping blank entries."""
    return [p.strip() for p in patterns.split(',') if p.strip()]


def is_release_branch(branch_name: str, patterns: str) -> bool:
    """Return ``True`` if any pattern matches anywhere in *branch_name*.

    Raises:
        TagBumpError: If a pattern is not a valid regular expression.
    """
    for pattern in split_patterns(patterns):
        try:
            if re.search(pattern, branch_name):
                return True
        except re.error as exc:
            raise TagBumpError(
                code=E.CONFIG_INVALID,
                message=f'invalid release-branch pattern {pattern!r}: {exc}',
                hint='release-branch is a comma-separated list of regular expressions.',
            ) from exc
    return False


def plan_next_version(
    latest: CleanVersion,
    branch_name: str,
    *,
    is_release: bool,
    msg_level: BumpType,
    default_level: BumpType,
) -> CleanVersion:
    """Compute the next version.

    Args:
        latest: The latest existing version (``0.0.0`` if none).
        branch_name: Short branch name, used as pre-release identifier.
        is_release: Whether the branch is a release branch.
        msg_level: Level resolved from the commit history.
        default_level: Level requested by the user, used on release
            branches when the history resolved to ``NONE``.

    Returns:
        The next version.
    """
    if not is_release:
        return increment_prerelease(latest, branch_name)
    if msg_level == BumpType.NONE:
        return increment(latest, default_level)
    return increment(latest, msg_level)


@dataclass(frozen=True)
class ReleasePlan:
    """Outcome of a planning run.

    Attributes:
        previous_tag: Name of the latest existing tag (``0.0.0`` if none).
        previous_version: ``previous_tag`` without its leading ``v``.
        next_tag: Tag name to create (or the previous tag when unchanged).
        next_version: ``next_tag`` without its leading ``v``.
        bump: The level that was applied (``NONE`` for pre-releases and
            unchanged runs).
        create_tag: Whether a new tag ref should be created.
        reason: Short machine-friendly reason, e.g. ``"no_new_commits"``.
    """

    previous_tag: str
    previous_version: str
    next_tag: str
    next_version: str
    bump: BumpType = BumpType.NONE
    create_tag: bool = True
    reason: str = ''
