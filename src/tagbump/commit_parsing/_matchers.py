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

r"""Matcher variants for commit messages.

Each rule key maps to exactly one matcher; the mapping lives in
:func:`matcher_for_key`::

    rule key            matcher                  matches when
    ──────────────────  ───────────────────────  ─────────────────────────────────
    BREAKING CHANGE     BreakingChangeFooter     "BREAKING CHANGE:" anywhere (any case)
    breaking            BreakingBare             message starts with "breaking"
                                                 followed by ":" or a word boundary
    <type>              HeaderType(<type>)       message starts with "<type>:" or
                                                 "<type>(<scope>):" (any case)

Two further matchers are checked outside the rule table:

- :class:`LegacyHashTag` for ``#major``, ``#minor``, ``#patch`` and
  ``#wip`` anywhere in the message (case-sensitive, word-bounded).
- :class:`FixesIssue` for ``fix #12`` / ``fixes #12``, which also
  extracts the issue number.

Pure implementation: depends only on ``re`` and :mod:`._types`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from tagbump.commit_parsing._types import Matcher

BREAKING_CHANGE_KEY = 'BREAKING CHANGE'
BREAKING_KEY = 'breaking'


@dataclass(frozen=True)
class HeaderType:
    """Conventional commit header: ``type(scope): subject``."""

    key: str

    @property
    def pattern(self) -> str:
        return rf'{re.escape(self.key)}(\(.*\))?:'

    def matches(self, message: str) -> bool:
        return re.match(self.pattern, message, re.IGNORECASE) is not None


@dataclass(frozen=True)
class BreakingBare:
    """A message that opens with ``breaking``."""

    def matches(self, message: str) -> bool:
        return re.match(r'breaking(:|\b)', message, re.IGNORECASE) is not None


@dataclass(frozen=True)
class BreakingChangeFooter:
    """A ``BREAKING CHANGE:`` token in the header or body."""

    def matches(self, message: str) -> bool:
        return re.search(r'BREAKING CHANGE:', message, re.IGNORECASE) is not None


@dataclass(frozen=True)
class LegacyHashTag:
    """A hash-tag marker such as ``#minor``."""

    marker: str

    def matches(self, message: str) -> bool:
        return re.search(rf'#{re.escape(self.marker)}\b', message) is not None


WIP = LegacyHashTag('wip')
LEGACY_MAJOR = LegacyHashTag('major')
LEGACY_MINOR = LegacyHashTag('minor')
LEGACY_PATCH = LegacyHashTag('patch')


_FIXES_ISSUE_RE = re.compile(r'fix(?:es)? #(\d+)\b')


@dataclass(frozen=True)
class FixesIssue:
    """An issue-closing reference: ``fix #<n>`` or ``fixes #<n>``."""

    def matches(self, message: str) -> bool:
        return self.issue_number(message) is not None

    def issue_number(self, message: str) -> int | None:
        """Return the referenced issue number, or ``None``.

        Only positive numbers count; ``fixes #0`` is ignored.
        """
        m = _FIXES_ISSUE_RE.search(message)
        if m is None:
            return None
        number = int(m.group(1))
        return number if number > 0 else None


FIXES_ISSUE = FixesIssue()


def matcher_for_key(key: str) -> Matcher:
    """Return the matcher for a rule key."""
    if key == BREAKING_CHANGE_KEY:
        return BreakingChangeFooter()
    if key == BREAKING_KEY:
        return BreakingBare()
    return HeaderType(key)


__all__ = [
    'BREAKING_CHANGE_KEY',
    'BREAKING_KEY',
    'FIXES_ISSUE',
    'LEGACY_MAJOR',
    'LEGACY_MINOR',
    'LEGACY_PATCH',
    'WIP',
    'BreakingBare',
    'BreakingChangeFooter',
    'FixesIssue',
    'HeaderType',
    'LegacyHashTag',
    'matcher_for_key',
]
