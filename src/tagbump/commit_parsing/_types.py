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

"""Pure types for commit message classification.

This module has **zero** runtime dependencies beyond the standard library.
Everything here is a frozen dataclass, enum or protocol, with no I/O and
no logging.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable


class BumpType(Enum):
    """Semver bump levels.

    Totally ordered ``NONE < PATCH < MINOR < MAJOR``; the aggregate level
    of a scan only ever moves up this order.
    """

    MAJOR = 'major'
    MINOR = 'minor'
    PATCH = 'patch'
    NONE = 'none'


# Bump precedence: lower index = higher precedence.
BUMP_PRECEDENCE: list[BumpType] = [
    BumpType.MAJOR,
    BumpType.MINOR,
    BumpType.PATCH,
    BumpType.NONE,
]


def max_bump(a: BumpType, b: BumpType) -> BumpType:
    """Return the higher-precedence bump type.

    >>> max_bump(BumpType.MINOR, BumpType.PATCH)
    <BumpType.MINOR: 'minor'>
    >>> max_bump(BumpType.NONE, BumpType.MAJOR)
    <BumpType.MAJOR: 'major'>
    """
    a_idx = BUMP_PRECEDENCE.index(a)
    b_idx = BUMP_PRECEDENCE.index(b)
    return BUMP_PRECEDENCE[min(a_idx, b_idx)]


def at_least(level: BumpType, floor: BumpType) -> bool:
    """Return ``True`` if *level* is *floor* or higher.

    >>> at_least(BumpType.MAJOR, BumpType.MINOR)
    True
    >>> at_least(BumpType.PATCH, BumpType.MINOR)
    False
    """
    return BUMP_PRECEDENCE.index(level) <= BUMP_PRECEDENCE.index(floor)


# Levels a classification rule may carry.
RULE_LEVELS: frozenset[BumpType] = frozenset({BumpType.MAJOR, BumpType.MINOR, BumpType.PATCH})


def parse_bump(value: str) -> BumpType | None:
    """Parse a rule level (``major``, ``minor`` or ``patch``).

    Matching is case-insensitive and ignores surrounding whitespace.
    ``none`` and anything else return ``None``.
    """
    try:
        bump = BumpType(value.strip().lower())
    except ValueError:
        return None
    return bump if bump in RULE_LEVELS else None


@runtime_checkable
class Matcher(Protocol):
    """Protocol for commit message matchers.

    Every matcher variant in :mod:`tagbump.commit_parsing._matchers`
    answers a single question about a full commit message.
    """

    def matches(self, message: str) -> bool:
        """Return ``True`` if *message* has the shape this matcher detects."""
        ...


@dataclass(frozen=True)
class Rule:
    """One entry of a merged classification table.

    Attributes:
        key: The rule key (e.g. ``"feat"`` or ``"BREAKING CHANGE"``).
        bump: The level a matching commit contributes.
        matcher: The matcher derived from *key*.
    """

    key: str
    bump: BumpType
    matcher: Matcher


@dataclass(frozen=True)
class Classification:
    """The single rule a commit message matched.

    Attributes:
        key: The matched rule key.
        bump: The level of the matched rule.
    """

    key: str
    bump: BumpType
