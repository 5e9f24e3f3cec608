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

"""Built-in commit-type rules and the user overlay.

The built-in table maps every conventional commit type tagbump knows
about to a bump level.  A user-supplied overlay (the ``commit-types``
input, a JSON object) is merged on top with :func:`merge_rules`:

- keys present in both keep their built-in *position* but take the
  user's level;
- keys only present in the overlay are appended, in overlay order.

Classification is first-match, so this order is part of the contract.

Pure implementation, no I/O and no logging. Decoding the overlay from
its JSON text happens in :mod:`tagbump.config`.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from tagbump.commit_parsing._matchers import matcher_for_key
from tagbump.commit_parsing._types import BumpType, Rule

DEFAULT_COMMIT_TYPES: tuple[tuple[str, BumpType], ...] = (
    ('BREAKING CHANGE', BumpType.MAJOR),
    ('breaking', BumpType.MAJOR),
    ('feat', BumpType.MINOR),
    ('feature', BumpType.MINOR),
    ('fix', BumpType.PATCH),
    ('perf', BumpType.PATCH),
    ('build', BumpType.PATCH),
    ('chore', BumpType.PATCH),
    ('ci', BumpType.PATCH),
    ('docs', BumpType.PATCH),
    ('refactor', BumpType.PATCH),
    ('revert', BumpType.PATCH),
    ('style', BumpType.PATCH),
    ('test', BumpType.PATCH),
)


class RuleTable:
    """An immutable, ordered sequence of :class:`Rule` entries."""

    def __init__(self, rules: tuple[Rule, ...]) -> None:
        self._rules = rules

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f'RuleTable({[(r.key, r.bump.value) for r in self._rules]!r})'

    @property
    def keys(self) -> tuple[str, ...]:
        """Rule keys in evaluation order."""
        return tuple(r.key for r in self._rules)

    def as_dict(self) -> dict[str, BumpType]:
        """Return the table as a key → level mapping (evaluation order)."""
        return {r.key: r.bump for r in self._rules}


def merge_rules(
    builtins: tuple[tuple[str, BumpType], ...] = DEFAULT_COMMIT_TYPES,
    overrides: Mapping[str, BumpType] | None = None,
) -> RuleTable:
    """Overlay user rules on the built-in table.

    Args:
        builtins: Ordered ``(key, level)`` pairs.
        overrides: User rules; a key already in *builtins* replaces its
            level in place, a new key is appended.

    Returns:
        A new :class:`RuleTable`.  Neither input is modified.
    """
    overrides = dict(overrides or {})
    rules: list[Rule] = []
    for key, bump in builtins:
        level = overrides.pop(key, bump)
        rules.append(Rule(key=key, bump=level, matcher=matcher_for_key(key)))
    for key, level in overrides.items():
        rules.append(Rule(key=key, bump=level, matcher=matcher_for_key(key)))
    return RuleTable(tuple(rules))


__all__ = [
    'DEFAULT_COMMIT_TYPES',
    'RuleTable',
    'merge_rules',
]
