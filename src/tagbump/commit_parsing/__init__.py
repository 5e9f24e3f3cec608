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

r"""Commit message classification.

Turns a commit message into at most one bump-level contribution.  The
pieces compose like this::

    DEFAULT_COMMIT_TYPES ──┐
                           ├── merge_rules() ──→ RuleTable ──→ classify(message)
    user overlay ──────────┘                                      │
                                                                  ▼
                                                 Classification(key, bump) | None

Usage::

    from tagbump.commit_parsing import BumpType, classify, merge_rules

    table = merge_rules(overrides={'deps': BumpType.PATCH})
    result = classify('feat(api): add search', table)
    assert result.key == 'feat'
    assert result.bump == BumpType.MINOR

    # "BREAKING CHANGE:" may appear anywhere, including the body.
    result = classify('refactor: x\n\nBREAKING CHANGE: removed y', table)
    assert result.key == 'BREAKING CHANGE'
"""

from tagbump.commit_parsing._classifier import classify
from tagbump.commit_parsing._matchers import (
    BREAKING_CHANGE_KEY,
    BREAKING_KEY,
    FIXES_ISSUE,
    LEGACY_MAJOR,
    LEGACY_MINOR,
    LEGACY_PATCH,
    WIP,
    BreakingBare,
    BreakingChangeFooter,
    FixesIssue,
    HeaderType,
    LegacyHashTag,
    matcher_for_key,
)
from tagbump.commit_parsing._rules import DEFAULT_COMMIT_TYPES, RuleTable, merge_rules
from tagbump.commit_parsing._types import (
    BUMP_PRECEDENCE,
    RULE_LEVELS,
    BumpType,
    Classification,
    Matcher,
    Rule,
    at_least,
    max_bump,
    parse_bump,
)

__all__ = [
    'BREAKING_CHANGE_KEY',
    'BREAKING_KEY',
    'BUMP_PRECEDENCE',
    'DEFAULT_COMMIT_TYPES',
    'FIXES_ISSUE',
    'LEGACY_MAJOR',
    'LEGACY_MINOR',
    'LEGACY_PATCH',
    'RULE_LEVELS',
    'WIP',
    'BreakingBare',
    'BreakingChangeFooter',
    'BumpType',
    'Classification',
    'FixesIssue',
    'HeaderType',
    'LegacyHashTag',
    'Matcher',
    'Rule',
    'RuleTable',
    'at_least',
    'classify',
    'matcher_for_key',
    'max_bump',
    'merge_rules',
    'parse_bump',
]
