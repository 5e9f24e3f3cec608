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

"""First-match commit classification against a rule table."""

from __future__ import annotations

from tagbump.commit_parsing._rules import RuleTable
from tagbump.commit_parsing._types import Classification


def classify(message: str, table: RuleTable) -> Classification | None:
    """Classify a commit message.

    Rules are tried in table order and the first match wins, even when
    a later rule would carry a higher level.

    Args:
        message: The full commit message.
        table: The merged rule table.

    Returns:
        The matched rule key and level, or ``None``.
    """
    for rule in table:
        if rule.matcher.matches(message):
            return Classification(key=rule.key, bump=rule.bump)
    return None
