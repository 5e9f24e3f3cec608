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

"""Error codes and the exception type raised by tagbump.

Only configuration problems and failed forge calls are raised; every
other anomaly (a malformed commit-type overlay, an unreachable issue)
degrades to a logged warning and the scan carries on.

Each error carries a stable :class:`E` code and an optional ``hint``
that tells the user how to fix the problem::

    raise TagBumpError(
        code=E.TAG_EXISTS,
        message='tag already exists v1.2.3',
        hint='Pick a different tag or drop the explicit "tag" input.',
    )
"""

from __future__ import annotations

from enum import Enum

__all__ = [
    'E',
    'TagBumpError',
]


class E(str, Enum):
    """Stable error codes, safe to match on in CI logs."""

    BRANCH_NOT_FOUND = 'TB_BRANCH_NOT_FOUND'
    TAG_EXISTS = 'TB_TAG_EXISTS'
    CONFIG_INVALID = 'TB_CONFIG_INVALID'
    FORGE_ERROR = 'TB_FORGE_ERROR'


class TagBumpError(Exception):
    """A fatal error that aborts the run before any output is written.

    Attributes:
        code: The stable error code.
        message: Human-readable description, surfaced verbatim.
        hint: Optional suggestion for fixing the problem.
    """

    def __init__(self, code: E, message: str, hint: str = '') -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.hint = hint

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f'TagBumpError(code={self.code.value!r}, message={self.message!r})'
