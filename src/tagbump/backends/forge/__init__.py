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

"""Forge backend protocol.

A forge is the hosted version-control service holding the repository:
it lists tags and commits, resolves branches, answers issue-label
lookups and creates tag refs.  The release orchestrator only depends on
this protocol, so tests can swap in an in-memory fake.

Built-in implementations:

- :class:`~tagbump.backends.forge.github.GitHubForge`
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from tagbump._types import BranchDescriptor, Commit, Tag
from tagbump.scanner import IssueLookupResult

__all__ = [
    'Forge',
]


@runtime_checkable
class Forge(Protocol):
    """Protocol for forge backends."""

    async def list_tags(self) -> list[Tag]:
        """Return the repository's tags (a single page)."""
        ...

    async def get_branch(self, name: str) -> BranchDescriptor | None:
        """Resolve a branch by short name, or ``None`` if unknown."""
        ...

    async def list_commits(self, sha: str) -> list[Commit]:
        """Return the history ending at *sha*, newest first (a single page)."""
        ...

    async def get_issue_labels(self, issue_number: int) -> IssueLookupResult:
        """Return the label names of an issue."""
        ...

    async def create_tag_ref(self, name: str, sha: str) -> None:
        """Create ``refs/tags/<name>`` pointing at *sha*."""
        ...
