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

"""In-memory fakes shared by the tagbump tests."""

from __future__ import annotations

from tagbump._types import BranchDescriptor, Commit, Tag
from tagbump.errors import E, TagBumpError
from tagbump.scanner import IssueFound, IssueLookupResult, IssueNotFound


class FakeForge:
    """Minimal :class:`~tagbump.backends.forge.Forge` implementation.

    Records issue lookups and created refs so tests can assert on them.
    """

    def __init__(
        self,
        *,
        branches: dict[str, str] | None = None,
        tags: list[Tag] | None = None,
        commits: list[Commit] | None = None,
        issues: dict[int, IssueLookupResult] | None = None,
    ) -> None:
        """Initialize with branch → tip sha, tags, history and issues."""
        self.branches = branches or {}
        self.tags = tags or []
        self.commits = commits or []
        self.issues = issues or {}
        self.issue_lookups: list[int] = []
        self.created_refs: list[tuple[str, str]] = []
        self.fail_create = False

    async def list_tags(self) -> list[Tag]:
        """Return the configured tags."""
        return list(self.tags)

    async def get_branch(self, name: str) -> BranchDescriptor | None:
        """Return the branch if configured."""
        sha = self.branches.get(name)
        if sha is None:
            return None
        return BranchDescriptor(name=name.split('/')[-1], tip_sha=sha)

    async def list_commits(self, sha: str) -> list[Commit]:
        """Return the history starting at *sha*."""
        for i, commit in enumerate(self.commits):
            if commit.sha == sha:
                return self.commits[i:]
        return list(self.commits)

    async def get_issue_labels(self, issue_number: int) -> IssueLookupResult:
        """Return the configured issue, or not-found."""
        self.issue_lookups.append(issue_number)
        return self.issues.get(issue_number, IssueNotFound())

    async def create_tag_ref(self, name: str, sha: str) -> None:
        """Record the ref, or fail when ``fail_create`` is set."""
        if self.fail_create:
            raise TagBumpError(code=E.FORGE_ERROR, message='POST /git/refs failed with HTTP 422')
        self.created_refs.append((name, sha))


def found(*labels: str) -> IssueFound:
    """Shorthand for an :class:`IssueFound` with *labels*."""
    return IssueFound(labels=frozenset(labels))
