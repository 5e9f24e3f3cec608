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

"""Shared leaf-level types used across tagbump.

This module must have **zero** imports from other ``tagbump``
subpackages to avoid circular-import chains.  Everything here is a
read-only snapshot fetched once per run.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    'BranchDescriptor',
    'Commit',
    'Tag',
]


@dataclass(frozen=True)
class Tag:
    """A repository tag.

    Attributes:
        name: Tag name as stored in the repository (e.g. ``"v1.2.3"``).
            Unique within one repository snapshot.
        commit_sha: SHA of the commit the tag points at.
    """

    name: str
    commit_sha: str


@dataclass(frozen=True)
class Commit:
    """A single commit from a branch history (newest first).

    Attributes:
        sha: The full commit SHA.
        message: The full commit message, subject and body.
    """

    sha: str
    message: str

    @property
    def subject(self) -> str:
        """First line of the message, used for log output."""
        return self.message.split('\n', 1)[0]


@dataclass(frozen=True)
class BranchDescriptor:
    """A branch and the commit at its tip.

    Attributes:
        name: Short branch name (no ``refs/heads/`` prefix).
        tip_sha: SHA of the newest commit on the branch.
    """

    name: str
    tip_sha: str
