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

"""Tag index: pick the latest release out of a repository's tags.

Only tags whose names clean to a semantic version take part; anything
else (``nightly``, ``release-7``) is ignored.  Tags are ordered by
semver precedence, so ``v1.10.0`` beats ``v1.9.0`` and ``1.2.0`` beats
``1.2.0-rc.1``.

Usage::

    from tagbump.tags import latest_tag

    latest = latest_tag(tags)                                # may be a pre-release
    stable = latest_tag(tags, include_prerelease=False)      # boundary for scanning
"""

from __future__ import annotations

from collections.abc import Iterable

from tagbump._types import Tag
from tagbump.versions import CleanVersion, clean_version

__all__ = [
    'format_tag',
    'latest_tag',
    'sorted_version_tags',
    'tag_exists',
]


def sorted_version_tags(tags: Iterable[Tag]) -> list[tuple[Tag, CleanVersion]]:
    """Return the version tags of *tags* in ascending semver order.

    The sort is stable: tags whose names clean to the same version keep
    their input order, so the later one sorts last.
    """
    versioned: list[tuple[Tag, CleanVersion]] = []
    for tag in tags:
        clean = clean_version(tag.name)
        if clean is not None:
            versioned.append((tag, clean))
    versioned.sort(key=lambda pair: pair[1].version)
    return versioned


def latest_tag(tags: Iterable[Tag], *, include_prerelease: bool = True) -> Tag | None:
    """Return the highest-versioned tag.

    Args:
        tags: All tags of the repository.
        include_prerelease: When ``False``, tags with a pre-release
            component are skipped.

    Returns:
        The latest tag, or ``None`` when no tag qualifies.  Callers treat
        ``None`` as "no prior release" and use ``0.0.0``.
    """
    candidates = sorted_version_tags(tags)
    if not include_prerelease:
        candidates = [(tag, clean) for tag, clean in candidates if not clean.is_prerelease]
    if not candidates:
        return None
    return candidates[-1][0]


def tag_exists(tags: Iterable[Tag], name: str) -> bool:
    """Return ``True`` if a tag called exactly *name* exists."""
    return any(tag.name == name for tag in tags)


def format_tag(version: CleanVersion, *, with_v: bool) -> str:
    """Return the tag name for *version*, e.g. ``v1.3.0``."""
    return version.tag_name(with_v=with_v)
