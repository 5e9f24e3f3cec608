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

"""Semantic versions as they appear in tag names.

Wraps the `semver <https://python-semver.readthedocs.io/>`_ library with
the handful of behaviours tag bumping needs:

- **Cleaning**: ``" v1.2.3 "`` and ``"=v1.2.3"`` clean to ``1.2.3``;
  anything that is not a strict semantic version cleans to ``None``.
- **Release increments**: ``major``/``minor``/``patch``.  A pre-release
  is promoted rather than skipped (``1.3.0-rc.1`` bumped ``minor`` is
  ``1.3.0``).
- **Pre-release increments** keyed by an identifier (the branch name)::

    1.2.3          --(feature-x)-->  1.2.4-feature-x.0
    1.2.4-feature-x.0  ----------->  1.2.4-feature-x.1
    1.2.4-other.3      ----------->  1.2.4-feature-x.0

A leading ``v`` is not part of the version.  Whether a new tag name
carries one is decided only when it is formatted, by the ``with-v``
input.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

import semver

from tagbump.commit_parsing import BumpType

__all__ = [
    'ZERO_VERSION',
    'CleanVersion',
    'clean_version',
    'increment',
    'increment_prerelease',
    'strip_leading_v',
]

_LEADING_CHARS_RE = re.compile(r'^[=v]+')

# Characters outside the semver identifier alphabet.
_INVALID_IDENTIFIER_RE = re.compile(r'[^0-9A-Za-z-]')


@dataclass(frozen=True)
class CleanVersion:
    """A normalized ``major.minor.patch[-prerelease]`` version.

    Attributes:
        version: The parsed version, without build metadata.
    """

    version: semver.Version

    @property
    def is_prerelease(self) -> bool:
        """``True`` if the version carries a pre-release component."""
        return self.version.prerelease is not None

    def tag_name(self, *, with_v: bool) -> str:
        """Format the version as a tag name."""
        return f'v{self.version}' if with_v else str(self.version)

    def __str__(self) -> str:
        return str(self.version)


ZERO_VERSION = CleanVersion(semver.Version(0, 0, 0))


def clean_version(name: str) -> CleanVersion | None:
    """Clean a tag name into a :class:`CleanVersion`.

    Surrounding whitespace and any leading ``=``/``v`` characters are
    removed before strict parsing.  Build metadata is dropped.

    Args:
        name: A tag name such as ``"v1.2.3"`` or ``"release-7"``.

    Returns:
        The cleaned version, or ``None`` if *name* is not a valid
        semantic version.
    """
    stripped = _LEADING_CHARS_RE.sub('', name.strip())
    try:
        parsed = semver.Version.parse(stripped)
    except (TypeError, ValueError):
        return None
    return CleanVersion(version=parsed.replace(build=None))


def strip_leading_v(name: str) -> str:
    """Drop a single leading ``v`` from a tag name."""
    return name[1:] if name.startswith('v') else name


def increment(version: CleanVersion, bump: BumpType) -> CleanVersion:
    """Apply a release increment.

    Args:
        version: The version to increment.
        bump: ``MAJOR``, ``MINOR`` or ``PATCH``.  ``NONE`` returns
            *version* unchanged.

    Returns:
        The incremented version.
    """
    if bump == BumpType.NONE:
        return version
    return CleanVersion(version=version.version.next_version(bump.value))


def _sanitize_identifier(identifier: str) -> str:
    return _INVALID_IDENTIFIER_RE.sub('-', identifier)


def increment_prerelease(version: CleanVersion, identifier: str) -> CleanVersion:
    """Apply a pre-release increment qualified by *identifier*.

    A release version first gets its patch bumped.  The numeric counter
    after *identifier* is then advanced, or reset to ``0`` when the
    existing pre-release belongs to a different identifier.

    Args:
        version: The version to increment.
        identifier: Pre-release identifier, typically the branch name.
            Characters outside ``[0-9A-Za-z-]`` are replaced by ``-``.

    Returns:
        The new pre-release version.
    """
    ident = _sanitize_identifier(identifier)
    current = version.version

    if current.prerelease is None:
        base = current.bump_patch()
        parts: list[str] = []
    else:
        base = current.replace(prerelease=None, build=None)
        parts = current.prerelease.split('.')

    if not parts:
        parts = ['0']
    else:
        for i in range(len(parts) - 1, -1, -1):
            if parts[i].isdigit():
                parts[i] = str(int(parts[i]) + 1)
                break
        else:
            parts.append('0')

    if ident and (parts[0] != ident or len(parts) < 2 or not parts[1].isdigit()):
        parts = [ident, '0']

    return CleanVersion(version=base.replace(prerelease='.'.join(parts)))
