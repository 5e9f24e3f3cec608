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

"""Tests for tagbump.versions module."""

from __future__ import annotations

import semver

from tagbump.commit_parsing import BumpType
from tagbump.versions import (
    ZERO_VERSION,
    CleanVersion,
    clean_version,
    increment,
    increment_prerelease,
    strip_leading_v,
)


def _v(text: str) -> CleanVersion:
    clean = clean_version(text)
    assert clean is not None
    return clean


class TestCleanVersion:
    """Tests for clean_version()."""

    def test_plain_version(self) -> None:
        """A bare version parses unchanged."""
        assert str(_v('1.2.3')) == '1.2.3'

    def test_leading_v_is_not_part_of_the_version(self) -> None:
        """v1.2.3 and 1.2.3 clean to the same value."""
        assert _v('v1.2.3') == _v('1.2.3')
        assert str(_v('v1.2.3')) == '1.2.3'

    def test_whitespace_and_equals(self) -> None:
        """Whitespace and a leading = are tolerated."""
        assert str(_v('  =v1.2.3 ')) == '1.2.3'

    def test_build_metadata_dropped(self) -> None:
        """Build metadata does not survive cleaning."""
        assert str(_v('1.2.3+build.7')) == '1.2.3'

    def test_prerelease_kept(self) -> None:
        """Pre-release components are kept."""
        clean = _v('v2.0.0-rc.1')
        assert str(clean) == '2.0.0-rc.1'
        assert clean.is_prerelease

    def test_invalid_names(self) -> None:
        """Non-semver names clean to None."""
        for name in ('nightly', 'release-7', '1.2', 'v1', '', '1.2.3.4'):
            assert clean_version(name) is None, name

    def test_tag_name(self) -> None:
        """tag_name() applies the v prefix on request."""
        clean = _v('1.3.0')
        assert clean.tag_name(with_v=True) == 'v1.3.0'
        assert clean.tag_name(with_v=False) == '1.3.0'

    def test_zero_version(self) -> None:
        """ZERO_VERSION is 0.0.0."""
        assert ZERO_VERSION.version == semver.Version(0, 0, 0)
        assert not ZERO_VERSION.is_prerelease


class TestStripLeadingV:
    """Tests for strip_leading_v()."""

    def test_strips_one_v(self) -> None:
        """Only a single leading v is removed."""
        assert strip_leading_v('v1.2.3') == '1.2.3'
        assert strip_leading_v('1.2.3') == '1.2.3'
        assert strip_leading_v('vv1') == 'v1'


class TestIncrement:
    """Tests for increment()."""

    def test_major(self) -> None:
        """Major resets minor and patch."""
        assert str(increment(_v('1.2.3'), BumpType.MAJOR)) == '2.0.0'

    def test_minor(self) -> None:
        """Minor resets patch."""
        assert str(increment(_v('1.2.3'), BumpType.MINOR)) == '1.3.0'

    def test_patch(self) -> None:
        """Patch increments the last component."""
        assert str(increment(_v('1.2.3'), BumpType.PATCH)) == '1.2.4'

    def test_none_is_identity(self) -> None:
        """NONE returns the input."""
        clean = _v('1.2.3')
        assert increment(clean, BumpType.NONE) is clean

    def test_prerelease_is_promoted(self) -> None:
        """A pre-release of the target version is promoted, not skipped."""
        assert str(increment(_v('1.3.0-rc.1'), BumpType.MINOR)) == '1.3.0'
        assert str(increment(_v('1.2.4-feature.0'), BumpType.PATCH)) == '1.2.4'

    def test_tag_round_trip(self) -> None:
        """A v-prefixed tag name is reproduced when with_v is set."""
        assert _v('v1.2.3').tag_name(with_v=True) == 'v1.2.3'
        assert _v('v1.2.3').tag_name(with_v=False) == '1.2.3'


class TestIncrementPrerelease:
    """Tests for increment_prerelease()."""

    def test_from_release(self) -> None:
        """A release gets its patch bumped and a fresh counter."""
        assert str(increment_prerelease(_v('1.2.3'), 'feature-x')) == '1.2.4-feature-x.0'

    def test_same_identifier_advances_counter(self) -> None:
        """The counter of the same identifier advances."""
        assert str(increment_prerelease(_v('1.2.4-feature-x.0'), 'feature-x')) == '1.2.4-feature-x.1'
        assert str(increment_prerelease(_v('1.2.4-feature-x.9'), 'feature-x')) == '1.2.4-feature-x.10'

    def test_other_identifier_resets(self) -> None:
        """Switching identifier resets the counter to 0."""
        assert str(increment_prerelease(_v('1.2.4-other.3'), 'feature-x')) == '1.2.4-feature-x.0'

    def test_from_zero(self) -> None:
        """The 0.0.0 baseline becomes 0.0.1-<id>.0."""
        assert str(increment_prerelease(ZERO_VERSION, 'dev')) == '0.0.1-dev.0'

    def test_identifier_is_sanitized(self) -> None:
        """Slashes and other invalid characters become dashes."""
        assert str(increment_prerelease(_v('1.2.3'), 'feature/x_y')) == '1.2.4-feature-x-y.0'
