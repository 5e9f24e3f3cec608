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

"""Tests for tagbump.tags module."""

from __future__ import annotations

from tagbump._types import Tag
from tagbump.tags import format_tag, latest_tag, sorted_version_tags, tag_exists
from tagbump.versions import clean_version


class TestLatestTag:
    """Tests for latest_tag()."""

    def test_empty(self) -> None:
        """No tags means no latest tag."""
        assert latest_tag([]) is None

    def test_semver_ordering_not_lexical(self) -> None:
        """v1.10.0 outranks v1.9.0."""
        tags = [Tag('v1.9.0', 'a'), Tag('v1.10.0', 'b'), Tag('v1.2.0', 'c')]
        latest = latest_tag(tags)
        assert latest is not None
        assert latest.name == 'v1.10.0'

    def test_non_version_tags_ignored(self) -> None:
        """Tags that do not clean to a version are skipped."""
        tags = [Tag('nightly', 'a'), Tag('release-7', 'b'), Tag('1.0.0', 'c')]
        latest = latest_tag(tags)
        assert latest is not None
        assert latest.name == '1.0.0'

    def test_only_non_version_tags(self) -> None:
        """All-invalid tag lists have no latest tag."""
        assert latest_tag([Tag('nightly', 'a')]) is None

    def test_prerelease_included_by_default(self) -> None:
        """A newer pre-release is the latest tag."""
        tags = [Tag('v1.2.3', 'a'), Tag('v1.2.4-feature.0', 'b')]
        latest = latest_tag(tags)
        assert latest is not None
        assert latest.name == 'v1.2.4-feature.0'

    def test_stable_excludes_prerelease(self) -> None:
        """include_prerelease=False returns the latest release."""
        tags = [Tag('v1.2.3', 'a'), Tag('v1.2.4-feature.0', 'b')]
        stable = latest_tag(tags, include_prerelease=False)
        assert stable is not None
        assert stable.name == 'v1.2.3'

    def test_stable_none_when_only_prereleases(self) -> None:
        """Only pre-releases means no stable tag."""
        assert latest_tag([Tag('1.0.0-rc.1', 'a')], include_prerelease=False) is None

    def test_release_beats_its_prerelease(self) -> None:
        """1.2.0 outranks 1.2.0-rc.1."""
        tags = [Tag('1.2.0', 'a'), Tag('1.2.0-rc.1', 'b')]
        latest = latest_tag(tags)
        assert latest is not None
        assert latest.name == '1.2.0'

    def test_equal_versions_keep_input_order(self) -> None:
        """When two names clean to the same version the later one wins."""
        tags = [Tag('1.2.3', 'a'), Tag('v1.2.3', 'b')]
        latest = latest_tag(tags)
        assert latest is not None
        assert latest.name == 'v1.2.3'


class TestSortedVersionTags:
    """Tests for sorted_version_tags()."""

    def test_ascending(self) -> None:
        """Pairs come back in ascending version order."""
        tags = [Tag('2.0.0', 'a'), Tag('x', 'b'), Tag('1.0.0', 'c')]
        assert [t.name for t, _ in sorted_version_tags(tags)] == ['1.0.0', '2.0.0']


class TestTagExists:
    """Tests for tag_exists()."""

    def test_exact_name_match(self) -> None:
        """Only exact names match."""
        tags = [Tag('v1.2.3', 'a')]
        assert tag_exists(tags, 'v1.2.3')
        assert not tag_exists(tags, '1.2.3')


class TestFormatTag:
    """Tests for format_tag()."""

    def test_with_and_without_v(self) -> None:
        """The prefix is applied only when requested."""
        clean = clean_version('v1.3.0')
        assert clean is not None
        assert format_tag(clean, with_v=True) == 'v1.3.0'
        assert format_tag(clean, with_v=False) == '1.3.0'
