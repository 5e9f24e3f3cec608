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

"""Tests for tagbump.config module."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from tagbump.commit_parsing import BumpType, merge_rules
from tagbump.config import (
    DEFAULT_API_URL,
    get_input,
    load_config,
    parse_issue_labels,
    parse_rule_overlay,
)
from tagbump.errors import E, TagBumpError
from tagbump.scanner import DEFAULT_ISSUE_LABELS

_BASE_ENV = {
    'GITHUB_REPOSITORY': 'octo/hello',
    'GITHUB_REF': 'refs/heads/main',
    'INPUT_GITHUB-TOKEN': 'ghs_test_token',
}


def _env(**inputs: str) -> dict[str, str]:
    env = dict(_BASE_ENV)
    for name, value in inputs.items():
        env[f'INPUT_{name.replace("_", "-").upper()}'] = value
    return env


class TestGetInput:
    """Tests for get_input()."""

    def test_reads_and_strips(self) -> None:
        """Values are looked up by upper-cased name and stripped."""
        assert get_input({'INPUT_RELEASE-BRANCH': ' main '}, 'release-branch') == 'main'

    def test_default_for_missing_or_blank(self) -> None:
        """Missing and blank inputs fall back to the default."""
        assert get_input({}, 'bump', 'minor') == 'minor'
        assert get_input({'INPUT_BUMP': '  '}, 'bump', 'minor') == 'minor'


class TestLoadConfig:
    """Tests for load_config()."""

    def test_defaults(self) -> None:
        """Only the required values set gives the documented defaults."""
        config = load_config(_env())
        assert config.owner == 'octo'
        assert config.repo == 'hello'
        assert config.context_branch == 'main'
        assert config.api_url == DEFAULT_API_URL
        assert config.bump == BumpType.MINOR
        assert config.release_branch == 'main,master'
        assert config.with_v is False
        assert config.dry_run is False
        assert config.tag == ''
        assert config.branch == ''
        assert config.issue_labels == DEFAULT_ISSUE_LABELS
        assert dict(config.commit_types) == {}

    def test_inputs(self) -> None:
        """Every input is read from INPUT_* variables."""
        config = load_config(
            _env(
                bump='Patch',
                branch='develop',
                release_branch='^release/.*',
                with_v='true',
                tag='v9.9.9',
                dry_run='true',
                issue_labels='feature, enhancement',
                commit_types='{"deps": "patch"}',
            )
        )
        assert config.bump == BumpType.PATCH
        assert config.branch == 'develop'
        assert config.release_branch == '^release/.*'
        assert config.with_v is True
        assert config.tag == 'v9.9.9'
        assert config.dry_run is True
        assert config.issue_labels == frozenset({'feature', 'enhancement'})
        assert config.rule_table().keys[-1] == 'deps'

    def test_with_v_any_value_but_false(self) -> None:
        """with-v is on for anything except "false"."""
        assert load_config(_env(with_v='yes')).with_v is True
        assert load_config(_env(with_v='FALSE')).with_v is False

    def test_dry_run_only_true(self) -> None:
        """dry-run is on only for "true"."""
        assert load_config(_env(dry_run='yes')).dry_run is False

    def test_api_url_from_env(self) -> None:
        """GITHUB_API_URL points at a GitHub Enterprise server."""
        env = {**_env(), 'GITHUB_API_URL': 'https://ghe.example.com/api/v3'}
        assert load_config(env).api_url == 'https://ghe.example.com/api/v3'

    def test_overrides_win(self) -> None:
        """Keyword overrides replace environment values; None is ignored."""
        config = load_config(_env(branch='develop'), branch='hotfix', bump='major', tag=None, with_v=True)
        assert config.branch == 'hotfix'
        assert config.bump == BumpType.MAJOR
        assert config.tag == ''
        assert config.with_v is True

    def test_missing_token(self) -> None:
        """A missing token is a configuration error."""
        env = _env()
        del env['INPUT_GITHUB-TOKEN']
        with pytest.raises(TagBumpError) as exc_info:
            load_config(env)
        assert exc_info.value.code == E.CONFIG_INVALID
        assert 'github-token' in str(exc_info.value)

    @pytest.mark.parametrize('repository', ['', 'octo', 'octo/', 'a/b/c'])
    def test_bad_repository(self, repository: str) -> None:
        """GITHUB_REPOSITORY must be owner/repo."""
        env = {**_env(), 'GITHUB_REPOSITORY': repository}
        with pytest.raises(TagBumpError) as exc_info:
            load_config(env)
        assert exc_info.value.code == E.CONFIG_INVALID

    def test_invalid_bump(self) -> None:
        """bump must be a release level."""
        with pytest.raises(TagBumpError) as exc_info:
            load_config(_env(bump='none'))
        assert exc_info.value.code == E.CONFIG_INVALID


class TestParseIssueLabels:
    """Tests for parse_issue_labels()."""

    def test_split(self) -> None:
        """Labels are comma-separated and stripped."""
        assert parse_issue_labels('a, b ,,c') == frozenset({'a', 'b', 'c'})

    def test_blank_keeps_default(self) -> None:
        """Blank input keeps the default label set."""
        assert parse_issue_labels('') == DEFAULT_ISSUE_LABELS
        assert parse_issue_labels(' , ') == DEFAULT_ISSUE_LABELS


class TestParseRuleOverlay:
    """Tests for parse_rule_overlay()."""

    def test_valid(self) -> None:
        """Levels are parsed case-insensitively, in document order."""
        overlay = parse_rule_overlay('{"deps": "Patch", "feat": "major"}')
        assert overlay == {'deps': BumpType.PATCH, 'feat': BumpType.MAJOR}
        assert list(overlay) == ['deps', 'feat']

    def test_blank(self) -> None:
        """Blank text is an empty overlay."""
        assert parse_rule_overlay('  ') == {}

    def test_invalid_json(self) -> None:
        """Undecodable text is ignored."""
        assert parse_rule_overlay('{deps: patch') == {}

    def test_not_an_object(self) -> None:
        """JSON that is not an object is ignored."""
        assert parse_rule_overlay('["deps"]') == {}

    def test_invalid_levels_dropped(self) -> None:
        """Entries with unknown levels are dropped, the rest kept."""
        overlay = parse_rule_overlay('{"deps": "huge", "perf": 3, "ci": "minor"}')
        assert overlay == {'ci': BumpType.MINOR}

    def test_none_level_keeps_builtin_rule(self) -> None:
        """A "none" level is dropped with a warning and the built-in level stays."""
        with patch('tagbump.config.logger') as mock_logger:
            overlay = parse_rule_overlay('{"chore": "none"}')
        assert overlay == {}
        mock_logger.warning.assert_called_once()
        event, kwargs = mock_logger.warning.call_args.args[0], mock_logger.warning.call_args.kwargs
        assert event == 'commit_type_level_invalid'
        assert kwargs['key'] == 'chore'
        assert 'built-in rule for this key still applies' in kwargs['hint']
        assert merge_rules(overrides=overlay).as_dict()['chore'] == BumpType.PATCH
