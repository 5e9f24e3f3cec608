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

"""Run configuration for tagbump.

Inputs follow the GitHub Actions convention: the runner exposes each
action input as an ``INPUT_<NAME>`` environment variable (name
upper-cased, dashes kept).  CLI flags override the environment.

Inputs::

    ┌────────────────┬──────────────┬─────────────────────────────────────────┐
    │ Input          │ Default      │ Meaning                                 │
    ├────────────────┼──────────────┼─────────────────────────────────────────┤
    │ github-token   │ (required)   │ Token for the GitHub REST API           │
    │ bump           │ minor        │ Level used when commits say nothing     │
    │ branch         │ (context)    │ Branch to tag instead of GITHUB_REF     │
    │ release-branch │ main,master  │ Comma-separated regexes                 │
    │ with-v         │ false        │ Prefix new tags with "v"                │
    │ tag            │              │ Explicit tag to create                  │
    │ dry-run        │ false        │ Compute outputs, create nothing         │
    │ issue-labels   │ enhancement  │ Labels escalating "fix #N" to minor     │
    │ commit-types   │              │ JSON overlay of commit-type rules       │
    └────────────────┴──────────────┴─────────────────────────────────────────┘

The repository comes from ``GITHUB_REPOSITORY`` (``owner/repo``), the
context ref from ``GITHUB_REF`` and the API root from ``GITHUB_API_URL``.
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from tagbump.commit_parsing import BumpType, RuleTable, merge_rules, parse_bump
from tagbump.errors import E, TagBumpError
from tagbump.logging import get_logger
from tagbump.scanner import DEFAULT_ISSUE_LABELS

logger = get_logger(__name__)

__all__ = [
    'DEFAULT_API_URL',
    'DEFAULT_RELEASE_BRANCHES',
    'TagBumpConfig',
    'get_input',
    'load_config',
    'parse_issue_labels',
    'parse_rule_overlay',
]

DEFAULT_API_URL = 'https://api.github.com'
DEFAULT_RELEASE_BRANCHES = 'main,master'


@dataclass(frozen=True)
class TagBumpConfig:
    """Resolved inputs for one run.

    Attributes:
        repository: ``owner/repo``.
        github_token: API token.
        ref: Context ref, e.g. ``refs/heads/main``.
        api_url: GitHub REST API root.
        bump: Level used on release branches when commits resolve to
            ``NONE``.
        branch: Branch forced by the user; empty means use *ref*.
        release_branch: Comma-separated release-branch patterns.
        with_v: Prefix new tags with ``v``.
        tag: Explicit tag to create instead of a computed one.
        dry_run: Compute outputs without creating a tag.
        issue_labels: Labels that escalate ``fix #N`` commits to MINOR.
        commit_types: User overlay for the commit-type rule table.
    """

    repository: str = ''
    github_token: str = ''
    ref: str = ''
    api_url: str = DEFAULT_API_URL
    bump: BumpType = BumpType.MINOR
    branch: str = ''
    release_branch: str = DEFAULT_RELEASE_BRANCHES
    with_v: bool = False
    tag: str = ''
    dry_run: bool = False
    issue_labels: frozenset[str] = DEFAULT_ISSUE_LABELS
    commit_types: Mapping[str, BumpType] = field(default_factory=dict)

    @property
    def owner(self) -> str:
        """Repository owner."""
        return self.repository.partition('/')[0]

    @property
    def repo(self) -> str:
        """Repository name."""
        return self.repository.partition('/')[2]

    @property
    def context_branch(self) -> str:
        """Branch name from the context ref (``refs/heads/`` stripped)."""
        return self.ref.replace('refs/heads/', '', 1)

    def rule_table(self) -> RuleTable:
        """Built-in commit-type rules merged with :attr:`commit_types`."""
        return merge_rules(overrides=self.commit_types)


def get_input(env: Mapping[str, str], name: str, default: str = '') -> str:
    """Read an action input the way the Actions toolkit does."""
    value = env.get(f'INPUT_{name.replace(" ", "_").upper()}', '').strip()
    return value or default


def parse_issue_labels(text: str) -> frozenset[str]:
    """Split a comma-separated label list; blank input keeps the default."""
    labels = frozenset(label.strip() for label in text.split(',') if label.strip())
    return labels or DEFAULT_ISSUE_LABELS


def parse_rule_overlay(text: str) -> dict[str, BumpType]:
    """Decode the ``commit-types`` JSON overlay.

    Malformed input never aborts a run: an undecodable document or one
    that is not a JSON object is logged and ignored, and entries with an
    unknown level are logged and dropped.  ``"none"`` is not a rule level:
    ``{"chore": "none"}`` is dropped and the built-in ``chore`` rule keeps
    its ``patch`` level.

    Args:
        text: JSON text such as ``'{"deps": "patch", "feat": "major"}'``.

    Returns:
        The valid entries, in document order.
    """
    if not text.strip():
        return {}
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.warning(
            'commit_types_invalid_json',
            error=str(exc),
            hint='Falling back to the built-in commit type rules.',
        )
        return {}
    if not isinstance(data, dict):
        logger.warning(
            'commit_types_not_an_object',
            type=type(data).__name__,
            hint='Expected a JSON object like {"deps": "patch"}; using built-in rules.',
        )
        return {}

    overlay: dict[str, BumpType] = {}
    for key, value in data.items():
        bump = parse_bump(value) if isinstance(value, str) else None
        if bump is None:
            logger.warning(
                'commit_type_level_invalid',
                key=key,
                level=value,
                hint=(
                    'Levels must be one of "major", "minor" or "patch". The entry is '
                    'ignored, so a built-in rule for this key still applies.'
                ),
            )
            continue
        overlay[key] = bump
    logger.info('commit_types_loaded', rules={k: v.value for k, v in overlay.items()})
    return overlay


def _parse_level(value: str) -> BumpType:
    bump = parse_bump(value)
    if bump is None:
        raise TagBumpError(
            code=E.CONFIG_INVALID,
            message=f'bump must be one of major, minor, patch (got {value!r})',
            hint='Set the "bump" input to "major", "minor" or "patch".',
        )
    return bump


def load_config(env: Mapping[str, str] | None = None, **overrides: Any) -> TagBumpConfig:  # noqa: ANN401
    """Resolve the run configuration.

    Args:
        env: Environment to read from.  Defaults to :data:`os.environ`.
        **overrides: CLI values keyed by :class:`TagBumpConfig` field
            name.  ``None`` values are ignored.

    Returns:
        The resolved configuration.

    Raises:
        TagBumpError: If the token or repository is missing, or ``bump``
            is not a release level.
    """
    if env is None:
        env = os.environ

    bump_override = overrides.pop('bump', None)
    config = TagBumpConfig(
        repository=env.get('GITHUB_REPOSITORY', '').strip(),
        github_token=get_input(env, 'github-token'),
        ref=env.get('GITHUB_REF', '').strip(),
        api_url=env.get('GITHUB_API_URL', '').strip() or DEFAULT_API_URL,
        bump=_parse_level(bump_override or get_input(env, 'bump', BumpType.MINOR.value)),
        branch=get_input(env, 'branch'),
        release_branch=get_input(env, 'release-branch', DEFAULT_RELEASE_BRANCHES),
        with_v=get_input(env, 'with-v', 'false').lower() != 'false',
        tag=get_input(env, 'tag'),
        dry_run=get_input(env, 'dry-run', 'false').lower() == 'true',
        issue_labels=parse_issue_labels(get_input(env, 'issue-labels')),
        commit_types=parse_rule_overlay(get_input(env, 'commit-types')),
    )
    config = replace(config, **{k: v for k, v in overrides.items() if v is not None})

    if not config.github_token:
        raise TagBumpError(
            code=E.CONFIG_INVALID,
            message='github-token is required',
            hint='Pass "github-token: ${{ secrets.GITHUB_TOKEN }}" or set INPUT_GITHUB-TOKEN.',
        )
    if config.repository.count('/') != 1 or not config.owner or not config.repo:
        raise TagBumpError(
            code=E.CONFIG_INVALID,
            message=f'GITHUB_REPOSITORY must be "owner/repo" (got {config.repository!r})',
            hint='This is set automatically inside GitHub Actions.',
        )
    return config
