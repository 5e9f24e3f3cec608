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

"""Release orchestration: decide on the next tag and create it.

Data Flow::

    ┌──────────────┐   ┌───────────────┐   ┌────────────────┐   ┌──────────────┐
    │ resolve      │──→│ list tags →   │──→│ scan commits → │──→│ plan next    │
    │ branch       │   │ latest/stable │   │ bump level     │   │ version      │
    └──────────────┘   └───────────────┘   └────────────────┘   └──────┬───────┘
                                                                       │
                                            ┌──────────────┐   ┌───────▼──────┐
                                            │ flush step   │←──│ create tag   │
                                            │ outputs      │   │ ref (unless  │
                                            └──────────────┘   │ dry run)     │
                                                               └──────────────┘

Short-circuits:

- An explicit ``tag`` input skips scanning and planning; it fails if a
  tag of that name already exists.
- When the latest tag already points at the branch tip there is
  nothing new: ``new-tag``/``new-version`` repeat the existing ones and
  no tag is created.

Every fallible step runs before outputs are flushed, so a failed run
leaves no outputs behind.
"""

from __future__ import annotations

from dataclasses import dataclass

from tagbump._types import BranchDescriptor, Tag
from tagbump.backends.forge import Forge
from tagbump.commit_parsing import BumpType
from tagbump.config import TagBumpConfig
from tagbump.errors import E, TagBumpError
from tagbump.logging import get_logger
from tagbump.outputs import ActionOutputs
from tagbump.planner import ReleasePlan, is_release_branch, plan_next_version
from tagbump.scanner import resolve_bump
from tagbump.tags import format_tag, latest_tag, tag_exists
from tagbump.versions import ZERO_VERSION, clean_version, strip_leading_v

logger = get_logger(__name__)

__all__ = [
    'ReleaseResult',
    'resolve_branch',
    'run_release',
]


@dataclass(frozen=True)
class ReleaseResult:
    """What a run decided and did.

    Attributes:
        branch: The branch that was tagged (or would have been).
        plan: The computed plan.
        tag_created: Whether a tag ref was actually created.
    """

    branch: BranchDescriptor
    plan: ReleasePlan
    tag_created: bool


async def resolve_branch(forge: Forge, config: TagBumpConfig) -> BranchDescriptor:
    """Find the branch to tag.

    A forced ``branch`` input wins over the context ref.

    Raises:
        TagBumpError: If the branch cannot be found.
    """
    if config.branch:
        logger.info('checking_forced_branch', branch=config.branch)
        branch = await forge.get_branch(config.branch)
        if branch is None:
            raise TagBumpError(
                code=E.BRANCH_NOT_FOUND,
                message='unknown branch provided',
                hint=f'No branch named {config.branch!r} exists in {config.repository or "the repository"}.',
            )
        return branch

    active = config.context_branch
    logger.info('loading_context_branch', branch=active, ref=config.ref)
    branch = await forge.get_branch(active) if active else None
    if branch is None:
        raise TagBumpError(
            code=E.BRANCH_NOT_FOUND,
            message=f'failed to load branch {active}',
            hint='Run on a branch push, or set the "branch" input.',
        )
    return branch


async def run_release(forge: Forge, config: TagBumpConfig, outputs: ActionOutputs) -> ReleaseResult:
    """Compute the next tag for the configured branch and create it.

    Args:
        forge: Forge backend for the repository.
        config: Resolved run configuration.
        outputs: Sink for the step outputs; flushed only on success.

    Returns:
        The :class:`ReleaseResult`.

    Raises:
        TagBumpError: On configuration errors (unknown branch, existing
            explicit tag, invalid release-branch pattern) or failed forge
            calls.  No outputs are written in that case.
    """
    branch = await resolve_branch(forge, config)
    logger.info('active_branch', branch=branch.name, sha=branch.tip_sha)

    tags = await forge.list_tags()
    latest = latest_tag(tags)
    latest_stable = latest_tag(tags, include_prerelease=False)
    logger.info(
        'previous_tags',
        latest=latest.name if latest else None,
        latest_stable=latest_stable.name if latest_stable else None,
    )

    previous_tag = latest.name if latest is not None else str(ZERO_VERSION)
    previous_version = strip_leading_v(previous_tag)

    if config.tag:
        if tag_exists(tags, config.tag):
            raise TagBumpError(
                code=E.TAG_EXISTS,
                message=f'tag already exists {config.tag}',
                hint='Pick a different tag or drop the explicit "tag" input.',
            )
        plan = ReleasePlan(
            previous_tag=previous_tag,
            previous_version=previous_version,
            next_tag=config.tag,
            next_version=strip_leading_v(config.tag),
            reason='explicit_tag',
        )
    elif latest is not None and latest.commit_sha == branch.tip_sha:
        logger.info('no_new_commits', tag=latest.name)
        plan = ReleasePlan(
            previous_tag=previous_tag,
            previous_version=previous_version,
            next_tag=previous_tag,
            next_version=previous_version,
            create_tag=False,
            reason='no_new_commits',
        )
    else:
        plan = await _plan_release(forge, config, branch, previous_tag, previous_version, latest, latest_stable)

    outputs.set('tag', plan.previous_tag)
    outputs.set('version', plan.previous_version)
    outputs.set('new-tag', plan.next_tag)
    outputs.set('new-version', plan.next_version)

    tag_created = False
    if plan.create_tag and config.dry_run:
        logger.info('dry_run_skip_tagging', tag=plan.next_tag)
    elif plan.create_tag:
        logger.info('creating_tag', tag=plan.next_tag, sha=branch.tip_sha)
        await forge.create_tag_ref(plan.next_tag, branch.tip_sha)
        tag_created = True

    outputs.flush()
    return ReleaseResult(branch=branch, plan=plan, tag_created=tag_created)


async def _plan_release(
    forge: Forge,
    config: TagBumpConfig,
    branch: BranchDescriptor,
    previous_tag: str,
    previous_version: str,
    latest: Tag | None,
    latest_stable: Tag | None,
) -> ReleasePlan:
    release = is_release_branch(branch.name, config.release_branch)

    latest_clean = clean_version(previous_tag) if latest is not None else None
    version = latest_clean or ZERO_VERSION

    commits = await forge.list_commits(branch.tip_sha)
    boundary = latest_stable.commit_sha if latest_stable is not None else ''
    msg_level = await resolve_bump(
        commits,
        boundary,
        config.issue_labels,
        config.rule_table(),
        forge.get_issue_labels,
    )
    logger.info('commit_messages_level', level=msg_level.value, commits=len(commits), boundary=boundary or None)

    next_version = plan_next_version(
        version,
        branch.name,
        is_release=release,
        msg_level=msg_level,
        default_level=config.bump,
    )
    if release:
        bump = msg_level if msg_level != BumpType.NONE else config.bump
        logger.info('release_branch', branch=branch.name, bump=bump.value, next_version=str(next_version))
    else:
        bump = BumpType.NONE
        logger.info('prerelease_branch', branch=branch.name, next_version=str(next_version))

    return ReleasePlan(
        previous_tag=previous_tag,
        previous_version=previous_version,
        next_tag=format_tag(next_version, with_v=config.with_v),
        next_version=str(next_version),
        bump=bump,
        reason='release' if release else 'prerelease',
    )
