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

"""GitHub forge backend (REST API v3).

Endpoints used::

    GET  /repos/{owner}/{repo}/tags                          list_tags
    GET  /repos/{owner}/{repo}/git/matching-refs/heads/{b}   get_branch
    GET  /repos/{owner}/{repo}/commits?sha={sha}             list_commits
    GET  /repos/{owner}/{repo}/issues/{number}               get_issue_labels
    POST /repos/{owner}/{repo}/git/refs                      create_tag_ref

Only the first page of each listing is read.  Failures of the listing
and ref calls raise :class:`~tagbump.errors.TagBumpError`; issue lookups
never raise and report failure through their result instead.

Usage::

    async with open_github_forge(config) as forge:
        tags = await forge.list_tags()
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any
from urllib.parse import quote

import httpx

from tagbump._types import BranchDescriptor, Commit, Tag
from tagbump.config import TagBumpConfig
from tagbump.errors import E, TagBumpError
from tagbump.logging import get_logger
from tagbump.net import http_client
from tagbump.scanner import IssueFound, IssueLookupFailed, IssueLookupResult, IssueNotFound

logger = get_logger(__name__)

__all__ = [
    'PER_PAGE',
    'GitHubForge',
    'open_github_forge',
]

#: Page size for listings; only one page is ever requested.
PER_PAGE = 100

_API_VERSION = '2022-11-28'


class GitHubForge:
    """:class:`~tagbump.backends.forge.Forge` backed by the GitHub REST API.

    Args:
        owner: Repository owner.
        repo: Repository name.
        client: An :class:`httpx.AsyncClient` whose ``base_url`` is the
            API root and which carries the auth headers.  The caller owns
            its lifecycle.
    """

    def __init__(self, owner: str, repo: str, client: httpx.AsyncClient) -> None:
        self._owner = owner
        self._repo = repo
        self._client = client

    @property
    def _prefix(self) -> str:
        return f'/repos/{self._owner}/{self._repo}'

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:  # noqa: ANN401
        url = f'{self._prefix}{path}'
        try:
            resp = await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            raise TagBumpError(
                code=E.FORGE_ERROR,
                message=f'{method} {url} failed: {exc}',
                hint='Check network access to the GitHub API.',
            ) from exc
        if not resp.is_success:
            raise TagBumpError(
                code=E.FORGE_ERROR,
                message=f'{method} {url} failed with HTTP {resp.status_code}',
                hint='Check that the token can read the repository and write refs.',
            )
        return resp

    async def _get_json(self, path: str, **params: Any) -> Any:  # noqa: ANN401
        resp = await self._request('GET', path, params=params or None)
        try:
            return resp.json()
        except ValueError as exc:
            raise TagBumpError(
                code=E.FORGE_ERROR,
                message=f'GET {self._prefix}{path} returned invalid JSON',
            ) from exc

    async def list_tags(self) -> list[Tag]:
        """Return the repository's tags."""
        data = await self._get_json('/tags', per_page=PER_PAGE)
        tags = [
            Tag(name=item['name'], commit_sha=item.get('commit', {}).get('sha', ''))
            for item in data
            if isinstance(item, dict) and 'name' in item
        ]
        logger.debug('tags_listed', count=len(tags))
        return tags

    async def get_branch(self, name: str) -> BranchDescriptor | None:
        """Resolve *name* through the matching-refs endpoint.

        The endpoint does prefix matching, so only an exact
        ``refs/heads/<name>`` entry counts; ``rel`` never resolves to
        ``release``.
        """
        data = await self._get_json(f'/git/matching-refs/heads/{quote(name)}')
        exact = [item for item in data if isinstance(item, dict) and item.get('ref') == f'refs/heads/{name}']
        if not exact:
            logger.debug('branch_not_found', branch=name, candidates=len(data))
            return None
        chosen = exact[0]
        return BranchDescriptor(
            name=chosen['ref'].split('/')[-1],
            tip_sha=chosen.get('object', {}).get('sha', ''),
        )

    async def list_commits(self, sha: str) -> list[Commit]:
        """Return the commits reachable from *sha*, newest first."""
        data = await self._get_json('/commits', sha=sha, per_page=PER_PAGE)
        commits = [
            Commit(sha=item['sha'], message=item.get('commit', {}).get('message', ''))
            for item in data
            if isinstance(item, dict) and 'sha' in item
        ]
        logger.debug('commits_listed', sha=sha, count=len(commits))
        return commits

    async def get_issue_labels(self, issue_number: int) -> IssueLookupResult:
        """Return the label names of issue *issue_number*."""
        url = f'{self._prefix}/issues/{issue_number}'
        try:
            resp = await self._client.get(url)
        except httpx.HTTPError as exc:
            return IssueLookupFailed(reason=str(exc) or type(exc).__name__)
        if resp.status_code in (404, 410):
            return IssueNotFound()
        if not resp.is_success:
            return IssueLookupFailed(reason=f'HTTP {resp.status_code}')
        try:
            data = resp.json()
        except ValueError:
            return IssueLookupFailed(reason='invalid JSON')
        if not isinstance(data, dict):
            return IssueLookupFailed(reason='unexpected payload')

        labels: set[str] = set()
        for label in data.get('labels') or []:
            if isinstance(label, dict) and label.get('name'):
                labels.add(str(label['name']))
            elif isinstance(label, str):
                labels.add(label)
        return IssueFound(labels=frozenset(labels))

    async def create_tag_ref(self, name: str, sha: str) -> None:
        """Create ``refs/tags/<name>`` at *sha*."""
        await self._request('POST', '/git/refs', json={'ref': f'refs/tags/{name}', 'sha': sha})
        logger.info('tag_ref_created', tag=name, sha=sha)


@asynccontextmanager
async def open_github_forge(
    config: TagBumpConfig,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AsyncIterator[GitHubForge]:
    """Yield a :class:`GitHubForge` for the configured repository."""
    headers = {
        'Accept': 'application/vnd.github+json',
        'Authorization': f'Bearer {config.github_token}',
        'X-GitHub-Api-Version': _API_VERSION,
    }
    async with http_client(base_url=config.api_url, headers=headers, transport=transport) as client:
        yield GitHubForge(config.owner, config.repo, client)
