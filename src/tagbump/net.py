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

"""HTTP client plumbing shared by the forge backends.

A thin wrapper around :class:`httpx.AsyncClient` so every backend gets
the same pool size, timeout and ``User-Agent``.  Retries and backoff are
deliberately absent: a failed request surfaces to the caller, which
decides whether it is fatal.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager
from typing import Final

import httpx

__all__ = [
    'DEFAULT_POOL_SIZE',
    'DEFAULT_TIMEOUT',
    'USER_AGENT',
    'http_client',
]

#: Maximum concurrent connections per client.
DEFAULT_POOL_SIZE: Final[int] = 10

#: Request timeout in seconds.
DEFAULT_TIMEOUT: Final[float] = 30.0

USER_AGENT: Final[str] = 'tagbump'


@asynccontextmanager
async def http_client(
    *,
    base_url: str = '',
    headers: Mapping[str, str] | None = None,
    pool_size: int = DEFAULT_POOL_SIZE,
    timeout: float = DEFAULT_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AsyncIterator[httpx.AsyncClient]:
    """Yield a configured :class:`httpx.AsyncClient`.

    Args:
        base_url: Prefix for relative request URLs.
        headers: Extra default headers.
        pool_size: Connection pool limit.
        timeout: Per-request timeout in seconds.
        transport: Custom transport (tests pass
            :class:`httpx.MockTransport`).
    """
    merged = {'User-Agent': USER_AGENT, **(headers or {})}
    async with httpx.AsyncClient(
        base_url=base_url,
        headers=merged,
        limits=httpx.Limits(max_connections=pool_size),
        timeout=timeout,
        transport=transport,
    ) as client:
        yield client
