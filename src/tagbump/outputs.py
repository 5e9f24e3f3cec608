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

"""Step outputs: ``tag``, ``version``, ``new-tag`` and ``new-version``.

Values are collected in memory and only written once the run has
succeeded, so a failed run never leaves partial outputs behind.  Inside
GitHub Actions they are appended to the file named by ``$GITHUB_OUTPUT``
as ``name=value`` lines.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from tagbump.logging import get_logger

logger = get_logger(__name__)

__all__ = [
    'OUTPUT_NAMES',
    'ActionOutputs',
]

OUTPUT_NAMES: tuple[str, ...] = ('tag', 'version', 'new-tag', 'new-version')


class ActionOutputs:
    """Buffered step outputs.

    Args:
        path: File to append to on :meth:`flush`.  Defaults to
            ``$GITHUB_OUTPUT``; when neither is set, :meth:`flush` only
            logs.
    """

    def __init__(self, path: Path | None = None, env: Mapping[str, str] | None = None) -> None:
        if path is None:
            github_output = (env if env is not None else os.environ).get('GITHUB_OUTPUT', '')
            path = Path(github_output) if github_output else None
        self._path = path
        self._values: dict[str, str] = {}

    def set(self, name: str, value: str) -> None:
        """Record an output value (last write wins)."""
        if name not in OUTPUT_NAMES:
            raise ValueError(f'unknown output {name!r}')
        self._values[name] = value

    def get(self, name: str) -> str | None:
        """Return a recorded value, or ``None``."""
        return self._values.get(name)

    def as_dict(self) -> dict[str, str]:
        """Recorded values in declaration order."""
        return {name: self._values[name] for name in OUTPUT_NAMES if name in self._values}

    def flush(self) -> None:
        """Write recorded values to the outputs file."""
        values = self.as_dict()
        if self._path is None:
            logger.debug('outputs_not_written', outputs=values)
            return
        with self._path.open('a', encoding='utf-8') as f:
            for name, value in values.items():
                f.write(f'{name}={value}\n')
        logger.debug('outputs_written', path=str(self._path), outputs=values)
