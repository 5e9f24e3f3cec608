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

"""Structured logging for tagbump.

Configures `structlog <https://www.structlog.org/>`_ with two output modes:

- **Console** (default): Rich-colored when stderr is a TTY,
  human-readable otherwise.
- **JSON** (``--json-log``): Machine-readable, one JSON object per line.

Both modes write to stderr so stdout stays reserved for the release
summary.

Usage::

    from tagbump.logging import configure_logging, get_logger

    configure_logging(verbose=True, json_log=False)
    log = get_logger()
    log.info('latest_tag', tag='v1.2.3')
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    json_log: bool = False,
    redact_secrets: bool = True,
) -> None:
    """Configure structlog for tagbump.

    Should be called once at startup, before any logging calls.

    Args:
        verbose: Enable debug-level output.
        quiet: Suppress info-level output (only warnings and errors).
        json_log: Use JSON output instead of colored console output.
        redact_secrets: Scrub token values from log output. Can also be
            disabled via the ``TAGBUMP_REDACT_SECRETS=0`` env var.
    """
    level = _level(verbose=verbose, quiet=quiet)
    logging.basicConfig(format='%(message)s', stream=sys.stderr, level=level, force=True)

    global _secret_values, _redaction_enabled  # noqa: PLW0603
    _redaction_enabled = redact_secrets and os.environ.get('TAGBUMP_REDACT_SECRETS', '1') != '0'
    _secret_values = _build_secret_values() if _redaction_enabled else frozenset()

    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(json_log),
        ],
    )
    for handler in logging.root.handlers:
        handler.setFormatter(formatter)


def _level(*, verbose: bool, quiet: bool) -> int:
    """Quiet wins over verbose."""
    if quiet:
        return logging.WARNING
    return logging.DEBUG if verbose else logging.INFO


def _renderer(json_log: bool) -> structlog.types.Processor:
    if json_log:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def get_logger(name: str = 'tagbump') -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to *name*."""
    return structlog.get_logger(name)


# Env vars whose runtime values must never appear in logs. The Actions
# runner exposes inputs as ``INPUT_<NAME>`` with dashes preserved.
_SENSITIVE_ENV_VARS: tuple[str, ...] = (
    'GITHUB_TOKEN',
    'GH_TOKEN',
    'INPUT_GITHUB-TOKEN',
    'INPUT_GITHUB_TOKEN',
)

_REDACTED = '[REDACTED]'


def _build_secret_values() -> frozenset[str]:
    """Collect current runtime values of sensitive env vars.

    Only non-empty values are included.
    """
    values: set[str] = set()
    for name in _SENSITIVE_ENV_VARS:
        val = os.environ.get(name, '')
        if val:
            values.add(val)
    return frozenset(values)


# Populated by configure_logging(); used by the processor.
_secret_values: frozenset[str] = frozenset()
_redaction_enabled: bool = True


def _scrub(value: object) -> object:
    """Replace any secret substring in a string value with ``[REDACTED]``."""
    if not isinstance(value, str) or not _secret_values:
        return value
    result = value
    for secret in _secret_values:
        if len(secret) >= 8 and secret in result:
            result = result.replace(secret, _REDACTED)
    return result


def redact_sensitive_values(
    logger: Any,  # noqa: ANN401
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Structlog processor: scrub token values from all event fields.

    Secrets shorter than eight characters are left alone so that short
    common words are never mangled.
    """
    if not _secret_values:
        return event_dict
    return {k: _scrub(v) for k, v in event_dict.items()}


# Run on every event, before the renderer chosen in configure_logging().
_SHARED_PROCESSORS: tuple[structlog.types.Processor, ...] = (
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt='iso'),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
    redact_sensitive_values,
)

__all__ = [
    'configure_logging',
    'get_logger',
    'redact_sensitive_values',
]
