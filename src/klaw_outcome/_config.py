"""Library configuration: OutcomeConfig, init() and get_config()."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from klaw_outcome._logging import add_log_hook, configure_logging, remove_log_hook

__all__ = [
    'OutcomeConfig',
    'get_config',
    'init',
    'reset',
]

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
_FALSY = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class OutcomeConfig:
    """Configuration for klaw-outcome.

    Attributes:
        log_level: Logging level (e.g. "DEBUG"). None leaves logging unconfigured.
        json_logs: Render log entries as JSON instead of console output.
        trace_runs: Log a debug event every time a run folds a failure.
        log_hooks: Hooks registered by init(), removed again by reset().
    """

    log_level: str | None = None
    json_logs: bool = True
    trace_runs: bool = False
    log_hooks: tuple[Callable[[dict[str, Any]], None], ...] = ()


_config: OutcomeConfig | None = None


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name, '').strip().lower()
    if not raw:
        return default
    if raw in _TRUTHY:
        return True
    if raw in _FALSY:
        return False
    logging.warning("Unknown %s value '%s', using %s", name, raw, default)
    return default


def _from_env() -> OutcomeConfig:
    """Build a config from KLAW_OUTCOME_* environment variables."""
    return OutcomeConfig(
        log_level=os.environ.get('KLAW_OUTCOME_LOG_LEVEL') or None,
        json_logs=_env_flag('KLAW_OUTCOME_JSON_LOGS', True),
        trace_runs=_env_flag('KLAW_OUTCOME_TRACE', False),
    )


def init(
    log_level: str | None = None,
    *,
    json_logs: bool | None = None,
    trace_runs: bool | None = None,
    log_hooks: Iterable[Callable[[dict[str, Any]], None]] = (),
) -> OutcomeConfig:
    """Initialize klaw-outcome configuration.

    Explicit arguments win over environment variables, which win over the
    defaults.

    Args:
        log_level: Logging level ("DEBUG", "INFO", ...). None = from env / silent.
        json_logs: JSON (True) or console (False) log rendering.
        trace_runs: Emit a debug event for every folded failure.
        log_hooks: Callables receiving a copy of every log entry dict, such as
            the folded-failure events. Hooks from an earlier init() are replaced.
            Giving hooks configures logging, at WARNING when no level is set;
            hooks still see entries below that level.

    Returns:
        The OutcomeConfig that was set.

    Example:
        ```python
        import klaw_outcome

        klaw_outcome.init(log_level='DEBUG', trace_runs=True)
        ```
    """
    global _config  # noqa: PLW0603

    reset()
    env = _from_env()
    _config = OutcomeConfig(
        log_level=log_level if log_level is not None else env.log_level,
        json_logs=json_logs if json_logs is not None else env.json_logs,
        trace_runs=trace_runs if trace_runs is not None else env.trace_runs,
        log_hooks=tuple(log_hooks),
    )
    for hook in _config.log_hooks:
        add_log_hook(hook)

    if _config.log_level is not None or _config.log_hooks:
        configure_logging(_config.log_level or 'WARNING', json_output=_config.json_logs)

    return _config


def get_config() -> OutcomeConfig:
    """Return the active config, reading the environment if init() was not called."""
    if _config is None:
        return _from_env()
    return _config


def reset() -> None:
    """Forget the config set by init() and unregister its log hooks."""
    global _config  # noqa: PLW0603
    if _config is not None:
        for hook in _config.log_hooks:
            remove_log_hook(hook)
    _config = None
