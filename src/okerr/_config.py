"""Library configuration: ResultConfig, init() and get_config()."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from okerr._logging import configure_logging

__all__ = [
    'ResultConfig',
    'get_config',
    'init',
]

_LOG_LEVELS = frozenset({'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'})


@dataclass(frozen=True)
class ResultConfig:
    """Configuration for the okerr adapters.

    Attributes:
        catch: Exception types the adapters convert into Err. Anything
            else propagates to the caller.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Render log events as JSON rather than console output.
    """

    catch: tuple[type[BaseException], ...] = (Exception,)
    log_level: str | None = None
    json_logs: bool = True


# Global configuration (set by init())
_config: ResultConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from OKERR_LOG_LEVEL, if set."""
    env_level = os.environ.get('OKERR_LOG_LEVEL', '').upper()
    if not env_level:
        return None
    if env_level not in _LOG_LEVELS:
        logging.warning("Unknown OKERR_LOG_LEVEL value '%s', logging disabled", env_level)
        return None
    return env_level


def _validate_catch(catch: tuple[type[BaseException], ...]) -> tuple[type[BaseException], ...]:
    catch = tuple(catch)
    if not catch:
        msg = 'catch must name at least one exception type'
        raise ValueError(msg)
    for exc_type in catch:
        if not (isinstance(exc_type, type) and issubclass(exc_type, BaseException)):
            msg = f'catch entries must be exception classes, got {exc_type!r}'
            raise TypeError(msg)
    return catch


def init(
    catch: tuple[type[BaseException], ...] | None = None,
    log_level: str | None = None,
    *,
    json_logs: bool = True,
) -> ResultConfig:
    """Initialize okerr with the specified configuration.

    Calling init() is optional; without it the adapters use ResultConfig().

    Args:
        catch: Exception types converted into Err. Defaults to (Exception,).
        log_level: Logging level ("DEBUG", "INFO", etc.). Falls back to
            the OKERR_LOG_LEVEL environment variable; None = silent.
        json_logs: Render JSON logs if True, console logs otherwise.

    Returns:
        The ResultConfig that was set.

    Raises:
        TypeError: If catch contains something other than an exception class.
        ValueError: If catch is empty or log_level is not a known level.

    Example:
        ```python
        import okerr

        # Capture everything, including KeyboardInterrupt
        okerr.init(catch=(BaseException,))

        # Trace every captured failure
        okerr.init(log_level='DEBUG', json_logs=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_catch = (Exception,) if catch is None else _validate_catch(catch)

    if log_level is None:
        resolved_level = _detect_log_level()
    else:
        resolved_level = log_level.upper()
        if resolved_level not in _LOG_LEVELS:
            msg = f'Unknown log level {log_level!r}'
            raise ValueError(msg)

    _config = ResultConfig(
        catch=resolved_catch,
        log_level=resolved_level,
        json_logs=json_logs,
    )

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=json_logs)

    return _config


def get_config() -> ResultConfig:
    """Get the current configuration.

    Returns:
        The ResultConfig installed by init(), or the defaults if init()
        has not been called.
    """
    if _config is None:
        return ResultConfig()
    return _config
