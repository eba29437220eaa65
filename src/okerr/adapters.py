"""Adapters that turn raising computations into Result values.

to_result / to_result_async take a zero-argument computation, run it once
and return Ok(value) or Err(exception). The curried forms fix the error type
first so the success type is inferred from the computation. safe and
safe_async apply the same conversion to every call of a decorated function.

Examples:
    >>> import json
    >>> to_result(lambda: json.loads('{"a": 1}'))
    Ok(val={'a': 1})
    >>> parse = to_result_curried(json.JSONDecodeError)
    >>> parse(lambda: json.loads('{')).is_err()
    True
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, Protocol, overload

import wrapt

from okerr._config import ResultConfig, get_config
from okerr._logging import get_logger
from okerr.result import Err, Ok, Result

__all__ = [
    'CurriedToResult',
    'CurriedToResultAsync',
    'safe',
    'safe_async',
    'to_result',
    'to_result_async',
    'to_result_async_curried',
    'to_result_curried',
]


class CurriedToResult[E](Protocol):
    """Second step of to_result_curried: takes the computation."""

    def __call__[T](self, computation: Callable[[], T], /) -> Result[T, E]: ...


class CurriedToResultAsync[E](Protocol):
    """Second step of to_result_async_curried: takes the computation."""

    def __call__[T](self, computation: Callable[[], Awaitable[T]], /) -> Awaitable[Result[T, E]]: ...


def _trace_success(config: ResultConfig, adapter: str) -> None:
    if config.log_level is None:
        return
    get_logger(__name__).debug('computation_succeeded', adapter=adapter)


def _trace_failure(
    config: ResultConfig,
    adapter: str,
    exc: BaseException,
    error_type: type[Any] | None,
) -> None:
    if config.log_level is None:
        return
    logger = get_logger(__name__)
    logger.debug('computation_failed', adapter=adapter, error_type=type(exc).__name__)
    if isinstance(error_type, type) and not isinstance(exc, error_type):
        logger.warning(
            'captured_error_outside_declared_type',
            adapter=adapter,
            declared=error_type.__name__,
            error_type=type(exc).__name__,
        )


def _capture[T](
    computation: Callable[[], T],
    adapter: str,
    *,
    catch: tuple[type[BaseException], ...] | None = None,
    error_type: type[Any] | None = None,
) -> Result[T, Any]:
    config = get_config()
    if catch is None:
        catch = config.catch
    try:
        value = computation()
    except catch as e:
        _trace_failure(config, adapter, e, error_type)
        return Err(e)
    _trace_success(config, adapter)
    return Ok(value)


async def _capture_async[T](
    computation: Callable[[], Awaitable[T]],
    adapter: str,
    *,
    catch: tuple[type[BaseException], ...] | None = None,
    error_type: type[Any] | None = None,
) -> Result[T, Any]:
    config = get_config()
    if catch is None:
        catch = config.catch
    try:
        value = await computation()
    except catch as e:
        _trace_failure(config, adapter, e, error_type)
        return Err(e)
    _trace_success(config, adapter)
    return Ok(value)


def to_result[T](computation: Callable[[], T]) -> Result[T, Any]:
    """Run a computation and capture its outcome as a Result.

    The computation is called once, synchronously. Its return value becomes
    Ok(value); an exception in the configured catch set (Exception by
    default) becomes Err(exception), kept by identity.

    Args:
        computation: Zero-argument callable.

    Returns:
        Ok with the return value, or Err with the raised exception.

    Example:
        ```python
        result: Result[dict, json.JSONDecodeError] = to_result(lambda: json.loads(raw))
        if result.is_err():
            log.warning('bad payload', error=str(result.err))
        ```
    """
    return _capture(computation, 'to_result')


def to_result_curried[E](error_type: type[E] | None = None) -> CurriedToResult[E]:
    """Fix the error type first, then take the computation.

    ``to_result_curried(KeyError)(lambda: d['k'])`` behaves exactly like
    ``to_result(lambda: d['k'])`` but is typed ``Result[T, KeyError]``.
    The declared type does not narrow what is captured; a captured
    exception of another type is still returned as Err and, when logging is
    enabled, reported with a warning.

    Args:
        error_type: The error type callers expect. Optional.

    Returns:
        A reusable callable taking the computation.
    """

    def apply[T](computation: Callable[[], T], /) -> Result[T, E]:
        return _capture(computation, 'to_result_curried', error_type=error_type)

    return apply


async def to_result_async[T](computation: Callable[[], Awaitable[T]]) -> Result[T, Any]:
    """Await a computation and capture its outcome as a Result.

    Exceptions raised while producing the awaitable and while awaiting it
    are both captured, so awaiting this coroutine never raises an exception
    from the catch set. Cancellation is not captured.

    Args:
        computation: Zero-argument callable returning an awaitable.

    Returns:
        Ok with the awaited value, or Err with the raised exception.

    Example:
        ```python
        result = await to_result_async(lambda: client.get(url))
        body = result.unwrap_or(None)
        ```
    """
    return await _capture_async(computation, 'to_result_async')


def to_result_async_curried[E](error_type: type[E] | None = None) -> CurriedToResultAsync[E]:
    """Async counterpart of to_result_curried.

    Args:
        error_type: The error type callers expect. Optional.

    Returns:
        A reusable callable taking the computation and returning a coroutine.
    """

    async def apply[T](computation: Callable[[], Awaitable[T]], /) -> Result[T, E]:
        return await _capture_async(computation, 'to_result_async_curried', error_type=error_type)

    return apply


@overload
def safe[**P, T](
    func: Callable[P, T],
) -> Callable[P, Result[T, Exception]]: ...


@overload
def safe[E: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[..., Any]], Callable[..., Result[Any, E]]]: ...


def safe(
    func: Callable[..., Any] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Decorator that returns Err instead of raising.

    Every call of the wrapped function goes through to_result. Can be used
    with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(ValueError, TypeError))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Exception types to capture. Defaults to the configured
            catch set; other exceptions propagate.

    Returns:
        A wrapped function that returns Result[T, E] instead of T.

    Example:
        ```python
        @safe
        def divide(a: int, b: int) -> float:
            return a / b
        divide(10, 2)
        # Ok(val=5.0)
        divide(10, 0)
        # Err(err=ZeroDivisionError('division by zero'))
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Result[Any, Any]:
        return _capture(lambda: wrapped(*args, **kwargs), 'safe', catch=exceptions)

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def safe_async[**P, T](
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[Result[T, Exception]]]: ...


@overload
def safe_async[E: BaseException](
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[..., Awaitable[Any]]], Callable[..., Awaitable[Result[Any, E]]]]: ...


def safe_async(
    func: Callable[..., Awaitable[Any]] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Async decorator that returns Err instead of raising.

    Every call of the wrapped coroutine function goes through
    to_result_async. Accepts the same arguments as safe.

    Example:
        ```python
        @safe_async
        async def fetch(url: str) -> bytes:
            return await http_get(url)

        result = await fetch('https://example.invalid')
        ```
    """

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[..., Awaitable[Any]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Result[Any, Any]:
        return await _capture_async(lambda: wrapped(*args, **kwargs), 'safe_async', catch=exceptions)

    if func is not None:
        return wrapper(func)
    return wrapper
