"""Result type: Ok[T] | Err[E] for explicit error handling."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, ClassVar, Literal, NoReturn, TypeIs

import msgspec

from okerr.errors import UnwrapError

__all__ = ['Err', 'Ok', 'Result']


def _cause(payload: Any) -> BaseException | None:
    return payload if isinstance(payload, BaseException) else None


# Neither variant uses gc=False: both may sit in reference cycles.
class Ok[T](msgspec.Struct, frozen=True):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> ok = Ok(42)
        >>> ok.ok
        True
        >>> ok.unwrap()
        42
    """

    val: T

    ok: ClassVar[Literal[True]] = True

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True since this is Ok.

        This method provides type narrowing - after checking is_ok(),
        the type checker knows the result is Ok[T].
        """
        return True

    def is_err(self) -> TypeIs[Err[Any]]:
        """Return False since this is Ok."""
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.val

    def unwrap_or(self, default: object) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.val

    def unwrap_or_else(self, f: Callable[[Any], object]) -> T:  # noqa: ARG002
        """Return the contained value without calling the fallback."""
        return self.val

    def expect(self, _msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.val

    def unwrap_err(self) -> NoReturn:
        """Raise since Ok holds no error.

        Raises:
            UnwrapError: Always, carrying the Ok value as payload.
        """
        raise UnwrapError(self.val, f'Called unwrap_err on Ok: {self.val!r}')


class Err[E](msgspec.Struct, frozen=True):
    """Error variant of Result containing an error of type E.

    The error is stored exactly as given. Exceptions captured by the
    adapters are kept by identity, never stringified or re-wrapped.

    Examples:
        >>> err = Err('something went wrong')
        >>> err.is_err()
        True
        >>> err.unwrap_or(0)
        0
    """

    err: E

    ok: ClassVar[Literal[False]] = False

    def is_ok(self) -> TypeIs[Ok[Any]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True since this is Err.

        This method provides type narrowing - after checking is_err(),
        the type checker knows the result is Err[E].
        """
        return True

    def unwrap(self) -> NoReturn:
        """Raise since Err has no value to unwrap.

        If the held error is an exception it becomes the ``__cause__`` of
        the raised UnwrapError, so the original traceback is kept.

        Raises:
            UnwrapError: Always, carrying the held error as payload.
        """
        raise UnwrapError(self.err) from _cause(self.err)

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def unwrap_or_else[T](self, f: Callable[[E], T]) -> T:
        """Compute a fallback from the held error."""
        return f(self.err)

    def expect(self, msg: str) -> NoReturn:
        """Raise with a custom message.

        Raises:
            UnwrapError: Always, with ``msg`` and the held error as payload.
        """
        raise UnwrapError(self.err, f'{msg}: {self.err!r}') from _cause(self.err)

    def unwrap_err(self) -> E:
        """Return the held error."""
        return self.err


type Result[T, E = Any] = Ok[T] | Err[E]
