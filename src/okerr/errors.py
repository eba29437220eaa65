"""Exceptions raised by okerr itself."""

from __future__ import annotations

from typing import Any

__all__ = ['UnwrapError']


class UnwrapError(RuntimeError):
    """A Result was unwrapped on the wrong variant.

    Raised by ``Err.unwrap()``, ``Err.expect()`` and ``Ok.unwrap_err()``.
    The offending value is kept verbatim on ``payload``.
    """

    def __init__(self, payload: Any, message: str | None = None) -> None:
        self.payload = payload
        super().__init__(message or f'Called unwrap on Err: {payload!r}')
