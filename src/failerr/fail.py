"""Failure values: expected failures returned as data instead of raised.

A producer returns either its ordinary result or a ``Fail`` built with
``mk_fail``; the consumer branches on ``is_fail``::

    def divide(a: float, b: float) -> OrFail[float, Mapping[str, Any]]:
        if b == 0:
            return mk_fail("division by zero")
        return a / b

    result = divide(7, 0)
    if is_fail(result):
        print(result.message)
    else:
        print(result * 2)

``Fail`` is a nominal type. Recognition checks the value's real type against it,
so a dict, namedtuple or any other object that happens to expose ``message``
and ``data`` is never mistaken for a failure.
"""

from __future__ import annotations

import dataclasses
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TypeGuard, overload

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

__all__ = ["EMPTY", "Fail", "OrFail", "is_fail", "mk_fail"]

#: Shared default payload for failures built without data. Read-only view over
#: a dict nothing else references, so it can never be mutated.
EMPTY: Mapping[str, Any] = MappingProxyType({})


@dataclasses.dataclass(frozen=True, slots=True)
class Fail[D]:
    """An expected failure carried as a value.

    Attributes:
        message: Human-readable description, passed through untouched.
        data: Caller-defined context (error codes, offending input, ...).
            Defaults to the shared ``EMPTY`` mapping.
    """

    message: str
    data: D = dataclasses.field(default=EMPTY, hash=False)  # type: ignore[assignment]

    def __reduce__(self) -> tuple[Callable[..., Fail[Any]], tuple[Any, ...]]:
        # EMPTY itself cannot be pickled; rebuild it as the shared default.
        if self.data is EMPTY:
            return (mk_fail, (self.message,))
        return (Fail, (self.message, self.data))


type OrFail[T, D] = T | Fail[D]
"""Return type of a producer: its ordinary result or a failure."""


@overload
def mk_fail(message: str) -> Fail[Mapping[str, Any]]: ...


@overload
def mk_fail[D](message: str, data: D) -> Fail[D]: ...


def mk_fail(message: str, data: Any = EMPTY) -> Fail[Any]:
    """Build a failure value.

    Args:
        message: Description of the failure. Any string, including ``""``.
        data: Optional payload, stored as-is (no copy). When omitted the
            failure shares ``EMPTY`` with every other data-less failure.

    Returns:
        A new ``Fail`` for which ``is_fail`` is True.
    """
    return Fail(message, data)


def is_fail(value: object) -> TypeGuard[Fail[Any]]:
    """Return True if ``value`` was built by ``mk_fail``.

    Total over every input: only the value's real type is consulted, so
    primitives, ``None``, cyclic containers and objects with hostile
    ``__getattr__`` all yield a plain ``False``. Subclasses of ``Fail`` are
    not failures; only the exact type ``mk_fail`` builds is.
    """
    # Not isinstance(): it trusts a spoofed __class__ (mocks, proxies).
    return type(value) is Fail
