"""Test helpers: a producer/consumer pair living outside the test modules.

Failures built here are checked from the test modules, and from worker
threads and processes, to show recognition is not tied to a call site.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from failerr import is_fail, mk_fail

if TYPE_CHECKING:
    from collections.abc import Mapping

    from failerr import OrFail


def divide(a: float, b: float) -> OrFail[float, Mapping[str, Any]]:
    """Producer: ``a / b``, or a failure for a zero divisor."""
    if b == 0:
        return mk_fail("division by zero")
    return a / b


def describe(result: OrFail[float, Mapping[str, Any]]) -> str:
    """Consumer: branch on the result without try/except."""
    if is_fail(result):
        return f"failed: {result.message}"
    return f"ok: {result}"


def make_failure(message: str, code: int | None = None):
    """Build a failure, with a ``{"code": ...}`` payload when ``code`` is set."""
    if code is None:
        return mk_fail(message)
    return mk_fail(message, {"code": code})
