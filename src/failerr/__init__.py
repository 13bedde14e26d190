"""failerr: expected failures as values.

Public API:
    - mk_fail(): Build a failure value
    - is_fail(): Recognize a failure value
    - Fail: The failure type, generic over its data payload
    - OrFail: Producer return type, ``T | Fail[D]``
    - EMPTY: Shared default payload
"""

from __future__ import annotations

import logging

from failerr.fail import EMPTY, Fail, OrFail, is_fail, mk_fail

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("failerr")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("failerr").addHandler(logging.NullHandler())

__all__ = [
    "EMPTY",
    "Fail",
    "OrFail",
    "is_fail",
    "mk_fail",
]
