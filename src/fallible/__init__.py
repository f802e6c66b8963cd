"""fallible: explicit success/failure values for Python.

Public API:
    - Result: Base type and factory (``Result.ok`` / ``Result.err``)
    - Ok, Err: The two variants
    - is_ok(), is_err(): Type-narrowing predicates
    - FallibleError, InvalidUnwrap: Library exceptions
"""

from __future__ import annotations

import logging

from fallible.errors import FallibleError, InvalidUnwrap
from fallible.result import Err, Ok, Result, is_err, is_ok

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("fallible")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("fallible").addHandler(logging.NullHandler())

__all__ = [
    "Err",
    "FallibleError",
    "InvalidUnwrap",
    "Ok",
    "Result",
    "__version__",
    "is_err",
    "is_ok",
]
