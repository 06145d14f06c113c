"""Shared domain utilities.

Example usage:
    >>> from rustman.domain.shared import Ok, Err, Result, is_ok
"""

from rustman.domain.shared.result import Err, Ok, Result, is_err, is_ok

__all__ = [
    "Ok",
    "Err",
    "Result",
    "is_ok",
    "is_err",
]
