"""
errors/ - Error Taxonomy

Structured error codes and the exceptions raised on internal faults.
"""

from .taxonomy import (
    ErrorSeverity,
    ErrorCategory,
    ErrorCode,
    ERROR_CATEGORIES,
    ShipStateError,
    InvalidVisitorStateError,
)

__all__ = [
    "ErrorSeverity",
    "ErrorCategory",
    "ErrorCode",
    "ERROR_CATEGORIES",
    "ShipStateError",
    "InvalidVisitorStateError",
]
