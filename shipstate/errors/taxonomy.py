"""
errors/taxonomy.py - Error classification system

Anomalies met while building a report fall in two classes:
- Absorbed locally with a safe default (unknown resource, bad setting)
- Internal-consistency faults that abort the build (invalid visitor state)

Absorbed anomalies are only logged; their codes keep the log searchable.
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Dict, Optional


class ErrorSeverity(Enum):
    """Error severity levels."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Error categories."""
    # Lookup anomalies (1xxx)
    LOOKUP = "lookup"

    # Configuration anomalies (2xxx)
    CONFIGURATION = "configuration"

    # Internal state faults (3xxx)
    STATE = "state"

    # Expected input outcomes (4xxx)
    INPUT = "input"

    # Uncategorized (9xxx)
    GENERAL = "general"


class ErrorCode(Enum):
    """Specific error codes."""

    # Lookup (1xxx)
    UNKNOWN_RESOURCE = 1001

    # Configuration (2xxx)
    MALFORMED_SETTING = 2001
    SETTINGS_UNREADABLE = 2002

    # State (3xxx)
    INVALID_VISITOR_STATE = 3001

    # Input (4xxx)
    VESSEL_NOT_OWNED = 4001

    # General (9xxx)
    UNSPECIFIED = 9000


ERROR_CATEGORIES: Dict[ErrorCode, ErrorCategory] = {
    ErrorCode.UNKNOWN_RESOURCE: ErrorCategory.LOOKUP,
    ErrorCode.MALFORMED_SETTING: ErrorCategory.CONFIGURATION,
    ErrorCode.SETTINGS_UNREADABLE: ErrorCategory.CONFIGURATION,
    ErrorCode.INVALID_VISITOR_STATE: ErrorCategory.STATE,
    ErrorCode.VESSEL_NOT_OWNED: ErrorCategory.INPUT,
    ErrorCode.UNSPECIFIED: ErrorCategory.GENERAL,
}


class ShipStateError(Exception):
    """Base exception carrying a taxonomy code."""

    code: ErrorCode = ErrorCode.UNSPECIFIED
    severity: ErrorSeverity = ErrorSeverity.ERROR
    recoverable: bool = True

    def __init__(self, message: str, source: str = "", detail: Any = None):
        super().__init__(message)
        self.message = message
        self.source = source
        self.detail = detail

    @property
    def category(self) -> ErrorCategory:
        return ERROR_CATEGORIES[self.code]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code.value,
            "category": self.category.value,
            "severity": self.severity.value,
            "message": self.message,
            "source": self.source,
            "recoverable": self.recoverable,
        }

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.message}"


class InvalidVisitorStateError(ShipStateError):
    """
    A part visitor reached a status outside its declared set.

    Indicates a logic defect, never bad input. Not recoverable.
    """

    code = ErrorCode.INVALID_VISITOR_STATE
    severity = ErrorSeverity.CRITICAL
    recoverable = False

    def __init__(self, visitor: str, status: Optional[Any]):
        super().__init__(
            f"unknown status {status!r} in {visitor}",
            source=visitor,
            detail=status,
        )
        self.status = status
