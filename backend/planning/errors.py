"""
Error codes and exceptions for the planning engines.

Every API response carries one of these codes so clients can tell
validation problems apart from graph problems without parsing messages.
"""

from enum import Enum


class ErrorCode(Enum):
    """Error codes for API responses and dependency diagnostics."""
    SUCCESS = "SUCCESS"
    ERR_MISSING_FIELD = "ERR_MISSING_FIELD"
    ERR_EMPTY_TASKS = "ERR_EMPTY_TASKS"
    ERR_INVALID_QUADRANT = "ERR_INVALID_QUADRANT"
    ERR_DUPLICATE_ID = "ERR_DUPLICATE_ID"
    ERR_SELF_DEPENDENCY = "ERR_SELF_DEPENDENCY"
    ERR_UNKNOWN_DEPENDENCY = "ERR_UNKNOWN_DEPENDENCY"
    ERR_CIRCULAR_DEPENDENCY = "ERR_CIRCULAR_DEPENDENCY"
    ERR_UNRESOLVED_DEPENDENCY = "ERR_UNRESOLVED_DEPENDENCY"


class PlanningError(ValueError):
    """Base class for errors raised by the planning engines."""
    code: ErrorCode


class InvalidQuadrantError(PlanningError):
    """Raised when an urgency/importance pair is not binary."""
    code = ErrorCode.ERR_INVALID_QUADRANT

    def __init__(self, urgency, importance):
        self.urgency = urgency
        self.importance = importance
        super().__init__(
            f"Invalid quadrant ({urgency!r}, {importance!r}): "
            f"urgency and importance must each be 0 or 1"
        )
