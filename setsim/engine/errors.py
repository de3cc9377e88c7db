"""
Error types for similarity computations.

Three kinds of failure exist: invalid parameters rejected before any work is
scheduled, failures inside scheduled tasks, and the base class that both share.
A degenerate result (0/0) is not an error; it is reported as NaN.
"""

from typing import Optional, Any, Dict


class SimilarityError(Exception):
    """
    Base exception for all similarity errors.

    Carries a human readable message plus a details dict for structured
    reporting.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize similarity error.

        Args:
            message: Error message
            details: Optional detailed error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class PreconditionError(SimilarityError, ValueError):
    """
    Raised when a parameter is out of range.

    Always raised synchronously, before any task is submitted to a pool.
    """

    def __init__(self, message: str,
                 parameter: Optional[str] = None,
                 value: Any = None,
                 details: Optional[Dict[str, Any]] = None):
        """
        Initialize precondition error.

        Args:
            message: Error message
            parameter: Name of the offending parameter
            value: The rejected value
            details: Additional error context
        """
        super().__init__(message, details)
        self.parameter = parameter
        self.value = value

        self.details.update({
            'parameter': parameter,
            'value': value
        })


class TaskExecutionError(SimilarityError):
    """
    Raised when a task submitted to a worker pool fails.

    The original exception is chained as ``__cause__``. One failed task fails
    the whole comparison; nothing is retried.
    """

    def __init__(self, message: str,
                 stage: str = 'general',
                 details: Optional[Dict[str, Any]] = None):
        """
        Initialize task execution error.

        Args:
            message: Error message
            stage: Pipeline stage that failed ('shingles', 'signatures', 'bands', ...)
            details: Additional error context
        """
        super().__init__(message, details)
        self.stage = stage

        self.details.update({
            'stage': stage
        })


def require(condition: bool, message: str, parameter: Optional[str] = None, value: Any = None) -> None:
    """Raise PreconditionError unless condition holds."""
    if not condition:
        raise PreconditionError(message, parameter=parameter, value=value)


def is_precondition_error(error: Exception) -> bool:
    """Check if error is a parameter validation failure."""
    return isinstance(error, PreconditionError)


def is_task_failure(error: Exception) -> bool:
    """Check if error came from a worker task."""
    return isinstance(error, TaskExecutionError)
