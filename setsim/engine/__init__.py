"""Task coordination and error types."""

from .errors import (
    SimilarityError,
    PreconditionError,
    TaskExecutionError,
)
from .coordinator import ExecutionCoordinator, TaskHandle

__all__ = [
    'SimilarityError',
    'PreconditionError',
    'TaskExecutionError',
    'ExecutionCoordinator',
    'TaskHandle',
]
