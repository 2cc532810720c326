"""
Base Service Class

Shared plumbing for the account services: a named logger and timing of
every store call, aggregated per operation.
"""

import logging
import time
from collections import defaultdict
from typing import Optional, Dict, Any


class OperationStats:
    """Call count, failures and cumulative duration of one operation."""

    __slots__ = ("calls", "errors", "time_ms")

    def __init__(self):
        self.calls = 0
        self.errors = 0
        self.time_ms = 0

    def as_dict(self) -> Dict[str, Any]:
        return {
            "calls": self.calls,
            "errors": self.errors,
            "avg_time_ms": self.time_ms / self.calls if self.calls else 0,
        }


class BaseService:
    """
    Base class for the account services.

    Subclasses wrap each repository call in ``self._timed_operation(name)``;
    calls slower than SLOW_OPERATION_MS are logged as warnings.
    """

    SLOW_OPERATION_MS = 2000

    def __init__(self, service_name: Optional[str] = None):
        self.service_name = service_name or self.__class__.__name__
        self.logger = logging.getLogger(self.service_name)
        self._operations: Dict[str, OperationStats] = defaultdict(OperationStats)

    def _record_call(self, operation: str, duration_ms: int, success: bool = True):
        stats = self._operations[operation]
        stats.calls += 1
        stats.time_ms += duration_ms
        if not success:
            stats.errors += 1

        if duration_ms > self.SLOW_OPERATION_MS:
            self.logger.warning(f"Slow operation detected: {operation} took {duration_ms}ms")

    def get_metrics(self) -> Dict[str, Any]:
        """
        Totals across all operations plus a breakdown per operation.

        Example:
            {"total_calls": 3, "total_errors": 1,
             "operations": {"create": {"calls": 2, "errors": 0, "avg_time_ms": 4.5}, ...}}
        """
        return {
            "total_calls": sum(s.calls for s in self._operations.values()),
            "total_errors": sum(s.errors for s in self._operations.values()),
            "operations": {name: s.as_dict() for name, s in self._operations.items()},
        }

    def _timed_operation(self, operation_name: str) -> "TimedOperation":
        return TimedOperation(self, operation_name)


class TimedOperation:
    """Times a ``with`` block and reports it to the owning service; never suppresses."""

    def __init__(self, service: BaseService, operation_name: str):
        self.service = service
        self.operation_name = operation_name
        self._started = 0.0

    def __enter__(self):
        self._started = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        elapsed_ms = int((time.perf_counter() - self._started) * 1000)
        self.service._record_call(self.operation_name, elapsed_ms, success=exc_type is None)
        return False
