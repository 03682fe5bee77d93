"""
Error handling policies for bstreelib.

Tree operations never raise for bad input; they report through their
return values. Caller code (comparator, formatter, key copy) cannot be
vetted up front, so when it raises the tree asks its error policy what
to do.
"""

import sys
from abc import ABC, abstractmethod
from typing import Any, Dict, List


class ErrorPolicy(ABC):
    """
    Base class for error handling policies.

    Subclasses implement different strategies for handling errors raised
    by caller-supplied callbacks during tree operations.
    """

    @abstractmethod
    def handle(self, error: Exception, operation: str, key: Any) -> None:
        """
        Handle an error raised while performing ``operation`` on ``key``.

        Args:
            error: The exception that was raised
            operation: Name of the tree operation (e.g., 'insert', 'format')
            key: The key being processed when the error occurred

        Returns:
            None to let the operation report failure through its return
            value, or re-raises the exception to stop.
        """
        pass


class FailFastPolicy(ErrorPolicy):
    """
    Policy that immediately re-raises any callback error.

    Useful while developing a comparator: a broken callback surfaces
    as a traceback rather than a False return.
    """

    def handle(self, error: Exception, operation: str, key: Any) -> None:
        """Re-raise the error immediately."""
        raise error


class CollectErrorsPolicy(ErrorPolicy):
    """
    Policy that collects all errors silently.

    This is the default policy. Operations report INVALID_ARGUMENT (or
    False) and the errors stay available for inspection.
    """

    def __init__(self):
        """Initialize the policy."""
        self.errors: List[Dict[str, Any]] = []

    def handle(self, error: Exception, operation: str, key: Any) -> None:
        """Silently record the error."""
        self._record(error, operation, key)

    def _record(self, error: Exception, operation: str, key: Any) -> Dict[str, Any]:
        error_record = {
            'key': key,
            'operation': operation,
            'error': error,
            'error_type': type(error).__name__,
            'error_message': str(error)
        }
        self.errors.append(error_record)
        return error_record

    def get_statistics(self) -> dict:
        """
        Get statistics about errors encountered.

        Returns:
            Dictionary with error counts and details
        """
        by_operation: Dict[str, int] = {}
        for record in self.errors:
            by_operation[record['operation']] = by_operation.get(record['operation'], 0) + 1

        return {
            'total_errors': len(self.errors),
            'type_errors': sum(1 for e in self.errors if e['error_type'] == 'TypeError'),
            'by_operation': by_operation,
            'errors': self.errors  # Full error details
        }


class ContinueOnErrorsPolicy(CollectErrorsPolicy):
    """
    Policy that logs errors to stderr and continues.

    Same bookkeeping as CollectErrorsPolicy, plus a warning line per
    error when verbose.
    """

    def __init__(self, verbose: bool = True):
        """
        Initialize the policy.

        Args:
            verbose: If True, print warnings to stderr when errors occur
        """
        super().__init__()
        self.verbose = verbose

    def handle(self, error: Exception, operation: str, key: Any) -> None:
        """Record the error and warn about it."""
        self._record(error, operation, key)

        if self.verbose:
            print(f"\nWARNING: Error in {operation} for key {key!r}: {error}", file=sys.stderr)


class ThresholdPolicy(ContinueOnErrorsPolicy):
    """
    Policy that tolerates errors up to a threshold, then fails fast.

    Useful for bulk loads where a few malformed keys are expected but
    many indicate a broken comparator.
    """

    def __init__(self, max_errors: int = 10, verbose: bool = True):
        """
        Initialize threshold policy.

        Args:
            max_errors: Maximum errors to tolerate before failing
            verbose: If True, print warnings for errors
        """
        super().__init__(verbose=verbose)
        self.max_errors = max_errors

    def handle(self, error: Exception, operation: str, key: Any) -> None:
        """Handle error if under threshold, otherwise raise."""
        if len(self.errors) >= self.max_errors:
            raise RuntimeError(f"Error threshold exceeded ({self.max_errors} errors)") from error

        self._record(error, operation, key)

        if self.verbose:
            print(f"\nWARNING [{len(self.errors)}/{self.max_errors}]: Error in {operation} "
                  f"for key {key!r}: {error}", file=sys.stderr)
