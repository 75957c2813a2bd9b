"""Utility functions for the task list client."""

from tasklist.utils.errors import TaskValidationError, validate_draft
from tasklist.utils.telemetry import SpanKind, trace_class, trace_function


__all__ = [
    'SpanKind',
    'TaskValidationError',
    'trace_class',
    'trace_function',
    'validate_draft',
]
