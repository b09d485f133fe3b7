"""
relaxjson Security and Validation System.

This module provides security limits and exception handling.
"""

from .exceptions import (
    BindingError,
    ConfigurationError,
    ErrorContext,
    ErrorReporter,
    ParseError,
    RelaxJSONError,
    SecurityError,
)
from .limits import LimitValidator

__all__ = [
    'RelaxJSONError', 'ParseError', 'SecurityError', 'BindingError',
    'ConfigurationError', 'ErrorContext', 'ErrorReporter', 'LimitValidator',
]
