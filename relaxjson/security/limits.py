"""
Security limits and validation for relaxjson.
This module provides security validation to prevent resource exhaustion attacks.
"""

from typing import Any

from ..utils.config import ParseLimits
from .exceptions import SecurityError


class LimitValidator:
    """Validates parsing limits to prevent resource exhaustion attacks."""

    def __init__(self, limits: ParseLimits):
        self.limits = limits

    def validate_input_size(self, text: str) -> None:
        """Validate that input text size is within limits."""
        if len(text) > self.limits.max_input_size:
            raise SecurityError(
                f"Input size {len(text)} exceeds limit {self.limits.max_input_size}"
            )

    def validate_nesting_depth(self, value: Any) -> None:
        """Validate that a decoded value does not nest deeper than allowed."""
        stack = [(value, 1)]
        while stack:
            current, depth = stack.pop()
            if isinstance(current, dict):
                children = current.values()
            elif isinstance(current, list):
                children = current
            else:
                continue

            if depth > self.limits.max_nesting_depth:
                raise SecurityError(
                    f"Nesting depth {depth} exceeds limit "
                    f"{self.limits.max_nesting_depth}"
                )
            stack.extend((child, depth + 1) for child in children)
