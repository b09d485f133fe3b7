"""
Test cases for security limits and validation.

Tests focus on preventing resource exhaustion and validating input constraints.
"""

import unittest

from relaxjson.security.exceptions import SecurityError
from relaxjson.security.limits import LimitValidator
from relaxjson.utils.config import ParseLimits


class TestLimitValidator(unittest.TestCase):
    """Test LimitValidator functionality for security constraints."""

    def setUp(self):
        """Set up test validator with custom limits."""
        self.validator = LimitValidator(ParseLimits(max_input_size=1000, max_nesting_depth=3))

    def test_input_size_validation_pass(self):
        """Test input size validation within limits."""
        self.validator.validate_input_size("x" * 1000)

    def test_input_size_validation_fail(self):
        """Test input size validation exceeding limits."""
        with self.assertRaises(SecurityError) as cm:
            self.validator.validate_input_size("x" * 1001)
        self.assertIn("Input size 1001 exceeds limit 1000", str(cm.exception))

    def test_nesting_within_limit(self):
        """Test nested values at the depth limit."""
        self.validator.validate_nesting_depth({"a": [{"b": 1}]})
        self.validator.validate_nesting_depth("scalar")

    def test_nesting_exceeds_limit(self):
        """Test nested values beyond the depth limit."""
        with self.assertRaises(SecurityError) as cm:
            self.validator.validate_nesting_depth({"a": [{"b": []}]})
        self.assertIn("Nesting depth 4 exceeds limit 3", str(cm.exception))

    def test_wide_structures_are_not_deep(self):
        """Test that many siblings do not count as depth."""
        self.validator.validate_nesting_depth([[1], [2], [3], [4], [5]])


if __name__ == "__main__":
    unittest.main()
