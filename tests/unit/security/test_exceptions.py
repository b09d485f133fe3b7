"""
Test cases for exceptions and error reporting.

Tests focus on error context creation, message formatting, and error reporting accuracy.
"""

import unittest

from relaxjson.core.transpiler import Position
from relaxjson.security.exceptions import (
    BindingError,
    ConfigurationError,
    ErrorReporter,
    ParseError,
    RelaxJSONError,
    SecurityError,
)


class TestRelaxJSONError(unittest.TestCase):
    """Test base RelaxJSONError exception class."""

    def test_basic_error_creation(self):
        """Test basic error creation with message only."""
        error = RelaxJSONError("Test error message")

        self.assertEqual(error.message, "Test error message")
        self.assertIsNone(error.position)
        self.assertIsNone(error.context)
        self.assertEqual(error.suggestions, [])
        self.assertEqual(str(error), "Test error message")

    def test_error_with_position(self):
        """Test error creation with position information."""
        error = RelaxJSONError("Parse error", position=Position(line=3, column=15))
        self.assertIn("at line 3, column 15", str(error))

    def test_error_with_suggestions(self):
        """Test error creation with suggestions."""
        suggestions = ["Check for missing quotes", "Verify JSON syntax"]
        error = RelaxJSONError("Syntax error", suggestions=suggestions)

        self.assertEqual(error.suggestions, suggestions)
        self.assertIn("Check for missing quotes", str(error))
        self.assertIn("Verify JSON syntax", str(error))

    def test_subclass_hierarchy(self):
        """Test that specific errors share the base and builtin parents."""
        for error_cls in (ParseError, SecurityError, BindingError, ConfigurationError):
            with self.subTest(error_cls=error_cls):
                self.assertTrue(issubclass(error_cls, RelaxJSONError))
        self.assertTrue(issubclass(ParseError, ValueError))
        self.assertTrue(issubclass(ConfigurationError, ValueError))
        self.assertTrue(issubclass(BindingError, TypeError))


class TestErrorReporter(unittest.TestCase):
    """Test ErrorReporter functionality."""

    def setUp(self):
        """Set up test ErrorReporter."""
        self.test_text = '{"key": "value", "number": 123}'
        self.reporter = ErrorReporter(self.test_text)

    def test_create_parse_error(self):
        """Test creating ParseError through ErrorReporter."""
        position = Position(line=1, column=10)
        error = self.reporter.create_parse_error("Test parse error", position, ["Check syntax"])

        self.assertIsInstance(error, ParseError)
        self.assertEqual(error.message, "Test parse error")
        self.assertEqual(error.position, position)
        self.assertEqual(error.suggestions, ["Check syntax"])
        self.assertEqual(error.context.text, self.test_text)
        self.assertEqual(error.context.error_char, "v")
        self.assertEqual(error.context.column_indicator, " " * 9 + "^")

    def test_multiline_text_handling(self):
        """Test error reporting with multiline text."""
        reporter = ErrorReporter('{\n  "key": "value",\n  "error": here\n}')
        error = reporter.create_parse_error("Unquoted value", Position(line=3, column=12))

        self.assertEqual(error.context.line_text, '  "error": here')
        self.assertIn("at line 3, column 12", str(error))
        self.assertIn("Context:", str(error))

    def test_edge_position_handling(self):
        """Test positions beyond the text are clamped."""
        error = self.reporter.create_parse_error("Beyond text", Position(line=9, column=1000))
        self.assertEqual(error.context.error_char, "")
        self.assertEqual(error.context.line_text, self.test_text)


if __name__ == "__main__":
    unittest.main()
