"""
relaxjson Core Engine.

This module provides the transpiler and the decode/encode facade built on it.
"""

from .engine import Json5
from .transpiler import Diagnostic, DiagnosticKind, Position, Transpiler, transpile

__all__ = [
    'Json5',
    'Transpiler', 'Diagnostic', 'DiagnosticKind', 'Position', 'transpile',
]
