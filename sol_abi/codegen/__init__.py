"""
Code generation module for the ABI signature codec.

This module turns parsed types back into canonical text and classifies
them for the downstream byte-level encoder.
"""

from .encoder import encode, encode_type
from .dynamic import is_dynamic
from .diagnostics import Diagnostic, DiagnosticSeverity, SpecificationDiagnostics

__all__ = [
    'encode',
    'encode_type',
    'is_dynamic',
    'Diagnostic',
    'DiagnosticSeverity',
    'SpecificationDiagnostics',
]
