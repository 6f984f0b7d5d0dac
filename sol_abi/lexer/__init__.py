"""
Lexer module for the ABI signature codec.

This module provides tokenization of signature text.
"""

from .tokens import TokenType, Token, SINGLE_CHAR_OPS, IDENTIFIER_CHARS
from .lexer import Lexer

__all__ = [
    'TokenType',
    'Token',
    'SINGLE_CHAR_OPS',
    'IDENTIFIER_CHARS',
    'Lexer',
]
