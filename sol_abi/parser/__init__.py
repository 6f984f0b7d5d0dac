"""
Parser module for the ABI signature codec.

This module provides the recursive descent parser and the
text-to-type entry points.
"""

from .parser import (
    Parser,
    parse_selector,
    parse_type,
    parse_type_list,
)

__all__ = [
    'Parser',
    'parse_selector',
    'parse_type',
    'parse_type_list',
]
