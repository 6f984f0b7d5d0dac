"""
Type system module for the ABI signature codec.

This module provides the type algebra, the function selector value and
the base-type keyword mappings.
"""

from .algebra import (
    AbiType,
    ABI_TYPE_CLASSES,
    UInt,
    Int,
    Bool,
    Address,
    Bytes,
    FixedBytes,
    String,
    Function,
    Fixed,
    UFixed,
    Array,
    FixedArray,
    Tuple,
    FunctionSelector,
)
from .mappings import (
    keyword_to_type,
    ELEMENTARY_KEYWORDS,
    DEFAULT_INTEGER_BITS,
    DEFAULT_FIXED_BITS,
    DEFAULT_FIXED_PRECISION,
)

__all__ = [
    'AbiType',
    'ABI_TYPE_CLASSES',
    'UInt',
    'Int',
    'Bool',
    'Address',
    'Bytes',
    'FixedBytes',
    'String',
    'Function',
    'Fixed',
    'UFixed',
    'Array',
    'FixedArray',
    'Tuple',
    'FunctionSelector',
    'keyword_to_type',
    'ELEMENTARY_KEYWORDS',
    'DEFAULT_INTEGER_BITS',
    'DEFAULT_FIXED_BITS',
    'DEFAULT_FIXED_PRECISION',
]
