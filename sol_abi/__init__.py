"""
Solidity ABI signature codec

This package parses human-readable ABI signatures such as
``transfer(address,uint256)`` into a structured type representation,
encodes that representation back to canonical text, and classifies
types as dynamic or static for a downstream byte-level encoder.

Module Structure:
- lexer/: Tokenization (TokenType, Token, Lexer)
- parser/: Recursive descent parsing (Parser, parse_selector, parse_type, parse_type_list)
- type_system/: The type algebra and FunctionSelector
- codegen/: Canonical encoding, dynamic classification, diagnostics
- specification.py: Contract ABI (JSON) adapter
- cli.py: Command line interface

Usage:
    from sol_abi import parse_selector, encode

    selector = parse_selector('growl(uint,address,string[])')
    encode(selector)  # 'growl(uint256,address,string[])'
"""

from .errors import ParseError, InternalInvariantViolation
from .type_system import (
    AbiType,
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
from .parser import parse_selector, parse_type, parse_type_list
from .codegen import encode, encode_type, is_dynamic, SpecificationDiagnostics
from .specification import (
    parse_specification_item,
    parse_specification,
    load_specification,
)

__all__ = [
    'ParseError',
    'InternalInvariantViolation',
    'AbiType',
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
    'parse_selector',
    'parse_type',
    'parse_type_list',
    'encode',
    'encode_type',
    'is_dynamic',
    'SpecificationDiagnostics',
    'parse_specification_item',
    'parse_specification',
    'load_specification',
]
