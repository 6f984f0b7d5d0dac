"""
Base-type keyword mappings for ABI signatures.

This module maps the keyword of a base type (``uint256``, ``bytes``,
``fixed128x18``, ...) to its value in the type algebra, including the
defaults applied to bare keywords.
"""

import re
from typing import Optional

from .algebra import (
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
)


# =============================================================================
# KEYWORD CONSTANTS
# =============================================================================

DEFAULT_INTEGER_BITS = 256
DEFAULT_FIXED_BITS = 128
DEFAULT_FIXED_PRECISION = 18

# Keywords that take no size suffix
ELEMENTARY_KEYWORDS = {
    'bool': Bool,
    'address': Address,
    'string': String,
    'function': Function,
}

_INTEGER_RE = re.compile(r'^(u?int)([0-9]*)$')
_BYTES_RE = re.compile(r'^bytes([0-9]*)$')
_FIXED_RE = re.compile(r'^(u?fixed)(?:([0-9]+)x([0-9]+))?$')


def keyword_to_type(keyword: str) -> Optional[AbiType]:
    """
    Resolve a base-type keyword to a type value.

    Args:
        keyword: A single identifier such as ``uint``, ``bytes32`` or ``fixed128x18``

    Returns:
        The corresponding type, or None if the keyword is not a base type.

    Raises:
        ValueError: if a digit group is too long for int() to convert.
    """
    if keyword in ELEMENTARY_KEYWORDS:
        return ELEMENTARY_KEYWORDS[keyword]()

    match = _INTEGER_RE.match(keyword)
    if match:
        kind, digits = match.groups()
        bits = int(digits) if digits else DEFAULT_INTEGER_BITS
        return UInt(bits) if kind == 'uint' else Int(bits)

    match = _BYTES_RE.match(keyword)
    if match:
        digits = match.group(1)
        return FixedBytes(int(digits)) if digits else Bytes()

    match = _FIXED_RE.match(keyword)
    if match:
        kind, bits, precision = match.groups()
        if bits is None:
            bits, precision = DEFAULT_FIXED_BITS, DEFAULT_FIXED_PRECISION
        cls = UFixed if kind == 'ufixed' else Fixed
        return cls(int(bits), int(precision))

    return None
