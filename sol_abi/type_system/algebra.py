"""
The ABI type algebra.

Every representable ABI type is one of the frozen dataclasses below; the
``AbiType`` union names the closed set. Values carry no behavior beyond
construction and structural equality. Consumers (parser, encoder,
classifier) dispatch with ``isinstance`` and must handle every member of
``ABI_TYPE_CLASSES``.
"""

import typing
from dataclasses import dataclass, field
from typing import Optional, Union


# =============================================================================
# ELEMENTARY TYPES
# =============================================================================

@dataclass(frozen=True)
class UInt:
    """Unsigned integer, ``uint<bits>``."""
    bits: int = 256


@dataclass(frozen=True)
class Int:
    """Signed integer, ``int<bits>``."""
    bits: int = 256


@dataclass(frozen=True)
class Bool:
    pass


@dataclass(frozen=True)
class Address:
    pass


@dataclass(frozen=True)
class Bytes:
    """Dynamic-length byte string, bare ``bytes``."""
    pass


@dataclass(frozen=True)
class FixedBytes:
    """Fixed-length byte string, ``bytes<size>``."""
    size: int


@dataclass(frozen=True)
class String:
    pass


@dataclass(frozen=True)
class Function:
    """24-byte address plus selector, treated as opaque."""
    pass


@dataclass(frozen=True)
class Fixed:
    """Signed fixed-point number, ``fixed<bits>x<precision>``."""
    bits: int = 128
    precision: int = 18


@dataclass(frozen=True)
class UFixed:
    """Unsigned fixed-point number, ``ufixed<bits>x<precision>``."""
    bits: int = 128
    precision: int = 18


# =============================================================================
# COMPOSITE TYPES
# =============================================================================

@dataclass(frozen=True)
class Array:
    """Unbounded homogeneous array, ``T[]``."""
    element: 'AbiType'


@dataclass(frozen=True)
class FixedArray:
    """Fixed-length homogeneous array, ``T[length]``. A length of 0 is legal."""
    element: 'AbiType'
    length: int


@dataclass(frozen=True)
class Tuple:
    """Heterogeneous composite, ``(T1,T2,...)``. May be empty."""
    elements: typing.Tuple['AbiType', ...] = ()

    def __post_init__(self):
        # Lists are accepted on construction; store a tuple so values hash
        object.__setattr__(self, 'elements', tuple(self.elements))


AbiType = Union[
    UInt, Int, Bool, Address, Bytes, FixedBytes, String, Function,
    Fixed, UFixed, Array, FixedArray, Tuple,
]

ABI_TYPE_CLASSES = (
    UInt, Int, Bool, Address, Bytes, FixedBytes, String, Function,
    Fixed, UFixed, Array, FixedArray, Tuple,
)


# =============================================================================
# FUNCTION SELECTOR
# =============================================================================

@dataclass(frozen=True)
class FunctionSelector:
    """
    A function name plus its ordered input types.

    ``name`` is None for bare tuple decoding and for fallback entries.
    ``output`` holds at most one type: when a contract specification
    declares several outputs only the first is kept.
    """
    name: Optional[str] = None
    inputs: typing.Tuple[AbiType, ...] = field(default_factory=tuple)
    output: Optional[AbiType] = None

    def __post_init__(self):
        object.__setattr__(self, 'inputs', tuple(self.inputs))
