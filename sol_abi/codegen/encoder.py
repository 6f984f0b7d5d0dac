"""
Canonical signature encoding.

Renders a FunctionSelector or a single type back to its canonical text,
e.g. ``bark(uint256,bool,string[],string[3],(uint256,bool))``. Widths are
always explicit, so ``uint`` round-trips as ``uint256``.
"""

from ..errors import InternalInvariantViolation
from ..type_system import (
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


def encode(selector: FunctionSelector) -> str:
    """Encode a selector as ``name(type,type,...)``; a missing name encodes as ''."""
    name = selector.name or ''
    types = ','.join(encode_type(t) for t in selector.inputs)
    return f'{name}({types})'


def encode_type(abi_type: AbiType) -> str:
    """
    Encode a single type in canonical form.

    Raises:
        InternalInvariantViolation: if ``abi_type`` is not a well-formed
            member of the type algebra.
    """
    # Peel array wrappers in a loop; the outermost wrapper's suffix comes last
    suffixes = []
    while isinstance(abi_type, (Array, FixedArray)):
        if isinstance(abi_type, Array):
            suffixes.append('[]')
        else:
            suffixes.append(f'[{_size(abi_type, abi_type.length)}]')
        abi_type = abi_type.element
    return _encode_base(abi_type) + ''.join(reversed(suffixes))


def _encode_base(abi_type: AbiType) -> str:
    if isinstance(abi_type, UInt):
        return f'uint{_size(abi_type, abi_type.bits)}'
    if isinstance(abi_type, Int):
        return f'int{_size(abi_type, abi_type.bits)}'
    if isinstance(abi_type, Bool):
        return 'bool'
    if isinstance(abi_type, Address):
        return 'address'
    if isinstance(abi_type, Bytes):
        return 'bytes'
    if isinstance(abi_type, FixedBytes):
        return f'bytes{_size(abi_type, abi_type.size)}'
    if isinstance(abi_type, String):
        return 'string'
    if isinstance(abi_type, Function):
        return 'function'
    if isinstance(abi_type, Fixed):
        return f'fixed{_size(abi_type, abi_type.bits)}x{_size(abi_type, abi_type.precision)}'
    if isinstance(abi_type, UFixed):
        return f'ufixed{_size(abi_type, abi_type.bits)}x{_size(abi_type, abi_type.precision)}'
    if isinstance(abi_type, Tuple):
        return '(' + ','.join(encode_type(t) for t in abi_type.elements) + ')'
    raise InternalInvariantViolation(f'Unsupported type: {type(abi_type).__name__}')


def _size(abi_type: AbiType, value: object) -> int:
    """Check a numeric field holds a non-negative int before rendering it."""
    # bool is an int subclass but never a legal size
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InternalInvariantViolation(
            f'Unsupported {type(abi_type).__name__} size: {value!r}'
        )
    return value
