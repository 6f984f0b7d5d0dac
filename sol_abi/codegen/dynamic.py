"""
Dynamic/static classification of ABI types.

A dynamic type has no fixed encoded length and is laid out through an
offset in the head plus data in the tail by the byte-level encoder.
"""

from ..errors import InternalInvariantViolation
from ..type_system import (
    AbiType,
    ABI_TYPE_CLASSES,
    Bytes,
    String,
    Array,
    FixedArray,
    Tuple,
)


def is_dynamic(abi_type: AbiType) -> bool:
    """
    Return True if the encoding of ``abi_type`` has variable length.

    A zero-length fixed array is static even when its element type is
    dynamic, e.g. ``string[0]``.
    """
    # Suffix chains are peeled in a loop; the parser builds them without depth limit
    while isinstance(abi_type, FixedArray):
        if not abi_type.length > 0:
            return False
        abi_type = abi_type.element

    if isinstance(abi_type, (Bytes, String, Array)):
        return True
    if isinstance(abi_type, Tuple):
        return any(is_dynamic(t) for t in abi_type.elements)
    if isinstance(abi_type, ABI_TYPE_CLASSES):
        return False
    raise InternalInvariantViolation(f'Unsupported type: {type(abi_type).__name__}')
