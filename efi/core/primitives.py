"""
EFI Encoding Primitives

Little-endian integer helpers shared by the signature list encoder and
decoder. UEFI data structures are little-endian throughout.
"""

import struct

from .types import MAX_U32


def serialize_u32(value: int) -> bytes:
    """
    Encode unsigned 32-bit integer, little-endian.

    Raises:
        ValueError: If value does not fit in 32 bits
    """
    if value < 0 or value > MAX_U32:
        raise ValueError(f"Value {value} out of range for UINT32")
    return struct.pack("<I", value)


def deserialize_u32(data: bytes, offset: int = 0) -> int:
    """Decode unsigned 32-bit little-endian integer at offset."""
    return struct.unpack_from("<I", data, offset)[0]

