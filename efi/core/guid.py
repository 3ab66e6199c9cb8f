"""
EFI Globally Unique Identifier

Implements the EFI_GUID value type used both as signature type tag and as
signature owner inside EFI_SIGNATURE_LIST structures.

Wire layout (UEFI Appendix A, 16 bytes):
    TimeLow                  UINT32  little-endian
    TimeMid                  UINT16  little-endian
    TimeHighAndVersion       UINT16  little-endian
    ClockSeqHighAndReserved  UINT8
    ClockSeqLow              UINT8
    Node                     UINT8[6] verbatim

The first three fields are little-endian while the textual form prints
them big-endian. Firmware reads exactly this layout, so do not "fix" it.

Standards Reference:
- UEFI Specification 2.10 - Appendix A "GUID and Time Formats"
- RFC 4122 - A Universally Unique IDentifier (UUID) URN Namespace

Author: EFI Tools Project
Date: October 2026
"""

import string
import struct
from dataclasses import dataclass

from .exceptions import GuidParseError
from .types import (
    GUID_DASH_POSITIONS,
    GUID_NODE_SIZE,
    GUID_SIZE,
    GUID_TEXT_LENGTH,
    GuidParseErrorKind,
)

# TimeLow | TimeMid | TimeHighAndVersion | ClockSeqHi | ClockSeqLow | Node
_GUID_STRUCT = struct.Struct("<IHHBB6s")

_HEX_DIGITS = frozenset(string.hexdigits)

_FIELD_WIDTHS = (
    ("time_low", 32),
    ("time_mid", 16),
    ("time_high_and_version", 16),
    ("clock_seq_high_and_reserved", 8),
    ("clock_seq_low", 8),
)


@dataclass(frozen=True)
class Guid:
    """
    EFI GUID value type.

    Immutable, hashable, compared field by field.

    Attributes:
        time_low: 32-bit unsigned
        time_mid: 16-bit unsigned
        time_high_and_version: 16-bit unsigned
        clock_seq_high_and_reserved: 8-bit unsigned
        clock_seq_low: 8-bit unsigned
        node: 6 bytes
    """

    time_low: int
    time_mid: int
    time_high_and_version: int
    clock_seq_high_and_reserved: int
    clock_seq_low: int
    node: bytes

    def __post_init__(self):
        for name, bits in _FIELD_WIDTHS:
            value = getattr(self, name)
            if not isinstance(value, int) or value < 0 or value >> bits:
                raise ValueError(f"GUID {name} must be a UINT{bits}, got {value!r}")
        if len(self.node) != GUID_NODE_SIZE:
            raise ValueError(f"GUID node must be {GUID_NODE_SIZE} bytes, got {len(self.node)}")
        # bytearray/memoryview -> bytes, keeps the dataclass hashable
        object.__setattr__(self, "node", bytes(self.node))

    # ========================================================================
    # CONSTRUCTORS
    # ========================================================================

    @classmethod
    def from_parts(
        cls,
        time_low: int,
        time_mid: int,
        time_high_and_version: int,
        clock_seq_high_and_reserved: int,
        clock_seq_low: int,
        node: bytes,
    ) -> "Guid":
        """Build a GUID from its six RFC 4122 fields."""
        return cls(
            time_low,
            time_mid,
            time_high_and_version,
            clock_seq_high_and_reserved,
            clock_seq_low,
            node,
        )

    @classmethod
    def from_fields(cls, d1: int, d2: int, d3: int, d4: bytes) -> "Guid":
        """
        Build a GUID from the UEFI four-field form (Data1..Data4).

        Data4 holds the two clock sequence bytes followed by the node.

        Args:
            d1: Data1 (UINT32)
            d2: Data2 (UINT16)
            d3: Data3 (UINT16)
            d4: Data4 (8 bytes)
        """
        if len(d4) != 8:
            raise ValueError(f"Data4 must be 8 bytes, got {len(d4)}")
        return cls(d1, d2, d3, d4[0], d4[1], bytes(d4[2:]))

    @classmethod
    def nil(cls) -> "Guid":
        """All-zero GUID."""
        return cls(0, 0, 0, 0, 0, bytes(GUID_NODE_SIZE))

    @classmethod
    def parse(cls, text: str) -> "Guid":
        """
        Parse canonical textual form ``xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx``.

        Characters are checked left to right: a position reserved for a
        hyphen must hold one, every other position must be a hex digit.
        The length is checked once the scan finds nothing wrong.

        Args:
            text: GUID string (hex digits in either case)

        Returns:
            Guid: Parsed GUID

        Raises:
            GuidParseError: With kind INCORRECT_LENGTH, MISSING_DASH or
                INVALID_HEX and the offending index
        """
        for index, char in enumerate(text[:GUID_TEXT_LENGTH]):
            if index in GUID_DASH_POSITIONS:
                if char != "-":
                    raise GuidParseError(GuidParseErrorKind.MISSING_DASH, index)
            elif char not in _HEX_DIGITS:
                raise GuidParseError(GuidParseErrorKind.INVALID_HEX, index)

        if len(text) != GUID_TEXT_LENGTH:
            raise GuidParseError(GuidParseErrorKind.INCORRECT_LENGTH, len(text))

        clock_seq = bytes.fromhex(text[19:23])
        return cls(
            int(text[0:8], 16),
            int(text[9:13], 16),
            int(text[14:18], 16),
            clock_seq[0],
            clock_seq[1],
            bytes.fromhex(text[24:36]),
        )

    @classmethod
    def deserialize(cls, data: bytes) -> "Guid":
        """
        Decode a GUID from its 16-byte wire form.

        Raises:
            ValueError: If data is not exactly 16 bytes
        """
        if len(data) != GUID_SIZE:
            raise ValueError(f"GUID must be {GUID_SIZE} bytes, got {len(data)}")
        return cls(*_GUID_STRUCT.unpack(bytes(data)))

    # ========================================================================
    # ENCODING
    # ========================================================================

    def serialize(self) -> bytes:
        """Encode to the 16-byte mixed-endian wire form."""
        return _GUID_STRUCT.pack(
            self.time_low,
            self.time_mid,
            self.time_high_and_version,
            self.clock_seq_high_and_reserved,
            self.clock_seq_low,
            self.node,
        )

    @staticmethod
    def serialized_size() -> int:
        return GUID_SIZE

    def is_nil(self) -> bool:
        return self == Guid.nil()

    def __str__(self) -> str:
        return (
            f"{self.time_low:08x}-{self.time_mid:04x}-{self.time_high_and_version:04x}-"
            f"{self.clock_seq_high_and_reserved:02x}{self.clock_seq_low:02x}-{self.node.hex()}"
        )
