"""
EFI Exceptions

All errors raised by the encoder derive from ValueError, so callers that
already guard against bad input with ``except ValueError`` keep working.
"""

from .types import GuidParseErrorKind


class EFIError(ValueError):
    """Base class for EFI encoding/decoding errors"""


class GuidParseError(EFIError):
    """
    Malformed textual GUID.

    Attributes:
        kind: GuidParseErrorKind reason tag
        index: Offending character index (the input length for INCORRECT_LENGTH)
    """

    def __init__(self, kind: GuidParseErrorKind, index: int):
        self.kind = kind
        self.index = index
        super().__init__(f"invalid GUID: {kind.value} at index {index}")


class DifferentlySizedSignaturesError(EFIError):
    """Entries of one signature list do not share the same serialized size"""

    def __init__(self, expected: int, actual: int, position: int):
        self.expected = expected
        self.actual = actual
        self.position = position
        super().__init__(
            f"differently sized signatures: entry {position} is {actual} bytes, "
            f"expected {expected}"
        )


class SignatureListDecodeError(EFIError):
    """Buffer does not hold a well-formed EFI_SIGNATURE_LIST"""

    def __init__(self, message: str, offset: int):
        self.offset = offset
        super().__init__(f"{message} (offset {offset})")
