"""
EFI Core Module

Fundamental building blocks for the EFI signature list encoder:
- types.py: Constants and enumerations
- primitives.py: Little-endian integer encoding
- exceptions.py: Error hierarchy
- guid.py: EFI_GUID value type

Author: EFI Tools Project
Date: October 2026
"""

from .types import (
    GUID_SIZE,
    GUID_TEXT_LENGTH,
    GUID_DASH_POSITIONS,
    EFI_CERT_X509_GUID_TEXT,
    SIGNATURE_LIST_HEADER_SIZE,
    MAX_U32,
    GuidParseErrorKind,
)
from .primitives import (
    serialize_u32,
    deserialize_u32,
)
from .exceptions import (
    EFIError,
    GuidParseError,
    DifferentlySizedSignaturesError,
    SignatureListDecodeError,
)
from .guid import Guid

__all__ = [
    # Constants
    "GUID_SIZE",
    "GUID_TEXT_LENGTH",
    "GUID_DASH_POSITIONS",
    "EFI_CERT_X509_GUID_TEXT",
    "SIGNATURE_LIST_HEADER_SIZE",
    "MAX_U32",
    # Enums
    "GuidParseErrorKind",
    # Primitives
    "serialize_u32",
    "deserialize_u32",
    # Errors
    "EFIError",
    "GuidParseError",
    "DifferentlySizedSignaturesError",
    "SignatureListDecodeError",
    # GUID
    "Guid",
]
