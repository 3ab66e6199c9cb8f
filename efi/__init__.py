"""
EFI Secure Boot Signature List Tools

Encodes X.509 certificates into EFI_SIGNATURE_LIST structures consumed by
UEFI secure boot key databases (PK, KEK, db, dbx).

Module Structure:
- core/: GUID type, constants, primitives and errors
- signatures/: Signature entry variants, list encoder and decoder

Standards Reference:
- UEFI Specification 2.10 - Section 32.4.1 "Signature Database"
- UEFI Specification 2.10 - Appendix A "GUID and Time Formats"

Author: EFI Tools Project
Date: October 2026
"""

__version__ = "0.1.0"

from .core import (
    EFIError,
    GuidParseError,
    GuidParseErrorKind,
    DifferentlySizedSignaturesError,
    SignatureListDecodeError,
    Guid,
)
from .signatures import (
    BaseSignature,
    X509Signature,
    certificate_to_der,
    SignatureData,
    SignatureList,
    DecodedSignatureList,
    decode_signature_list,
    decode_signature_lists,
)

__all__ = [
    "__version__",
    # Core
    "Guid",
    "GuidParseErrorKind",
    # Errors
    "EFIError",
    "GuidParseError",
    "DifferentlySizedSignaturesError",
    "SignatureListDecodeError",
    # Signatures
    "BaseSignature",
    "X509Signature",
    "certificate_to_der",
    "SignatureData",
    "SignatureList",
    "DecodedSignatureList",
    "decode_signature_list",
    "decode_signature_lists",
]
