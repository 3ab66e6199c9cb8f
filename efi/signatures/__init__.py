"""
EFI Signature Entries and Lists

- base.py: BaseSignature abstraction for signature variants
- x509.py: EFI_CERT_X509_GUID variant
- signature_list.py: EFI_SIGNATURE_LIST encoder
- decoder.py: EFI_SIGNATURE_LIST decoder

Standards Reference:
- UEFI Specification 2.10 - Section 32.4.1 "Signature Database"

Author: EFI Tools Project
Date: October 2026
"""

from .base import BaseSignature
from .x509 import X509Signature, certificate_to_der
from .signature_list import SignatureData, SignatureList
from .decoder import (
    KNOWN_SIGNATURE_TYPES,
    DecodedSignatureList,
    decode_signature_list,
    decode_signature_lists,
)

__all__ = [
    "BaseSignature",
    "X509Signature",
    "certificate_to_der",
    "SignatureData",
    "SignatureList",
    "KNOWN_SIGNATURE_TYPES",
    "DecodedSignatureList",
    "decode_signature_list",
    "decode_signature_lists",
]
