"""
EFI Core Types and Constants

Defines the fundamental constants and enumerations used by the EFI
signature list encoder.

Standards Reference:
- UEFI Specification 2.10 - Appendix A "GUID and Time Formats"
- UEFI Specification 2.10 - Section 32.4.1 "Signature Database"

Author: EFI Tools Project
Date: October 2026
"""

from enum import Enum


# ============================================================================
# GUID LAYOUT (UEFI Appendix A)
# ============================================================================

GUID_SIZE = 16  # bytes on the wire
GUID_TEXT_LENGTH = 36  # xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx
GUID_DASH_POSITIONS = (8, 13, 18, 23)
GUID_NODE_SIZE = 6

# Well-known signature type: EFI_CERT_X509_GUID
EFI_CERT_X509_GUID_TEXT = "a5c059a1-94e4-4aa7-87b5-ab155c2bf072"


# ============================================================================
# EFI_SIGNATURE_LIST LAYOUT (UEFI Section 32.4.1)
# ============================================================================

# SignatureType(16) + SignatureListSize(4) + SignatureHeaderSize(4) + SignatureSize(4)
SIGNATURE_LIST_HEADER_SIZE = GUID_SIZE + 4 + 4 + 4

MAX_U32 = 0xFFFFFFFF


# ============================================================================
# ENUMERATIONS
# ============================================================================


class GuidParseErrorKind(Enum):
    """
    Reason tags for a rejected textual GUID.

    Characters are scanned left to right: a missing hyphen or a non-hex
    digit is reported at its index. The length is checked only after a
    clean scan, so a short string without hyphens fails with MISSING_DASH.
    """

    INCORRECT_LENGTH = "IncorrectLength"
    MISSING_DASH = "MissingDash"
    INVALID_HEX = "InvalidHex"
