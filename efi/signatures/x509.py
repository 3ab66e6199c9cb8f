"""
X.509 Certificate Signature (EFI_CERT_X509_GUID)

The payload of an EFI_CERT_X509_GUID entry is the DER-encoded certificate,
written as-is. The variant has no SignatureHeader.

Certificate parsing is delegated to the ``cryptography`` library; the
encoder never looks inside the DER bytes.

Standards Reference:
- UEFI Specification 2.10 - Section 32.4.1 "Signature Database"
- RFC 5280 - Internet X.509 Public Key Infrastructure Certificate Profile

Author: EFI Tools Project
Date: October 2026
"""

from typing import Optional

from cryptography import x509
from cryptography.hazmat.primitives import serialization

from efi.core import EFI_CERT_X509_GUID_TEXT, Guid

from .base import BaseSignature

PEM_MARKER = b"-----BEGIN"


def certificate_to_der(data: bytes) -> Optional[bytes]:
    """
    Decode a PEM or DER certificate into DER bytes.

    PEM is detected by its armor line, anything else is tried as DER.

    Args:
        data: Certificate file contents

    Returns:
        bytes: DER encoding, or None if data is not a certificate
    """
    try:
        if PEM_MARKER in data:
            certificate = x509.load_pem_x509_certificate(data)
        else:
            certificate = x509.load_der_x509_certificate(data)
    except ValueError:
        return None
    return certificate.public_bytes(serialization.Encoding.DER)


class X509Signature(BaseSignature):
    """
    EFI_SIGNATURE_DATA payload holding one DER certificate.

    Attributes:
        der_encoded_cert: Raw DER certificate bytes
    """

    SIGNATURE_TYPE = Guid.parse(EFI_CERT_X509_GUID_TEXT)
    SIGNATURE_NAME = "X.509 Certificate"

    def __init__(self, der_encoded_cert: bytes):
        self.der_encoded_cert = bytes(der_encoded_cert)

    @classmethod
    def from_certificate(cls, certificate: x509.Certificate) -> "X509Signature":
        """Build the entry from an already loaded certificate object."""
        return cls(certificate.public_bytes(serialization.Encoding.DER))

    @classmethod
    def from_pem_or_der(cls, data: bytes) -> Optional["X509Signature"]:
        """Build the entry from PEM/DER bytes, None if they do not decode."""
        der = certificate_to_der(data)
        if der is None:
            return None
        return cls(der)

    def to_certificate(self) -> x509.Certificate:
        """
        Parse the payload back into a certificate object.

        Raises:
            ValueError: If the payload is not a valid DER certificate
        """
        return x509.load_der_x509_certificate(self.der_encoded_cert)

    def serialize(self) -> bytes:
        return self.der_encoded_cert

    def serialized_size(self) -> int:
        return len(self.der_encoded_cert)

    def __eq__(self, other):
        if not isinstance(other, X509Signature):
            return NotImplemented
        return self.der_encoded_cert == other.der_encoded_cert

    def __hash__(self):
        return hash(self.der_encoded_cert)

    def __repr__(self):
        return f"X509Signature(<{len(self.der_encoded_cert)} bytes DER>)"
