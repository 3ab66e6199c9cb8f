"""
Certificate utility functions for the EFI tools.

Human-readable descriptions of X.509 certificates found in signature
lists. Used by the viewer tool only; the encoder never inspects
certificate contents.

NOTA - Gestione Datetime con cryptography:
La libreria cryptography espone not_valid_before_utc / not_valid_after_utc
(timezone-aware). Le versioni senza suffisso sono deprecate e non vanno usate.
"""

from datetime import datetime

from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.x509.oid import ExtensionOID, NameOID


def get_certificate_ski(certificate: x509.Certificate) -> str:
    """
    Extracts Subject Key Identifier (SKI) from certificate in hex format.

    Returns SKI extension value if present, otherwise the SHA-256 hash
    of the public key.

    Args:
        certificate: X.509 certificate

    Returns:
        SKI as hex uppercase string
    """
    try:
        ski_ext = certificate.extensions.get_extension_for_oid(ExtensionOID.SUBJECT_KEY_IDENTIFIER)
        return ski_ext.value.digest.hex().upper()
    except x509.ExtensionNotFound:
        public_key_der = certificate.public_key().public_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        digest = hashes.Hash(hashes.SHA256())
        digest.update(public_key_der)
        return digest.finalize().hex().upper()


def get_certificate_common_name(certificate: x509.Certificate) -> str:
    """Subject CN, or the full RFC 4514 subject when no CN is present."""
    attributes = certificate.subject.get_attributes_for_oid(NameOID.COMMON_NAME)
    if attributes:
        return str(attributes[0].value)
    return certificate.subject.rfc4514_string()


def get_certificate_fingerprint(certificate: x509.Certificate) -> str:
    """SHA-256 fingerprint, hex lowercase."""
    return certificate.fingerprint(hashes.SHA256()).hex()


def get_certificate_expiry_time(certificate: x509.Certificate) -> datetime:
    return certificate.not_valid_after_utc


def get_certificate_not_before(certificate: x509.Certificate) -> datetime:
    return certificate.not_valid_before_utc


def format_certificate_info(certificate: x509.Certificate) -> str:
    """
    Formats certificate information as human-readable string.

    Args:
        certificate: X.509 certificate

    Returns:
        Formatted string with certificate details
    """
    subject = certificate.subject.rfc4514_string()
    issuer = certificate.issuer.rfc4514_string()
    not_before = get_certificate_not_before(certificate)
    not_after = get_certificate_expiry_time(certificate)

    return (
        f"Subject: {subject}\n"
        f"Issuer: {issuer}\n"
        f"Serial: {certificate.serial_number:x}\n"
        f"SKI: {get_certificate_ski(certificate)[:16]}...\n"
        f"SHA-256: {get_certificate_fingerprint(certificate)}\n"
        f"Validity: {not_before.strftime('%Y-%m-%d %H:%M:%S')} to "
        f"{not_after.strftime('%Y-%m-%d %H:%M:%S')}"
    )
