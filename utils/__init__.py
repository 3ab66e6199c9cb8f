"""
Utils Package

Contains utility modules for certificate description, logging and I/O.
"""

from .cert_utils import (
    format_certificate_info,
    get_certificate_common_name,
    get_certificate_expiry_time,
    get_certificate_fingerprint,
    get_certificate_not_before,
    get_certificate_ski,
)
from .efi_io import EFIFileHandler
from .logger import EFILogger

__all__ = [
    # Certificate utilities
    "format_certificate_info",
    "get_certificate_common_name",
    "get_certificate_expiry_time",
    "get_certificate_fingerprint",
    "get_certificate_not_before",
    "get_certificate_ski",
    # I/O
    "EFIFileHandler",
    # Logging
    "EFILogger",
]
