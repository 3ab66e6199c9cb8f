"""
EFI Tools Configuration Package

Centralizza configurazioni, percorsi e costanti dei tool.
"""

from .efi_config import (
    EFI_PATHS,
    EFI_CONSTANTS,
    get_log_level,
)

__all__ = [
    'EFI_PATHS',
    'EFI_CONSTANTS',
    'get_log_level',
]
