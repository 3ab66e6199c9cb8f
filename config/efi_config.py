"""
EFI Tools Configuration - Percorsi e costanti centralizzate

Questo file centralizza costanti e percorsi usati dai tool da riga di comando.
Le costanti del formato binario vivono in efi.core.types; qui ci sono solo
i default modificabili dall'utente.

Usage:
    from config.efi_config import EFI_CONSTANTS, EFI_PATHS

    owner = EFI_CONSTANTS.DEFAULT_OWNER_GUID
    logger = EFILogger.get_logger("cert_to_efi_sig_list", log_to_file=True)  # -> EFI_PATHS.LOGS
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from efi.core import EFI_CERT_X509_GUID_TEXT, GUID_SIZE, MAX_U32, SIGNATURE_LIST_HEADER_SIZE


@dataclass(frozen=True)
class EFIPaths:
    """
    Percorsi base centralizzati.

    Attributi:
        LOGS: Directory log (usata solo se il logging su file è richiesto)
    """
    LOGS: Path = Path("./logs")


# Istanza singleton globale
EFI_PATHS = EFIPaths()


@dataclass(frozen=True)
class EFIConstants:
    """
    Costanti centralizzate per i tool EFI.
    """
    # Formato EFI_SIGNATURE_LIST
    GUID_SIZE: int = GUID_SIZE
    SIGNATURE_LIST_HEADER_SIZE: int = SIGNATURE_LIST_HEADER_SIZE
    MAX_U32: int = MAX_U32
    EFI_CERT_X509_GUID: str = EFI_CERT_X509_GUID_TEXT

    # Owner di default: GUID nullo
    DEFAULT_OWNER_GUID: str = "00000000-0000-0000-0000-000000000000"

    # Estensione file signature list
    SIG_LIST_SUFFIX: str = ".esl"

    # Logging
    DEFAULT_LOG_LEVEL: str = "INFO"
    LOG_LEVEL_ENV_VAR: str = "EFI_LOG_LEVEL"


# Istanza singleton globale
EFI_CONSTANTS = EFIConstants()


def get_log_level() -> int:
    """
    Livello di log dalla variabile d'ambiente EFI_LOG_LEVEL.

    Returns:
        int: Livello logging (default INFO se la variabile manca o non è valida)

    Examples:
        >>> os.environ["EFI_LOG_LEVEL"] = "debug"
        >>> get_log_level() == logging.DEBUG
        True
    """
    name = os.environ.get(EFI_CONSTANTS.LOG_LEVEL_ENV_VAR, EFI_CONSTANTS.DEFAULT_LOG_LEVEL)
    level = logging.getLevelName(name.strip().upper())
    if isinstance(level, int):
        return level
    return logging.INFO
