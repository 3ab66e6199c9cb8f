"""
EFI I/O Utilities - Operazioni su file per certificati e signature list

Questo modulo centralizza le operazioni di I/O dei tool: lettura dei
certificati (PEM o DER), scrittura e lettura dei file .esl.
Il core (efi/) non fa I/O: riceve e restituisce solo bytes.
"""

import os
from pathlib import Path
from typing import Optional, Union

from efi.signatures import certificate_to_der

from .logger import EFILogger

PathLike = Union[str, Path]

logger = EFILogger.get_logger("EFIFileHandler", console_output=False)


class EFIFileHandler:
    """Handler centralizzato per operazioni I/O su certificati e signature list"""

    @staticmethod
    def load_binary_file(file_path: PathLike) -> bytes:
        """
        Carica dati binari da file.

        Args:
            file_path: Path del file da caricare

        Returns:
            Contenuto del file

        Raises:
            OSError: Se il file non esiste o non è leggibile
        """
        with open(file_path, "rb") as f:
            data = f.read()
        logger.debug(f"Letti {len(data)} bytes da {file_path}")
        return data

    @staticmethod
    def save_binary_file(data: bytes, file_path: PathLike, create_dirs: bool = True) -> None:
        """
        Salva dati binari su file (es: signature list .esl).

        Args:
            data: Dati binari da salvare
            file_path: Path dove salvare il file
            create_dirs: Se True, crea directory se non esiste
        """
        directory = os.path.dirname(os.fspath(file_path))
        if create_dirs and directory:
            os.makedirs(directory, exist_ok=True)

        with open(file_path, "wb") as f:
            f.write(data)
        logger.debug(f"Scritti {len(data)} bytes su {file_path}")

    @staticmethod
    def load_certificate_der(cert_path: PathLike) -> Optional[bytes]:
        """
        Carica un certificato PEM o DER e lo restituisce in DER.

        Args:
            cert_path: Path al file del certificato

        Returns:
            DER del certificato, None se il contenuto non è un certificato

        Raises:
            OSError: Se il file non esiste o non è leggibile
        """
        der = certificate_to_der(EFIFileHandler.load_binary_file(cert_path))
        if der is None:
            logger.debug(f"{cert_path} non contiene un certificato X.509 valido")
        return der

    @staticmethod
    def write_signature_list(sig_list_path: PathLike, data: bytes) -> None:
        """Scrive una signature list già serializzata."""
        EFIFileHandler.save_binary_file(data, sig_list_path)

    @staticmethod
    def load_signature_list(sig_list_path: PathLike) -> bytes:
        """Legge il contenuto grezzo di un file .esl."""
        return EFIFileHandler.load_binary_file(sig_list_path)
