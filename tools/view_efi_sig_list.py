"""
EFI Signature List Viewer

Visualizza file .esl (EFI_SIGNATURE_LIST) in formato leggibile.
I file .esl sono binari e non possono essere visualizzati direttamente.

Usage:
    view-efi-sig-list PK.esl
    view-efi-sig-list --verbose db.esl

Author: EFI Tools Project
Date: October 2026
"""

import argparse
import sys
from binascii import hexlify
from typing import Optional, Sequence

from config import EFI_CONSTANTS
from efi import DecodedSignatureList, EFIError, X509Signature, decode_signature_lists
from utils import EFIFileHandler, EFILogger, format_certificate_info, get_certificate_common_name

LOGGER_NAME = "view_efi_sig_list"


def format_bytes(data: bytes, max_length: int = 32) -> str:
    """Formatta bytes in esadecimale con troncamento"""
    if len(data) <= max_length:
        return hexlify(data).decode('ascii')
    return hexlify(data[:max_length]).decode('ascii') + f"... ({len(data)} bytes total)"


def describe_entry(signature_class, payload: bytes, verbose: bool) -> str:
    """Descrizione di una singola entry (certificato se X.509, hex altrimenti)"""
    if signature_class is not X509Signature:
        return format_bytes(payload)

    try:
        certificate = X509Signature(payload).to_certificate()
    except ValueError:
        return f"<DER non valido> {format_bytes(payload)}"

    if verbose:
        return "\n" + "\n".join(
            f"      {line}" for line in format_certificate_info(certificate).splitlines()
        )
    return get_certificate_common_name(certificate)


def print_signature_list(index: int, decoded: DecodedSignatureList, verbose: bool = False) -> None:
    """Stampa una EFI_SIGNATURE_LIST decodificata"""
    signature_class = decoded.signature_class
    type_name = signature_class.SIGNATURE_NAME if signature_class else "Unknown"

    print(f"[{index}] SignatureType: {decoded.signature_type} ({type_name})")
    print(f"    Offset: {decoded.offset}")
    print(f"    SignatureListSize: {decoded.list_size}")
    print(f"    SignatureHeaderSize: {len(decoded.header)}")
    print(f"    SignatureSize: {decoded.signature_size}")
    if decoded.header:
        print(f"    SignatureHeader: {format_bytes(decoded.header)}")
    print(f"    Signatures: {len(decoded.entries)}")
    for position, (owner, payload) in enumerate(decoded.entries):
        print(f"    - [{position}] owner {owner}: {describe_entry(signature_class, payload, verbose)}")


def view_signature_list(file_path: str, verbose: bool = False) -> None:
    """
    Visualizza un file .esl

    Args:
        file_path: Percorso al file .esl
        verbose: Dettagli completi dei certificati

    Raises:
        OSError: Se il file non è leggibile
        EFIError: Se il contenuto non è una signature list valida
    """
    data = EFIFileHandler.load_signature_list(file_path)
    lists = decode_signature_lists(data)

    print(f"\n{'='*70}")
    print(f"  EFI SIGNATURE LIST: {file_path}")
    print(f"{'='*70}")
    print(f"Dimensione: {len(data)} bytes, {len(lists)} signature list\n")

    for index, decoded in enumerate(lists):
        print_signature_list(index, decoded, verbose)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="view-efi-sig-list",
        description="Print the contents of an EFI signature list file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument("sig_list", help=f"signature list file (usually *{EFI_CONSTANTS.SIG_LIST_SUFFIX})")
    parser.add_argument("--verbose", action="store_true", help="show full certificate details")
    args = parser.parse_args(argv)

    logger = EFILogger.get_logger(LOGGER_NAME)

    try:
        view_signature_list(args.sig_list, args.verbose)
    except OSError as e:
        logger.error(f"Errore nella lettura del file {args.sig_list}: {e}")
        return 1
    except EFIError as e:
        logger.error(f"{args.sig_list} non è una signature list valida: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
