"""
Converte un certificato X.509 (PEM o DER) in una EFI signature list
contenente solo quel certificato.

Usage:
    # Owner GUID nullo (default)
    cert-to-efi-sig-list PK.crt PK.esl

    # Owner esplicito
    cert-to-efi-sig-list --owner 00112233-4455-6677-8899-aabbccddeeff PK.crt PK.esl

    # Log dettagliato anche su file
    cert-to-efi-sig-list --verbose --log-dir ./logs db.pem db.esl

    # Log su file nella directory di default (EFI_PATHS.LOGS)
    cert-to-efi-sig-list --log-file db.pem db.esl

Exit codes:
    0  signature list scritta
    1  certificato non valido, errore di serializzazione o di I/O
    2  argomenti non validi (incluso un --owner malformato)
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from config import EFI_CONSTANTS, EFI_PATHS
from efi import EFIError, Guid, GuidParseError, SignatureList, X509Signature
from utils import EFIFileHandler, EFILogger

LOGGER_NAME = "cert_to_efi_sig_list"


def parse_owner(value: str) -> Guid:
    """argparse type: GUID testuale -> Guid"""
    try:
        return Guid.parse(value)
    except GuidParseError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cert-to-efi-sig-list",
        description="Convert an x509 certificate in PEM format to an EFI signature list "
                    "containing just that certificate",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    parser.add_argument(
        "--owner",
        type=parse_owner,
        default=Guid.parse(EFI_CONSTANTS.DEFAULT_OWNER_GUID),
        metavar="GUID",
        help="use <guid> as the owner of the signature (defaults to an all-zero guid)"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="log debug information"
    )

    parser.add_argument(
        "--log-dir",
        default=None,
        help="also write the log to <log-dir>/cert_to_efi_sig_list.log"
    )

    parser.add_argument(
        "--log-file",
        action="store_true",
        help=f"also write the log under {EFI_PATHS.LOGS} (ignored with --log-dir)"
    )

    parser.add_argument("cert", help="certificate file (PEM or DER)")
    parser.add_argument("sig_list", help=f"output signature list (usually *{EFI_CONSTANTS.SIG_LIST_SUFFIX})")

    return parser


def convert(cert_path: str, sig_list_path: str, owner: Guid, logger: logging.Logger) -> bool:
    """
    Legge il certificato, costruisce la signature list e la scrive su disco.

    Returns:
        True se il file è stato scritto
    """
    try:
        der = EFIFileHandler.load_certificate_der(cert_path)
    except OSError as e:
        logger.error(f"Impossibile leggere il certificato {cert_path}: {e}")
        return False

    if der is None:
        logger.error(f"invalid cert: {cert_path} non contiene un certificato X.509")
        return False

    sig_list = SignatureList.new(X509Signature)
    sig_list.add(X509Signature(der), owner)

    try:
        data = sig_list.serialize()
    except EFIError as e:
        logger.error(f"Serializzazione fallita: {e}")
        return False

    try:
        EFIFileHandler.write_signature_list(sig_list_path, data)
    except OSError as e:
        logger.error(f"Impossibile scrivere {sig_list_path}: {e}")
        return False

    logger.info(f"Signature list scritta: {sig_list_path} ({len(data)} bytes, owner {owner})")
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # Senza --verbose il livello viene da EFI_LOG_LEVEL
    level = logging.DEBUG if args.verbose else None
    logger = EFILogger.get_logger(
        LOGGER_NAME, log_dir=args.log_dir, level=level, log_to_file=args.log_file
    )

    logger.debug(f"cert={args.cert} sig_list={args.sig_list} owner={args.owner}")
    return 0 if convert(args.cert, args.sig_list, args.owner, logger) else 1


if __name__ == "__main__":
    sys.exit(main())
