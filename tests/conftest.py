"""
Pytest Configuration and Shared Fixtures

Fornisce fixture condivise per tutti i test:
- Certificato di riferimento PK.crt / PK.der e signature list PK.esl
- Owner GUID di riferimento
- Factory per certificati di test generati al volo (cryptography)
- Reset della cache dei logger tra un test e l'altro

Author: EFI Tools Project
Date: October 2026
"""

import os
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.x509.oid import NameOID

from efi import Guid
from utils.logger import EFILogger

DATA_DIR = Path(__file__).parent / "data"

REFERENCE_OWNER = "00112233-4455-6677-8899-aabbccddeeff"


@pytest.fixture(scope="session")
def data_dir():
    return DATA_DIR


@pytest.fixture(scope="session")
def pk_pem(data_dir):
    """Certificato PK di riferimento (PEM)"""
    return (data_dir / "PK.crt").read_bytes()


@pytest.fixture(scope="session")
def pk_der(data_dir):
    """Stesso certificato in DER"""
    return (data_dir / "PK.der").read_bytes()


@pytest.fixture(scope="session")
def pk_esl(data_dir):
    """Signature list attesa per PK.crt con owner REFERENCE_OWNER"""
    return (data_dir / "PK.esl").read_bytes()


@pytest.fixture
def owner():
    return Guid.parse(REFERENCE_OWNER)


@pytest.fixture(scope="session")
def make_certificate():
    """
    Factory per certificati self-signed ECDSA P-256.

    Il common name cambia la lunghezza del DER, utile per i test
    sulle dimensioni delle entry.
    """
    def _make(common_name: str = "EFI Test Certificate") -> x509.Certificate:
        private_key = ec.generate_private_key(ec.SECP256R1())
        name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, common_name)])
        now = datetime.now(timezone.utc)
        return (
            x509.CertificateBuilder()
            .subject_name(name)
            .issuer_name(name)
            .public_key(private_key.public_key())
            .serial_number(x509.random_serial_number())
            .not_valid_before(now)
            .not_valid_after(now + timedelta(days=365))
            .sign(private_key, hashes.SHA256())
        )

    return _make


@pytest.fixture(scope="session")
def make_certificate_der(make_certificate):
    def _make(common_name: str = "EFI Test Certificate") -> bytes:
        return make_certificate(common_name).public_bytes(serialization.Encoding.DER)

    return _make


@pytest.fixture(autouse=True)
def reset_loggers():
    """I logger catturano sys.stdout alla creazione: ricrearli per ogni test"""
    EFILogger.clear_cache()
    yield
    EFILogger.clear_cache()
