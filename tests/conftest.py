"""
Shared pytest configuration and fixtures.

This module provides fixtures and configuration used across all test suites
(unit and integration tests).
"""

from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.x509.oid import NameOID

from realme_auth.config import Config, RealMeConfigService
from realme_auth.config.constants import ALLOWED_ENVIRONMENTS, AUTHN_LOW_STRENGTH

ENTITY_ID = "https://sp.example.govt.nz/myrealm/myservice"
SIGNING_CERT_FILENAME = "sp-signing.pem"


def generate_certificate(days_valid: int = 365) -> tuple[bytes, bytes]:
    """
    Generate a self-signed certificate and its private key.

    Args:
        days_valid: Days until the certificate expires (negative for expired).

    Returns:
        tuple: (certificate PEM bytes, private key PEM bytes).
    """
    private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    subject = issuer = x509.Name([
        x509.NameAttribute(NameOID.COUNTRY_NAME, "NZ"),
        x509.NameAttribute(NameOID.ORGANIZATION_NAME, "Example Agency"),
        x509.NameAttribute(NameOID.COMMON_NAME, "sp.example.govt.nz"),
    ])
    now = datetime.now(timezone.utc)
    not_after = now + timedelta(days=days_valid)
    cert = x509.CertificateBuilder().subject_name(
        subject
    ).issuer_name(
        issuer
    ).public_key(
        private_key.public_key()
    ).serial_number(
        x509.random_serial_number()
    ).not_valid_before(
        min(now, not_after) - timedelta(days=1)
    ).not_valid_after(
        not_after
    ).sign(private_key, hashes.SHA256())

    key_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
    return cert.public_bytes(serialization.Encoding.PEM), key_pem


@pytest.fixture(scope="session")
def certificate_pem() -> tuple[bytes, bytes]:
    """
    Return a (certificate, key) PEM pair shared across the test session.
    """
    return generate_certificate()


@pytest.fixture
def cert_dir(tmp_path: Path, certificate_pem: tuple[bytes, bytes]) -> Path:
    """
    Create a certificate directory holding a combined key + certificate file.

    Args:
        tmp_path: Pytest's temporary directory fixture.
        certificate_pem: Certificate and key PEM bytes.

    Returns:
        Path: The certificate directory.
    """
    directory = tmp_path / "certs"
    directory.mkdir()
    cert_pem, key_pem = certificate_pem
    (directory / SIGNING_CERT_FILENAME).write_bytes(key_pem + cert_pem)
    return directory


@pytest.fixture
def expected_cert_payload(certificate_pem: tuple[bytes, bytes]) -> str:
    """
    Return the base64 payload the metadata should contain for the test certificate.
    """
    lines = certificate_pem[0].decode("ascii").strip().splitlines()
    return "".join(lines[1:-1])


@pytest.fixture
def valid_config_dict(cert_dir: Path) -> dict[str, Any]:
    """
    Return a complete, valid RealMe configuration dictionary.

    Args:
        cert_dir: Certificate directory fixture.
    """
    return {
        "certificates": {
            "cert_dir": str(cert_dir),
            "signing_cert_filename": SIGNING_CERT_FILENAME,
        },
        "entity_id": ENTITY_ID,
        "environments": {
            env: {
                "authn_context": AUTHN_LOW_STRENGTH,
                "acs_url": f"https://sp.example.govt.nz/saml/acs/{env}",
            }
            for env in ALLOWED_ENVIRONMENTS
        },
        "metadata": {
            "organisation_name": "Example Agency",
            "organisation_display_name": "Example Agency Online",
            "organisation_url": "https://www.example.govt.nz",
            "contact_support": {
                "company": "Example Agency",
                "first_names": "Aroha",
                "surname": "Smith",
            },
        },
    }


@pytest.fixture
def valid_config(valid_config_dict: dict[str, Any]) -> Config:
    """
    Return a validated Config built from valid_config_dict.
    """
    return Config(**valid_config_dict)


@pytest.fixture
def provider(valid_config: Config) -> RealMeConfigService:
    """
    Return a configuration provider over the valid configuration.
    """
    return RealMeConfigService(valid_config)


@pytest.fixture
def certificate_factory():
    """
    Return generate_certificate so tests can build certificates with custom lifetimes.
    """
    return generate_certificate
