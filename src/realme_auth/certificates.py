"""Signing certificate loading for RealMe metadata.

The signing certificate file usually holds both the private key and the
certificate. Only the certificate block is ever read out of it; the key
material is never returned or logged.
"""

import logging
import re
from datetime import datetime, timedelta, timezone
from pathlib import Path

from cryptography import x509

from realme_auth.utils.exceptions import CertificateLoadError

logger = logging.getLogger(__name__)

PEM_CERTIFICATE_PATTERN = re.compile(
    r"-----BEGIN CERTIFICATE-----(.+?)-----END CERTIFICATE-----", re.DOTALL
)

# Warn when the signing certificate expires within this window
EXPIRY_WARNING_DAYS = 30


def load_signing_certificate(cert_path: Path) -> tuple[x509.Certificate, str]:
    """Load the first PEM certificate block from a signing certificate file.

    Args:
        cert_path: Path to the PEM file

    Returns:
        Tuple of (parsed certificate, base64 payload without line breaks)

    Raises:
        CertificateLoadError: If the file is unreadable, has no certificate
            block, or the block is not a valid X.509 certificate
    """
    try:
        pem_text = cert_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CertificateLoadError(
            f"Failed to read signing certificate {cert_path}: {e}. "
            f"Check file permissions and that the file is PEM encoded."
        ) from e

    match = PEM_CERTIFICATE_PATTERN.search(pem_text)
    if match is None:
        raise CertificateLoadError(
            f"No BEGIN/END CERTIFICATE block found in {cert_path}."
        )

    try:
        cert = x509.load_pem_x509_certificate(match.group(0).encode("ascii"))
    except (ValueError, UnicodeEncodeError) as e:
        raise CertificateLoadError(
            f"Certificate block in {cert_path} is not a valid X.509 certificate: {e}"
        ) from e

    logger.debug(f"Loaded signing certificate: {cert.subject.rfc4514_string()}")
    check_expiration_warning(cert)

    payload = "".join(match.group(1).split())
    return cert, payload


def check_expiration_warning(
    cert: x509.Certificate, warning_days: int = EXPIRY_WARNING_DAYS
) -> bool:
    """Log a warning if the certificate is expired or expires soon.

    Args:
        cert: Certificate to check
        warning_days: Size of the warning window in days

    Returns:
        True if a warning was logged
    """
    now = datetime.now(timezone.utc)
    expires = cert.not_valid_after_utc

    if expires <= now:
        logger.warning(
            f"Signing certificate expired on {expires.strftime('%Y-%m-%d')}. "
            f"RealMe will reject metadata signed with it."
        )
        return True

    if expires - now <= timedelta(days=warning_days):
        logger.warning(
            f"Signing certificate expires on {expires.strftime('%Y-%m-%d')} "
            f"({(expires - now).days} days)."
        )
        return True

    return False
