"""Custom log formatters for the RealMe integration.

This module provides specialized formatters for logging, including redaction
of certificate material.
"""

import logging
import re
from typing import List, Tuple


class SecretRedactingFormatter(logging.Formatter):
    """Formatter that redacts certificate and key material from log messages.

    The setup task handles the signing certificate file, which normally holds
    the private key as well. With redaction enabled, PEM blocks and long
    base64 runs (bare certificate payloads) are replaced before the record
    reaches any handler.

    Attributes:
        redact_secrets: Whether to enable redaction
        patterns: List of (regex_pattern, replacement_text) tuples for redaction

    Example:
        >>> formatter = SecretRedactingFormatter(
        ...     fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        ...     redact_secrets=True
        ... )
        >>> handler = logging.StreamHandler()
        >>> handler.setFormatter(formatter)
    """

    def __init__(
        self,
        fmt: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt: str | None = None,
        redact_secrets: bool = False,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.redact_secrets = redact_secrets

        self.patterns: List[Tuple[re.Pattern[str], str]] = [
            # PEM blocks: certificates, private keys
            (
                re.compile(
                    r"-----BEGIN ([A-Z ]+)-----.*?-----END \1-----", re.DOTALL
                ),
                r"[\1-REDACTED]",
            ),
            # Bare base64 payloads, e.g. the certificate data placed in metadata
            (re.compile(r"[A-Za-z0-9+/]{64,}={0,2}"), "[BASE64-REDACTED]"),
        ]

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record with optional redaction.

        Args:
            record: Log record to format

        Returns:
            Formatted log message with secrets redacted if enabled
        """
        original = super().format(record)

        if self.redact_secrets:
            for pattern, replacement in self.patterns:
                original = pattern.sub(replacement, original)

        return original
