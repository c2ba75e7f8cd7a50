"""Configuration schema models using pydantic.

This module defines the configuration structure using pydantic. RealMe values
are deliberately optional here: pydantic only checks types, while the setup
validator decides whether a deployment is complete.
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class CertificatesConfig(BaseModel):
    """Location of the SAML signing certificate.

    Attributes:
        cert_dir: Directory holding RealMe certificates
        signing_cert_filename: File name of the signing certificate (PEM)
    """

    cert_dir: Optional[Path] = None
    signing_cert_filename: Optional[str] = None


class EnvironmentConfig(BaseModel):
    """Per-environment RealMe settings.

    Attributes:
        authn_context: Authentication strength requested from RealMe
        acs_url: Assertion consumer service URL RealMe redirects back to
    """

    authn_context: Optional[str] = None
    acs_url: Optional[str] = None


class SupportContactConfig(BaseModel):
    """Support contact published in the service provider metadata."""

    company: Optional[str] = None
    first_names: Optional[str] = None
    surname: Optional[str] = None


class MetadataConfig(BaseModel):
    """Organisation details published in the service provider metadata."""

    organisation_name: Optional[str] = None
    organisation_display_name: Optional[str] = None
    organisation_url: Optional[str] = None
    contact_support: SupportContactConfig = Field(default_factory=SupportContactConfig)


class LoggingConfig(BaseModel):
    """Configuration for logging.

    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file
        redact_secrets: Whether to redact certificate data from logs
    """

    level: str = Field(
        default="INFO",
        description="Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL"
    )
    log_file: Path = Field(
        default=Path("logs/realme-auth.log"),
        description="Log file path"
    )
    redact_secrets: bool = Field(
        default=False,
        description="Redact certificate data from logs"
    )

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level.

        Args:
            v: Log level string

        Returns:
            Validated log level (uppercase)

        Raises:
            ValueError: If log level is not valid
        """
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                f"Invalid log level: {v}. Must be one of: {', '.join(valid_levels)}"
            )
        return v_upper


class Config(BaseModel):
    """Root configuration model.

    Attributes:
        certificates: Signing certificate location
        entity_id: Service provider entity ID registered with RealMe
        template_config_dir: Directory overriding the built-in metadata template
        environments: Settings keyed by RealMe environment (mts, ite, prod)
        metadata: Organisation and support contact details
        logging: Logging configuration
    """

    certificates: CertificatesConfig = Field(default_factory=CertificatesConfig)
    entity_id: Optional[str] = None
    template_config_dir: Optional[Path] = None
    environments: dict[str, EnvironmentConfig] = Field(default_factory=dict)
    metadata: MetadataConfig = Field(default_factory=MetadataConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
