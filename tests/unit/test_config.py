"""Unit tests for configuration management.

Tests cover configuration loading, schema validation, environment variable
overrides and the configuration provider.
"""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from realme_auth.config import (
    Config,
    LoggingConfig,
    RealMeConfigService,
    SupportContact,
    load_config,
)
from realme_auth.config.constants import ALLOWED_AUTHN_CONTEXTS, ALLOWED_ENVIRONMENTS
from realme_auth.utils.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove REALME_* overrides and .env loading from the test environment."""
    for name in [
        "REALME_CERT_DIR",
        "REALME_SIGNING_CERT_FILENAME",
        "REALME_ENTITY_ID",
        "REALME_TEMPLATE_CONFIG_DIR",
        "REALME_LOG_LEVEL",
        "REALME_LOG_FILE",
        "REALME_REDACT_SECRETS",
    ]:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("realme_auth.config.manager.load_dotenv", lambda: None)


class TestConfigurationSchema:
    """Test pydantic configuration models."""

    def test_empty_config_is_accepted(self) -> None:
        """Test RealMe values are optional so the validator can report them."""
        config = Config()

        assert config.entity_id is None
        assert config.certificates.cert_dir is None
        assert config.environments == {}
        assert config.metadata.contact_support.surname is None

    def test_logging_config_case_insensitive(self) -> None:
        """Test LoggingConfig accepts case-insensitive log levels."""
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_logging_config_invalid_level(self) -> None:
        """Test LoggingConfig rejects invalid log level."""
        with pytest.raises(ValidationError) as exc_info:
            LoggingConfig(level="LOUD")

        assert "Invalid log level" in str(exc_info.value)


class TestConfigurationLoading:
    """Test configuration file loading."""

    def test_load_config_with_valid_file(
        self, tmp_path: Path, valid_config_dict: dict
    ) -> None:
        """Test loading a complete configuration file."""
        # Arrange
        config_file = tmp_path / "realme.json"
        config_file.write_text(json.dumps(valid_config_dict))

        # Act
        config = load_config(config_file)

        # Assert
        assert config.entity_id == valid_config_dict["entity_id"]
        assert config.environments["ite"].acs_url.endswith("/saml/acs/ite")
        assert config.metadata.contact_support.first_names == "Aroha"

    def test_load_config_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        """Test a missing config file falls back to defaults."""
        config = load_config(tmp_path / "absent.json")

        assert config.entity_id is None
        assert config.logging.level == "INFO"

    def test_load_config_invalid_json(self, tmp_path: Path) -> None:
        """Test malformed JSON raises ConfigurationError with a fix hint."""
        config_file = tmp_path / "realme.json"
        config_file.write_text("{ not json")

        with pytest.raises(ConfigurationError) as exc_info:
            load_config(config_file)

        assert "Invalid JSON" in str(exc_info.value)
        assert "Fix:" in str(exc_info.value)

    def test_load_config_wrong_type(self, tmp_path: Path) -> None:
        """Test a schema violation raises ConfigurationError."""
        config_file = tmp_path / "realme.json"
        config_file.write_text(json.dumps({"environments": ["ite"]}))

        with pytest.raises(ConfigurationError) as exc_info:
            load_config(config_file)

        assert "Configuration validation failed" in str(exc_info.value)

    def test_load_config_top_level_must_be_object(self, tmp_path: Path) -> None:
        """Test a JSON array at the top level is rejected."""
        config_file = tmp_path / "realme.json"
        config_file.write_text("[]")

        with pytest.raises(ConfigurationError):
            load_config(config_file)


class TestEnvironmentOverrides:
    """Test REALME_* environment variable overrides."""

    def test_certificate_location_from_environment(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test REALME_CERT_DIR and REALME_SIGNING_CERT_FILENAME are honoured."""
        # Arrange
        monkeypatch.setenv("REALME_CERT_DIR", "/etc/realme/certs")
        monkeypatch.setenv("REALME_SIGNING_CERT_FILENAME", "signing.pem")

        # Act
        config = load_config(tmp_path / "absent.json")

        # Assert
        assert config.certificates.cert_dir == Path("/etc/realme/certs")
        assert config.certificates.signing_cert_filename == "signing.pem"

    def test_environment_overrides_file(
        self, tmp_path: Path, valid_config_dict: dict, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test environment variables take precedence over the file."""
        config_file = tmp_path / "realme.json"
        config_file.write_text(json.dumps(valid_config_dict))
        monkeypatch.setenv("REALME_ENTITY_ID", "https://other.govt.nz/realm/svc")
        monkeypatch.setenv("REALME_LOG_LEVEL", "warning")
        monkeypatch.setenv("REALME_REDACT_SECRETS", "yes")

        config = load_config(config_file)

        assert config.entity_id == "https://other.govt.nz/realm/svc"
        assert config.logging.level == "WARNING"
        assert config.logging.redact_secrets is True


class TestRealMeConfigService:
    """Test the configuration provider."""

    def test_signing_cert_path(self, provider: RealMeConfigService, cert_dir: Path) -> None:
        """Test the signing certificate path joins directory and file name."""
        assert provider.get_signing_cert_path() == cert_dir / "sp-signing.pem"

    def test_signing_cert_path_needs_both_parts(self) -> None:
        """Test the path is None when the file name is missing."""
        service = RealMeConfigService(Config(certificates={"cert_dir": "/certs"}))

        assert service.get_signing_cert_path() is None

    def test_relative_paths_resolve_against_base_path(self, tmp_path: Path) -> None:
        """Test relative directories are resolved against base_path."""
        service = RealMeConfigService(
            Config(certificates={"cert_dir": "certs"}, template_config_dir="conf"),
            base_path=tmp_path,
        )

        assert service.get_cert_dir() == tmp_path / "certs"
        assert service.get_template_config_dir() == tmp_path / "conf"

    def test_cert_content(
        self, provider: RealMeConfigService, expected_cert_payload: str
    ) -> None:
        """Test the certificate payload is read without PEM armour."""
        assert provider.get_sp_cert_content() == expected_cert_payload

    def test_cert_content_missing_file(self, tmp_path: Path) -> None:
        """Test a missing certificate file yields None."""
        service = RealMeConfigService(
            Config(
                certificates={"cert_dir": str(tmp_path), "signing_cert_filename": "x.pem"}
            )
        )

        assert service.get_sp_cert_content() is None

    def test_static_realme_lists(self, provider: RealMeConfigService) -> None:
        """Test environments and contexts come from the RealMe constants."""
        assert list(provider.get_allowed_environments()) == list(ALLOWED_ENVIRONMENTS)
        assert list(provider.get_allowed_authn_context_list()) == list(
            ALLOWED_AUTHN_CONTEXTS
        )

    def test_unknown_environment_values_are_none(
        self, provider: RealMeConfigService
    ) -> None:
        """Test per-environment getters return None for unknown environments."""
        assert provider.get_authn_context_for_environment("staging") is None
        assert provider.get_assertion_consumer_service_url_for_environment("staging") is None

    def test_contact_support(self, provider: RealMeConfigService) -> None:
        """Test the support contact is exposed as a SupportContact."""
        assert provider.get_metadata_contact_support() == SupportContact(
            company="Example Agency", first_names="Aroha", surname="Smith"
        )
