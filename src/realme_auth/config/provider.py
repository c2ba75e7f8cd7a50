"""Configuration provider consumed by the setup validator and orchestrator.

The validator and orchestrator never read configuration directly; they are
handed a ConfigProvider so tests can inject fixture configurations.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol, Sequence

from realme_auth.certificates import load_signing_certificate
from realme_auth.config.constants import ALLOWED_AUTHN_CONTEXTS, ALLOWED_ENVIRONMENTS
from realme_auth.config.schema import Config
from realme_auth.utils.exceptions import CertificateLoadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SupportContact:
    """Support contact published in the metadata. Any field may be missing."""

    company: Optional[str] = None
    first_names: Optional[str] = None
    surname: Optional[str] = None


class ConfigProvider(Protocol):
    """Read-only view of a RealMe deployment's configuration."""

    def get_cert_dir(self) -> Optional[Path]: ...

    def get_signing_cert_path(self) -> Optional[Path]: ...

    def get_sp_cert_content(self) -> Optional[str]: ...

    def get_sp_entity_id(self) -> Optional[str]: ...

    def get_allowed_environments(self) -> Sequence[str]: ...

    def get_authn_context_for_environment(self, env: str) -> Optional[str]: ...

    def get_allowed_authn_context_list(self) -> Sequence[str]: ...

    def get_assertion_consumer_service_url_for_environment(
        self, env: str
    ) -> Optional[str]: ...

    def get_metadata_organisation_name(self) -> Optional[str]: ...

    def get_metadata_organisation_display_name(self) -> Optional[str]: ...

    def get_metadata_organisation_url(self) -> Optional[str]: ...

    def get_metadata_contact_support(self) -> SupportContact: ...

    def get_template_config_dir(self) -> Optional[Path]: ...


class RealMeConfigService:
    """ConfigProvider backed by a loaded Config.

    Args:
        config: Validated configuration
        base_path: Directory that relative paths in the config resolve against.
            Defaults to the current working directory.

    Example:
        >>> service = RealMeConfigService(load_config())
        >>> service.get_sp_entity_id()
        'https://sp.example.govt.nz/myrealm/myservice'
    """

    def __init__(self, config: Config, base_path: Optional[Path] = None) -> None:
        self.config = config
        self.base_path = base_path if base_path is not None else Path.cwd()
        self._cert_content: Optional[str] = None
        self._cert_loaded = False

    def _resolve(self, path: Path) -> Path:
        return path if path.is_absolute() else self.base_path / path

    def get_cert_dir(self) -> Optional[Path]:
        cert_dir = self.config.certificates.cert_dir
        return self._resolve(cert_dir) if cert_dir is not None else None

    def get_signing_cert_path(self) -> Optional[Path]:
        cert_dir = self.get_cert_dir()
        filename = self.config.certificates.signing_cert_filename
        if cert_dir is None or not filename:
            return None
        return cert_dir / filename

    def get_sp_cert_content(self) -> Optional[str]:
        """Return the signing certificate's base64 payload.

        The file is read once per service; later calls return the same result.

        Returns:
            Certificate payload without PEM armour or line breaks, or None if
            the file is missing, unreadable or holds no valid certificate
        """
        if not self._cert_loaded:
            self._cert_content = self._load_cert_content()
            self._cert_loaded = True
        return self._cert_content

    def _load_cert_content(self) -> Optional[str]:
        cert_path = self.get_signing_cert_path()
        if cert_path is None:
            return None

        try:
            _, payload = load_signing_certificate(cert_path)
        except CertificateLoadError as e:
            logger.warning(str(e))
            return None
        return payload

    def get_sp_entity_id(self) -> Optional[str]:
        return self.config.entity_id

    def get_allowed_environments(self) -> Sequence[str]:
        return ALLOWED_ENVIRONMENTS

    def get_authn_context_for_environment(self, env: str) -> Optional[str]:
        env_config = self.config.environments.get(env)
        return env_config.authn_context if env_config else None

    def get_allowed_authn_context_list(self) -> Sequence[str]:
        return ALLOWED_AUTHN_CONTEXTS

    def get_assertion_consumer_service_url_for_environment(
        self, env: str
    ) -> Optional[str]:
        env_config = self.config.environments.get(env)
        return env_config.acs_url if env_config else None

    def get_metadata_organisation_name(self) -> Optional[str]:
        return self.config.metadata.organisation_name

    def get_metadata_organisation_display_name(self) -> Optional[str]:
        return self.config.metadata.organisation_display_name

    def get_metadata_organisation_url(self) -> Optional[str]:
        return self.config.metadata.organisation_url

    def get_metadata_contact_support(self) -> SupportContact:
        contact = self.config.metadata.contact_support
        return SupportContact(
            company=contact.company,
            first_names=contact.first_names,
            surname=contact.surname,
        )

    def get_template_config_dir(self) -> Optional[Path]:
        template_dir = self.config.template_config_dir
        return self._resolve(template_dir) if template_dir is not None else None
