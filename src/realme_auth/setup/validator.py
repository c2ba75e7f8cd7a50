"""Validation of a RealMe deployment's SAML configuration.

The validator runs every check and collects every issue so that an
administrator sees the full list of defects in one pass. It never raises for
a configuration problem; turning the collected issues into a failure is the
caller's decision.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterator, Optional
from urllib.parse import urlsplit

from realme_auth.config.constants import SIGNING_CERT_FILENAME_ENV_VAR
from realme_auth.config.provider import ConfigProvider
from realme_auth.setup.messages import message

logger = logging.getLogger(__name__)

SERVICE_NAME_MAX_LENGTH = 20


@dataclass(frozen=True)
class ValidationIssue:
    """A single validation issue.

    Attributes:
        code: Message identifier, e.g. "ERR_CONFIG_NO_ENTITYID"
        message: Human-readable description
    """

    code: str
    message: str


@dataclass
class ValidationErrorSet:
    """Ordered collection of issues found during one validation run."""

    issues: list[ValidationIssue] = field(default_factory=list)

    def add(self, code: str, **params: object) -> None:
        """Record an issue using the message catalogue entry for code."""
        text = message(code, **params)
        logger.debug(f"Validation issue {code}: {text}")
        self.issues.append(ValidationIssue(code, text))

    @property
    def codes(self) -> list[str]:
        return [issue.code for issue in self.issues]

    @property
    def errors(self) -> list[str]:
        return [issue.message for issue in self.issues]

    @property
    def is_empty(self) -> bool:
        return not self.issues

    def format(self) -> str:
        """Render the issues as a bulleted list, one per line."""
        return "\n".join(f" - {issue.message}" for issue in self.issues)

    def __len__(self) -> int:
        return len(self.issues)

    def __iter__(self) -> Iterator[str]:
        return iter(self.errors)


def _is_readable(path: Path) -> bool:
    return os.access(path, os.R_OK)


class ConfigValidator:
    """Checks that a RealMe configuration is complete and consistent.

    Args:
        provider: Source of configuration values
        is_readable: Predicate used for file and directory readability checks

    Example:
        >>> validator = ConfigValidator(RealMeConfigService(load_config()))
        >>> errors = validator.validate("ite")
        >>> if not errors.is_empty:
        ...     print(errors.format())
    """

    def __init__(
        self,
        provider: ConfigProvider,
        is_readable: Callable[[Path], bool] = _is_readable,
    ) -> None:
        self.provider = provider
        self.is_readable = is_readable

    def validate(self, for_env: Optional[str]) -> ValidationErrorSet:
        """Run all checks for the target environment.

        Args:
            for_env: RealMe environment the metadata is being generated for

        Returns:
            Every issue found, in check order. Empty if the configuration is valid.
        """
        errors = ValidationErrorSet()

        self.validate_environment(for_env, errors)
        self.validate_directory_structure(errors)
        self.validate_certificates(errors)
        self.validate_entity_id(errors)
        self.validate_authn_context(errors)
        self.validate_metadata(for_env, errors)

        if errors.is_empty:
            logger.info(f"Configuration for '{for_env}' passed validation")
        else:
            logger.warning(
                f"Configuration for '{for_env}' failed validation with "
                f"{len(errors)} issue(s)"
            )
        return errors

    def validate_environment(
        self, for_env: Optional[str], errors: ValidationErrorSet
    ) -> None:
        """Ensure the target environment is given and is a RealMe environment."""
        allowed_envs = list(self.provider.get_allowed_environments())
        allowed = ", ".join(allowed_envs)

        if not for_env:
            errors.add("ERR_ENV_NOT_SPECIFIED", allowed_envs=allowed)
            return

        if for_env not in allowed_envs:
            errors.add("ERR_ENV_NOT_ALLOWED", env=for_env, allowed_envs=allowed)

    def validate_directory_structure(self, errors: ValidationErrorSet) -> None:
        """Ensure the certificate directory is configured and readable."""
        cert_dir = self.provider.get_cert_dir()
        if cert_dir is None:
            errors.add("ERR_CERT_DIR_MISSING")
        elif not self.is_readable(cert_dir):
            errors.add("ERR_CERT_DIR_NOT_READABLE", dir=cert_dir)

    def validate_certificates(self, errors: ValidationErrorSet) -> None:
        """Ensure the signing certificate is readable and holds a certificate.

        Content is only checked once the file is known to be readable.
        """
        cert_path = self.provider.get_signing_cert_path()
        if cert_path is None or not self.is_readable(cert_path):
            errors.add("ERR_CERT_NO_SIGNING_CERT", const=SIGNING_CERT_FILENAME_ENV_VAR)
        elif self.provider.get_sp_cert_content() is None:
            errors.add("ERR_CERT_SIGNING_CERT_CONTENT", file=cert_path)

    def validate_entity_id(self, errors: ValidationErrorSet) -> None:
        """Ensure the entity ID is a usable RealMe service provider identifier.

        A valid entity ID has the form
        https://www.domain.govt.nz/<privacy-realm>/<service-name>. An entity ID
        that is not an https URL on a public host is reported once and its
        path is not inspected. The service name and privacy realm are checked
        independently of each other.
        """
        entity_id = self.provider.get_sp_entity_id()

        if entity_id is None:
            errors.add("ERR_CONFIG_NO_ENTITYID")
            return

        try:
            parts = urlsplit(entity_id)
            host = parts.hostname
        except ValueError:
            errors.add("ERR_CONFIG_ENTITYID", entity_id=entity_id)
            return

        if not parts.scheme or not host or any(c.isspace() for c in entity_id):
            errors.add("ERR_CONFIG_ENTITYID", entity_id=entity_id)
            return

        if host == "localhost" or parts.scheme.lower() != "https":
            errors.add("ERR_CONFIG_ENTITYID", entity_id=entity_id)
            return

        segments = parts.path.split("/")
        if segments and segments[0] == "":
            segments = segments[1:]

        service_name = segments.pop() if segments else ""
        if not 1 <= len(service_name) <= SERVICE_NAME_MAX_LENGTH:
            errors.add(
                "ERR_CONFIG_ENTITYID_SERVICE_NAME",
                service_name=service_name,
                entity_id=entity_id,
                max_length=SERVICE_NAME_MAX_LENGTH,
            )

        privacy_realm = segments.pop() if segments else None
        if not privacy_realm:
            errors.add(
                "ERR_CONFIG_ENTITYID_PRIVACY_REALM",
                privacy_realm=privacy_realm or "",
                entity_id=entity_id,
            )

    def validate_authn_context(self, errors: ValidationErrorSet) -> None:
        """Ensure every environment requests an authentication strength RealMe knows.

        e.g. urn:nzl:govt:ict:stds:authn:deployment:GLS:SAML:2.0:ac:classes:LowStrength
        """
        allowed_contexts = self.provider.get_allowed_authn_context_list()
        for env in self.provider.get_allowed_environments():
            context = self.provider.get_authn_context_for_environment(env)
            if context is None:
                errors.add("ERR_CONFIG_NO_AUTHNCONTEXT", env=env)
            elif context not in allowed_contexts:
                errors.add("ERR_CONFIG_INVALID_AUTHNCONTEXT", env=env, context=context)

    def validate_metadata(
        self, for_env: Optional[str], errors: ValidationErrorSet
    ) -> None:
        """Ensure every value rendered into the metadata XML is present."""
        if not self.provider.get_metadata_organisation_name():
            errors.add("ERR_CONFIG_NO_ORGANISATION_NAME")

        if not self.provider.get_metadata_organisation_display_name():
            errors.add("ERR_CONFIG_NO_ORGANISATION_DISPLAY_NAME")

        if not self.provider.get_metadata_organisation_url():
            errors.add("ERR_CONFIG_NO_ORGANISATION_URL")

        contact = self.provider.get_metadata_contact_support()
        if not contact.company:
            errors.add("ERR_CONFIG_NO_SUPPORT_CONTACT_COMPANY")
        if not contact.first_names:
            errors.add("ERR_CONFIG_NO_SUPPORT_CONTACT_FIRST_NAMES")
        if not contact.surname:
            errors.add("ERR_CONFIG_NO_SUPPORT_CONTACT_SURNAME")

        # An unknown environment is already reported by validate_environment
        if for_env and for_env in self.provider.get_allowed_environments():
            acs_url = self.provider.get_assertion_consumer_service_url_for_environment(
                for_env
            )
            if not acs_url:
                errors.add("ERR_CONFIG_NO_ACS_URL", env=for_env)
