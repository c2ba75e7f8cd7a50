"""RealMe setup task.

Intended to be run by a server administrator once the deployment has been
configured. The task:

- refuses to run anywhere but the command line, since it prints certificate
  data and contact details;
- validates every required configuration value and reports all problems at once;
- prints the metadata XML that must be sent to RealMe to integrate with the
  chosen environment.

The task persists nothing. Running it twice with the same configuration
prints the same XML.
"""

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

import click

from realme_auth.config.provider import ConfigProvider
from realme_auth.setup.messages import message
from realme_auth.setup.renderer import MetadataRenderer
from realme_auth.setup.validator import ConfigValidator
from realme_auth.utils.exceptions import (
    ExecutionContextError,
    RealMeError,
    SetupValidationError,
)

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates" / "saml-conf"
METADATA_TEMPLATE_NAME = "metadata.xml"


class ExecutionContext(Enum):
    """Where the setup task is being invoked from."""

    CLI = "cli"
    WEB = "web"


def detect_execution_context() -> ExecutionContext:
    """Return CLI when called from within a click command, WEB otherwise."""
    if click.get_current_context(silent=True) is not None:
        return ExecutionContext.CLI
    return ExecutionContext.WEB


class SetupOrchestrator:
    """Sequences validation and metadata rendering for one environment.

    Args:
        provider: Source of configuration values
        validator: Validator to use. Defaults to a ConfigValidator over provider.
        renderer: Template renderer. Defaults to MetadataRenderer.
        execution_context: Invocation context. Detected when not given.
        output: Callable receiving each line of console output
        is_readable: Predicate used when resolving the template directory

    Example:
        >>> orchestrator = SetupOrchestrator(RealMeConfigService(load_config()))
        >>> orchestrator.run("ite")
        True
    """

    def __init__(
        self,
        provider: ConfigProvider,
        validator: Optional[ConfigValidator] = None,
        renderer: Optional[MetadataRenderer] = None,
        execution_context: Optional[ExecutionContext] = None,
        output: Callable[[str], None] = click.echo,
        is_readable: Callable[[Path], bool] = lambda path: os.access(path, os.R_OK),
    ) -> None:
        self.provider = provider
        self.validator = validator or ConfigValidator(provider, is_readable=is_readable)
        self.renderer = renderer or MetadataRenderer()
        self.execution_context = execution_context
        self.output = output
        self.is_readable = is_readable

    def run(self, for_env: Optional[str]) -> bool:
        """Run the setup task, printing any failure instead of raising it.

        Args:
            for_env: RealMe environment to generate metadata for (mts, ite, prod)

        Returns:
            True if metadata was generated
        """
        try:
            self.execute(for_env)
        except RealMeError as e:
            logger.error(f"RealMe setup failed: {type(e).__name__}")
            self.output(f"{e}\n")
            return False
        return True

    def execute(self, for_env: Optional[str]) -> str:
        """Validate the configuration and print the metadata XML.

        Args:
            for_env: RealMe environment to generate metadata for (mts, ite, prod)

        Returns:
            The rendered metadata XML

        Raises:
            ExecutionContextError: If not invoked from the command line
            SetupValidationError: If the configuration has any issues
            TemplateLoadError: If the metadata template cannot be read
        """
        context = self.execution_context or detect_execution_context()
        if context is not ExecutionContext.CLI:
            raise ExecutionContextError(message("ERR_NOT_CLI"))

        logger.info(f"Running RealMe setup for environment '{for_env}'")

        errors = self.validator.validate(for_env)
        if not errors.is_empty:
            raise SetupValidationError(errors)
        self.output(message("VALIDATION_SUCCESS"))

        metadata = self.render_metadata(for_env)

        self.output(message("METADATA_INTRO", env=for_env) + "\n")
        self.output(metadata)
        self.output("\n" + message("BUILD_FINISH", env=for_env))
        return metadata

    def render_metadata(self, for_env: str) -> str:
        """Render metadata.xml with live configuration values for for_env."""
        template_file = self.get_template_dir() / METADATA_TEMPLATE_NAME
        contact = self.provider.get_metadata_contact_support()

        tokens = {
            "entityID": self.provider.get_sp_entity_id(),
            "certificate-data": self.provider.get_sp_cert_content(),
            "acs-url": self.provider.get_assertion_consumer_service_url_for_environment(
                for_env
            ),
            "organisation-name": self.provider.get_metadata_organisation_name(),
            "organisation-display-name": (
                self.provider.get_metadata_organisation_display_name()
            ),
            "organisation-url": self.provider.get_metadata_organisation_url(),
            "contact-support1-company": contact.company,
            "contact-support1-firstnames": contact.first_names,
            "contact-support1-surname": contact.surname,
        }
        # Validation guarantees these are set; None would render as "None"
        tokens = {name: value or "" for name, value in tokens.items()}

        return self.renderer.render(template_file, tokens)

    def get_template_dir(self) -> Path:
        """Return the configured template directory if readable, else the built-in one."""
        template_dir = self.provider.get_template_config_dir()
        if template_dir is not None and self.is_readable(template_dir):
            return template_dir

        if template_dir is not None:
            logger.warning(
                f"Template directory {template_dir} is not readable, "
                f"using built-in templates"
            )
        return DEFAULT_TEMPLATE_DIR
