"""Main CLI entry point for the RealMe integration.

This module provides the main Click command group for the realme-auth CLI.
"""

from pathlib import Path
from typing import Optional

import click

from realme_auth import __version__
from realme_auth.cli.setup_commands import setup
from realme_auth.config import load_config
from realme_auth.logging_audit import configure_logging
from realme_auth.utils.exceptions import ConfigurationError


@click.group()
@click.version_option(version=__version__, prog_name="realme-auth")
@click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: ./config/realme.json)",
)
@click.option("--verbose", is_flag=True, help="Enable verbose logging (DEBUG level)")
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to log file (overrides config file)",
)
@click.option(
    "--redact-secrets",
    is_flag=True,
    help="Redact certificate and key material from logs",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    verbose: bool,
    log_file: Optional[Path],
    redact_secrets: bool,
) -> None:
    """RealMe SAML integration tools.

    Validates a RealMe configuration and produces the service provider
    metadata RealMe needs to onboard an environment.

    Common usage:

        # Validate configuration and print metadata for ITE
        realme-auth setup --for-env ite

        # Use custom configuration file
        realme-auth --config custom/realme.json setup --for-env prod
    """
    ctx.ensure_object(dict)

    try:
        config_obj = load_config(config)
        ctx.obj["config"] = config_obj
    except ConfigurationError as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        ctx.exit(1)

    # Precedence: CLI flags > config file > defaults
    log_level = "DEBUG" if verbose else config_obj.logging.level
    log_file_path = log_file if log_file else config_obj.logging.log_file
    redact_setting = redact_secrets or config_obj.logging.redact_secrets

    configure_logging(
        level=log_level, log_file=log_file_path, redact_secrets=redact_setting
    )


cli.add_command(setup)


@cli.command()
def version() -> None:
    """Display version information."""
    click.echo(f"realme-auth version {__version__}")


if __name__ == "__main__":
    cli()
