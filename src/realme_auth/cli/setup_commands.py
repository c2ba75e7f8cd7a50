"""RealMe setup CLI command.

Commands:
    setup --for-env <env> - Validate configuration and print metadata XML
"""

import logging
import sys

import click

from realme_auth.config import RealMeConfigService
from realme_auth.config.constants import ALLOWED_ENVIRONMENTS
from realme_auth.setup import SetupOrchestrator

logger = logging.getLogger(__name__)


@click.command(name="setup")
@click.option(
    "--for-env",
    "for_env",
    required=True,
    help=f"RealMe environment to generate metadata for ({', '.join(ALLOWED_ENVIRONMENTS)})",
)
@click.pass_context
def setup(ctx: click.Context, for_env: str) -> None:
    """Validate the RealMe configuration and print metadata XML.

    Every configuration problem is listed at once. When the configuration is
    valid, the metadata XML for the environment is printed so it can be sent
    to RealMe Operations.

    Exit Codes:
        0: Metadata generated
        1: Validation failed or the metadata template could not be read

    Example:
        realme-auth setup --for-env ite
    """
    config = ctx.obj["config"]
    orchestrator = SetupOrchestrator(RealMeConfigService(config))

    if not orchestrator.run(for_env):
        sys.exit(1)
