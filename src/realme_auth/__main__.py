"""Entry point for running realme_auth as a module.

This allows the package to be executed as:
    python -m realme_auth
"""

from realme_auth.cli.main import cli

if __name__ == "__main__":
    cli()
