"""Default configuration values.

This module defines the default configuration values used when no configuration
file is provided or when configuration values are not specified.
"""

from typing import Any

# Default configuration dictionary
# RealMe values have no defaults; the setup validator reports them as missing
DEFAULT_CONFIG: dict[str, Any] = {
    "certificates": {
        "cert_dir": None,
        "signing_cert_filename": None,
    },
    "entity_id": None,
    "template_config_dir": None,
    "environments": {},
    "metadata": {
        "organisation_name": None,
        "organisation_display_name": None,
        "organisation_url": None,
        "contact_support": {
            "company": None,
            "first_names": None,
            "surname": None,
        },
    },
    "logging": {
        # Default log level: INFO (moderate verbosity)
        "level": "INFO",
        "log_file": "logs/realme-auth.log",
        # Certificate payloads are logged unless the user opts in to redaction
        "redact_secrets": False,
    },
}

# Default configuration file path
DEFAULT_CONFIG_PATH = "config/realme.json"
