"""Config module.

This module provides configuration loading and the configuration provider
used by the setup task.
"""

from realme_auth.config.manager import load_config
from realme_auth.config.provider import (
    ConfigProvider,
    RealMeConfigService,
    SupportContact,
)
from realme_auth.config.schema import (
    CertificatesConfig,
    Config,
    EnvironmentConfig,
    LoggingConfig,
    MetadataConfig,
    SupportContactConfig,
)

__all__ = [
    # Main configuration loading
    "load_config",
    # Provider
    "ConfigProvider",
    "RealMeConfigService",
    "SupportContact",
    # Configuration models
    "Config",
    "CertificatesConfig",
    "EnvironmentConfig",
    "LoggingConfig",
    "MetadataConfig",
    "SupportContactConfig",
]
