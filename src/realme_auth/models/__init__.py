"""Models module.

This module provides data models and dataclasses for the application.
"""

from realme_auth.models.identity import (
    RealMeFederatedIdentity,
    RealMeUser,
    SupportsValidity,
)

__all__ = [
    "RealMeFederatedIdentity",
    "RealMeUser",
    "SupportsValidity",
]
