"""RealMe SAML integration: identity model and setup task."""

__version__ = "0.1.0"
