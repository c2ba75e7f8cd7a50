"""Custom exception classes for the RealMe integration.

All exceptions inherit from RealMeError to allow catching all custom exceptions.
"""

from typing import Iterable


class RealMeError(Exception):
    """Base exception for all RealMe integration custom exceptions."""

    pass


class ConfigurationError(RealMeError):
    """Raised when configuration loading fails.

    Examples:
        - Invalid configuration file format
        - Configuration value of the wrong type
    """

    pass


class ExecutionContextError(RealMeError):
    """Raised when an operation is invoked outside the context it allows.

    The setup task emits certificate data and organisation contact details,
    so it refuses to run anywhere but the command line.
    """

    pass


class TemplateError(RealMeError):
    """Base exception for metadata template processing errors."""

    pass


class TemplateLoadError(TemplateError):
    """Raised when template file cannot be loaded.

    Examples:
        - File not found
        - Permission denied
        - Encoding errors
    """

    pass


class CertificateLoadError(RealMeError):
    """Raised when the signing certificate cannot be loaded.

    Examples:
        - Certificate file not found
        - File contains no PEM certificate block
        - Corrupted certificate data
    """

    pass


class SetupValidationError(RealMeError):
    """Raised when a setup validation run collected one or more issues.

    Attributes:
        errors: Every issue found, in the order the checks reported them
    """

    def __init__(self, errors: Iterable[str]) -> None:
        self.errors = list(errors)
        issues = "".join(f"\n - {error}" for error in self.errors)
        super().__init__(
            f"There were {len(self.errors)} issue(s) found during validation. "
            f"Please fix these issues and try again:{issues}"
        )
