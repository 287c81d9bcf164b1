"""Domain-level exceptions.

The translator raises these errors for invalid configuration and malformed
translation map data. The HTTP and CLI surfaces catch them and map them to
status codes or exit codes.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainError):
    """Input violates a validation rule (e.g. malformed translation map)."""


class ConfigurationError(ValidationError):
    """Translator config provides neither a language token nor a custom map."""
