"""Project-wide exception types."""


class FinsimError(Exception):
    """Base exception for all generator errors."""


class ConfigurationError(FinsimError):
    """Raised when supplied parameters cannot describe a valid series."""
