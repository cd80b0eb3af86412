"""Custom exception classes for the Crypto Tracker."""


class CryptoTrackerError(Exception):
    """Base exception for all Crypto Tracker errors."""
    pass


class ConfigurationError(CryptoTrackerError):
    """Raised when there's a configuration error."""
    pass


class DataProviderError(CryptoTrackerError):
    """Base exception for price provider errors."""
    pass


class TransportError(DataProviderError):
    """Raised when the price API cannot be reached or answers with an error status."""
    pass


class ParseError(DataProviderError):
    """Raised when the price API response is malformed or incomplete."""
    pass


class TerminalError(CryptoTrackerError):
    """Raised when the terminal display cannot be acquired or released."""
    pass
