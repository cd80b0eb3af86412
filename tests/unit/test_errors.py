"""Tests for custom errors."""
from crypto_tracker.utils.errors import (
    ConfigurationError,
    CryptoTrackerError,
    DataProviderError,
    ParseError,
    TerminalError,
    TransportError,
)


def test_error_hierarchy():
    """Test error inheritance."""
    assert issubclass(ConfigurationError, CryptoTrackerError)
    assert issubclass(DataProviderError, CryptoTrackerError)
    assert issubclass(TransportError, DataProviderError)
    assert issubclass(ParseError, DataProviderError)
    assert issubclass(TerminalError, CryptoTrackerError)
    assert not issubclass(TerminalError, DataProviderError)


def test_error_messages():
    """Test error messages."""
    error = TransportError("Test message")
    assert str(error) == "Test message"
