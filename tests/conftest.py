"""Pytest configuration and fixtures."""
import tempfile
from pathlib import Path

import pytest
import yaml

from crypto_tracker.config import reset_config


SAMPLE_RESPONSE = (
    '{"bitcoin":{"usd":11000.32,"usd_24h_change":-0.05},'
    '"ethereum":{"usd":6000.23,"usd_24h_change":0.0}}'
)


@pytest.fixture
def sample_response():
    return SAMPLE_RESPONSE


@pytest.fixture
def temp_config_file():
    """Create a temporary config file for testing."""
    config_data = {
        'app': {
            'name': 'Test Tracker',
        },
        'api': {
            'coingecko': {
                'base_url': 'https://example.test/api/v3/',
            },
        },
        'refresh': {
            'interval_seconds': 15,
        },
        'logging': {
            'level': 'DEBUG',
            'format': 'text',
        },
    }

    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        yaml.dump(config_data, f)
        config_path = f.name

    yield config_path

    # Cleanup
    Path(config_path).unlink()


@pytest.fixture(autouse=True)
def clear_config(monkeypatch):
    """Reset the global config and LOG_LEVEL before each test."""
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    reset_config()
    yield
    reset_config()
