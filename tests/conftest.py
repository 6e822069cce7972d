"""Pytest configuration and fixtures."""
import pytest
from pathlib import Path
import tempfile
import yaml

from moneymood.cache import RateCache
from moneymood.config import reset_config
from moneymood.currency.converter import ExpenseConverter
from moneymood.currency.rate_provider import RateProvider
from tests.helpers import FakeClock, StubRateClient


@pytest.fixture
def temp_config_file():
    """Create a temporary config file for testing."""
    config_data = {
        'app': {
            'name': 'Test App',
            'version': '0.1.0',
            'debug': True
        },
        'currency': {
            'home': 'JPY',
            'rates_url': 'https://rates.example.test/latest/JPY',
            'timeout': 5,
            'cache_ttl': 120
        },
        'validation': {
            'max_amount': 1000000
        },
        'logging': {
            'level': 'DEBUG',
            'format': 'text'
        }
    }
    
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        yaml.dump(config_data, f)
        config_path = f.name
    
    yield config_path
    
    Path(config_path).unlink()


@pytest.fixture(autouse=True)
def clear_config():
    """Reset the global config before and after each test."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def rate_client():
    return StubRateClient()


@pytest.fixture
def provider(rate_client, clock):
    return RateProvider(client=rate_client, cache=RateCache(ttl_seconds=300), clock=clock)


@pytest.fixture
def converter(provider):
    return ExpenseConverter(provider=provider)
