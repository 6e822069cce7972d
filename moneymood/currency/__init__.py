"""Exchange rates and home-currency conversion."""

from .client import ExchangeRateApiClient
from .converter import ExpenseConverter
from .models import (
    FALLBACK_RATES,
    HOME_CURRENCY,
    SUPPORTED_CURRENCIES,
    Conversion,
    RateEntry,
    RateSource,
    get_supported_currencies,
)
from .rate_provider import RateProvider
from moneymood.cache import RateCache
from moneymood.config import Config
from moneymood.utils.logging import get_logger


logger = get_logger(__name__)


def build_converter(config: Config) -> ExpenseConverter:
    """Wire client, cache, provider and converter from configuration."""
    client = ExchangeRateApiClient(url=config.rates_url, timeout=config.request_timeout)
    provider = RateProvider(client=client, cache=RateCache(ttl_seconds=config.cache_ttl))
    supported = config.supported_currencies or SUPPORTED_CURRENCIES
    logger.debug(f"Building converter for home currency {config.home_currency}")
    return ExpenseConverter(
        provider=provider,
        home_currency=config.home_currency,
        supported=supported,
        max_amount=config.max_amount,
    )


__all__ = [
    "Conversion",
    "ExchangeRateApiClient",
    "ExpenseConverter",
    "FALLBACK_RATES",
    "HOME_CURRENCY",
    "RateEntry",
    "RateProvider",
    "RateSource",
    "SUPPORTED_CURRENCIES",
    "build_converter",
    "get_supported_currencies",
]
