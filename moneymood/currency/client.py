"""ExchangeRate-API client for home-currency based rate tables."""
from __future__ import annotations

from typing import Dict

import httpx

from moneymood.currency.models import HOME_CURRENCY
from moneymood.utils.decorators import log_execution
from moneymood.utils.errors import DataProviderError
from moneymood.utils.logging import get_logger


logger = get_logger(__name__)

DEFAULT_RATES_URL = f"https://api.exchangerate-api.com/v4/latest/{HOME_CURRENCY}"


class ExchangeRateApiClient:
    """Fetches the full rate table for the home currency.

    Response shape: ``{"base": "JPY", "rates": {"USD": 0.0067, ...}}``.
    Any network failure, non-2xx status or malformed payload is raised as
    ``DataProviderError``.
    """

    NAME = "exchangerate_api"

    def __init__(self, url: str = DEFAULT_RATES_URL, timeout: float = 10.0) -> None:
        self.url = url
        self.timeout = timeout

    @log_execution(log_args=False, log_result=False)
    async def fetch_rates(self) -> Dict[str, float]:
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.get(self.url)
                resp.raise_for_status()
                data = resp.json()
        except Exception as e:
            logger.error(f"Rate source request failed: {e}")
            raise DataProviderError(str(e)) from e

        rates = data.get("rates") if isinstance(data, dict) else None
        if not isinstance(rates, dict) or not rates:
            logger.error("Rate source response is missing 'rates'")
            raise DataProviderError("Invalid response from rate source: missing rates")

        parsed: Dict[str, float] = {}
        for code, value in rates.items():
            if isinstance(value, bool):
                continue
            try:
                rate = float(value)
            except (TypeError, ValueError):
                logger.warning(f"Skipping non-numeric rate for {code}: {value!r}")
                continue
            if rate > 0:
                parsed[str(code).upper()] = rate

        if not parsed:
            raise DataProviderError("Invalid response from rate source: no usable rates")

        logger.info(f"Fetched {len(parsed)} rates from {self.NAME}", extra={"source": self.NAME})
        return parsed

    async def health_check(self) -> bool:
        """Return True when the rate source answers with a usable table."""
        try:
            await self.fetch_rates()
            return True
        except DataProviderError:
            return False
