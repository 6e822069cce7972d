"""Converts expense amounts into the home currency."""
from typing import Iterable, Mapping, Optional

from moneymood.currency.models import (
    FALLBACK_RATES,
    HOME_CURRENCY,
    SUPPORTED_CURRENCIES,
    Conversion,
    RateSource,
)
from moneymood.currency.rate_provider import RateProvider
from moneymood.utils.errors import CurrencyNotSupportedError, NetworkError
from moneymood.utils.logging import get_logger
from moneymood.utils.validation import MAX_AMOUNT, validate_amount, validate_currency_code


logger = get_logger(__name__)


class ExpenseConverter:
    """Stateless converter on top of a ``RateProvider``.

    Inputs are validated before any I/O. Rates are foreign units per home
    unit, so ``home_amount = amount / rate``; the recorded exchange rate is
    ``home_amount / amount``.
    """

    def __init__(
        self,
        provider: Optional[RateProvider] = None,
        home_currency: str = HOME_CURRENCY,
        supported: Iterable[str] = SUPPORTED_CURRENCIES,
        fallback_rates: Mapping[str, float] = FALLBACK_RATES,
        max_amount: float = MAX_AMOUNT,
    ):
        self.provider = provider or RateProvider()
        self.home_currency = home_currency
        self.supported = frozenset(supported)
        self.fallback_rates = fallback_rates
        self.max_amount = max_amount

    async def convert_to_home(self, amount, from_currency) -> float:
        """Return ``amount`` expressed in the home currency."""
        conversion = await self.convert(amount, from_currency)
        return conversion.home_amount

    async def convert(self, amount, from_currency) -> Conversion:
        """
        Convert an amount and report the effective exchange rate.

        Raises:
            ValidationError: Amount not finite, not positive or above the ceiling
            InvalidInputError: Currency code missing or malformed
            CurrencyNotSupportedError: Currency outside the supported set or without a rate
            NetworkError: Rate provider failed and the fallback table lacks the currency
        """
        amount = validate_amount(amount, max_amount=self.max_amount)
        currency = self.validate_currency(from_currency)

        if currency == self.home_currency:
            return Conversion(
                amount=amount,
                currency=currency,
                home_amount=amount,
                exchange_rate=1.0,
                home_currency=self.home_currency,
            )

        try:
            entry = await self.provider.get_rate(currency)
        except Exception as e:
            logger.error(
                f"Rate provider failed for {currency}: {e}",
                extra={"currency": currency},
            )
            rate = self.fallback_rates.get(currency)
            if rate is None:
                raise NetworkError(
                    f"Could not get an exchange rate for {currency}", details=str(e)
                ) from e
            return self._build(amount, currency, rate, RateSource.FALLBACK)

        if entry is None:
            raise CurrencyNotSupportedError(f"No exchange rate available for {currency}")

        return self._build(amount, currency, entry.rate, entry.source)

    def validate_currency(self, from_currency) -> str:
        currency = validate_currency_code(from_currency)
        if currency not in self.supported:
            raise CurrencyNotSupportedError(f"Currency {currency} is not supported")
        return currency

    def _build(self, amount: float, currency: str, rate: float, source: RateSource) -> Conversion:
        home_amount = amount / rate
        logger.debug(
            f"Converted {amount} {currency} -> {home_amount:.2f}",
            extra={"currency": currency, "source": source.value},
        )
        return Conversion(
            amount=amount,
            currency=currency,
            home_amount=home_amount,
            exchange_rate=home_amount / amount,
            rate_source=source,
            home_currency=self.home_currency,
        )
