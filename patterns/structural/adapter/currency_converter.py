"""
Put a third-party exchange-rate API behind the converter interface the shop
already uses.
"""

from abc import ABC, abstractmethod
from typing import Dict

from app.exceptions import ServiceValidationError


class CurrencyCalculator(ABC):
    @abstractmethod
    def convert(self, amount: float, from_currency: str, to_currency: str) -> float:
        pass


class SimpleCurrencyConverter(CurrencyCalculator):
    exchange_rate = 0.85

    def convert(self, amount: float, from_currency: str, to_currency: str) -> float:
        print(
            f"Converting {amount} {from_currency} to {to_currency} "
            "via SimpleCurrencyConverter."
        )
        return amount * self.exchange_rate


class ExchangeRateAPI:
    """Stands in for a vendor SDK with its own method names"""

    conversion_rates: Dict[str, float] = {
        "USD_EUR": 0.85,
        "EUR_USD": 1.18,
    }

    def get_converted_amount(
        self, amount: float, currency_from: str, currency_to: str
    ) -> float:
        key = f"{currency_from}_{currency_to}"
        if key not in self.conversion_rates:
            raise ServiceValidationError(
                f"Conversion from {currency_from} to {currency_to} not available.",
                code="UNSUPPORTED_CURRENCY_PAIR",
            )
        print(f"Using the API to convert {amount} {currency_from} to {currency_to}.")
        return amount * self.conversion_rates[key]


class ExchangeRateAPIAdapter(CurrencyCalculator):
    def __init__(self, api: ExchangeRateAPI):
        self._api = api

    def convert(self, amount: float, from_currency: str, to_currency: str) -> float:
        return self._api.get_converted_amount(amount, from_currency, to_currency)


def client_code(calculator: CurrencyCalculator) -> float:
    converted = calculator.convert(100, "USD", "EUR")
    print(f"Converted amount: {converted:.2f} EUR")
    return converted


def main() -> None:
    print("Using SimpleCurrencyConverter:")
    client_code(SimpleCurrencyConverter())

    print("\nUsing ExchangeRateAPI through the Adapter:")
    client_code(ExchangeRateAPIAdapter(ExchangeRateAPI()))


if __name__ == "__main__":
    main()
