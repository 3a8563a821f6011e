"""
Payment processors that create the gateway connector they talk to.
"""

from abc import ABC, abstractmethod


class PaymentGatewayConnector(ABC):
    @abstractmethod
    def connect(self) -> None:
        pass

    @abstractmethod
    def pay(self, amount: float) -> None:
        pass

    @abstractmethod
    def disconnect(self) -> None:
        pass


class PayPalConnector(PaymentGatewayConnector):
    def __init__(self, username: str, password: str):
        self.username = username
        self.password = password

    def connect(self) -> None:
        print(f"Connecting to PayPal using {self.username}...")

    def pay(self, amount: float) -> None:
        print(f"Paying ${amount:.2f} via PayPal...")

    def disconnect(self) -> None:
        print("Disconnecting from PayPal...")


class StripeConnector(PaymentGatewayConnector):
    def __init__(self, api_key: str):
        self.api_key = api_key

    def connect(self) -> None:
        print(f"Connecting to Stripe with API key {self.api_key}...")

    def pay(self, amount: float) -> None:
        print(f"Paying ${amount:.2f} via Stripe...")

    def disconnect(self) -> None:
        print("Disconnecting from Stripe...")


class PaymentProcessor(ABC):
    @abstractmethod
    def get_payment_gateway(self) -> PaymentGatewayConnector:
        pass

    def process_payment(self, amount: float) -> None:
        gateway = self.get_payment_gateway()
        gateway.connect()
        gateway.pay(amount)
        gateway.disconnect()


class PayPalProcessor(PaymentProcessor):
    def __init__(self, username: str, password: str):
        self.username = username
        self.password = password

    def get_payment_gateway(self) -> PaymentGatewayConnector:
        return PayPalConnector(self.username, self.password)


class StripeProcessor(PaymentProcessor):
    def __init__(self, api_key: str):
        self.api_key = api_key

    def get_payment_gateway(self) -> PaymentGatewayConnector:
        return StripeConnector(self.api_key)


def main() -> None:
    print("Using PayPal Processor:")
    PayPalProcessor("user_paypal", "secret").process_payment(100.50)

    print("\nUsing Stripe Processor:")
    StripeProcessor("stripe_api_key").process_payment(200.75)


if __name__ == "__main__":
    main()
