"""
Payment channels bridged to interchangeable payment gateways.
"""

from abc import ABC, abstractmethod


class PaymentGateway(ABC):
    @abstractmethod
    def process_payment(self, amount: float) -> str:
        pass


class PayPalGateway(PaymentGateway):
    def process_payment(self, amount: float) -> str:
        return f"PayPalGateway: Processing payment of ${amount:.2f} through PayPal."


class StripeGateway(PaymentGateway):
    def process_payment(self, amount: float) -> str:
        return f"StripeGateway: Processing payment of ${amount:.2f} through Stripe."


class Payment(ABC):
    def __init__(self, gateway: PaymentGateway):
        self.gateway = gateway

    @abstractmethod
    def pay(self, amount: float) -> str:
        pass


class OnlinePayment(Payment):
    def pay(self, amount: float) -> str:
        return (
            "OnlinePayment: Initiating online payment...\n"
            f"{self.gateway.process_payment(amount)}"
        )


class InStorePayment(Payment):
    def pay(self, amount: float) -> str:
        return (
            "InStorePayment: Initiating in-store payment...\n"
            f"{self.gateway.process_payment(amount)}"
        )


def main() -> None:
    print(OnlinePayment(PayPalGateway()).pay(100.00))
    print()
    print(InStorePayment(StripeGateway()).pay(250.50))


if __name__ == "__main__":
    main()
