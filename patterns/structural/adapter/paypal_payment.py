"""
Let checkout code pay through PayPal's login-then-pay API as if it were a card.
"""

from abc import ABC, abstractmethod


class PaymentProcessor(ABC):
    @abstractmethod
    def pay(self, amount: int) -> None:
        pass


class CreditCardPayment(PaymentProcessor):
    def pay(self, amount: int) -> None:
        print(f"Processing credit card payment of ${amount}.")


class PayPalPayment:
    def __init__(self, email: str, password: str):
        self.email = email
        self._password = password
        self.logged_in = False

    def login(self) -> None:
        self.logged_in = True
        print(f"Logged in to PayPal account '{self.email}'.")

    def make_payment(self, amount: int) -> None:
        print(f"PayPal processing payment of ${amount}.")


class PayPalPaymentAdapter(PaymentProcessor):
    def __init__(self, paypal: PayPalPayment):
        self._paypal = paypal

    def pay(self, amount: int) -> None:
        if not self._paypal.logged_in:
            self._paypal.login()
        self._paypal.make_payment(amount)


def client_code(processor: PaymentProcessor) -> None:
    processor.pay(100)


def main() -> None:
    print("Using CreditCardPayment:")
    client_code(CreditCardPayment())

    print("\nUsing PayPalPayment with Adapter:")
    adapter = PayPalPaymentAdapter(PayPalPayment("user@example.com", "securepassword"))
    client_code(adapter)


if __name__ == "__main__":
    main()
