"""
Checkout where the payment method is a pluggable strategy.
"""

import itertools
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

from app.exceptions import ServiceValidationError


@dataclass
class Order:
    id: int
    email: str
    product: str
    total: float


class PaymentMethod(ABC):
    label = "Generic"

    @abstractmethod
    def pay(self, order: Order) -> str:
        pass

    def _receipt(self, order: Order) -> str:
        return (
            f"Processing {self.label} Payment for Order #{order.id}:\n"
            f"    Customer Email: {order.email}\n"
            f"    Product: {order.product}\n"
            f"    Total: ${order.total:.2f}\n"
            "    Payment Status: SUCCESS"
        )


class CreditCardPayment(PaymentMethod):
    label = "Credit Card"

    def pay(self, order: Order) -> str:
        return self._receipt(order)


class PayPalPayment(PaymentMethod):
    label = "PayPal"

    def pay(self, order: Order) -> str:
        return self._receipt(order)


class OrderController:
    def __init__(self):
        self._payment_method: Optional[PaymentMethod] = None
        self._order_ids = itertools.count(1)

    def set_payment_method(self, method: PaymentMethod) -> None:
        self._payment_method = method

    def process_order(self, order_data: Dict[str, Any]) -> Order:
        if self._payment_method is None:
            raise ServiceValidationError(
                "Choose a payment method first.", code="NO_PAYMENT_METHOD"
            )
        order = Order(id=next(self._order_ids), **order_data)
        print(f"OrderController: Created Order #{order.id}")
        print(self._payment_method.pay(order))
        return order


def main() -> None:
    print("Client: Let's create an order and pay with Credit Card.")
    controller = OrderController()
    controller.set_payment_method(CreditCardPayment())
    controller.process_order(
        {"email": "customer@example.com", "product": "Premium Headphones", "total": 199.99}
    )

    print("\nClient: Now, let's pay for another order with PayPal.")
    controller.set_payment_method(PayPalPayment())
    controller.process_order(
        {"email": "customer@example.com", "product": "Gaming Mouse", "total": 49.99}
    )


if __name__ == "__main__":
    main()
