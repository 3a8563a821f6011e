"""
Order checks linked into a chain; the first failing check stops the order.
"""

from typing import Any, Dict, Optional

Order = Dict[str, Any]


class OrderHandler:
    _next_handler: Optional["OrderHandler"] = None

    def link_with(self, handler: "OrderHandler") -> "OrderHandler":
        self._next_handler = handler
        return handler

    def handle(self, order: Order) -> bool:
        if self._next_handler:
            return self._next_handler.handle(order)
        return True


class ItemsInOrderHandler(OrderHandler):
    def handle(self, order: Order) -> bool:
        if not order.get("items"):
            print("ItemsInOrderHandler: The order must contain at least one item.")
            return False
        return super().handle(order)


class PaymentHandler(OrderHandler):
    valid_payment_methods = ("credit_card", "paypal")

    def handle(self, order: Order) -> bool:
        if order.get("payment_method") not in self.valid_payment_methods:
            print("PaymentHandler: Invalid payment method.")
            return False
        return super().handle(order)


class ShippingAddressHandler(OrderHandler):
    def handle(self, order: Order) -> bool:
        if not order.get("shipping_address"):
            print("ShippingAddressHandler: Shipping address is required.")
            return False
        return super().handle(order)


def validate_order(order: Order) -> bool:
    handler = ItemsInOrderHandler()
    handler.link_with(PaymentHandler()).link_with(ShippingAddressHandler())

    if handler.handle(order):
        print("Order is valid. Processing...")
        return True
    print("Order validation failed.")
    return False


def main() -> None:
    orders = [
        {
            "items": [],
            "payment_method": "credit_card",
            "shipping_address": "123 Elm Street",
        },
        {
            "items": ["item1", "item2"],
            "payment_method": "bitcoin",
            "shipping_address": "123 Elm Street",
        },
        {
            "items": ["item1"],
            "payment_method": "paypal",
            "shipping_address": "456 Maple Avenue",
        },
    ]
    for index, order in enumerate(orders):
        if index:
            print()
        validate_order(order)


if __name__ == "__main__":
    main()
