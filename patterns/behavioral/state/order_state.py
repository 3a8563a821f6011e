"""
An order whose behaviour depends on the stage it is in.

Each state decides what "next" means and whether the order may still be
cancelled, then swaps itself out on the order.
"""

from abc import ABC, abstractmethod


class OrderState(ABC):
    name = "unknown"

    @abstractmethod
    def proceed_to_next(self, order: "Order") -> None:
        pass

    def cancel(self, order: "Order") -> bool:
        print(f"Order is {self.name} and can no longer be cancelled.")
        return False


class NewOrderState(OrderState):
    name = "new"

    def proceed_to_next(self, order: "Order") -> None:
        print("Order is new. Processing the order.")
        order.set_state(ShippedOrderState())

    def cancel(self, order: "Order") -> bool:
        print("Order is new. Cancelling the order.")
        order.set_state(CancelledOrderState())
        return True


class ShippedOrderState(OrderState):
    name = "shipped"

    def proceed_to_next(self, order: "Order") -> None:
        print("Order has been shipped. Waiting for delivery.")
        order.set_state(DeliveredOrderState())


class DeliveredOrderState(OrderState):
    name = "delivered"

    def proceed_to_next(self, order: "Order") -> None:
        print("Order has been delivered. Thank you for your purchase!")


class CancelledOrderState(OrderState):
    name = "cancelled"

    def proceed_to_next(self, order: "Order") -> None:
        print("Order was cancelled. Nothing left to process.")


class Order:
    def __init__(self):
        self._state: OrderState = NewOrderState()

    @property
    def state(self) -> OrderState:
        return self._state

    def set_state(self, state: OrderState) -> None:
        self._state = state

    def process_order(self) -> None:
        self._state.proceed_to_next(self)

    def cancel(self) -> bool:
        return self._state.cancel(self)


def main() -> None:
    order = Order()
    print("Processing the order:")
    order.process_order()
    order.process_order()
    order.process_order()
    order.cancel()

    print("\nCancelling a fresh order:")
    other = Order()
    other.cancel()
    other.process_order()


if __name__ == "__main__":
    main()
