"""
Ordering a meal: the facade coordinates kitchen, payment and delivery.
"""


class Restaurant:
    def prepare_meal(self, meal: str) -> None:
        print(f"Preparing the meal: {meal}...")


class DeliveryService:
    def deliver_meal(self, meal: str, address: str) -> None:
        print(f"Delivering {meal} to {address}...")


class PaymentProcessor:
    def process_payment(self, amount: float) -> None:
        print(f"Processing payment of ${amount:.2f}...")


class MealOrderFacade:
    def __init__(self):
        self.restaurant = Restaurant()
        self.delivery_service = DeliveryService()
        self.payment_processor = PaymentProcessor()

    def place_order(self, meal: str, address: str, amount: float) -> None:
        print(f"Placing order for: {meal}...")
        self.restaurant.prepare_meal(meal)
        self.payment_processor.process_payment(amount)
        self.delivery_service.deliver_meal(meal, address)
        print("Order completed successfully!")


def main() -> None:
    MealOrderFacade().place_order("Pizza Margherita", "123 Main St", 20.50)


if __name__ == "__main__":
    main()
