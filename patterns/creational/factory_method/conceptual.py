"""
Factory Method: let subclasses decide which product the creator works with.
"""

from abc import ABC, abstractmethod


class Product(ABC):
    @abstractmethod
    def operation(self) -> str:
        pass


class ConcreteProduct1(Product):
    def operation(self) -> str:
        return "{Result of the ConcreteProduct1}"


class ConcreteProduct2(Product):
    def operation(self) -> str:
        return "{Result of the ConcreteProduct2}"


class Creator(ABC):
    @abstractmethod
    def factory_method(self) -> Product:
        pass

    def some_operation(self) -> str:
        product = self.factory_method()
        return f"Creator: The same creator's code has just worked with {product.operation()}"


class ConcreteCreator1(Creator):
    def factory_method(self) -> Product:
        return ConcreteProduct1()


class ConcreteCreator2(Creator):
    def factory_method(self) -> Product:
        return ConcreteProduct2()


def client_code(creator: Creator) -> None:
    print(
        "Client: I'm not aware of the creator's class, but it still works.\n"
        f"{creator.some_operation()}"
    )


def main() -> None:
    print("App: Launched with the ConcreteCreator1.")
    client_code(ConcreteCreator1())
    print()

    print("App: Launched with the ConcreteCreator2.")
    client_code(ConcreteCreator2())


if __name__ == "__main__":
    main()
