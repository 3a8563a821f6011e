"""
Builder: construct a complex object step by step.

The director knows a couple of useful build orders, but the client may
also drive the builder directly.
"""

from abc import ABC, abstractmethod
from typing import List


class Product1:
    def __init__(self) -> None:
        self.parts: List[str] = []

    def add(self, part: str) -> None:
        self.parts.append(part)

    def list_parts(self) -> None:
        print(f"Product parts: {', '.join(self.parts)}", end="\n\n")


class Builder(ABC):
    @property
    @abstractmethod
    def product(self) -> Product1:
        pass

    @abstractmethod
    def produce_part_a(self) -> None:
        pass

    @abstractmethod
    def produce_part_b(self) -> None:
        pass

    @abstractmethod
    def produce_part_c(self) -> None:
        pass


class ConcreteBuilder1(Builder):
    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self._product = Product1()

    @property
    def product(self) -> Product1:
        """Hand over the finished product and start a fresh one"""
        product = self._product
        self.reset()
        return product

    def produce_part_a(self) -> None:
        self._product.add("PartA1")

    def produce_part_b(self) -> None:
        self._product.add("PartB1")

    def produce_part_c(self) -> None:
        self._product.add("PartC1")


class Director:
    def __init__(self) -> None:
        self._builder = None

    @property
    def builder(self) -> Builder:
        return self._builder

    @builder.setter
    def builder(self, builder: Builder) -> None:
        self._builder = builder

    def build_minimal_viable_product(self) -> None:
        self.builder.produce_part_a()

    def build_full_featured_product(self) -> None:
        self.builder.produce_part_a()
        self.builder.produce_part_b()
        self.builder.produce_part_c()


def main() -> None:
    director = Director()
    builder = ConcreteBuilder1()
    director.builder = builder

    print("Standard basic product:")
    director.build_minimal_viable_product()
    builder.product.list_parts()

    print("Standard full featured product:")
    director.build_full_featured_product()
    builder.product.list_parts()

    print("Custom product:")
    builder.produce_part_a()
    builder.produce_part_c()
    builder.product.list_parts()


if __name__ == "__main__":
    main()
