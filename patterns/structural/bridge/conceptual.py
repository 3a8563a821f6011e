"""
Bridge: split an abstraction from its implementation so both can vary.
"""

from abc import ABC, abstractmethod


class Implementation(ABC):
    @abstractmethod
    def operation_implementation(self) -> str:
        pass


class ConcreteImplementationA(Implementation):
    def operation_implementation(self) -> str:
        return "ConcreteImplementationA: Here's the result on the platform A."


class ConcreteImplementationB(Implementation):
    def operation_implementation(self) -> str:
        return "ConcreteImplementationB: Here's the result on the platform B."


class Abstraction:
    def __init__(self, implementation: Implementation):
        self.implementation = implementation

    def operation(self) -> str:
        return (
            "Abstraction: Base operation with:\n"
            f"{self.implementation.operation_implementation()}"
        )


class ExtendedAbstraction(Abstraction):
    def operation(self) -> str:
        return (
            "ExtendedAbstraction: Extended operation with:\n"
            f"{self.implementation.operation_implementation()}"
        )


def client_code(abstraction: Abstraction) -> None:
    print(abstraction.operation())


def main() -> None:
    client_code(Abstraction(ConcreteImplementationA()))
    print()
    client_code(ExtendedAbstraction(ConcreteImplementationB()))


if __name__ == "__main__":
    main()
