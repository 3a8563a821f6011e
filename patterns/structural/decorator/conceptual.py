"""
Decorator: wrap an object to add behaviour while keeping its interface.
"""


class Component:
    def operation(self) -> str:
        raise NotImplementedError


class ConcreteComponent(Component):
    def operation(self) -> str:
        return "ConcreteComponent"


class Decorator(Component):
    def __init__(self, component: Component):
        self._component = component

    @property
    def component(self) -> Component:
        return self._component

    def operation(self) -> str:
        return self._component.operation()


class ConcreteDecoratorA(Decorator):
    def operation(self) -> str:
        return f"ConcreteDecoratorA({self.component.operation()})"


class ConcreteDecoratorB(Decorator):
    def operation(self) -> str:
        return f"ConcreteDecoratorB({self.component.operation()})"


def client_code(component: Component) -> None:
    print(f"RESULT: {component.operation()}")


def main() -> None:
    simple = ConcreteComponent()
    print("Client: I've got a simple component:")
    client_code(simple)
    print()

    decorated = ConcreteDecoratorB(ConcreteDecoratorA(simple))
    print("Client: Now I've got a decorated component:")
    client_code(decorated)


if __name__ == "__main__":
    main()
