"""
Adapter: make an incompatible class usable through the interface clients expect.
"""


class Target:
    def request(self) -> str:
        return "Target: The default target's behavior."


class Adaptee:
    def specific_request(self) -> str:
        return ".eetpadA eht fo roivaheb laicepS"


class Adapter(Target):
    def __init__(self, adaptee: Adaptee):
        self.adaptee = adaptee

    def request(self) -> str:
        return f"Adapter: (TRANSLATED) {self.adaptee.specific_request()[::-1]}"


def client_code(target: Target) -> None:
    print(target.request())


def main() -> None:
    print("Client: I can work just fine with the Target objects:")
    client_code(Target())
    print()

    adaptee = Adaptee()
    print("Client: The Adaptee class has a weird interface. See, I don't understand it:")
    print(f"Adaptee: {adaptee.specific_request()}")
    print()

    print("Client: But I can work with it via the Adapter:")
    client_code(Adapter(adaptee))


if __name__ == "__main__":
    main()
