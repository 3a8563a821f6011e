"""
Platform look-and-feel families of widgets.
"""

from abc import ABC, abstractmethod


class Button(ABC):
    @abstractmethod
    def render(self) -> str:
        pass


class Checkbox(ABC):
    @abstractmethod
    def render(self) -> str:
        pass

    @abstractmethod
    def toggle(self) -> str:
        pass


class WindowsButton(Button):
    def render(self) -> str:
        return "Rendering Windows button."


class MacButton(Button):
    def render(self) -> str:
        return "Rendering Mac button."


class WindowsCheckbox(Checkbox):
    def render(self) -> str:
        return "Rendering Windows checkbox."

    def toggle(self) -> str:
        return "Toggling Windows checkbox."


class MacCheckbox(Checkbox):
    def render(self) -> str:
        return "Rendering Mac checkbox."

    def toggle(self) -> str:
        return "Toggling Mac checkbox."


class GUIFactory(ABC):
    @abstractmethod
    def create_button(self) -> Button:
        pass

    @abstractmethod
    def create_checkbox(self) -> Checkbox:
        pass


class WindowsFactory(GUIFactory):
    def create_button(self) -> Button:
        return WindowsButton()

    def create_checkbox(self) -> Checkbox:
        return WindowsCheckbox()


class MacFactory(GUIFactory):
    def create_button(self) -> Button:
        return MacButton()

    def create_checkbox(self) -> Checkbox:
        return MacCheckbox()


def render_ui(factory: GUIFactory) -> None:
    button = factory.create_button()
    checkbox = factory.create_checkbox()
    print(button.render())
    print(checkbox.render())
    print(checkbox.toggle())


def main() -> None:
    print("Testing Windows UI factory:")
    render_ui(WindowsFactory())

    print("\nTesting Mac UI factory:")
    render_ui(MacFactory())


if __name__ == "__main__":
    main()
