"""
Remote controls (abstraction) driving different devices (implementation).
"""

from abc import ABC, abstractmethod


class Device(ABC):
    name = "Device"

    def __init__(self):
        self.power = False
        self.volume = 0

    def toggle_power(self) -> str:
        self.power = not self.power
        return f"{self.name} is now {'ON' if self.power else 'OFF'}."

    def set_volume(self, level: int) -> str:
        self.volume = level
        return f"{self.name} volume set to {level}."

    @abstractmethod
    def set_channel(self, channel: int) -> str:
        pass


class Television(Device):
    name = "Television"

    def __init__(self):
        super().__init__()
        self.volume = 10
        self.channel = 1

    def set_channel(self, channel: int) -> str:
        self.channel = channel
        return f"Television channel set to {channel}."


class Radio(Device):
    name = "Radio"

    def __init__(self):
        super().__init__()
        self.volume = 5
        self.frequency = 101.5

    def set_channel(self, channel: int) -> str:
        # A radio tunes a frequency instead of a channel number
        self.frequency = channel
        return f"Radio frequency set to {channel} MHz."


class DeviceController:
    def __init__(self, device: Device):
        self.device = device

    def toggle_power(self) -> str:
        return f"Controller: Toggling power...\n{self.device.toggle_power()}"

    def adjust_volume(self, level: int) -> str:
        return f"Controller: Adjusting volume...\n{self.device.set_volume(level)}"


class AdvancedDeviceController(DeviceController):
    def set_channel(self, channel: int) -> str:
        return f"Controller: Changing channel...\n{self.device.set_channel(channel)}"


def client_code(controller: DeviceController) -> None:
    print(controller.toggle_power())
    print(controller.adjust_volume(15))
    if isinstance(controller, AdvancedDeviceController):
        print(controller.set_channel(7))


def main() -> None:
    print("Client: Testing Television controller:")
    client_code(AdvancedDeviceController(Television()))

    print("\nClient: Testing Radio controller:")
    client_code(DeviceController(Radio()))


if __name__ == "__main__":
    main()
