"""
Assembling gaming and office computers from the same build steps.
"""

from abc import ABC, abstractmethod
from typing import Dict


class Computer:
    def __init__(self) -> None:
        self.parts: Dict[str, str] = {}

    def show_parts(self) -> None:
        print("Computer Configuration:")
        for name, value in self.parts.items():
            print(f"{name}: {value}")


class ComputerBuilder(ABC):
    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self._computer = Computer()

    def set_cpu(self, cpu: str) -> "ComputerBuilder":
        self._computer.parts["CPU"] = cpu
        return self

    def set_ram(self, ram: str) -> "ComputerBuilder":
        self._computer.parts["RAM"] = ram
        return self

    def set_storage(self, storage: str) -> "ComputerBuilder":
        self._computer.parts["Storage"] = storage
        return self

    @abstractmethod
    def set_graphics_card(self, gpu: str) -> "ComputerBuilder":
        pass

    def get_computer(self) -> Computer:
        computer = self._computer
        self.reset()
        return computer


class GamingComputerBuilder(ComputerBuilder):
    def set_graphics_card(self, gpu: str) -> "ComputerBuilder":
        self._computer.parts["GraphicsCard"] = gpu
        return self


class OfficeComputerBuilder(ComputerBuilder):
    def set_graphics_card(self, gpu: str) -> "ComputerBuilder":
        # office machines always ship with the onboard chip
        self._computer.parts["GraphicsCard"] = "Integrated GPU"
        return self


class Director:
    def build_gaming_computer(self, builder: ComputerBuilder) -> Computer:
        return (
            builder.set_cpu("Intel i9")
            .set_ram("32GB")
            .set_storage("1TB SSD")
            .set_graphics_card("NVIDIA RTX 3090")
            .get_computer()
        )

    def build_office_computer(self, builder: ComputerBuilder) -> Computer:
        return (
            builder.set_cpu("Intel i5")
            .set_ram("16GB")
            .set_storage("500GB SSD")
            .set_graphics_card("NVIDIA RTX 3090")
            .get_computer()
        )


def main() -> None:
    director = Director()

    print("Building Gaming Computer:")
    director.build_gaming_computer(GamingComputerBuilder()).show_parts()

    print("\nBuilding Office Computer:")
    director.build_office_computer(OfficeComputerBuilder()).show_parts()


if __name__ == "__main__":
    main()
