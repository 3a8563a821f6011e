"""
Shapes that clone themselves; recolouring a clone leaves the original alone.
"""

import copy
from abc import ABC, abstractmethod
from typing import Optional


class Shape(ABC):
    def __init__(self) -> None:
        self.color: Optional[str] = None

    def set_color(self, color: str) -> None:
        self.color = color

    def clone(self) -> "Shape":
        return copy.deepcopy(self)

    @abstractmethod
    def draw(self) -> str:
        pass


class Circle(Shape):
    def __init__(self, radius: int):
        super().__init__()
        self.radius = radius

    def draw(self) -> str:
        return f"Drawing a circle with radius {self.radius} and color {self.color}"


class Rectangle(Shape):
    def __init__(self, width: int, height: int):
        super().__init__()
        self.width = width
        self.height = height

    def draw(self) -> str:
        return (
            f"Drawing a rectangle with width {self.width}, height {self.height} "
            f"and color {self.color}"
        )


def main() -> None:
    circle = Circle(10)
    circle.set_color("Red")
    cloned_circle = circle.clone()
    cloned_circle.set_color("Blue")

    rectangle = Rectangle(20, 10)
    rectangle.set_color("Green")
    cloned_rectangle = rectangle.clone()
    cloned_rectangle.set_color("Yellow")

    print(f"Original Circle: {circle.draw()}")
    print(f"Cloned Circle: {cloned_circle.draw()}")

    print(f"\nOriginal Rectangle: {rectangle.draw()}")
    print(f"Cloned Rectangle: {cloned_rectangle.draw()}")


if __name__ == "__main__":
    main()
