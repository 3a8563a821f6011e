"""
Shapes and renderers vary independently: any shape can be drawn by any renderer.
"""

from abc import ABC, abstractmethod


class Renderer(ABC):
    @abstractmethod
    def render_circle(self, radius: float) -> str:
        pass

    @abstractmethod
    def render_rectangle(self, width: float, height: float) -> str:
        pass


class VectorRenderer(Renderer):
    def render_circle(self, radius: float) -> str:
        return f"VectorRenderer: Drawing a circle with radius {radius:g}."

    def render_rectangle(self, width: float, height: float) -> str:
        return f"VectorRenderer: Drawing a rectangle with dimensions {width:g}x{height:g}."


class RasterRenderer(Renderer):
    def render_circle(self, radius: float) -> str:
        return f"RasterRenderer: Drawing pixels for a circle with radius {radius:g}."

    def render_rectangle(self, width: float, height: float) -> str:
        return (
            "RasterRenderer: Drawing pixels for a rectangle with dimensions "
            f"{width:g}x{height:g}."
        )


class Shape(ABC):
    def __init__(self, renderer: Renderer):
        self.renderer = renderer

    @abstractmethod
    def draw(self) -> str:
        pass

    @abstractmethod
    def resize(self, factor: float) -> str:
        pass


class Circle(Shape):
    def __init__(self, renderer: Renderer, radius: float):
        super().__init__(renderer)
        self.radius = radius

    def draw(self) -> str:
        return self.renderer.render_circle(self.radius)

    def resize(self, factor: float) -> str:
        self.radius *= factor
        return f"Circle resized to new radius: {self.radius:g}"


class Rectangle(Shape):
    def __init__(self, renderer: Renderer, width: float, height: float):
        super().__init__(renderer)
        self.width = width
        self.height = height

    def draw(self) -> str:
        return self.renderer.render_rectangle(self.width, self.height)

    def resize(self, factor: float) -> str:
        self.width *= factor
        self.height *= factor
        return f"Rectangle resized to new dimensions: {self.width:g}x{self.height:g}"


def client_code(shape: Shape) -> None:
    print(shape.draw())
    print(shape.resize(2))
    print(shape.draw())


def main() -> None:
    client_code(Circle(VectorRenderer(), 5))
    print()
    client_code(Rectangle(RasterRenderer(), 4, 6))


if __name__ == "__main__":
    main()
