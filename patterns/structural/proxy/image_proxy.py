"""
Virtual proxy: the expensive image is only loaded the first time it is shown.
"""

from abc import ABC, abstractmethod
from typing import Optional


class Image(ABC):
    @abstractmethod
    def display(self) -> None:
        pass


class RealImage(Image):
    def __init__(self, file_name: str):
        self.file_name = file_name

    def display(self) -> None:
        print(f"Displaying image: {self.file_name}")


class ProxyImage(Image):
    def __init__(self, file_name: str):
        self.file_name = file_name
        self._real_image: Optional[RealImage] = None

    @property
    def loaded(self) -> bool:
        return self._real_image is not None

    def display(self) -> None:
        if self._real_image is None:
            print(f"Loading image: {self.file_name}")
            self._real_image = RealImage(self.file_name)
        self._real_image.display()


def client_code(image: Image) -> None:
    image.display()
    image.display()


def main() -> None:
    print("Executing client code with RealSubject:")
    client_code(RealImage("photo.jpg"))
    print()

    print("Executing client code with Proxy:")
    client_code(ProxyImage("photo.jpg"))


if __name__ == "__main__":
    main()
