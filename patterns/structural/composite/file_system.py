"""
Files and folders: a folder's size is the sum of whatever it contains.
"""

from abc import ABC, abstractmethod
from typing import List


class FilesystemItem(ABC):
    def __init__(self, name: str):
        self.name = name

    @property
    @abstractmethod
    def size(self) -> int:
        pass

    @abstractmethod
    def render(self) -> List[str]:
        """Lines describing the item, children indented under their folder"""


class File(FilesystemItem):
    def __init__(self, name: str, size: int):
        super().__init__(name)
        self._size = size

    @property
    def size(self) -> int:
        return self._size

    def render(self) -> List[str]:
        return [f"File: {self.name} ({self.size} KB)"]


class Folder(FilesystemItem):
    def __init__(self, name: str):
        super().__init__(name)
        self._items: List[FilesystemItem] = []

    def add(self, item: FilesystemItem) -> "Folder":
        self._items.append(item)
        return self

    def remove(self, item: FilesystemItem) -> None:
        self._items = [child for child in self._items if child is not item]

    @property
    def size(self) -> int:
        return sum(item.size for item in self._items)

    def render(self) -> List[str]:
        lines = [f"Folder: {self.name} (Total: {self.size} KB)"]
        for item in self._items:
            lines.extend(f"  {line}" for line in item.render())
        return lines


def create_filesystem() -> Folder:
    documents = Folder("documents")
    documents.add(File("resume.pdf", 120)).add(File("cover_letter.docx", 80))

    pictures = Folder("pictures")
    pictures.add(File("photo1.jpg", 500)).add(File("photo2.png", 700))

    music = Folder("music")
    music.add(File("song1.mp3", 5000)).add(File("song2.mp3", 4500))

    root = Folder("root")
    root.add(documents).add(pictures).add(music)
    return root


def main() -> None:
    print("\n".join(create_filesystem().render()))


if __name__ == "__main__":
    main()
