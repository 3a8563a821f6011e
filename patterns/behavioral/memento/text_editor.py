"""
Undo history for a text editor.
"""

from typing import List


class Memento:
    def __init__(self, content: str):
        self._content = content

    @property
    def content(self) -> str:
        return self._content


class TextEditor:
    def __init__(self, content: str = ""):
        self.content = content

    def save(self) -> Memento:
        print("TextEditor: Saving current content to Memento.")
        return Memento(self.content)

    def restore(self, memento: Memento) -> None:
        self.content = memento.content
        print(f"TextEditor: Restoring content from Memento: {self.content}")


class History:
    def __init__(self):
        self._mementos: List[Memento] = []

    def add_memento(self, memento: Memento) -> None:
        self._mementos.append(memento)

    def get_memento(self, index: int) -> Memento:
        return self._mementos[index]

    def undo(self) -> Memento:
        """Drop and return the latest snapshot"""
        return self._mementos.pop()


def main() -> None:
    editor = TextEditor("Hello World!")
    history = History()

    history.add_memento(editor.save())
    editor.content = "Hello, Python World!"
    history.add_memento(editor.save())
    editor.content = "Hello, Memento Pattern!"

    print(f"Current content: {editor.content}")

    editor.restore(history.get_memento(1))
    print(f"Restored content: {editor.content}")

    editor.restore(history.get_memento(0))
    print(f"Initial content: {editor.content}")


if __name__ == "__main__":
    main()
