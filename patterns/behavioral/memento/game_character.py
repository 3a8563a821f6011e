"""
Save points for a game character.

The memento is immutable, and only the character knows how to fill it and how
to read it back; the caretaker merely keeps the list.
"""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Memento:
    health: int
    level: int
    position: str


class GameCharacter:
    def __init__(self, health: int, level: int, position: str):
        self.set_state(health, level, position)

    def set_state(self, health: int, level: int, position: str) -> None:
        self._health = health
        self._level = level
        self._position = position

    def get_state(self) -> str:
        return f"Health: {self._health}, Level: {self._level}, Position: {self._position}"

    def save(self) -> Memento:
        print("GameCharacter: Saving current state to Memento.")
        return Memento(self._health, self._level, self._position)

    def restore(self, memento: Memento) -> None:
        self.set_state(memento.health, memento.level, memento.position)
        print(f"GameCharacter: Restoring state from Memento: {self.get_state()}")


class Caretaker:
    def __init__(self):
        self._mementos: List[Memento] = []

    def add_memento(self, memento: Memento) -> None:
        self._mementos.append(memento)

    def get_memento(self, index: int) -> Memento:
        return self._mementos[index]


def main() -> None:
    character = GameCharacter(100, 1, "Town")
    caretaker = Caretaker()

    caretaker.add_memento(character.save())
    character.set_state(80, 2, "Dungeon")
    caretaker.add_memento(character.save())
    character.set_state(50, 3, "Boss Room")

    print(f"Current state: {character.get_state()}")

    character.restore(caretaker.get_memento(1))
    print(f"Restored state: {character.get_state()}")

    character.restore(caretaker.get_memento(0))
    print(f"Initial state: {character.get_state()}")


if __name__ == "__main__":
    main()
