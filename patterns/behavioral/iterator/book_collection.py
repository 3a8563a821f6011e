"""
A hand-written iterator object over a list of books.
"""

from typing import List


class BookIterator:
    def __init__(self, books: List[str]):
        self._books = books
        self._position = 0

    def __iter__(self) -> "BookIterator":
        return self

    def __next__(self) -> str:
        if self._position >= len(self._books):
            raise StopIteration()
        book = self._books[self._position]
        self._position += 1
        return book


class BookCollection:
    """Iterable collection; every loop gets a fresh BookIterator"""

    def __init__(self, books: List[str] = None):
        self._books = list(books or [])

    def add_book(self, title: str) -> None:
        self._books.append(title)

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> BookIterator:
        return BookIterator(self._books)


def main() -> None:
    books = BookCollection(
        [
            "The Catcher in the Rye",
            "To Kill a Mockingbird",
            "1984",
            "Pride and Prejudice",
        ]
    )
    for index, book in enumerate(books):
        print(f"Book {index}: {book}")


if __name__ == "__main__":
    main()
