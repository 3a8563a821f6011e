"""
Cloning documents: the copy keeps its author but gets a new title and timestamp.
"""

import copy
from datetime import datetime
from typing import Dict, List


class Author:
    def __init__(self, name: str):
        self.name = name
        self.documents: List["Document"] = []

    def add_document(self, document: "Document") -> None:
        self.documents.append(document)


class Document:
    def __init__(self, title: str, content: str, author: Author):
        self.title = title
        self.content = content
        self.author = author
        self.created_at = datetime.now()
        author.add_document(self)

    def __copy__(self) -> "Document":
        clone = self.__class__.__new__(self.__class__)
        clone.title = f"Copy of {self.title}"
        clone.content = self.content
        clone.author = self.author
        clone.created_at = datetime.now()
        self.author.add_document(clone)
        return clone

    def clone(self) -> "Document":
        return copy.copy(self)

    def get_details(self) -> Dict[str, str]:
        return {
            "Title": self.title,
            "Content": self.content,
            "Author": self.author.name,
            "CreatedAt": self.created_at.strftime("%Y-%m-%d %H:%M:%S"),
        }


def print_details(details: Dict[str, str]) -> None:
    for key, value in details.items():
        print(f"  {key}: {value}")


def main() -> None:
    author = Author("Jane Doe")
    original = Document("Design Patterns", "Learning the Prototype Pattern.", author)
    cloned = original.clone()

    print("Original Document:")
    print_details(original.get_details())

    print("\nCloned Document:")
    print_details(cloned.get_details())

    print(f"\n{author.name} now has {len(author.documents)} documents.")


if __name__ == "__main__":
    main()
