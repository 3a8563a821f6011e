"""
Cloning a page that references its author and carries reader comments.

A clone is a fresh draft: new title, new date, no comments, same author.
"""

import copy
from datetime import datetime
from typing import List


class Author:
    def __init__(self, name: str):
        self.name = name
        self.pages: List["Page"] = []

    def add_to_page(self, page: "Page") -> None:
        self.pages.append(page)


class Page:
    def __init__(self, title: str, body: str, author: Author):
        self.title = title
        self.body = body
        self.author = author
        self.author.add_to_page(self)
        self.comments: List[str] = []
        self.date = datetime.now()

    def add_comment(self, comment: str) -> None:
        self.comments.append(comment)

    def __copy__(self) -> "Page":
        clone = self.__class__.__new__(self.__class__)
        clone.title = f"Copy of {self.title}"
        clone.body = self.body
        clone.author = self.author
        clone.author.add_to_page(clone)
        clone.comments = []
        clone.date = datetime.now()
        return clone

    def clone(self) -> "Page":
        return copy.copy(self)

    def __repr__(self) -> str:
        return (
            f"Page(title={self.title!r}, body={self.body!r}, "
            f"author={self.author.name!r}, comments={self.comments!r})"
        )


def main() -> None:
    author = Author("John Smith")
    page = Page("Tip of the day", "Keep calm and carry on.", author)
    page.add_comment("Nice tip, thanks!")

    draft = page.clone()
    print("Dump of the clone. Note that the author is now referencing two objects.\n")
    print(draft)
    print(f"Original: {page}")
    print(f"Author pages: {[p.title for p in author.pages]}")


if __name__ == "__main__":
    main()
