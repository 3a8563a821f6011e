"""
Iterator as a generator: the collection yields its users one at a time.
"""

from typing import Dict, Iterator, List, Union

User = Dict[str, Union[int, str]]


class UserCollection:
    def __init__(self, users: List[User]):
        self._users = users

    def __iter__(self) -> Iterator[User]:
        for user in self._users:
            yield user


def main() -> None:
    users = UserCollection(
        [
            {"id": 1, "name": "John Doe"},
            {"id": 2, "name": "Jane Smith"},
            {"id": 3, "name": "Emily Johnson"},
        ]
    )
    for index, user in enumerate(users):
        print(f"User {index}: ID: {user['id']}, Name: {user['name']}")


if __name__ == "__main__":
    main()
