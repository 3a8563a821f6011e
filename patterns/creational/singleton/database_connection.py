"""
A single shared database connection.
"""

from patterns.creational.singleton.conceptual import SingletonMeta


class DatabaseConnection(metaclass=SingletonMeta):
    def __init__(self) -> None:
        self._connection = "Database Connection Established"

    def get_connection(self) -> str:
        return self._connection


def main() -> None:
    db1 = DatabaseConnection.get_instance()
    print(db1.get_connection())

    db2 = DatabaseConnection.get_instance()
    if db1 is db2:
        print("Only one instance of DatabaseConnection exists.")


if __name__ == "__main__":
    main()
