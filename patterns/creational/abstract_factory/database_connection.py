"""
One factory per database engine: connection and query objects always match.
"""

from abc import ABC, abstractmethod


class Connection(ABC):
    @abstractmethod
    def connect(self) -> str:
        pass


class Query(ABC):
    @abstractmethod
    def execute(self, sql: str) -> str:
        pass


class MySQLConnection(Connection):
    def connect(self) -> str:
        return "Connected to MySQL database."


class PostgreSQLConnection(Connection):
    def connect(self) -> str:
        return "Connected to PostgreSQL database."


class MySQLQuery(Query):
    def execute(self, sql: str) -> str:
        return f"Executing MySQL query: {sql}"


class PostgreSQLQuery(Query):
    def execute(self, sql: str) -> str:
        return f"Executing PostgreSQL query: {sql}"


class DatabaseFactory(ABC):
    @abstractmethod
    def create_connection(self) -> Connection:
        pass

    @abstractmethod
    def create_query(self) -> Query:
        pass


class MySQLFactory(DatabaseFactory):
    def create_connection(self) -> Connection:
        return MySQLConnection()

    def create_query(self) -> Query:
        return MySQLQuery()


class PostgreSQLFactory(DatabaseFactory):
    def create_connection(self) -> Connection:
        return PostgreSQLConnection()

    def create_query(self) -> Query:
        return PostgreSQLQuery()


def client_code(factory: DatabaseFactory) -> None:
    print(factory.create_connection().connect())
    print(factory.create_query().execute("SELECT * FROM users"))


def main() -> None:
    print("Testing MySQL factory:")
    client_code(MySQLFactory())

    print("\nTesting PostgreSQL factory:")
    client_code(PostgreSQLFactory())


if __name__ == "__main__":
    main()
