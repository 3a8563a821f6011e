"""
A fluent SQL builder with one concrete builder per dialect.

Only SELECT is implemented as a statement type; WHERE and LIMIT validate the
statement they are attached to and raise ServiceValidationError otherwise.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from app.exceptions import ServiceValidationError


class SQLQueryBuilder(ABC):
    @abstractmethod
    def select(self, table: str, fields: List[str]) -> "SQLQueryBuilder":
        pass

    @abstractmethod
    def where(self, field: str, value: str, operator: str = "=") -> "SQLQueryBuilder":
        pass

    @abstractmethod
    def limit(self, start: int, offset: int) -> "SQLQueryBuilder":
        pass

    @abstractmethod
    def get_sql(self) -> str:
        pass


class MysqlQueryBuilder(SQLQueryBuilder):
    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self._base = ""
        self._type: Optional[str] = None
        self._where: List[str] = []
        self._limit = ""

    def select(self, table: str, fields: List[str]) -> "SQLQueryBuilder":
        self.reset()
        self._base = f"SELECT {', '.join(fields)} FROM {table}"
        self._type = "select"
        return self

    def where(self, field: str, value: str, operator: str = "=") -> "SQLQueryBuilder":
        if self._type not in ("select", "update", "delete"):
            raise ServiceValidationError(
                "WHERE can only be added to SELECT, UPDATE OR DELETE",
                code="INVALID_QUERY",
            )
        self._where.append(f"{field} {operator} '{value}'")
        return self

    def limit(self, start: int, offset: int) -> "SQLQueryBuilder":
        if self._type != "select":
            raise ServiceValidationError(
                "LIMIT can only be added to SELECT", code="INVALID_QUERY"
            )
        self._limit = self._render_limit(start, offset)
        return self

    def _render_limit(self, start: int, offset: int) -> str:
        return f" LIMIT {start}, {offset}"

    def get_sql(self) -> str:
        sql = self._base
        if self._where:
            sql += " WHERE " + " AND ".join(self._where)
        sql += self._limit
        return sql + ";"


class PostgresQueryBuilder(MysqlQueryBuilder):
    def _render_limit(self, start: int, offset: int) -> str:
        return f" LIMIT {start} OFFSET {offset}"


def client_code(builder: SQLQueryBuilder) -> str:
    query = (
        builder.select("users", ["name", "email", "password"])
        .where("age", "18", ">")
        .where("age", "30", "<")
        .limit(10, 20)
        .get_sql()
    )
    print(query)
    return query


def main() -> None:
    print("Testing MySQL query builder:")
    client_code(MysqlQueryBuilder())

    print("\nTesting PostgreSQL query builder:")
    client_code(PostgresQueryBuilder())


if __name__ == "__main__":
    main()
