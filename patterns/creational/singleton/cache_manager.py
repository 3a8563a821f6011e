"""
One in-memory cache for the whole process.
"""

from typing import Any, Dict, Optional

from patterns.creational.singleton.conceptual import SingletonMeta


class CacheManager(metaclass=SingletonMeta):
    def __init__(self) -> None:
        self._cache: Dict[str, Any] = {}

    def set(self, key: str, value: Any) -> None:
        self._cache[key] = value

    def get(self, key: str) -> Optional[Any]:
        return self._cache.get(key)


def main() -> None:
    writer = CacheManager.get_instance()
    writer.set("user_1", {"name": "John Doe", "email": "john@example.com"})

    reader = CacheManager.get_instance()
    print(f"Cached User: {reader.get('user_1')}")


if __name__ == "__main__":
    main()
