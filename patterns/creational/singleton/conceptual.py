"""
Singleton: a class with exactly one instance and a global access point.

The metaclass keeps one instance per class. The lock makes the first
construction safe when several threads race to it, which matters here
because the API serves examples from a thread pool.
"""

from threading import Lock
from typing import Any, Dict


class SingletonMeta(type):
    _instances: Dict[type, Any] = {}
    _lock: Lock = Lock()

    def __call__(cls, *args, **kwargs):
        with cls._lock:
            if cls not in cls._instances:
                cls._instances[cls] = super().__call__(*args, **kwargs)
        return cls._instances[cls]

    def get_instance(cls):
        return cls()


class Singleton(metaclass=SingletonMeta):
    def some_business_logic(self) -> None:
        """Any behaviour the single instance offers"""


def main() -> None:
    s1 = Singleton.get_instance()
    s2 = Singleton.get_instance()

    if id(s1) == id(s2):
        print("Singleton works, both variables contain the same instance.")
    else:
        print("Singleton failed, variables contain different instances.")


if __name__ == "__main__":
    main()
