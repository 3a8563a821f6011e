"""
Process-wide logger and config singletons.

``log`` is the convenience entry point; it asks the ``Config`` singleton for
the minimum level and lets the ``Logger`` singleton write the line.
"""

from datetime import date
from typing import Any, Dict, Optional

from patterns.creational.singleton.conceptual import SingletonMeta

LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}


class Logger(metaclass=SingletonMeta):
    def write_log(self, message: str, level: str = "INFO") -> None:
        print(f"{date.today().isoformat()} [{level}]: {message}")


class Config(metaclass=SingletonMeta):
    def __init__(self) -> None:
        self._values: Dict[str, Any] = {"log_level": "INFO"}

    def get_value(self, key: str) -> Optional[Any]:
        return self._values.get(key)

    def set_value(self, key: str, value: Any) -> None:
        self._values[key] = value


def log(message: str, level: str = "INFO") -> bool:
    """Write message if level reaches the configured minimum. Returns whether it was written."""
    threshold = LEVELS.get(str(Config.get_instance().get_value("log_level")).upper(), 20)
    if LEVELS.get(level.upper(), 20) < threshold:
        return False
    Logger.get_instance().write_log(message, level.upper())
    return True


def main() -> None:
    config = Config.get_instance()
    config.set_value("log_level", "INFO")

    log("Started!")

    l1 = Logger.get_instance()
    l2 = Logger.get_instance()
    if l1 is l2:
        log("Logger has a single instance.")
    else:
        log("Loggers are different.")

    login, password = "test_login", "test_password"
    config.set_value("login", login)
    config.set_value("password", password)

    config2 = Config.get_instance()
    if config2.get_value("login") == login and config2.get_value("password") == password:
        log("Config singleton also works fine.")

    log("This debug line is filtered out.", "DEBUG")
    log("Finished!")


if __name__ == "__main__":
    main()
