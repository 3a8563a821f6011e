"""
Application-wide settings shared through a single object.
"""

from typing import Any, Dict, Optional

from patterns.creational.singleton.conceptual import SingletonMeta


class AppSettings(metaclass=SingletonMeta):
    def __init__(self) -> None:
        self._settings: Dict[str, Any] = {
            "appName": "My Application",
            "version": "1.0.0",
        }

    def get(self, key: str) -> Optional[Any]:
        return self._settings.get(key)

    def set(self, key: str, value: Any) -> None:
        self._settings[key] = value


def main() -> None:
    settings = AppSettings.get_instance()
    print(f"App Name: {settings.get('appName')}")

    settings.set("version", "1.0.1")

    same_settings = AppSettings.get_instance()
    print(f"Updated Version: {same_settings.get('version')}")
    print(f"Same instance: {settings is same_settings}")


if __name__ == "__main__":
    main()
