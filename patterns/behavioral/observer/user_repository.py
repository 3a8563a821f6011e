"""
Observer with event groups.

The repository is the subject; observers subscribe either to one event name or
to ``"*"`` to receive everything.
"""

import json
import uuid
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from app.config import settings


class Observer(ABC):
    @abstractmethod
    def update(self, subject: "UserRepository", event: str, data: Any = None) -> None:
        pass


class User:
    def __init__(self):
        self.attributes: Dict[str, Any] = {}

    def update(self, data: Dict[str, Any]) -> None:
        self.attributes.update(data)


class UserRepository:
    def __init__(self):
        self._users: Dict[str, User] = {}
        self._observers: Dict[str, List[Observer]] = {"*": []}

    def _event_observers(self, event: str = "*") -> List[Observer]:
        group = self._observers.setdefault(event, [])
        if event == "*":
            return list(group)
        return group + self._observers["*"]

    def attach(self, observer: Observer, event: str = "*") -> None:
        self._observers.setdefault(event, []).append(observer)

    def detach(self, observer: Observer, event: str = "*") -> None:
        group = self._observers.get(event, [])
        self._observers[event] = [o for o in group if o is not observer]

    def notify(self, event: str = "*", data: Any = None) -> None:
        print(f"UserRepository: Broadcasting the '{event}' event.")
        for observer in self._event_observers(event):
            observer.update(self, event, data)

    def initialize(self, filename: str) -> None:
        print("UserRepository: Loading user records from a file.")
        self.notify("users:init", filename)

    def create_user(self, data: Dict[str, Any]) -> User:
        print("UserRepository: Creating a user.")
        user = User()
        user.update(data)
        user.update({"id": uuid.uuid4().hex})
        self._users[user.attributes["id"]] = user
        self.notify("users:created", user)
        return user

    def update_user(self, user: User, data: Dict[str, Any]) -> Optional[User]:
        print("UserRepository: Updating a user.")
        stored = self._users.get(user.attributes.get("id"))
        if stored is None:
            return None
        stored.update(data)
        self.notify("users:updated", stored)
        return stored

    def delete_user(self, user: User) -> None:
        print("UserRepository: Deleting a user.")
        if self._users.pop(user.attributes.get("id"), None) is None:
            return
        self.notify("users:deleted", user)


class Logger(Observer):
    def __init__(self, filename: Union[str, Path]):
        self.filename = Path(filename)
        # Start every run from an empty log
        self.filename.unlink(missing_ok=True)

    def update(self, subject: UserRepository, event: str, data: Any = None) -> None:
        payload = json.dumps(data, default=lambda o: getattr(o, "attributes", str(o)))
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with self.filename.open("a", encoding="utf-8") as log_file:
            log_file.write(f"{timestamp}: '{event}' with data '{payload}'\n")
        print(f"Logger: I've written '{event}' entry to the log.")


class OnboardingNotification(Observer):
    def __init__(self, admin_email: str):
        self.admin_email = admin_email

    def update(self, subject: UserRepository, event: str, data: Any = None) -> None:
        print(
            "OnboardingNotification: The notification has been emailed to "
            f"{self.admin_email}!"
        )


def main() -> None:
    repository = UserRepository()
    repository.attach(Logger(settings.event_log_path), "*")
    repository.attach(OnboardingNotification("admin@example.com"), "users:created")

    repository.initialize("users.csv")

    user = repository.create_user({"name": "John Doe", "email": "johndoe@example.com"})
    repository.update_user(user, {"email": "john.doe@example.com"})
    repository.delete_user(user)


if __name__ == "__main__":
    main()
