"""
Mediator built on an event dispatcher.

Components never talk to each other directly: a ``User`` that deletes itself
just announces ``users:deleted`` and the repository, which subscribed to that
event, does the bookkeeping. The dispatcher is the only object everyone knows.
"""

import json
import threading
import uuid
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from app.config import settings

WILDCARD = "*"


class Observer(ABC):
    @abstractmethod
    def update(self, event: str, emitter: object, data: Any = None) -> None:
        pass


class EventDispatcher:
    def __init__(self):
        self._observers: Dict[str, List[Observer]] = {WILDCARD: []}

    def _event_observers(self, event: str = WILDCARD) -> List[Observer]:
        group = self._observers.setdefault(event, [])
        if event == WILDCARD:
            return list(group)
        return group + self._observers[WILDCARD]

    def attach(self, observer: Observer, event: str = WILDCARD) -> None:
        self._observers.setdefault(event, []).append(observer)

    def detach(self, observer: Observer, event: str = WILDCARD) -> None:
        group = self._observers.get(event, [])
        self._observers[event] = [o for o in group if o is not observer]

    def trigger(self, event: str, emitter: object, data: Any = None) -> None:
        print(f"EventDispatcher: Broadcasting the '{event}' event.")
        for observer in self._event_observers(event):
            observer.update(event, emitter, data)


_dispatcher: Optional[EventDispatcher] = None
_dispatcher_lock = threading.Lock()


def events() -> EventDispatcher:
    """The dispatcher shared by every component of the example"""
    global _dispatcher
    with _dispatcher_lock:
        if _dispatcher is None:
            _dispatcher = EventDispatcher()
        return _dispatcher


def reset_events() -> None:
    """Drop the shared dispatcher; the next events() call builds a new one"""
    global _dispatcher
    with _dispatcher_lock:
        _dispatcher = None


class User:
    def __init__(self):
        self.attributes: Dict[str, Any] = {}

    def update(self, data: Dict[str, Any]) -> None:
        self.attributes.update(data)

    def delete(self) -> None:
        print("User: I can now delete myself without worrying about the repository.")
        events().trigger("users:deleted", self, self)


class UserRepository(Observer):
    def __init__(self):
        self._users: Dict[str, User] = {}
        events().attach(self, "users:deleted")

    def __len__(self) -> int:
        return len(self._users)

    def update(self, event: str, emitter: object, data: Any = None) -> None:
        if event == "users:deleted":
            self.delete_user(data, silent=True)

    def initialize(self, filename: str) -> None:
        print("UserRepository: Loading user records from a file.")
        events().trigger("users:init", self, filename)

    def create_user(self, data: Dict[str, Any], silent: bool = False) -> User:
        print("UserRepository: Creating a user.")
        user = User()
        user.update(data)
        user.update({"id": uuid.uuid4().hex})
        self._users[user.attributes["id"]] = user

        if not silent:
            events().trigger("users:created", self, user)
        return user

    def update_user(
        self, user: User, data: Dict[str, Any], silent: bool = False
    ) -> Optional[User]:
        print("UserRepository: Updating a user.")
        stored = self._users.get(user.attributes.get("id"))
        if stored is None:
            return None
        stored.update(data)

        if not silent:
            events().trigger("users:updated", self, stored)
        return stored

    def delete_user(self, user: User, silent: bool = False) -> None:
        print("UserRepository: Deleting a user.")
        if self._users.pop(user.attributes.get("id"), None) is None:
            return

        if not silent:
            events().trigger("users:deleted", self, user)


def _to_json(value: Any) -> Any:
    return getattr(value, "attributes", str(value))


class Logger(Observer):
    """Appends one line per event to a log file, starting from an empty file"""

    def __init__(self, filename: Union[str, Path]):
        self.filename = Path(filename)
        self.filename.unlink(missing_ok=True)

    def update(self, event: str, emitter: object, data: Any = None) -> None:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        entry = f"{timestamp}: '{event}' with data '{json.dumps(data, default=_to_json)}'\n"
        with self.filename.open("a", encoding="utf-8") as log_file:
            log_file.write(entry)
        print(f"Logger: I've written '{event}' entry to the log.")


class OnboardingNotification(Observer):
    def __init__(self, admin_email: str):
        self.admin_email = admin_email

    def update(self, event: str, emitter: object, data: Any = None) -> None:
        print("OnboardingNotification: The notification has been emailed!")


def main() -> None:
    # Each run wires a fresh dispatcher
    reset_events()

    repository = UserRepository()
    events().attach(repository, "facebook:update")

    events().attach(Logger(settings.event_log_path), WILDCARD)
    events().attach(OnboardingNotification("1@example.com"), "users:created")

    repository.initialize("users.csv")

    user = repository.create_user(
        {"name": "John Smith", "email": "john99@example.com"}
    )
    repository.update_user(user, {"email": "john.smith@example.com"})
    user.delete()


if __name__ == "__main__":
    main()
