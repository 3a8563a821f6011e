"""
Proxy: a stand-in that controls access to the real subject.
"""

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger("patterns.proxy")


class Subject(ABC):
    @abstractmethod
    def request(self) -> None:
        pass


class RealSubject(Subject):
    def request(self) -> None:
        print("RealSubject: Handling request.")


class Proxy(Subject):
    def __init__(self, real_subject: RealSubject):
        self._real_subject = real_subject

    def request(self) -> None:
        if self.check_access():
            self._real_subject.request()
            self.log_access()

    def check_access(self) -> bool:
        print("Proxy: Checking access prior to firing a real request.")
        return True

    def log_access(self) -> None:
        print("Proxy: Logging the time of request.")
        logger.info("Request forwarded to %s", type(self._real_subject).__name__)


def client_code(subject: Subject) -> None:
    subject.request()


def main() -> None:
    print("Client: Executing the client code with a real subject:")
    real_subject = RealSubject()
    client_code(real_subject)

    print()

    print("Client: Executing the same client code with a proxy:")
    client_code(Proxy(real_subject))


if __name__ == "__main__":
    main()
