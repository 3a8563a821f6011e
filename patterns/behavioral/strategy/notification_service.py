"""
Pick the delivery channel of a notification at runtime.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.exceptions import ServiceValidationError


class NotificationMethod(ABC):
    @abstractmethod
    def send_notification(self, recipient: str, message: str) -> None:
        pass


class EmailNotification(NotificationMethod):
    def send_notification(self, recipient: str, message: str) -> None:
        print(f"Sending Email to {recipient}: {message}")


class SMSNotification(NotificationMethod):
    def send_notification(self, recipient: str, message: str) -> None:
        print(f"Sending SMS to {recipient}: {message}")


class PushNotification(NotificationMethod):
    def send_notification(self, recipient: str, message: str) -> None:
        print(f"Sending Push Notification to {recipient}: {message}")


class NotificationService:
    def __init__(self):
        self._method: Optional[NotificationMethod] = None

    def set_notification_method(self, method: NotificationMethod) -> None:
        self._method = method

    def send(self, recipient: str, message: str) -> None:
        if self._method is None:
            raise ServiceValidationError(
                "No notification method set.", code="NO_NOTIFICATION_METHOD"
            )
        self._method.send_notification(recipient, message)


def main() -> None:
    print("Client: Setting up the Notification Service.")
    service = NotificationService()

    try:
        service.send("user@example.com", "Is anybody there?")
    except ServiceValidationError as e:
        print(f"Error: {e}")

    print("Client: Choosing Email Notification.")
    service.set_notification_method(EmailNotification())
    service.send("user@example.com", "Welcome to our service!")

    print("Client: Switching to SMS Notification.")
    service.set_notification_method(SMSNotification())
    service.send("+1234567890", "Your OTP is 1234.")

    print("Client: Switching to Push Notification.")
    service.set_notification_method(PushNotification())
    service.send("DeviceID123", "You have a new message!")


if __name__ == "__main__":
    main()
