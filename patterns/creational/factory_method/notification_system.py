"""
Senders pick the notification service; the connect/send/disconnect cycle is shared.
"""

from abc import ABC, abstractmethod


class NotificationService(ABC):
    @abstractmethod
    def connect(self) -> None:
        pass

    @abstractmethod
    def send(self, message: str) -> None:
        pass

    @abstractmethod
    def disconnect(self) -> None:
        pass


class EmailService(NotificationService):
    def __init__(self, email: str, password: str):
        self.email = email
        self.password = password

    def connect(self) -> None:
        print(f"Connecting to email service with {self.email}...")

    def send(self, message: str) -> None:
        print(f"Sending email to {self.email}: {message}")

    def disconnect(self) -> None:
        print("Disconnecting from email service...")


class SMSService(NotificationService):
    def __init__(self, phone_number: str):
        self.phone_number = phone_number

    def connect(self) -> None:
        print(f"Connecting to SMS service for {self.phone_number}...")

    def send(self, message: str) -> None:
        print(f"Sending SMS to {self.phone_number}: {message}")

    def disconnect(self) -> None:
        print("Disconnecting from SMS service...")


class NotificationSender(ABC):
    @abstractmethod
    def get_notification_service(self) -> NotificationService:
        pass

    def send_notification(self, message: str) -> None:
        service = self.get_notification_service()
        service.connect()
        service.send(message)
        service.disconnect()


class EmailNotificationSender(NotificationSender):
    def __init__(self, email: str, password: str):
        self.email = email
        self.password = password

    def get_notification_service(self) -> NotificationService:
        return EmailService(self.email, self.password)


class SMSNotificationSender(NotificationSender):
    def __init__(self, phone_number: str):
        self.phone_number = phone_number

    def get_notification_service(self) -> NotificationService:
        return SMSService(self.phone_number)


def main() -> None:
    print("Sending Email Notification:")
    EmailNotificationSender("john@example.com", "emailpassword").send_notification(
        "Hello via Email!"
    )

    print("\nSending SMS Notification:")
    SMSNotificationSender("+123456789").send_notification("Hello via SMS!")


if __name__ == "__main__":
    main()
