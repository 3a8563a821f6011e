"""
Notification providers that bundle an email and an SMS service.
"""

from abc import ABC, abstractmethod


class EmailNotification(ABC):
    @abstractmethod
    def send(self, message: str) -> str:
        pass


class SMSNotification(ABC):
    @abstractmethod
    def send(self, message: str) -> str:
        pass


class GmailEmailNotification(EmailNotification):
    def send(self, message: str) -> str:
        return f"Sending email via Gmail: {message}"


class GmailSMSNotification(SMSNotification):
    def send(self, message: str) -> str:
        return f"Sending SMS via Gmail: {message}"


class YahooEmailNotification(EmailNotification):
    def send(self, message: str) -> str:
        return f"Sending email via Yahoo: {message}"


class YahooSMSNotification(SMSNotification):
    def send(self, message: str) -> str:
        return f"Sending SMS via Yahoo: {message}"


class NotificationFactory(ABC):
    @abstractmethod
    def create_email_notification(self) -> EmailNotification:
        pass

    @abstractmethod
    def create_sms_notification(self) -> SMSNotification:
        pass


class GmailFactory(NotificationFactory):
    def create_email_notification(self) -> EmailNotification:
        return GmailEmailNotification()

    def create_sms_notification(self) -> SMSNotification:
        return GmailSMSNotification()


class YahooFactory(NotificationFactory):
    def create_email_notification(self) -> EmailNotification:
        return YahooEmailNotification()

    def create_sms_notification(self) -> SMSNotification:
        return YahooSMSNotification()


def send_notifications(factory: NotificationFactory, message: str) -> None:
    print(factory.create_email_notification().send(message))
    print(factory.create_sms_notification().send(message))


def main() -> None:
    print("Testing Gmail notification factory:")
    send_notifications(GmailFactory(), "Your order has shipped.")

    print("\nTesting Yahoo notification factory:")
    send_notifications(YahooFactory(), "Your order has shipped.")


if __name__ == "__main__":
    main()
