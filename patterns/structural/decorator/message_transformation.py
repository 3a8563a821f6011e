"""
Stackable text transformations.
"""

import codecs


class Message:
    def get_text(self, text: str) -> str:
        return text


class MessageDecorator(Message):
    def __init__(self, message: Message):
        self._message = message

    def get_text(self, text: str) -> str:
        return self._message.get_text(text)


class ReverseTextDecorator(MessageDecorator):
    def get_text(self, text: str) -> str:
        return super().get_text(text)[::-1]


class UppercaseDecorator(MessageDecorator):
    def get_text(self, text: str) -> str:
        return super().get_text(text).upper()


class EncryptionDecorator(MessageDecorator):
    """ROT13, which is about as much encryption as a demo deserves"""

    def get_text(self, text: str) -> str:
        return codecs.encode(super().get_text(text), "rot13")


def main() -> None:
    text = "Hello, World!"

    message = Message()
    print("Original Message:")
    print(message.get_text(text))

    reversed_message = ReverseTextDecorator(message)
    print("\nReversed Message:")
    print(reversed_message.get_text(text))

    uppercase = UppercaseDecorator(reversed_message)
    print("\nReversed and Uppercase Message:")
    print(uppercase.get_text(text))

    encrypted = EncryptionDecorator(uppercase)
    print("\nReversed, Uppercase, and Encrypted Message:")
    print(encrypted.get_text(text))


if __name__ == "__main__":
    main()
