"""
Document processing jobs kept in a persistent command queue.

Each command knows its document and how to process it; the queue decides when
it runs. Running the module twice shows the queue is only seeded when empty.
"""

from abc import abstractmethod

from patterns.behavioral.command.queue import CommandQueue, QueuedCommand

QUEUE_NAME = "document_processing"


class DocumentCommand(QueuedCommand):
    document: str

    def execute(self, queue: CommandQueue) -> None:
        self.process()
        self.complete(queue)

    @abstractmethod
    def process(self) -> None:
        pass


class PrintDocumentCommand(DocumentCommand):
    def process(self) -> None:
        print(f"PrintDocumentCommand: Printing document '{self.document}'.")


class SaveDocumentCommand(DocumentCommand):
    def process(self) -> None:
        print(f"SaveDocumentCommand: Saving document '{self.document}'.")


class ConvertDocumentCommand(DocumentCommand):
    def process(self) -> None:
        print(f"ConvertDocumentCommand: Converting document '{self.document}'.")


def main() -> None:
    queue = CommandQueue.get(QUEUE_NAME)

    if queue.is_empty():
        queue.add(PrintDocumentCommand(document="Document1.pdf"))
        queue.add(SaveDocumentCommand(document="Document1.pdf"))
        queue.add(ConvertDocumentCommand(document="Document1.pdf"))

    processed = queue.work()
    print(f"Client: The queue processed {processed} command(s).")


if __name__ == "__main__":
    main()
