"""
Iterate a CSV file row by row without loading it into memory.
"""

import csv
from pathlib import Path
from typing import Iterator, List, Tuple, Union

from app.config import settings
from app.exceptions import NotFoundError


class CsvIterator:
    """
    Yields ``(row_number, row)`` pairs, numbering from 1 like a spreadsheet.

    The file is opened for each pass and closed as soon as the pass ends,
    so the iterator can be walked more than once.
    """

    def __init__(self, path: Union[str, Path], delimiter: str = ","):
        self.path = Path(path)
        if not self.path.is_file():
            raise NotFoundError(
                f'The file "{self.path}" does not exist.', code="FILE_NOT_FOUND"
            )
        self.delimiter = delimiter

    def __iter__(self) -> Iterator[Tuple[int, List[str]]]:
        with self.path.open(newline="", encoding="utf-8") as handle:
            reader = csv.reader(handle, delimiter=self.delimiter)
            for row_number, row in enumerate(reader, start=1):
                yield row_number, row


def main(path: Union[str, Path] = None) -> None:
    try:
        rows = CsvIterator(path or settings.cats_csv_path)
        for row_number, row in rows:
            print(f"{row_number}: {row}")
    except NotFoundError as e:
        print(f"Error: {e}")


if __name__ == "__main__":
    main()
