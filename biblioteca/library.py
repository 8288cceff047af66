"""Book catalogue with reservations, loans and CSV import/export."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass, field
from typing import Iterator, Optional, Union

from biblioteca.cursorlist import CursorList

CSV_HEADER = "Título,Autor,Genero,ISBN,Ubicación,Estado"


class Status(str, enum.Enum):
    """Circulation state of a book."""

    AVAILABLE = "Disponible"
    RESERVED = "Reservado"
    LOANED = "Prestado"


class BookNotFoundError(LookupError):
    """No book with the given title and author is in the catalogue."""


class ReservationNotFoundError(LookupError):
    """The student holds no reservation for the book."""


class WithdrawalRefusedError(Exception):
    """The book cannot be withdrawn by this student right now."""


def _status_text(status: Union[Status, str]) -> str:
    return status.value if isinstance(status, Status) else status


def _parse_status(text: str) -> Union[Status, str]:
    try:
        return Status(text)
    except ValueError:
        return text


@dataclass(eq=False)
class Book:
    """A catalogue entry and its reservation queue."""

    title: str
    author: str
    genre: str = ""
    isbn: str = ""
    location: str = ""
    status: Union[Status, str] = Status.AVAILABLE
    reservations: CursorList = field(default_factory=CursorList)

    @property
    def status_text(self) -> str:
        return _status_text(self.status)


def get_csv_field(line: str, k: int) -> Optional[str]:
    """Return the k-th comma-separated field of ``line``, ignoring leading commas."""
    fields = line.lstrip(",").split(",")
    if 0 <= k < len(fields):
        return fields[k]
    return None


class Library:
    """The catalogue; the most recently added book comes first."""

    def __init__(self) -> None:
        self._books = CursorList()

    def __iter__(self) -> Iterator[Book]:
        return iter(self._books)

    def __len__(self) -> int:
        return len(self._books)

    def register(self, title: str, author: str, genre: str, isbn: str, location: str) -> Book:
        """Add a new available book with an empty reservation queue."""
        book = Book(title, author, genre, isbn, location)
        self._books.push_front(book)
        return book

    def find(self, title: str, author: str) -> Book:
        """Return the first book matching title and author exactly."""
        for book in self._books:
            if book.title == title and book.author == author:
                return book
        raise BookNotFoundError(f"{title!r} by {author!r} is not in the library")

    def reserve(self, title: str, author: str, student: str) -> Book:
        """Queue a reservation for ``student`` and mark the book reserved."""
        book = self.find(title, author)
        book.reservations.push_back(student)
        book.status = Status.RESERVED
        return book

    def cancel_reservation(self, title: str, author: str, student: str) -> Book:
        """Drop the student's reservation; the book becomes available when none remain."""
        book = self.find(title, author)
        queue = book.reservations
        entry = queue.first()
        while entry is not None:
            if entry == student:
                queue.pop_current()
                if queue.first() is None:
                    book.status = Status.AVAILABLE
                return book
            entry = queue.next()
        raise ReservationNotFoundError(f"{student!r} has no reservation for {title!r}")

    def withdraw(self, title: str, author: str, student: str) -> Book:
        """Lend the book if it is available or ``student`` is first in the queue."""
        book = self.find(title, author)
        if book.status == Status.AVAILABLE:
            book.status = Status.LOANED
            return book
        if book.status == Status.RESERVED and book.reservations.first() == student:
            book.reservations.pop_front()
            book.status = Status.LOANED
            return book
        raise WithdrawalRefusedError(f"{title!r} cannot be withdrawn by {student!r} now")

    def return_book(self, title: str, author: str) -> bool:
        """Mark the book available; return False if it already was."""
        book = self.find(title, author)
        if book.status in (Status.RESERVED, Status.LOANED):
            book.status = Status.AVAILABLE
            return True
        return False

    def loaned_books(self) -> list[Book]:
        """Books currently on loan, in catalogue order."""
        return [book for book in self._books if book.status == Status.LOANED]

    def import_csv(self, path: Union[str, os.PathLike]) -> list[Book]:
        """Load books from a CSV file whose first line is a header.

        Empty fields are skipped; the seventh field, if any, is taken as a
        single reservation. Each imported book is added to the front.
        """
        imported: list[Book] = []
        with open(path, encoding="utf-8") as handle:
            handle.readline()
            for line in handle:
                tokens = [t for t in line.rstrip("\r\n").split(",") if t]
                book = Book("", "")
                names = ("title", "author", "genre", "isbn", "location")
                for name, token in zip(names, tokens):
                    setattr(book, name, token)
                if len(tokens) > 5:
                    book.status = _parse_status(tokens[5])
                if len(tokens) > 6:
                    book.reservations.push_back(tokens[6])
                self._books.push_front(book)
                imported.append(book)
        return imported

    def export_csv(self, path: Union[str, os.PathLike]) -> None:
        """Write the catalogue as CSV with every field in double quotes."""
        with open(path, "w", encoding="utf-8", newline="") as handle:
            handle.write(CSV_HEADER + "\n")
            for book in self._books:
                values = (book.title, book.author, book.genre, book.isbn,
                          book.location, book.status_text)
                handle.write(",".join(f'"{v}"' for v in values) + "\n")