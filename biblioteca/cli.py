"""Interactive menu for the library catalogue."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from biblioteca.library import (
    Book,
    BookNotFoundError,
    Library,
    ReservationNotFoundError,
    Status,
    WithdrawalRefusedError,
)

RULE = "------------------------------------------"
MAX_FIELD = 50
DEFAULT_EXPORT = "biblioteca_exportada.csv"

MENU = (
    f"{RULE}\n"
    "           Menú de libreria\n"
    f"{RULE}\n\n"
    "1. Registrar libro\n"
    "2. Mostrar datos de libro\n"
    "3. Mostrar todos los libros\n"
    "4. Reservar libro\n"
    "5. Cancelar reserva de libro\n"
    "6. Retirar libro\n"
    "7. Devolver libro\n"
    "8. Mostrar libros prestados\n"
    "9. Importar libros desde un archivo CSV\n"
    "10. Exportar libros a un archivo CSV\n"
    "0. Salir\n\n"
    "Selecciona una opción: "
)


def format_book_details(book: Book) -> str:
    """Full description of a book, including who holds it when not available."""
    lines = [
        "",
        RULE,
        f"         Datos del libro '{book.title}'",
        RULE,
        "",
        f"Título: {book.title}",
        f"Autor: {book.author}",
        f"Genero: {book.genre}",
        f"ISBN: {book.isbn}",
        f"Ubicación: {book.location}",
    ]
    if book.status != Status.AVAILABLE:
        lines.append(f"Estado: {book.status_text}")
        holders = "".join(f" {name}," for name in book.reservations)
        lines.append(f"Reservado por:{holders}")
    else:
        lines.append("Estado: Disponible")
    return "\n".join(lines) + "\n\n"


def format_book_table(library: Library) -> str:
    """Title and author of every registered book, in catalogue order."""
    books = list(library)
    if not books:
        return "\nNo hay libros registrados!\n\n"
    parts = [
        "",
        RULE,
        "          Libros Registrados",
        RULE,
        f"{'Título':<22} {'Autor':<22}",
        RULE,
        "",
    ]
    parts.extend(f"{book.title:<22}{book.author:<22}" for book in books)
    return "\n".join(parts) + "\n\n"


def format_loaned_books(library: Library) -> str:
    """Books on loan with the students recorded against them."""
    parts = ["", RULE, "        Libros Prestados", RULE]
    loaned = library.loaned_books()
    for book in loaned:
        students = ", ".join(book.reservations)
        parts.append(f"Título: {book.title}, Autor: {book.author}, Estudiante: {students}")
    if not loaned:
        parts.append("")
        parts.append("No hay libros prestados en este momento.")
    return "\n".join(parts) + "\n\n"


class _Session:
    """One run of the menu over the given streams."""

    def __init__(self, library: Library, export_path: str, stdin, stdout) -> None:
        self.library = library
        self.export_path = export_path
        self.stdin = stdin
        self.stdout = stdout

    def write(self, text: str) -> None:
        self.stdout.write(text)

    def read_line(self) -> str:
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def ask(self, prompt: str) -> str:
        self.write(prompt)
        self.stdout.flush()
        return self.read_line()[:MAX_FIELD]

    def ask_title_author(self, title_prompt: str = "Ingrese el título del libro: ") -> tuple[str, str]:
        title = self.ask(title_prompt)
        author = self.ask("Ingrese el autor del libro: ")
        return title, author

    def register(self) -> None:
        title = self.ask("Ingrese el título del libro: ")
        author = self.ask("Ingrese el autor del libro: ")
        genre = self.ask("Ingrese el genero del libro: ")
        isbn = self.ask("Ingrese el ISBN del libro: ")
        location = self.ask("Ingrese la ubicación del libro: ")
        self.library.register(title, author, genre, isbn, location)
        self.write("\nEl libro ha sido añadido correctamente!\n\n")

    def show_details(self) -> None:
        title, author = self.ask_title_author()
        try:
            book = self.library.find(title, author)
        except BookNotFoundError:
            self.write("\nEl libro no está\n\n")
            return
        self.write(format_book_details(book))

    def reserve(self) -> None:
        title, author = self.ask_title_author("\nIngrese el título del libro: ")
        try:
            self.library.find(title, author)
        except BookNotFoundError:
            self.write("\nEl libro no está!\n")
            return
        student = self.ask("Ingrese el nombre del estudiante: ")
        self.library.reserve(title, author, student)
        self.write(f"\nEl libro fue reservado con exito a {student}!\n\n")

    def cancel(self) -> None:
        title, author = self.ask_title_author()
        student = self.ask("Ingrese el nombre del estudiante que desea cancelar la reserva: ")
        try:
            self.library.cancel_reservation(title, author, student)
        except BookNotFoundError:
            self.write("\nEl libro no está en la biblioteca.\n\n")
        except ReservationNotFoundError:
            self.write("\nEl estudiante no tiene una reserva para este libro.\n\n")
        else:
            self.write(f"\nReserva cancelada con éxito para {student}.\n\n")

    def withdraw(self) -> None:
        title, author = self.ask_title_author()
        student = self.ask("Ingrese su nombre para retirar el libro: ")
        try:
            book = self.library.withdraw(title, author, student)
        except BookNotFoundError:
            self.write("\nEl libro no está en la biblioteca.\n\n")
        except WithdrawalRefusedError:
            self.write("\nEl libro no puede ser retirado en este momento.\n\n")
        else:
            self.write(
                f'\nLibro "{book.title}" de "{book.author}" ha sido retirado por {student}.\n\n'
            )

    def return_book(self) -> None:
        title, author = self.ask_title_author("\nIngrese el título del libro: ")
        try:
            returned = self.library.return_book(title, author)
        except BookNotFoundError:
            self.write("\nEl libro no está en la biblioteca.\n\n")
            return
        if returned:
            self.write(f'\nLibro "{title}" de "{author}" ha sido devuelto.\n\n')
        else:
            self.write(f'\nEl libro "{title}" de "{author}" ya está disponible.\n\n')

    def import_csv(self) -> None:
        self.write("Ingrese el nombre del archivo en formato .csv: ")
        self.stdout.flush()
        words = self.read_line().split()
        path = words[0] if words else ""
        try:
            self.library.import_csv(path)
        except OSError:
            self.write("Error: no se pudo abrir el archivo\n")
            return
        self.write(f"\nSe han importado los datos al archivo {path}\n\n")

    def export_csv(self) -> None:
        try:
            self.library.export_csv(self.export_path)
        except OSError:
            self.write("No se pudo abrir el archivo CSV para exportar.\n")
            return
        self.write(f"\nLos libros han sido exportados a {self.export_path} con éxito.\n\n")

    def run(self) -> None:
        actions = {
            1: self.register,
            2: self.show_details,
            3: lambda: self.write(format_book_table(self.library)),
            4: self.reserve,
            5: self.cancel,
            6: self.withdraw,
            7: self.return_book,
            8: lambda: self.write(format_loaned_books(self.library)),
            9: self.import_csv,
            10: self.export_csv,
        }
        while True:
            self.write(MENU)
            self.stdout.flush()
            try:
                choice = int(self.read_line().strip())
            except ValueError:
                choice = -1
            if choice == 0:
                self.write("\n¡Hasta luego!\n")
                return
            action = actions.get(choice)
            if action is None:
                self.write("\nOpción inválida. Por favor, selecciona una opción válida.\n")
            else:
                action()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive library menu until the user chooses to leave."""
    parser = argparse.ArgumentParser(prog="biblioteca", description="Library catalogue menu.")
    parser.add_argument(
        "--export",
        default=DEFAULT_EXPORT,
        help="file written by the export option (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    session = _Session(Library(), args.export, sys.stdin, sys.stdout)
    try:
        session.run()
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())