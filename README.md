# biblioteca

A small console program for running a school library. It keeps a catalogue
of books and tracks each book's status as *Disponible*, *Reservado* or
*Prestado*. Students can reserve books, cancel a reservation, withdraw a book
and return it. The catalogue can be read from a CSV file and written back to one.

## Installation

```
pip install .
```

## Running the menu

```
biblioteca
```

The menu is in Spanish and offers these options:

1. Registrar libro: register a book with title, author, genre, ISBN and location
2. Mostrar datos de libro: show one book's details and its reservations
3. Mostrar todos los libros: list every registered book
4. Reservar libro: add a student to a book's reservation queue
5. Cancelar reserva de libro: remove a student's reservation
6. Retirar libro: withdraw an available book, or a reserved one if you are first in the queue
7. Devolver libro: return a book
8. Mostrar libros prestados: list the books on loan
9. Importar libros desde un archivo CSV: import books from a CSV file
10. Exportar libros a un archivo CSV: export to `biblioteca_exportada.csv`
0. Salir: quit

## CSV format

An import file has a header line followed by one book per line:

```
Título,Autor,Genero,ISBN,Ubicación,Estado,Reservas
Rayuela,Julio Cortázar,Novela,9780000000001,Estante A,Reservado,Ana,Luis
```

The fields after the status are the names of the students who hold
reservations, in queue order.

## Using it as a library

```python
from biblioteca.library import Library, Status

library = Library()
library.register("Rayuela", "Julio Cortázar", "Novela", "9780000000001", "Estante A")
library.reserve("Rayuela", "Julio Cortázar", "Ana")
book = library.find("Rayuela", "Julio Cortázar")
assert book.status is Status.RESERVED

library.withdraw("Rayuela", "Julio Cortázar", "Ana")
for loaned in library.loaned_books():
    print(loaned.title)

library.export_csv("catalogo.csv")
```

`find`, `reserve`, `cancel_reservation`, `withdraw` and `return_book` raise
`BookNotFoundError` for an unknown book. `cancel_reservation` raises
`ReservationNotFoundError` when the student holds no reservation.
`withdraw` raises `WithdrawalRefusedError` when the book cannot be taken.

The reservation queue is a `biblioteca.cursorlist.CursorList`. It is a
doubly-linked list with a movable cursor that supports `first`, `next`,
`last`, `prev`, the `push_*` and `pop_*` operations, and plain iteration.

## Running the tests

```
pip install ".[test]"
pytest
```