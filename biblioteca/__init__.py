"""Library catalogue with reservations, loans and CSV import/export."""

__version__ = "0.1.0"
__all__ = ["cursorlist", "library", "cli"]