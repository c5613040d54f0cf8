"""Export-Modul: Terminal-Darstellung (Rich) für Zimmer, Reservierungen und Rechnungen."""

from export.console_renderer import (
    invoice_panel,
    notice_markup,
    reservations_table,
    room_rows,
    rooms_table,
)

__all__ = [
    "invoice_panel",
    "notice_markup",
    "reservations_table",
    "room_rows",
    "rooms_table",
]
