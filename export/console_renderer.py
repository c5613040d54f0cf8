"""Gemeinsamer Renderer für die Terminal-Anzeige (Rich).

Wird vom interaktiven Menü und den Einzelbefehlen in main.py verwendet.
"""

from typing import TYPE_CHECKING

from rich import box
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

if TYPE_CHECKING:
    from models.invoice import Invoice
    from models.notice import Notice
    from models.reservation import Reservation
    from models.room import Room


_NOTICE_STYLES = {
    "booking_confirmed": "green",
    "invoice": "cyan",
    "room_unavailable": "red",
    "room_not_found": "red",
    "reservation_not_found": "red",
    "invalid_input": "yellow",
}


def room_rows(rooms: list["Room"], currency: str = "$") -> list[list[str]]:
    """Tabellenzeilen: [Nr., Kategorie, Preis/Nacht, Status]."""
    rows: list[list[str]] = []
    for room in rooms:
        color = "red" if room.is_booked else "green"
        status = f"[{color}]{room.status_label}[/{color}]"
        rows.append([
            str(room.number),
            escape(room.category),
            f"{currency}{room.price:.2f}",
            status,
        ])
    return rows


def rooms_table(rooms: list["Room"], title: str, currency: str = "$") -> Table:
    table = Table(title=title, box=box.ROUNDED)
    table.add_column("Zimmer", style="bold", justify="right")
    table.add_column("Kategorie")
    table.add_column("Preis/Nacht", justify="right")
    table.add_column("Status")
    for row in room_rows(rooms, currency):
        table.add_row(*row)
    return table


def reservations_table(reservations: list["Reservation"]) -> Table:
    """Übersicht aller Reservierungen inkl. abgeschlossener."""
    table = Table(title="Reservierungen", box=box.ROUNDED)
    table.add_column("Nr.", style="bold", justify="right")
    table.add_column("Gast")
    table.add_column("Zimmer", justify="right")
    table.add_column("Von")
    table.add_column("Bis")
    table.add_column("Nächte", justify="right")
    table.add_column("Status")
    for r in reservations:
        table.add_row(
            str(r.id),
            escape(r.guest.name),
            str(r.room.number),
            r.check_in.isoformat(),
            r.check_out.isoformat(),
            str(r.nights),
            "[green]aktiv[/green]" if r.is_active else "[dim]abgeschlossen[/dim]",
        )
    return table


def invoice_panel(invoice: "Invoice", currency: str = "$") -> Panel:
    """Rechnung als Rich-Panel."""
    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Posten")
    table.add_column("Betrag", justify="right")
    table.add_row("Gast", escape(invoice.guest_name))
    table.add_row(
        f"Zimmer {invoice.room_number} ({invoice.room_category})",
        f"{invoice.nights} Nächte",
    )
    table.add_row("Zimmerkosten", f"{currency}{invoice.room_charge:.2f}")
    table.add_row(f"Steuer ({invoice.tax_percent:.0f}%)", f"{currency}{invoice.tax:.2f}")
    table.add_row("[bold]GESAMTBETRAG[/bold]", f"[bold]{currency}{invoice.total:.2f}[/bold]")
    return Panel(
        table,
        title=f"Rechnung – Reservierung {invoice.reservation_id}",
        border_style="cyan",
        expand=False,
    )


def notice_markup(notice: "Notice") -> str:
    """Meldung mit Farbauszeichnung je nach Art."""
    color = _NOTICE_STYLES.get(notice.kind, "white")
    prefix = "✗ " if notice.is_error else "✓ "
    return f"[{color}]{prefix}{escape(notice.text)}[/{color}]"
