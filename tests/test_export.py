"""Tests für die Terminal-Darstellung (Rich)."""

from datetime import date
from decimal import Decimal

from rich.console import Console

from config.defaults import default_hotel_config
from booking.catalog import RoomCatalog
from booking.ledger import ReservationLedger
from export.console_renderer import (
    invoice_panel,
    notice_markup,
    reservations_table,
    room_rows,
    rooms_table,
)
from models.notice import Notice


def _render(renderable) -> str:
    console = Console(record=True, width=100)
    console.print(renderable)
    return console.export_text()


def _ledger_with_checkout():
    ledger = ReservationLedger(RoomCatalog.from_config(default_hotel_config()),
                               notify=lambda n: None)
    res = ledger.book_room("Anna [VIP]", "555", 102, date(2024, 1, 1), date(2024, 1, 3))
    ledger.book_room("Bernd", "556", 201, date(2024, 1, 1), date(2024, 1, 2))
    result = ledger.check_out(res.reservation.id)
    return ledger, result


class TestRoomRendering:
    def test_room_rows(self):
        catalog = RoomCatalog.from_config(default_hotel_config())
        catalog.set_availability(201, True)
        rows = room_rows(catalog.all_rooms(), currency="€")
        assert rows[0][:3] == ["101", "Single", "€50.00"]
        assert "Belegt" in rows[2][3]
        assert "Frei" in rows[0][3]

    def test_room_rows_status_matches_model_label(self):
        """Status-Spalte übernimmt die Bezeichnung aus Room.status_label."""
        catalog = RoomCatalog.from_config(default_hotel_config())
        catalog.set_availability(101, True)
        rows = room_rows(catalog.all_rooms())
        for room, row in zip(catalog.all_rooms(), rows):
            assert room.status_label in row[3]

    def test_rooms_table_text(self):
        catalog = RoomCatalog.from_config(default_hotel_config())
        text = _render(rooms_table(catalog.list_available(), "Freie Zimmer"))
        assert "Freie Zimmer" in text
        assert "$150.00" in text

    def test_room_describe(self):
        room = RoomCatalog.from_config(default_hotel_config()).find(101)
        assert str(room) == "Zimmer 101 (Single) - Preis: $50.00, Status: Frei"


class TestReservationAndInvoiceRendering:
    def test_reservations_table(self):
        ledger, _ = _ledger_with_checkout()
        text = _render(reservations_table(ledger.reservations))
        assert "Anna [VIP]" in text
        assert "abgeschlossen" in text
        assert "aktiv" in text

    def test_invoice_panel(self):
        _, result = _ledger_with_checkout()
        panel = invoice_panel(result.invoice)
        assert panel.title == "Rechnung – Reservierung 1001"
        text = _render(panel)
        assert "$150.00" in text
        assert "Steuer (10%)" in text
        assert "$165.00" in text
        assert result.total == Decimal("165.00")

    def test_notice_markup_escapes_text(self):
        notice = Notice(kind="room_unavailable", text="Zimmer [101] belegt")
        markup = notice_markup(notice)
        assert markup.startswith("[red]✗ ")
        assert "Zimmer [101] belegt" in _render(markup)

    def test_notice_markup_success(self):
        markup = notice_markup(Notice(kind="booking_confirmed", text="ok"))
        assert markup.startswith("[green]✓ ")
