"""Reservierungsbuch: Buchung, Check-out und Vergabe der Nummern.

Invariante: Ein Zimmer ist genau dann belegt, wenn eine aktive Reservierung
darauf verweist. Alle Prüfungen laufen vor der ersten Zustandsänderung,
Fehlschläge hinterlassen keinen Teilzustand.
"""

import logging
from datetime import date
from decimal import Decimal
from typing import Callable, Optional

from booking.billing import TAX_RATE, generate_bill
from booking.catalog import RoomCatalog
from booking.errors import (
    BookingResult,
    CheckoutResult,
    reservation_not_found,
    room_unavailable,
)
from models.guest import Guest
from models.notice import Notice
from models.reservation import Reservation
from models.room import Room

logger = logging.getLogger(__name__)

Notifier = Callable[[Notice], None]


def log_notice(notice: Notice) -> None:
    """Standard-Empfänger: schreibt Meldungen ins Log."""
    if notice.is_error:
        logger.warning(notice.text)
    else:
        logger.info(notice.text)


class ReservationLedger:
    """Verwaltet Gäste und Reservierungen eines Katalogs.

    Nummernkreise gehören zur Instanz; zwei Ledger teilen sich keine Nummern.

    Verwendung:
        ledger = ReservationLedger(catalog)
        result = ledger.book_room("Anna", "555-1234", 101, check_in, check_out)
        if result.ok:
            ledger.check_out(result.reservation.id)
    """

    def __init__(
        self,
        catalog: RoomCatalog,
        tax_rate: Decimal = TAX_RATE,
        currency: str = "$",
        first_reservation_id: int = 1001,
        first_guest_id: int = 1,
        notify: Optional[Notifier] = None,
    ) -> None:
        self.catalog = catalog
        self.tax_rate = tax_rate
        self.currency = currency
        self._next_reservation_id = first_reservation_id
        self._next_guest_id = first_guest_id
        self._reservations: list[Reservation] = []
        self._notify: Notifier = notify or log_notice

    # ─── Abfragen ───

    @property
    def reservations(self) -> list[Reservation]:
        """Alle Reservierungen (aktiv und abgeschlossen) in Buchungsreihenfolge."""
        return list(self._reservations)

    def active_reservations(self) -> list[Reservation]:
        return [r for r in self._reservations if r.is_active]

    def find_active_reservation(self, reservation_id: int) -> Optional[Reservation]:
        return next(
            (r for r in self._reservations if r.id == reservation_id and r.is_active),
            None,
        )

    def find_reservation(self, reservation_id: int) -> Optional[Reservation]:
        """Sucht auch in abgeschlossenen Reservierungen (Historie)."""
        return next((r for r in self._reservations if r.id == reservation_id), None)

    def available_rooms(self) -> list[Room]:
        return self.catalog.list_available()

    # ─── Buchung ───

    def book_room(
        self,
        guest_name: str,
        contact: str,
        room_number: int,
        check_in: date,
        check_out: date,
    ) -> BookingResult:
        """Bucht ein Zimmer für einen neuen Gast.

        Die Reihenfolge von check_in/check_out wird nicht geprüft.
        """
        room = self.catalog.find(room_number)
        if room is None or room.is_booked:
            error = room_unavailable(
                room_number, "not_found" if room is None else "booked"
            )
            kind = "room_not_found" if room is None else "room_unavailable"
            self._notify(Notice(kind=kind, text=f"Fehler: {error.message}"))
            return BookingResult(error=error)

        guest = Guest(id=self._next_guest_id, name=guest_name, contact=contact)
        self._next_guest_id += 1
        reservation = Reservation(
            id=self._next_reservation_id,
            guest=guest,
            room=room,
            check_in=check_in,
            check_out=check_out,
        )
        self._next_reservation_id += 1

        self.catalog.set_availability(room_number, True)
        self._reservations.append(reservation)

        self._notify(Notice(
            kind="booking_confirmed",
            text=(
                f"Buchung erfolgreich! Reservierungsnummer: {reservation.id}\n"
                f"Gast: {guest.name}, Zimmer: {room.number}"
            ),
        ))
        return BookingResult(reservation=reservation)

    # ─── Check-out ───

    def check_out(self, reservation_id: int) -> CheckoutResult:
        """Schließt eine aktive Reservierung ab, gibt das Zimmer frei, rechnet ab.

        Abgeschlossene Reservierungen werden wie nicht existierende behandelt.
        """
        reservation = self.find_active_reservation(reservation_id)
        if reservation is None:
            error = reservation_not_found(reservation_id)
            self._notify(Notice(kind="reservation_not_found",
                                text=f"Fehler: {error.message}"))
            return CheckoutResult(error=error)

        reservation.close()
        self.catalog.set_availability(reservation.room.number, False)
        invoice = generate_bill(reservation, self.tax_rate)

        self._notify(Notice(kind="invoice", text=invoice.render(self.currency)))
        return CheckoutResult(invoice=invoice)
