"""Fehlerarten und Ergebnis-Modelle der Buchungslogik.

Fehler werden als Ergebnis zurückgegeben, nicht als Exception geworfen.
Der Aufrufer muss ``result.ok`` prüfen.
"""

from decimal import Decimal
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel

from models.invoice import Invoice
from models.reservation import Reservation


class ErrorKind(str, Enum):
    ROOM_UNAVAILABLE = "room_unavailable"
    RESERVATION_NOT_FOUND = "reservation_not_found"
    # Nur von der Konsole erzeugt (ungültige Zahleneingabe)
    INVALID_INPUT = "invalid_input"


class HotelError(BaseModel):
    """Ein fachlicher Fehler, für den Aufrufer darstellbar."""

    kind: ErrorKind
    # "not_found" / "booked" bei ROOM_UNAVAILABLE, sonst None
    reason: Optional[Literal["not_found", "booked"]] = None
    message: str


class BookingResult(BaseModel):
    """Ergebnis von ReservationLedger.book_room."""

    reservation: Optional[Reservation] = None
    error: Optional[HotelError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class CheckoutResult(BaseModel):
    """Ergebnis von ReservationLedger.check_out."""

    invoice: Optional[Invoice] = None
    error: Optional[HotelError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def total(self) -> Optional[Decimal]:
        """Rechnungsbetrag, None bei Fehler."""
        return self.invoice.total if self.invoice else None


def room_unavailable(room_number: int, reason: Literal["not_found", "booked"]) -> HotelError:
    if reason == "not_found":
        message = f"Zimmer {room_number} existiert nicht."
    else:
        message = f"Zimmer {room_number} ist bereits belegt."
    return HotelError(kind=ErrorKind.ROOM_UNAVAILABLE, reason=reason, message=message)


def reservation_not_found(reservation_id: int) -> HotelError:
    return HotelError(
        kind=ErrorKind.RESERVATION_NOT_FOUND,
        message=f"Keine aktive Reservierung mit Nummer {reservation_id} gefunden.",
    )


def invalid_input(message: str) -> HotelError:
    return HotelError(kind=ErrorKind.INVALID_INPUT, message=message)
