"""Buchungslogik: Zimmerbestand, Reservierungsbuch und Abrechnung."""

from .catalog import RoomCatalog
from .ledger import ReservationLedger, log_notice
from .billing import TAX_RATE, generate_bill
from .errors import BookingResult, CheckoutResult, ErrorKind, HotelError

__all__ = [
    "RoomCatalog",
    "ReservationLedger",
    "log_notice",
    "TAX_RATE",
    "generate_bill",
    "BookingResult",
    "CheckoutResult",
    "ErrorKind",
    "HotelError",
]
