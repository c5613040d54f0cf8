from models.room import Room
from models.guest import Guest
from models.reservation import Reservation
from models.invoice import Invoice
from models.notice import Notice

__all__ = [
    "Room",
    "Guest",
    "Reservation",
    "Invoice",
    "Notice",
]
