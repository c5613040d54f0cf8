"""Abrechnung beim Check-out.

Reine Funktionen ohne gespeicherten Zustand:
  room_charge = Preis × Nächte
  tax         = room_charge × TAX_RATE
  total       = room_charge + tax
Geldbeträge werden kaufmännisch auf Cent gerundet.
"""

from decimal import ROUND_HALF_UP, Decimal

from models.invoice import Invoice
from models.reservation import Reservation

TAX_RATE = Decimal("0.10")

_CENT = Decimal("0.01")


def _to_cents(amount: Decimal) -> Decimal:
    return amount.quantize(_CENT, rounding=ROUND_HALF_UP)


def generate_bill(reservation: Reservation, tax_rate: Decimal = TAX_RATE) -> Invoice:
    """Berechnet die Rechnung einer Reservierung.

    Null oder negative Nächte (Check-out vor Check-in) werden nicht
    abgefangen und ergeben einen Betrag von 0 bzw. einen negativen Betrag.
    """
    nights = reservation.nights
    room_charge = _to_cents(reservation.room.price * nights)
    tax = _to_cents(room_charge * tax_rate)
    return Invoice(
        reservation_id=reservation.id,
        guest_name=reservation.guest.name,
        room_number=reservation.room.number,
        room_category=reservation.room.category,
        nights=nights,
        room_charge=room_charge,
        tax_rate=tax_rate,
        tax=tax,
        total=room_charge + tax,
    )
