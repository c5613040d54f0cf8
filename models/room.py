"""Datenmodell für ein Hotelzimmer (Pydantic v2)."""

from decimal import Decimal

from pydantic import BaseModel, Field


class Room(BaseModel):
    """Repräsentiert ein buchbares Zimmer.

    Einziger veränderlicher Zustand ist is_booked; gesetzt wird er
    ausschließlich über RoomCatalog.set_availability.
    """

    number: int = Field(gt=0)    # 101, 201, ...
    category: str                # "Single", "Double", "Suite"
    price: Decimal = Field(ge=0) # pro Nacht
    is_booked: bool = False

    @property
    def status_label(self) -> str:
        return "Belegt" if self.is_booked else "Frei"

    def describe(self, currency: str = "$") -> str:
        """Einzeilige Beschreibung inkl. Preis und Status."""
        return (
            f"Zimmer {self.number} ({self.category}) - "
            f"Preis: {currency}{self.price:.2f}, Status: {self.status_label}"
        )

    def __str__(self) -> str:
        return self.describe()
