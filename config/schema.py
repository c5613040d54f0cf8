from decimal import Decimal

from pydantic import BaseModel, Field, model_validator


# ─── ZIMMER ───

class RoomDef(BaseModel):
    """Definition eines Zimmers im Start-Bestand."""
    # Zimmernummer, eindeutig im Hotel (z.B. 101)
    number: int = Field(gt=0)
    # Kategorie, frei wählbar: "Single", "Double", "Suite", ...
    category: str
    # Preis pro Nacht
    price: Decimal = Field(ge=0, decimal_places=2)


# ─── GESAMT-CONFIG ───

class HotelConfig(BaseModel):
    """Gesamtkonfiguration des Hotels.

    Wird nur von der Konsole gelesen. Katalog und Ledger bekommen die
    Werte explizit übergeben.
    """
    # Name des Hotels (Kopfzeile der Konsole)
    hotel_name: str = Field("Hotel Sonnenhof",
        description="Name des Hotels")
    # Währungssymbol für Rechnungen und Preislisten
    currency_symbol: str = Field("$",
        description="Währungssymbol")
    # Steuersatz auf den Zimmerpreis (0.10 = 10 %)
    tax_rate: Decimal = Field(Decimal("0.10"), ge=0, le=1,
        description="Steuersatz (0.0 bis 1.0)")
    # Erste vergebene Reservierungsnummer
    first_reservation_id: int = Field(1001, ge=1,
        description="Erste Reservierungsnummer")
    # Erste vergebene Gastnummer
    first_guest_id: int = Field(1, ge=1,
        description="Erste Gastnummer")
    # Standard-Aufenthaltsdauer bei Buchung über die Konsole
    default_nights: int = Field(3, ge=1, le=365,
        description="Nächte pro Buchung (Konsole)")
    # Start-Bestand aller Zimmer
    rooms: list[RoomDef] = Field(
        description="Alle Zimmer des Hotels")

    @model_validator(mode='after')
    def validate_unique_rooms(self):
        """Prüfe dass jede Zimmernummer genau einmal vorkommt."""
        seen: set[int] = set()
        for room in self.rooms:
            if room.number in seen:
                raise ValueError(
                    f"Zimmernummer {room.number} ist doppelt vergeben")
            seen.add(room.number)
        return self
