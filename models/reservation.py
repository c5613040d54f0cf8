"""Datenmodell für eine Reservierung (Pydantic v2)."""

from datetime import date

from pydantic import BaseModel

from models.guest import Guest
from models.room import Room


class Reservation(BaseModel):
    """Bindet einen Gast für einen Zeitraum an ein Zimmer.

    Zustände: aktiv (bei Buchung) → inaktiv (beim Check-out). Es gibt keinen
    Weg zurück; inaktive Reservierungen bleiben für die Historie erhalten.

    Das Zimmer ist dasselbe Objekt wie im RoomCatalog (Pydantic v2 kopiert
    übergebene Modell-Instanzen nicht).
    """

    id: int               # fortlaufend ab 1001, pro Ledger
    guest: Guest
    room: Room
    check_in: date
    check_out: date
    is_active: bool = True

    @property
    def nights(self) -> int:
        """Anzahl Nächte. Wird nicht validiert, kann 0 oder negativ sein."""
        return (self.check_out - self.check_in).days

    def close(self) -> None:
        """Einziger Zustandsübergang: aktiv → inaktiv."""
        if not self.is_active:
            raise ValueError(f"Reservierung {self.id} ist bereits abgeschlossen")
        self.is_active = False
