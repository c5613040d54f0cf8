"""Zimmerbestand: einzige Quelle für Existenz und Verfügbarkeit der Zimmer."""

import logging
from typing import Optional

from config.schema import HotelConfig
from models.room import Room

logger = logging.getLogger(__name__)


class RoomCatalog:
    """Hält alle Zimmer in Einfügereihenfolge.

    Verwendung:
        catalog = RoomCatalog.from_config(config)
        catalog.list_available()
    """

    def __init__(self, rooms: list[Room]) -> None:
        numbers = [r.number for r in rooms]
        duplicates = sorted({n for n in numbers if numbers.count(n) > 1})
        if duplicates:
            raise ValueError(f"Doppelte Zimmernummern im Bestand: {duplicates}")
        self._rooms: list[Room] = list(rooms)

    @classmethod
    def from_config(cls, config: HotelConfig) -> "RoomCatalog":
        """Baut den Start-Bestand aus der Konfiguration (alle Zimmer frei)."""
        return cls([
            Room(number=rd.number, category=rd.category, price=rd.price)
            for rd in config.rooms
        ])

    def all_rooms(self) -> list[Room]:
        return list(self._rooms)

    def list_available(self) -> list[Room]:
        """Alle aktuell buchbaren Zimmer."""
        return [r for r in self._rooms if not r.is_booked]

    def find(self, room_number: int) -> Optional[Room]:
        return next((r for r in self._rooms if r.number == room_number), None)

    def set_availability(self, room_number: int, booked: bool) -> None:
        """Setzt den Belegt-Status.

        Unbekannte Zimmernummern werden stillschweigend ignoriert.
        """
        room = self.find(room_number)
        if room is None:
            logger.debug(f"set_availability: Zimmer {room_number} unbekannt, ignoriert")
            return
        room.is_booked = booked

    def __len__(self) -> int:
        return len(self._rooms)
