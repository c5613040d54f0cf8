"""Datenmodell für eine Rechnung beim Check-out (Pydantic v2)."""

from decimal import Decimal

from pydantic import BaseModel


class Invoice(BaseModel):
    """Ergebnis der Abrechnung einer Reservierung."""

    reservation_id: int
    guest_name: str
    room_number: int
    room_category: str
    nights: int
    room_charge: Decimal
    tax_rate: Decimal     # 0.10 = 10 %
    tax: Decimal
    total: Decimal

    @property
    def tax_percent(self) -> Decimal:
        return self.tax_rate * 100

    def render(self, currency: str = "$") -> str:
        """Rechnung als Klartext (für Logs und Benachrichtigungen)."""
        rule = "-" * 17
        return "\n".join([
            "--- RECHNUNG ---",
            f"Gast: {self.guest_name}",
            f"Zimmer {self.room_number} ({self.room_category}) "
            f"für {self.nights} Nächte",
            f"Zimmerkosten: {currency}{self.room_charge:.2f}",
            f"Steuer ({self.tax_percent:.0f}%): {currency}{self.tax:.2f}",
            rule,
            f"GESAMTBETRAG: {currency}{self.total:.2f}",
            rule,
        ])
