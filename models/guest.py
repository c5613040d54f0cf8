"""Datenmodell für einen Gast (Pydantic v2)."""

from pydantic import BaseModel, ConfigDict


class Guest(BaseModel):
    """Der auf einer Reservierung eingetragene Gast. Unveränderlich."""

    model_config = ConfigDict(frozen=True)

    id: int        # fortlaufend ab 1, pro Ledger
    name: str
    contact: str   # Telefonnummer o.ä., nicht validiert
