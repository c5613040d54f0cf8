"""Benachrichtigungen an den Aufrufer (Buchung, Rechnung, Fehler)."""

from typing import Literal

from pydantic import BaseModel

NoticeKind = Literal[
    "booking_confirmed",
    "invoice",
    "room_unavailable",
    "room_not_found",
    "reservation_not_found",
    "invalid_input",
]


class Notice(BaseModel):
    """Eine einzelne, für Menschen lesbare Meldung."""

    kind: NoticeKind
    text: str

    @property
    def is_error(self) -> bool:
        return self.kind not in ("booking_confirmed", "invoice")
