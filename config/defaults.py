from decimal import Decimal

from config.schema import HotelConfig, RoomDef


def default_rooms() -> list[RoomDef]:
    """Standard-Zimmerbestand.

    Zimmer:
    101  Single   50.00
    102  Double   75.00
    201  Suite   150.00
    202  Double   75.00
    """
    return [
        RoomDef(number=101, category="Single", price=Decimal("50.00")),
        RoomDef(number=102, category="Double", price=Decimal("75.00")),
        RoomDef(number=201, category="Suite", price=Decimal("150.00")),
        RoomDef(number=202, category="Double", price=Decimal("75.00")),
    ]


def default_hotel_config() -> HotelConfig:
    """Vollständige Standard-Konfiguration (ohne YAML-Datei nutzbar)."""
    return HotelConfig(
        hotel_name="Hotel Sonnenhof",
        currency_symbol="$",
        tax_rate=Decimal("0.10"),
        first_reservation_id=1001,
        first_guest_id=1,
        default_nights=3,
        rooms=default_rooms(),
    )
