"""Tests für die Abrechnung (generate_bill) und die Rechnungsdarstellung."""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from booking.billing import TAX_RATE, generate_bill
from models.guest import Guest
from models.reservation import Reservation
from models.room import Room


def make_reservation(price: str, nights: int, category: str = "Single",
                     number: int = 101) -> Reservation:
    check_in = date(2024, 3, 10)
    return Reservation(
        id=1001,
        guest=Guest(id=1, name="Anna Schmidt", contact="555-1234"),
        room=Room(number=number, category=category, price=Decimal(price)),
        check_in=check_in,
        check_out=check_in + timedelta(days=nights),
    )


class TestGenerateBill:
    def test_tax_rate_constant(self):
        assert TAX_RATE == Decimal("0.10")

    def test_single_three_nights(self):
        """50.00 × 3 Nächte → 150.00 + 15.00 Steuer = 165.00."""
        invoice = generate_bill(make_reservation("50.00", 3))
        assert invoice.nights == 3
        assert invoice.room_charge == Decimal("150.00")
        assert invoice.tax == Decimal("15.00")
        assert invoice.total == Decimal("165.00")

    def test_suite_one_night(self):
        """150.00 × 1 Nacht → 165.00."""
        invoice = generate_bill(make_reservation("150.00", 1, category="Suite", number=201))
        assert invoice.total == Decimal("165.00")

    @pytest.mark.parametrize("price,nights,total", [
        ("75.00", 2, "165.00"),
        ("75.00", 7, "577.50"),
        ("0.00", 4, "0.00"),
    ])
    def test_totals(self, price, nights, total):
        invoice = generate_bill(make_reservation(price, nights))
        assert invoice.total == Decimal(total)

    def test_tax_rounded_to_cents(self):
        """Steuer wird kaufmännisch auf Cent gerundet."""
        invoice = generate_bill(make_reservation("33.35", 1))
        # 3.335 → 3.34
        assert invoice.tax == Decimal("3.34")
        assert invoice.total == Decimal("36.69")

    def test_custom_tax_rate(self):
        invoice = generate_bill(make_reservation("100.00", 1), tax_rate=Decimal("0.07"))
        assert invoice.tax == Decimal("7.00")
        assert invoice.tax_rate == Decimal("0.07")

    def test_bill_has_no_side_effects(self):
        """Abrechnung verändert weder Reservierung noch Zimmer."""
        reservation = make_reservation("50.00", 3)
        generate_bill(reservation)
        assert reservation.is_active is True
        assert reservation.room.is_booked is False

    def test_negative_nights_negative_bill(self):
        """Check-out vor Check-in ergibt einen negativen Betrag (bekannter Randfall)."""
        invoice = generate_bill(make_reservation("50.00", -2))
        assert invoice.nights == -2
        assert invoice.total == Decimal("-110.00")


class TestInvoiceRender:
    def test_render_contains_all_fields(self):
        """Klartext-Rechnung enthält Gast, Zimmer, Nächte und alle Beträge."""
        text = generate_bill(make_reservation("50.00", 3)).render()
        assert "Gast: Anna Schmidt" in text
        assert "Zimmer 101 (Single) für 3 Nächte" in text
        assert "Zimmerkosten: $150.00" in text
        assert "Steuer (10%): $15.00" in text
        assert "GESAMTBETRAG: $165.00" in text

    def test_render_currency(self):
        text = generate_bill(make_reservation("50.00", 1)).render(currency="€")
        assert "GESAMTBETRAG: €55.00" in text
