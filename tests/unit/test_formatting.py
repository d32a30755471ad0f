from datetime import datetime

from salesboard.web.formatting import format_currency, format_number, format_timestamp


class TestFormatNumber:
    def test_groups_thousands_with_dot(self) -> None:
        assert format_number(1234567) == "1.234.567"

    def test_small_number(self) -> None:
        assert format_number(16) == "16"


class TestFormatCurrency:
    def test_brazilian_currency(self) -> None:
        assert format_currency(1234.56) == "R$ 1.234,56"

    def test_zero(self) -> None:
        assert format_currency(0) == "R$ 0,00"


class TestFormatTimestamp:
    def test_naive_datetime(self) -> None:
        assert format_timestamp(datetime(2026, 10, 19, 14, 3, 22)) == "19/10/2026, 14:03:22"
