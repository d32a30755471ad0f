"""Parsing of Brazilian-formatted numerals (``1.234,56``, ``R$ 51,87``)."""

import re

from salesboard.extraction.models import NumericKind

_DIGITS_RE = re.compile(r"\d+")
_CURRENCY_RE = re.compile(r"\d[\d.]*(?:,\d+)?")


def parse_locale_number(text: str, kind: NumericKind) -> int | float:
    """Parse the first numeral in ``text`` according to ``kind``.

    INTEGER takes the first run of digits. CURRENCY drops ``.`` thousands
    separators and turns the ``,`` decimal separator into ``.``.

    Returns 0 (or 0.0) when no numeral is present. Never raises.
    """
    if kind is NumericKind.INTEGER:
        return _parse_integer(text)
    return _parse_currency(text)


def _parse_integer(text: str) -> int:
    match = _DIGITS_RE.search(text)
    if match is None:
        return 0
    return int(match.group(0))


def _parse_currency(text: str) -> float:
    match = _CURRENCY_RE.search(text)
    if match is None:
        return 0.0
    numeral = match.group(0).replace(".", "").replace(",", ".")
    try:
        return float(numeral)
    except ValueError:
        return 0.0
