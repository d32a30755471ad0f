"""Decides which metric, if any, a raw CSV line carries.

Labels are compared on a folded copy of the line (NFC-normalized,
lower-cased, accents replaced, whitespace collapsed) so that
``Média Mês`` and ``media mes`` match alike. Numerals are captured from
the cleaned line with its original casing, starting after the label.
"""

import re
import unicodedata

from salesboard.extraction.models import MatchMode, MetricLabel

_STRIP_CHARS = str.maketrans("", "", '"\t\ufeff')

_ACCENT_TABLE = str.maketrans(
    {
        "á": "a",
        "à": "a",
        "â": "a",
        "ã": "a",
        "é": "e",
        "ê": "e",
        "í": "i",
        "ó": "o",
        "ô": "o",
        "õ": "o",
        "ú": "u",
        "ç": "c",
    }
)

_DIGITS_RE = re.compile(r"\d+")
_CURRENCY_CAPTURE_RE = re.compile(r"R\$\s*(\d[\d.]*(?:,\d+)?)", re.IGNORECASE)


def clean_line(line: str) -> str:
    """Remove quote, tab and BOM characters injected by the export and trim."""
    return unicodedata.normalize("NFC", line).translate(_STRIP_CHARS).strip()


def _fold_with_offsets(text: str) -> tuple[str, list[int]]:
    """Fold ``text`` and map every folded character to its source index."""
    chars: list[str] = []
    offsets: list[int] = []
    for index, char in enumerate(text):
        if char.isspace():
            if not chars or chars[-1] == " ":
                continue
            chars.append(" ")
            offsets.append(index)
            continue
        for folded in char.lower().translate(_ACCENT_TABLE):
            chars.append(folded)
            offsets.append(index)
    if chars and chars[-1] == " ":
        chars.pop()
        offsets.pop()
    return "".join(chars), offsets


def fold_text(text: str) -> str:
    """Lower-case, strip known accents and collapse whitespace runs."""
    folded, _ = _fold_with_offsets(unicodedata.normalize("NFC", text))
    return folded


def _label_end(cleaned: str, label: MetricLabel) -> int | None:
    """Index in ``cleaned`` just past the label phrase, None when absent."""
    folded, offsets = _fold_with_offsets(cleaned)
    if label.mode is MatchMode.PREFIX:
        start = 0 if folded.startswith(label.phrase) else -1
    else:
        start = folded.find(label.phrase)
    if start < 0:
        return None
    return offsets[start + len(label.phrase) - 1] + 1


def classify_line(line: str) -> MetricLabel | None:
    """Return the first declared label whose phrase matches the line."""
    cleaned = clean_line(line)
    if not cleaned:
        return None
    for label in MetricLabel:
        if _label_end(cleaned, label) is not None:
            return label
    return None


def extract_capture(line: str, label: MetricLabel) -> str | None:
    """Return the raw numeral substring carried by a matched line.

    The search starts after the label phrase. TOTAL_LIVES captures the
    first digit run. Currency labels capture the numeral that follows an
    ``R$`` marker.
    """
    cleaned = clean_line(line)
    end = _label_end(cleaned, label)
    if end is None:
        return None
    tail = cleaned[end:]
    if label is MetricLabel.TOTAL_LIVES:
        match = _DIGITS_RE.search(tail)
        return match.group(0) if match else None
    match = _CURRENCY_CAPTURE_RE.search(tail)
    return match.group(1) if match else None
