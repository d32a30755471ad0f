from salesboard.extraction.labels import classify_line, extract_capture
from salesboard.extraction.models import ExtractedMetrics, MetricLabel
from salesboard.extraction.numbers import parse_locale_number
from salesboard.logging.logger import Log


def extract(raw_document: str) -> ExtractedMetrics:
    """Read the three labelled metrics from a CSV export.

    Lines are split on ``\\n`` (a trailing ``\\r`` is trimmed with the rest
    of the line) and scanned in order without assuming any header offset or
    column layout. When a label appears on several lines the last one wins.
    A labelled line without a numeral is skipped.
    """
    total_lives_sold = 0
    amount_received = 0.0
    monthly_average = 0.0
    for line in raw_document.split("\n"):
        label = classify_line(line)
        if label is None:
            continue
        capture = extract_capture(line, label)
        if capture is None:
            Log.debug(f"Label {label.name} found without a value: {line!r}")
            continue
        value = parse_locale_number(capture, label.kind)
        if label is MetricLabel.TOTAL_LIVES:
            total_lives_sold = int(value)
        elif label is MetricLabel.AMOUNT_RECEIVED:
            amount_received = float(value)
        else:
            monthly_average = float(value)
    return ExtractedMetrics(
        total_lives_sold=total_lives_sold,
        amount_received=amount_received,
        monthly_average=monthly_average,
    )
