from dataclasses import dataclass
from enum import Enum


class NumericKind(Enum):
    """How a captured numeral is interpreted."""

    INTEGER = "integer"
    CURRENCY = "currency"


class MatchMode(Enum):
    PREFIX = "prefix"
    CONTAINS = "contains"


class MetricLabel(Enum):
    """Known metric labels, in tie-break order.

    Each member carries its folded label phrase, how the phrase is matched
    against a folded line and the numeric kind of its value.
    """

    TOTAL_LIVES = ("vidas totais vendidas", MatchMode.PREFIX, NumericKind.INTEGER)
    AMOUNT_RECEIVED = ("valor recebido", MatchMode.PREFIX, NumericKind.CURRENCY)
    MONTHLY_AVERAGE = ("media mes", MatchMode.CONTAINS, NumericKind.CURRENCY)

    def __init__(self, phrase: str, mode: MatchMode, kind: NumericKind) -> None:
        self.phrase = phrase
        self.mode = mode
        self.kind = kind


@dataclass(frozen=True)
class ExtractedMetrics:
    """The three metrics read from one sheet export.

    A metric whose label was not found stays at zero.
    """

    total_lives_sold: int = 0
    amount_received: float = 0.0
    monthly_average: float = 0.0
