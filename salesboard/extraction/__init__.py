from salesboard.extraction.extractor import extract
from salesboard.extraction.models import ExtractedMetrics, MetricLabel, NumericKind

__all__ = ["ExtractedMetrics", "MetricLabel", "NumericKind", "extract"]
