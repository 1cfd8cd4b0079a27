"""DONKI EDA — automatic exploratory analysis of space-weather event records."""

from .models import EdaResult, FieldSummary, FieldType
from .services import DatasetAnalyzer, analyze_dataset

__version__ = "0.1.0"

__all__ = [
    "DatasetAnalyzer",
    "analyze_dataset",
    "EdaResult",
    "FieldSummary",
    "FieldType",
]
