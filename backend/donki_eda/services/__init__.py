"""EDA services — parsers, type inference, statistics, filtering, flattening, analysis."""

from .analyzer import DatasetAnalyzer, analyze_dataset
from .field_filter import FieldBlacklist
from .flattener import flatten_events
from .summary_context import build_summary_context, format_summary_context

__all__ = [
    "DatasetAnalyzer",
    "analyze_dataset",
    "FieldBlacklist",
    "flatten_events",
    "build_summary_context",
    "format_summary_context",
]
