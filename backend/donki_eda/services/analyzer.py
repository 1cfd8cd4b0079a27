"""
Dataset Analyzer — automatic exploratory analysis of event records.

Given an arbitrary list of semi-structured records, produces one
FieldSummary per observed field, the first datetime field, and a Pearson
correlation matrix over the relevant numeric fields.

Pure computation: no I/O, no shared state between calls. Malformed input
degrades to an empty or partial result instead of raising.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

from ..core.config import Settings, get_settings
from ..models import (
    CATEGORICAL_TYPES,
    NUMERIC_TYPES,
    CorrelationMatrix,
    EdaResult,
    FieldSummary,
    FieldType,
)
from .field_filter import FieldBlacklist, correlation_candidates
from .flattener import flatten_events
from .parsers import is_missing, parse_number
from .statistics import correlation_matrix, frequency_table, histogram, numeric_summary
from .type_inference import infer_field_type

logger = logging.getLogger("donki_eda.analyzer")


class DatasetAnalyzer:
    """
    Drives parsing, type inference, statistics and correlation over a dataset.

    Usage:
        analyzer = DatasetAnalyzer()
        result = analyzer.analyze(records, category_hint="FLR")
        payload = result.to_dict()
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        blacklist: Optional[FieldBlacklist] = None,
    ):
        self.settings = settings or get_settings()
        self.blacklist = blacklist or FieldBlacklist.from_settings(self.settings)

    def analyze(self, records: Any, category_hint: Optional[str] = None) -> EdaResult:
        rows = self._coerce_records(records)
        if rows:
            rows = flatten_events(rows, category_hint)
        if not rows:
            logger.info("analyze(%s): no rows to analyze", category_hint)
            return EdaResult(row_count=0)

        row_count = len(rows)
        field_names = _collect_field_names(rows)
        logger.info(
            "analyze(%s): %d rows, %d fields", category_hint, row_count, len(field_names)
        )

        summaries: List[FieldSummary] = []
        for name in field_names:
            values = [row.get(name) for row in rows]
            summary = self._summarize_field(name, values, row_count)
            logger.debug(
                "  field '%s' → type=%s, missing=%d",
                name, summary.type.value, summary.missing_count,
            )
            summaries.append(summary)

        detected_time_field = next(
            (s.field for s in summaries if s.type == FieldType.DATETIME), None
        )

        return EdaResult(
            row_count=row_count,
            fields=summaries,
            detected_time_field=detected_time_field,
            correlation=self._correlate(rows, summaries, row_count),
            processed_data=rows,
        )

    # ─── Internal helpers ────────────────────────────────────────────

    def _coerce_records(self, records: Any) -> List[Any]:
        if isinstance(records, pd.DataFrame):
            return records.to_dict(orient="records")
        if isinstance(records, (list, tuple)):
            return list(records)
        if records is not None:
            logger.warning(
                "analyze: expected a list of records, got %s; returning empty result",
                type(records).__name__,
            )
        return []

    def _summarize_field(
        self, name: str, values: Sequence[Any], row_count: int
    ) -> FieldSummary:
        s = self.settings
        present = [v for v in values if not is_missing(v)]
        missing_count = row_count - len(present)

        summary = FieldSummary(
            field=name,
            type=FieldType.STRING,
            missing_count=missing_count,
            missing_percent=100 * missing_count / row_count if row_count else 0.0,
            sample_values=[_display_value(v) for v in present[:s.SAMPLE_VALUES_LIMIT]],
        )

        if self.blacklist.is_blacklisted(name):
            summary.type = FieldType.IGNORED
            return summary

        summary.type = infer_field_type(
            present,
            sample_size=s.TYPE_SAMPLE_SIZE,
            dominance_ratio=s.DOMINANCE_RATIO,
            boolean_dominance_ratio=s.BOOLEAN_DOMINANCE_RATIO,
            conflict_ratio=s.CONFLICT_RATIO,
            date_min_length=s.DATE_MIN_LENGTH,
            field_name=name,
        )

        if summary.type in NUMERIC_TYPES:
            summary.numeric = numeric_summary(present)

        if summary.type in CATEGORICAL_TYPES:
            cardinality, top = frequency_table(present, top_n=s.CATEGORICAL_TOP_N)
            summary.cardinality = cardinality
            summary.categorical = top

        return summary

    def _correlate(
        self,
        rows: Sequence[Dict[str, Any]],
        summaries: Sequence[FieldSummary],
        row_count: int,
    ) -> Optional[CorrelationMatrix]:
        candidates = correlation_candidates(
            summaries,
            row_count,
            cardinality_ratio=self.settings.CORRELATION_CARDINALITY_RATIO,
            cardinality_cap=self.settings.CORRELATION_CARDINALITY_CAP,
        )
        if len(candidates) < 2:
            return None

        names = [c.field for c in candidates]
        columns = [[parse_number(row.get(name)) for row in rows] for name in names]
        return CorrelationMatrix(fields=names, matrix=correlation_matrix(columns))

    def histogram(self, result: EdaResult, field_name: str) -> List[Dict[str, Any]]:
        """Histogram bins for a numeric field of an earlier result."""
        summary = result.get_field(field_name)
        if summary is None or summary.numeric is None:
            return []
        values = [row.get(field_name) for row in result.processed_data]
        return histogram(
            values,
            summary.numeric.min,
            summary.numeric.max,
            bins=self.settings.HISTOGRAM_BINS,
        )


def _collect_field_names(rows: Sequence[Dict[str, Any]]) -> List[str]:
    seen: Dict[str, None] = {}
    for row in rows:
        for key in row:
            seen.setdefault(key, None)
    return list(seen)


def _display_value(value: Any) -> Any:
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, default=str)
    return value


def analyze_dataset(
    records: Any,
    category_hint: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> EdaResult:
    """Analyze ``records`` with default (or supplied) settings."""
    return DatasetAnalyzer(settings=settings).analyze(records, category_hint)
