"""
Statistical context for event summaries.

Condenses an EDA result into a small dict (and a plain-text rendering) that
a summary generator can append to its prompt. Input is capped before
analysis because the engine itself has no backpressure.
"""

import logging
import math
from itertools import combinations
from typing import Any, Dict, List, Optional

from ..core.config import Settings, get_settings
from ..models import EdaResult, FieldType
from .analyzer import DatasetAnalyzer

logger = logging.getLogger("donki_eda.summary_context")


def build_summary_context(
    records: Any,
    category_hint: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> Dict[str, Any]:
    settings = settings or get_settings()
    if isinstance(records, (list, tuple)) and len(records) > settings.CONTEXT_MAX_RECORDS:
        logger.info(
            "build_summary_context: truncating %d records to %d",
            len(records), settings.CONTEXT_MAX_RECORDS,
        )
        records = list(records[:settings.CONTEXT_MAX_RECORDS])

    result = DatasetAnalyzer(settings=settings).analyze(records, category_hint)
    return condense_result(result, settings)


def condense_result(result: EdaResult, settings: Optional[Settings] = None) -> Dict[str, Any]:
    """Row/field counts, numeric ranges, top categories and strong correlations."""
    settings = settings or get_settings()
    top_fields = settings.CONTEXT_TOP_FIELDS

    type_counts: Dict[str, int] = {}
    for f in result.fields:
        type_counts[f.type.value] = type_counts.get(f.type.value, 0) + 1

    numeric_ranges = [
        {
            "field": f.field,
            "min": f.numeric.min,
            "max": f.numeric.max,
            "mean": f.numeric.mean,
        }
        for f in result.fields
        if f.numeric is not None
    ][:top_fields]

    top_categories = [
        {
            "field": f.field,
            "values": [c.to_dict() for c in f.categorical[:3]],
        }
        for f in result.fields
        if f.categorical and f.type in (FieldType.STRING, FieldType.BOOLEAN, FieldType.HELIOGRAPHIC)
    ][:top_fields]

    return {
        "rowCount": result.row_count,
        "fieldCount": len(result.fields),
        "typeBreakdown": type_counts,
        "detectedTimeField": result.detected_time_field,
        "numericRanges": numeric_ranges,
        "topCategories": top_categories,
        "strongCorrelations": _strong_correlations(
            result, settings.CONTEXT_CORRELATION_THRESHOLD
        ),
    }


def _strong_correlations(result: EdaResult, threshold: float) -> List[Dict[str, Any]]:
    if result.correlation is None:
        return []
    fields = result.correlation.fields
    pairs = []
    for i, j in combinations(range(len(fields)), 2):
        r = result.correlation.matrix[i][j]
        if not math.isnan(r) and abs(r) >= threshold:
            pairs.append({"fields": [fields[i], fields[j]], "r": r})
    pairs.sort(key=lambda p: abs(p["r"]), reverse=True)
    return pairs


def format_summary_context(context: Dict[str, Any]) -> str:
    """Plain-text lines describing the condensed statistics."""
    lines = [
        f"Records analyzed: {context.get('rowCount', 0)}",
        f"Fields: {context.get('fieldCount', 0)}",
    ]
    if context.get("detectedTimeField"):
        lines.append(f"Time field: {context['detectedTimeField']}")

    if context.get("numericRanges"):
        lines.append("Numeric ranges:")
        for r in context["numericRanges"]:
            lines.append(
                f"  - {r['field']}: min={r['min']:.4g}  max={r['max']:.4g}  mean={r['mean']:.4g}"
            )

    if context.get("topCategories"):
        lines.append("Most common values:")
        for c in context["topCategories"]:
            values = ", ".join(f"{v['value']} ({v['count']})" for v in c["values"])
            lines.append(f"  - {c['field']}: {values}")

    if context.get("strongCorrelations"):
        lines.append("Strong correlations:")
        for p in context["strongCorrelations"]:
            lines.append(f"  - {p['fields'][0]} ~ {p['fields'][1]}: r={p['r']:.3f}")

    return "\n".join(lines)
