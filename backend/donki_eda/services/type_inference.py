"""
Type Inferencer — decides one semantic type per field.

Each sampled value is classified into its most specific category
(heliographic > number > boolean > datetime > string). A category wins
the field only when it dominates the sample and no competing category
holds a meaningful share; anything else falls back to ``string``.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from ..models import FieldType
from .parsers import (
    is_missing,
    parse_boolean,
    parse_date,
    parse_heliographic,
    parse_number,
)

logger = logging.getLogger("donki_eda.type_inference")


_RANKED_TYPES = (
    FieldType.HELIOGRAPHIC,
    FieldType.NUMBER,
    FieldType.BOOLEAN,
    FieldType.DATETIME,
)


def classify_value(value: Any, date_min_length: int = 8) -> FieldType:
    """Return the most specific category a single non-missing value fits."""
    if parse_heliographic(value) is not None:
        return FieldType.HELIOGRAPHIC
    if parse_number(value) is not None:
        return FieldType.NUMBER
    if parse_boolean(value) is not None:
        return FieldType.BOOLEAN
    if parse_date(value, min_length=date_min_length) is not None:
        return FieldType.DATETIME
    return FieldType.STRING


def sample_values(values: Iterable[Any], sample_size: int) -> List[Any]:
    """First ``sample_size`` non-missing values, in input order."""
    sample: List[Any] = []
    for value in values:
        if is_missing(value):
            continue
        sample.append(value)
        if len(sample) >= sample_size:
            break
    return sample


def infer_field_type(
    values: Iterable[Any],
    sample_size: int = 500,
    dominance_ratio: float = 0.9,
    boolean_dominance_ratio: float = 0.95,
    conflict_ratio: float = 0.05,
    date_min_length: int = 8,
    field_name: Optional[str] = None,
) -> FieldType:
    sample = sample_values(values, sample_size)
    if not sample:
        return FieldType.NULL

    counts: Dict[FieldType, int] = {t: 0 for t in _RANKED_TYPES}
    counts[FieldType.STRING] = 0
    for value in sample:
        counts[classify_value(value, date_min_length)] += 1

    total = len(sample)
    ratios = {t: c / total for t, c in counts.items()}

    for candidate in _RANKED_TYPES:
        threshold = (
            boolean_dominance_ratio if candidate == FieldType.BOOLEAN
            else dominance_ratio
        )
        if ratios[candidate] <= threshold:
            continue
        competing = [
            t for t in _RANKED_TYPES
            if t != candidate and ratios[t] > conflict_ratio
        ]
        if competing:
            logger.debug(
                "infer_field_type(%s): %s dominant but contested by %s",
                field_name, candidate.value, [t.value for t in competing],
            )
            break
        if candidate == FieldType.NUMBER:
            return _refine_numeric(sample)
        return candidate

    return FieldType.STRING


def _refine_numeric(sample: List[Any]) -> FieldType:
    """``integer`` when every parseable sampled value is integral."""
    for value in sample:
        number = parse_number(value)
        if number is not None and not number.is_integer():
            return FieldType.NUMBER
    return FieldType.INTEGER
