"""
Field Blacklist / Relevance Filter.

Identifier-like and free-text field names (``*ID``, ``*Number``, ``link``,
``note`` ...) are structurally numeric or categorical but meaningless for
trend analysis. Matching looks at the field name only, never the values.
"""

import logging
import re
from typing import Iterable, List, Pattern

from ..exceptions import EdaConfigurationError
from ..models import FieldSummary, FieldType

logger = logging.getLogger("donki_eda.field_filter")


class FieldBlacklist:
    """Case-insensitive regex table compiled once per instance."""

    def __init__(self, patterns: Iterable[str]):
        self.patterns: List[str] = list(patterns)
        self._compiled: List[Pattern[str]] = []
        for pattern in self.patterns:
            try:
                self._compiled.append(re.compile(pattern, re.IGNORECASE))
            except re.error as exc:
                raise EdaConfigurationError(pattern, str(exc)) from exc

    def is_blacklisted(self, field_name: str) -> bool:
        return any(p.search(str(field_name)) for p in self._compiled)

    @classmethod
    def from_settings(cls, settings) -> "FieldBlacklist":
        return cls(settings.BLACKLIST_PATTERNS)


def is_correlation_candidate(
    summary: FieldSummary,
    row_count: int,
    cardinality_ratio: float = 0.6,
    cardinality_cap: int = 1000,
) -> bool:
    """
    Whether a summarized field may enter the correlation matrix.

    Needs a numeric summary and a non-ignored type. Integer fields that are
    nearly unique across a large dataset are treated as identifiers that
    slipped past the name blacklist.
    """
    if summary.type == FieldType.IGNORED or summary.numeric is None:
        return False
    if summary.type == FieldType.INTEGER and row_count > 0:
        cardinality = summary.cardinality or 0
        if cardinality / row_count > cardinality_ratio and cardinality > cardinality_cap:
            logger.debug(
                "Excluding '%s' from correlation: cardinality %d of %d rows",
                summary.field, cardinality, row_count,
            )
            return False
    return True


def correlation_candidates(
    summaries: Iterable[FieldSummary],
    row_count: int,
    cardinality_ratio: float = 0.6,
    cardinality_cap: int = 1000,
) -> List[FieldSummary]:
    return [
        s for s in summaries
        if is_correlation_candidate(s, row_count, cardinality_ratio, cardinality_cap)
    ]

