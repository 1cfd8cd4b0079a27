"""
Statistics Module — numeric summaries, frequency tables, Pearson correlation.

Runs entirely locally on plain Python sequences; numpy does the arithmetic.
Quantiles use linear interpolation between order statistics (R-7, numpy's
default), and standard deviation is the sample estimator (ddof=1).
"""

import json
import math
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np

from ..models import CategoryCount, NumericSummary
from .parsers import is_missing, parse_number


# ─── Numeric summary ──────────────────────────────────────────────────


def quantile(sorted_values: Sequence[float], q: float) -> float:
    if len(sorted_values) == 0:
        return math.nan
    return float(np.quantile(np.asarray(sorted_values, dtype=float), q))


def numeric_summary(values: Sequence[Any]) -> Optional[NumericSummary]:
    """
    Summarize every value that parses as a finite number.

    Returns None when nothing parses, so callers never see a summary of NaNs.
    """
    parsed = [parse_number(v) for v in values if not is_missing(v)]
    nums = np.array([n for n in parsed if n is not None], dtype=float)
    if nums.size == 0:
        return None

    nums.sort()
    p25, median, p75 = np.quantile(nums, [0.25, 0.5, 0.75])
    stddev = float(np.std(nums, ddof=1)) if nums.size > 1 else 0.0

    return NumericSummary(
        count=int(nums.size),
        min=float(nums[0]),
        max=float(nums[-1]),
        mean=float(np.mean(nums)),
        median=float(median),
        p25=float(p25),
        p75=float(p75),
        stddev=stddev,
    )


# ─── Categorical frequency ────────────────────────────────────────────


def category_key(value: Any) -> str:
    """Stable text key for counting; nested values become canonical JSON."""
    if isinstance(value, (bool, np.bool_)):
        return "true" if value else "false"
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, sort_keys=True, default=str)
    if isinstance(value, (float, np.floating)) and float(value).is_integer():
        return str(int(value))
    if isinstance(value, str):
        return value.strip()
    return str(value)


def frequency_table(
    values: Sequence[Any], top_n: int = 20
) -> Tuple[int, List[CategoryCount]]:
    """
    Count every non-missing value by its category key.

    Returns (cardinality, top entries). Cardinality is the full distinct
    count, not the length of the truncated list. Ties keep first-seen order.
    """
    freq: Dict[str, int] = {}
    for value in values:
        if is_missing(value):
            continue
        key = category_key(value)
        freq[key] = freq.get(key, 0) + 1

    ranked = sorted(freq.items(), key=lambda kv: kv[1], reverse=True)
    return len(freq), [CategoryCount(value=k, count=c) for k, c in ranked[:top_n]]


# ─── Correlation ─────────────────────────────────────────────────────


def pearson_correlation(
    x: Sequence[Optional[float]], y: Sequence[Optional[float]]
) -> float:
    """
    Pearson coefficient over positions where both values are finite.

    Vectors are truncated to the shorter length. Returns NaN with fewer than
    two paired samples or when either side has no variance.
    """
    n = min(len(x), len(y))
    pairs = [
        (a, b) for a, b in zip(x[:n], y[:n])
        if a is not None and b is not None
        and math.isfinite(a) and math.isfinite(b)
    ]
    if len(pairs) < 2:
        return math.nan

    xs = np.array([p[0] for p in pairs], dtype=float)
    ys = np.array([p[1] for p in pairs], dtype=float)
    if np.all(xs == xs[0]) or np.all(ys == ys[0]):
        return math.nan

    dx = xs - xs.mean()
    dy = ys - ys.mean()
    var_x = float(np.dot(dx, dx))
    var_y = float(np.dot(dy, dy))
    if var_x <= 0 or var_y <= 0:
        return math.nan

    r = float(np.dot(dx, dy)) / math.sqrt(var_x * var_y)
    return float(np.clip(r, -1.0, 1.0))


def correlation_matrix(columns: Sequence[Sequence[Optional[float]]]) -> List[List[float]]:
    """Symmetric matrix with a unit diagonal; each pair computed once."""
    size = len(columns)
    matrix = [[0.0] * size for _ in range(size)]
    for i in range(size):
        matrix[i][i] = 1.0
        for j in range(i + 1, size):
            r = pearson_correlation(columns[i], columns[j])
            matrix[i][j] = r
            matrix[j][i] = r
    return matrix


# ─── Histogram ───────────────────────────────────────────────────────


def histogram(
    values: Sequence[Any],
    minimum: float,
    maximum: float,
    bins: int = 10,
) -> List[Dict[str, Any]]:
    """
    Equal-width bins between ``minimum`` and ``maximum`` (last bin closed).

    Degenerate ranges yield an empty list: there is not enough variance to bin.
    """
    if bins < 1 or not (math.isfinite(minimum) and math.isfinite(maximum)):
        return []
    if minimum >= maximum:
        return []

    width = (maximum - minimum) / bins
    counts = [0] * bins
    for value in values:
        number = parse_number(value)
        if number is None:
            continue
        idx = int((number - minimum) // width)
        counts[min(max(idx, 0), bins - 1)] += 1

    return [
        {"start": minimum + i * width, "count": counts[i]}
        for i in range(bins)
    ]
