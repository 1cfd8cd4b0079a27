"""
Event Flattener — event-type-specific pre-processing of DONKI records.

Turns nested, type-specific event records into flat rows of scalar fields
before analysis:

  CME  one row per event from the most accurate entry in ``cmeAnalyses``
       (analysis fields win on key collisions); events without analyses
       are dropped.
  FLR  derived source latitude/longitude, flare intensity and duration.
  GST  ``maxKp``, the highest parseable Kp reading in ``allKpIndex``
       (None when no reading parses).

Any other event type passes through unchanged. Input records are never
mutated; every output row is a new dict.
"""

import logging
import re
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from .parsers import parse_boolean, parse_date, parse_heliographic, parse_number

logger = logging.getLogger("donki_eda.flattener")


EVENT_TYPES = ("CME", "GST", "IPS", "FLR", "SEP", "MPC", "RBE", "HSS", "WSA")

_INTENSITY_PATTERN = re.compile(r"(\d+(?:\.\d+)?)")

Row = Dict[str, Any]


def _is_scalar(value: Any) -> bool:
    return not isinstance(value, (dict, list, tuple, set))


def _scalar_fields(record: Mapping[str, Any]) -> Row:
    return {k: v for k, v in record.items() if _is_scalar(v)}


def _source_coordinates(record: Mapping[str, Any]) -> Row:
    coord = parse_heliographic(record.get("sourceLocation"))
    return {
        "sourceLat": coord.lat if coord else None,
        "sourceLon": coord.lon if coord else None,
    }


# ─── Per-category flatteners ─────────────────────────────────────────


def _select_analysis(analyses: Sequence[Any]) -> Optional[Mapping[str, Any]]:
    candidates = [a for a in analyses if isinstance(a, Mapping)]
    if not candidates:
        return None
    for analysis in candidates:
        if parse_boolean(analysis.get("isMostAccurate")) is True:
            return analysis
    return candidates[0]


def flatten_cme(record: Mapping[str, Any]) -> Optional[Row]:
    analyses = record.get("cmeAnalyses")
    if not isinstance(analyses, (list, tuple)) or not analyses:
        return None
    analysis = _select_analysis(analyses)
    if analysis is None:
        return None

    row = _scalar_fields(record)
    row.update(_scalar_fields(analysis))
    row.update(_source_coordinates(record))
    return row


def flatten_flr(record: Mapping[str, Any]) -> Optional[Row]:
    row = dict(record)
    row.update(_source_coordinates(record))

    match = _INTENSITY_PATTERN.search(str(record.get("classType") or ""))
    row["intensityValue"] = float(match.group(1)) if match else None

    begin = parse_date(record.get("beginTime"))
    end = parse_date(record.get("endTime"))
    row["durationMinutes"] = None
    if begin is not None and end is not None:
        try:
            row["durationMinutes"] = (end - begin).total_seconds() / 60.0
        except (OverflowError, ValueError):
            logger.debug("flatten_flr: duration out of range for %r", record.get("flrID"))
    return row


def flatten_gst(record: Mapping[str, Any]) -> Optional[Row]:
    row = dict(record)
    readings = record.get("allKpIndex")
    if not isinstance(readings, (list, tuple)) or not readings:
        row["maxKp"] = None
        return row

    max_kp: Optional[float] = None
    for reading in readings:
        if not isinstance(reading, Mapping):
            continue
        kp = parse_number(reading.get("kpIndex"))
        if kp is None:
            continue
        max_kp = kp if max_kp is None else max(max_kp, kp)
    row["maxKp"] = max_kp
    return row


FLATTENERS: Dict[str, Callable[[Mapping[str, Any]], Optional[Row]]] = {
    "CME": flatten_cme,
    "FLR": flatten_flr,
    "GST": flatten_gst,
}


# ─── Dispatch ────────────────────────────────────────────────────────


def get_flattener(
    event_type: Optional[str],
) -> Optional[Callable[[Mapping[str, Any]], Optional[Row]]]:
    if not isinstance(event_type, str):
        return None
    key = event_type.strip().upper()
    if key not in EVENT_TYPES:
        logger.debug("Unrecognized event type %r; records pass through", event_type)
    return FLATTENERS.get(key)


def flatten_events(records: Sequence[Any], event_type: Optional[str] = None) -> List[Row]:
    """
    Flatten ``records`` for ``event_type``.

    Non-mapping entries are dropped for every type; a flattener returning
    None drops that record. Row count and field names may change.
    """
    flattener = get_flattener(event_type)
    rows: List[Row] = []
    skipped = 0

    for record in records:
        if not isinstance(record, Mapping):
            skipped += 1
            continue
        row = flattener(record) if flattener else dict(record)
        if row is None:
            skipped += 1
            continue
        rows.append(row)

    if skipped:
        logger.warning(
            "flatten_events(%s): dropped %d of %d records",
            event_type, skipped, len(records),
        )
    logger.debug("flatten_events(%s): %d rows", event_type, len(rows))
    return rows
