"""
EDA result structures.

Plain dataclasses created fresh for every analysis call. ``to_dict()``
produces the camelCase shape consumed by chart and summary components.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class FieldType(str, Enum):
    """Semantic type assigned to a field, once per analysis."""
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    DATETIME = "datetime"
    STRING = "string"
    HELIOGRAPHIC = "heliographic"
    NULL = "null"
    IGNORED = "ignored"


NUMERIC_TYPES = {FieldType.NUMBER, FieldType.INTEGER}
CATEGORICAL_TYPES = {
    FieldType.STRING,
    FieldType.BOOLEAN,
    FieldType.INTEGER,
    FieldType.HELIOGRAPHIC,
}


@dataclass
class NumericSummary:
    count: int
    min: float
    max: float
    mean: float
    median: float
    p25: float
    p75: float
    stddev: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "count": self.count,
            "min": self.min,
            "max": self.max,
            "mean": self.mean,
            "median": self.median,
            "p25": self.p25,
            "p75": self.p75,
            "stddev": self.stddev,
        }


@dataclass
class CategoryCount:
    value: str
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {"value": self.value, "count": self.count}


@dataclass
class FieldSummary:
    """Summary of one field observed across the dataset."""
    field: str
    type: FieldType
    missing_count: int
    missing_percent: float
    sample_values: List[Any] = field(default_factory=list)
    cardinality: Optional[int] = None
    numeric: Optional[NumericSummary] = None
    categorical: Optional[List[CategoryCount]] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "field": self.field,
            "type": self.type.value,
            "missingCount": self.missing_count,
            "missingPercent": self.missing_percent,
            "sampleValues": list(self.sample_values),
        }
        if self.cardinality is not None:
            out["cardinality"] = self.cardinality
        if self.numeric is not None:
            out["numeric"] = self.numeric.to_dict()
        if self.categorical is not None:
            out["categorical"] = [c.to_dict() for c in self.categorical]
        return out


@dataclass
class CorrelationMatrix:
    """Symmetric Pearson matrix; undefined cells are NaN."""
    fields: List[str]
    matrix: List[List[float]]

    def value(self, field_a: str, field_b: str) -> float:
        i = self.fields.index(field_a)
        j = self.fields.index(field_b)
        return self.matrix[i][j]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fields": list(self.fields),
            "matrix": [list(row) for row in self.matrix],
        }


@dataclass
class EdaResult:
    row_count: int
    fields: List[FieldSummary] = field(default_factory=list)
    detected_time_field: Optional[str] = None
    correlation: Optional[CorrelationMatrix] = None
    # Rows actually analyzed, after any flattening
    processed_data: List[Dict[str, Any]] = field(default_factory=list)

    def get_field(self, name: str) -> Optional[FieldSummary]:
        for summary in self.fields:
            if summary.field == name:
                return summary
        return None

    def to_dict(self, include_data: bool = False) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "rowCount": self.row_count,
            "fields": [f.to_dict() for f in self.fields],
        }
        if self.detected_time_field is not None:
            out["detectedTimeField"] = self.detected_time_field
        if self.correlation is not None:
            out["correlation"] = self.correlation.to_dict()
        if include_data:
            out["processedData"] = self.processed_data
        return out
