from .eda import (
    FieldType,
    NUMERIC_TYPES,
    CATEGORICAL_TYPES,
    NumericSummary,
    CategoryCount,
    FieldSummary,
    CorrelationMatrix,
    EdaResult,
)

__all__ = [
    "FieldType",
    "NUMERIC_TYPES",
    "CATEGORICAL_TYPES",
    "NumericSummary",
    "CategoryCount",
    "FieldSummary",
    "CorrelationMatrix",
    "EdaResult",
]
