"""Column mapping validation and record transformation."""

from .errors import MappingError, MappingErrorKind, RecordError, RecordErrorKind
from .plan import RecordPlan
from .transformer import transform_record
from .validator import MappingValidator, validate_mapping

__all__ = [
    "MappingError",
    "MappingErrorKind",
    "RecordError",
    "RecordErrorKind",
    "RecordPlan",
    "MappingValidator",
    "validate_mapping",
    "transform_record",
]
