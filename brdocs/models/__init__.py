from .document import DocumentResult, DocumentType, ValidationMode
from .exceptions import RecordError, SchemaViolation, TypeViolation, UnknownKeyError, ReadOnlyViolation
from .record import RecordSchema, TypedImmutableRecord, TypeTag, type_tag

__all__ = [
    "DocumentResult",
    "DocumentType",
    "ValidationMode",
    "RecordError",
    "SchemaViolation",
    "TypeViolation",
    "UnknownKeyError",
    "ReadOnlyViolation",
    "RecordSchema",
    "TypedImmutableRecord",
    "TypeTag",
    "type_tag",
]
