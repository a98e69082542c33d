from .frame_validation import VALIDATORS, normalize_column, validation_report, format_documents, sanitize_frame

__all__ = [
    "VALIDATORS",
    "normalize_column",
    "validation_report",
    "format_documents",
    "sanitize_frame",
]
