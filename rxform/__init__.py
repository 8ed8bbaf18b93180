"""Keystroke sanitization for pharmacy store manager form inputs."""
from rxform.handlers import FormState, extract_event_value, make_numeric_handler, make_phone_handler
from rxform.utils.state_paths import get_in, parse_field_path, set_in
from rxform.utils.validation import (
    INTEGER,
    PERCENTAGE,
    POSITIVE_NUMBER,
    PRICE,
    QUANTITY,
    VALIDATION_OPTIONS,
    ValidationOptions,
    get_preset,
    sanitize_numeric,
    sanitize_phone,
    to_number,
)

__version__ = "0.1.0"

__all__ = [
    "FormState",
    "INTEGER",
    "PERCENTAGE",
    "POSITIVE_NUMBER",
    "PRICE",
    "QUANTITY",
    "VALIDATION_OPTIONS",
    "ValidationOptions",
    "extract_event_value",
    "get_in",
    "get_preset",
    "make_numeric_handler",
    "make_phone_handler",
    "parse_field_path",
    "set_in",
    "sanitize_numeric",
    "sanitize_phone",
    "to_number",
]
