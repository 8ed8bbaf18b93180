"""Utilities for input validation and sanitization.

Every price, quantity, percentage and phone field in the store manager forms
runs its raw keystroke value through one of the sanitizers below. They never
reject input: characters that cannot belong to the value are dropped and the
best-effort prefix the user could still be typing is returned as a string.
"""
import logging
import math
import re
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Optional, Union

from rxform.config.app_config import (
    DEFAULT_ALLOW_DECIMALS,
    DEFAULT_ALLOW_NEGATIVE,
    DEFAULT_MAX_DECIMALS,
    PHONE_MAX_DIGITS,
)
from rxform.utils.config_loader import ConfigLoader

logger = logging.getLogger(__name__)

_NON_NUMERIC = re.compile(r'[^0-9.\-]')
_NON_PHONE = re.compile(r'[^0-9+]')
_FLOAT_PREFIX = re.compile(r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)')
_INT_PREFIX = re.compile(r'[+-]?[0-9]+')

# Transitional states a user passes through while typing
_UNCLAMPED = ("", "-", ".")

_CAMEL_CASE_KEYS = {
    "allowDecimals": "allow_decimals",
    "allowNegative": "allow_negative",
    "maxDecimals": "max_decimals",
}


def _is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _number_to_text(number):
    """Render a number the way a text input would display it."""
    if isinstance(number, float):
        if math.isnan(number):
            return "NaN"
        if math.isinf(number):
            return "Infinity" if number > 0 else "-Infinity"
        if number.is_integer() and abs(number) < 1e21:
            return str(int(number))
        return repr(number)
    return str(number)


def _to_text(value):
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if _is_number(value):
        return _number_to_text(value)
    return str(value)


def _normalize_keys(mapping):
    known = {f.name for f in fields(ValidationOptions)}
    normalized = {}
    for key, value in mapping.items():
        name = _CAMEL_CASE_KEYS.get(key, key)
        if name not in known:
            raise ValueError(f"Unknown validation option: {key!r}")
        normalized[name] = value
    return normalized


@dataclass(frozen=True)
class ValidationOptions:
    """Constraints applied by :func:`sanitize_numeric`.

    Attributes:
        allow_decimals (bool): Keep a single decimal point.
        allow_negative (bool): Keep a single leading minus sign.
        max_decimals (int): Digits kept after the decimal point.
        min (float, optional): Lower bound; values below it are replaced by it.
        max (float, optional): Upper bound; values above it are replaced by it.
    """
    allow_decimals: bool = DEFAULT_ALLOW_DECIMALS
    allow_negative: bool = DEFAULT_ALLOW_NEGATIVE
    max_decimals: int = DEFAULT_MAX_DECIMALS
    min: Optional[float] = None
    max: Optional[float] = None

    def __post_init__(self):
        if isinstance(self.max_decimals, bool) or not isinstance(self.max_decimals, int):
            raise ValueError(f"max_decimals must be an integer, got {self.max_decimals!r}")
        if self.max_decimals < 0:
            raise ValueError(f"max_decimals must be >= 0, got {self.max_decimals}")

    @classmethod
    def coerce(cls, value=None):
        """Build options from ``None``, an options object, or a mapping.

        Mappings may use either the snake_case field names or the camelCase
        keys of the web forms (``allowDecimals``, ``maxDecimals``...).

        Raises:
            ValueError: On unknown keys or an invalid ``max_decimals``.
            TypeError: If ``value`` is none of the accepted types.
        """
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls(**_normalize_keys(value))
        raise TypeError(f"Cannot build ValidationOptions from {type(value).__name__}")

    def with_overrides(self, **changes):
        """Return a copy with the given fields replaced, e.g. ``QUANTITY.with_overrides(min=1)``."""
        return replace(self, **_normalize_keys(changes))


OptionsLike = Union[ValidationOptions, Mapping, None]


def sanitize_numeric(value, options: OptionsLike = None) -> str:
    """Clean raw input into a numeric string that satisfies ``options``.

    Args:
        value (str | int | float): Current content of the input field.
        options: ``ValidationOptions``, a mapping of option values, or None
            for the defaults.

    Returns:
        str: Sanitized value. Empty input stays empty; ``"-"`` and ``"."``
        pass through unclamped.
    """
    opts = ValidationOptions.coerce(options)
    text = _to_text(value)
    clean = _NON_NUMERIC.sub('', text)

    if not opts.allow_negative:
        clean = clean.replace('-', '')
    elif clean.count('-') > 1:
        clean = clean.replace('-', '')
        if text.startswith('-'):
            clean = '-' + clean
    elif '-' in clean and not clean.startswith('-'):
        # an interior minus is dropped, not moved to the front
        clean = clean.replace('-', '')

    if not opts.allow_decimals:
        clean = clean.replace('.', '')
    else:
        if clean.count('.') > 1:
            integer_part, _, rest = clean.partition('.')
            clean = integer_part + '.' + rest.replace('.', '')
        if '.' in clean:
            integer_part, decimal_part = clean.split('.')
            if len(decimal_part) > opts.max_decimals:
                clean = integer_part + '.' + decimal_part[:opts.max_decimals]

    if clean not in _UNCLAMPED:
        match = _FLOAT_PREFIX.match(clean)
        if match:
            number = float(match.group(0))
            if _is_number(opts.min) and number < opts.min:
                clean = _number_to_text(opts.min)
            if _is_number(opts.max) and number > opts.max:
                clean = _number_to_text(opts.max)

    if clean != text:
        logger.debug(f"Sanitized numeric input: {text!r} -> {clean!r}")
    return clean


def sanitize_phone(value, max_digits=PHONE_MAX_DIGITS) -> str:
    """Clean raw input into a phone number: digits and one leading ``+``.

    Args:
        value (str | int): Current content of the input field.
        max_digits (int): Digits kept, not counting the leading ``+``.

    Returns:
        str: Sanitized phone number.
    """
    text = _to_text(value)
    clean = _NON_PHONE.sub('', text)

    if clean.count('+') > 1 or ('+' in clean and not clean.startswith('+')):
        clean = clean.replace('+', '')

    if clean.startswith('+'):
        clean = '+' + clean[1:1 + max_digits]
    else:
        clean = clean[:max_digits]

    if clean != text:
        logger.debug(f"Sanitized phone input: {text!r} -> {clean!r}")
    return clean


def to_number(value, options: OptionsLike = None, default=0):
    """Convert a sanitized value into the number a form submits.

    Parses the longest numeric prefix, as an integer when the options do not
    allow decimals. Empty, partial or zero values yield ``default``.

    Args:
        value (str): Sanitized field value.
        options: Options the field was sanitized with.
        default: Returned when nothing usable can be parsed.

    Returns:
        int | float: Parsed number or ``default``.
    """
    opts = ValidationOptions.coerce(options)
    text = _to_text(value).strip()
    if opts.allow_decimals:
        match = _FLOAT_PREFIX.match(text)
        number = float(match.group(0)) if match else None
    else:
        match = _INT_PREFIX.match(text)
        number = int(match.group(0)) if match else None
    if not number:
        logger.debug(f"No usable number in {text!r}, using {default!r}")
        return default
    return number


VALIDATION_OPTIONS = {
    name: ValidationOptions.coerce(preset)
    for name, preset in ConfigLoader().get_presets().items()
}

PRICE = VALIDATION_OPTIONS["PRICE"]
QUANTITY = VALIDATION_OPTIONS["QUANTITY"]
PERCENTAGE = VALIDATION_OPTIONS["PERCENTAGE"]
POSITIVE_NUMBER = VALIDATION_OPTIONS["POSITIVE_NUMBER"]
INTEGER = VALIDATION_OPTIONS["INTEGER"]


def get_preset(name):
    """Look up a preset by name, ignoring case.

    Raises:
        KeyError: If no preset has that name.
    """
    try:
        return VALIDATION_OPTIONS[name.upper()]
    except KeyError:
        known = ", ".join(sorted(VALIDATION_OPTIONS))
        raise KeyError(f"Unknown validation preset {name!r}; expected one of: {known}") from None
