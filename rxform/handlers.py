"""Change handlers that feed sanitized input into form state."""
import logging
from collections.abc import Mapping
from typing import Any, Callable, Optional

from rxform.utils.state_paths import parse_field_path, set_in
from rxform.utils.validation import OptionsLike, ValidationOptions, sanitize_numeric, sanitize_phone

logger = logging.getLogger(__name__)

SetState = Callable[[Any], None]


def extract_event_value(event):
    """Pull the raw text out of an input change event.

    Accepts objects exposing ``event.target.value``, mappings shaped like
    ``{"target": {"value": ...}}``, or the raw value itself.
    """
    target = getattr(event, "target", None)
    if target is not None and hasattr(target, "value"):
        return target.value
    if isinstance(event, Mapping):
        target = event.get("target")
        if isinstance(target, Mapping) and "value" in target:
            return target["value"]
    return event


def _build_handler(set_state, field_path, sanitize):
    if not callable(set_state):
        raise TypeError("set_state must be callable")
    segments = parse_field_path(field_path) if field_path else None

    def handler(event):
        value = sanitize(extract_event_value(event))
        if segments is None:
            set_state(value)
        else:
            set_state(lambda prev: set_in(prev, segments, value))

    return handler


def make_numeric_handler(set_state: SetState, field_path: Optional[str] = None,
                         options: OptionsLike = None) -> Callable[[Any], None]:
    """Create a change handler for a numeric input.

    Args:
        set_state: Receives the sanitized value when ``field_path`` is empty,
            otherwise an updater ``prev -> new_state``.
        field_path (str, optional): Key or dotted path such as
            ``"stripInfo.purchasePrice"``.
        options: Validation options or preset for the field.

    Returns:
        Callable: Handler taking the change event or raw value.
    """
    opts = ValidationOptions.coerce(options)
    logger.debug(f"Numeric handler for {field_path or '<state>'} with {opts}")
    return _build_handler(set_state, field_path, lambda raw: sanitize_numeric(raw, opts))


def make_phone_handler(set_state: SetState, field_path: Optional[str] = None) -> Callable[[Any], None]:
    """Create a change handler for a phone number input."""
    logger.debug(f"Phone handler for {field_path or '<state>'}")
    return _build_handler(set_state, field_path, sanitize_phone)


class FormState:
    """Holds form state and applies ``set_state`` updates the way React does.

    Every state the holder has had is kept in ``history`` so successive
    states can be compared by identity.
    """
    def __init__(self, initial=None):
        self.value = {} if initial is None else initial
        self.history = [self.value]

    def set_state(self, value_or_updater):
        """Replace the state, or apply an updater callable to it."""
        if callable(value_or_updater):
            new_value = value_or_updater(self.value)
        else:
            new_value = value_or_updater
        self.value = new_value
        self.history.append(new_value)
