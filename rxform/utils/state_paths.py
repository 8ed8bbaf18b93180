"""Dot-delimited field paths into nested form state."""
import logging
from collections.abc import Mapping
from typing import Any, Tuple

logger = logging.getLogger(__name__)

Path = Tuple[str, ...]


def parse_field_path(path) -> Path:
    """Split a field path such as ``"stripInfo.purchasePrice"`` into segments.

    Args:
        path (str | tuple): Dot-delimited path, or segments already split.

    Returns:
        tuple: Path segments.

    Raises:
        ValueError: If the path is empty or has an empty segment.
    """
    if isinstance(path, tuple):
        segments = path
    else:
        segments = tuple(str(path).split('.'))
    if not segments or any(not segment for segment in segments):
        raise ValueError(f"Invalid field path: {path!r}")
    return segments


def set_in(state, path, value) -> dict:
    """Return a copy of ``state`` with ``value`` stored at ``path``.

    Each mapping on the way to the leaf is shallow-copied; everything off the
    path is shared with ``state``. Missing or non-mapping intermediate values
    are replaced by empty dicts. ``state`` itself is never modified.
    """
    segments = parse_field_path(path)
    root = dict(state) if isinstance(state, Mapping) else {}
    current = root
    for segment in segments[:-1]:
        child = current.get(segment)
        child = dict(child) if isinstance(child, Mapping) else {}
        current[segment] = child
        current = child
    current[segments[-1]] = value
    return root


def get_in(state, path, default=None) -> Any:
    """Read the value stored at ``path``, or ``default`` when it is absent."""
    current = state
    for segment in parse_field_path(path):
        if not isinstance(current, Mapping) or segment not in current:
            return default
        current = current[segment]
    return current
