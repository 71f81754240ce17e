"""Shared shape checks for event fields.

Private module. Every helper raises ValidationError and returns the value
normalized for storage on a frozen dataclass.
"""

from typing import Any, Tuple

from .errors import ValidationError

Tags = Tuple[Tuple[str, ...], ...]


def validate_int(value: Any, name: str) -> int:
    """Raise if *value* is not an ``int`` (``bool`` excluded)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an int, got {type(value).__name__}")
    return int(value)


def validate_kind(value: Any) -> int:
    kind = validate_int(value, "kind")
    if kind < 0:
        raise ValidationError(f"kind must be non-negative, got {kind}")
    return kind


def validate_text(value: Any, name: str) -> str:
    """Raise if *value* is not a ``str`` that can be encoded as UTF-8."""
    if not isinstance(value, str):
        raise ValidationError(f"{name} must be a str, got {type(value).__name__}")
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise ValidationError(f"{name} is not valid UTF-8 text: {e.reason}") from e
    return value


def validate_tags(value: Any) -> Tags:
    """Check that *value* is a sequence of sequences of strings and freeze it.

    Order is preserved exactly; empty tags are kept.
    """
    if not isinstance(value, (list, tuple)):
        raise ValidationError(f"tags must be a list of lists, got {type(value).__name__}")
    frozen = []
    for i, tag in enumerate(value):
        if not isinstance(tag, (list, tuple)):
            raise ValidationError(f"tags[{i}] must be a list, got {type(tag).__name__}")
        for j, item in enumerate(tag):
            validate_text(item, f"tags[{i}][{j}]")
        frozen.append(tuple(tag))
    return tuple(frozen)
