"""Resource parsing utilities for raw kubectl JSON.

kubectl listings are loosely shaped: fields go missing, come back as ``null``
or carry an unexpected type. These helpers normalize those values so parsers
can read nested fields without guarding every access:
- Mappings and lists: wrong types become empty containers
- Integers: parsed leniently with a default
- Image references: split into their tag
"""

from contextlib import suppress
from typing import Any


def as_dict(value: Any) -> dict[str, Any]:
    """Return ``value`` if it is a dict, otherwise an empty dict."""
    return value if isinstance(value, dict) else {}


def as_list(value: Any) -> list[Any]:
    """Return ``value`` if it is a list, otherwise an empty list."""
    return value if isinstance(value, list) else []


def dig(data: Any, *keys: str) -> Any:
    """Walk nested mappings, returning None as soon as a level is missing.

    Example:
        dig(pod, "spec", "template", "spec", "nodeSelector")
    """
    current = data
    for key in keys:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current


def string_map(value: Any) -> dict[str, str]:
    """Coerce a label/annotation mapping into ``dict[str, str]``."""
    return {str(key): str(item) for key, item in as_dict(value).items() if item is not None}


def optional_str(value: Any, default: str | None = None) -> str | None:
    """Coerce a scalar into a string; containers and None become ``default``.

    kubectl output for a broken or unusual object can carry numbers where a
    string is expected (``phase: 5``) or a list where a scalar is expected.
    """
    if value is None or isinstance(value, (dict, list)):
        return default
    if isinstance(value, (str, int, float, bool)):
        return str(value)
    return default


def coerce_int(value: Any, default: int = 0) -> int:
    """Parse an integer leniently.

    Args:
        value: Raw value (int, numeric string, None...)
        default: Returned when the value cannot be parsed

    Returns:
        Parsed integer or ``default``.
    """
    if value is None or isinstance(value, bool):
        return default
    with suppress(ValueError, TypeError):
        return int(value)
    return default


def optional_int(value: Any) -> int | None:
    """Parse an integer, keeping ``None`` for missing or unparsable values."""
    if value is None or isinstance(value, bool):
        return None
    with suppress(ValueError, TypeError):
        return int(value)
    return None


def image_tag(image: Any, default: str = "unknown") -> str:
    """Return the tag of a container image reference.

    Handles registry ports ("registry:5000/proxy:1.20.1" -> "1.20.1") and
    digests ("proxy@sha256:..." -> ``default`` unless a tag precedes it).
    """
    if not isinstance(image, str) or not image:
        return default
    reference = image.split("@", 1)[0]
    name_part = reference.rsplit("/", 1)[-1]
    if ":" not in name_part:
        return default
    tag = name_part.rsplit(":", 1)[1]
    return tag or default


def condition_is_true(conditions: Any, condition_type: str) -> bool:
    """Return True when a status condition of the given type has status "True"."""
    return any(
        isinstance(condition, dict)
        and condition.get("type") == condition_type
        and condition.get("status") == "True"
        for condition in as_list(conditions)
    )
