from __future__ import annotations

import re
from typing import Any, Dict, Iterator, List, Mapping

_TAG_NAME = re.compile(r"[a-z_][a-z0-9:\-._]*", re.IGNORECASE | re.ASCII)

# Trim set: space, tab, newline, carriage return, NUL, vertical tab.
_TRIM_CHARS = " \t\n\r\x00\x0b"


def is_valid_tag_name(name: Any) -> bool:
    """Check whether name can be used as an XML element or attribute name."""

    name = str(name)
    return _TAG_NAME.fullmatch(name) is not None and not name.endswith(":")


def to_text(value: Any) -> str:
    """Stringify a scalar; booleans become ``true``/``false``."""

    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return ""
    return str(value)


def trim(text: str) -> str:
    return text.strip(_TRIM_CHARS)


def is_positional(value: Any) -> bool:
    """Tell whether value stands for a run of sibling elements.

    Lists and tuples always do. A mapping does when its keys are exactly the
    integers ``0..n-1`` in order.
    """

    if isinstance(value, (list, tuple)):
        return True
    if not isinstance(value, Mapping) or not value:
        return False
    for index, key in enumerate(value):
        if not isinstance(key, int) or isinstance(key, bool) or key != index:
            return False
    return True


def positional_items(value: Any) -> Iterator[Any]:
    if isinstance(value, Mapping):
        return iter(value.values())
    return iter(value)


def append_value(target: Dict[str, Any], key: str, value: Any) -> None:
    """Append value to the list stored under key, creating it on first use."""

    items: List[Any] = target.setdefault(key, [])
    items.append(value)


__all__ = [
    "is_valid_tag_name",
    "to_text",
    "trim",
    "is_positional",
    "positional_items",
    "append_value",
]
