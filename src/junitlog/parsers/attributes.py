"""Attribute helpers - default-on-absence attribute parsing.

Every attribute of a JUnit log is optional. These helpers read an attribute
from an element and fall back to a default when it is absent or unusable,
so suite and case parsing share a single defaulting policy.
"""

from __future__ import annotations

import math
import xml.etree.ElementTree as ET
from typing import Callable, Optional, TypeVar

T = TypeVar("T")


def get_attribute(
    element: ET.Element,
    names: str | tuple[str, ...],
    convert: Callable[[str], T],
    default: T,
) -> T:
    """Read an optional attribute and convert it.

    Args:
        element: Element to read from.
        names: Attribute name, or several names tried in order.
        convert: Conversion applied to the raw attribute string.
        default: Value returned when no attribute is present or the
            conversion fails.

    Returns:
        The converted value, or `default`.
    """
    if isinstance(names, str):
        names = (names,)

    raw: Optional[str] = None
    for name in names:
        raw = element.get(name)
        if raw is not None:
            break
    if raw is None:
        return default

    try:
        return convert(raw)
    except ValueError:
        return default


def _non_negative_int(raw: str) -> int:
    value = int(raw.strip())
    if value < 0:
        raise ValueError(f"negative count: {raw}")
    return value


def _non_negative_float(raw: str) -> float:
    value = float(raw.strip())
    if not math.isfinite(value) or value < 0.0:
        raise ValueError(f"invalid duration: {raw}")
    return value


def get_str(element: ET.Element, names: str | tuple[str, ...], default: str = "") -> str:
    return get_attribute(element, names, str, default)


def get_int(element: ET.Element, names: str | tuple[str, ...], default: int = 0) -> int:
    return get_attribute(element, names, _non_negative_int, default)


def get_float(element: ET.Element, names: str | tuple[str, ...], default: float = 0.0) -> float:
    return get_attribute(element, names, _non_negative_float, default)
