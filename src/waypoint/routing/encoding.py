"""Percent-encoding and scalar stringification.

Generated URLs must be byte-identical to the ones the exporter's own
client runtime produces, so values are stringified with its rules
(``True`` -> ``"true"``, ``None`` -> ``"null"``, ``2.0`` -> ``"2"``) and
encoded with the ``encodeURIComponent`` safe set.
"""

import math
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

# Unreserved marks left alone besides alphanumerics and "-_.~"
URI_COMPONENT_SAFE = "!*'()"


def encode_uri_component(value: str) -> str:
    """Percent-encode *value* as a single URI component (UTF-8)."""
    return quote(value, safe=URI_COMPONENT_SAFE)


def encode_path_value(value: str) -> str:
    """Percent-encode a path variable, keeping literal ``/``."""
    return quote(value, safe=URI_COMPONENT_SAFE + "/")


def to_string(value: Any) -> str:
    """Stringify a parameter value.

    Examples::

        >>> to_string(True)
        'true'
        >>> to_string(None)
        'null'
        >>> to_string(3.0)
        '3'
        >>> to_string(["a", None, 2])
        'a,,2'
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else to_string(item) for item in value)
    if isinstance(value, Mapping):
        return "[object Object]"
    return str(value)


def to_number(value: Any) -> float:
    """Coerce a scalar to a number; ``NaN`` when it has no numeric reading.

    ``True`` -> 1, ``""`` -> 0, ``" 2 "`` -> 2.
    """
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        try:
            return float(text)
        except ValueError:
            return math.nan
    return math.nan


def loosely_equal(left: Any, right: Any) -> bool:
    """Compare two parameter values with the exporter's loose equality.

    ``None`` only equals ``None``; two strings compare as strings;
    anything else involving a number or bool compares numerically, so
    ``"1" == 1``, ``"" == False`` and ``True == "1"`` but
    ``True != "true"``. Containers compare by their string form.
    """
    if left is None or right is None:
        return left is right
    if isinstance(left, str) and isinstance(right, str):
        return left == right

    scalars = (str, int, float)
    if isinstance(left, scalars) and isinstance(right, scalars):
        return to_number(left) == to_number(right)
    return to_string(left) == to_string(right)
