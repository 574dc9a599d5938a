"""Residual parameter serialization.

Parameters not consumed by path or host tokens end up in the query string,
flattened into bracket notation the way PHP and jQuery's ``$.param()``
read and write them::

    {"tags": ["a", "b"]}            -> tags[]=a&tags[]=b
    {"filter": {"status": "open"}}  -> filter[status]=open
    {"rows": [{"id": 1}]}           -> rows[0][id]=1
"""

from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any

from waypoint.routing.encoding import encode_uri_component, to_string

AddFunction = Callable[[str, Any], None]


class ValueKind(Enum):
    """Shape of a parameter value for query flattening."""

    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


def value_kind(value: Any) -> ValueKind:
    """Classify *value*. Strings, ``None`` and callables are scalars."""
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    return ValueKind.SCALAR


def build_query_params(prefix: str, value: Any, add: AddFunction) -> None:
    """Flatten *value* under *prefix*, calling ``add(key, leaf)`` per leaf.

    Traversal is depth-first in the container's own order.
    """
    match value_kind(value):
        case ValueKind.SEQUENCE:
            for index, item in enumerate(value):
                if prefix.endswith("[]"):
                    add(prefix, item)
                    continue
                key = index if value_kind(item) is not ValueKind.SCALAR else ""
                build_query_params(f"{prefix}[{key}]", item, add)
        case ValueKind.MAPPING:
            for name, item in value.items():
                build_query_params(f"{prefix}[{name}]", item, add)
        case ValueKind.SCALAR:
            add(prefix, value)


class QueryParamSerializer:
    """Accumulates ``key=value`` pairs and renders a form-style query string.

    Usage::

        serializer = QueryParamSerializer()
        serializer.extend({"q": "hello world", "tags": ["a"]})
        serializer.render()  # "q=hello+world&tags%5B%5D=a"
    """

    __slots__ = ("_pairs",)

    def __init__(self) -> None:
        self._pairs: list[str] = []

    def __len__(self) -> int:
        return len(self._pairs)

    def add(self, key: str, value: Any) -> None:
        """Append one leaf. Callables are invoked; ``None`` becomes ``""``."""
        if callable(value):
            value = value()
        if value is None:
            value = ""
        self._pairs.append(f"{encode_uri_component(key)}={encode_uri_component(to_string(value))}")

    def extend(self, params: Mapping[str, Any]) -> None:
        """Flatten every entry of *params*, in the mapping's order."""
        for name, value in params.items():
            build_query_params(name, value, self.add)

    def render(self) -> str:
        """Join the pairs with ``&``; encoded spaces become ``+``."""
        return "&".join(self._pairs).replace("%20", "+")

