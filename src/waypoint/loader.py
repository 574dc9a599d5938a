"""Load exported routing data.

The server-side exporter dumps its route table as JSON::

    {
        "base_url": "",
        "routes": {
            "user_show": {
                "tokens": [["variable", "/", "\\\\d+", "id"], ["text", "/user"]],
                "defaults": {"id": 1},
                "requirements": {"id": "\\\\d+"},
                "hosttokens": [],
                "methods": ["GET"],
                "schemes": []
            }
        },
        "prefix": "",
        "host": "localhost",
        "port": "",
        "scheme": "http"
    }

This module turns that shape into ``RoutingData`` and ``Route`` objects,
rejecting malformed tokens up front.
"""

import json
import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from waypoint.config import RoutingData
from waypoint.errors import ConfigurationError, UnsupportedTokenType
from waypoint.routing.route import Route, TextToken, Token, VariableToken
from waypoint.routing.table import RouteTable

logger = logging.getLogger("waypoint.loader")

_REQUIRED_KEYS = ("base_url", "routes", "host", "scheme")


def load_token(raw: Sequence[Any]) -> Token:
    """Build a token from its exported list form.

    ``["text", literal]`` or ``["variable", separator, pattern, name]``.
    """
    if isinstance(raw, str) or not isinstance(raw, Sequence) or not raw:
        msg = f"Malformed route token: {raw!r}"
        raise ConfigurationError(msg)

    kind = raw[0]
    if kind == "text":
        if len(raw) < 2:
            msg = f"Text token needs a literal: {raw!r}"
            raise ConfigurationError(msg)
        return TextToken(str(raw[1]))
    if kind == "variable":
        if len(raw) < 4:
            msg = f"Variable token needs a separator, pattern and name: {raw!r}"
            raise ConfigurationError(msg)
        return VariableToken(str(raw[1]), str(raw[2]), str(raw[3]))
    raise UnsupportedTokenType(kind)


def load_route(raw: Mapping[str, Any]) -> Route:
    """Build a ``Route`` from one exported definition.

    Only ``tokens`` is required; the other keys default to empty.
    """
    if not isinstance(raw, Mapping):
        msg = f"Route definition must be an object, got {raw!r}"
        raise ConfigurationError(msg)
    if "tokens" not in raw:
        msg = "Route definition is missing 'tokens'."
        raise ConfigurationError(msg)

    return Route(
        tokens=tuple(load_token(token) for token in raw["tokens"]),
        defaults=_mapping_or_empty(raw.get("defaults")),
        requirements=_mapping_or_empty(raw.get("requirements")),
        host_tokens=tuple(load_token(token) for token in raw.get("hosttokens") or ()),
        schemes=tuple(raw.get("schemes") or ()),
        methods=tuple(raw.get("methods") or ()),
    )


def load_routing_data(raw: Mapping[str, Any]) -> RoutingData:
    """Build ``RoutingData`` from the exported mapping.

    Raises ``ConfigurationError`` if a required key is missing or a route
    is malformed. ``prefix`` and ``port`` stay ``None`` when absent.
    """
    missing = [key for key in _REQUIRED_KEYS if key not in raw]
    if missing:
        msg = f"Routing data is missing required keys: {', '.join(missing)}"
        raise ConfigurationError(msg)

    routes: dict[str, Route] = {}
    for name, definition in _mapping_or_empty(raw["routes"]).items():
        try:
            routes[name] = load_route(definition)
        except ConfigurationError as exc:
            msg = f'Invalid definition for route "{name}": {exc}'
            raise ConfigurationError(msg) from exc

    port = raw.get("port")
    data = RoutingData(
        base_url=raw["base_url"],
        routes=RouteTable(routes),
        host=raw["host"],
        scheme=raw["scheme"],
        prefix=raw.get("prefix"),
        port=None if port is None else str(port),
    )
    logger.debug("Loaded %d routes", len(routes))
    return data


def load_routing_data_json(source: str | Path) -> RoutingData:
    """Decode exported JSON. *source* is a JSON string or a ``Path``."""
    text = source.read_text(encoding="utf-8") if isinstance(source, Path) else source
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        msg = f"Routing data is not valid JSON: {exc}"
        raise ConfigurationError(msg) from exc

    if not isinstance(raw, Mapping):
        msg = "Routing data must be a JSON object."
        raise ConfigurationError(msg)
    return load_routing_data(raw)


def _mapping_or_empty(value: Any) -> Mapping[str, Any]:
    # PHP's json_encode emits [] for an empty associative array
    if not value:
        return {}
    if not isinstance(value, Mapping):
        msg = f"Expected an object, got {value!r}"
        raise ConfigurationError(msg)
    return value
