"""URL generation from an exported route table.

Replays a route's compiled tokens against caller parameters and the
route's defaults, decides whether the URL needs a scheme and authority,
and appends whatever parameters were left over as a query string.
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from waypoint.config import RoutingData
from waypoint.context import RoutingContext
from waypoint.errors import MissingRequiredParameter, UnsupportedTokenType
from waypoint.routing.encoding import encode_path_value, loosely_equal, to_string
from waypoint.routing.query import QueryParamSerializer
from waypoint.routing.route import Route, TextToken, VariableToken
from waypoint.routing.table import RouteTable

logger = logging.getLogger("waypoint.routing")


class UrlGenerator:
    """Builds relative or absolute URLs for named routes.

    Usage::

        generator = UrlGenerator()
        generator.set_routing_data(data)
        generator.generate("blog_show", {"slug": "hello"})          # "/blog/hello"
        generator.generate("blog_show", {"slug": "hello"}, True)    # "http://example.com/blog/hello"

    Configure once, then generate from any thread. Reconfiguring while
    other threads generate is not supported.
    """

    __slots__ = ("_context", "_routes")

    def __init__(
        self,
        context: RoutingContext | None = None,
        routes: Mapping[str, Route] | None = None,
    ) -> None:
        self._context = context if context is not None else RoutingContext()
        self._routes = RouteTable()
        self.set_routes(routes or {})

    @classmethod
    def from_data(cls, data: RoutingData) -> "UrlGenerator":
        """Create a generator configured from *data*."""
        generator = cls()
        generator.set_routing_data(data)
        return generator

    @classmethod
    def from_json(cls, source: str | Path) -> "UrlGenerator":
        """Create a generator from exported JSON (a string or a file path)."""
        from waypoint.loader import load_routing_data_json

        return cls.from_data(load_routing_data_json(source))

    # -- Configuration ------------------------------------------------------

    def set_routing_data(self, data: RoutingData) -> None:
        """Apply a full configuration.

        ``prefix`` and ``port`` are only applied when present (not ``None``);
        ``host`` and ``scheme`` are always overwritten.
        """
        self.set_base_url(data.base_url)
        self.set_routes(data.routes)

        if data.prefix is not None:
            self.set_prefix(data.prefix)
        if data.port is not None:
            self.set_port(data.port)

        self.set_host(data.host)
        self.set_scheme(data.scheme)

    def set_routes(self, routes: Mapping[str, Route]) -> None:
        """Replace the route table wholesale."""
        self._routes = routes if isinstance(routes, RouteTable) else RouteTable(routes)
        logger.debug("Route table replaced (%d routes)", len(self._routes))

    @property
    def routes(self) -> RouteTable:
        return self._routes

    def set_base_url(self, base_url: str) -> None:
        self._context.base_url = base_url

    @property
    def base_url(self) -> str:
        return self._context.base_url

    def set_prefix(self, prefix: str) -> None:
        self._context.prefix = prefix

    @property
    def prefix(self) -> str:
        return self._context.prefix

    def set_scheme(self, scheme: str) -> None:
        self._context.scheme = scheme

    @property
    def scheme(self) -> str:
        return self._context.scheme

    def set_host(self, host: str) -> None:
        self._context.host = host

    @property
    def host(self) -> str:
        return self._context.host

    def set_port(self, port: str | None) -> None:
        self._context.port = port or ""

    @property
    def port(self) -> str:
        return self._context.port or ""

    # -- Generation ---------------------------------------------------------

    def get_route(self, name: str) -> Route:
        """Return the raw route for *name*, honoring the configured prefix.

        Raises ``RouteNotFound`` if neither ``prefix + name`` nor *name* exists.
        """
        return self._routes.resolve(name, self._context.prefix)

    def generate(
        self,
        name: str,
        params: Mapping[str, Any] | None = None,
        absolute: bool = False,
    ) -> str:
        """Generate the URL for route *name*.

        Parameters consumed by path or host variables are removed from
        the working copy; the rest become the query string, in the order
        the caller supplied them.

        Raises ``RouteNotFound`` for an unknown route and
        ``MissingRequiredParameter`` when a required path variable has
        neither a value nor a default.
        """
        route = self.get_route(name)
        params = params or {}
        unused = dict(params)

        path = self._build_path(name, route, params, unused)
        host = self._build_host(name, route, params, unused)
        url = self._add_authority(route, self._context.base_url + path, host, absolute)

        if unused:
            serializer = QueryParamSerializer()
            serializer.extend(unused)
            # Unlike the exporter, no bare "?" when nothing flattens to a pair
            if serializer:
                url = f"{url}?{serializer.render()}"

        return url

    def _build_path(
        self,
        name: str,
        route: Route,
        params: Mapping[str, Any],
        unused: dict[str, Any],
    ) -> str:
        """Replay path tokens right to left, prepending each rendered chunk.

        Trailing variables whose value equals their default are elided
        until the first literal or non-default value; from then on every
        token to the left must render.
        """
        defaults = route.defaults
        url = ""
        optional = True

        for token in route.tokens:
            match token:
                case TextToken(literal=literal):
                    url = literal + url
                    optional = False

                case VariableToken(separator=separator, name=param):
                    has_default = param in defaults
                    overridden = param in params and not loosely_equal(params[param], defaults.get(param))

                    if not optional or not has_default or overridden:
                        if param in params:
                            value = params[param]
                            unused.pop(param, None)
                        elif has_default:
                            value = defaults[param]
                        elif optional:
                            continue
                        else:
                            raise MissingRequiredParameter(name, param)

                        empty = value is True or value is False or value == ""
                        if not empty or not optional:
                            encoded = "" if value is None else encode_path_value(to_string(value))
                            url = separator + encoded + url

                        optional = False
                    elif param in unused:
                        # Matches the default: consumed, nothing rendered
                        del unused[param]

                case _:
                    raise UnsupportedTokenType(getattr(token, "kind", type(token).__name__))

        return url or "/"

    def _build_host(
        self,
        name: str,
        route: Route,
        params: Mapping[str, Any],
        unused: dict[str, Any],
    ) -> str:
        """Replay host tokens. Values are neither encoded nor elided."""
        host = ""

        for token in route.host_tokens:
            match token:
                case TextToken(literal=literal):
                    host = literal + host

                case VariableToken(separator=separator, name=param):
                    if param in params:
                        value = params[param]
                        unused.pop(param, None)
                    elif param in route.defaults:
                        value = route.defaults[param]
                    else:
                        logger.warning(
                            "Route %r has no value for host parameter %r; rendering it empty",
                            name,
                            param,
                        )
                        value = ""
                    host = separator + to_string(value) + host

                case _:
                    raise UnsupportedTokenType(getattr(token, "kind", type(token).__name__))

        return host

    def _add_authority(self, route: Route, url: str, host: str, absolute: bool) -> str:
        """Prefix ``scheme://authority`` when the URL cannot stay relative.

        First match wins: a required ``_scheme`` that differs from the
        current one, then a differing canonical ``schemes[0]``, then a
        route host that differs from the current host, then an explicit
        *absolute* request.
        """
        context = self._context
        port = self.port

        required_scheme = route.requirements.get("_scheme")
        if "_scheme" in route.requirements and context.scheme != required_scheme:
            return f"{required_scheme}://{host or context.host}{url}"

        if route.schemes and route.schemes[0] and context.scheme != route.schemes[0]:
            return f"{route.schemes[0]}://{host or context.host}{url}"

        authority = f"{host}:{port}" if port else host
        if host and context.host != authority:
            return f"{context.scheme}://{authority}{url}"

        if absolute is True:
            return f"{context.scheme}://{context.host}{url}"

        return url
