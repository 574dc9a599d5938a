"""Immutable route table with prefix-qualified lookup."""

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from waypoint.errors import RouteNotFound
from waypoint.routing.route import Route

logger = logging.getLogger("waypoint.routing")


class RouteTable(Mapping[str, Route]):
    """Frozen mapping of route name -> ``Route``.

    Replaced wholesale on reconfiguration, never merged. Iteration order
    is the exporter's order.
    """

    __slots__ = ("_routes",)

    def __init__(self, routes: Mapping[str, Route] | None = None) -> None:
        self._routes: Mapping[str, Route] = MappingProxyType(dict(routes or {}))

    def __getitem__(self, name: str) -> Route:
        return self._routes[name]

    def __contains__(self, name: object) -> bool:
        return name in self._routes

    def __iter__(self) -> Iterator[str]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def __repr__(self) -> str:
        return f"RouteTable({list(self._routes)!r})"

    def resolve(self, name: str, prefix: str = "") -> Route:
        """Return the route for *name*, preferring ``prefix + name``.

        Raises ``RouteNotFound`` naming the bare *name* when neither the
        prefixed nor the bare name exists.
        """
        prefixed = prefix + name
        if prefixed in self._routes:
            return self._routes[prefixed]
        if name in self._routes:
            if prefix:
                logger.debug("Route %r not found, falling back to %r", prefixed, name)
            return self._routes[name]
        raise RouteNotFound(name)
