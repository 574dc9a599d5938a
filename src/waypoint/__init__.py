"""Waypoint: rebuild URLs from a server-exported route table.

The server dumps its compiled routes once; waypoint turns a route name and
a bag of parameters back into a concrete URL, no network involved.

Basic usage::

    from waypoint import UrlGenerator

    generator = UrlGenerator.from_json(Path("routes.json"))
    generator.generate("user_show", {"id": 42})            # "/user/42"
    generator.generate("search", {"q": "a b", "page": 2})  # "/search?q=a+b&page=2"
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "MissingRequiredParameter",
    "Route",
    "RouteNotFound",
    "RouteTable",
    "RoutingContext",
    "RoutingData",
    "TextToken",
    "UnsupportedTokenType",
    "UrlGenerator",
    "VariableToken",
    "WaypointError",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import waypoint`` fast while providing a clean top-level API.
    """
    if name == "UrlGenerator":
        from waypoint.routing.generator import UrlGenerator

        return UrlGenerator

    if name == "RoutingData":
        from waypoint.config import RoutingData

        return RoutingData

    if name == "RoutingContext":
        from waypoint.context import RoutingContext

        return RoutingContext

    if name == "RouteTable":
        from waypoint.routing.table import RouteTable

        return RouteTable

    if name in ("Route", "TextToken", "VariableToken"):
        from waypoint.routing import route as _route

        return getattr(_route, name)

    if name in (
        "WaypointError",
        "ConfigurationError",
        "MissingRequiredParameter",
        "RouteNotFound",
        "UnsupportedTokenType",
    ):
        from waypoint import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
