"""Waypoint exception hierarchy.

Shared across the route table, the generator, the loader and the CLI so
every module raises and catches the same types.
"""


class WaypointError(Exception):
    """Base for all waypoint-specific errors."""


class ConfigurationError(WaypointError):
    """Raised when routing data or a route definition is malformed.

    Signals a bug in the exported route table, not a usage error.
    """


class UnsupportedTokenType(ConfigurationError):  # noqa: N818
    """A route token whose kind is neither ``text`` nor ``variable``."""

    def __init__(self, kind: object) -> None:
        self.kind = kind
        super().__init__(f'The token type "{kind}" is not supported.')


class RouteNotFound(WaypointError, KeyError):  # noqa: N818
    """Neither the prefixed nor the bare route name exists in the table."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'The route "{name}" does not exist.')

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class MissingRequiredParameter(WaypointError, ValueError):  # noqa: N818
    """A non-optional path variable has no supplied value and no default."""

    def __init__(self, route: str, parameter: str) -> None:
        self.route = route
        self.parameter = parameter
        super().__init__(f'The route "{route}" requires the parameter "{parameter}".')
