"""Routing configuration.

RoutingData is a frozen dataclass, the record handed to
``UrlGenerator.set_routing_data()`` once per configuration.
"""

from collections.abc import Mapping
from dataclasses import dataclass

from waypoint.routing.route import Route


@dataclass(frozen=True, slots=True)
class RoutingData:
    """Everything the generator needs to build URLs. Immutable after creation.

    ``prefix`` and ``port`` are optional: ``None`` means the field was absent
    from the exported data, and the generator leaves its current value alone::

        data = RoutingData(
            base_url="/app_dev.php",
            routes={"home": home_route},
            host="example.com",
            scheme="https",
        )
    """

    base_url: str
    routes: Mapping[str, Route]
    host: str
    scheme: str
    prefix: str | None = None
    port: str | None = None
