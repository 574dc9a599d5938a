"""Mutable routing context owned by a single ``UrlGenerator``."""

from dataclasses import dataclass


@dataclass(slots=True)
class RoutingContext:
    """Base URL, route-name prefix and authority of the current site.

    Constructed empty and populated through the generator's setters.
    """

    base_url: str = ""
    prefix: str = ""
    host: str = ""
    scheme: str = ""
    port: str = ""
