"""Kida template globals for URL generation.

Requires the ``templating`` extra (``pip install waypoint[templating]``)::

    from kida import Environment
    from waypoint.templating import register_globals

    env = Environment()
    register_globals(env, generator)

    # {{ path("blog_show", slug=post.slug) }}  -> /blog/hello
    # {{ url("blog_show", slug=post.slug) }}   -> http://example.com/blog/hello
"""

from typing import Any

from kida import Environment

from waypoint.routing.generator import UrlGenerator


def register_globals(env: Environment, generator: UrlGenerator) -> None:
    """Add ``path()`` and ``url()`` globals bound to *generator*."""

    def path(name: str, **params: Any) -> str:
        return generator.generate(name, params)

    def url(name: str, **params: Any) -> str:
        return generator.generate(name, params, absolute=True)

    env.add_global("path", path)
    env.add_global("url", url)
