"""Route and token frozen dataclasses.

Tokens are stored the way the server-side exporter compiles them: in
reverse emission order, last path segment first.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, ClassVar


@dataclass(frozen=True, slots=True)
class TextToken:
    """A literal chunk of the pattern, e.g. ``/users``."""

    kind: ClassVar[str] = "text"

    literal: str


@dataclass(frozen=True, slots=True)
class VariableToken:
    """A named placeholder, e.g. ``/{id}``.

    ``separator`` is the literal that precedes the value when it renders
    (usually ``/`` or ``.``); ``pattern`` is the requirement regex the
    server matched against, kept for introspection only.
    """

    kind: ClassVar[str] = "variable"

    separator: str
    pattern: str
    name: str


Token = TextToken | VariableToken


@dataclass(frozen=True, slots=True)
class Route:
    """A compiled route definition, as exported by the server.

    Created by the loader (or by hand in tests) and never mutated.
    """

    tokens: tuple[Token, ...]
    defaults: Mapping[str, Any] = field(default_factory=dict)
    requirements: Mapping[str, str] = field(default_factory=dict)
    host_tokens: tuple[Token, ...] = ()
    schemes: tuple[str, ...] = ()
    methods: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "defaults", MappingProxyType(dict(self.defaults)))
        object.__setattr__(self, "requirements", MappingProxyType(dict(self.requirements)))

    @property
    def pattern(self) -> str:
        """Rebuild the human-readable path pattern, e.g. ``/users/{id}``."""
        return _render_pattern(self.tokens) or "/"

    @property
    def host_pattern(self) -> str:
        """Rebuild the host pattern, e.g. ``{tenant}.example.com``."""
        return _render_pattern(self.host_tokens)


def _render_pattern(tokens: tuple[Token, ...]) -> str:
    parts: list[str] = []
    for token in reversed(tokens):
        if isinstance(token, TextToken):
            parts.append(token.literal)
        else:
            parts.append(f"{token.separator}{{{token.name}}}")
    return "".join(parts)
