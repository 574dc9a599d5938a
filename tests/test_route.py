"""Tests for waypoint.routing.route: token and route dataclasses."""

from dataclasses import FrozenInstanceError
from typing import Any

import pytest

from waypoint.routing.route import Route, TextToken, VariableToken


class TestTokens:
    def test_kinds(self) -> None:
        assert TextToken("/a").kind == "text"
        assert VariableToken("/", r"\d+", "id").kind == "variable"

    def test_tokens_are_frozen(self) -> None:
        token = TextToken("/a")
        with pytest.raises(FrozenInstanceError):
            token.literal = "/b"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert VariableToken("/", r"\d+", "id") == VariableToken("/", r"\d+", "id")


class TestRoute:
    def test_defaults(self) -> None:
        route = Route(tokens=(TextToken("/"),))
        assert route.defaults == {}
        assert route.requirements == {}
        assert route.host_tokens == ()
        assert route.schemes == ()
        assert route.methods == ()

    def test_pattern_reverses_tokens(self) -> None:
        route = Route(
            tokens=(
                VariableToken(".", "[^/]++", "_format"),
                VariableToken("/", r"\d+", "id"),
                TextToken("/user"),
            )
        )
        assert route.pattern == "/user/{id}.{_format}"

    def test_empty_pattern_is_root(self) -> None:
        assert Route(tokens=()).pattern == "/"

    def test_host_pattern(self) -> None:
        route = Route(
            tokens=(TextToken("/"),),
            host_tokens=(TextToken(".example.com"), VariableToken("", "[^.]++", "tenant")),
        )
        assert route.host_pattern == "{tenant}.example.com"

    def test_defaults_and_requirements_are_read_only(self) -> None:
        source: dict[str, Any] = {"page": 1}
        route = Route(tokens=(TextToken("/"),), defaults=source, requirements={"page": r"\d+"})
        source["page"] = 2
        assert route.defaults["page"] == 1
        with pytest.raises(TypeError):
            route.defaults["page"] = 3  # type: ignore[index]
        with pytest.raises(TypeError):
            route.requirements["page"] = ".*"  # type: ignore[index]
