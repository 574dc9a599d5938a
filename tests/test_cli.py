"""Tests for waypoint.cli: CLI entrypoint and commands."""

import json
from pathlib import Path

import pytest

from waypoint.cli import main
from waypoint.cli._generate import parse_params

EXPORT = {
    "base_url": "",
    "routes": {
        "user_show": {
            "tokens": [["variable", "/", "\\d+", "id"], ["text", "/user"]],
            "defaults": [],
            "requirements": {"id": "\\d+"},
            "hosttokens": [],
            "methods": ["GET", "HEAD"],
            "schemes": [],
        },
        "dashboard": {
            "tokens": [["text", "/dash"]],
            "hosttokens": [["text", ".example.com"], ["variable", "", "[^.]++", "tenant"]],
            "schemes": ["https"],
        },
    },
    "host": "localhost",
    "scheme": "http",
}


@pytest.fixture
def routes_file(tmp_path: Path) -> str:
    path = tmp_path / "routes.json"
    path.write_text(json.dumps(EXPORT), encoding="utf-8")
    return str(path)


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_generate_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["generate", "--help"])
        assert exc_info.value.code == 0

    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "waypoint" in capsys.readouterr().out


class TestCLIMissingArgs:
    def test_routes_missing_file(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes"])
        assert exc_info.value.code == 2

    def test_generate_missing_name(self, routes_file: str) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["generate", routes_file])
        assert exc_info.value.code == 2


class TestRoutesCommand:
    def test_lists_routes(self, routes_file: str, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", routes_file])
        out = capsys.readouterr().out
        assert "NAME" in out
        assert "METHOD" in out
        assert "GET, HEAD" in out
        assert "user_show" in out
        assert "/user/{id}" in out
        assert "//{tenant}.example.com/dash" in out
        assert "https" in out

    def test_empty_table(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "empty.json"
        path.write_text(json.dumps({**EXPORT, "routes": {}}), encoding="utf-8")
        main(["routes", str(path)])
        assert "No routes exported." in capsys.readouterr().out

    def test_unreadable_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", str(tmp_path / "missing.json")])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err


class TestGenerateCommand:
    def test_relative(self, routes_file: str, capsys: pytest.CaptureFixture[str]) -> None:
        main(["generate", routes_file, "user_show", "-p", "id=42"])
        assert capsys.readouterr().out == "/user/42\n"

    def test_absolute(self, routes_file: str, capsys: pytest.CaptureFixture[str]) -> None:
        main(["generate", routes_file, "user_show", "-p", "id=42", "--absolute"])
        assert capsys.readouterr().out == "http://localhost/user/42\n"

    def test_list_params(self, routes_file: str, capsys: pytest.CaptureFixture[str]) -> None:
        main(["generate", routes_file, "user_show", "-p", "id=1", "-p", "t[]=a", "-p", "t[]=b"])
        assert capsys.readouterr().out == "/user/1?t%5B%5D=a&t%5B%5D=b\n"

    def test_host_and_scheme(self, routes_file: str, capsys: pytest.CaptureFixture[str]) -> None:
        main(["generate", routes_file, "dashboard", "--param", "tenant=acme"])
        assert capsys.readouterr().out == "https://acme.example.com/dash\n"

    def test_unknown_route(self, routes_file: str, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["generate", routes_file, "nope"])
        assert exc_info.value.code == 1
        assert 'The route "nope" does not exist.' in capsys.readouterr().err

    def test_malformed_param(self, routes_file: str, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["generate", routes_file, "user_show", "-p", "oops"])
        assert exc_info.value.code == 1
        assert "KEY=VALUE" in capsys.readouterr().err


class TestParseParams:
    def test_last_value_wins(self) -> None:
        assert parse_params(["a=1", "a=2"]) == {"a": "2"}

    def test_value_may_contain_equals(self) -> None:
        assert parse_params(["q=a=b"]) == {"q": "a=b"}

    def test_bracket_keys_collect(self) -> None:
        assert parse_params(["t[]=a", "t[]=b"]) == {"t": ["a", "b"]}

    def test_empty_key_rejected(self) -> None:
        with pytest.raises(ValueError):
            parse_params(["=x"])


class TestMalformedExports:
    def test_empty_route_list(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "empty.json"
        path.write_text(json.dumps({**EXPORT, "routes": []}), encoding="utf-8")
        main(["routes", str(path)])
        assert "No routes exported." in capsys.readouterr().out

    def test_routes_not_an_object(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({**EXPORT, "routes": "oops"}), encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", str(path)])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err
