"""Tests for the sovest console commands."""

import asyncio
import json

import pytest

from sovest.console.artisan import Artisan


@pytest.fixture(autouse=True)
def project_dir(tmp_path, monkeypatch):
    # Commands boot the application from the working directory
    monkeypatch.chdir(tmp_path)


def run(*argv: str) -> int:
    return asyncio.run(Artisan().run(["sovest", *argv]))


class TestArtisan:
    def test_discovers_route_commands(self) -> None:
        assert {"route:list", "route:show", "route:url"} <= set(Artisan().commands)

    def test_help(self, capsys) -> None:
        assert run() == 0
        out = capsys.readouterr().out
        assert "ROUTE:" in out
        assert "route:url <name>" in out

    def test_command_help(self, capsys) -> None:
        assert run("help", "route:list") == 0
        assert "Command: route:list" in capsys.readouterr().out

    def test_unknown_command(self, capsys) -> None:
        assert run("nope") == 1
        assert "Unknown command: nope" in capsys.readouterr().out

    def test_parse_args(self) -> None:
        args, kwargs = Artisan()._parse_args(["home", "--id=5", "--absolute", "-v"])
        assert args == ["home"]
        assert kwargs == {"id": "5", "absolute": True, "v": True}


class TestRouteList:
    def test_lists_routes(self, capsys) -> None:
        assert run("route:list") == 0
        out = capsys.readouterr().out
        assert "home: /\n" in out
        assert "predictions.view: /predictions/view/{id}\n" in out
        assert "Showing" in out

    def test_json(self, capsys) -> None:
        assert run("route:list", "--json") == 0
        routes = json.loads(capsys.readouterr().out)
        assert routes["api.stocks.price"] == "/api/stocks/{symbol}/price"
        assert list(routes)[0] == "home"

    def test_aliases(self, capsys) -> None:
        assert run("route:list", "--aliases") == 0
        assert "home.index: /" in capsys.readouterr().out

    def test_verbose_table(self, capsys) -> None:
        assert run("route:list", "--verbose") == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0].startswith("+-") and lines[0] == lines[2]
        header = [cell.strip() for cell in lines[1].strip("|").split("|")]
        assert header == ["Method", "URI", "Name", "Action", "Middleware"]
        row = next(line for line in lines if " predictions.edit " in line)
        assert "/predictions/edit/{id}" in row
        assert "PredictionController@edit" in row
        assert "auth, prediction.owner" in row
        assert "Showing" in lines[-1] and "named" in lines[-1]

    def test_verbose_json(self, capsys) -> None:
        assert run("route:list", "--verbose", "--json") == 0
        table = json.loads(capsys.readouterr().out)
        assert table["total"] == len(table["routes"])
        assert table["routes"][0]["name"] == "home"
        assert table["routes"][0]["action"] == "HomeController@index"


class TestRouteUrl:
    def test_generates_url(self, capsys) -> None:
        assert run("route:url", "predictions.view", "--id=123") == 0
        assert capsys.readouterr().out.strip() == "/predictions/view/123"

    def test_absolute(self, capsys) -> None:
        assert run("route:url", "predictions.view", "--id=123", "--absolute") == 0
        assert capsys.readouterr().out.strip() == "http://example.com/predictions/view/123"

    def test_absolute_false(self, capsys) -> None:
        assert run("route:url", "home", "--absolute=false") == 0
        assert capsys.readouterr().out.strip() == "/"

    def test_missing_parameter(self, capsys) -> None:
        assert run("route:url", "predictions.view") == 1
        assert "Missing required parameter(s) for route [predictions.view]: id" in capsys.readouterr().out

    def test_unknown_route(self, capsys) -> None:
        assert run("route:url", "predictions.missing") == 1
        assert "Route [predictions.missing] not defined" in capsys.readouterr().out

    def test_missing_name(self, capsys) -> None:
        assert run("route:url") == 1
        assert "Missing route name" in capsys.readouterr().out


class TestRouteShow:
    def test_named_route(self, capsys) -> None:
        assert run("route:show", "predictions.edit") == 0
        out = capsys.readouterr().out
        assert "Pattern:    /predictions/edit/{id}\n" in out
        assert "Group:      predictions\n" in out
        assert "Action:     PredictionController@edit\n" in out
        assert "Methods:    GET\n" in out
        assert "Middleware: auth, prediction.owner\n" in out
        assert "Parameters: id\n" in out
        assert "Alias:      prediction.edit\n" in out

    def test_route_without_parameters(self, capsys) -> None:
        assert run("route:show", "home") == 0
        assert "Parameters: -\n" in capsys.readouterr().out

    def test_legacy_alias(self, capsys) -> None:
        assert run("route:show", "prediction.edit") == 0
        out = capsys.readouterr().out
        assert "[prediction.edit] is a legacy alias" in out
        assert "Name:       predictions.edit\n" in out

    def test_unknown_route(self, capsys) -> None:
        assert run("route:show", "predictions.missing") == 1
        assert "Route [predictions.missing] not defined" in capsys.readouterr().out

    def test_missing_name(self, capsys) -> None:
        assert run("route:show") == 1
        assert "Missing route name" in capsys.readouterr().out
