"""Tests for RouteDefinitionLoader."""

import pytest

from sovest.exceptions import ConfigurationException
from sovest.routing import RouteDefinitionLoader


class TestFlatten:
    def test_top_level_routes(self) -> None:
        entries = RouteDefinitionLoader().flatten([
            {"path": "/", "name": "home"},
            {"path": "/about", "name": "pages.about"},
        ])
        assert [(e.name, e.pattern) for e in entries] == [("home", "/"), ("pages.about", "/about")]

    def test_group_prefix_and_name(self) -> None:
        entries = RouteDefinitionLoader().flatten([{
            "type": "group",
            "name": "predictions",
            "prefix": "/predictions",
            "routes": [
                {"path": "/", "name": "predictions.index"},
                {"path": "/view/{id}", "name": "predictions.view"},
            ],
        }])
        assert [e.pattern for e in entries] == ["/predictions", "/predictions/view/{id}"]
        assert {e.group for e in entries} == {"predictions"}

    def test_nested_groups_accumulate(self) -> None:
        entries = RouteDefinitionLoader().flatten([{
            "type": "group",
            "name": "api",
            "prefix": "/api",
            "middleware": ["api"],
            "namespace": "Api",
            "routes": [{
                "type": "group",
                "prefix": "/v1",
                "middleware": "throttle",
                "namespace": "V1",
                "routes": [
                    {"path": "/stocks", "controller": "StockController", "action": "index",
                     "name": "api.v1.stocks", "middleware": ["cache"]},
                ],
            }],
        }])
        entry = entries[0]
        assert entry.pattern == "/api/v1/stocks"
        assert entry.middleware == ("api", "throttle", "cache")
        assert entry.namespace == "Api\\V1"
        assert entry.group == "api"
        assert entry.get_qualified_controller() == "Api\\V1\\StockController"

    def test_mapping_form(self) -> None:
        entries = RouteDefinitionLoader().flatten([
            {"/about": {"controller": "PageController", "action": "about", "name": "pages.about"}},
        ])
        assert entries[0].name == "pages.about"
        assert entries[0].pattern == "/about"

    def test_colon_placeholders_are_normalized(self) -> None:
        entries = RouteDefinitionLoader().flatten([{"path": "/predictions/edit/:id", "name": "predictions.edit"}])
        assert entries[0].pattern == "/predictions/edit/{id}"
        assert entries[0].parameter_names == ("id",)

    def test_error_page_entries_are_skipped(self) -> None:
        entries = RouteDefinitionLoader().flatten([
            {"404": {"controller": "ErrorController", "action": "notFound"}},
            {"path": "/", "name": "home"},
        ])
        assert [e.name for e in entries] == ["home"]

    def test_methods(self) -> None:
        entries = RouteDefinitionLoader().flatten([
            {"path": "/api/predictions", "method": "GET|POST", "name": "api.predictions"},
            {"path": "/logout", "name": "logout"},
        ])
        assert entries[0].methods == ("GET", "POST")
        assert entries[1].methods == ("GET",)

    def test_unnamed_routes_are_kept(self) -> None:
        entries = RouteDefinitionLoader().flatten([{"path": "/health"}])
        assert entries[0].name is None

    def test_rejects_non_list(self) -> None:
        with pytest.raises(ConfigurationException):
            RouteDefinitionLoader().flatten("routes")

    def test_rejects_non_mapping_item(self) -> None:
        with pytest.raises(ConfigurationException):
            RouteDefinitionLoader().flatten(["/about"])

    def test_rejects_blank_name(self) -> None:
        with pytest.raises(ConfigurationException):
            RouteDefinitionLoader().flatten([{"path": "/about", "name": "  "}])


class TestLoad:
    def test_builds_frozen_collection(self, route_definitions) -> None:
        routes = RouteDefinitionLoader().load(route_definitions)
        assert routes.is_frozen()
        assert routes.get_by_name("admin.dashboard").pattern == "/admin"

    def test_duplicate_name(self) -> None:
        with pytest.raises(ConfigurationException) as exc_info:
            RouteDefinitionLoader().load([
                {"path": "/", "name": "home"},
                {"path": "/home", "name": "home"},
            ])
        assert "Duplicate route name [home]" in str(exc_info.value)

    def test_malformed_pattern(self) -> None:
        with pytest.raises(ConfigurationException):
            RouteDefinitionLoader().load([{"path": "/predictions/view/{id", "name": "predictions.view"}])

    def test_empty_table(self) -> None:
        routes = RouteDefinitionLoader().load([])
        assert len(routes) == 0
        assert routes.get_named_patterns() == {}

    def test_bundled_route_table(self) -> None:
        from sovest.config.routes import ROUTES

        routes = RouteDefinitionLoader().load(ROUTES)
        assert routes.get_by_name("home").pattern == "/"
        assert routes.get_by_name("predictions.index").pattern == "/predictions"
        assert routes.get_by_name("predictions.view").pattern == "/predictions/view/{id}"
        assert routes.get_by_name("api.stocks.price").pattern == "/api/stocks/{symbol}/price"
        assert routes.get_by_name("admin.users.view").pattern == "/admin/users/{id}"
        assert routes.get_by_legacy_name("home.index").pattern == "/"
        assert routes.get_by_legacy_name("admin.dashboard.index").pattern == "/admin"
