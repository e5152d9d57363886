"""Tests for sovest.routing.route: RouteEntry and pattern helpers."""

import pytest

from sovest.exceptions import ConfigurationException, MissingParameterException
from sovest.routing.route import (
    RouteEntry,
    join_paths,
    legacy_name,
    normalize_pattern,
    parse_placeholders,
    qualify_controller,
)


class TestNormalizePattern:
    def test_root(self) -> None:
        assert normalize_pattern("/") == "/"
        assert normalize_pattern("") == "/"

    def test_adds_leading_and_strips_trailing_slash(self) -> None:
        assert normalize_pattern("predictions/trending/") == "/predictions/trending"

    def test_converts_colon_placeholders(self) -> None:
        assert normalize_pattern("/predictions/view/:id") == "/predictions/view/{id}"
        assert normalize_pattern("/api/stocks/:symbol/price") == "/api/stocks/{symbol}/price"

    def test_leaves_colons_inside_segments(self) -> None:
        assert normalize_pattern("/time/12:30") == "/time/12:30"


class TestJoinPaths:
    def test_group_root(self) -> None:
        assert join_paths("/predictions", "/") == "/predictions"

    def test_no_prefix(self) -> None:
        assert join_paths("", "/") == "/"
        assert join_paths("", "/about") == "/about"

    def test_nested(self) -> None:
        assert join_paths("/api/", "/stocks") == "/api/stocks"


class TestParsePlaceholders:
    def test_none(self) -> None:
        assert parse_placeholders("/predictions/trending") == ()

    def test_in_order(self) -> None:
        assert parse_placeholders("/{symbol}/votes/{id}") == ("symbol", "id")

    @pytest.mark.parametrize("pattern", [
        "/predictions/{id",
        "/predictions/id}",
        "/predictions/{{id}}",
        "/predictions/{a{b}c}",
    ])
    def test_unbalanced(self, pattern: str) -> None:
        with pytest.raises(ConfigurationException):
            parse_placeholders(pattern)

    @pytest.mark.parametrize("pattern", ["/x/{}", "/x/{1id}", "/x/{id-name}", "/x/{ id }"])
    def test_invalid_identifier(self, pattern: str) -> None:
        with pytest.raises(ConfigurationException) as exc_info:
            parse_placeholders(pattern)
        assert "Invalid placeholder" in str(exc_info.value)

    def test_duplicate(self) -> None:
        with pytest.raises(ConfigurationException) as exc_info:
            parse_placeholders("/{id}/copy/{id}")
        assert "more than once" in str(exc_info.value)


class TestLegacyNames:
    def test_strips_controller_suffix(self) -> None:
        assert legacy_name("HomeController", "index") == "home.index"
        assert legacy_name("PredictionController", "view") == "prediction.view"

    def test_namespaced(self) -> None:
        assert legacy_name("Admin\\DashboardController", "index") == "admin.dashboard.index"

    def test_qualify_controller(self) -> None:
        assert qualify_controller("DashboardController", "Admin") == "Admin\\DashboardController"
        assert qualify_controller("Admin.DashboardController") == "Admin\\DashboardController"
        assert qualify_controller("Admin/DashboardController") == "Admin\\DashboardController"


class TestRouteEntry:
    def test_fields(self) -> None:
        entry = RouteEntry("predictions.view", "/predictions/view/{id}", group="predictions",
                           controller="PredictionController", action="view", methods=["get"])
        assert entry.name == "predictions.view"
        assert entry.pattern == "/predictions/view/{id}"
        assert entry.group == "predictions"
        assert entry.methods == ("GET",)
        assert entry.parameter_names == ("id",)
        assert entry.get_action_name() == "PredictionController@view"
        assert entry.get_legacy_name() == "prediction.view"

    def test_substitute(self) -> None:
        entry = RouteEntry("predictions.votes", "/predictions/{symbol}/votes/{id}")
        assert entry.substitute({"symbol": "AAPL", "id": 7}) == "/predictions/AAPL/votes/7"

    def test_substitute_ignores_extra_parameters(self) -> None:
        entry = RouteEntry("home", "/")
        assert entry.substitute({"page": 2}) == "/"

    def test_substitute_missing(self) -> None:
        entry = RouteEntry("predictions.votes", "/predictions/{symbol}/votes/{id}")
        with pytest.raises(MissingParameterException) as exc_info:
            entry.substitute({"symbol": "AAPL"})
        assert exc_info.value.missing == ["id"]
        assert exc_info.value.name == "predictions.votes"

    def test_immutable(self) -> None:
        entry = RouteEntry("home", "/")
        with pytest.raises(AttributeError):
            entry.pattern = "/other"

    def test_no_legacy_name_without_controller(self) -> None:
        assert RouteEntry("home", "/").get_legacy_name() is None

    def test_malformed_pattern_fails_at_construction(self) -> None:
        with pytest.raises(ConfigurationException):
            RouteEntry("broken", "/predictions/{id")
