"""Shared pytest configuration for sovest tests."""

import uuid

import pytest
from sanic import Sanic

from sovest.http import UrlGenerator
from sovest.routing import RouteDefinitionLoader
from sovest.support import Config, Storage
from sovest.support.facades import Facade

BASE_URL = "http://example.com"

# Several tests boot an application; allow Sanic app names to be reused.
Sanic.test_mode = True


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path):
    """Point storage at a temp dir and reset config overrides and the facade app."""
    Storage.initialize(tmp_path)
    Config.set("app.APP_ENV", "testing")
    Config.set("app.APP_URL", BASE_URL)
    yield
    Config.clear_overrides()
    Facade.set_app(None)


@pytest.fixture
def route_definitions() -> list:
    return [
        {"path": "/", "controller": "HomeController", "action": "index", "name": "home"},
        {
            "type": "group",
            "name": "predictions",
            "prefix": "/predictions",
            "routes": [
                {"path": "/view/{id}", "controller": "PredictionController", "action": "view",
                 "name": "predictions.view"},
                {"path": "/{symbol}/votes/{id}", "controller": "PredictionController", "action": "votes",
                 "name": "predictions.votes"},
            ],
        },
        {
            "type": "group",
            "name": "admin",
            "prefix": "/admin",
            "namespace": "Admin",
            "middleware": ["auth", "admin"],
            "routes": [
                {"path": "/", "controller": "DashboardController", "action": "index", "name": "admin.dashboard"},
            ],
        },
    ]


@pytest.fixture
def routes(route_definitions):
    return RouteDefinitionLoader().load(route_definitions)


@pytest.fixture
def generator(routes) -> UrlGenerator:
    return UrlGenerator(routes, BASE_URL)


@pytest.fixture
def app_name() -> str:
    return f"sovest_test_{uuid.uuid4().hex[:12]}"
