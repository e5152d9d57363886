"""
Application Bootstrap
Builds the application container and boots its providers
"""
from typing import Optional

from sovest.application import Application
from sovest.providers import LoggingServiceProvider, RoutingServiceProvider, HttpServiceProvider
from sovest.support.facades import Facade

PROVIDERS = [
    LoggingServiceProvider,
    RoutingServiceProvider,
    HttpServiceProvider,
]


def create_app(base_path: Optional[str] = None, name: Optional[str] = None) -> Application:
    """
    Create and boot the application

    The route table and URL generator are built while booting, so invalid
    route definitions raise ConfigurationException here rather than on the
    first request.

    Args:
        base_path: Project directory holding .env and storage/ (defaults to cwd)
        name: Sanic app name (defaults to the snake-cased APP_NAME)
    """
    app = Application(base_path, name)
    Facade.set_app(app)
    app.singleton('app', app)

    for provider in PROVIDERS:
        app.register_provider(provider)

    app.boot()
    return app
