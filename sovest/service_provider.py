"""
Service Provider Base Class
Each provider binds one concern (logging, routing, HTTP) into the container
"""
from abc import ABC
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sovest.application import Application


class ServiceProvider(ABC):
    """
    Providers run in two phases, driven by sovest.bootstrap.create_app:

    1. register() for every provider, in PROVIDERS order. Only bind here;
       other providers' services may not exist yet.
    2. boot() for every provider, once all bindings are in place. Resolving
       bindings and attaching them to the Sanic app happens here.
    """

    def __init__(self, app: 'Application'):
        self.app = app

    def register(self):
        """
        Bind services into the container

        Example:
            self.app.singleton('url_generator', lambda app: UrlGenerator(app.make('routes')))
        """
        pass

    def boot(self):
        """
        Resolve bindings and wire them into the Sanic app

        Example:
            self.app.sanic_app.ctx.url = self.app.make('url_generator')
        """
        pass

    @property
    def sanic_app(self):
        """The Sanic app owned by the container"""
        return self.app.sanic_app
