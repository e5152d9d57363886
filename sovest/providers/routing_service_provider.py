"""
Routing Service Provider
"""
from sovest.service_provider import ServiceProvider
from sovest.routing import RouteDefinitionLoader
from sovest.http import UrlGenerator
from sovest.support import Config


class RoutingServiceProvider(ServiceProvider):

    def register(self):
        """Register routing services"""
        # Route table, built from configuration on first resolution
        self.app.singleton(
            'routes',
            lambda app: RouteDefinitionLoader().load(Config.get('routes.ROUTES', []))
        )
        self.app.singleton(
            'url_generator',
            lambda app: UrlGenerator(app.make('routes'), Config.get('app.APP_URL', ''))
        )

    def boot(self):
        """Build the tables now so bad definitions fail at startup, then hand the generator to handlers"""
        self.sanic_app.ctx.url = self.app.make('url_generator')
