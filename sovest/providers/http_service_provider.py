"""
HTTP Service Provider
Registers the centralized error handler and the route diagnostics blueprint
"""
from sanic.exceptions import NotFound

from sovest.service_provider import ServiceProvider
from sovest.defaults import DEFAULT_DEBUG_ROUTES_PREFIX
from sovest.support import Config

FALLBACK_METHODS = ['GET', 'POST', 'PUT', 'PATCH', 'DELETE', 'HEAD', 'OPTIONS']


class HttpServiceProvider(ServiceProvider):
    """HTTP layer service provider"""

    def register(self):
        """Register HTTP services"""
        from sovest.exceptions.error_handler import ErrorHandler

        self.app.singleton(
            'error_handler',
            lambda app: ErrorHandler(
                debug=Config.get('app.APP_DEBUG', False),
                include_trace=Config.get('app.APP_DEBUG_TRACE', False),
            )
        )

    def boot(self):
        """Bootstrap HTTP services"""
        self.register_error_handler()

        if Config.get('app.APP_DEBUG', False):
            self.register_debug_routes()
        else:
            self.register_fallback_route()

    def register_error_handler(self):
        error_handler = self.app.make('error_handler')

        @self.sanic_app.exception(Exception)
        async def handle_exception(request, exception):
            """Handle all exceptions through centralized error handler"""
            return await error_handler.handle_error(request, exception)

    def register_debug_routes(self):
        from sovest.http.debug_routes import create_debug_blueprint

        prefix = Config.get('app.DEBUG_ROUTES_PREFIX', DEFAULT_DEBUG_ROUTES_PREFIX)
        self.sanic_app.blueprint(create_debug_blueprint(prefix))

    def register_fallback_route(self):
        """
        Give the router at least one route

        Sanic cannot finalize an empty router and answers every request
        with a 500; with this in place unknown paths surface as NotFound.
        """
        async def not_found(request, path):
            raise NotFound(f"Requested URL {request.path} not found")

        self.sanic_app.add_route(
            not_found, '/<path:path>', methods=FALLBACK_METHODS, name='fallback_not_found'
        )
