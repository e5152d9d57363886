"""
URL Generator
Generates URLs from named routes and controller actions (Laravel-style)
"""
from typing import Any, Dict, Optional

from sovest.exceptions import RoutingException, RouteNotFoundException
from sovest.logging import getLogger
from sovest.routing import RouteCollection, Legacy, NotFound, classify
from sovest.support import Str

# Resolution logs belong with the rest of the routing layer
logger = getLogger('sovest.routing.url')


class UrlGenerator:
    """
    Usage:
        generator = UrlGenerator(routes, 'https://sovest.example.com')
        generator.url('predictions.view', {'id': 123})       # /predictions/view/123
        generator.url('home', absolute=True)                  # https://sovest.example.com/
        generator.action('AuthController', 'login')           # /auth/login
    """

    def __init__(self, routes: RouteCollection, base_url: str = ''):
        """
        Initialize URL generator

        Args:
            routes: Route collection, frozen by the loader
            base_url: Scheme + host prepended to absolute URLs
        """
        self._routes = routes
        self._base_url = (base_url or '').rstrip('/')

    @property
    def routes(self) -> RouteCollection:
        return self._routes

    @property
    def base_url(self) -> str:
        return self._base_url

    def with_base_url(self, base_url: str) -> 'UrlGenerator':
        """New generator sharing this route table with a different base URL"""
        return UrlGenerator(self._routes, base_url)

    def url(self, name: str, parameters: Optional[Dict[str, Any]] = None, absolute: bool = False) -> str:
        """
        Generate a URL for a named route

        Args:
            name: Route name or dotted controller.action alias
            parameters: Placeholder values
            absolute: Prefix the configured base URL

        Returns:
            URL string

        Raises:
            RoutingException: If name is empty
            RouteNotFoundException: If name matches no route or alias
            MissingParameterException: If a placeholder has no value

        Usage:
            url = generator.url('predictions.view', {'id': 1})
            url = generator.url('prediction.view', {'id': 1})  # legacy alias
        """
        if not isinstance(name, str) or not name.strip():
            raise RoutingException("Route name must be a non-empty string")

        resolution = classify(name, self._routes)

        if isinstance(resolution, NotFound):
            logger.debug(f"Route [{name}] not defined")
            raise RouteNotFoundException.for_name(name)

        if isinstance(resolution, Legacy):
            logger.debug(f"Route [{name}] resolved through legacy alias")

        return self._finish(resolution.route.substitute(parameters), absolute)

    def absolute(self, name: str, parameters: Optional[Dict[str, Any]] = None) -> str:
        """Generate an absolute URL for a named route"""
        return self.url(name, parameters, absolute=True)

    def action(
        self,
        controller: str,
        action: str,
        parameters: Optional[Dict[str, Any]] = None,
        absolute: bool = False
    ) -> str:
        """
        Generate URL for a controller action

        Uses the registered route for the pair when there is one; otherwise
        builds /<controller>/<action> followed by each parameter value as a
        path segment, in the order supplied.

        Example:
            generator.action('PredictionController', 'view', {'id': 5})  # /predictions/view/5
            generator.action('AuthController', 'reset', {'token': 'abc'})  # /auth/reset/abc
        """
        if not isinstance(controller, str) or not controller.strip():
            raise RoutingException("Controller name must be a non-empty string")
        if not isinstance(action, str) or not action.strip():
            raise RoutingException("Action name must be a non-empty string")

        route = self._routes.get_by_action(controller, action)
        if route is not None:
            return self._finish(route.substitute(parameters), absolute)

        return self._finish(self._synthesize_path(controller, action, parameters), absolute)

    def _synthesize_path(self, controller: str, action: str, parameters: Optional[Dict[str, Any]]) -> str:
        basename = Str.finish_without(Str.class_basename(controller), 'Controller')
        segments = [Str.kebab(basename), action]
        segments.extend(str(value) for value in (parameters or {}).values())
        return '/' + '/'.join(segments)

    def _finish(self, path: str, absolute: bool) -> str:
        if absolute:
            return f"{self._base_url}{path}"
        return path

    def has(self, name: str) -> bool:
        """Check whether a name resolves to a route or legacy alias"""
        if not isinstance(name, str) or not name:
            return False
        return not isinstance(classify(name, self._routes), NotFound)

    def get_named_routes(self) -> Dict[str, str]:
        """
        Get all named routes mapped to their URL patterns

        Returns:
            Snapshot dict in registration order (diagnostics only)
        """
        return self._routes.get_named_patterns()

    def format_named_routes(self) -> str:
        """
        Named routes as one '{name}: {pattern}' line each, registration order
        """
        return '\n'.join(f"{name}: {pattern}" for name, pattern in self.get_named_routes().items())
