"""
Framework Helper Functions
Shortcuts to the URL generator bound in the application container

Code that has the generator at hand (request handlers via request.app.ctx.url,
services constructed with it) should call it directly; these helpers serve
templates and scripts that only have the bootstrapped application.
"""
from typing import Any, Dict, Optional


def route(name: str, parameters: Optional[Dict[str, Any]] = None, absolute: bool = False) -> str:
    """
    Generate URL for named route

    Example:
        route('home')                             # '/'
        route('predictions.view', {'id': 123})    # '/predictions/view/123'
    """
    from sovest.support.facades import URL
    return URL.url(name, parameters or {}, absolute)


def route_action(
    controller: str,
    action: str,
    parameters: Optional[Dict[str, Any]] = None,
    absolute: bool = False
) -> str:
    """
    Generate URL for a controller and action

    Example:
        route_action('HomeController', 'index')                   # '/'
        route_action('PredictionController', 'view', {'id': 123}) # '/predictions/view/123'
    """
    from sovest.support.facades import URL
    return URL.action(controller, action, parameters or {}, absolute)


def route_absolute(name: str, parameters: Optional[Dict[str, Any]] = None) -> str:
    """
    Generate an absolute URL for a named route

    Example:
        route_absolute('home')  # 'http://localhost:8000/'
    """
    return route(name, parameters, absolute=True)


def named_routes() -> Dict[str, str]:
    """
    Get all named routes mapped to their URL patterns (useful for debugging)
    """
    from sovest.support.facades import URL
    return URL.get_named_routes()
