"""
Route Diagnostics Blueprint
Human-readable route listing and URL generation over HTTP (debug mode only)
"""
from sanic import Blueprint, Request
from sanic.response import json, text

from sovest.defaults import DEFAULT_DEBUG_ROUTES_PREFIX


def create_debug_blueprint(url_prefix: str = DEFAULT_DEBUG_ROUTES_PREFIX) -> Blueprint:
    """
    Build the diagnostics blueprint

    Handlers read the URL generator from request.app.ctx.url, which the
    RoutingServiceProvider sets while booting.

    Endpoints:
        GET {prefix}/routes          'name: pattern' lines, registration order
        GET {prefix}/routes/<name>   {"name", "url", "absolute"}; query args are route parameters
    """
    bp = Blueprint('debug_routes', url_prefix=url_prefix)

    @bp.get('/routes', name='routes_index')
    async def list_routes(request: Request):
        return text(request.app.ctx.url.format_named_routes() + '\n')

    @bp.get('/routes/<name>', name='routes_show')
    async def show_route(request: Request, name: str):
        generator = request.app.ctx.url
        parameters = {key: values[0] for key, values in request.args.items()}

        return json({
            'name': name,
            'url': generator.url(name, parameters),
            'absolute': generator.url(name, parameters, absolute=True),
        })

    return bp
