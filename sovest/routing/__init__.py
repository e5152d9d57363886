"""
Routing Package
Route table construction and name resolution

URL generation on top of these lives in sovest.http.url (UrlGenerator).
"""
from sovest.routing.route import RouteEntry
from sovest.routing.route_collection import RouteCollection
from sovest.routing.route_loader import RouteDefinitionLoader
from sovest.routing.resolution import Named, Legacy, NotFound, Resolution, classify

__all__ = [
    'RouteEntry',
    'RouteCollection',
    'RouteDefinitionLoader',
    'Named',
    'Legacy',
    'NotFound',
    'Resolution',
    'classify',
]
