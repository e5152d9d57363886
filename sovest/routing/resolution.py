"""
Route Resolution
Classifies a symbolic route reference once, so callers match on the result
instead of re-parsing the name
"""
from dataclasses import dataclass
from typing import Union

from sovest.routing.route import RouteEntry
from sovest.routing.route_collection import RouteCollection


@dataclass(frozen=True)
class Named:
    """Exact match in the named route table"""
    route: RouteEntry


@dataclass(frozen=True)
class Legacy:
    """Match through a dotted controller.action alias"""
    alias: str
    route: RouteEntry


@dataclass(frozen=True)
class NotFound:
    """Neither a named route nor a legacy alias"""
    name: str


Resolution = Union[Named, Legacy, NotFound]


def classify(name: str, routes: RouteCollection) -> Resolution:
    """
    Resolve a route name against the collection

    Order: named route first, then the dotted legacy alias table.

    Example:
        classify('home', routes)        # Named(route=<RouteEntry [GET] / (name: home)>)
        classify('home.index', routes)  # Legacy(alias='home.index', route=...)
        classify('nope', routes)        # NotFound(name='nope')
    """
    route = routes.get_by_name(name)
    if route is not None:
        return Named(route)

    if '.' in name:
        route = routes.get_by_legacy_name(name)
        if route is not None:
            return Legacy(name, route)

    return NotFound(name)
