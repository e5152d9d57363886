"""
Route Collection
Named route table plus the legacy controller/action alias tables
"""
from typing import Any, Dict, List, Optional, Tuple

from sovest.exceptions import ConfigurationException
from sovest.logging import getLogger
from sovest.routing.route import RouteEntry, qualify_controller

logger = getLogger(__name__)


class RouteCollection:
    """
    Collection of routes with name-based and legacy lookup

    Routes are added while the table is being built; freeze() makes the
    collection read-only so it can be shared between threads without locking.
    """

    def __init__(self):
        """Initialize an empty route collection"""
        self._routes: List[RouteEntry] = []
        self._routes_by_name: Dict[str, RouteEntry] = {}
        self._routes_by_action: Dict[Tuple[str, str], RouteEntry] = {}
        self._routes_by_legacy_name: Dict[str, RouteEntry] = {}
        self._frozen = False

    def add(self, route: RouteEntry) -> RouteEntry:
        """
        Add a route to the collection

        Returns:
            The added route

        Raises:
            ConfigurationException: If the collection is frozen or the name is taken
        """
        if self._frozen:
            raise ConfigurationException("Route collection is frozen; routes cannot be added")

        if route.name:
            if route.name in self._routes_by_name:
                existing = self._routes_by_name[route.name]
                raise ConfigurationException(
                    f"Duplicate route name [{route.name}]: "
                    f"'{existing.pattern}' and '{route.pattern}'"
                )
            self._routes_by_name[route.name] = route

        self._routes.append(route)
        self._register_aliases(route)
        return route

    def _register_aliases(self, route: RouteEntry):
        """Index controller/action aliases, first definition wins"""
        if not (route.controller and route.action):
            return

        key = (route.get_qualified_controller(), route.action)
        if key in self._routes_by_action:
            logger.debug(
                f"Legacy alias {key[0]}@{key[1]} already maps to "
                f"'{self._routes_by_action[key].pattern}', ignoring '{route.pattern}'"
            )
        else:
            self._routes_by_action[key] = route

        dotted = route.get_legacy_name()
        if dotted not in self._routes_by_legacy_name:
            self._routes_by_legacy_name[dotted] = route

    def freeze(self) -> 'RouteCollection':
        """Make the collection read-only"""
        self._frozen = True
        return self

    def is_frozen(self) -> bool:
        return self._frozen

    def get_by_name(self, name: str) -> Optional[RouteEntry]:
        """Get route by name"""
        return self._routes_by_name.get(name)

    def get_by_action(self, controller: str, action: str) -> Optional[RouteEntry]:
        """
        Get route by controller and action

        Example:
            routes.get_by_action('PredictionController', 'view')
            routes.get_by_action('Admin\\DashboardController', 'index')
        """
        return self._routes_by_action.get((qualify_controller(controller), action))

    def get_by_legacy_name(self, name: str) -> Optional[RouteEntry]:
        """
        Get route by dotted legacy alias

        Example:
            routes.get_by_legacy_name('home.index')
        """
        return self._routes_by_legacy_name.get(name)

    def has_named_route(self, name: str) -> bool:
        """Check if a named route exists"""
        return name in self._routes_by_name

    def get_named_patterns(self) -> Dict[str, str]:
        """Snapshot of name -> pattern in registration order"""
        return {name: route.pattern for name, route in self._routes_by_name.items()}

    def get_legacy_aliases(self) -> Dict[str, str]:
        """Snapshot of dotted legacy alias -> pattern"""
        return {alias: route.pattern for alias, route in self._routes_by_legacy_name.items()}

    def count(self) -> int:
        """Get total number of routes"""
        return len(self._routes)

    def __iter__(self):
        return iter(self._routes)

    def __len__(self):
        return len(self._routes)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert route collection to a dictionary representation

        Returns:
            Dict with route information and totals
        """
        return {
            'total': len(self._routes),
            'named_routes': len(self._routes_by_name),
            'legacy_aliases': len(self._routes_by_legacy_name),
            'routes': [route.to_dict() for route in self._routes],
        }

    def __repr__(self):
        return f"<RouteCollection ({len(self._routes)} routes)>"
