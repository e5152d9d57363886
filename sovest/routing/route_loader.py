"""
Route Definition Loader
Flattens plain-data route definitions (nested groups included) into RouteEntry objects
"""
from typing import Any, Dict, Iterable, List, Optional

from sovest.exceptions import ConfigurationException
from sovest.logging import getLogger
from sovest.routing.route import RouteEntry, join_paths
from sovest.routing.route_collection import RouteCollection

logger = getLogger(__name__)


class RouteDefinitionLoader:
    """
    Builds a frozen RouteCollection from route definitions

    Definitions are lists whose items are either groups, routes carrying a
    'path' key, or single-key mappings of path to route ({'/about': {...}}).
    Group attributes accumulate from the outermost group inward:
    prefix and namespace are concatenated, middleware is appended, and the
    innermost group 'name' is recorded on each route.

    Usage:
        loader = RouteDefinitionLoader()
        routes = loader.load(Config.get('routes.ROUTES', []))
        routes.get_by_name('predictions.view').pattern  # '/predictions/view/{id}'
    """

    def load(self, definitions: Iterable[Any]) -> RouteCollection:
        """
        Load definitions into a new frozen collection

        Raises:
            ConfigurationException: On malformed definitions or patterns, or duplicate names
        """
        collection = RouteCollection()
        for entry in self.flatten(definitions):
            collection.add(entry)
        collection.freeze()

        logger.info(
            f"Route table built with {len(collection.get_named_patterns())} named routes",
            extra={'route_count': len(collection)}
        )
        return collection

    def flatten(self, definitions: Iterable[Any]) -> List[RouteEntry]:
        """Flatten definitions into entries in declaration order"""
        if isinstance(definitions, dict):
            definitions = [definitions]
        if not isinstance(definitions, (list, tuple)):
            raise ConfigurationException(
                f"Route definitions must be a list, got {type(definitions).__name__}"
            )

        entries: List[RouteEntry] = []
        self._process(definitions, entries, prefix='', middleware=[], namespace='', group=None)
        return entries

    def _process(
        self,
        definitions: Iterable[Any],
        entries: List[RouteEntry],
        prefix: str,
        middleware: List[str],
        namespace: str,
        group: Optional[str],
    ):
        for definition in definitions:
            if not isinstance(definition, dict):
                raise ConfigurationException(
                    f"Route definition must be a mapping, got {type(definition).__name__}"
                )

            if definition.get('type') == 'group':
                self._process_group(definition, entries, prefix, middleware, namespace, group)
            elif 'path' in definition:
                self._add_route(definition['path'], definition, entries, prefix, middleware, namespace, group)
            else:
                # {'/path': {...}} mapping form
                for path, route in definition.items():
                    self._add_route(path, route, entries, prefix, middleware, namespace, group)

    def _process_group(
        self,
        definition: Dict[str, Any],
        entries: List[RouteEntry],
        prefix: str,
        middleware: List[str],
        namespace: str,
        group: Optional[str],
    ):
        routes = definition.get('routes', [])
        if not isinstance(routes, (list, tuple, dict)):
            raise ConfigurationException(
                f"Group '{definition.get('name', definition.get('prefix', ''))}' routes must be a list"
            )
        if isinstance(routes, dict):
            routes = [routes]

        group_namespace = definition.get('namespace')
        if group_namespace:
            namespace = f"{namespace}\\{group_namespace}" if namespace else group_namespace

        self._process(
            routes,
            entries,
            prefix=join_paths(prefix, definition.get('prefix', '')),
            middleware=middleware + self._as_list(definition.get('middleware')),
            namespace=namespace,
            group=definition.get('name') or group,
        )

    def _add_route(
        self,
        path: Any,
        route: Any,
        entries: List[RouteEntry],
        prefix: str,
        middleware: List[str],
        namespace: str,
        group: Optional[str],
    ):
        if not isinstance(path, str):
            raise ConfigurationException(f"Route path must be a string, got {path!r}")

        # Error-page mappings ('404', '500') are not routable paths
        if path.strip('/').isdigit():
            return

        if not isinstance(route, dict):
            raise ConfigurationException(f"Route '{path}' definition must be a mapping")

        name = route.get('name')
        if name is not None and (not isinstance(name, str) or not name.strip()):
            raise ConfigurationException(f"Route '{path}' has an invalid name: {name!r}")

        methods = route.get('methods') or route.get('method') or 'GET'
        if isinstance(methods, str):
            methods = methods.split('|')

        entries.append(RouteEntry(
            name=name,
            pattern=join_paths(prefix, path),
            group=group,
            controller=route.get('controller'),
            action=route.get('action'),
            methods=methods,
            middleware=middleware + self._as_list(route.get('middleware')),
            namespace=namespace or None,
        ))

    @staticmethod
    def _as_list(value: Any) -> List[str]:
        if not value:
            return []
        if isinstance(value, str):
            return [value]
        return list(value)
