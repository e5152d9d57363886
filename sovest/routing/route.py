"""
Route Entry
A single named URL pattern with the metadata it was declared with
"""
from typing import Any, Dict, List, Optional, Tuple
import re

from sovest.exceptions import ConfigurationException, MissingParameterException
from sovest.support import Str

PLACEHOLDER_REGEX = re.compile(r'\{([^{}]*)\}')
IDENTIFIER_REGEX = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*$')
LEGACY_PLACEHOLDER_REGEX = re.compile(r'(?<=/):([A-Za-z_][A-Za-z0-9_]*)')


def normalize_pattern(pattern: str) -> str:
    """
    Normalize a path template to a root-relative form

    Converts legacy ':id' segments to '{id}' and collapses surrounding slashes.

    Example:
        normalize_pattern('predictions/view/:id/')  # '/predictions/view/{id}'
    """
    pattern = LEGACY_PLACEHOLDER_REGEX.sub(r'{\1}', '/' + pattern.strip())
    stripped = pattern.strip('/')
    return '/' + stripped if stripped else '/'


def join_paths(prefix: str, path: str) -> str:
    """
    Join a group prefix and a route path

    Example:
        join_paths('/predictions', '/')  # '/predictions'
        join_paths('', '/')  # '/'
    """
    parts = [part.strip('/') for part in (prefix, path) if part and part.strip('/')]
    return '/' + '/'.join(parts)


def parse_placeholders(pattern: str) -> Tuple[str, ...]:
    """
    Extract placeholder names from a pattern, validating its syntax

    Raises:
        ConfigurationException: On unbalanced braces, empty or non-identifier
            placeholders, or a placeholder used twice
    """
    names = []
    for match in PLACEHOLDER_REGEX.finditer(pattern):
        name = match.group(1)
        if not IDENTIFIER_REGEX.match(name):
            raise ConfigurationException(
                f"Invalid placeholder '{{{name}}}' in route pattern '{pattern}'"
            )
        if name in names:
            raise ConfigurationException(
                f"Placeholder '{{{name}}}' appears more than once in route pattern '{pattern}'"
            )
        names.append(name)

    remainder = PLACEHOLDER_REGEX.sub('', pattern)
    if '{' in remainder or '}' in remainder:
        raise ConfigurationException(f"Unbalanced braces in route pattern '{pattern}'")

    return tuple(names)


def qualify_controller(controller: str, namespace: Optional[str] = None) -> str:
    """
    Build a backslash-separated controller name

    Example:
        qualify_controller('DashboardController', 'Admin')  # 'Admin\\DashboardController'
        qualify_controller('admin.DashboardController')  # 'admin\\DashboardController'
    """
    controller = re.sub(r'[./]', '\\\\', controller.strip('\\./'))
    if namespace:
        namespace = re.sub(r'[./]', '\\\\', namespace.strip('\\./'))
        return f"{namespace}\\{controller}"
    return controller


def legacy_name(controller: str, action: str) -> str:
    """
    Dotted legacy alias for a controller action

    The Controller suffix is dropped and namespace segments are lowercased
    and joined with dots.

    Example:
        legacy_name('PredictionController', 'view')  # 'prediction.view'
        legacy_name('Admin\\DashboardController', 'index')  # 'admin.dashboard.index'
    """
    segments = qualify_controller(controller).split('\\')
    segments[-1] = Str.finish_without(segments[-1], 'Controller')
    return '.'.join(segment.lower() for segment in segments) + '.' + action


class RouteEntry:
    """
    Immutable named route

    Usage:
        entry = RouteEntry('predictions.view', '/predictions/view/{id}', group='predictions')
        entry.substitute({'id': 123})  # '/predictions/view/123'
    """

    def __init__(
        self,
        name: Optional[str],
        pattern: str,
        group: Optional[str] = None,
        controller: Optional[str] = None,
        action: Optional[str] = None,
        methods: Optional[List[str]] = None,
        middleware: Optional[List[str]] = None,
        namespace: Optional[str] = None,
    ):
        pattern = normalize_pattern(pattern)
        parameter_names = parse_placeholders(pattern)

        object.__setattr__(self, 'name', name)
        object.__setattr__(self, 'pattern', pattern)
        object.__setattr__(self, 'group', group)
        object.__setattr__(self, 'controller', controller)
        object.__setattr__(self, 'action', action)
        object.__setattr__(self, 'methods', tuple(m.upper() for m in (methods or ['GET'])))
        object.__setattr__(self, 'middleware', tuple(middleware or []))
        object.__setattr__(self, 'namespace', namespace)
        object.__setattr__(self, 'parameter_names', parameter_names)

    def __setattr__(self, key: str, value: Any):
        raise AttributeError(f"RouteEntry is immutable (tried to set '{key}')")

    def get_qualified_controller(self) -> Optional[str]:
        """Controller name including its namespace"""
        if not self.controller:
            return None
        return qualify_controller(self.controller, self.namespace)

    def get_action_name(self) -> str:
        """Get the action name (for display)"""
        if self.controller:
            return f"{self.get_qualified_controller()}@{self.action}"
        return self.action or '-'

    def get_legacy_name(self) -> Optional[str]:
        """Dotted controller.action alias, or None without controller and action"""
        if not (self.controller and self.action):
            return None
        return legacy_name(self.get_qualified_controller(), self.action)

    def has_parameters(self) -> bool:
        return len(self.parameter_names) > 0

    def substitute(self, parameters: Optional[Dict[str, Any]] = None) -> str:
        """
        Replace every placeholder with its parameter value

        Values are inserted verbatim via str(); extra parameters are ignored.

        Raises:
            MissingParameterException: If any placeholder has no value
        """
        parameters = parameters or {}
        missing = [name for name in self.parameter_names if name not in parameters]
        if missing:
            raise MissingParameterException.for_route(self.name or self.pattern, missing)

        return PLACEHOLDER_REGEX.sub(lambda match: str(parameters[match.group(1)]), self.pattern)

    def to_dict(self) -> Dict[str, Any]:
        route_dict = {
            'name': self.name,
            'pattern': self.pattern,
            'methods': list(self.methods),
            'action': self.get_action_name(),
            'middleware': list(self.middleware),
            'parameters': list(self.parameter_names),
        }
        if self.group:
            route_dict['group'] = self.group
        return route_dict

    def __eq__(self, other) -> bool:
        if not isinstance(other, RouteEntry):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash((self.name, self.pattern, self.methods, self.get_action_name()))

    def __repr__(self) -> str:
        methods_str = '|'.join(self.methods)
        name_str = f" (name: {self.name})" if self.name else ""
        return f"<RouteEntry [{methods_str}] {self.pattern}{name_str}>"
