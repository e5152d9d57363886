"""
Custom Exception Classes
Framework-specific exceptions with HTTP status codes
"""
from typing import Optional, Iterable


class FrameworkException(Exception):
    """Base exception for all framework exceptions"""
    status_code = 500
    message = "An error occurred"
    code = "FRAMEWORK_ERROR"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.__class__.message
        self.status_code = status_code or self.__class__.status_code
        super().__init__(self.message)


class ConfigurationException(FrameworkException):
    """
    Configuration error exception

    Raised at startup when route definitions or settings are invalid

    Example:
        raise ConfigurationException("Duplicate route name: home")
    """
    status_code = 500
    message = "Invalid configuration"
    code = "CONFIGURATION_ERROR"


class RoutingException(FrameworkException):
    """
    Routing error exception

    Raised when a URL cannot be generated because of a caller mistake

    Example:
        raise RoutingException("Route name must be a non-empty string")
    """
    status_code = 400
    message = "Unable to generate URL"
    code = "ROUTING_ERROR"


class RouteNotFoundException(RoutingException):
    """
    Route not found exception

    Raised when a name matches neither a named route nor a legacy alias

    Example:
        raise RouteNotFoundException.for_name('predictions.missing')
    """
    status_code = 404
    message = "Route not found"
    code = "ROUTE_NOT_FOUND"

    def __init__(self, message: Optional[str] = None, name: Optional[str] = None):
        super().__init__(message)
        self.name = name

    @classmethod
    def for_name(cls, name: str) -> 'RouteNotFoundException':
        return cls(f"Route [{name}] not defined", name=name)


class MissingParameterException(RoutingException):
    """
    Missing route parameter exception

    Raised when a placeholder in the route pattern has no supplied value

    Example:
        raise MissingParameterException.for_route('predictions.view', ['id'])
    """
    status_code = 422
    message = "Missing required route parameter"
    code = "MISSING_PARAMETER"

    def __init__(
        self,
        message: Optional[str] = None,
        name: Optional[str] = None,
        missing: Optional[Iterable[str]] = None
    ):
        super().__init__(message)
        self.name = name
        self.missing = list(missing or [])

    @classmethod
    def for_route(cls, name: str, missing: Iterable[str]) -> 'MissingParameterException':
        missing = list(missing)
        return cls(
            f"Missing required parameter(s) for route [{name}]: {', '.join(missing)}",
            name=name,
            missing=missing,
        )
