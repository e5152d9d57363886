"""
Exceptions Package
Centralized error handling and reporting
"""
from sovest.exceptions.custom import (
    FrameworkException,
    ConfigurationException,
    RoutingException,
    RouteNotFoundException,
    MissingParameterException,
)

__all__ = [
    'FrameworkException',
    'ConfigurationException',
    'RoutingException',
    'RouteNotFoundException',
    'MissingParameterException',
]
