"""
Service Providers
"""
from sovest.providers.logging_service_provider import LoggingServiceProvider
from sovest.providers.routing_service_provider import RoutingServiceProvider
from sovest.providers.http_service_provider import HttpServiceProvider

__all__ = [
    'LoggingServiceProvider',
    'RoutingServiceProvider',
    'HttpServiceProvider',
]
