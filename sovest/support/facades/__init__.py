"""
Facades Package
Laravel-style facades for static access to services
"""
from sovest.support.facades.facade import Facade
from sovest.support.facades.app import App
from sovest.support.facades.url import URL

__all__ = [
    'Facade',
    'App',
    'URL',
]
