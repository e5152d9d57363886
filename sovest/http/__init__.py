"""
HTTP Module
URL generation and HTTP-facing utilities
"""
from sovest.http.url import UrlGenerator

__all__ = [
    'UrlGenerator',
]
