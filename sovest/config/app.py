"""
Application Configuration
Values come from the environment (.env) with framework defaults as fallback
"""
from sovest.support import EnvHelper
from sovest.defaults import DEFAULT_APP_NAME, DEFAULT_APP_ENV, DEFAULT_APP_URL, DEFAULT_DEBUG_ROUTES_PREFIX

APP_NAME = EnvHelper.get('APP_NAME', DEFAULT_APP_NAME)
APP_ENV = EnvHelper.get('APP_ENV', DEFAULT_APP_ENV)
APP_DEBUG = EnvHelper.get_bool('APP_DEBUG', False)
# Include the formatted traceback in error responses; only honoured with APP_DEBUG
APP_DEBUG_TRACE = EnvHelper.get_bool('APP_DEBUG_TRACE', False)

# Scheme + host used for absolute URLs, e.g. https://sovest.example.com
APP_URL = EnvHelper.get('APP_URL', DEFAULT_APP_URL)

DEBUG_ROUTES_PREFIX = EnvHelper.get('DEBUG_ROUTES_PREFIX', DEFAULT_DEBUG_ROUTES_PREFIX)

ALLOWED_LOGGING_HANDLERS = {
    'application': {
        'name': 'application',
        'file_name': 'application',
        'filter_sensitive': True,
    },
    'routing': {
        'name': 'sovest.routing',
        'file_name': 'routing',
        'filter_sensitive': True,
    },
}
