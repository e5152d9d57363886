"""
Framework default values
Every setting in sovest.config falls back to one of these when the environment is silent
"""

# ============================================================================
# APPLICATION DEFAULTS
# ============================================================================

DEFAULT_APP_NAME = 'SoVest'
DEFAULT_APP_ENV = 'local'
DEFAULT_APP_URL = 'http://localhost:8000'

# ============================================================================
# ROUTING DEFAULTS
# ============================================================================

DEFAULT_DEBUG_ROUTES_PREFIX = '/_debug'

# ============================================================================
# LOGGING DEFAULTS
# ============================================================================

DEFAULT_LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_LOG_BACKUP_COUNT = 5
