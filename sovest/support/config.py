"""
Config Manager
Dot-notation access to the modules in sovest.config
"""

import importlib
import threading
from types import ModuleType
from typing import Any, Dict, Optional

_MISSING = object()


class Config:
    """
    Keys are '<module>.<NAME>[.<nested key>...]' and match case-insensitively.
    Module attributes and dict keys can be mixed along the path.

    Usage:
        Config.get('app.APP_URL')                                   # 'http://localhost:8000'
        Config.get('app.allowed_logging_handlers.routing.file_name')  # 'routing'
        Config.get('routes.ROUTES', [])

        Config.set('app.APP_URL', 'https://sovest.example.com')  # process-local override

    Modules:
        sovest/config/
        ├── app.py       application settings read from the environment
        └── routes.py    the SoVest route table
    """

    CONFIG_PACKAGE = 'sovest.config'

    _lock = threading.Lock()
    _loaded: Dict[str, Optional[ModuleType]] = {}
    _runtime_overrides: Dict[str, Any] = {}

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """
        Get a configuration value, checking runtime overrides first

        Example:
            Config.get('app.app_debug', False)  # same as 'app.APP_DEBUG'
        """
        key = key.lower()
        if key in cls._runtime_overrides:
            return cls._runtime_overrides[key]

        module_name, *path = key.split('.')
        value: Any = cls.all(module_name)
        if value is None:
            return default

        for part in path:
            value = cls._child(value, part)
            if value is _MISSING:
                return default
        return value

    @staticmethod
    def _child(value: Any, part: str) -> Any:
        """Case-insensitive step into a dict key or module/object attribute"""
        if isinstance(value, dict):
            names = value.keys()
            getter = value.__getitem__
        elif hasattr(value, '__dict__'):
            names = dir(value)
            getter = lambda name: getattr(value, name)
        else:
            return _MISSING

        for name in names:
            if str(name).lower() == part:
                return getter(name)
        return _MISSING

    @classmethod
    def all(cls, module_name: str) -> Optional[ModuleType]:
        """
        The whole config module, or None if it does not exist

        Example:
            Config.all('routes').ROUTES
        """
        if module_name not in cls._loaded:
            with cls._lock:
                if module_name not in cls._loaded:
                    try:
                        cls._loaded[module_name] = importlib.import_module(f'{cls.CONFIG_PACKAGE}.{module_name}')
                    except ModuleNotFoundError:
                        cls._loaded[module_name] = None
        return cls._loaded[module_name]

    @classmethod
    def set(cls, key: str, value: Any):
        """Override a value for this process (not persisted)"""
        cls._runtime_overrides[key.lower()] = value

    @classmethod
    def has(cls, key: str) -> bool:
        return cls.get(key) is not None

    @classmethod
    def reload(cls, module_name: Optional[str] = None):
        """
        Re-import config module(s), picking up environment changes

        Args:
            module_name: Module to reload, or None for every loaded module
        """
        with cls._lock:
            for name in [module_name] if module_name else list(cls._loaded):
                module = cls._loaded.pop(name, None)
                if module is not None:
                    cls._loaded[name] = importlib.reload(module)

    @classmethod
    def clear_overrides(cls):
        """Drop every value set with Config.set()"""
        cls._runtime_overrides.clear()
