"""
EnvHelper - environment access backed by the project's .env file
"""

import os
import threading
from pathlib import Path
from typing import Any, Optional, Union

from dotenv import load_dotenv

TRUTHY_VALUES = ('true', '1', 'yes', 'on')


class EnvHelper:
    """
    Reads environment variables, loading <base>/.env on first access

    Variables already present in the process environment take precedence
    over the file unless load(override=True) is used.

    Usage:
        EnvHelper.get('APP_URL', 'http://localhost:8000')
        EnvHelper.get_bool('APP_DEBUG')
    """

    _lock = threading.Lock()
    _env_path: Optional[Path] = None
    _loaded: bool = False

    @classmethod
    def load(cls, env_path: Union[str, Path, None] = None, override: bool = False) -> bool:
        """
        Load a .env file into os.environ

        Returns:
            bool: False when the file does not exist
        """
        with cls._lock:
            if env_path:
                cls._env_path = Path(env_path)
            elif cls._env_path is None:
                from sovest.support.storage import Storage
                cls._env_path = Storage.base('.env')

            cls._loaded = True

            if not cls._env_path.exists():
                return False
            load_dotenv(cls._env_path, override=override)
            return True

    @classmethod
    def get(cls, key: str, default: Any = None) -> Optional[str]:
        if not cls._loaded:
            cls.load()
        return os.getenv(key, default)

    @classmethod
    def get_bool(cls, key: str, default: bool = False) -> bool:
        value = cls.get(key)
        if value is None:
            return default
        return value.strip().lower() in TRUTHY_VALUES

    @classmethod
    def get_int(cls, key: str, default: int = 0) -> int:
        value = cls.get(key)
        try:
            return int(value) if value is not None else default
        except ValueError:
            return default

    @classmethod
    def reset(cls):
        """Forget the loaded file so the next read loads again"""
        with cls._lock:
            cls._env_path = None
            cls._loaded = False
