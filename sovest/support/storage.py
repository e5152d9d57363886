"""
Storage - project path resolution
"""

import os
from pathlib import Path
from typing import Optional, Union


class Storage:
    """
    Resolves paths relative to the project directory

    Layout:
        <base>/.env                  environment overrides
        <base>/storage/logs/*.log    rotating log files

    Usage:
        Storage.initialize('/srv/sovest')
        Storage.logs('routing.log')  # /srv/sovest/storage/logs/routing.log
    """

    _base_path: Optional[Path] = None

    @classmethod
    def initialize(cls, base_path: Union[str, Path, None] = None):
        """Set the project directory; the working directory when omitted"""
        cls._base_path = Path(base_path if base_path is not None else os.getcwd()).resolve()

    @classmethod
    def base(cls, *paths: str) -> Path:
        if cls._base_path is None:
            cls.initialize()
        return cls._base_path.joinpath(*(p.lstrip('/') for p in paths))

    @classmethod
    def storage(cls, *paths: str) -> Path:
        return cls.base('storage', *paths)

    @classmethod
    def logs(cls, *paths: str) -> Path:
        return cls.storage('logs', *paths)

    @staticmethod
    def ensure_directory(path: Union[str, Path]) -> Path:
        """Create directory (and parents) if missing"""
        path = Path(path)
        path.mkdir(parents=True, exist_ok=True)
        return path
