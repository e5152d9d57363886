"""
Framework Support Classes
"""

from sovest.support.storage import Storage
from sovest.support.env_helper import EnvHelper
from sovest.support.config import Config
from sovest.support.str import Str

__all__ = [
    'Storage',
    'EnvHelper',
    'Config',
    'Str',
]
