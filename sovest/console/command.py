"""
Base Command Class
Console commands run against a freshly booted application
"""
from abc import ABC, abstractmethod
from typing import Any, Optional

TRUTHY_OPTIONS = ('true', '1', 'yes', 'on')


class Command(ABC):

    # Command name (e.g., "route:list")
    name: str = ""

    description: str = ""

    # Shown by 'sovest help'; falls back to the name
    signature: Optional[str] = None

    def __init__(self):
        if not self.signature:
            self.signature = self.name
        self._app = None

    @abstractmethod
    async def handle(self, *args, **kwargs):
        """
        Execute the command

        Returns:
            int: Exit code (0 for success, non-zero for error)
        """
        pass

    @property
    def app(self):
        """Application booted from the current working directory, created on first use"""
        if self._app is None:
            from sovest.bootstrap import create_app
            self._app = create_app()
        return self._app

    def url_generator(self):
        return self.app.make('url_generator')

    @staticmethod
    def flag(value: Any) -> bool:
        """Read a --flag or --flag=value option as a boolean"""
        if isinstance(value, str):
            return value.lower() in TRUTHY_OPTIONS
        return bool(value)

    # Output helpers
    def info(self, message: str):
        print(f"ℹ {message}")

    def success(self, message: str):
        print(f"✅ {message}")

    def error(self, message: str):
        print(f"❌ {message}")

    def line(self, message: str = ""):
        print(message)
