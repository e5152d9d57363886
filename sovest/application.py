"""
Application
Service container, provider lifecycle and the Sanic app it serves
"""
from sanic import Sanic
from typing import Any, Callable, Dict, List, Optional
import inspect
import re
import threading

_INVALID_NAME_CHARS = re.compile(r"[^A-Za-z0-9_\-]")


class Application:
    """
    Container in the Laravel style

    Bindings are either singletons (built on first make() and cached) or
    factories (built on every make()). Factories receive the application so
    they can resolve their own dependencies:

        app.singleton('routes', lambda app: RouteDefinitionLoader().load(ROUTES))
        app.singleton('url_generator', lambda app: UrlGenerator(app.make('routes')))
    """

    def __init__(self, base_path: Optional[str] = None, name: Optional[str] = None):
        from sovest.support import Config, Storage

        Storage.initialize(base_path)
        self.base_path = str(Storage.base())

        self.sanic_app = Sanic(name or self.sanic_name(Config.get('app.APP_NAME', 'SoVest')))
        # No sanic-ext; health checks are not part of this app
        self.sanic_app.config.AUTO_EXTEND = False
        self.sanic_app.config.HEALTH = False
        self.sanic_app.config.HEALTH_ENDPOINT = False

        self.providers: List[Any] = []
        self.booted = False
        self.bindings: Dict[str, Dict[str, Any]] = {}
        # Reentrant: building one singleton may make() another
        self._lock = threading.RLock()

    @staticmethod
    def sanic_name(app_name: str) -> str:
        """
        Sanic app name derived from APP_NAME

        Sanic only accepts letters, digits, '_' and '-', not starting with a digit.

        Example:
            Application.sanic_name('SoVest.io')  # 'so_vest_io'
        """
        from sovest.support import Str

        name = _INVALID_NAME_CHARS.sub('_', Str.snake(app_name)) or 'sovest'
        return f"_{name}" if name[0].isdigit() else name

    def singleton(self, key: str, factory_or_instance: Any):
        """
        Bind a shared service

        A function or method is treated as a lazy factory; anything else is
        stored as the instance itself.
        """
        if inspect.isfunction(factory_or_instance) or inspect.ismethod(factory_or_instance):
            self.bindings[key] = {'type': 'singleton', 'factory': factory_or_instance, 'instance': None}
        else:
            self.bindings[key] = {'type': 'singleton', 'factory': None, 'instance': factory_or_instance}

    def bind(self, key: str, factory: Callable[['Application'], Any]):
        """Bind a factory that builds a new object on every make()"""
        self.bindings[key] = {'type': 'factory', 'factory': factory}

    def make(self, key: str) -> Any:
        """
        Resolve a binding

        Raises:
            KeyError: If nothing is bound under key
        """
        try:
            binding = self.bindings[key]
        except KeyError:
            raise KeyError(f"Binding '{key}' not found in container") from None

        if binding['type'] == 'factory':
            return binding['factory'](self)
        return self._shared_instance(binding)

    def _shared_instance(self, binding: Dict[str, Any]) -> Any:
        # Checked again under the lock: concurrent first calls build once and
        # never see a half-built instance
        if binding['instance'] is None:
            with self._lock:
                if binding['instance'] is None:
                    binding['instance'] = binding['factory'](self)
        return binding['instance']

    def has(self, key: str) -> bool:
        return key in self.bindings

    def get_bindings(self) -> Dict[str, Dict[str, Any]]:
        """Binding type per key, and whether each singleton has been built yet"""
        return {
            key: {
                'type': binding['type'],
                'instantiated': binding['instance'] is not None if binding['type'] == 'singleton' else None,
            }
            for key, binding in self.bindings.items()
        }

    def register_provider(self, provider_class):
        provider = provider_class(self)
        provider.register()
        self.providers.append(provider)
        return provider

    def boot(self):
        """Boot registered providers once, in registration order"""
        if self.booted:
            return
        for provider in self.providers:
            provider.boot()
        self.booted = True
