"""
Facade base
Static-style access to services bound in the application container
"""
from typing import Any, Optional


class FacadeMeta(type):
    """Forwards unknown class attributes to the service behind the facade"""

    def __getattr__(cls, name: str) -> Any:
        return getattr(cls.get_facade_root(), name)


class Facade(metaclass=FacadeMeta):
    """
    Subclasses name a container binding; attribute access on the class is
    resolved against that binding at call time, so the facade always sees the
    application most recently passed to set_app().

    Example:
        class URL(Facade):
            @classmethod
            def get_facade_accessor(cls) -> str:
                return 'url_generator'

        URL.url('predictions.view', {'id': 1})  # '/predictions/view/1'
    """

    # Shared by every facade subclass
    _app: Optional[Any] = None

    @classmethod
    def get_facade_accessor(cls) -> str:
        raise NotImplementedError(f"Facade {cls.__name__} does not implement get_facade_accessor()")

    @classmethod
    def get_facade_root(cls) -> Any:
        """
        Raises:
            RuntimeError: If no application has been set
        """
        return cls._require_app().make(cls.get_facade_accessor())

    @classmethod
    def _require_app(cls):
        app = Facade._app
        if app is None:
            raise RuntimeError(
                f"Facade {cls.__name__} has no application; "
                "sovest.bootstrap.create_app() sets it."
            )
        return app

    @classmethod
    def get_app(cls):
        return Facade._app

    @classmethod
    def set_app(cls, app):
        """Attach the application (None detaches it)"""
        Facade._app = app
