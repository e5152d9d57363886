"""
App Facade
"""
from sovest.support.facades.facade import Facade


class App(Facade):
    """
    The application container itself

    Example:
        App.make('routes').get_by_name('home')
        App.get_sanic().ctx.url
    """

    @classmethod
    def get_facade_accessor(cls) -> str:
        return 'app'

    @classmethod
    def get_facade_root(cls):
        return cls._require_app()

    @classmethod
    def get_sanic(cls):
        return cls._require_app().sanic_app
