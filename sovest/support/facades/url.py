"""
URL Facade
"""
from sovest.support.facades.facade import Facade


class URL(Facade):
    """
    The container's UrlGenerator

    Usage:
        URL.url('predictions.view', {'id': 1})           # '/predictions/view/1'
        URL.absolute('home')                             # 'http://localhost:8000/'
        URL.action('PredictionController', 'trending')   # '/predictions/trending'
    """

    @classmethod
    def get_facade_accessor(cls) -> str:
        return 'url_generator'
