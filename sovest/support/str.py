"""
String Helper Functions
Case conversion and class-name handling for controller names
"""
import re

_WORD_BOUNDARY = re.compile(r'(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])')
_SEPARATORS = re.compile(r'[\s_\-]+')
_NAMESPACE_SEPARATORS = re.compile(r'[\\./]')


class Str:

    @staticmethod
    def snake(value: str, delimiter: str = '_') -> str:
        """
        Convert StudlyCase, camelCase or spaced words to lower-case words joined by delimiter

        Example:
            Str.snake('SoVest')  # 'so_vest'
            Str.snake('predictionVote')  # 'prediction_vote'
            Str.snake('Prediction Vote', '-')  # 'prediction-vote'
        """
        if not value:
            return value
        words = _SEPARATORS.split(_WORD_BOUNDARY.sub(' ', value).strip())
        return delimiter.join(word.lower() for word in words if word)

    @staticmethod
    def kebab(value: str) -> str:
        """
        Example:
            Str.kebab('PredictionVote')  # 'prediction-vote'
        """
        return Str.snake(value, '-')

    @staticmethod
    def class_basename(value: str) -> str:
        """
        Last segment of a namespaced class name

        Example:
            Str.class_basename('App\\\\Controllers\\\\AuthController')  # 'AuthController'
        """
        return _NAMESPACE_SEPARATORS.split(value)[-1]

    @staticmethod
    def finish_without(value: str, suffix: str) -> str:
        """
        Remove a trailing suffix once, unless it is the whole string

        Example:
            Str.finish_without('AuthController', 'Controller')  # 'Auth'
            Str.finish_without('Controller', 'Controller')  # 'Controller'
        """
        if suffix and value.endswith(suffix) and value != suffix:
            return value[:-len(suffix)]
        return value
