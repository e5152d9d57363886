"""
Centralized Error Handler
Maps exceptions raised in request handlers to JSON error responses
"""
import traceback
from typing import Any, Dict

from sanic import Request
from sanic.exceptions import SanicException
from sanic.response import json

from sovest.exceptions.custom import FrameworkException, MissingParameterException
from sovest.logging import getLogger


class ErrorHandler:
    """
    Response body:
        {"success": false,
         "error": {"type": ..., "message": ..., "code": ..., "missing": [...]},
         "debug": {...}}

    'code' is present for framework exceptions, 'missing' for
    MissingParameterException, 'debug' only when debug is on.
    """

    GENERIC_MESSAGE = "An error occurred while processing your request"

    def __init__(self, debug: bool = False, include_trace: bool = False):
        """
        Args:
            debug: Expose unexpected error messages and request details
            include_trace: Add the stack trace to the body (only honoured with debug)
        """
        self.debug = debug
        self.include_trace = include_trace and debug
        self.logger = getLogger('application')

    async def handle_error(self, request: Request, error: Exception):
        status = self.status_for(error)
        self._log_error(error, request, status)
        return json(self._build_error_response(error, request), status=status)

    @staticmethod
    def status_for(error: Exception) -> int:
        if isinstance(error, (SanicException, FrameworkException)):
            return error.status_code
        return 500

    def _build_error_response(self, error: Exception, request: Request) -> Dict[str, Any]:
        details: Dict[str, Any] = {
            'type': type(error).__name__,
            'message': self._message_for(error),
        }

        if isinstance(error, FrameworkException):
            details['code'] = error.code
        if isinstance(error, MissingParameterException):
            details['missing'] = error.missing
        if self.include_trace:
            details['trace'] = traceback.format_exception(type(error), error, error.__traceback__)

        response: Dict[str, Any] = {'success': False, 'error': details}
        if self.debug:
            response['debug'] = {
                'path': request.path,
                'method': request.method,
                'url': str(request.url),
            }
        return response

    def _message_for(self, error: Exception) -> str:
        if isinstance(error, FrameworkException):
            return error.message
        if isinstance(error, SanicException) or self.debug:
            return str(error)
        return self.GENERIC_MESSAGE

    def _log_error(self, error: Exception, request: Request, status: int):
        context = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            'status_code': status,
            'method': request.method,
            'path': request.path,
        }
        summary = f"{status} {request.method} {request.path}: {type(error).__name__}"

        if status >= 500:
            self.logger.error(summary, extra=context, exc_info=error)
        else:
            self.logger.warning(summary, extra=context)
