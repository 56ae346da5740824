# taskflow/exceptions.py
"""
Error contract shared by every API endpoint.

All failures leave the API as ``{"error": "<message>"}`` with a non-success
status. Validation failures additionally carry the per-field messages under
``"fields"`` so the caller can point at the offending input.
"""
import logging

from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = 'Internal server error'


class Conflict(APIException):
    """A unique attribute collides or a delete is restricted by dependent rows."""
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'The request conflicts with existing data.'
    default_code = 'conflict'


def _first_message(detail):
    if isinstance(detail, dict):
        for value in detail.values():
            return _first_message(value)
        return ''
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else ''
    return str(detail)


def _validation_body(detail):
    if isinstance(detail, dict):
        fields = sorted(key for key in detail if key != 'non_field_errors')
        if fields:
            return {'error': 'Invalid input: ' + ', '.join(fields), 'fields': detail}
    return {'error': _first_message(detail) or 'Invalid input', 'fields': detail}


def api_exception_handler(exc, context):
    """
    DRF ``EXCEPTION_HANDLER`` that reshapes errors into the ``{"error": ...}`` body.

    Recoverable errors (validation, permission, not found, conflict) are
    reported verbatim. Anything DRF does not know how to render is an internal
    failure: it is logged with its traceback and answered with a generic 500.
    """
    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.error(
            "Unhandled error in %s: %s",
            view.__class__.__name__ if view is not None else 'unknown view',
            exc,
            exc_info=exc,
        )
        return Response({'error': INTERNAL_ERROR_MESSAGE}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(exc, ValidationError):
        response.data = _validation_body(response.data)
    else:
        response.data = {'error': _first_message(response.data)}
    return response
