"""
Global exception handler for consistent API error responses.
Follows DRF convention and returns uniform structure:
{ "message": str, "detail": str, "code": str, "errors": dict (optional) }
"""
import logging

from django.core.exceptions import PermissionDenied
from django.http import Http404
from rest_framework import exceptions as drf_exceptions
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.exceptions import (
    ForbiddenError,
    NotFoundError,
    UnprocessableEntity,
    ValidationError,
)

logger = logging.getLogger(__name__)

DOMAIN_STATUS = {
    NotFoundError: (status.HTTP_404_NOT_FOUND, 'not_found'),
    ValidationError: (status.HTTP_400_BAD_REQUEST, 'validation_error'),
    UnprocessableEntity: (status.HTTP_422_UNPROCESSABLE_ENTITY, 'unprocessable_entity'),
    ForbiddenError: (status.HTTP_403_FORBIDDEN, 'permission_denied'),
}


def _body(message, code, errors=None):
    data = {'message': message, 'detail': message, 'code': code}
    if errors:
        data['errors'] = errors
    return data


def _domain_response(exc):
    for exc_class, (http_status, code) in DOMAIN_STATUS.items():
        if isinstance(exc, exc_class):
            return Response(
                _body(exc.message, code, getattr(exc, 'errors', None)),
                status=http_status,
            )
    return None


def custom_exception_handler(exc, context):
    """
    Map domain errors and DRF errors to one envelope.
    Anything unrecognised becomes a 500 with no internal detail.
    """
    response = _domain_response(exc)
    if response is not None:
        return response

    if isinstance(exc, drf_exceptions.ValidationError):
        errors = exc.detail if isinstance(exc.detail, dict) else {'non_field_errors': exc.detail}
        return Response(
            _body('Validation failed', 'validation_error', _flatten_errors(errors)),
            status=status.HTTP_400_BAD_REQUEST,
        )

    response = exception_handler(exc, context)
    if response is not None:
        message = _get_detail(exc)
        response.data = _body(message, _get_code(exc))
        return response

    if isinstance(exc, PermissionDenied):
        return Response(
            _body(str(exc) or 'Permission denied', 'permission_denied'),
            status=status.HTTP_403_FORBIDDEN,
        )
    if isinstance(exc, Http404):
        return Response(_body('Not found', 'not_found'), status=status.HTTP_404_NOT_FOUND)

    request = context.get('request') if context else None
    logger.exception(
        'Unhandled exception for %s %s',
        getattr(request, 'method', '?'),
        getattr(request, 'path', 'unknown'),
    )
    return Response(
        _body('An unexpected error occurred', 'internal_error'),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _flatten_errors(errors):
    """DRF ErrorDetail lists -> plain {field: [str]}."""
    out = {}
    for field, value in errors.items():
        if isinstance(value, dict):
            for sub, sub_value in _flatten_errors(value).items():
                out[f'{field}.{sub}'] = sub_value
        elif isinstance(value, (list, tuple)):
            out[field] = [str(v) for v in value]
        else:
            out[field] = [str(value)]
    return out


def _get_detail(exc):
    if hasattr(exc, 'detail'):
        d = exc.detail
        if isinstance(d, list):
            return str(d[0]) if d else 'Error'
        if isinstance(d, dict):
            return str(d.get('detail', d))
        return str(d)
    return str(exc)


def _get_code(exc):
    codes = {
        'AuthenticationFailed': 'invalid_credentials',
        'NotAuthenticated': 'not_authenticated',
        'InvalidToken': 'invalid_token',
        'NotFound': 'not_found',
        'PermissionDenied': 'permission_denied',
        'MethodNotAllowed': 'method_not_allowed',
        'ParseError': 'parse_error',
    }
    return codes.get(type(exc).__name__, 'error')
