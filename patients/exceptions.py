import logging

from rest_framework.views import exception_handler as drf_exception_handler
from rest_framework.response import Response

logger = logging.getLogger(__name__)


def _message(detail) -> str:
    """Flatten a DRF error detail into one human readable line."""
    if isinstance(detail, dict):
        for key, value in detail.items():
            text = _message(value)
            return text if key in ('detail', 'non_field_errors') else f'{key}: {text}'
        return ''
    if isinstance(detail, (list, tuple)):
        return _message(detail[0]) if detail else ''
    return str(detail)


def api_exception_handler(exc, context):
    resp = drf_exception_handler(exc, context)
    if resp is None:
        logger.error("unhandled API error: %s", exc, exc_info=exc)
        return Response(
            {'ok': False, 'message': 'Internal server error',
             'error': {'code': 'server_error', 'message': str(exc)}},
            status=500,
        )
    # normalize response
    if isinstance(resp.data, dict):
        detail = resp.data.get('detail') or resp.data
    else:
        detail = resp.data
    code = getattr(exc, 'default_code', 'api_error')
    resp.data = {'ok': False, 'message': _message(detail), 'error': {'code': code, 'message': detail}}
    return resp
