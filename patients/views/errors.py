"""
JSON replacements for Django's HTML 404/500 pages.
"""
from django.http import JsonResponse


def not_found(request, exception=None):
    return JsonResponse(
        {'ok': False, 'message': f"Can't find {request.path} on this server!",
         'error': {'code': 'not_found', 'message': f"Can't find {request.path} on this server!"}},
        status=404,
    )


def server_error(request):
    return JsonResponse(
        {'ok': False, 'message': 'Internal server error',
         'error': {'code': 'server_error', 'message': 'Internal server error'}},
        status=500,
    )
