import logging

from django.db import DatabaseError
from django.http import JsonResponse
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


@api_view(['GET'])
@permission_classes([AllowAny])
def health_check(request):
    """Liveness probe."""
    return Response({'success': True, 'status': 'ok'})


def api_exception_handler(exc, context):
    """
    Wrap DRF error responses in the {success, error} envelope.

    Storage failures are reported as a generic failure with 503 instead of
    leaking as an unhandled 500.
    """
    response = exception_handler(exc, context)

    if response is not None:
        detail = response.data
        if isinstance(detail, dict) and 'detail' in detail:
            error = str(detail['detail'])
        else:
            error = 'Invalid request'
        body = {'success': False, 'error': error}
        if isinstance(detail, dict) and 'detail' not in detail:
            body['errors'] = detail
        elif isinstance(detail, list):
            body['errors'] = detail
        response.data = body
        return response

    if isinstance(exc, DatabaseError):
        logger.exception("Storage failure in %s", context.get('view').__class__.__name__)
        return Response(
            {'success': False, 'error': 'Service temporarily unavailable'},
            status=status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    return None


def error_404(request, exception):
    """Custom 404 handler."""
    return JsonResponse({
        'success': False,
        'error': 'Not found',
        'status': 404
    }, status=404)


def error_500(request):
    """Custom 500 handler."""
    return JsonResponse({
        'success': False,
        'error': 'Internal server error',
        'status': 500
    }, status=500)
