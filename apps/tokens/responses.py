from rest_framework import status
from rest_framework.response import Response


def insufficient_tokens_response(exc):
    """
    402 response for an InsufficientTokensError.

    ``insufficientTokens`` lets clients send the user to the purchase flow
    instead of showing a generic error.
    """
    return Response({
        'success': False,
        'error': str(exc),
        'insufficientTokens': True,
        'tokens': exc.balance,
    }, status=status.HTTP_402_PAYMENT_REQUIRED)
