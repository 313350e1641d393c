"""JWT session tokens for verified users."""

from rest_framework_simplejwt.tokens import RefreshToken


def issue_session_tokens(user) -> dict:
    """Return a refresh/access token pair for the user."""
    refresh = RefreshToken.for_user(user)
    return {
        'refresh': str(refresh),
        'access': str(refresh.access_token),
    }
