from rest_framework.authentication import BaseAuthentication

from accounts.middleware import USER_HEADER


class HeaderUserAuthentication(BaseAuthentication):
    """Expose the user resolved by HeaderUserLoginMiddleware to DRF views."""

    def authenticate(self, request):
        user = getattr(request._request, "user", None)
        if user is None or not user.is_authenticated:
            return None
        return (user, None)

    def authenticate_header(self, request):
        return USER_HEADER
