from django.contrib.auth.models import AnonymousUser
from django.http import HttpResponse
import structlog

from accounts.models import User

logger = structlog.get_logger()

USER_HEADER = "X-User-NAME"


class HeaderUserLoginMiddleware:
    """
    Resolve the API caller from the X-User-NAME header set by the upstream
    gateway. Unknown names are rejected with 401.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.user = AnonymousUser()
        if request.path.startswith("/api"):
            username = request.headers.get(USER_HEADER)
            if username:
                try:
                    request.user = User.objects.get(username=username, is_active=True)
                except User.DoesNotExist:
                    logger.info("header_login_rejected", username=username)
                    return HttpResponse(
                        "User not found or invalid credentials.", status=401
                    )
                logger.debug("header_login", username=username)
        response = self.get_response(request)
        return response
