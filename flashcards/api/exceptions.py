from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler
import structlog

from ..exceptions import CardNotFound, DeckNotFound, SchedulingError

logger = structlog.get_logger()


def api_exception_handler(exc, context):
    """DRF exception handler that turns domain errors into JSON responses."""
    view = context.get("view")
    view_name = type(view).__name__ if view is not None else None

    if isinstance(exc, (CardNotFound, DeckNotFound)):
        logger.info("resource_not_found", view=view_name, error=str(exc))
        return Response({"error": str(exc)}, status=status.HTTP_404_NOT_FOUND)

    if isinstance(exc, SchedulingError):
        logger.warning("scheduling_error", view=view_name, error=str(exc))
        return Response({"error": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

    return exception_handler(exc, context)
