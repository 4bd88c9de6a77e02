import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler, set_rollback

logger = logging.getLogger(__name__)


def exception_handler(exc, context):
    """
    Renders every error as {"error": <message>, "status": <code>}.

    Domain errors and DRF's own errors keep their status code; anything else
    is a store or programming fault and becomes an opaque 500.
    """
    response = drf_exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        logger.error(f"Unhandled error in {type(view).__name__}: {exc}", exc_info=exc)
        set_rollback()
        return Response(
            {"error": "Internal server error", "status": status.HTTP_500_INTERNAL_SERVER_ERROR},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(response.data, dict) and "detail" in response.data:
        response.data = {"error": str(response.data["detail"]), "status": response.status_code}

    return response
