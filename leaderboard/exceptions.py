import logging

from rest_framework import status
from rest_framework.exceptions import APIException, ParseError
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)

__all__ = [
    "ScoreValidationError",
    "exception_handler",
]


class ScoreValidationError(APIException):
    """
    name 이 비어 있거나 score 가 없는 요청

    score 가 null 이거나 숫자가 아닌 경우도 없는 것으로 봅니다.
    """

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Name and score are required"
    default_code = "invalid"


def exception_handler(exc, context):
    """모든 에러 응답을 {"error": 메시지} 형태로 반환합니다."""
    if isinstance(exc, APIException) and not isinstance(exc, ParseError):
        response = drf_exception_handler(exc, context)
        if response is not None:
            response.data = {"error": str(exc.detail)}
            return response

    view = context.get("view")
    logger.exception("API Error in %s", type(view).__name__ if view else "unknown view")
    return Response(
        {"error": str(exc)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR
    )
