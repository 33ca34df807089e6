import json
import logging

from adrf.views import APIView
from asgiref.sync import sync_to_async
from django.http import HttpRequest, HttpResponse
from rest_framework import status
from rest_framework.response import Response

from . import mongo
from .exceptions import ScoreValidationError
from .serializers import ScoreEntrySerializer
from .store import LeaderboardStore

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def parse_entry(data) -> dict:
    # 프론트엔드가 JSON 문자열로 한 번 더 감싸서 보내는 경우가 있음
    if isinstance(data, str):
        data = json.loads(data)

    if not isinstance(data, dict):
        raise ScoreValidationError()
    if not data.get("name") or not is_score(data.get("score")):
        raise ScoreValidationError()
    return data


def is_score(value) -> bool:
    # MongoDB 는 타입별로 정렬하므로 숫자가 아닌 점수는 정리 기준과 비교되지 않음
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def get_store() -> LeaderboardStore:
    return LeaderboardStore(mongo.get_collection())


class LeaderboardView(APIView):
    # head 는 get 으로 연결되지 않도록 제외
    http_method_names = ["get", "post", "options"]

    @property
    def default_response_headers(self):
        headers = {"Allow": "GET, POST"}
        headers.update(CORS_HEADERS)
        return headers

    async def get(self, request: HttpRequest):
        """Top scores, highest first."""
        get_top = sync_to_async(lambda: get_store().top())
        top_entries = await get_top()
        return Response(
            ScoreEntrySerializer(top_entries, many=True).data,
            status=status.HTTP_200_OK,
        )

    async def post(self, request: HttpRequest):
        """Add a score and keep only the top scores."""
        entry = parse_entry(request.data)
        submit = sync_to_async(lambda: get_store().submit(entry))
        top_entries = await submit()
        return Response(
            ScoreEntrySerializer(top_entries, many=True).data,
            status=status.HTTP_201_CREATED,
        )

    async def options(self, request: HttpRequest, *args, **kwargs):
        # pre-flight 요청은 본문 없이 허용
        return Response(status=status.HTTP_200_OK)

    async def http_method_not_allowed(self, request: HttpRequest, *args, **kwargs):
        return HttpResponse(
            f"Method {request.method} Not Allowed",
            status=status.HTTP_405_METHOD_NOT_ALLOWED,
            content_type="text/plain",
        )
