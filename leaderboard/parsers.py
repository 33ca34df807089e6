from django.conf import settings
from rest_framework.exceptions import ParseError
from rest_framework.parsers import BaseParser


class PlainTextParser(BaseParser):
    """
    Content-Type 없이 fetch 로 보낸 JSON 문자열(text/plain)을 그대로 문자열로 반환합니다.

    JSON 해석은 뷰에서 합니다.
    """

    media_type = "text/plain"

    def parse(self, stream, media_type=None, parser_context=None):
        parser_context = parser_context or {}
        encoding = parser_context.get("encoding", settings.DEFAULT_CHARSET)
        try:
            return stream.read().decode(encoding)
        except UnicodeDecodeError as exc:
            raise ParseError(f"Plain text parse error - {exc}")
