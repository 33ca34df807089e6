from django.urls import get_resolver
from rest_framework.decorators import api_view
from rest_framework.response import Response

from leaderboard import __version__


def get_all_urls(url_patterns, base="", urls=None):
    if urls is None:
        urls = {}

    for pattern in url_patterns:
        if hasattr(pattern, "url_patterns"):
            # URL pattern이 include된 경우
            get_all_urls(pattern.url_patterns, base + str(pattern.pattern), urls)
            continue

        full_path = "/" + base + str(pattern.pattern)
        view = pattern.callback
        # HTTP 메소드 가져오기
        if hasattr(view, "cls"):
            methods = [
                m.upper()
                for m in view.cls.http_method_names
                if m != "options" and hasattr(view.cls, m)
            ]
        else:
            methods = ["GET"]  # 기본값

        for method in methods:
            key = f"{method} {full_path}"
            handler = getattr(view.cls, method.lower()) if hasattr(view, "cls") else view
            urls[key] = (handler.__doc__ or "").strip() or "No description."

    return urls


@api_view(["GET"])
def api_root(request):
    """Service index with every routed endpoint."""
    resolver = get_resolver()
    all_urls = get_all_urls(resolver.url_patterns)

    return Response(
        {
            "version": __version__,
            "title": "Scoreboard API",
            "description": "Top scores leaderboard backed by MongoDB",
            "endpoints": all_urls,
        }
    )
