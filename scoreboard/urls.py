from django.urls import path

from scoreboard.views import api_root
from leaderboard.views import LeaderboardView

urlpatterns = [
    path("", LeaderboardView.as_view(), name="leaderboard"),
    path("api/", api_root, name="api-root"),  # JSON API
    path("api/data", LeaderboardView.as_view(), name="leaderboard-data"),
]
