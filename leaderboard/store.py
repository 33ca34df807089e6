import logging
from typing import Any, Optional

from django.conf import settings
from pymongo.collection import Collection

from .mongo import RANKING_SORT

logger = logging.getLogger(__name__)


class LeaderboardStore:
    """
    상위 N개의 기록만 유지하는 리더보드 저장소

    기록을 추가한 뒤에는 N등 기록보다 순위가 낮은 기록을 모두 삭제합니다.
    삭제 기준이 "N등보다 아래" 이므로 동시에 들어온 요청끼리 서로의 상위 기록을
    지우지 않습니다.
    """

    def __init__(self, collection: Collection, size: Optional[int] = None):
        self.collection = collection
        self.size: int = size if size is not None else settings.LEADERBOARD_SIZE

    def top(self, limit: Optional[int] = None) -> list[dict[str, Any]]:
        cursor = (
            self.collection.find()
            .sort(RANKING_SORT)
            .limit(limit if limit is not None else self.size)
        )
        return list(cursor)

    def insert(self, entry: dict[str, Any]):
        # insert_one 이 _id 를 채워넣으므로 복사본을 저장
        result = self.collection.insert_one(dict(entry))
        return result.inserted_id

    def prune(self, top_entries: list[dict[str, Any]]) -> int:
        """
        top_entries 의 마지막 기록보다 순위가 낮은 기록을 삭제합니다.

        Args:
            top_entries: 순위 순으로 정렬된 상위 기록

        Returns:
            삭제된 기록 수
        """
        if len(top_entries) < self.size:
            return 0

        last = top_entries[self.size - 1]
        result = self.collection.delete_many(
            {
                "$or": [
                    {"score": {"$lt": last["score"]}},
                    {"score": last["score"], "_id": {"$gt": last["_id"]}},
                ]
            }
        )
        if result.deleted_count:
            logger.debug("Pruned %d entries below %r", result.deleted_count, last["score"])
        return result.deleted_count

    def submit(self, entry: dict[str, Any]) -> list[dict[str, Any]]:
        self.insert(entry)
        top_entries = self.top()
        self.prune(top_entries)
        logger.info("Score submitted: name=%s score=%r", entry["name"], entry["score"])
        return top_entries
