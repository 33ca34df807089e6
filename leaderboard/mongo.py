import atexit
import logging
import threading
from typing import Optional

from django.conf import settings
from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.collection import Collection

logger = logging.getLogger(__name__)

__all__ = [
    "get_client",
    "get_collection",
    "close_client",
    "RANKING_SORT",
]

# 점수 내림차순, 같은 점수는 먼저 들어온 기록이 위
RANKING_SORT = [("score", DESCENDING), ("_id", ASCENDING)]

_client: Optional[MongoClient] = None
_indexed = False
_lock = threading.Lock()


def get_client() -> MongoClient:
    """프로세스 전체에서 공유하는 MongoClient 를 반환합니다. 최초 호출 시 한 번만 생성됩니다."""
    global _client
    if _client is None:
        with _lock:
            if _client is None:
                logger.info("Creating MongoDB client (db=%s)", settings.MONGODB_DB_NAME)
                _client = MongoClient(
                    settings.MONGODB_URI,
                    serverSelectionTimeoutMS=settings.MONGODB_TIMEOUT_MS,
                    appname="scoreboard",
                )
    return _client


def get_collection() -> Collection:
    global _indexed
    collection = get_client()[settings.MONGODB_DB_NAME][settings.MONGODB_COLLECTION]
    if not _indexed:
        with _lock:
            if not _indexed:
                collection.create_index(RANKING_SORT, name="ranking")
                _indexed = True
    return collection


def close_client() -> None:
    global _client, _indexed
    with _lock:
        if _client is not None:
            logger.info("Closing MongoDB client")
            _client.close()
            _client = None
            _indexed = False


atexit.register(close_client)
