import json
import logging
import redis
from typing import Any, Dict, Optional
from insightx.config import get_settings
from insightx.core.exceptions import (
    CorruptDocumentException,
    DocumentStoreConnectionException,
)
from insightx.repositories.document_store import DocumentStore

logger = logging.getLogger(__name__)


class RedisDocumentStore(DocumentStore):
    """Documents as JSON strings under "{prefix}:{collection}:{doc_id}"."""

    def __init__(self, url: Optional[str] = None, key_prefix: Optional[str] = None):
        settings = get_settings()
        self.key_prefix = key_prefix or settings.REDIS_KEY_PREFIX
        self.client = redis.from_url(
            url or settings.REDIS_URL,
            decode_responses=True,
            socket_connect_timeout=settings.REDIS_CONNECT_TIMEOUT,
        )

    def _key(self, collection: str, doc_id: str) -> str:
        return f"{self.key_prefix}:{collection}:{doc_id}"

    @staticmethod
    def _decode(key: str, data: str) -> Dict[str, Any]:
        try:
            document = json.loads(data)
        except ValueError as e:
            raise CorruptDocumentException(key, str(e)) from e
        if not isinstance(document, dict):
            raise CorruptDocumentException(key, f"expected an object, got {type(document).__name__}")
        return document

    def get(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        """Get document and deserialize from JSON."""
        try:
            data = self.client.get(self._key(collection, doc_id))
        except redis.RedisError as e:
            raise DocumentStoreConnectionException(f"Redis GET failed: {e}") from e
        if not data:
            return None
        return self._decode(self._key(collection, doc_id), data)

    def put(self, collection: str, doc_id: str, document: Dict[str, Any]) -> None:
        """Replace document."""
        try:
            self.client.set(self._key(collection, doc_id), json.dumps(document))
        except redis.RedisError as e:
            raise DocumentStoreConnectionException(f"Redis SET failed: {e}") from e

    def merge(self, collection: str, doc_id: str, partial: Dict[str, Any]) -> None:
        """Read-modify-write under WATCH; redis-py retries on a concurrent write."""
        key = self._key(collection, doc_id)

        def _apply(pipe) -> None:
            current = pipe.get(key)
            document = self._decode(key, current) if current else {}
            document.update(partial)
            pipe.multi()
            pipe.set(key, json.dumps(document))

        try:
            self.client.transaction(_apply, key)
        except redis.RedisError as e:
            raise DocumentStoreConnectionException(f"Redis merge failed: {e}") from e
        logger.debug(f"merge {key} keys={sorted(partial)}")

    def ping(self) -> bool:
        try:
            return bool(self.client.ping())
        except redis.RedisError as e:
            logger.warning(f"Redis unavailable at {self.key_prefix}: {e}")
            return False
