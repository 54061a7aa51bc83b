"""
Record Normalizer - Map heterogeneous comment JSON onto CommentRecord

Sites name the same comment fields differently (author / username / name,
content / body, ...). The normalizer resolves each field through a fixed
precedence chain and drops elements without content.
"""

import json
import logging
from typing import Dict, Any, Optional, Tuple

from .coercion import coerce_int64
from .id_assigner import generate_uid
from .models import CommentRecord

logger = logging.getLogger(__name__)


class RecordNormalizer:
    """Normalizes one JSON comment element into a CommentRecord"""

    ID_FIELDS = ('id', 'comment_id')
    AUTHOR_FIELDS = ('author', 'username', 'name')
    CONTENT_FIELDS = ('content', 'body')
    TIMESTAMP_FIELDS = ('created_at', 'timestamp')

    def normalize(
        self,
        element: Dict[str, Any],
        index: int,
        unit_id: str
    ) -> Optional[CommentRecord]:
        """
        Build a record from a JSON object

        Args:
            element: Parsed JSON object for a single comment
            index: 0-based position in the source array (seeds the fallback id)
            unit_id: Identifier of the commented content unit

        Returns:
            CommentRecord, or None when the element has no content
        """
        content = self._as_text(self._first(element, self.CONTENT_FIELDS)) or ''
        if not content:
            logger.debug(f"   Dropping comment #{index}: empty content")
            return None

        return CommentRecord(
            id=self._resolve_id(element, index, unit_id),
            author=self._resolve_author(element),
            content=content,
            timestamp=coerce_int64(self._first(element, self.TIMESTAMP_FIELDS)),
            avatar_url=self._resolve_avatar(element),
        )

    def _resolve_id(self, element: Dict[str, Any], index: int, unit_id: str) -> int:
        for key in self.ID_FIELDS:
            if element.get(key) is not None:
                return coerce_int64(element[key])
        return generate_uid(f"{unit_id}:comment:{index}")

    def _resolve_author(self, element: Dict[str, Any]) -> Optional[str]:
        author = self._first(element, self.AUTHOR_FIELDS)
        if author is None:
            author = self._user_field(element, 'name')
        return self._as_text(author)

    def _resolve_avatar(self, element: Dict[str, Any]) -> Optional[str]:
        avatar = element.get('avatar')
        if avatar is None:
            avatar = self._user_field(element, 'avatar')
        return self._as_text(avatar)

    @staticmethod
    def _user_field(element: Dict[str, Any], key: str) -> Any:
        user = element.get('user')
        if isinstance(user, dict):
            return user.get(key)
        return None

    @staticmethod
    def _first(element: Dict[str, Any], keys: Tuple[str, ...]) -> Any:
        """Value of the first key present with a non-null value"""
        for key in keys:
            value = element.get(key)
            if value is not None:
                return value
        return None

    @staticmethod
    def _as_text(value: Any) -> Optional[str]:
        if value is None:
            return None
        if isinstance(value, str):
            return value
        # numbers, booleans and nested structures keep their JSON spelling
        return json.dumps(value, separators=(',', ':'), ensure_ascii=False)
