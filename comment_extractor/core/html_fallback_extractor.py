"""
HTML Fallback Extractor - Build comments straight from the DOM
Used when no script payload carried a comments array
"""

import logging
from datetime import datetime, timezone, timedelta
from typing import List, Optional

from bs4 import BeautifulSoup, Tag
from dateutil.parser import isoparse

from .coercion import parse_int64
from .config import ExtractorConfig
from .id_assigner import generate_uid
from .models import CommentRecord

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class HtmlFallbackExtractor:
    """
    Extracts comments from comment-container elements.

    The container selectors are tried in order and only the first one that
    matches anything is used.
    """

    def __init__(self, config: Optional[ExtractorConfig] = None):
        self.config = config or ExtractorConfig()

    def extract(self, soup: BeautifulSoup, unit_id: str) -> Optional[List[CommentRecord]]:
        """
        Extract one record per matched container

        Args:
            soup: Parsed document
            unit_id: Identifier of the commented content unit

        Returns:
            Records in document order, or None when no selector matches
        """
        nodes = self.find_containers(soup)
        if not nodes:
            return None

        return [self._build_record(node, index, unit_id) for index, node in enumerate(nodes)]

    def find_containers(self, soup: BeautifulSoup) -> List[Tag]:
        for selector in self.config.container_selectors:
            nodes = soup.select(selector)
            if nodes:
                logger.info(f" Found {len(nodes)} comment containers with '{selector}'")
                return nodes
        logger.debug("   No comment container selector matched")
        return []

    def _build_record(self, node: Tag, index: int, unit_id: str) -> CommentRecord:
        record_id = parse_int64(node.get(self.config.id_attribute))
        if record_id is None:
            record_id = generate_uid(f"{unit_id}:htmlcomment:{index}")

        author_node = node.select_one(self.config.author_selector)
        author = normalize_text(author_node) if author_node is not None else None

        content_node = node.select_one(self.config.content_selector)
        if content_node is not None:
            content = content_node.decode_contents().strip()
        else:
            content = normalize_text(node)

        time_node = node.select_one(self.config.time_selector)
        timestamp = parse_timestamp(time_node.get('datetime')) if time_node is not None else 0

        avatar_node = node.select_one(self.config.avatar_selector)
        avatar_url = avatar_node.get('src') if avatar_node is not None else None

        return CommentRecord(
            id=record_id,
            author=author,
            content=content,
            timestamp=timestamp,
            avatar_url=avatar_url or None,
        )


def normalize_text(node: Tag) -> str:
    """Element text with runs of whitespace collapsed"""
    return ' '.join(node.get_text().split())


def parse_timestamp(value: Optional[str]) -> int:
    """
    Convert an ISO-8601 instant to epoch milliseconds

    The value must carry a 'Z' designator or a UTC offset. Anything that
    does not parse gives 0.
    """
    if not value or not isinstance(value, str):
        return 0

    try:
        parsed = isoparse(value.strip())
    except (ValueError, OverflowError):
        logger.debug(f"   Unparseable datetime attribute: {value!r}")
        return 0

    if parsed.tzinfo is None:
        logger.debug(f"   Datetime without offset ignored: {value!r}")
        return 0

    return (parsed - EPOCH) // timedelta(milliseconds=1)
