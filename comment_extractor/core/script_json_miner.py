"""
Script JSON Miner - Find comment arrays embedded in <script> payloads

Modern front ends (Next.js 13+ streaming, window.__STATE__ blobs, ...) ship
their data as JSON inside script tags. The miner cuts candidate JSON
documents out of each script block and searches them for an array that
looks like a list of comments.
"""

import json
import logging
from typing import List, Dict, Any, Optional, Iterable, Iterator

from .config import ExtractorConfig
from .models import CommentRecord
from .record_normalizer import RecordNormalizer

logger = logging.getLogger(__name__)


class ScriptJSONMiner:
    """
    Mines script block texts for a comments-shaped JSON array.
    First usable array wins, there is no ranking between candidates.
    """

    COMMENT_KEY = 'comment'
    SHAPE_KEYS = ('content', 'author')

    def __init__(
        self,
        config: Optional[ExtractorConfig] = None,
        normalizer: Optional[RecordNormalizer] = None
    ):
        self.config = config or ExtractorConfig()
        self.normalizer = normalizer or RecordNormalizer()

    def mine(self, scripts: Iterable[str], unit_id: str) -> Optional[List[CommentRecord]]:
        """
        Main entry point: scan script texts in document order

        Args:
            scripts: Script block texts as they appear in the document
            unit_id: Identifier of the commented content unit

        Returns:
            Records from the first candidate that yields any, else None
        """
        for block_index, script in enumerate(scripts):
            for candidate in self.candidates(script):
                data = self._parse_candidate(candidate)
                if data is None:
                    continue

                array = self.find_comments_array(data)
                if array is None:
                    continue

                records = self._normalize_array(array, unit_id)
                if records:
                    logger.info(f" Mined {len(records)} comments from script block #{block_index}")
                    return records

                logger.debug(f"   Script block #{block_index}: comments array yielded no records")

        return None

    def candidates(self, script: str) -> Iterator[str]:
        """
        Yield candidate JSON documents from one script block

        1. The argument of the hydration payload wrapper call
        2. The span from the first '{' to the last '}'
        """
        if not script:
            return

        payload = self._extract_payload(script)
        if payload:
            yield payload

        first_brace = script.find('{')
        last_brace = script.rfind('}')
        if first_brace >= 0 and last_brace > first_brace:
            yield script[first_brace:last_brace + 1]

    def _extract_payload(self, script: str) -> str:
        marker = self.config.payload_marker
        start = script.find(marker)
        if start < 0:
            return ''
        start += len(marker)

        end = script.find(self.config.payload_closer, start)
        if end < 0:
            return ''
        return script[start:end].strip()

    @staticmethod
    def _parse_candidate(candidate: str) -> Optional[Dict[str, Any]]:
        """Parse a candidate, None unless it is a JSON object"""
        try:
            data = json.loads(candidate)
        except (json.JSONDecodeError, RecursionError):
            logger.debug(f"   Skipping malformed candidate ({len(candidate)} chars)")
            return None

        if not isinstance(data, dict):
            return None
        return data

    def find_comments_array(self, data: Dict[str, Any], depth: int = 0) -> Optional[List[Any]]:
        """
        Depth-first search for a comments-like array

        A field matches when its key contains "comment" and holds an array,
        or when it holds an array whose first item has content/author.
        Only object values are descended into.
        """
        if depth >= self.config.max_depth:
            logger.debug(f"   Max search depth {self.config.max_depth} reached")
            return None

        for key, value in data.items():
            if isinstance(value, list):
                if self.COMMENT_KEY in key.lower():
                    return value
                if value and self._looks_like_comment(value[0]):
                    return value
            elif isinstance(value, dict):
                found = self.find_comments_array(value, depth + 1)
                if found is not None:
                    return found

        return None

    def _looks_like_comment(self, item: Any) -> bool:
        return isinstance(item, dict) and any(k in item for k in self.SHAPE_KEYS)

    def _normalize_array(self, array: List[Any], unit_id: str) -> List[CommentRecord]:
        records = []
        for index, element in enumerate(array):
            if not isinstance(element, dict):
                continue
            record = self.normalizer.normalize(element, index, unit_id)
            if record is not None:
                records.append(record)
        return records
