"""
Comment Extractor - Main orchestration class

Flow:
1. Parse HTML
2. Mine script payloads for a comments array (priority)
3. Fall back to comment-container elements
4. Anything else (including every failure) is "no comments"
"""

import logging
from typing import List, Optional, Callable, Iterable, Any

from bs4 import BeautifulSoup

from .config import ExtractorConfig
from .exceptions import FetchError
from .html_fallback_extractor import HtmlFallbackExtractor
from .html_fetcher import HTMLFetcher
from .models import CommentRecord
from .script_json_miner import ScriptJSONMiner

logger = logging.getLogger(__name__)

Strategy = Callable[[], Optional[List[CommentRecord]]]


def first_success(strategies: Iterable[Strategy]) -> Optional[List[CommentRecord]]:
    """Run strategies in order, return the first non-empty result"""
    for strategy in strategies:
        result = strategy()
        if result:
            return result
    return None


class CommentExtractor:
    """
    Extracts comments from an arbitrary page.

    Stateless between calls, one instance can serve any number of pages
    and threads.
    """

    def __init__(
        self,
        config: Optional[ExtractorConfig] = None,
        fetcher: Optional[Any] = None
    ):
        """
        Initialize Comment Extractor

        Args:
            config: Extraction tunables (defaults when None)
            fetcher: Object with fetch(url) -> str, used by fetch_comments
        """
        self.config = config or ExtractorConfig()
        self.fetcher = fetcher
        self.script_miner = ScriptJSONMiner(self.config)
        self.html_extractor = HtmlFallbackExtractor(self.config)

    def extract(self, html: Optional[str], unit_id: str) -> List[CommentRecord]:
        """
        Extract comments from page HTML

        Args:
            html: Decoded page markup
            unit_id: Identifier of the commented content unit (seeds fallback ids)

        Returns:
            Ordered comment records, empty when nothing was found
        """
        if not html:
            return []

        try:
            soup = BeautifulSoup(html, self.config.parser)
            scripts = [script.string or '' for script in soup.find_all('script')]

            records = first_success([
                lambda: self.script_miner.mine(scripts, unit_id),
                lambda: self.html_extractor.extract(soup, unit_id),
            ])
        except Exception as e:
            logger.warning(f" Comment extraction failed for {unit_id}: {str(e)[:100]}")
            return []

        if not records:
            logger.info(f" No comments found for {unit_id}")
            return []

        return records

    def fetch_comments(self, url: str, unit_id: str) -> List[CommentRecord]:
        """
        Fetch a page and extract its comments

        A fetch failure is logged and yields an empty list.
        """
        if self.fetcher is not None:
            html = self._fetch(self.fetcher, url)
        else:
            # per-call session, the extractor itself stays immutable
            try:
                fetcher = HTMLFetcher()
            except Exception as e:
                logger.warning(f" Could not create fetcher: {str(e)[:100]}")
                return []
            with fetcher:
                html = self._fetch(fetcher, url)

        if html is None:
            return []
        return self.extract(html, unit_id)

    @staticmethod
    def _fetch(fetcher: Any, url: str) -> Optional[str]:
        try:
            return fetcher.fetch(url)
        except FetchError as e:
            logger.warning(f" {e}")
            return None
        except Exception as e:
            logger.warning(f" Fetch failed for {url}: {str(e)[:100]}")
            return None

    def close(self) -> None:
        """Close an injected fetcher"""
        if self.fetcher is not None and hasattr(self.fetcher, 'close'):
            self.fetcher.close()


def extract_comments(
    html: Optional[str],
    unit_id: str,
    config: Optional[ExtractorConfig] = None
) -> List[CommentRecord]:
    """Convenience wrapper around CommentExtractor.extract"""
    return CommentExtractor(config).extract(html, unit_id)
