"""
HTML Fetcher with CloudScraper
Fetches the page a content unit's comments live on
"""

import time
import random
import logging
from typing import Optional, Dict, Any

import cloudscraper
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .exceptions import FetchError

logger = logging.getLogger(__name__)


class HTMLFetcher:
    """Fetches HTML content with anti-blocking headers and retries"""

    USER_AGENTS = [
        'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36',
        'Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36',
        'Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.1 Safari/605.1.15',
        'Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:109.0) Gecko/20100101 Firefox/121.0'
    ]

    def __init__(
        self,
        proxy_config: Optional[Dict[str, str]] = None,
        timeout: int = 30,
        max_retries: int = 3,
        session: Optional[Any] = None
    ):
        """
        Initialize HTML Fetcher

        Args:
            proxy_config: Proxy dict with 'server', 'username', 'password' keys
            timeout: Request timeout in seconds
            max_retries: Maximum attempts per fetch
            session: Pre-built requests-compatible session (skips CloudScraper setup)
        """
        self.proxy_config = proxy_config
        self.timeout = timeout
        self.max_retries = max(1, max_retries)
        self.session = session

        if self.session is None:
            self._create_session()

    def _create_session(self) -> None:
        """Create CloudScraper session"""
        self.session = cloudscraper.create_scraper(
            browser={
                'browser': 'chrome',
                'platform': 'windows',
                'mobile': False
            }
        )

        selected_ua = random.choice(self.USER_AGENTS)
        self.session.headers.update({
            'User-Agent': selected_ua,
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
            'Accept-Language': 'en-US,en;q=0.9',
            'Connection': 'keep-alive',
        })
        logger.debug(f" Using user agent: {selected_ua[:60]}...")

        retry_strategy = Retry(
            total=self.max_retries,
            status_forcelist=[500, 502, 503, 504],
            backoff_factor=1,
            raise_on_status=False
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

        if self.proxy_config and 'server' in self.proxy_config:
            username = self.proxy_config.get('username', '')
            password = self.proxy_config.get('password', '')
            server = self.proxy_config['server'].replace('http://', '').replace('https://', '')

            if username and password:
                proxy_url = f"http://{username}:{password}@{server}"
            else:
                proxy_url = f"http://{server}"

            self.session.proxies.update({
                'http': proxy_url,
                'https': proxy_url
            })
            logger.info(f" Using proxy: {self.proxy_config['server']}")

    def fetch(self, url: str) -> str:
        """
        Fetch HTML text from URL

        Args:
            url: Target URL

        Returns:
            Decoded response body

        Raises:
            FetchError: when every attempt failed or the server kept erroring
        """
        last_error = 'no attempt made'

        for attempt in range(self.max_retries):
            try:
                logger.info(f" Fetching: {url[:80]}..." if len(url) > 80 else f" Fetching: {url}")
                response = self.session.get(url, timeout=self.timeout)
            except Exception as e:
                last_error = str(e)[:100]
                logger.error(f" Fetch failed (attempt {attempt + 1}/{self.max_retries}): {last_error}")
                self._backoff(attempt)
                continue

            if response.status_code == 429:
                last_error = 'rate limited (429)'
                retry_after = self._retry_after(response)
                logger.warning(f"⏳ Rate limited (429). Backing off for {retry_after}s...")
                if attempt < self.max_retries - 1:
                    time.sleep(retry_after)
                continue

            if response.status_code >= 400:
                raise FetchError(url, f"HTTP {response.status_code}")

            logger.info(f" Success: {response.status_code} ({len(response.text)} bytes)")
            return response.text

        raise FetchError(url, f"{last_error} after {self.max_retries} attempts")

    def _backoff(self, attempt: int) -> None:
        if attempt < self.max_retries - 1:
            delay = 2 ** attempt
            logger.info(f"⏳ Retrying in {delay}s...")
            time.sleep(delay)

    @staticmethod
    def _retry_after(response: Any) -> int:
        try:
            return min(int(response.headers.get('Retry-After', 5)), 60)
        except (TypeError, ValueError):
            return 5

    def close(self) -> None:
        """Close the session"""
        if self.session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
