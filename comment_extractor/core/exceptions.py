"""Exceptions raised by the comment extractor collaborators"""


class CommentExtractorError(Exception):
    """Base class for comment extractor errors"""


class FetchError(CommentExtractorError):
    """Raised when a page could not be fetched"""

    def __init__(self, url: str, message: str):
        super().__init__(f"Failed to fetch {url}: {message}")
        self.url = url
