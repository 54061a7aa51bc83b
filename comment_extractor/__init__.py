"""
Comment Extractor
Heuristic extraction of community comments from arbitrary web pages
"""

__version__ = "1.0.0"

from .core.extractor import CommentExtractor, extract_comments
from .core.models import CommentRecord

__all__ = ["CommentExtractor", "CommentRecord", "extract_comments"]
