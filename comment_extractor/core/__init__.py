"""Core extraction modules"""

from .config import ExtractorConfig
from .exceptions import CommentExtractorError, FetchError
from .extractor import CommentExtractor, extract_comments, first_success
from .html_fallback_extractor import HtmlFallbackExtractor
from .html_fetcher import HTMLFetcher
from .id_assigner import generate_uid
from .models import CommentRecord
from .record_normalizer import RecordNormalizer
from .script_json_miner import ScriptJSONMiner

__all__ = [
    "CommentExtractor",
    "CommentExtractorError",
    "CommentRecord",
    "ExtractorConfig",
    "FetchError",
    "HTMLFetcher",
    "HtmlFallbackExtractor",
    "RecordNormalizer",
    "ScriptJSONMiner",
    "extract_comments",
    "first_success",
    "generate_uid",
]
