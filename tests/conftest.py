import pytest

from comment_extractor.core.config import ExtractorConfig
from comment_extractor.core.extractor import CommentExtractor


@pytest.fixture
def extractor():
    return CommentExtractor(ExtractorConfig())


@pytest.fixture
def script_page():
    def _build(*scripts, body=""):
        tags = "".join(f"<script>{s}</script>" for s in scripts)
        return f"<html><head>{tags}</head><body>{body}</body></html>"
    return _build
