"""
Extractor configuration

Defaults cover the common hydration payload and comment widget layouts.
Every value can be overridden through constructor kwargs; a few can also be
set from the environment.
"""

import os
import logging
from dataclasses import dataclass
from typing import Tuple, Optional, Mapping

logger = logging.getLogger(__name__)

# Next.js streaming payload wrapper
DEFAULT_PAYLOAD_MARKER = 'self.__next_f.push('
DEFAULT_PAYLOAD_CLOSER = ')'

DEFAULT_MAX_DEPTH = 50

# Most specific first, only the first selector that matches is used
DEFAULT_CONTAINER_SELECTORS = (
    '.comment-item',
    '.comment-card',
    '.comment-list li',
    '.comment',
)

ENV_PREFIX = 'COMMENT_EXTRACTOR_'


@dataclass(frozen=True)
class ExtractorConfig:
    """Tunables for script mining and the HTML fallback"""
    payload_marker: str = DEFAULT_PAYLOAD_MARKER
    payload_closer: str = DEFAULT_PAYLOAD_CLOSER
    max_depth: int = DEFAULT_MAX_DEPTH
    container_selectors: Tuple[str, ...] = DEFAULT_CONTAINER_SELECTORS
    author_selector: str = '.author, .username, .name'
    content_selector: str = '.content, .comment-body, p'
    time_selector: str = 'time'
    avatar_selector: str = 'img, .avatar'
    id_attribute: str = 'data-id'
    parser: str = 'html.parser'

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> 'ExtractorConfig':
        """
        Build a config from COMMENT_EXTRACTOR_* environment variables

        Args:
            environ: Mapping to read from (defaults to os.environ)
            **overrides: Explicit values, these win over the environment

        Returns:
            ExtractorConfig
        """
        environ = os.environ if environ is None else environ
        values = {}

        marker = environ.get(f'{ENV_PREFIX}PAYLOAD_MARKER')
        if marker:
            values['payload_marker'] = marker

        max_depth = environ.get(f'{ENV_PREFIX}MAX_DEPTH')
        if max_depth:
            try:
                values['max_depth'] = int(max_depth)
            except ValueError:
                logger.warning(f"  Ignoring invalid {ENV_PREFIX}MAX_DEPTH: {max_depth!r}")

        parser = environ.get(f'{ENV_PREFIX}PARSER')
        if parser:
            values['parser'] = parser

        values.update(overrides)
        return cls(**values)
