"""
Deterministic fallback ids for comments without an identifier
"""

import hashlib


def generate_uid(seed: str) -> int:
    """
    Derive a stable non-negative id from a seed string.

    Uses the first 32 bits of the MD5 digest, so the same seed maps to the
    same id across calls and process restarts.
    """
    digest = hashlib.md5(seed.encode('utf-8')).hexdigest()[:8]
    return int(digest, 16)
