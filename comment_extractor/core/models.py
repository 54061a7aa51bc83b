"""
Comment data model
"""

from dataclasses import dataclass, asdict
from typing import Optional, Dict, Any


@dataclass(frozen=True)
class CommentRecord:
    """
    Normalized comment entry produced by one extraction call.

    timestamp is epoch milliseconds, 0 when unknown.
    """
    id: int
    author: Optional[str]
    content: str
    timestamp: int = 0
    avatar_url: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict for JSON / CSV output"""
        return asdict(self)
