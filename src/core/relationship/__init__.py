"""관계 시스템 Core 도메인 패키지"""

from src.core.relationship.tracker import DEFAULT_COUNTERPART, RelationshipTracker

__all__ = [
    "DEFAULT_COUNTERPART",
    "RelationshipTracker",
]
