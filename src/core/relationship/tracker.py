"""관계 수치 추적

상대 ID → 호감도 스칼라. 기본값 0.0, 상하한 없음, 감쇠 없음.
"""

from typing import Dict, Optional

DEFAULT_COUNTERPART = "player"


class RelationshipTracker:
    """NPC 1명이 보유하는 관계 맵"""

    def __init__(self, initial: Optional[Dict[str, float]] = None) -> None:
        self._scores: Dict[str, float] = dict(initial or {})

    def bump(self, counterpart: str, delta: float) -> float:
        """delta 가산. 항목이 없으면 0.0에서 시작. 갱신 후 값 반환."""
        value = self._scores.get(counterpart, 0.0) + delta
        self._scores[counterpart] = value
        return value

    def get(self, counterpart: str = DEFAULT_COUNTERPART) -> float:
        return self._scores.get(counterpart, 0.0)

    def __contains__(self, counterpart: object) -> bool:
        return counterpart in self._scores

    def __len__(self) -> int:
        return len(self._scores)

    def to_dict(self) -> Dict[str, float]:
        return dict(self._scores)

    @classmethod
    def from_dict(cls, data: Dict[str, float]) -> "RelationshipTracker":
        return cls({k: float(v) for k, v in data.items()})
