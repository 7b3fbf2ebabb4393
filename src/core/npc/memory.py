"""NPC 기억 저장소

중요도 기반 일괄 축출:
- 저장 개수가 MAX_STORED를 넘는 순간 전체를 중요도 내림차순 재정렬
- 상위 RETAIN개만 남기고 나머지 폐기 (LRU 아님)
"""

import math
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from src.core.logging import get_logger

logger = get_logger(__name__)

MAX_STORED = 50  # 축출 트리거
RETAIN = 40  # 축출 후 유지 개수


@dataclass(frozen=True)
class Memory:
    """기억 1건. 저장 후 수정 불가."""

    content: str
    importance: float
    timestamp: float  # 단조 시계 값 (초)

    def to_dict(self) -> dict:
        return {
            "content": self.content,
            "importance": self.importance,
            "timestamp": self.timestamp,
        }


class MemoryStore:
    """삽입 순서 유지, 용량 상한이 있는 기억 로그"""

    def __init__(self, cap: int = MAX_STORED, retain: int = RETAIN) -> None:
        if not 0 < retain <= cap:
            raise ValueError(
                f"Memory retain must satisfy 0 < retain <= cap (cap={cap}, retain={retain})"
            )
        self._cap = cap
        self._retain = retain
        self._memories: List[Memory] = []

    @property
    def cap(self) -> int:
        return self._cap

    @property
    def retain(self) -> int:
        return self._retain

    def record(self, content: str, importance: float, timestamp: float) -> List[Memory]:
        """기억 추가. 상한 초과 시 일괄 축출.

        Args:
            content: 기억 내용 (제약 없음, 빈 문자열 허용)
            importance: 축출 순위용 중요도. NaN이면 0.0으로 저장.
            timestamp: 기록 시각

        Returns:
            이번 호출로 축출된 기억 목록. 축출 없으면 빈 리스트.
        """
        if math.isnan(importance):
            logger.warning(f"NaN importance 기억 → 0.0 처리: {content!r}")
            importance = 0.0

        self._memories.append(Memory(content, importance, timestamp))

        if len(self._memories) <= self._cap:
            return []

        # sorted()는 안정 정렬: 동점은 기존 순서 유지
        ranked = sorted(self._memories, key=lambda m: m.importance, reverse=True)
        self._memories = ranked[: self._retain]
        evicted = ranked[self._retain :]
        logger.debug(
            f"기억 축출: {len(evicted)}건 폐기, {len(self._memories)}건 유지"
        )
        return evicted

    def count(self) -> int:
        return len(self._memories)

    def __len__(self) -> int:
        return len(self._memories)

    def __iter__(self) -> Iterator[Memory]:
        return iter(tuple(self._memories))

    @property
    def memories(self) -> Tuple[Memory, ...]:
        return tuple(self._memories)

    def most_important(self, n: int) -> List[Memory]:
        """중요도 상위 n개 (동점은 저장 순서)"""
        ranked = sorted(self._memories, key=lambda m: m.importance, reverse=True)
        return ranked[: max(n, 0)]

    def recent(self, n: int) -> List[Memory]:
        """timestamp 기준 최근 n개, 최신이 앞"""
        ordered = sorted(self._memories, key=lambda m: m.timestamp, reverse=True)
        return ordered[: max(n, 0)]

    def restore(self, memories: List[Memory]) -> None:
        """저장본 복원. 상한은 복원 후에도 유지된다."""
        self._memories = list(memories)
        if len(self._memories) > self._cap:
            ranked = sorted(self._memories, key=lambda m: m.importance, reverse=True)
            self._memories = ranked[: self._retain]
