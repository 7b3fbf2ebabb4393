"""NPC 에이전트

성격 + 감정 + 기억 + 관계 + 위치를 묶고
interact()/tick() 두 진입점을 제공한다.
"""

import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from src.core.logging import get_logger
from src.core.npc.emotion import DEFAULT_DECAY_RATES, Emotion, EmotionalState
from src.core.npc.memory import MAX_STORED, RETAIN, Memory, MemoryStore
from src.core.npc.models import PersonalityProfile, Position
from src.core.npc.tone import compose_response, select_personality_clause
from src.core.relationship.tracker import DEFAULT_COUNTERPART, RelationshipTracker

logger = get_logger(__name__)

Clock = Callable[[], float]


@dataclass
class CognitionConfig:
    """인지 엔진 조정값 (주입용)"""

    record_importance: float = 0.8
    relationship_increment: float = 0.05
    memory_cap: int = MAX_STORED
    memory_retain: int = RETAIN
    decay_rates: Dict[str, float] = field(
        default_factory=lambda: dict(DEFAULT_DECAY_RATES)
    )
    # False면 프레임당 고정 배율 (dt 무시)
    time_scaled_decay: bool = False
    reference_frame_rate: float = 60.0
    counterpart: str = DEFAULT_COUNTERPART

    def rates_for(self, dt: float) -> Dict[str, float]:
        """이번 틱에 적용할 감쇠 배율"""
        if not self.time_scaled_decay:
            return dict(self.decay_rates)
        frames = dt * self.reference_frame_rate
        return {dim: rate**frames for dim, rate in self.decay_rates.items()}


def monotonic_clock() -> Clock:
    """생성 시점 기준 경과 초를 반환하는 시계"""
    start = time.monotonic()
    return lambda: time.monotonic() - start


class NPCAgent:
    """기억을 가진 NPC 1명"""

    def __init__(
        self,
        name: str,
        personality: PersonalityProfile,
        position: Position,
        config: Optional[CognitionConfig] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self._name = name
        self._config = config or CognitionConfig()
        self._clock = clock or monotonic_clock()
        # 복원된 기억보다 새 기억의 timestamp가 앞서지 않도록 더하는 기준값
        self._time_base = 0.0
        self.personality = personality
        self.position = position
        self.emotion = EmotionalState()
        self.memory = MemoryStore(self._config.memory_cap, self._config.memory_retain)
        self.relationships = RelationshipTracker()

    @property
    def name(self) -> str:
        return self._name

    @property
    def config(self) -> CognitionConfig:
        return self._config

    # === 상호작용 ===

    def interact(self, text: str) -> str:
        """상대 발화 처리 → 응답 문장.

        순서 고정 (응답은 갱신 후 상태 기준):
        1. 기억 기록
        2. 관계 가산
        3. 응답 조립
        감정은 건드리지 않는다 (감쇠만이 감정을 바꾼다).
        """
        self.remember(f"Player said: {text}", self._config.record_importance)
        self.relationships.bump(
            self._config.counterpart, self._config.relationship_increment
        )

        response = compose_response(
            self.dominant_emotion,
            self.memory_count,
            self.relationship,
            select_personality_clause(self.personality),
        )
        logger.debug(f"{self._name} 응답: {response}")
        return response

    def remember(self, content: str, importance: float) -> List[Memory]:
        """현재 시각으로 기억 기록. 축출된 기억 반환."""
        evicted = self.memory.record(content, importance, self.now())
        if evicted:
            logger.info(
                f"{self._name}: 기억 {len(evicted)}건 축출 (현재 {self.memory_count}건)"
            )
        return evicted

    def restore_memories(self, memories: List[Memory]) -> None:
        """저장본 기억 복원. 이후 기록은 복원된 가장 늦은 timestamp 뒤에 온다."""
        self.memory.restore(memories)
        latest = max((m.timestamp for m in memories), default=0.0)
        self._time_base = max(0.0, latest - self._clock())

    def now(self) -> float:
        return self._time_base + self._clock()

    def tick(self, dt: float) -> None:
        self.emotion.decay(self._config.rates_for(dt))

    # === 읽기 전용 접근자 ===

    @property
    def dominant_emotion(self) -> Emotion:
        return self.emotion.dominant_emotion()

    @property
    def memory_count(self) -> int:
        return self.memory.count()

    @property
    def relationship(self) -> float:
        return self.relationships.get(self._config.counterpart)

    def snapshot(self) -> dict:
        return {
            "name": self._name,
            "position": self.position.to_dict(),
            "personality": self.personality.to_dict(),
            "emotion": self.emotion.to_dict(),
            "dominant_emotion": self.dominant_emotion.value,
            "memory_count": self.memory_count,
            "relationship": self.relationship,
        }

    def __repr__(self) -> str:
        return (
            f"NPCAgent(name={self._name!r}, emotion={self.dominant_emotion.value}, "
            f"memories={self.memory_count}, relationship={self.relationship:.2f})"
        )
