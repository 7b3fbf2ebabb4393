"""Persistence Service — Population 스냅샷 저장/복원

Core에는 저장 개념이 없다. 이 Service가 Core 객체 ↔ ORM 변환을 담당하고
결과를 EventBus로 알린다.
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session

from src.core.event_bus import EventBus, VillageEvent
from src.core.event_types import EventTypes
from src.core.logging import get_logger
from src.core.npc.agent import Clock, CognitionConfig, NPCAgent
from src.core.npc.emotion import EmotionalState
from src.core.npc.memory import Memory
from src.core.npc.models import PersonalityProfile, Position
from src.core.population import Population
from src.core.relationship.tracker import RelationshipTracker
from src.db.models import AgentModel, MemoryModel

logger = get_logger(__name__)


class PersistenceService:
    """마을 상태 저장소 (스냅샷 1개)"""

    def __init__(self, db_session: Session, event_bus: Optional[EventBus] = None) -> None:
        self._db = db_session
        self._bus = event_bus

    # ── 저장 ─────────────────────────────────────────────────

    def save(self, population: Population) -> int:
        """기존 스냅샷을 지우고 현재 상태로 교체. 저장한 에이전트 수 반환."""
        saved_at = datetime.utcnow()
        try:
            for row in self._db.query(AgentModel).all():
                self._db.delete(row)
            self._db.flush()

            for seq, agent in enumerate(population):
                self._db.add(self._agent_to_orm(agent, seq, saved_at))
            self._db.commit()
        except Exception:
            self._db.rollback()
            logger.exception("마을 저장 실패")
            raise

        count = len(population)
        logger.info(f"마을 저장 완료: 에이전트 {count}명, 기억 {population.total_memories()}건")
        self._emit(EventTypes.VILLAGE_SAVED, {"agent_count": count})
        return count

    # ── 복원 ─────────────────────────────────────────────────

    def load(
        self,
        config: Optional[CognitionConfig] = None,
        clock: Optional[Clock] = None,
    ) -> Optional[Population]:
        """저장된 스냅샷 복원. 저장본이 없으면 None."""
        rows = self._db.query(AgentModel).order_by(AgentModel.seq).all()
        if not rows:
            logger.info("마을 저장본 없음")
            return None

        config = config or CognitionConfig()
        agents = [self._agent_from_orm(row, config, clock) for row in rows]
        population = Population.from_agents(agents, config)

        logger.info(f"마을 복원 완료: 에이전트 {len(population)}명")
        self._emit(EventTypes.VILLAGE_LOADED, {"agent_count": len(population)})
        return population

    def has_snapshot(self) -> bool:
        return self._db.query(AgentModel).first() is not None

    # ── 변환 ─────────────────────────────────────────────────

    @staticmethod
    def _agent_to_orm(agent: NPCAgent, seq: int, saved_at: datetime) -> AgentModel:
        model = AgentModel(
            name=agent.name,
            seq=seq,
            x=agent.position.x,
            y=agent.position.y,
            personality=agent.personality.to_dict(),
            emotion=agent.emotion.to_dict(),
            relationships=agent.relationships.to_dict(),
            saved_at=saved_at,
        )
        model.memories = [
            MemoryModel(
                seq=i,
                content=memory.content,
                importance=memory.importance,
                timestamp=memory.timestamp,
            )
            for i, memory in enumerate(agent.memory)
        ]
        return model

    @staticmethod
    def _agent_from_orm(
        row: AgentModel,
        config: CognitionConfig,
        clock: Optional[Clock],
    ) -> NPCAgent:
        agent = NPCAgent(
            row.name,
            PersonalityProfile.from_dict(row.personality),
            Position(row.x, row.y),
            config,
            clock,
        )
        agent.emotion = EmotionalState.from_dict(row.emotion)
        agent.relationships = RelationshipTracker.from_dict(row.relationships or {})
        memories: List[Memory] = [
            Memory(m.content, m.importance, m.timestamp) for m in row.memories
        ]
        agent.restore_memories(memories)
        return agent

    def _emit(self, event_type: str, data: dict) -> None:
        if self._bus is None:
            return
        self._bus.emit(
            VillageEvent(event_type=event_type, data=data, source="persistence_service")
        )
        self._bus.reset_chain()
