"""NPC 집단 관리

에이전트는 이름(AgentId)을 키로 하는 dict에 삽입 순서대로 보관.
대화 세션은 리스트 인덱스가 아닌 AgentId를 들고 다닌다.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence

from src.core.logging import get_logger
from src.core.npc.agent import Clock, CognitionConfig, NPCAgent
from src.core.npc.models import PersonalityProfile, Position

logger = get_logger(__name__)

AgentId = str


@dataclass(frozen=True)
class RosterEntry:
    """초기 배치 데이터 1건"""

    name: str
    personality: PersonalityProfile
    position: Position


class Population:
    """NPC 전체 소유자"""

    def __init__(
        self,
        roster: Sequence[RosterEntry],
        config: Optional[CognitionConfig] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self._config = config or CognitionConfig()
        self._agents: Dict[AgentId, NPCAgent] = {}
        for entry in roster:
            if entry.name in self._agents:
                raise ValueError(f"Duplicate agent name: {entry.name}")
            self._agents[entry.name] = NPCAgent(
                entry.name, entry.personality, entry.position, self._config, clock
            )
        logger.info(f"Population 생성: {len(self._agents)}명 ({', '.join(self._agents)})")

    @classmethod
    def from_agents(
        cls, agents: Sequence[NPCAgent], config: Optional[CognitionConfig] = None
    ) -> "Population":
        """이미 구성된 에이전트로 생성 (저장본 복원용)"""
        population = cls.__new__(cls)
        population._config = config or CognitionConfig()
        population._agents = {}
        for agent in agents:
            if agent.name in population._agents:
                raise ValueError(f"Duplicate agent name: {agent.name}")
            population._agents[agent.name] = agent
        logger.info(f"Population 복원: {len(population)}명 ({', '.join(population._agents)})")
        return population

    @property
    def config(self) -> CognitionConfig:
        return self._config

    def get(self, agent_id: AgentId) -> NPCAgent:
        """Raises:
        KeyError: 존재하지 않는 AgentId (호출 측 버그)
        """
        try:
            return self._agents[agent_id]
        except KeyError:
            raise KeyError(f"Unknown agent: {agent_id}") from None

    def nearest_within(self, position: Position, radius: float) -> Optional[AgentId]:
        """radius 미만 거리 중 가장 가까운 에이전트. 동거리면 먼저 나온 쪽."""
        nearest: Optional[AgentId] = None
        nearest_distance = radius
        for agent_id, agent in self._agents.items():
            distance = agent.position.distance_to(position)
            if distance < nearest_distance:
                nearest_distance = distance
                nearest = agent_id
        return nearest

    def tick(self, dt: float) -> None:
        """전 에이전트 감정 감쇠 (각자 독립)"""
        for agent in self._agents.values():
            agent.tick(dt)

    def ids(self) -> List[AgentId]:
        return list(self._agents)

    def total_memories(self) -> int:
        return sum(agent.memory_count for agent in self._agents.values())

    def __contains__(self, agent_id: object) -> bool:
        return agent_id in self._agents

    def __iter__(self) -> Iterator[NPCAgent]:
        return iter(list(self._agents.values()))

    def __len__(self) -> int:
        return len(self._agents)
