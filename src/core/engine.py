"""
Memory Village Engine
=====================
장면/입력 계층 통합 모듈

플레이어 이동, 근접 판정, 대화 세션 흐름을 관리하고
NPC 인지 엔진(Population)을 호출한다. 그리기는 하지 않는다.
"""

import math
from dataclasses import dataclass
from typing import List, Optional

from src.core.dialogue.models import (
    DEFAULT_PROMPTS,
    GREETING,
    Idle,
    InDialogue,
    SessionState,
)
from src.core.dialogue.session import (
    close_dialogue,
    is_terminal,
    move_selection,
    open_dialogue,
    replace_utterance,
    require_dialogue,
    select_index,
)
from src.core.event_bus import EventBus, VillageEvent
from src.core.event_types import EventTypes
from src.core.logging import get_logger
from src.core.npc.appearance import body_color, emotion_color
from src.core.npc.models import Position
from src.core.population import AgentId, Population

logger = get_logger(__name__)

WORLD_WIDTH = 800.0
WORLD_HEIGHT = 600.0
PLAYER_SPEED = 3.0  # 프레임당 이동 거리
INTERACT_RADIUS = 60.0

EVENT_SOURCE = "village_engine"


@dataclass
class PlayerState:
    """플레이어 상태"""

    position: Position

    @classmethod
    def at_center(cls) -> "PlayerState":
        return cls(Position(WORLD_WIDTH / 2, WORLD_HEIGHT / 2))


class VillageEngine:
    """마을 장면 1개를 구동하는 엔진"""

    def __init__(
        self,
        population: Population,
        event_bus: Optional[EventBus] = None,
        player: Optional[PlayerState] = None,
        interact_radius: float = INTERACT_RADIUS,
        player_speed: float = PLAYER_SPEED,
    ) -> None:
        self.population = population
        self.player = player or PlayerState.at_center()
        self._bus = event_bus
        self._interact_radius = interact_radius
        self._player_speed = player_speed
        self._session: SessionState = Idle()
        self._frame = 0

    @property
    def session(self) -> SessionState:
        return self._session

    @property
    def frame(self) -> int:
        return self._frame

    def replace_population(self, population: Population) -> None:
        """저장본 로드 후 교체. 진행 중인 대화는 닫는다."""
        self.population = population
        self._session = Idle()

    # === 입력 ===

    def move_player(self, dx: float, dy: float) -> Position:
        """방향 벡터를 정규화해서 이동. 대화 중이거나 영벡터면 무시."""
        length = math.hypot(dx, dy)
        if self._session.active or length == 0:
            return self.player.position

        current = self.player.position
        self.player.position = Position(
            current.x + dx / length * self._player_speed,
            current.y + dy / length * self._player_speed,
        )
        return self.player.position

    def interact(self) -> Optional[InDialogue]:
        """근처 NPC에게 말 걸기. 범위 내 NPC가 없거나 이미 대화 중이면 None."""
        if self._session.active:
            return None

        agent_id = self.population.nearest_within(
            self.player.position, self._interact_radius
        )
        if agent_id is None:
            return None

        utterance = self._talk(agent_id, GREETING)
        self._session = open_dialogue(agent_id, utterance, DEFAULT_PROMPTS)
        self._emit(EventTypes.DIALOGUE_STARTED, {"agent_id": agent_id})
        self._end_step()
        logger.info(f"대화 시작: {agent_id}")
        return self._session

    def say(self, agent_id: AgentId, text: str) -> str:
        """대화 세션 없이 특정 NPC에게 직접 발화. 세션 상태는 바꾸지 않는다.

        Raises:
            KeyError: 존재하지 않는 agent_id
        """
        response = self._talk(agent_id, text)
        self._end_step()
        return response

    def select_next(self) -> InDialogue:
        self._session = move_selection(self._session, 1)
        return self._session

    def select_prev(self) -> InDialogue:
        self._session = move_selection(self._session, -1)
        return self._session

    def choose(self, index: Optional[int] = None) -> SessionState:
        """선택지 확정. Goodbye면 Idle, 그 외에는 같은 NPC에게 다시 말 건다.

        Raises:
            DialogueStateError: 대화 중이 아니거나 index 범위 밖
        """
        dialogue = require_dialogue(self._session)
        if index is not None:
            dialogue = select_index(dialogue, index)
        prompt = dialogue.selected_prompt

        if is_terminal(prompt):
            self._session = close_dialogue(dialogue)
            self._emit(EventTypes.DIALOGUE_ENDED, {"agent_id": dialogue.agent_id})
            logger.info(f"대화 종료: {dialogue.agent_id}")
        else:
            utterance = self._talk(dialogue.agent_id, prompt)
            self._session = replace_utterance(dialogue, utterance)

        self._end_step()
        return self._session

    # === 프레임 ===

    def tick(self, dt: float) -> None:
        self.population.tick(dt)
        self._frame += 1
        self._emit(EventTypes.POPULATION_TICKED, {"frame": self._frame, "dt": dt})
        self._end_step()

    # === 조회 ===

    def snapshot(self) -> dict:
        """렌더러/API용 읽기 전용 뷰"""
        agents: List[dict] = []
        for agent in self.population:
            view = agent.snapshot()
            view["body_color"] = body_color(agent.personality)
            view["emotion_color"] = emotion_color(agent.dominant_emotion)
            agents.append(view)

        return {
            "frame": self._frame,
            "player": self.player.position.to_dict(),
            "agents": agents,
            "total_memories": self.population.total_memories(),
            "session": session_view(self._session),
        }

    # === 내부 ===

    def _talk(self, agent_id: AgentId, text: str) -> str:
        agent = self.population.get(agent_id)
        before = agent.memory_count
        response = agent.interact(text)

        self._emit(
            EventTypes.NPC_INTERACTED,
            {
                "agent_id": agent_id,
                "text": text,
                "memory_count": agent.memory_count,
                "relationship": agent.relationship,
            },
        )
        if agent.memory_count <= before:
            self._emit(
                EventTypes.MEMORY_EVICTED,
                {"agent_id": agent_id, "retained": agent.memory_count},
            )
        return response

    def _emit(self, event_type: str, data: dict) -> None:
        if self._bus is None:
            return
        self._bus.emit(VillageEvent(event_type=event_type, data=data, source=EVENT_SOURCE))

    def _end_step(self) -> None:
        if self._bus is not None:
            self._bus.reset_chain()


def session_view(state: SessionState) -> dict:
    if isinstance(state, InDialogue):
        return {
            "state": "in_dialogue",
            "agent_id": state.agent_id,
            "utterance": state.utterance,
            "prompts": list(state.prompts),
            "selected": state.selected,
        }
    return {"state": "idle"}
