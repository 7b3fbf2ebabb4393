"""API request/response schemas."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


# === Request Schemas ===


class MemoryOrder(str, Enum):
    """NPC 상세의 기억 정렬 기준"""

    STORED = "stored"
    RECENT = "recent"
    IMPORTANCE = "importance"


class MoveRequest(BaseModel):
    """플레이어 이동 요청 (방향 벡터, 내부에서 정규화)"""

    dx: float = Field(0.0, description="x 방향")
    dy: float = Field(0.0, description="y 방향")


class SayRequest(BaseModel):
    """NPC에게 직접 발화"""

    text: str = Field("", max_length=500, description="발화 내용 (빈 문자열 허용)")


class SelectRequest(BaseModel):
    """선택 커서 이동"""

    step: int = Field(..., description="+1 아래, -1 위")


class ChooseRequest(BaseModel):
    """선택지 확정. index 생략 시 현재 커서 위치."""

    index: Optional[int] = Field(None, ge=0)


class TickRequest(BaseModel):
    """프레임 진행"""

    dt: float = Field(1.0 / 60.0, ge=0.0, description="경과 초")
    frames: int = Field(1, ge=1, le=10_000, description="반복 횟수")


# === Response Schemas ===


class PositionInfo(BaseModel):
    x: float
    y: float


class AgentInfo(BaseModel):
    """NPC 렌더링용 정보"""

    name: str
    position: PositionInfo
    personality: dict[str, float]
    emotion: dict[str, float]
    dominant_emotion: str
    memory_count: int
    relationship: float
    body_color: str
    emotion_color: str


class MemoryInfo(BaseModel):
    content: str
    importance: float
    timestamp: float


class AgentDetail(AgentInfo):
    """NPC 상세 (기억 포함)"""

    memories: list[MemoryInfo] = []


class SessionInfo(BaseModel):
    """대화 세션 상태"""

    state: str  # "idle" | "in_dialogue"
    agent_id: Optional[str] = None
    utterance: Optional[str] = None
    prompts: list[str] = []
    selected: Optional[int] = None


class VillageState(BaseModel):
    """마을 전체 상태"""

    frame: int
    player: PositionInfo
    agents: list[AgentInfo]
    total_memories: int
    session: SessionInfo


class SayResponse(BaseModel):
    agent: str
    response: str
    memory_count: int
    relationship: float


class PersistenceResponse(BaseModel):
    success: bool
    agent_count: int = 0
    message: str = ""


class ErrorResponse(BaseModel):
    """에러 응답"""

    success: bool = False
    error: str
    detail: Optional[str] = None
