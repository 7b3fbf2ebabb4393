"""Village API endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session

from src.api.schemas import (
    AgentDetail,
    AgentInfo,
    ChooseRequest,
    ErrorResponse,
    MemoryInfo,
    MemoryOrder,
    MoveRequest,
    PersistenceResponse,
    PositionInfo,
    SayRequest,
    SayResponse,
    SelectRequest,
    SessionInfo,
    TickRequest,
    VillageState,
)
from src.core.dialogue.models import DialogueStateError
from src.core.engine import VillageEngine, session_view
from src.core.event_bus import EventBus
from src.core.logging import get_logger
from src.core.npc.appearance import body_color, emotion_color
from src.core.npc.agent import NPCAgent
from src.core.npc.memory import Memory
from src.db.database import get_db
from src.services.persistence_service import PersistenceService

logger = get_logger(__name__)

router = APIRouter(prefix="/village", tags=["village"])


def get_engine(request: Request) -> VillageEngine:
    """엔진 인스턴스 반환 (의존성 주입)"""
    engine: VillageEngine = request.app.state.engine
    return engine


def get_persistence_service(
    request: Request, db: Session = Depends(get_db)
) -> PersistenceService:
    """PersistenceService 인스턴스 반환 (의존성 주입)"""
    bus: EventBus = request.app.state.event_bus
    return PersistenceService(db, bus)


def _agent_info(agent: NPCAgent) -> AgentInfo:
    return AgentInfo(
        **agent.snapshot(),
        body_color=body_color(agent.personality),
        emotion_color=emotion_color(agent.dominant_emotion),
    )


def _get_agent(engine: VillageEngine, name: str) -> NPCAgent:
    if name not in engine.population:
        raise HTTPException(status_code=404, detail=f"Agent not found: {name}")
    return engine.population.get(name)


def _select_memories(
    agent: NPCAgent, order: MemoryOrder, limit: Optional[int]
) -> List[Memory]:
    n = agent.memory_count if limit is None else limit
    if order == MemoryOrder.RECENT:
        return agent.memory.recent(n)
    if order == MemoryOrder.IMPORTANCE:
        return agent.memory.most_important(n)
    return list(agent.memory.memories[:n])


def _session_info(engine: VillageEngine) -> SessionInfo:
    return SessionInfo(**session_view(engine.session))


@router.get("/state", response_model=VillageState)
def get_state(engine: VillageEngine = Depends(get_engine)) -> VillageState:
    """마을 전체 상태 (렌더러용)"""
    return VillageState(**engine.snapshot())


@router.get("/agents", response_model=list[AgentInfo])
def list_agents(engine: VillageEngine = Depends(get_engine)) -> list[AgentInfo]:
    return [_agent_info(agent) for agent in engine.population]


@router.get(
    "/agents/{name}",
    response_model=AgentDetail,
    responses={404: {"model": ErrorResponse}},
)
def get_agent(
    name: str,
    order: MemoryOrder = Query(MemoryOrder.STORED, description="기억 정렬 기준"),
    limit: Optional[int] = Query(None, ge=1, description="반환할 기억 수"),
    engine: VillageEngine = Depends(get_engine),
) -> AgentDetail:
    """NPC 상세. order=recent|importance로 기억 조회 순서 지정."""
    agent = _get_agent(engine, name)
    info = _agent_info(agent)
    return AgentDetail(
        **info.model_dump(),
        memories=[MemoryInfo(**m.to_dict()) for m in _select_memories(agent, order, limit)],
    )


@router.post(
    "/agents/{name}/say",
    response_model=SayResponse,
    responses={404: {"model": ErrorResponse}},
)
def say_to_agent(
    name: str,
    request: SayRequest,
    engine: VillageEngine = Depends(get_engine),
) -> SayResponse:
    """대화 세션 없이 NPC에게 직접 발화"""
    agent = _get_agent(engine, name)
    response = engine.say(agent.name, request.text)
    return SayResponse(
        agent=agent.name,
        response=response,
        memory_count=agent.memory_count,
        relationship=agent.relationship,
    )


@router.post("/move", response_model=PositionInfo)
def move_player(
    request: MoveRequest, engine: VillageEngine = Depends(get_engine)
) -> PositionInfo:
    position = engine.move_player(request.dx, request.dy)
    return PositionInfo(**position.to_dict())


@router.post("/interact", response_model=SessionInfo)
def interact(engine: VillageEngine = Depends(get_engine)) -> SessionInfo:
    """근처 NPC에게 말 걸기. 범위 내 NPC가 없으면 idle 그대로."""
    engine.interact()
    return _session_info(engine)


@router.post(
    "/dialogue/select",
    response_model=SessionInfo,
    responses={409: {"model": ErrorResponse}},
)
def select_prompt(
    request: SelectRequest, engine: VillageEngine = Depends(get_engine)
) -> SessionInfo:
    try:
        if request.step >= 0:
            for _ in range(request.step):
                engine.select_next()
        else:
            for _ in range(-request.step):
                engine.select_prev()
    except DialogueStateError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _session_info(engine)


@router.post(
    "/dialogue/choose",
    response_model=SessionInfo,
    responses={409: {"model": ErrorResponse}},
)
def choose_prompt(
    request: ChooseRequest, engine: VillageEngine = Depends(get_engine)
) -> SessionInfo:
    try:
        engine.choose(request.index)
    except DialogueStateError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _session_info(engine)


@router.post("/tick", response_model=VillageState)
def tick(request: TickRequest, engine: VillageEngine = Depends(get_engine)) -> VillageState:
    for _ in range(request.frames):
        engine.tick(request.dt)
    return VillageState(**engine.snapshot())


@router.post("/save", response_model=PersistenceResponse)
def save_village(
    engine: VillageEngine = Depends(get_engine),
    service: PersistenceService = Depends(get_persistence_service),
) -> PersistenceResponse:
    count = service.save(engine.population)
    return PersistenceResponse(success=True, agent_count=count, message="saved")


@router.post(
    "/load",
    response_model=PersistenceResponse,
    responses={404: {"model": ErrorResponse}},
)
def load_village(
    engine: VillageEngine = Depends(get_engine),
    service: PersistenceService = Depends(get_persistence_service),
) -> PersistenceResponse:
    if not service.has_snapshot():
        raise HTTPException(status_code=404, detail="No saved village")
    population = service.load(engine.population.config)
    engine.replace_population(population)
    logger.info(f"마을 교체: 에이전트 {len(population)}명")
    return PersistenceResponse(success=True, agent_count=len(population), message="loaded")
