"""FastAPI application entrypoint."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from src.api.health import router as health_router
from src.api.village import router as village_router
from src.config import Settings, cognition_config_from_settings, settings
from src.core.engine import VillageEngine
from src.core.event_bus import EventBus, VillageEvent
from src.core.event_types import EventTypes
from src.core.logging import get_logger, setup_logging
from src.core.population import Population
from src.core.roster import default_roster
from src.db.database import init_db

setup_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)


def _log_dialogue_event(event: VillageEvent) -> None:
    logger.info(f"{event.event_type}: {event.data.get('agent_id')}")


def build_engine(config: Settings, event_bus: EventBus) -> VillageEngine:
    """설정값으로 기본 마을 엔진 조립"""
    population = Population(default_roster(), cognition_config_from_settings(config))
    return VillageEngine(
        population,
        event_bus,
        interact_radius=config.INTERACT_RADIUS,
        player_speed=config.PLAYER_SPEED,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info("Creating database tables...")
    init_db()
    logger.info("Database tables created.")

    logger.info("Initializing village engine...")
    event_bus = EventBus()
    event_bus.subscribe(EventTypes.DIALOGUE_STARTED, _log_dialogue_event)
    event_bus.subscribe(EventTypes.DIALOGUE_ENDED, _log_dialogue_event)
    app.state.event_bus = event_bus
    app.state.engine = build_engine(settings, event_bus)
    logger.info("Village engine initialized.")

    yield

    logger.info("Shutting down...")
    app.state.engine = None


app = FastAPI(title="Memory Village", lifespan=lifespan)

app.include_router(health_router)
app.include_router(village_router)
