"""Application configuration loaded from environment variables and .env file."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.npc.agent import CognitionConfig


class Settings(BaseSettings):
    """Application settings.

    Values are loaded from environment variables first,
    then from a .env file in the project root as fallback.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    DATABASE_URL: str = "sqlite:///./village.db"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # NPC cognition
    RECORD_IMPORTANCE: float = 0.8
    RELATIONSHIP_INCREMENT: float = 0.05
    MEMORY_CAP: int = 50
    MEMORY_RETAIN: int = 40
    DECAY_HAPPINESS: float = 0.99
    DECAY_ANGER: float = 0.95
    DECAY_FEAR: float = 0.97
    TIME_SCALED_DECAY: bool = False
    REFERENCE_FRAME_RATE: float = 60.0

    # Scene
    INTERACT_RADIUS: float = 60.0
    PLAYER_SPEED: float = 3.0


def cognition_config_from_settings(config: Settings) -> CognitionConfig:
    """Build the core cognition config from application settings."""
    return CognitionConfig(
        record_importance=config.RECORD_IMPORTANCE,
        relationship_increment=config.RELATIONSHIP_INCREMENT,
        memory_cap=config.MEMORY_CAP,
        memory_retain=config.MEMORY_RETAIN,
        decay_rates={
            "happiness": config.DECAY_HAPPINESS,
            "anger": config.DECAY_ANGER,
            "fear": config.DECAY_FEAR,
        },
        time_scaled_decay=config.TIME_SCALED_DECAY,
        reference_frame_rate=config.REFERENCE_FRAME_RATE,
    )


settings = Settings()
