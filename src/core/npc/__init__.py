"""NPC Core 도메인 패키지

공개 API:
- 도메인 모델: PersonalityProfile, Position
- 감정: Emotion, EmotionalState, EMOTION_PRECEDENCE, DEFAULT_DECAY_RATES
- 기억: Memory, MemoryStore, MAX_STORED, RETAIN
- 응답: PERSONALITY_CLAUSE_RULES, select_personality_clause, compose_response
- 외형: body_color, emotion_color
- 에이전트: NPCAgent, CognitionConfig
"""

from src.core.npc.models import PERSONALITY_TRAITS, PersonalityProfile, Position
from src.core.npc.emotion import (
    DEFAULT_DECAY_RATES,
    EMOTION_PRECEDENCE,
    Emotion,
    EmotionalState,
)
from src.core.npc.memory import MAX_STORED, RETAIN, Memory, MemoryStore
from src.core.npc.tone import (
    FALLBACK_CLAUSE,
    PERSONALITY_CLAUSE_RULES,
    compose_response,
    select_personality_clause,
)
from src.core.npc.appearance import body_color, emotion_color
from src.core.npc.agent import CognitionConfig, NPCAgent

__all__ = [
    # models
    "PERSONALITY_TRAITS",
    "PersonalityProfile",
    "Position",
    # emotion
    "DEFAULT_DECAY_RATES",
    "EMOTION_PRECEDENCE",
    "Emotion",
    "EmotionalState",
    # memory
    "MAX_STORED",
    "RETAIN",
    "Memory",
    "MemoryStore",
    # tone
    "FALLBACK_CLAUSE",
    "PERSONALITY_CLAUSE_RULES",
    "compose_response",
    "select_personality_clause",
    # appearance
    "body_color",
    "emotion_color",
    # agent
    "CognitionConfig",
    "NPCAgent",
]
