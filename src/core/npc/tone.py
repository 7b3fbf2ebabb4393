"""성격 → 대사 구절 + 응답 조립

판정은 결정 리스트: 위에서부터 평가, 첫 일치만 채택.
"""

from typing import Callable, List, Tuple

from src.core.npc.emotion import Emotion
from src.core.npc.models import PersonalityProfile

ProfilePredicate = Callable[[PersonalityProfile], bool]

FALLBACK_CLAUSE = "How's your day going?"

PERSONALITY_CLAUSE_RULES: List[Tuple[ProfilePredicate, str]] = [
    (lambda p: p.extraversion > 0.7, "I love chatting with you!"),  # 사교적
    (lambda p: p.curiosity > 0.8, "Tell me more interesting things!"),  # 탐구적
    (lambda p: p.greed > 0.6, "Got any gold for me?"),  # 거래 지향
]


def select_personality_clause(profile: PersonalityProfile) -> str:
    for predicate, clause in PERSONALITY_CLAUSE_RULES:
        if predicate(profile):
            return clause
    return FALLBACK_CLAUSE


def compose_response(
    emotion: Emotion,
    memory_count: int,
    relationship: float,
    clause: str,
) -> str:
    """NPC 응답 문장 조립. 호출 측이 갱신 후 상태를 넘겨야 한다."""
    return (
        f"I'm {emotion.value}. I remember {memory_count} things about you. "
        f"Our relationship is {relationship:.2f}. {clause}"
    )
