"""렌더링용 색상 힌트 (읽기 전용)

실제 그리기는 표현 계층 담당. 여기서는 색상 이름만 반환.
"""

from typing import Dict

from src.core.npc.emotion import Emotion
from src.core.npc.models import PersonalityProfile

DEFAULT_BODY_COLOR = "blue"

EMOTION_COLORS: Dict[Emotion, str] = {
    Emotion.HAPPY: "gold",
    Emotion.ANGRY: "red",
    Emotion.FEARFUL: "darkgray",
    Emotion.SAD: "darkblue",
}


def body_color(profile: PersonalityProfile) -> str:
    """외향 > 친화 > 신경성 순 결정 리스트"""
    if profile.extraversion > 0.7:
        return "yellow"
    if profile.agreeableness > 0.7:
        return "green"
    if profile.neuroticism > 0.7:
        return "purple"
    return DEFAULT_BODY_COLOR


def emotion_color(emotion: Emotion) -> str:
    return EMOTION_COLORS.get(emotion, "white")
