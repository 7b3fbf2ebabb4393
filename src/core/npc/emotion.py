"""NPC 감정 상태

6차원 감정 강도 + 지배 감정 판정 + 틱 감쇠.
"""

import math
from dataclasses import dataclass, fields
from enum import Enum
from typing import Dict, List, Tuple


class Emotion(str, Enum):
    """지배 감정 라벨. NEUTRAL은 6차원 바깥의 별도 값."""

    HAPPY = "happy"
    ANGRY = "angry"
    FEARFUL = "fearful"
    SURPRISED = "surprised"
    DISGUSTED = "disgusted"
    SAD = "sad"
    NEUTRAL = "neutral"


# 동점 시 앞쪽이 이긴다
EMOTION_PRECEDENCE: List[Tuple[str, Emotion]] = [
    ("happiness", Emotion.HAPPY),
    ("anger", Emotion.ANGRY),
    ("fear", Emotion.FEARFUL),
    ("surprise", Emotion.SURPRISED),
    ("disgust", Emotion.DISGUSTED),
    ("sadness", Emotion.SAD),
]

# 틱당 배율. surprise/disgust/sadness는 감쇠하지 않음
DEFAULT_DECAY_RATES: Dict[str, float] = {
    "happiness": 0.99,
    "anger": 0.95,
    "fear": 0.97,
}


def _floor(value: float) -> float:
    """NaN/음수 → 0.0"""
    if math.isnan(value) or value < 0.0:
        return 0.0
    return value


@dataclass
class EmotionalState:
    """감정 6차원 (하한 0, 상한 없음)

    초기값: happiness=0.5, 나머지 0.
    """

    happiness: float = 0.5
    anger: float = 0.0
    fear: float = 0.0
    surprise: float = 0.0
    disgust: float = 0.0
    sadness: float = 0.0

    def dominant_emotion(self) -> Emotion:
        """최대 강도 감정. 엄격한 > 비교로 선언 순서 우선, 전부 0이면 NEUTRAL."""
        best_value = 0.0
        best = Emotion.NEUTRAL
        for dimension, emotion in EMOTION_PRECEDENCE:
            value = _floor(getattr(self, dimension))
            if value > best_value:
                best_value = value
                best = emotion
        return best

    def decay(self, rates: Dict[str, float]) -> None:
        """지정된 차원에만 배율 감쇠 적용.

        Raises:
            ValueError: 존재하지 않는 차원 이름
        """
        for dimension, multiplier in rates.items():
            self._check_dimension(dimension)
            setattr(self, dimension, getattr(self, dimension) * multiplier)

    def apply(self, dimension: str, amount: float) -> float:
        """감정 자극 (확장용). 결과는 0 미만으로 내려가지 않는다."""
        self._check_dimension(dimension)
        value = _floor(getattr(self, dimension) + amount)
        setattr(self, dimension, value)
        return value

    def to_dict(self) -> Dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Dict[str, float]) -> "EmotionalState":
        state = cls()
        for f in fields(state):
            if f.name in data:
                setattr(state, f.name, float(data[f.name]))
        return state

    def _check_dimension(self, dimension: str) -> None:
        if dimension not in _DIMENSIONS:
            raise ValueError(f"Unknown emotion dimension: {dimension}")


_DIMENSIONS = frozenset(name for name, _ in EMOTION_PRECEDENCE)
