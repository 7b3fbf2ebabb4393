"""NPC Core 도메인 모델

성격 프로필과 위치. DB 무관 순수 데이터 클래스.
"""

import math
from dataclasses import dataclass, fields
from typing import Dict

# 성격 10요인 (선언 순서 = 직렬화 순서)
PERSONALITY_TRAITS = (
    "openness",
    "conscientiousness",
    "extraversion",
    "agreeableness",
    "neuroticism",
    "greed",
    "loyalty",
    "curiosity",
    "humor",
    "romance",
)


@dataclass(frozen=True)
class PersonalityProfile:
    """NPC 성격 10요인

    각 값: 0.0 ~ 1.0 (중립 = 0.5). 생성 후 불변.
    """

    openness: float = 0.5
    conscientiousness: float = 0.5
    extraversion: float = 0.5
    agreeableness: float = 0.5
    neuroticism: float = 0.5
    greed: float = 0.5
    loyalty: float = 0.5
    curiosity: float = 0.5
    humor: float = 0.5
    romance: float = 0.5

    def to_dict(self) -> Dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Dict[str, float]) -> "PersonalityProfile":
        """누락된 요인은 0.5. 모르는 키는 무시."""
        return cls(**{t: float(data.get(t, 0.5)) for t in PERSONALITY_TRAITS})


@dataclass(frozen=True)
class Position:
    """2D 월드 좌표"""

    x: float
    y: float

    def distance_to(self, other: "Position") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y}
