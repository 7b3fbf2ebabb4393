"""대화 세션 상태 (DB 무관)

Idle | InDialogue 태그 변형. InDialogue는 생성 시 선택 인덱스 범위를 검증하므로
범위를 벗어난 선택 상태는 존재할 수 없다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

GOODBYE_PROMPT = "Goodbye."

DEFAULT_PROMPTS: Tuple[str, ...] = (
    "How are you today?",
    "Tell me about your memories.",
    "What do you think of me?",
    GOODBYE_PROMPT,
)

# 근접 상호작용 시 첫 인사
GREETING = "Hello!"


class DialogueStateError(RuntimeError):
    """대화 세션 불변식 위반 (호출 측 프로그래밍 오류)"""


@dataclass(frozen=True)
class Idle:
    """대화 없음"""

    @property
    def active(self) -> bool:
        return False


@dataclass(frozen=True)
class InDialogue:
    """대화 중. agent_id는 Population 키."""

    agent_id: str
    utterance: str
    prompts: Tuple[str, ...]
    selected: int = 0

    def __post_init__(self) -> None:
        if not self.prompts:
            raise DialogueStateError("Dialogue requires at least one prompt")
        if not 0 <= self.selected < len(self.prompts):
            raise DialogueStateError(
                f"Selected index {self.selected} out of range (0..{len(self.prompts) - 1})"
            )

    @property
    def active(self) -> bool:
        return True

    @property
    def selected_prompt(self) -> str:
        return self.prompts[self.selected]


SessionState = Union[Idle, InDialogue]
