"""대화 세션 전이 함수

전부 순수 함수: 이전 상태를 받아 새 상태를 반환.
Idle → (근접 + 상호작용) → InDialogue → (일반 선택지) → InDialogue
                                      → (Goodbye) → Idle
"""

from dataclasses import replace
from typing import Sequence

from src.core.dialogue.models import (
    DEFAULT_PROMPTS,
    GOODBYE_PROMPT,
    DialogueStateError,
    Idle,
    InDialogue,
    SessionState,
)


def open_dialogue(
    agent_id: str,
    utterance: str,
    prompts: Sequence[str] = DEFAULT_PROMPTS,
) -> InDialogue:
    return InDialogue(agent_id=agent_id, utterance=utterance, prompts=tuple(prompts))


def require_dialogue(state: SessionState) -> InDialogue:
    if not isinstance(state, InDialogue):
        raise DialogueStateError("No active dialogue")
    return state


def move_selection(state: SessionState, step: int) -> InDialogue:
    """선택 커서 이동. 양 끝에서 멈춘다 (순환 없음)."""
    dialogue = require_dialogue(state)
    selected = max(0, min(len(dialogue.prompts) - 1, dialogue.selected + step))
    return replace(dialogue, selected=selected)


def select_index(state: SessionState, index: int) -> InDialogue:
    dialogue = require_dialogue(state)
    if not 0 <= index < len(dialogue.prompts):
        raise DialogueStateError(
            f"Choice {index} out of range (0..{len(dialogue.prompts) - 1})"
        )
    return replace(dialogue, selected=index)


def is_terminal(prompt: str) -> bool:
    return prompt == GOODBYE_PROMPT


def replace_utterance(state: SessionState, utterance: str) -> InDialogue:
    """응답 교체. 선택지와 커서는 유지."""
    return replace(require_dialogue(state), utterance=utterance)


def close_dialogue(state: SessionState) -> Idle:
    require_dialogue(state)
    return Idle()
