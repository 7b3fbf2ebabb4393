"""대화 세션 Core 도메인 패키지

공개 API:
- 상태: Idle, InDialogue, SessionState, DialogueStateError
- 상수: DEFAULT_PROMPTS, GOODBYE_PROMPT, GREETING
- 전이: open_dialogue, move_selection, select_index, replace_utterance, close_dialogue
"""

from src.core.dialogue.models import (
    DEFAULT_PROMPTS,
    GOODBYE_PROMPT,
    GREETING,
    DialogueStateError,
    Idle,
    InDialogue,
    SessionState,
)
from src.core.dialogue.session import (
    close_dialogue,
    is_terminal,
    move_selection,
    open_dialogue,
    replace_utterance,
    require_dialogue,
    select_index,
)

__all__ = [
    "DEFAULT_PROMPTS",
    "GOODBYE_PROMPT",
    "GREETING",
    "DialogueStateError",
    "Idle",
    "InDialogue",
    "SessionState",
    "close_dialogue",
    "is_terminal",
    "move_selection",
    "open_dialogue",
    "replace_utterance",
    "require_dialogue",
    "select_index",
]
