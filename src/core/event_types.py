"""이벤트 유형 상수"""


class EventTypes:
    """이벤트 유형 문자열 상수"""

    # npc
    NPC_INTERACTED = "npc_interacted"
    MEMORY_EVICTED = "memory_evicted"

    # dialogue
    DIALOGUE_STARTED = "dialogue_started"
    DIALOGUE_ENDED = "dialogue_ended"

    # engine
    POPULATION_TICKED = "population_ticked"

    # persistence
    VILLAGE_SAVED = "village_saved"
    VILLAGE_LOADED = "village_loaded"
