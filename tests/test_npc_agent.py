"""NPCAgent 상호작용/틱 테스트"""

import pytest

from src.core.npc.agent import CognitionConfig, NPCAgent
from src.core.npc.emotion import Emotion
from src.core.npc.memory import Memory
from src.core.npc.models import PersonalityProfile, Position


def _agent(clock, config=None, **traits) -> NPCAgent:
    return NPCAgent("Tester", PersonalityProfile(**traits), Position(0.0, 0.0), config, clock)


class TestInteract:
    def test_first_interaction_scenario(self, clock):
        """extraversion=0.9 → happy, 1건, 0.05, 사교 구절"""
        agent = _agent(clock, extraversion=0.9, curiosity=0.2, greed=0.1)
        response = agent.interact("Hello!")

        assert agent.memory_count == 1
        assert agent.relationship == pytest.approx(0.05)
        assert "happy" in response
        assert "1" in response
        assert "0.05" in response
        assert "I love chatting with you!" in response

    def test_records_player_said_content(self, clock):
        agent = _agent(clock)
        agent.interact("How are you today?")
        mem = agent.memory.memories[0]
        assert mem.content == "Player said: How are you today?"
        assert mem.importance == 0.8
        assert mem.timestamp == 0.0

    def test_timestamps_from_clock(self, clock):
        agent = _agent(clock)
        agent.interact("a")
        agent.interact("b")
        assert [m.timestamp for m in agent.memory] == [0.0, 1.0]

    def test_empty_input(self, clock):
        agent = _agent(clock)
        response = agent.interact("")
        assert response
        assert agent.memory_count == 1
        assert agent.memory.memories[0].content == "Player said: "

    def test_count_increases_by_one(self, clock):
        agent = _agent(clock)
        for n in range(1, 6):
            agent.interact("hi")
            assert agent.memory_count == n

    def test_response_reports_post_update_state(self, clock):
        agent = _agent(clock)
        agent.interact("one")
        response = agent.interact("two")
        assert "I remember 2 things" in response
        assert "Our relationship is 0.10." in response

    def test_response_reports_post_eviction_count(self, clock):
        agent = _agent(clock)
        responses = [agent.interact(f"line {i}") for i in range(51)]
        assert "I remember 50 things" in responses[49]
        assert "I remember 40 things" in responses[50]
        assert agent.memory_count == 40

    def test_relationship_accumulates(self, clock):
        agent = _agent(clock)
        for _ in range(20):
            agent.interact("hey")
        assert agent.relationship == pytest.approx(1.0)
        # 응답은 가산 이후 값을 보여준다
        assert "Our relationship is 1.05." in agent.interact("hey")

    def test_interact_does_not_touch_emotion(self, clock):
        agent = _agent(clock)
        before = agent.emotion.to_dict()
        agent.interact("you smell")
        assert agent.emotion.to_dict() == before

    def test_config_overrides(self, clock):
        config = CognitionConfig(record_importance=0.3, relationship_increment=0.2)
        agent = _agent(clock, config)
        agent.interact("x")
        assert agent.memory.memories[0].importance == 0.3
        assert agent.relationship == pytest.approx(0.2)

    def test_custom_counterpart(self, clock):
        agent = _agent(clock, CognitionConfig(counterpart="hero"))
        agent.interact("x")
        assert agent.relationships.get("hero") == pytest.approx(0.05)
        assert agent.relationships.get("player") == 0.0


class TestTick:
    def test_tick_decays_default_rates(self, clock):
        agent = _agent(clock)
        agent.emotion.anger = 1.0
        agent.tick(1 / 60)
        assert agent.emotion.happiness == pytest.approx(0.5 * 0.99)
        assert agent.emotion.anger == pytest.approx(0.95)

    def test_tick_ignores_dt_by_default(self, clock):
        """프레임당 고정 배율: dt가 달라도 결과 동일"""
        slow = _agent(clock)
        fast = _agent(clock)
        slow.tick(1.0)
        fast.tick(0.001)
        assert slow.emotion.happiness == fast.emotion.happiness

    def test_time_scaled_decay(self, clock):
        config = CognitionConfig(time_scaled_decay=True, reference_frame_rate=60.0)
        agent = _agent(clock, config)
        agent.tick(1.0)
        assert agent.emotion.happiness == pytest.approx(0.5 * 0.99**60)

    def test_time_scaled_zero_dt_is_noop(self, clock):
        agent = _agent(clock, CognitionConfig(time_scaled_decay=True))
        agent.tick(0.0)
        assert agent.emotion.happiness == 0.5

    def test_dominant_emotion_after_decay(self, clock):
        agent = _agent(clock)
        agent.emotion.sadness = 0.3
        for _ in range(60):
            agent.tick(1 / 60)
        # 0.5 * 0.99^60 ≈ 0.27 < 0.3 (sadness는 감쇠 없음)
        assert agent.dominant_emotion == Emotion.SAD
        assert "I'm sad." in agent.interact("why so glum?")


class TestAccessors:
    def test_name_read_only(self, clock):
        agent = _agent(clock)
        with pytest.raises(AttributeError):
            agent.name = "Other"  # type: ignore[misc]

    def test_snapshot(self, clock):
        agent = _agent(clock, extraversion=0.9)
        agent.interact("hi")
        view = agent.snapshot()
        assert view["name"] == "Tester"
        assert view["dominant_emotion"] == "happy"
        assert view["memory_count"] == 1
        assert view["relationship"] == pytest.approx(0.05)
        assert view["position"] == {"x": 0.0, "y": 0.0}
        assert view["personality"]["extraversion"] == 0.9


class TestRestoreMemories:
    def test_new_memory_follows_restored_timestamps(self, clock):
        agent = _agent(clock)
        agent.restore_memories([Memory("old", 0.8, 1000.0)])
        agent.interact("new")

        stamps = [m.timestamp for m in agent.memory]
        assert stamps[1] > stamps[0]
        assert [m.content for m in agent.memory.recent(1)] == ["Player said: new"]

    def test_restore_empty_keeps_clock(self, clock):
        agent = _agent(clock)
        agent.restore_memories([])
        agent.interact("x")
        assert agent.memory.memories[0].timestamp == 1.0
