"""Population 테스트"""

import pytest

from src.core.npc.agent import CognitionConfig
from src.core.npc.models import PersonalityProfile, Position
from src.core.population import Population, RosterEntry
from src.core.roster import default_roster


def _entry(name: str, x: float, y: float) -> RosterEntry:
    return RosterEntry(name, PersonalityProfile(), Position(x, y))


class TestConstruction:
    def test_default_roster(self, population):
        assert population.ids() == ["Maya", "Tom", "Elder"]
        assert len(population) == 3

    def test_default_roster_traits(self):
        roster = {e.name: e for e in default_roster()}
        assert roster["Tom"].personality.extraversion == 0.9
        assert roster["Maya"].position == Position(200.0, 200.0)
        assert roster["Elder"].personality.neuroticism == 0.8

    def test_duplicate_name_rejected(self):
        with pytest.raises(ValueError):
            Population([_entry("A", 0, 0), _entry("A", 10, 10)])

    def test_shared_config(self):
        config = CognitionConfig(memory_cap=10, memory_retain=5)
        population = Population([_entry("A", 0, 0)], config)
        assert population.get("A").memory.cap == 10

    def test_get_unknown_raises(self, population):
        with pytest.raises(KeyError):
            population.get("Nobody")

    def test_contains_and_iter(self, population):
        assert "Tom" in population
        assert "Nobody" not in population
        assert [a.name for a in population] == ["Maya", "Tom", "Elder"]


class TestNearestWithin:
    def test_nearest_inside_radius(self, population):
        assert population.nearest_within(Position(210.0, 200.0), 60.0) == "Maya"

    def test_none_when_out_of_range(self, population):
        assert population.nearest_within(Position(400.0, 300.0), 60.0) is None

    def test_radius_is_strict(self):
        population = Population([_entry("A", 0, 0)])
        assert population.nearest_within(Position(60.0, 0.0), 60.0) is None
        assert population.nearest_within(Position(59.9, 0.0), 60.0) == "A"

    def test_picks_minimum_distance(self):
        population = Population([_entry("Far", 0, 0), _entry("Near", 30, 0)])
        assert population.nearest_within(Position(40.0, 0.0), 60.0) == "Near"

    def test_tie_first_wins(self):
        population = Population([_entry("Left", -10, 0), _entry("Right", 10, 0)])
        assert population.nearest_within(Position(0.0, 0.0), 60.0) == "Left"

    def test_empty_population(self):
        assert Population([]).nearest_within(Position(0.0, 0.0), 100.0) is None


class TestTick:
    def test_tick_decays_every_agent(self, population):
        population.tick(1 / 60)
        for agent in population:
            assert agent.emotion.happiness == pytest.approx(0.495)

    def test_agents_independent(self, population):
        population.get("Tom").emotion.anger = 1.0
        population.tick(1 / 60)
        assert population.get("Tom").emotion.anger == pytest.approx(0.95)
        assert population.get("Maya").emotion.anger == 0.0

    def test_total_memories(self, population):
        population.get("Tom").interact("a")
        population.get("Tom").interact("b")
        population.get("Maya").interact("c")
        assert population.total_memories() == 3

    def test_from_agents_rejects_duplicates(self, population):
        tom = population.get("Tom")
        with pytest.raises(ValueError):
            Population.from_agents([tom, tom])

    def test_from_agents_logs_restored_names(self, population, caplog):
        agents = list(population)
        with caplog.at_level("INFO", logger="src.core.population"):
            restored = Population.from_agents(agents)
        assert restored.ids() == ["Maya", "Tom", "Elder"]
        assert "Population 복원: 3명 (Maya, Tom, Elder)" in caplog.text
        assert "0명" not in caplog.text
