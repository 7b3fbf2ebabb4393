"""관계 추적 테스트"""

import pytest

from src.core.relationship.tracker import DEFAULT_COUNTERPART, RelationshipTracker


class TestRelationshipTracker:
    def test_default_zero(self):
        tracker = RelationshipTracker()
        assert tracker.get("player") == 0.0
        assert tracker.get() == 0.0
        assert "player" not in tracker

    def test_bump_creates_entry(self):
        tracker = RelationshipTracker()
        assert tracker.bump("player", 0.05) == pytest.approx(0.05)
        assert "player" in tracker

    @pytest.mark.parametrize("n", [0, 1, 2, 10, 100])
    def test_bump_is_additive(self, n):
        tracker = RelationshipTracker()
        for _ in range(n):
            tracker.bump(DEFAULT_COUNTERPART, 0.05)
        assert tracker.get() == pytest.approx(0.05 * n)

    def test_no_clamp(self):
        tracker = RelationshipTracker()
        tracker.bump("player", 5.0)
        tracker.bump("rival", -3.0)
        assert tracker.get("player") == 5.0
        assert tracker.get("rival") == -3.0

    def test_counterparts_independent(self):
        tracker = RelationshipTracker()
        tracker.bump("player", 0.05)
        assert tracker.get("stranger") == 0.0
        assert len(tracker) == 1

    def test_dict_roundtrip(self):
        tracker = RelationshipTracker()
        tracker.bump("player", 0.15)
        restored = RelationshipTracker.from_dict(tracker.to_dict())
        assert restored.get("player") == pytest.approx(0.15)
        assert restored.to_dict() == tracker.to_dict()
