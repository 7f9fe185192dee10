"""
Dicer - Player and Ailment Tests
"""

import pytest
from dicer.engine.base import REMOVED_AILMENT_VALUE
from dicer.engine.player import AilmentRegistry, Player


class TestAilmentRegistry:
    """Tests for AilmentRegistry."""

    def test_initial_slots(self):
        registry = AilmentRegistry(9)
        assert registry.slots == (1, 2, 3, 4, 5, 6, 7, 8, 9)
        assert registry.has_any() is True

    def test_sentinel_is_never_an_ailment(self):
        registry = AilmentRegistry(9)
        assert REMOVED_AILMENT_VALUE not in registry.slots
        assert registry.is_active(REMOVED_AILMENT_VALUE) is False

    @pytest.mark.parametrize("number", [0, -3, 10, 100])
    def test_out_of_range_is_inactive(self, number):
        assert AilmentRegistry(9).is_active(number) is False

    def test_remove(self):
        registry = AilmentRegistry(9)
        registry.remove(7)
        assert registry.is_active(7) is False
        assert registry.slots[6] == REMOVED_AILMENT_VALUE
        assert 7 not in registry.active_numbers()

    def test_remove_stays_removed(self):
        registry = AilmentRegistry(9)
        registry.remove(4)
        registry.remove(4)
        for _ in range(3):
            assert registry.is_active(4) is False
        assert len(registry.active_numbers()) == 8

    def test_remove_out_of_range_raises(self):
        with pytest.raises(ValueError, match="out of range"):
            AilmentRegistry(9).remove(0)

    def test_has_any_false_when_all_removed(self):
        registry = AilmentRegistry(3)
        for number in (1, 2, 3):
            registry.remove(number)
        assert registry.has_any() is False
        assert registry.active_numbers() == ()

    def test_status(self):
        registry = AilmentRegistry(3)
        registry.remove(2)
        assert registry.status() == ((1, True), (2, False), (3, True))

    def test_needs_at_least_one(self):
        with pytest.raises(ValueError):
            AilmentRegistry(0)


class TestPlayer:
    """Tests for Player."""

    def test_initial_state(self):
        player = Player(3, 9)
        assert player.lives == 3
        assert player.max_lives == 3
        assert player.has_lives() is True
        assert len(player.ailments) == 9

    def test_remove_life(self):
        player = Player(1, 9)
        player.remove_life()
        assert player.lives == 0
        assert player.has_lives() is False

    def test_lives_not_clamped(self):
        player = Player(1, 9)
        player.remove_life()
        player.remove_life()
        assert player.lives == -1
