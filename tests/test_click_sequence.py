import logging

import pytest

from pinpad_auto.click_sequence import ClickSequence, generate
from pinpad_auto.exceptions import InvalidPinError


class TestGenerate:
    def test_all_digits_resolved(self):
        clicks = generate("1234", {1: 2, 2: 5, 3: 0, 4: 7})
        assert list(clicks) == [2, 5, 0, 7]
        assert clicks.is_complete
        assert clicks.unresolved_count == 0

    def test_missing_digit_is_skipped_in_order(self):
        clicks = generate("1234", {1: 2, 3: 0, 4: 7})
        assert list(clicks) == [2, 0, 7]
        assert clicks.unresolved_positions == (1,)
        assert not clicks.is_complete

    def test_empty_pin(self):
        clicks = generate("", {1: 2})
        assert clicks.slots == ()
        assert len(clicks) == 0
        assert clicks.is_complete

    def test_empty_keymap_resolves_nothing(self):
        clicks = generate("9071", {})
        assert clicks.slots == ()
        assert clicks.unresolved_positions == (0, 1, 2, 3)

    def test_repeated_digits(self):
        clicks = generate("0000", {0: 9})
        assert clicks.slots == (9, 9, 9, 9)

    def test_every_missing_occurrence_is_reported(self):
        clicks = generate("2520", {5: 1, 0: 3})
        assert clicks.slots == (1, 3)
        assert clicks.unresolved_positions == (0, 2)
        assert clicks.unresolved_count == 2

    def test_accepts_sequence_of_characters(self):
        assert generate(["4", "2"], {4: 0, 2: 8}).slots == (0, 8)

    @pytest.mark.parametrize("pin", ["12a4", "12 4", "-123", "١٢٣"])
    def test_non_digit_rejected(self, pin):
        with pytest.raises(InvalidPinError):
            generate(pin, {d: d for d in range(10)})

    def test_truncation_is_logged_without_pin(self, caplog):
        with caplog.at_level(logging.WARNING, logger="pinpad_auto"):
            generate("8642", {8: 1, 6: 2, 4: 3})
        assert "truncated" in caplog.text
        assert "8642" not in caplog.text

    def test_output_is_independent_of_keymap_mutation(self):
        keymap = {1: 4}
        clicks = generate("1", keymap)
        keymap[1] = 9
        assert clicks.slots == (4,)


def test_click_sequence_defaults():
    clicks = ClickSequence()
    assert clicks.slots == ()
    assert clicks.is_complete


def test_multi_character_items_rejected():
    with pytest.raises(InvalidPinError):
        generate(["12", "3"], {1: 0, 2: 1, 3: 2})


def test_every_unresolved_position_is_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="pinpad_auto"):
        generate("90718", {})
    assert "unresolved_positions:(0, 1, 2, 3, 4)" in caplog.text
