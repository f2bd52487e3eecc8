import math

import numpy as np
import pytest

from chord_fretting.fretting.arranger import ChordFingerArranger, Pressability, arrange_fingering
from chord_fretting.fretting.models import IDLE, FingerRange
from chord_fretting.fretting.presets import fret_shape, get_preset

nan = math.nan

MUST = Pressability.MUST_PRESS
CAN = Pressability.CAN_PRESS
NOT = Pressability.MUST_NOT_PRESS


class TestPressabilities:
    def test_open_e_major(self):
        grid = ChordFingerArranger([0, 2, 2, 1, 0, 0]).analyse_pressabilities()
        expected = np.array([
            [NOT, CAN, CAN, MUST, NOT, NOT],
            [NOT, MUST, MUST, NOT, NOT, NOT],
        ])
        np.testing.assert_array_equal(grid, expected)

    def test_muted_strings_can_be_covered(self):
        grid = ChordFingerArranger([nan, 3, 3, nan, 3, 3]).analyse_pressabilities()
        np.testing.assert_array_equal(grid, np.array([[CAN, MUST, MUST, CAN, MUST, MUST]]))


class TestArrange:
    def test_open_e_major(self):
        fingering = arrange_fingering([0, 2, 2, 1, 0, 0])
        assert fingering.fingers == (
            IDLE,
            FingerRange.press(1, 3),
            FingerRange.press(2, 1),
            FingerRange.press(2, 2),
            IDLE,
        )
        assert fingering.rating == pytest.approx(5.4)

    def test_full_barre(self):
        fingering = arrange_fingering([1, 3, 3, 2, 1, 1])
        assert fingering.fingers == (
            IDLE,
            FingerRange.barre(1, 0, 5),
            FingerRange.press(2, 3),
            FingerRange.press(3, 1),
            FingerRange.press(3, 2),
        )
        assert fingering.rating == pytest.approx(10.3)

    def test_index_barre_beats_four_presses(self):
        fingering = arrange_fingering([nan, nan, 2, 2, 2, 2])
        assert fingering.fingers[1] == FingerRange.barre(2, 2, 5)
        assert fingering.used_fingers == [1]

    def test_thumb_over_the_neck(self):
        # D/F#: the thumb frets the bass, the index barres the top strings
        fingering = arrange_fingering([2, nan, 0, 2, 3, 2])
        assert fingering.fingers[0] == FingerRange.press(2, 0)
        assert fingering.fingers[1] == FingerRange.barre(2, 3, 5)
        assert fingering.fingers[2] == FingerRange.press(3, 4)
        # span 2, position 0.8, muted string break 5, thumb 2, index barre 1.2, middle 1
        assert fingering.rating == pytest.approx(12.0)

    def test_barre_blocked_by_open_string(self):
        fingering = arrange_fingering([nan, 1, 0, 1, nan, nan])
        assert not any(finger.is_barre for finger in fingering.fingers)

    def test_all_open(self):
        fingering = arrange_fingering([0, 0, 0, 0])
        assert fingering.fingers == (IDLE,) * 5
        assert fingering.rating == 0

    def test_too_many_positions(self):
        assert arrange_fingering([1, 2, 3, 4, 5, 6]) is None

    def test_every_pressed_position_is_covered_once(self):
        frets = [3, 2, 0, 0, 3, 3]
        fingering = arrange_fingering(frets)
        for string, fret in enumerate(frets):
            covering = [f for f in fingering.fingers if f.fret == fret and f.covers(string)]
            assert len(covering) == (1 if fret > 0 else 0)


class TestPresets:
    def test_fret_shape(self):
        assert fret_shape([nan, 3, 5, 5, 4, 3]) == (0, 1, 3, 3, 2, 1)
        assert fret_shape([nan, 0, 2, 2, 2, 0]) == (0, 0, 1, 1, 1, 0)

    def test_preset_is_moved_to_position(self):
        fingers = get_preset([nan, 3, 5, 5, 4, 3])
        assert fingers == (
            IDLE,
            FingerRange.barre(3, 1, 5),
            FingerRange.press(4, 4),
            FingerRange.press(5, 2),
            FingerRange.press(5, 3),
        )

    def test_open_a_shape(self):
        fingers = get_preset([nan, 0, 2, 2, 2, 0])
        assert fingers[2:] == (FingerRange.press(2, 2), FingerRange.press(2, 3), FingerRange.press(2, 4))

    def test_unknown_shape(self):
        assert get_preset([0, 2, 2, 1, 0, 0]) is None

    def test_no_presets_for_four_strings(self):
        assert get_preset([0, 0, 0, 3]) is None

    def test_preset_wins_over_search(self):
        frets = [nan, 3, 5, 5, 5, 3]
        assert arrange_fingering(frets).fingers[3] == FingerRange.barre(5, 2, 4)
        assert arrange_fingering(frets, use_presets=False) is not None
