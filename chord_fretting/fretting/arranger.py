"""Finger assignment for fretted voicings.

The arranger builds a pressability grid over the pressed fret range (one
row per fret column, one entry per string) and searches every way of
covering its MUST_PRESS cells with the thumb, single presses and barres.
The easiest complete assignment wins.

The search runs on an explicit stack of immutable states; each branch
works on its own copy of the grid, so no state is shared between
siblings.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import TYPE_CHECKING

import numpy as np

from chord_fretting.config import DEFAULT_WEIGHTS, RatingWeights
from chord_fretting.fretting.models import IDLE, ChordFingering, FingerRange
from chord_fretting.fretting.presets import get_preset
from chord_fretting.fretting.rating import calculate_fingering_rating, pressed_fret_range

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

FINGER_COUNT = 5


class Pressability(IntEnum):
    """State of one (fret column, string) cell of the pressability grid."""

    CAN_PRESS = 0
    MUST_PRESS = 1
    MUST_NOT_PRESS = 2
    PRESSED = 3


@dataclass(frozen=True)
class _ArrangeState:
    grid: np.ndarray
    fingers: tuple[FingerRange, ...]
    last_column: int | None
    lowest_string: int


class ChordFingerArranger:
    """Assign fingers to a fret pattern.

    Parameters
    ----------
    frets : Sequence[float]
        Fret per string in physical order (NaN = muted, 0 = open).
    weights : RatingWeights
        Rating weights, including the per-finger barre limits.

    Examples
    --------
    >>> fingering = ChordFingerArranger([0, 2, 2, 1, 0, 0]).arrange()
    >>> [finger.fret for finger in fingering.fingers[1:4]]
    [1, 2, 2]
    """

    def __init__(self, frets: Sequence[float], weights: RatingWeights = DEFAULT_WEIGHTS) -> None:
        self.frets = tuple(frets)
        self.weights = weights
        self.fret_range = pressed_fret_range(self.frets)

    @property
    def string_count(self) -> int:
        return len(self.frets)

    def analyse_pressabilities(self) -> np.ndarray:
        """Build the pressability grid over the pressed fret range.

        A string fretted exactly at a column must be pressed there. A string
        fretted below the column (open strings included) must not be covered
        at that column. Muted strings and strings fretted higher may be.
        """
        low, high = self.fret_range
        frets = np.array(self.frets, dtype=float)
        columns = np.arange(low, high + 1, dtype=float)[:, np.newaxis]

        grid = np.full((columns.shape[0], frets.shape[0]), Pressability.CAN_PRESS, dtype=np.int8)
        grid[frets == columns] = Pressability.MUST_PRESS
        grid[frets < columns] = Pressability.MUST_NOT_PRESS
        return grid

    def arrange(self) -> ChordFingering | None:
        """Return the easiest fingering, or None if the pattern cannot be fingered."""
        if self.fret_range is None:
            fingers = (IDLE,) * FINGER_COUNT
            return ChordFingering(fingers, calculate_fingering_rating(self.frets, fingers, self.weights))

        grid = self.analyse_pressabilities()
        initial = [_ArrangeState(grid, (IDLE,), None, 0)]
        thumb = self._thumb_state(grid)
        if thumb is not None:
            initial.append(thumb)

        best: ChordFingering | None = None
        for state in initial:
            for fingers in self._search(state):
                rating = calculate_fingering_rating(self.frets, fingers, self.weights)
                if best is None or rating < best.rating:
                    best = ChordFingering(fingers, rating)

        if best is None:
            logger.debug("No fingering for frets %s", self.frets)
        return best

    def _thumb_state(self, grid: np.ndarray) -> _ArrangeState | None:
        """Start state with the thumb over the neck on string 0, if possible."""
        lowest_string = max(self.string_count - (FINGER_COUNT - 1), 1)

        thumb_columns = np.flatnonzero(grid[:, 0] == Pressability.MUST_PRESS)
        if len(thumb_columns) != 1:
            return None
        column = int(thumb_columns[0])
        if column > self.weights.thumb_max_column:
            return None
        # strings between the thumb and the fingers cannot be reached
        if np.any(grid[:, 1:lowest_string] == Pressability.MUST_PRESS):
            return None

        grid = grid.copy()
        grid[:, :lowest_string] = Pressability.MUST_NOT_PRESS
        thumb = FingerRange.press(self.fret_range[0] + column, 0)
        return _ArrangeState(grid, (thumb,), None, lowest_string)

    def _search(self, initial: _ArrangeState) -> list[tuple[FingerRange, ...]]:
        found: list[tuple[FingerRange, ...]] = []
        stack = [initial]
        while stack:
            state = stack.pop()
            position = self._next_must_press(state)
            if position is None:
                found.append(state.fingers + (IDLE,) * (FINGER_COUNT - len(state.fingers)))
                continue
            if len(state.fingers) == FINGER_COUNT:
                continue
            # reversed so that branches are explored in the order they are built
            stack.extend(reversed(self._branches(state, *position)))
        return found

    @staticmethod
    def _next_must_press(state: _ArrangeState) -> tuple[int, int] | None:
        hits = np.argwhere(state.grid[:, state.lowest_string :] == Pressability.MUST_PRESS)
        if hits.size == 0:
            return None
        column, string = hits[0]
        return int(column), int(string) + state.lowest_string

    def _branches(self, state: _ArrangeState, column: int, string: int) -> list[_ArrangeState]:
        finger = len(state.fingers)
        fret = self.fret_range[0] + column
        branches = []

        grid = state.grid.copy()
        grid[column, string] = Pressability.PRESSED
        branches.append(
            replace(state, grid=grid, fingers=state.fingers + (FingerRange.press(fret, string),), last_column=column)
        )

        if state.last_column != column:
            end = self._barre_end(state.grid[column], string, self.weights.max_barre_range[finger])
            if end is not None:
                grid = state.grid.copy()
                row = grid[column, string : end + 1]
                row[row == Pressability.MUST_PRESS] = Pressability.PRESSED
                barre = FingerRange.barre(fret, string, end)
                branches.append(replace(state, grid=grid, fingers=state.fingers + (barre,), last_column=column))

        if finger < FINGER_COUNT - 1:
            branches.append(replace(state, fingers=state.fingers + (IDLE,)))

        return branches

    @staticmethod
    def _barre_end(row: np.ndarray, start: int, max_range: float) -> int | None:
        """Return the last string of a barre starting at ``start``, or None.

        The barre must cover at least two MUST_PRESS cells and is extended
        over trailing CAN_PRESS cells, never beyond ``max_range`` strings.
        """
        end = None
        string = start + 1
        while string < len(row) and string - start + 1 <= max_range:
            cell = row[string]
            if cell in (Pressability.MUST_NOT_PRESS, Pressability.PRESSED):
                break
            if cell == Pressability.MUST_PRESS:
                end = string
            string += 1

        if end is None:
            return None

        while end + 1 < len(row) and end + 2 - start <= max_range and row[end + 1] == Pressability.CAN_PRESS:
            end += 1
        return end


def arrange_fingering(
    frets: Sequence[float],
    *,
    weights: RatingWeights = DEFAULT_WEIGHTS,
    use_presets: bool = True,
) -> ChordFingering | None:
    """Find the fingering of a fret pattern.

    Known shapes take their preset fingering; everything else is searched.

    Parameters
    ----------
    frets : Sequence[float]
        Fret per string (NaN = muted).
    weights : RatingWeights, optional
        Rating weights.
    use_presets : bool, optional
        Look up hand-tuned fingerings first, by default True.

    Returns
    -------
    ChordFingering | None
        The fingering with its rating, or None when no valid fingering exists.

    Examples
    --------
    >>> nan = float("nan")
    >>> fingering = arrange_fingering([nan, 3, 5, 5, 5, 3])
    >>> fingering.fingers[3]
    FingerRange(fret=5, from_string=2, to_string=4)
    """
    if use_presets:
        fingers = get_preset(frets)
        if fingers is not None:
            return ChordFingering(fingers, calculate_fingering_rating(frets, fingers, weights))
    return ChordFingerArranger(frets, weights).arrange()
