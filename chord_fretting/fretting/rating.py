"""Difficulty rating of fretted voicings.

Lower ratings mean easier, more idiomatic voicings. All weights come from
``RatingWeights`` so they can be tuned without touching the formula.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chord_fretting.config import DEFAULT_WEIGHTS, RatingWeights
from chord_fretting.fretting.models import is_muted

if TYPE_CHECKING:
    from collections.abc import Sequence

    from chord_fretting.fretting.models import FingerRange


def pressed_fret_range(frets: Sequence[float]) -> tuple[int, int] | None:
    """Return the lowest and highest pressed fret (muted and open excluded).

    Examples
    --------
    >>> pressed_fret_range([0, 2, 2, 1, 0, 0])
    (1, 2)
    >>> pressed_fret_range([0, 0, 0, float("nan")]) is None
    True
    """
    pressed = [int(f) for f in frets if not is_muted(f) and f > 0]
    if not pressed:
        return None
    return min(pressed), max(pressed)


def count_breaks(frets: Sequence[float]) -> int:
    """Count muted strings sandwiched between two sounding strings.

    Examples
    --------
    >>> nan = float("nan")
    >>> count_breaks([nan, 0, 2, nan, 2, 0])
    1
    >>> count_breaks([nan, nan, 0, 2, 3, nan])
    0
    """
    sounding = [i for i, f in enumerate(frets) if not is_muted(f)]
    if not sounding:
        return 0
    return sum(1 for i in range(sounding[0], sounding[-1]) if is_muted(frets[i]))


def calculate_fingering_rating(
    frets: Sequence[float],
    fingers: Sequence[FingerRange],
    weights: RatingWeights = DEFAULT_WEIGHTS,
) -> float:
    """Rate how hard a fingered voicing is to play.

    Parameters
    ----------
    frets : Sequence[float]
        Fret per string (NaN = muted).
    fingers : Sequence[FingerRange]
        Five finger assignments (thumb, index, middle, ring, pinky).
    weights : RatingWeights
        Heuristic weights.

    Returns
    -------
    float
        The rating (lower is better).

    Examples
    --------
    >>> from chord_fretting.fretting.models import IDLE, FingerRange
    >>> fingers = [IDLE, FingerRange.press(1, 3), FingerRange.press(2, 1), FingerRange.press(2, 2), IDLE]
    >>> round(calculate_fingering_rating([0, 2, 2, 1, 0, 0], fingers), 2)
    5.4
    """
    rating = 0.0

    fret_range = pressed_fret_range(frets)
    if fret_range is not None:
        low, high = fret_range
        span = high - low + 1
        rating += span * weights.fret_span
        if span > weights.wide_span_threshold:
            rating += (span - weights.wide_span_threshold) * weights.wide_span_penalty
        rating += low * weights.min_fret

    rating += count_breaks(frets) * weights.string_break

    for i, finger in enumerate(fingers):
        if finger.is_idle:
            continue

        if finger.is_barre:
            rating += finger.width * weights.barre[i]
        else:
            rating += weights.single_press[i]

        # two fingers in a row spread over more than one fret
        if i >= 1 and not fingers[i - 1].is_idle:
            gap = finger.fret - fingers[i - 1].fret
            if gap > 1:
                rating += (gap * weights.finger_gap[i]) ** 2

    return rating
