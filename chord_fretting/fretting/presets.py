"""Hand-tuned fingerings for common fret shapes.

A shape is the fret pattern reduced to the lowest pressed fret: muted and
open strings become 0, pressed strings become ``fret - min_fret + 1``. When
a voicing matches a known shape, its fingering is taken from this table
instead of being searched, with every finger moved by ``min_fret - 1``.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from chord_fretting.fretting.models import IDLE, FingerRange, is_muted
from chord_fretting.fretting.rating import pressed_fret_range

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

_press = FingerRange.press
_barre = FingerRange.barre

SIX_STRING_PRESETS: Mapping[tuple[int, ...], tuple[FingerRange, ...]] = MappingProxyType({
    # A shape
    (0, 0, 1, 1, 1, 0): (IDLE, IDLE, _press(1, 2), _press(1, 3), _press(1, 4)),
    # E shape barre
    (0, 1, 3, 3, 2, 1): (IDLE, _barre(1, 1, 5), _press(2, 4), _press(3, 2), _press(3, 3)),
    # E7 shape barre
    (0, 1, 3, 1, 2, 1): (IDLE, _barre(1, 1, 5), _press(2, 4), _press(3, 2), IDLE),
    # E shape with a ring barre
    (0, 1, 3, 3, 3, 1): (IDLE, _barre(1, 1, 5), IDLE, _barre(3, 2, 4), IDLE),
    # Em7 shape barre
    (0, 1, 3, 1, 3, 1): (IDLE, _barre(1, 1, 5), IDLE, _press(3, 2), _press(3, 4)),
})

PRESETS: Mapping[int, Mapping[tuple[int, ...], tuple[FingerRange, ...]]] = MappingProxyType({
    6: SIX_STRING_PRESETS,
})


def fret_shape(frets: Sequence[float]) -> tuple[int, ...]:
    """Reduce a fret pattern to its shape relative to the lowest pressed fret.

    Examples
    --------
    >>> fret_shape([float("nan"), 3, 5, 5, 4, 3])
    (0, 1, 3, 3, 2, 1)
    """
    fret_range = pressed_fret_range(frets)
    offset = fret_range[0] - 1 if fret_range else 0
    return tuple(0 if is_muted(f) or f == 0 else int(f) - offset for f in frets)


def get_preset(frets: Sequence[float]) -> tuple[FingerRange, ...] | None:
    """Return the preset fingering for a fret pattern, if one is known.

    Parameters
    ----------
    frets : Sequence[float]
        Fret per string (NaN = muted).

    Returns
    -------
    tuple[FingerRange, ...] | None
        Five finger ranges moved to the pattern's position, or None.

    Examples
    --------
    >>> fingers = get_preset([float("nan"), 3, 5, 5, 4, 3])
    >>> fingers[1]
    FingerRange(fret=3, from_string=1, to_string=5)
    """
    presets = PRESETS.get(len(frets))
    if not presets:
        return None

    fingers = presets.get(fret_shape(frets))
    if fingers is None:
        return None

    fret_range = pressed_fret_range(frets)
    offset = fret_range[0] - 1 if fret_range else 0
    return tuple(finger.offset(offset) for finger in fingers)
