"""Data models for chord fretting.

This module defines the candidate voicing (``ChordDetail``), its left-hand
fingering (``ChordFingering`` / ``FingerRange``) and the omitted chord tones
attached to it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from chord_fretting.interval import Interval
    from chord_fretting.models import Chord
    from chord_fretting.pitch_class import NoteName

MUTED = math.nan

FINGER_NAMES = ("thumb", "index", "middle", "ring", "pinky")


def is_muted(fret: float) -> bool:
    """Check whether a fret value marks a muted string."""
    return math.isnan(fret)


def fret_key(frets: Iterable[float]) -> tuple[int | None, ...]:
    """Return a hashable, comparable form of a fret pattern (muted = None).

    Examples
    --------
    >>> fret_key([MUTED, 3, 2, 0, 1, 0])
    (None, 3, 2, 0, 1, 0)
    """
    return tuple(None if is_muted(f) else int(f) for f in frets)


@dataclass(frozen=True)
class FingerRange:
    """The position pressed by one finger.

    Parameters
    ----------
    fret : float
        The fret pressed, or NaN when the finger is idle.
    from_string : int
        First string index covered (physical order).
    to_string : int
        Last string index covered; equal to ``from_string`` for a single
        press, greater for a barre.

    Examples
    --------
    >>> FingerRange(1, 0, 5).is_barre
    True
    >>> FingerRange.press(2, 3).width
    1
    """

    fret: float = MUTED
    from_string: int = -1
    to_string: int = -1

    @classmethod
    def press(cls, fret: int, string: int) -> FingerRange:
        return cls(fret, string, string)

    @classmethod
    def barre(cls, fret: int, from_string: int, to_string: int) -> FingerRange:
        return cls(fret, from_string, to_string)

    @property
    def is_idle(self) -> bool:
        return math.isnan(self.fret)

    @property
    def is_barre(self) -> bool:
        return not self.is_idle and self.to_string != self.from_string

    @property
    def width(self) -> int:
        return 0 if self.is_idle else self.to_string - self.from_string + 1

    def covers(self, string: int) -> bool:
        return not self.is_idle and self.from_string <= string <= self.to_string

    def offset(self, frets: int) -> FingerRange:
        """Return the same range moved ``frets`` frets up the neck."""
        if self.is_idle:
            return self
        return FingerRange(self.fret + frets, self.from_string, self.to_string)


IDLE = FingerRange()


@dataclass(frozen=True)
class ChordFingering:
    """Left-hand fingering of a voicing.

    Parameters
    ----------
    fingers : tuple[FingerRange, ...]
        Five entries: thumb, index, middle, ring, pinky.
    rating : float
        Fingering difficulty (lower is easier).
    """

    fingers: tuple[FingerRange, ...]
    rating: float

    @property
    def used_fingers(self) -> list[int]:
        return [i for i, finger in enumerate(self.fingers) if not finger.is_idle]

    def finger_for(self, fret: float, string: int) -> int | None:
        """Return the finger index covering a fretted position, if any."""
        for i, finger in enumerate(self.fingers):
            if finger.fret == fret and finger.covers(string):
                return i
        return None


@dataclass(frozen=True)
class OmittedInterval:
    """A chord tone that may be left out, with its omission rating.

    Parameters
    ----------
    interval : Interval
        The interval above the root.
    rating : float
        Rating added when the tone is omitted (negative = preferred to omit).
    """

    interval: Interval
    rating: float


@dataclass
class ChordDetail:
    """A candidate voicing of a chord on an instrument.

    Parameters
    ----------
    chord : Chord
        The chord being voiced.
    notes : tuple[NoteName | None, ...]
        Note sounded on each string (physical order), None when muted.
    frets : tuple[float, ...]
        Fret of each string (physical order), NaN when muted.
    omitted_intervals : tuple[OmittedInterval, ...]
        Chord tones deliberately left out.
    omits_rating : float
        Sum of the omission ratings.
    fret_rating : float
        Penalty for voicings that invert the chord on an instrument that
        prefers not to.
    fingering : ChordFingering | None
        Attached by the resolver once a fingering has been arranged.
    rating : float
        Overall rating (lower is better), NaN until a fingering is attached.
    """

    chord: Chord
    notes: tuple[NoteName | None, ...]
    frets: tuple[float, ...]
    omitted_intervals: tuple[OmittedInterval, ...] = ()
    omits_rating: float = 0
    fret_rating: float = 0
    fingering: ChordFingering | None = None
    rating: float = field(default=math.nan)

    @property
    def omits(self) -> list[Interval]:
        return [o.interval for o in self.omitted_intervals]

    @property
    def fret_key(self) -> tuple[int | None, ...]:
        return fret_key(self.frets)

    @property
    def sounding_strings(self) -> list[int]:
        return [i for i, f in enumerate(self.frets) if not is_muted(f)]

    def attach_fingering(self, fingering: ChordFingering) -> None:
        """Attach a fingering and compute the overall rating."""
        self.fingering = fingering
        self.rating = fingering.rating + self.omits_rating + self.fret_rating
