"""Musical intervals as (staff degree, quality) pairs.

This module provides the immutable ``Interval`` value type together with a
constant table covering every interval up to two octaves.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class IntervalQuality(Enum):
    """Quality of an interval."""

    PERFECT = "P"
    MAJOR = "M"
    MINOR = "m"
    AUGMENTED = "A"
    DIMINISHED = "d"


# Semitones of the minor (or perfect) interval of each simple degree
_BASE_SEMITONES = (0, 1, 3, 5, 7, 8, 10)

_PERFECT_DEGREES = frozenset({0, 3, 4})


def is_valid(number: int, quality: IntervalQuality) -> bool:
    """Check that ``quality`` is compatible with the degree ``number``.

    Unisons, fourths and fifths (and their compounds) can be perfect but not
    major or minor; every other degree is the other way round.

    Examples
    --------
    >>> is_valid(4, IntervalQuality.PERFECT)
    True
    >>> is_valid(2, IntervalQuality.PERFECT)
    False
    """
    if number % 7 in _PERFECT_DEGREES:
        return quality not in (IntervalQuality.MAJOR, IntervalQuality.MINOR)
    return quality is not IntervalQuality.PERFECT


@dataclass(frozen=True)
class Interval:
    """An interval between two notes.

    Parameters
    ----------
    number : int
        The 0-based staff degree (0 = unison, 2 = third, 8 = ninth).
    quality : IntervalQuality
        The interval quality.

    Raises
    ------
    ValueError
        If the quality is not compatible with the degree.

    Examples
    --------
    >>> Interval(2, IntervalQuality.MAJOR).semitone_offset
    4
    >>> str(Interval(10, IntervalQuality.PERFECT))
    'P11'
    """

    number: int
    quality: IntervalQuality

    def __post_init__(self) -> None:
        if not is_valid(self.number, self.quality):
            msg = f"Number and quality mismatch: {self.quality.name} {self.number + 1}"
            raise ValueError(msg)

    @property
    def octaves(self) -> int:
        return self.number // 7

    @property
    def normalized_number(self) -> int:
        return self.number % 7

    @property
    def could_be_perfect(self) -> bool:
        return self.normalized_number in _PERFECT_DEGREES

    @property
    def semitone_offset(self) -> int:
        """Number of semitones spanned by the interval."""
        value = _BASE_SEMITONES[self.normalized_number]
        if self.quality is IntervalQuality.MAJOR:
            value += 1
        elif self.quality is IntervalQuality.AUGMENTED:
            value += 1 if self.could_be_perfect else 2
        elif self.quality is IntervalQuality.DIMINISHED:
            value -= 1
        return self.octaves * 12 + value

    @property
    def simple(self) -> Interval:
        """The interval reduced to within one octave."""
        if self.number < 7:
            return self
        return Interval(self.normalized_number, self.quality)

    def __str__(self) -> str:
        return f"{self.quality.value}{self.number + 1}"

    @classmethod
    def from_semitones(cls, semitones: int, degree: int | None = None) -> Interval:
        """Resolve an interval from a semitone count.

        Parameters
        ----------
        semitones : int
            Non-negative semitone distance.
        degree : int | None
            Staff degree the result must be spelled as. When omitted the most
            common spelling is used (the tritone resolves to ``A4``).

        Returns
        -------
        Interval
            The matching interval.

        Raises
        ------
        ValueError
            If the semitones cannot be spelled as the requested degree.

        Examples
        --------
        >>> str(Interval.from_semitones(6))
        'A4'
        >>> str(Interval.from_semitones(6, degree=4))
        'd5'
        >>> str(Interval.from_semitones(14))
        'M9'
        """
        octaves, base = divmod(semitones, 12)
        if degree is None:
            base_interval = _NATURAL_SPELLING[base]
            if octaves == 0:
                return base_interval
            return cls(base_interval.number + octaves * 7, base_interval.quality)

        base_interval = _SNAPPED_SPELLING[base].get(degree - octaves * 7)
        if base_interval is None:
            msg = f"Cannot resolve {semitones} semitones to degree {degree + 1}"
            raise ValueError(msg)
        return cls(degree, base_interval.quality)


_P = IntervalQuality.PERFECT
_M = IntervalQuality.MAJOR
_m = IntervalQuality.MINOR
_A = IntervalQuality.AUGMENTED
_d = IntervalQuality.DIMINISHED

P1 = Interval(0, _P)
m2 = Interval(1, _m)
M2 = Interval(1, _M)
m3 = Interval(2, _m)
M3 = Interval(2, _M)
P4 = Interval(3, _P)
P5 = Interval(4, _P)
m6 = Interval(5, _m)
M6 = Interval(5, _M)
m7 = Interval(6, _m)
M7 = Interval(6, _M)
P8 = Interval(7, _P)
m9 = Interval(8, _m)
M9 = Interval(8, _M)
m10 = Interval(9, _m)
M10 = Interval(9, _M)
P11 = Interval(10, _P)
P12 = Interval(11, _P)
m13 = Interval(12, _m)
M13 = Interval(12, _M)
m14 = Interval(13, _m)
M14 = Interval(13, _M)
P15 = Interval(14, _P)
A1, A2, A3, A4, A5, A6, A7, A8 = (Interval(n, _A) for n in range(8))
A9, A10, A11, A12, A13, A14, A15 = (Interval(n, _A) for n in range(8, 15))
d1, d2, d3, d4, d5, d6, d7, d8 = (Interval(n, _d) for n in range(8))
d9, d10, d11, d12, d13, d14, d15 = (Interval(n, _d) for n in range(8, 15))

_NATURAL_SPELLING = (P1, m2, M2, m3, M3, P4, A4, P5, m6, M6, m7, M7)

# Degree -1 covers an augmented seventh snapped onto the next octave
_SNAPPED_SPELLING: tuple[dict[int, Interval], ...] = (
    {-1: A7, 0: P1, 1: d2, 6: A7},
    {0: A1, 1: m2},
    {1: M2, 2: d3},
    {1: A2, 2: m3},
    {2: M3, 3: d4},
    {2: A3, 3: P4},
    {3: A4, 4: d5},
    {4: P5, 5: d6},
    {4: A5, 5: m6},
    {5: M6, 6: d7},
    {5: A6, 6: m7},
    {6: M7, 7: d8},
)
