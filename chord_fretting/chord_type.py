"""Packed chord-type bitfield.

A chord type is an integer holding, for every scale-degree slot, a 3-bit
quality code::

    31..29   | 28..21           | 20 19 18  | 17..15 14..12 11..9 8..6 5..3 2..0
    flags    | basic chord type | 13 11 9   | 7th    6th    5th   4th  3rd  2nd

The 9th, 11th and 13th reuse the 2nd, 4th and 6th slots; the matching
upper-octave marker bit tells which of the two the slot holds, so a slot can
never hold a simple degree and its extension at the same time.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from chord_fretting import interval
from chord_fretting.interval import Interval

NOTE_MASK = 0b111

MASK_2 = NOTE_MASK
MINOR_SECOND = 1
MAJOR_SECOND = 2
AUGMENTED_SECOND = 3

MASK_3 = NOTE_MASK << 3
MINOR_THIRD = 1 << 3
MAJOR_THIRD = 2 << 3
AUGMENTED_THIRD = 3 << 3
DIMINISHED_THIRD = 4 << 3

MASK_4 = NOTE_MASK << 6
PERFECT_FOURTH = 1 << 6
AUGMENTED_FOURTH = 2 << 6
DIMINISHED_FOURTH = 3 << 6

MASK_5 = NOTE_MASK << 9
PERFECT_FIFTH = 1 << 9
AUGMENTED_FIFTH = 2 << 9
DIMINISHED_FIFTH = 3 << 9

MASK_6 = NOTE_MASK << 12
MINOR_SIXTH = 1 << 12
MAJOR_SIXTH = 2 << 12
AUGMENTED_SIXTH = 3 << 12

MASK_7 = NOTE_MASK << 15
MINOR_SEVENTH = 1 << 15
MAJOR_SEVENTH = 2 << 15
DIMINISHED_SEVENTH = 3 << 15

OTTAVA_ALTA_9 = 1 << 18
OTTAVA_ALTA_11 = 1 << 19
OTTAVA_ALTA_13 = 1 << 20
OTTAVA_ALTA_MASK = OTTAVA_ALTA_9 | OTTAVA_ALTA_11 | OTTAVA_ALTA_13

MASK_9 = MASK_2 | OTTAVA_ALTA_9
MINOR_NINTH = MINOR_SECOND | OTTAVA_ALTA_9
MAJOR_NINTH = MAJOR_SECOND | OTTAVA_ALTA_9
AUGMENTED_NINTH = AUGMENTED_SECOND | OTTAVA_ALTA_9

MASK_11 = MASK_4 | OTTAVA_ALTA_11
PERFECT_ELEVENTH = PERFECT_FOURTH | OTTAVA_ALTA_11
AUGMENTED_ELEVENTH = AUGMENTED_FOURTH | OTTAVA_ALTA_11

MASK_13 = MASK_6 | OTTAVA_ALTA_13
MINOR_THIRTEENTH = MINOR_SIXTH | OTTAVA_ALTA_13
MAJOR_THIRTEENTH = MAJOR_SIXTH | OTTAVA_ALTA_13
AUGMENTED_THIRTEENTH = AUGMENTED_SIXTH | OTTAVA_ALTA_13

BASIC_TYPE_MASK = 0xFF << 21
POWER_CHORD = 0b000001 << 21
TRIAD = 0b000010 << 21
SEVENTH_CHORD = 0b000110 << 21
NINTH_CHORD = 0b001110 << 21
ELEVENTH_CHORD = 0b011110 << 21
THIRTEENTH_CHORD = 0b111110 << 21

ADDED_TONE = 1 << 29
WITH_ALTERED_NOTES = 1 << 30
SLASH_OR_INVERTED = 1 << 31

# slot -> (value mask, upper-octave marker, whether the marker must be set)
_SLOTS: dict[int, tuple[int, int, bool]] = {
    2: (MASK_2, OTTAVA_ALTA_9, False),
    3: (MASK_3, 0, False),
    4: (MASK_4, OTTAVA_ALTA_11, False),
    5: (MASK_5, 0, False),
    6: (MASK_6, OTTAVA_ALTA_13, False),
    7: (MASK_7, 0, False),
    9: (MASK_2, OTTAVA_ALTA_9, True),
    11: (MASK_4, OTTAVA_ALTA_11, True),
    13: (MASK_6, OTTAVA_ALTA_13, True),
}

_INTERVAL_LOOKUP: dict[int, Interval] = {
    MINOR_SECOND: interval.m2,
    MAJOR_SECOND: interval.M2,
    AUGMENTED_SECOND: interval.A2,
    MINOR_THIRD: interval.m3,
    MAJOR_THIRD: interval.M3,
    AUGMENTED_THIRD: interval.A3,
    DIMINISHED_THIRD: interval.d3,
    PERFECT_FOURTH: interval.P4,
    AUGMENTED_FOURTH: interval.A4,
    DIMINISHED_FOURTH: interval.d4,
    PERFECT_FIFTH: interval.P5,
    AUGMENTED_FIFTH: interval.A5,
    DIMINISHED_FIFTH: interval.d5,
    MINOR_SIXTH: interval.m6,
    MAJOR_SIXTH: interval.M6,
    AUGMENTED_SIXTH: interval.A6,
    MINOR_SEVENTH: interval.m7,
    MAJOR_SEVENTH: interval.M7,
    DIMINISHED_SEVENTH: interval.d7,
    MINOR_NINTH: interval.m9,
    MAJOR_NINTH: interval.M9,
    AUGMENTED_NINTH: interval.A9,
    PERFECT_ELEVENTH: interval.P11,
    AUGMENTED_ELEVENTH: interval.A11,
    MINOR_THIRTEENTH: interval.m13,
    MAJOR_THIRTEENTH: interval.M13,
    AUGMENTED_THIRTEENTH: interval.A13,
}

_CODE_LOOKUP: dict[Interval, int] = {value: code for code, value in _INTERVAL_LOOKUP.items()}


@dataclass(frozen=True)
class ChordType:
    """A chord quality packed into an integer bitfield.

    Parameters
    ----------
    bits : int
        The packed value (see the module docstring for the layout).

    Examples
    --------
    >>> [str(i) for i in DOMINANT_SEVENTH.intervals()]
    ['M3', 'P5', 'm7']
    >>> DOMINANT_NINTH.degree(9) == interval.M9
    True
    >>> DOMINANT_NINTH.degree(2) is None
    True
    """

    bits: int

    def __or__(self, other: ChordType | int) -> ChordType:
        other_bits = other.bits if isinstance(other, ChordType) else other
        return ChordType(self.bits | other_bits)

    def masked(self, mask: int) -> int:
        return self.bits & mask

    def degree(self, slot: int) -> Interval | None:
        """Return the interval held by a degree slot, or None if it is empty.

        Parameters
        ----------
        slot : int
            Degree number: 2, 3, 4, 5, 6, 7, 9, 11 or 13.
        """
        mask, marker, upper = _SLOTS[slot]
        if marker and bool(self.bits & marker) != upper:
            return None
        value = self.bits & mask
        if value == 0:
            return None
        return _INTERVAL_LOOKUP[value | marker if upper else value]

    def has_extension(self, slot: int) -> bool:
        """Check whether the 9th, 11th or 13th slot is in use."""
        return self.degree(slot) is not None

    @property
    def basic_type(self) -> int:
        return self.bits & BASIC_TYPE_MASK

    @property
    def is_seventh_or_above(self) -> bool:
        return self.degree(7) is not None or (self.basic_type & SEVENTH_CHORD) == SEVENTH_CHORD

    def intervals(self) -> list[Interval]:
        """Return the intervals above the root, sorted by interval number."""
        intervals = [self.degree(slot) for slot in (3, 5, 7)]
        for extension, simple in ((9, 2), (11, 4), (13, 6)):
            intervals.append(self.degree(extension) or self.degree(simple))
        return sorted((i for i in intervals if i is not None), key=lambda i: i.number)

    @classmethod
    def from_intervals(cls, intervals: list[Interval], basic_type: int = 0) -> ChordType:
        """Pack a list of intervals above the root into a chord type.

        Raises
        ------
        ValueError
            If an interval has no slot code, or two intervals share a slot.
        """
        bits = basic_type
        for item in intervals:
            if item == interval.P1:
                continue
            code = _CODE_LOOKUP.get(item)
            if code is None:
                msg = f"Unknown chord interval: {item}"
                raise ValueError(msg)
            slot_bits = code & ~OTTAVA_ALTA_MASK
            slot_mask = next(mask for mask, _, _ in _SLOTS.values() if mask & slot_bits)
            if bits & slot_mask:
                msg = f"Interval {item} collides with another chord tone"
                raise ValueError(msg)
            bits |= code
        return cls(bits)

    def suffix(self) -> str:
        """Return the conventional chord-symbol suffix, or "" when unnamed."""
        return CHORD_TYPE_SUFFIXES.get(self, "")


MAJOR_TRIAD = ChordType(TRIAD | MAJOR_THIRD | PERFECT_FIFTH)
MINOR_TRIAD = ChordType(TRIAD | MINOR_THIRD | PERFECT_FIFTH)
AUGMENTED_TRIAD = ChordType(TRIAD | MAJOR_THIRD | AUGMENTED_FIFTH)
DIMINISHED_TRIAD = ChordType(TRIAD | MINOR_THIRD | DIMINISHED_FIFTH)
SUSPENDED_SECOND = ChordType(TRIAD | MAJOR_SECOND | PERFECT_FIFTH)
SUSPENDED_FOURTH = ChordType(TRIAD | PERFECT_FOURTH | PERFECT_FIFTH)
FIFTH = ChordType(POWER_CHORD | PERFECT_FIFTH)
SIXTH = MAJOR_TRIAD | ADDED_TONE | MAJOR_SIXTH
MINOR_SIXTH_CHORD = MINOR_TRIAD | ADDED_TONE | MAJOR_SIXTH
ADDED_NINTH = MAJOR_TRIAD | ADDED_TONE | MAJOR_NINTH
MINOR_ADDED_NINTH = MINOR_TRIAD | ADDED_TONE | MAJOR_NINTH
DOMINANT_SEVENTH = MAJOR_TRIAD | SEVENTH_CHORD | MINOR_SEVENTH
MAJOR_SEVENTH_CHORD = MAJOR_TRIAD | SEVENTH_CHORD | MAJOR_SEVENTH
MINOR_SEVENTH_CHORD = MINOR_TRIAD | SEVENTH_CHORD | MINOR_SEVENTH
MINOR_MAJOR_SEVENTH = MINOR_TRIAD | SEVENTH_CHORD | MAJOR_SEVENTH
AUGMENTED_SEVENTH = AUGMENTED_TRIAD | SEVENTH_CHORD | MINOR_SEVENTH
HALF_DIMINISHED_SEVENTH = DIMINISHED_TRIAD | SEVENTH_CHORD | MINOR_SEVENTH
DIMINISHED_SEVENTH_CHORD = DIMINISHED_TRIAD | SEVENTH_CHORD | DIMINISHED_SEVENTH
DOMINANT_SEVENTH_SUSPENDED_SECOND = SUSPENDED_SECOND | SEVENTH_CHORD | MINOR_SEVENTH
DOMINANT_SEVENTH_SUSPENDED_FOURTH = SUSPENDED_FOURTH | SEVENTH_CHORD | MINOR_SEVENTH
DOMINANT_NINTH = DOMINANT_SEVENTH | NINTH_CHORD | MAJOR_NINTH
MAJOR_NINTH_CHORD = MAJOR_SEVENTH_CHORD | NINTH_CHORD | MAJOR_NINTH
MINOR_NINTH_CHORD = MINOR_SEVENTH_CHORD | NINTH_CHORD | MAJOR_NINTH
DOMINANT_ELEVENTH = DOMINANT_NINTH | ELEVENTH_CHORD | PERFECT_ELEVENTH
MAJOR_ELEVENTH = MAJOR_NINTH_CHORD | ELEVENTH_CHORD | PERFECT_ELEVENTH
MINOR_ELEVENTH = MINOR_NINTH_CHORD | ELEVENTH_CHORD | PERFECT_ELEVENTH
DOMINANT_THIRTEENTH = DOMINANT_ELEVENTH | THIRTEENTH_CHORD | MAJOR_THIRTEENTH
MAJOR_THIRTEENTH_CHORD = MAJOR_ELEVENTH | THIRTEENTH_CHORD | MAJOR_THIRTEENTH
MINOR_THIRTEENTH_CHORD = MINOR_ELEVENTH | THIRTEENTH_CHORD | MAJOR_THIRTEENTH

# Chord type to pychord-style suffix
CHORD_TYPE_SUFFIXES = MappingProxyType({
    MAJOR_TRIAD: "",
    MINOR_TRIAD: "m",
    AUGMENTED_TRIAD: "aug",
    DIMINISHED_TRIAD: "dim",
    SUSPENDED_SECOND: "sus2",
    SUSPENDED_FOURTH: "sus4",
    FIFTH: "5",
    SIXTH: "6",
    MINOR_SIXTH_CHORD: "m6",
    ADDED_NINTH: "add9",
    MINOR_ADDED_NINTH: "madd9",
    DOMINANT_SEVENTH: "7",
    MAJOR_SEVENTH_CHORD: "maj7",
    MINOR_SEVENTH_CHORD: "m7",
    MINOR_MAJOR_SEVENTH: "mM7",
    AUGMENTED_SEVENTH: "aug7",
    HALF_DIMINISHED_SEVENTH: "m7-5",
    DIMINISHED_SEVENTH_CHORD: "dim7",
    DOMINANT_SEVENTH_SUSPENDED_SECOND: "7sus2",
    DOMINANT_SEVENTH_SUSPENDED_FOURTH: "7sus4",
    DOMINANT_NINTH: "9",
    MAJOR_NINTH_CHORD: "maj9",
    MINOR_NINTH_CHORD: "m9",
    DOMINANT_ELEVENTH: "11",
    MAJOR_ELEVENTH: "maj11",
    MINOR_ELEVENTH: "m11",
    DOMINANT_THIRTEENTH: "13",
    MAJOR_THIRTEENTH_CHORD: "maj13",
    MINOR_THIRTEENTH_CHORD: "m13",
})
