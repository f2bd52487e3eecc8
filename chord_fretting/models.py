"""Chord data model for chord-fretting.

This module provides the ``Chord`` entity consumed by the fretting resolver:
a root note, a packed chord type and an optional bass note.
"""

from __future__ import annotations

from dataclasses import dataclass

from chord_fretting import interval
from chord_fretting.chord_type import ChordType
from chord_fretting.interval import Interval
from chord_fretting.pitch_class import NoteName


@dataclass(frozen=True)
class ChordTone:
    """A note of a chord together with the interval it realises.

    Parameters
    ----------
    note : NoteName
        The spelled note.
    interval : Interval | None
        Interval above the root, or None for a bass note that is not a
        chord tone.
    """

    note: NoteName
    interval: Interval | None

    @property
    def is_bass_only(self) -> bool:
        return self.interval is None


@dataclass(frozen=True)
class Chord:
    """Abstract chord representation.

    Parameters
    ----------
    root : NoteName
        The root note of the chord.
    type : ChordType
        The packed chord quality.
    bass : NoteName | None
        The bass note if different from root (for slash chords).
    name : str | None
        Display name; derived from root, type and bass when omitted.

    Examples
    --------
    >>> from chord_fretting import chord_type
    >>> chord = Chord(NoteName.parse("C"), chord_type.MAJOR_TRIAD, bass=NoteName.parse("E"))
    >>> [str(n) for n in chord.get_notes()]
    ['E', 'C', 'G']
    >>> str(chord)
    'C/E'
    """

    root: NoteName
    type: ChordType
    bass: NoteName | None = None
    name: str | None = None

    @classmethod
    def of(cls, root: str, type: ChordType, bass: str | None = None) -> Chord:
        """Build a chord from note-name strings (``Chord.of("A", MINOR_TRIAD)``)."""
        return cls(
            root=NoteName.parse(root),
            type=type,
            bass=NoteName.parse(bass) if bass else None,
        )

    @property
    def has_distinct_bass(self) -> bool:
        return self.bass is not None and not self.bass.equals_pitch_class(self.root)

    def get_chord_tones(self) -> list[ChordTone]:
        """Return the chord tones, most significant first.

        The bass (if distinct from the root) comes first, then the root, then
        one tone per interval of the chord type in interval order. Tones that
        sound the same pitch class as the bass are folded into it.
        """
        tones = [ChordTone(self.root, interval.P1)]
        tones.extend(ChordTone(self.root.offset(i), i) for i in self.type.intervals())

        if not self.has_distinct_bass:
            return tones

        bass_interval = None
        result: list[ChordTone] = []
        for tone in tones:
            if tone.note.equals_pitch_class(self.bass):
                bass_interval = tone.interval
                continue
            result.append(tone)
        return [ChordTone(self.bass, bass_interval), *result]

    def get_notes(self) -> list[NoteName]:
        """Return the ordered note names (bass, root, ascending intervals)."""
        return [tone.note for tone in self.get_chord_tones()]

    def __str__(self) -> str:
        if self.name:
            return self.name
        result = f"{self.root}{self.type.suffix()}"
        if self.has_distinct_bass:
            result = f"{result}/{self.bass}"
        return result
