"""Open-string tunings for fretted instruments.

This module provides the ``Tuning`` value type and the read-only preset
tables for the guitar, ukulele, tenor banjo and mandolin families.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from chord_fretting.pitch_class import Pitch, pitches

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True)
class Tuning:
    """Ordered open-string pitches of an instrument.

    Parameters
    ----------
    name : str | None
        Display name of the tuning.
    pitches : tuple[Pitch, ...]
        Open-string pitches in physical string order (conventionally the
        lowest-pitched string first, but reentrant tunings break that rule).

    Examples
    --------
    >>> tuning = Tuning("Soprano Standard", pitches("G4", "C4", "E4", "A4"))
    >>> tuning.pitch_order()
    (1, 2, 0, 3)
    """

    name: str | None
    pitches: tuple[Pitch, ...]

    @classmethod
    def of(cls, name: str | None, *texts: str) -> Tuning:
        return cls(name, pitches(*texts))

    @property
    def string_count(self) -> int:
        return len(self.pitches)

    def pitch_order(self) -> tuple[int, ...]:
        """Return the string indices sorted by absolute pitch (stable)."""
        return tuple(sorted(range(self.string_count), key=lambda i: self.pitches[i].midi))

    def equals(self, other: Tuning | None) -> bool:
        """Check that both tunings have the same pitches, ignoring names."""
        return other is not None and self.pitches == other.pitches

    def in_octave_equals(self, other: Tuning | None) -> bool:
        """Check that both tunings have the same note names, ignoring octaves."""
        if other is None or other.string_count != self.string_count:
            return False
        return all(
            a.note.equals_pitch_class(b.note) for a, b in zip(self.pitches, other.pitches, strict=True)
        )

    def descriptor(self) -> str:
        """Return the pitches as text, e.g. "E2 A2 D3 G3 B3 E4"."""
        return " ".join(str(p) for p in self.pitches)


GUITAR_TUNINGS: tuple[Tuning, ...] = (
    Tuning.of("Standard", "E2", "A2", "D3", "G3", "B3", "E4"),
    Tuning.of("Standard E♭", "Eb2", "Ab2", "Db3", "Gb3", "Bb3", "Eb4"),
    Tuning.of("Standard D", "D2", "G2", "C3", "F3", "A3", "D4"),
    Tuning.of("Drop D", "D2", "A2", "D3", "G3", "B3", "E4"),
    Tuning.of("Drop C", "C2", "G2", "C3", "F3", "A3", "D4"),
    Tuning.of("Drop B", "B1", "F#2", "B2", "E3", "G#3", "C#4"),
    Tuning.of("Double Drop D", "D2", "A2", "D3", "G3", "B3", "D4"),
    Tuning.of("Open A", "E2", "A2", "C#3", "E3", "A3", "E4"),
    Tuning.of("Open C", "C2", "G2", "C3", "G3", "C4", "E4"),
    Tuning.of("Open D", "D2", "A2", "D3", "F#3", "A3", "D4"),
    Tuning.of("Open E", "E2", "B2", "E3", "G#3", "B3", "E4"),
    Tuning.of("Open G", "D2", "G2", "D3", "G3", "B3", "D4"),
    Tuning.of("DADGAD", "D2", "A2", "D3", "G3", "A3", "D4"),
    Tuning.of("All Fourths", "E2", "A2", "D3", "G3", "C4", "F4"),
    Tuning.of("Baritone A", "A1", "D2", "G2", "C3", "E3", "A3"),
    Tuning.of("Baritone B♭", "Bb1", "Eb2", "Ab2", "Db3", "F3", "Bb3"),
    Tuning.of("Baritone B", "B1", "E2", "A2", "D3", "F#3", "B3"),
)

UKULELE_TUNINGS: tuple[Tuning, ...] = (
    Tuning.of("Soprano Standard", "G4", "C4", "E4", "A4"),
    Tuning.of("Soprano Standard A", "A4", "D4", "F#4", "B4"),
    Tuning.of("Low G", "G3", "C4", "E4", "A4"),
    Tuning.of("Baritone", "D3", "G3", "B3", "E4"),
    Tuning.of("Guitalele", "A2", "D3", "G3", "C4", "E4", "A4"),
)

BANJO_TUNINGS: tuple[Tuning, ...] = (
    Tuning.of("Tenor Fifth", "C3", "G3", "D4", "A4"),
    Tuning.of("Tenor Chicago", "D3", "G3", "B3", "E4"),
    Tuning.of("Tenor Irish", "G2", "D3", "A3", "E4"),
)

MANDOLIN_TUNINGS: tuple[Tuning, ...] = (
    Tuning.of("Standard", "G3", "D4", "A4", "E5"),
    Tuning.of("Mandola", "C3", "G3", "D4", "A4"),
    Tuning.of("Tenor", "G2", "D3", "A3", "E4"),
    Tuning.of("Mandocello", "C2", "G2", "D3", "A3"),
    Tuning.of("Mandobass", "E1", "A1", "D2", "G2"),
)


def _by_name(tunings: tuple[Tuning, ...]) -> Mapping[str, Tuning]:
    return MappingProxyType({t.name.lower(): t for t in tunings if t.name})


KNOWN_TUNINGS: Mapping[str, Mapping[str, Tuning]] = MappingProxyType({
    "guitar": _by_name(GUITAR_TUNINGS),
    "ukulele": _by_name(UKULELE_TUNINGS),
    "banjo": _by_name(BANJO_TUNINGS),
    "mandolin": _by_name(MANDOLIN_TUNINGS),
})


def known_tunings(family: str) -> Mapping[str, Tuning]:
    """Return the preset tunings of an instrument family, keyed by lower-case name.

    Raises
    ------
    ValueError
        If the family is not recognized.
    """
    if family in KNOWN_TUNINGS:
        return KNOWN_TUNINGS[family]
    msg = f"Unknown instrument family: {family}"
    raise ValueError(msg)


def get_tuning(family: str, name: str) -> Tuning:
    """Look up a preset tuning by family and (case-insensitive) name.

    Examples
    --------
    >>> get_tuning("guitar", "Drop D").descriptor()
    'D2 A2 D3 G3 B3 E4'

    Raises
    ------
    ValueError
        If the family or tuning name is not recognized.
    """
    tunings = known_tunings(family)
    key = name.lower()
    if key in tunings:
        return tunings[key]
    msg = f"Unknown tuning: {family}/{name}"
    raise ValueError(msg)
