"""Note names, pitch classes and absolute pitches.

This module provides spelled note names (``NoteName``) that keep their
letter and accidental so chord tones are spelled correctly, plus absolute
pitches (``Pitch``) used for open-string tunings.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from chord_fretting.interval import Interval

LETTERS = "CDEFGAB"

# Natural note name to pitch class (0-11, where C=0)
LETTER_TO_PC: dict[str, int] = {
    "C": 0,
    "D": 2,
    "E": 4,
    "F": 5,
    "G": 7,
    "A": 9,
    "B": 11,
}

ACCIDENTAL_TO_OFFSET: dict[str, int] = {
    "": 0,
    "#": 1,
    "♯": 1,
    "##": 2,
    "x": 2,
    "b": -1,
    "♭": -1,
    "bb": -2,
}

OFFSET_TO_ACCIDENTAL: dict[int, str] = {
    -2: "bb",
    -1: "b",
    0: "",
    1: "#",
    2: "##",
}

NOTE_RE = re.compile(r"^([A-Ga-g])(##|bb|[#♯b♭x]?)$")
PITCH_RE = re.compile(r"^([A-Ga-g](?:##|bb|[#♯b♭x]?))(-?\d+)$")


@dataclass(frozen=True)
class NoteName:
    """A spelled note name without octave.

    Parameters
    ----------
    letter : str
        The natural letter ("C" to "B").
    accidental : int
        Alteration in semitones (-2 to 2).

    Examples
    --------
    >>> NoteName.parse("Bb").semitones
    10
    >>> str(NoteName("F", 1))
    'F#'
    """

    letter: str
    accidental: int = 0

    @classmethod
    def parse(cls, text: str) -> NoteName:
        """Parse a note name such as "C", "F#" or "Bb".

        Raises
        ------
        ValueError
            If the note name is not recognized.
        """
        match = NOTE_RE.match(text.strip())
        if match is None:
            msg = f"Unknown note: {text}"
            raise ValueError(msg)
        letter, accidental = match.groups()
        return cls(letter.upper(), ACCIDENTAL_TO_OFFSET[accidental])

    @property
    def semitones(self) -> int:
        """Pitch class (0-11, where C=0)."""
        return (LETTER_TO_PC[self.letter] + self.accidental) % 12

    @property
    def letter_index(self) -> int:
        return LETTERS.index(self.letter)

    def offset(self, interval: Interval) -> NoteName:
        """Return the note ``interval`` above this one, spelled by degree.

        Examples
        --------
        >>> from chord_fretting import interval
        >>> str(NoteName.parse("E").offset(interval.M3))
        'G#'
        >>> str(NoteName.parse("F").offset(interval.m7))
        'Eb'
        """
        letter = LETTERS[(self.letter_index + interval.number) % 7]
        target = (self.semitones + interval.semitone_offset) % 12
        accidental = (target - LETTER_TO_PC[letter] + 6) % 12 - 6
        return NoteName(letter, accidental)

    def interval_to(self, other: NoteName) -> Interval:
        """Return the simple interval from this note up to ``other``."""
        degree = (other.letter_index - self.letter_index) % 7
        semitones = (other.semitones - self.semitones) % 12
        if degree == 0 and semitones == 11:
            # A diminished unison reads as a diminished octave upwards
            degree = 7
        return Interval.from_semitones(semitones, degree)

    def equals_pitch_class(self, other: NoteName) -> bool:
        """Check enharmonic equivalence."""
        return self.semitones == other.semitones

    def __str__(self) -> str:
        return self.letter + OFFSET_TO_ACCIDENTAL.get(self.accidental, "")


@dataclass(frozen=True)
class Pitch:
    """A note name at a specific octave (scientific pitch notation).

    Examples
    --------
    >>> Pitch.parse("E2").midi
    40
    >>> Pitch.parse("A4").midi
    69
    """

    note: NoteName
    octave: int

    @classmethod
    def parse(cls, text: str) -> Pitch:
        """Parse a pitch such as "E2" or "Bb3".

        Raises
        ------
        ValueError
            If the pitch is not recognized.
        """
        match = PITCH_RE.match(text.strip())
        if match is None:
            msg = f"Unknown pitch: {text}"
            raise ValueError(msg)
        note, octave = match.groups()
        return cls(NoteName.parse(note), int(octave))

    @property
    def midi(self) -> int:
        """MIDI note number, used to order strings by absolute pitch."""
        return (self.octave + 1) * 12 + LETTER_TO_PC[self.note.letter] + self.note.accidental

    def __str__(self) -> str:
        return f"{self.note}{self.octave}"


def note_to_pc(note: str) -> int:
    """Convert a note name to pitch class (0-11).

    Parameters
    ----------
    note : str
        Note name (e.g., "C", "F#", "Bb").

    Returns
    -------
    int
        Pitch class (0-11, where C=0).

    Raises
    ------
    ValueError
        If the note name is not recognized.

    Examples
    --------
    >>> note_to_pc("F#")
    6
    >>> note_to_pc("Cb")
    11
    """
    return NoteName.parse(note).semitones


def pitches(*texts: str) -> tuple[Pitch, ...]:
    """Parse several pitches at once (``pitches("E2", "A2")``)."""
    return tuple(Pitch.parse(text) for text in texts)
