"""Chord notation adapters.

This module builds ``Chord`` objects from pychord's simplified notation
(e.g., "Gm7", "C/E") and from Harte notation (e.g., "G:min7", "C:maj/3").
Both notations are normalised through their Harte shorthand, which is then
mapped onto a packed ``ChordType``.
"""

from __future__ import annotations

import logging
import re

from chord_fretting import chord_type
from chord_fretting.chord_type import ChordType
from chord_fretting.interval import Interval, IntervalQuality, is_valid
from chord_fretting.models import Chord
from chord_fretting.pitch_class import NOTE_RE, NoteName

logger = logging.getLogger(__name__)

# Mapping from pychord quality names to Harte shorthand
PYCHORD_TO_HARTE_QUALITY: dict[str, str] = {
    "": "maj",
    "m": "min",
    "m7": "min7",
    "7": "7",
    "maj7": "maj7",
    "M7": "maj7",
    "dim": "dim",
    "dim7": "dim7",
    "aug": "aug",
    "aug7": "aug7",
    "7+5": "aug7",
    "m7-5": "hdim7",
    "m7b5": "hdim7",
    "sus4": "sus4",
    "sus2": "sus2",
    "sus": "sus4",
    "7sus4": "7sus4",
    "7sus2": "7sus2",
    "sus47": "sus4(b7)",
    "sus27": "sus2(b7)",
    "add9": "maj(9)",
    "madd9": "min(9)",
    "9": "9",
    "m9": "min9",
    "maj9": "maj9",
    "M9": "maj9",
    "11": "11",
    "m11": "min11",
    "maj11": "maj11",
    "13": "13",
    "m13": "min13",
    "maj13": "maj13",
    "6": "maj6",
    "m6": "min6",
    "mmaj7": "minmaj7",
    "mM7": "minmaj7",
    "5": "5",
}

# Mapping from Harte shorthand to packed chord types
HARTE_QUALITY_TO_CHORD_TYPE: dict[str, ChordType] = {
    "maj": chord_type.MAJOR_TRIAD,
    "min": chord_type.MINOR_TRIAD,
    "dim": chord_type.DIMINISHED_TRIAD,
    "aug": chord_type.AUGMENTED_TRIAD,
    "sus2": chord_type.SUSPENDED_SECOND,
    "sus4": chord_type.SUSPENDED_FOURTH,
    "5": chord_type.FIFTH,
    "maj6": chord_type.SIXTH,
    "min6": chord_type.MINOR_SIXTH_CHORD,
    "maj(9)": chord_type.ADDED_NINTH,
    "min(9)": chord_type.MINOR_ADDED_NINTH,
    "7": chord_type.DOMINANT_SEVENTH,
    "maj7": chord_type.MAJOR_SEVENTH_CHORD,
    "min7": chord_type.MINOR_SEVENTH_CHORD,
    "minmaj7": chord_type.MINOR_MAJOR_SEVENTH,
    "aug7": chord_type.AUGMENTED_SEVENTH,
    "hdim7": chord_type.HALF_DIMINISHED_SEVENTH,
    "dim7": chord_type.DIMINISHED_SEVENTH_CHORD,
    "7sus2": chord_type.DOMINANT_SEVENTH_SUSPENDED_SECOND,
    "sus2(b7)": chord_type.DOMINANT_SEVENTH_SUSPENDED_SECOND,
    "7sus4": chord_type.DOMINANT_SEVENTH_SUSPENDED_FOURTH,
    "sus4(b7)": chord_type.DOMINANT_SEVENTH_SUSPENDED_FOURTH,
    "9": chord_type.DOMINANT_NINTH,
    "maj9": chord_type.MAJOR_NINTH_CHORD,
    "min9": chord_type.MINOR_NINTH_CHORD,
    "11": chord_type.DOMINANT_ELEVENTH,
    "maj11": chord_type.MAJOR_ELEVENTH,
    "min11": chord_type.MINOR_ELEVENTH,
    "13": chord_type.DOMINANT_THIRTEENTH,
    "maj13": chord_type.MAJOR_THIRTEENTH_CHORD,
    "min13": chord_type.MINOR_THIRTEENTH_CHORD,
}

DEGREE_RE = re.compile(r"^([b#]*)(\d+)$")


def pychord_quality_to_harte(pychord_quality: str) -> str:
    """Convert a pychord quality string to Harte shorthand.

    Parameters
    ----------
    pychord_quality : str
        The pychord quality (e.g., "m7", "maj7", "dim").

    Returns
    -------
    str
        The equivalent Harte shorthand (e.g., "min7", "maj7", "dim").

    Raises
    ------
    ValueError
        If the quality is not recognized.

    Examples
    --------
    >>> pychord_quality_to_harte("m7")
    'min7'
    >>> pychord_quality_to_harte("")
    'maj'
    """
    if pychord_quality in PYCHORD_TO_HARTE_QUALITY:
        return PYCHORD_TO_HARTE_QUALITY[pychord_quality]
    msg = f"Unknown pychord quality: {pychord_quality}"
    raise ValueError(msg)


def harte_quality_to_chord_type(harte_quality: str) -> ChordType:
    """Convert a Harte shorthand to a packed chord type.

    Raises
    ------
    ValueError
        If the quality is not recognized.

    Examples
    --------
    >>> harte_quality_to_chord_type("min7").suffix()
    'm7'
    """
    if harte_quality in HARTE_QUALITY_TO_CHORD_TYPE:
        return HARTE_QUALITY_TO_CHORD_TYPE[harte_quality]
    msg = f"Unknown Harte quality: {harte_quality}"
    raise ValueError(msg)


def degree_to_interval(degree: str) -> Interval:
    """Parse a Harte scale degree ("3", "b7", "#11") into an interval.

    Raises
    ------
    ValueError
        If the degree is malformed.

    Examples
    --------
    >>> str(degree_to_interval("b7"))
    'm7'
    >>> str(degree_to_interval("#4"))
    'A4'
    """
    match = DEGREE_RE.match(degree)
    if match is None or int(match.group(2)) < 1:
        msg = f"Unknown Harte degree: {degree}"
        raise ValueError(msg)

    accidentals, number = match.groups()
    number = int(number) - 1
    natural_quality = IntervalQuality.PERFECT if is_valid(number, IntervalQuality.PERFECT) else IntervalQuality.MAJOR
    shift = accidentals.count("#") - accidentals.count("b")
    semitones = Interval(number, natural_quality).semitone_offset + shift
    return Interval.from_semitones(semitones, degree=number)


def _resolve_bass(root: NoteName, bass: str | None) -> NoteName | None:
    """Resolve a bass given either as a note name or as a degree above the root."""
    if not bass:
        return None
    if NOTE_RE.match(bass):
        return NoteName.parse(bass)
    return root.offset(degree_to_interval(bass).simple)


def from_pychord(chord_str: str) -> Chord:
    """Parse a pychord notation string into a Chord object.

    Parameters
    ----------
    chord_str : str
        Chord in pychord notation (e.g., "Gm7", "C", "F#dim7/A").

    Returns
    -------
    Chord
        Chord ready to be fretted.

    Raises
    ------
    ValueError
        If the chord quality has no fretting counterpart.

    Examples
    --------
    >>> chord = from_pychord("Gm7")
    >>> str(chord.root)
    'G'
    >>> chord.type.suffix()
    'm7'
    """
    from pychord import Chord as PyChord

    pc = PyChord(chord_str)
    harte_quality = pychord_quality_to_harte(str(pc.quality))
    root = NoteName.parse(pc.root)

    return Chord(
        root=root,
        type=harte_quality_to_chord_type(harte_quality),
        bass=_resolve_bass(root, pc.on),
    )


def from_harte(chord_str: str) -> Chord:
    """Parse a Harte notation string into a Chord object.

    Parameters
    ----------
    chord_str : str
        Chord in Harte notation (e.g., "G:min7", "C:maj", "C:maj/3").

    Returns
    -------
    Chord
        Chord ready to be fretted.

    Raises
    ------
    ValueError
        If the shorthand or bass degree is not recognized.

    Examples
    --------
    >>> chord = from_harte("C:maj/3")
    >>> str(chord)
    'C/E'
    """
    from harte.harte import Harte

    hc = Harte(chord_str)
    root = NoteName.parse(hc.get_root())
    shorthand = hc.get_shorthand()

    bass = None
    if "/" in chord_str:
        bass = chord_str.split("/")[-1]

    return Chord(
        root=root,
        type=harte_quality_to_chord_type(shorthand if shorthand else "maj"),
        bass=_resolve_bass(root, bass),
    )


def parse_chord(chord_str: str) -> Chord:
    """Parse a chord in either notation; a colon selects Harte."""
    if ":" in chord_str:
        chord = from_harte(chord_str)
    else:
        chord = from_pychord(chord_str)
    logger.debug("Parsed %r as %s (%s)", chord_str, chord, ", ".join(str(n) for n in chord.get_notes()))
    return chord
