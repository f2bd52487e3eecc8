"""Resolving options and rating weights.

Every heuristic constant used by the fretting search and the difficulty
rating lives here so callers can tune them with ``dataclasses.replace``
instead of patching module globals.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum


class ChordInversionTolerance(Enum):
    """How an instrument treats voicings whose lowest note is not the bass/root."""

    NOT_ALLOWED = "not_allowed"
    NOT_PREFERRED = "not_preferred"
    ALLOWED = "allowed"


@dataclass(frozen=True)
class ChordResolvingOptions:
    """Search bounds for an instrument.

    Parameters
    ----------
    chord_inversion_tolerance : ChordInversionTolerance
        Whether the bass note is pinned to the lowest sounding string.
    max_fret_to_find_root : int
        Highest fret at which the most significant note may anchor a voicing.
    max_chord_fret_width : int
        Hand stretch in frets; pressed frets of one voicing stay within
        ``max_chord_fret_width - 1`` of each other.
    """

    chord_inversion_tolerance: ChordInversionTolerance = ChordInversionTolerance.NOT_ALLOWED
    max_fret_to_find_root: int = 11
    max_chord_fret_width: int = 4

    @property
    def pins_bass(self) -> bool:
        return self.chord_inversion_tolerance is ChordInversionTolerance.NOT_ALLOWED


@dataclass(frozen=True)
class OmissionRatings:
    """Ratings attached to omittable chord tones (negative = preferred to omit).

    Parameters
    ----------
    fifth : float
        Perfect fifth of a seventh (or extended) chord.
    eleventh_in_major_thirteenth : float
        Perfect 11th of a 13th chord with a major third (clashes with it).
    eleventh_in_minor_thirteenth : float
        Perfect 11th of a 13th chord with a minor third.
    ninth : float
        Major 9th of an 11th or 13th chord.
    seventh_in_minor_thirteenth : float
        Minor 7th of a minor 13th chord.
    third_under_eleventh : float
        Major third of an 11th chord (clashes with the perfect 11th).
    eleventh_in_minor_eleventh : float
        Perfect 11th of a minor 11th chord.
    """

    fifth: float = 0
    eleventh_in_major_thirteenth: float = -1
    eleventh_in_minor_thirteenth: float = 0
    ninth: float = 1
    seventh_in_minor_thirteenth: float = 1
    third_under_eleventh: float = -2
    eleventh_in_minor_eleventh: float = 0


@dataclass(frozen=True)
class RatingWeights:
    """Weights of the difficulty rating (lower rating = easier voicing).

    Per-finger tuples are indexed thumb, index, middle, ring, pinky.
    """

    fret_span: float = 1
    wide_span_threshold: int = 3
    wide_span_penalty: float = 5
    min_fret: float = 0.4
    string_break: float = 5
    single_press: tuple[float, ...] = (2, 1, 1, 1, 2.5)
    barre: tuple[float, ...] = (0, 0.4, 3, 2, 4)
    finger_gap: tuple[float, ...] = (0, 0, 1.5, 2, 0.5)
    max_barre_range: tuple[float, ...] = (0, math.inf, 3, 3, 2)
    thumb_max_column: int = 2
    implicit_inversion: float = 5
    omissions: OmissionRatings = field(default_factory=OmissionRatings)


DEFAULT_WEIGHTS = RatingWeights()

GUITAR_OPTIONS = ChordResolvingOptions(ChordInversionTolerance.NOT_ALLOWED, 11, 4)
UKULELE_OPTIONS = ChordResolvingOptions(ChordInversionTolerance.ALLOWED, 11, 5)
UKULELE_NOT_PREFERRED_INVERSION_OPTIONS = ChordResolvingOptions(ChordInversionTolerance.NOT_PREFERRED, 11, 5)
BANJO_OPTIONS = ChordResolvingOptions(ChordInversionTolerance.ALLOWED, 11, 5)
MANDOLIN_OPTIONS = ChordResolvingOptions(ChordInversionTolerance.ALLOWED, 11, 5)
