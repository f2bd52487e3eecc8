"""Chord fretting library for stringed instruments.

This library finds the playable voicings of a chord on a fretted
instrument, assigns a left-hand fingering to each one and ranks them by
difficulty.

Examples
--------
>>> from chord_fretting import from_pychord, get_instrument, resolve

>>> # Resolve an open E major on a standard guitar
>>> details = resolve(from_pychord("E"), get_instrument("guitar-standard"))
>>> format_frets(details[0].frets)
'022100'

>>> # Harte notation works too
>>> details = resolve(from_harte("C:maj"), get_instrument("ukulele-standard"))
>>> "0003" in [format_frets(d.frets) for d in details[:3]]
True
"""

from chord_fretting.chord_type import ChordType
from chord_fretting.config import (
    DEFAULT_WEIGHTS,
    ChordInversionTolerance,
    ChordResolvingOptions,
    OmissionRatings,
    RatingWeights,
)
from chord_fretting.converter import (
    from_harte,
    from_pychord,
    harte_quality_to_chord_type,
    parse_chord,
    pychord_quality_to_harte,
)
from chord_fretting.fretting import (
    ChordDetail,
    ChordFingering,
    FingerRange,
    OmittedInterval,
    arrange_fingering,
    calculate_fingering_rating,
    detail_to_dict,
    format_fingering,
    format_frets,
    resolve,
)
from chord_fretting.instruments import DEFAULT_INSTRUMENT, InstrumentInfo, get_instrument, instrument_groups
from chord_fretting.interval import Interval, IntervalQuality
from chord_fretting.models import Chord
from chord_fretting.pitch_class import NoteName, Pitch
from chord_fretting.tuning import Tuning, get_tuning, known_tunings

__all__ = [
    "DEFAULT_INSTRUMENT",
    "DEFAULT_WEIGHTS",
    "Chord",
    "ChordDetail",
    "ChordFingering",
    "ChordInversionTolerance",
    "ChordResolvingOptions",
    "ChordType",
    "FingerRange",
    "InstrumentInfo",
    "Interval",
    "IntervalQuality",
    "NoteName",
    "OmissionRatings",
    "OmittedInterval",
    "Pitch",
    "RatingWeights",
    "Tuning",
    "arrange_fingering",
    "calculate_fingering_rating",
    "detail_to_dict",
    "format_fingering",
    "format_frets",
    "from_harte",
    "from_pychord",
    "get_instrument",
    "get_tuning",
    "harte_quality_to_chord_type",
    "instrument_groups",
    "known_tunings",
    "parse_chord",
    "pychord_quality_to_harte",
    "resolve",
]
