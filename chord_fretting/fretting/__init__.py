"""Chord fretting: enumerate, finger and rank voicings of a chord.

This module provides the resolver that turns a chord and an instrument into
ranked ``ChordDetail`` candidates, the fingering arranger and the rating
heuristic it relies on.
"""

from chord_fretting.fretting.arranger import ChordFingerArranger, arrange_fingering
from chord_fretting.fretting.dedup import remove_similar_candidates, simplify_candidates, sort_candidates
from chord_fretting.fretting.formatting import detail_to_dict, format_fingering, format_frets
from chord_fretting.fretting.models import (
    IDLE,
    MUTED,
    ChordDetail,
    ChordFingering,
    FingerRange,
    OmittedInterval,
)
from chord_fretting.fretting.presets import get_preset
from chord_fretting.fretting.rating import calculate_fingering_rating
from chord_fretting.fretting.resolver import ChordDetailResolver, get_omittable_intervals, resolve

__all__ = [
    "IDLE",
    "MUTED",
    "ChordDetail",
    "ChordDetailResolver",
    "ChordFingerArranger",
    "ChordFingering",
    "FingerRange",
    "OmittedInterval",
    "arrange_fingering",
    "calculate_fingering_rating",
    "detail_to_dict",
    "format_fingering",
    "format_frets",
    "get_omittable_intervals",
    "get_preset",
    "remove_similar_candidates",
    "resolve",
    "simplify_candidates",
    "sort_candidates",
]
