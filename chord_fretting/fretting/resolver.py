"""Fretting resolver: enumerate, finger, prune and rank chord voicings.

The resolver turns a ``Chord`` and an ``InstrumentInfo`` into a ranked
list of ``ChordDetail`` candidates:

1. choose which omittable chord tones to leave out (every subset);
2. for every starting string, search string by string for fret
   assignments that sound every remaining note inside the hand window;
3. drop voicings that are a muted subset of another one;
4. arrange a fingering for each survivor (unplayable ones are dropped);
5. drop voicings similar to a better-rated one and sort by rating.

Examples
--------
>>> from chord_fretting import chord_type
>>> from chord_fretting.instruments import get_instrument
>>> from chord_fretting.models import Chord
>>> details = resolve(Chord.of("E", chord_type.MAJOR_TRIAD), get_instrument("guitar-standard"))
>>> [int(f) for f in details[0].frets]
[0, 2, 2, 1, 0, 0]
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chord_fretting import interval
from chord_fretting.config import DEFAULT_WEIGHTS, ChordInversionTolerance, OmissionRatings, RatingWeights
from chord_fretting.fretting.arranger import arrange_fingering
from chord_fretting.fretting.dedup import remove_similar_candidates, simplify_candidates, sort_candidates
from chord_fretting.fretting.models import MUTED, ChordDetail, OmittedInterval

if TYPE_CHECKING:
    from chord_fretting.chord_type import ChordType
    from chord_fretting.instruments import InstrumentInfo
    from chord_fretting.models import Chord, ChordTone
    from chord_fretting.pitch_class import NoteName

logger = logging.getLogger(__name__)


def get_omittable_intervals(
    type: ChordType,
    ratings: OmissionRatings | None = None,
) -> list[OmittedInterval]:
    """List the chord tones that may be left out, with their omission ratings.

    Parameters
    ----------
    type : ChordType
        The chord type.
    ratings : OmissionRatings | None
        Omission ratings, by default ``OmissionRatings()``.

    Returns
    -------
    list[OmittedInterval]
        Omittable intervals; independent choices, any subset may be omitted.

    Examples
    --------
    >>> from chord_fretting import chord_type
    >>> [str(o.interval) for o in get_omittable_intervals(chord_type.DOMINANT_THIRTEENTH)]
    ['P5', 'P11', 'M9']
    >>> get_omittable_intervals(chord_type.MAJOR_TRIAD)
    []
    """
    ratings = ratings or OmissionRatings()
    minor = type.degree(3) == interval.m3
    result = []

    if type.is_seventh_or_above and type.degree(5) == interval.P5:
        result.append(OmittedInterval(interval.P5, ratings.fifth))

    if type.has_extension(13):
        if type.degree(11) == interval.P11:
            rating = ratings.eleventh_in_minor_thirteenth if minor else ratings.eleventh_in_major_thirteenth
            result.append(OmittedInterval(interval.P11, rating))
        if type.degree(9) == interval.M9:
            result.append(OmittedInterval(interval.M9, ratings.ninth))
        if minor and type.degree(7) == interval.m7:
            result.append(OmittedInterval(interval.m7, ratings.seventh_in_minor_thirteenth))
    elif type.has_extension(11):
        if type.degree(11) == interval.P11:
            if minor:
                result.append(OmittedInterval(interval.P11, ratings.eleventh_in_minor_eleventh))
            elif type.degree(3) == interval.M3:
                result.append(OmittedInterval(interval.M3, ratings.third_under_eleventh))
        if type.degree(9) == interval.M9:
            result.append(OmittedInterval(interval.M9, ratings.ninth))

    return result


class ChordDetailResolver:
    """Resolve the playable voicings of one chord on one instrument.

    Parameters
    ----------
    chord : Chord
        The chord to voice.
    instrument : InstrumentInfo
        Tuning and resolving options.
    weights : RatingWeights
        Rating weights used for omissions, inversions and fingerings.
    """

    def __init__(self, chord: Chord, instrument: InstrumentInfo, *, weights: RatingWeights = DEFAULT_WEIGHTS) -> None:
        self.chord = chord
        self.instrument = instrument
        self.options = instrument.options
        self.weights = weights

        tuning = instrument.tuning
        # position in pitch order -> physical string index
        self.string_order = tuning.pitch_order()
        self.open_semitones = [tuning.pitches[i].note.semitones for i in self.string_order]
        self.pins_bass = self.options.pins_bass or chord.has_distinct_bass

    @property
    def string_count(self) -> int:
        return len(self.string_order)

    def resolve(self) -> list[ChordDetail]:
        """Return the fingered candidates, best first."""
        candidates = self.find_candidates()
        candidates = simplify_candidates(candidates)

        arranged = []
        for candidate in candidates:
            fingering = arrange_fingering(candidate.frets, weights=self.weights)
            if fingering is None:
                continue
            candidate.attach_fingering(fingering)
            arranged.append(candidate)

        result = sort_candidates(remove_similar_candidates(arranged))
        logger.debug(
            "Resolved %s on %s: %d enumerated, %d fingered, %d kept",
            self.chord,
            self.instrument.key,
            len(candidates),
            len(arranged),
            len(result),
        )
        return result

    def find_candidates(self) -> list[ChordDetail]:
        """Enumerate unfingered voicings over every omission subset and starting string."""
        tones = self.chord.get_chord_tones()
        # the bass is never omitted
        present = {tone.interval for tone in tones[1:]}
        omittable = [
            o for o in get_omittable_intervals(self.chord.type, self.weights.omissions) if o.interval in present
        ]
        least_note_count = len(tones) - len(omittable)

        candidates: list[ChordDetail] = []
        for mask in range(1 << len(omittable)):
            omitted = tuple(o for i, o in enumerate(omittable) if mask & (1 << i))
            notes = self._remaining_notes(tones, omitted)
            if len(notes) > self.string_count:
                logger.debug("Skipping omissions %s: %d notes on %d strings", omitted, len(notes), self.string_count)
                continue
            for start in range(self.string_count - least_note_count + 1):
                self._search_from(candidates, start, notes, omitted)
        return candidates

    @staticmethod
    def _remaining_notes(tones: list[ChordTone], omitted: tuple[OmittedInterval, ...]) -> list[NoteName]:
        skipped = {o.interval for o in omitted}
        return [tone.note for i, tone in enumerate(tones) if i == 0 or tone.interval not in skipped]

    def _natural_fret(self, note: NoteName, position: int) -> int:
        return (note.semitones - self.open_semitones[position]) % 12

    def _fret_in_window(self, note: NoteName, position: int, low: int, high: int) -> int | None:
        fret = self._natural_fret(note, position)
        if low <= fret <= high:
            return fret
        if low <= fret + 12 <= high:
            return fret + 12
        return None

    def _search_from(
        self,
        candidates: list[ChordDetail],
        start: int,
        notes: list[NoteName],
        omitted: tuple[OmittedInterval, ...],
    ) -> None:
        """Search voicings whose first note sits on the ``start``-th lowest string."""
        root_fret = self._natural_fret(notes[0], start)
        if root_fret > self.options.max_fret_to_find_root:
            return

        reach = self.options.max_chord_fret_width - 1
        frets: list[float] = [MUTED] * self.string_count
        sounded: list[NoteName | None] = [None] * self.string_count
        frets[start] = root_fret
        sounded[start] = notes[0]

        if self.pins_bass:
            order = list(range(start + 1, self.string_count))
        else:
            order = [i for i in range(self.string_count) if i != start]

        self._assign(
            candidates,
            frets,
            sounded,
            order,
            0,
            notes,
            frozenset(range(1, len(notes))),
            root_fret - reach,
            root_fret + reach,
            omitted,
        )

    def _assign(
        self,
        candidates: list[ChordDetail],
        frets: list[float],
        sounded: list[NoteName | None],
        order: list[int],
        depth: int,
        notes: list[NoteName],
        remaining: frozenset[int],
        low: int,
        high: int,
        omitted: tuple[OmittedInterval, ...],
    ) -> None:
        if len(remaining) > len(order) - depth:
            return
        if depth == len(order):
            candidates.append(self._make_detail(frets, sounded, notes, omitted))
            return

        position = order[depth]
        reach = self.options.max_chord_fret_width - 1
        for index, note in enumerate(notes):
            fret = self._fret_in_window(note, position, low, high)
            if fret is None:
                continue
            frets[position] = fret
            sounded[position] = note
            narrowed = max(low, fret - reach), min(high, fret + reach)
            self._assign(candidates, frets, sounded, order, depth + 1, notes, remaining - {index}, *narrowed, omitted)

        frets[position] = MUTED
        sounded[position] = None
        self._assign(candidates, frets, sounded, order, depth + 1, notes, remaining, low, high, omitted)

    def _make_detail(
        self,
        frets: list[float],
        sounded: list[NoteName | None],
        notes: list[NoteName],
        omitted: tuple[OmittedInterval, ...],
    ) -> ChordDetail:
        physical_frets: list[float] = [MUTED] * self.string_count
        physical_notes: list[NoteName | None] = [None] * self.string_count
        for position, string in enumerate(self.string_order):
            physical_frets[string] = frets[position]
            physical_notes[string] = sounded[position]

        fret_rating = 0.0
        if self.options.chord_inversion_tolerance is ChordInversionTolerance.NOT_PREFERRED:
            lowest = next(note for note in sounded if note is not None)
            if not lowest.equals_pitch_class(notes[0]):
                fret_rating = self.weights.implicit_inversion

        return ChordDetail(
            chord=self.chord,
            notes=tuple(physical_notes),
            frets=tuple(physical_frets),
            omitted_intervals=omitted,
            omits_rating=sum(o.rating for o in omitted),
            fret_rating=fret_rating,
        )


def resolve(
    chord: Chord,
    instrument: InstrumentInfo,
    *,
    weights: RatingWeights = DEFAULT_WEIGHTS,
) -> list[ChordDetail]:
    """Resolve the ranked, fingered voicings of a chord on an instrument.

    Parameters
    ----------
    chord : Chord
        The chord to voice.
    instrument : InstrumentInfo
        Tuning and resolving options.
    weights : RatingWeights, optional
        Rating weights.

    Returns
    -------
    list[ChordDetail]
        Candidates sorted by rating (best first); empty when the chord cannot
        be played on the instrument.
    """
    return ChordDetailResolver(chord, instrument, weights=weights).resolve()
