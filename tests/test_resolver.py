from dataclasses import replace

import pytest

from chord_fretting import chord_type, interval
from chord_fretting.config import (
    DEFAULT_WEIGHTS,
    ChordInversionTolerance,
    ChordResolvingOptions,
    OmissionRatings,
)
from chord_fretting.fretting.models import is_muted
from chord_fretting.fretting.resolver import ChordDetailResolver, get_omittable_intervals, resolve
from chord_fretting.instruments import InstrumentInfo, get_instrument
from chord_fretting.models import Chord
from chord_fretting.tuning import Tuning

GUITAR = get_instrument("guitar-standard")
UKULELE = get_instrument("ukulele-standard")
LOW_G = get_instrument("ukulele-low-g")

CASES = [
    (Chord.of("E", chord_type.MAJOR_TRIAD), GUITAR),
    (Chord.of("A", chord_type.MINOR_SEVENTH_CHORD), GUITAR),
    (Chord.of("C", chord_type.MAJOR_TRIAD, bass="E"), GUITAR),
    (Chord.of("G", chord_type.DOMINANT_NINTH), GUITAR),
    (Chord.of("C", chord_type.MAJOR_TRIAD), UKULELE),
    (Chord.of("F", chord_type.DOMINANT_SEVENTH), UKULELE),
    (Chord.of("C", chord_type.DOMINANT_THIRTEENTH), UKULELE),
]


def omission_summary(omittable):
    return [(str(o.interval), o.rating) for o in omittable]


def sounded_pitch_classes(detail, instrument):
    return {
        (pitch.note.semitones + int(fret)) % 12
        for pitch, fret in zip(instrument.tuning.pitches, detail.frets, strict=True)
        if not is_muted(fret)
    }


def lowest_sounding_note(detail, instrument):
    for string in instrument.tuning.pitch_order():
        if detail.notes[string] is not None:
            return detail.notes[string]
    return None


class TestOmittableIntervals:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (chord_type.MAJOR_TRIAD, []),
            (chord_type.ADDED_NINTH, []),
            (chord_type.DIMINISHED_SEVENTH_CHORD, []),
            (chord_type.DOMINANT_SEVENTH, [("P5", 0)]),
            (chord_type.DOMINANT_NINTH, [("P5", 0)]),
            (chord_type.DOMINANT_ELEVENTH, [("P5", 0), ("M3", -2), ("M9", 1)]),
            (chord_type.MINOR_ELEVENTH, [("P5", 0), ("P11", 0), ("M9", 1)]),
            (chord_type.DOMINANT_THIRTEENTH, [("P5", 0), ("P11", -1), ("M9", 1)]),
            (chord_type.MINOR_THIRTEENTH_CHORD, [("P5", 0), ("P11", 0), ("M9", 1), ("m7", 1)]),
        ],
    )
    def test_omittable(self, value, expected):
        assert omission_summary(get_omittable_intervals(value)) == expected

    def test_custom_ratings(self):
        ratings = OmissionRatings(fifth=2)
        assert omission_summary(get_omittable_intervals(chord_type.DOMINANT_SEVENTH, ratings)) == [("P5", 2)]


class TestScenarios:
    def test_open_e_major(self):
        details = resolve(Chord.of("E", chord_type.MAJOR_TRIAD), GUITAR)
        best = details[0]
        assert best.fret_key == (0, 2, 2, 1, 0, 0)
        assert best.rating == pytest.approx(5.4)
        pressed = {finger.fret for finger in best.fingering.fingers if not finger.is_idle}
        assert pressed == {1, 2}
        assert not any(finger.is_barre for finger in best.fingering.fingers)

    def test_c_major_on_ukulele(self):
        details = resolve(Chord.of("C", chord_type.MAJOR_TRIAD), UKULELE)
        top = [d.fret_key for d in details[:3]]
        assert (0, 0, 0, 3) in top
        match = next(d for d in details if d.fret_key == (0, 0, 0, 3))
        assert match.rating == pytest.approx(3.2)

    def test_unplayable_stretch(self):
        options = ChordResolvingOptions(ChordInversionTolerance.NOT_ALLOWED, 11, 1)
        instrument = InstrumentInfo.custom(Tuning.of(None, "E2", "E3", "E4"), options)
        assert resolve(Chord.of("C", chord_type.MAJOR_TRIAD), instrument) == []

    def test_forced_omission(self):
        chord = Chord.of("C", chord_type.DOMINANT_THIRTEENTH)
        details = resolve(chord, UKULELE)
        assert details
        for detail in details:
            assert set(detail.omits) == {interval.P5, interval.P11, interval.M9}
            assert detail.omits_rating == 0
        assert (3, 0, 0, 0) in [d.fret_key for d in details]

    @pytest.mark.parametrize(
        ("root", "value", "shape", "rating"),
        [
            ("D", chord_type.MAJOR_TRIAD, (None, None, 0, 2, 3, 2), None),
            ("G", chord_type.MAJOR_TRIAD, (3, 2, 0, 0, 0, 3), 5.8),
            ("A", chord_type.MINOR_TRIAD, (None, 0, 2, 2, 1, 0), 5.4),
        ],
    )
    def test_open_position_shapes_rank_first(self, root, value, shape, rating):
        best = resolve(Chord.of(root, value), GUITAR)[0]
        assert best.fret_key == shape
        if rating is not None:
            assert best.rating == pytest.approx(rating)

    def test_octave_shape_above_the_twelfth_fret(self):
        keys = [d.fret_key for d in resolve(Chord.of("D", chord_type.MAJOR_TRIAD), GUITAR)]
        assert (10, 12, 12, 11, 10, 10) in keys
        assert (10, 0, 0, 11, 10, 10) not in keys


class TestBassPinning:
    def test_slash_chord_keeps_bass_lowest(self):
        details = resolve(Chord.of("C", chord_type.MAJOR_TRIAD, bass="E"), GUITAR)
        assert details
        for detail in details:
            assert str(lowest_sounding_note(detail, GUITAR)) == "E"

    def test_guitar_keeps_root_lowest(self):
        details = resolve(Chord.of("A", chord_type.MINOR_TRIAD), GUITAR)
        for detail in details:
            assert str(lowest_sounding_note(detail, GUITAR)) == "A"

    def test_not_preferred_inversion_penalty(self):
        details = resolve(Chord.of("C", chord_type.MAJOR_TRIAD), LOW_G)
        inverted = [d for d in details if str(lowest_sounding_note(d, LOW_G)) != "C"]
        assert inverted
        for detail in details:
            expected = DEFAULT_WEIGHTS.implicit_inversion if detail in inverted else 0
            assert detail.fret_rating == expected

    def test_allowed_inversion_has_no_penalty(self):
        details = resolve(Chord.of("C", chord_type.MAJOR_TRIAD), UKULELE)
        assert all(d.fret_rating == 0 for d in details)


class TestProperties:
    @pytest.mark.parametrize(("chord", "instrument"), CASES)
    def test_sounded_notes_match_chord(self, chord, instrument):
        tones = chord.get_chord_tones()
        for detail in resolve(chord, instrument):
            omitted = set(detail.omits)
            expected = {t.note.semitones for i, t in enumerate(tones) if i == 0 or t.interval not in omitted}
            assert sounded_pitch_classes(detail, instrument) == expected

    @pytest.mark.parametrize(("chord", "instrument"), CASES)
    def test_frets_and_window(self, chord, instrument):
        width = instrument.options.max_chord_fret_width
        for detail in resolve(chord, instrument):
            pressed = [f for f in detail.fret_key if f]
            assert all(f is None or f >= 0 for f in detail.fret_key)
            if pressed:
                assert max(pressed) - min(pressed) < width

    @pytest.mark.parametrize(("chord", "instrument"), CASES)
    def test_open_strings_stay_near_the_nut(self, chord, instrument):
        reach = instrument.options.max_chord_fret_width - 1
        for detail in resolve(chord, instrument):
            if 0 in detail.fret_key:
                assert all(f is None or f <= reach for f in detail.fret_key)

    @pytest.mark.parametrize(("chord", "instrument"), CASES)
    def test_fingering_is_valid(self, chord, instrument):
        for detail in resolve(chord, instrument):
            frets = detail.fret_key
            fingers = detail.fingering.fingers
            for string, fret in enumerate(frets):
                if fret:
                    covering = [f for f in fingers if f.fret == fret and f.covers(string)]
                    assert len(covering) == 1
            for finger in fingers:
                if finger.is_idle:
                    continue
                for string in range(finger.from_string, finger.to_string + 1):
                    fret = frets[string]
                    assert fret is None or fret >= finger.fret

    @pytest.mark.parametrize(("chord", "instrument"), CASES)
    def test_rating_composition(self, chord, instrument):
        for detail in resolve(chord, instrument):
            assert detail.rating == pytest.approx(detail.fingering.rating + detail.omits_rating + detail.fret_rating)

    @pytest.mark.parametrize(("chord", "instrument"), CASES)
    def test_sorted_and_unique(self, chord, instrument):
        details = resolve(chord, instrument)
        sort_keys = [(d.rating, tuple(f or 0 for f in d.fret_key)) for d in details]
        assert sort_keys == sorted(sort_keys)
        assert len({d.fret_key for d in details}) == len(details)

    def test_deterministic(self):
        chord = Chord.of("G", chord_type.DOMINANT_SEVENTH)
        first = [(d.fret_key, d.rating) for d in resolve(chord, GUITAR)]
        second = [(d.fret_key, d.rating) for d in resolve(chord, GUITAR)]
        assert first == second


class TestResolver:
    def test_custom_weights(self):
        weights = replace(DEFAULT_WEIGHTS, min_fret=0)
        details = resolve(Chord.of("E", chord_type.MAJOR_TRIAD), GUITAR, weights=weights)
        assert details[0].rating == pytest.approx(5.0)

    def test_unfingered_candidates(self):
        resolver = ChordDetailResolver(Chord.of("E", chord_type.MAJOR_TRIAD), GUITAR)
        candidates = resolver.find_candidates()
        assert (0, 2, 2, 1, 0, 0) in [c.fret_key for c in candidates]
        assert all(c.fingering is None for c in candidates)

    def test_root_fret_limit(self):
        options = replace(GUITAR.options, max_fret_to_find_root=0)
        instrument = replace(GUITAR, options=options)
        details = resolve(Chord.of("E", chord_type.MAJOR_TRIAD), instrument)
        assert details
        assert all(d.fret_key[0] == 0 for d in details)
