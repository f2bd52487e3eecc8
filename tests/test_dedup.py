import math

import pytest

from chord_fretting import chord_type
from chord_fretting.fretting.dedup import (
    candidate_sort_key,
    is_similar,
    remove_similar_candidates,
    simplify_candidates,
    sort_candidates,
)
from chord_fretting.fretting.models import IDLE, MUTED, ChordDetail, ChordFingering
from chord_fretting.models import Chord

E_MAJOR = Chord.of("E", chord_type.MAJOR_TRIAD)


def make(frets, rating=math.nan):
    frets = tuple(MUTED if f is None else f for f in frets)
    return ChordDetail(chord=E_MAJOR, notes=(None,) * len(frets), frets=frets, rating=rating)


def keys(details):
    return [d.fret_key for d in details]


class TestSimplify:
    def test_muted_subset_is_dropped(self):
        candidates = [
            make([None, None, 2, 1, 0, 0]),
            make([0, 2, 2, 1, 0, 0]),
            make([None, 2, 2, 1, 0, None]),
        ]
        assert keys(simplify_candidates(candidates)) == [(0, 2, 2, 1, 0, 0)]

    def test_duplicates_collapse_to_first(self):
        first = make([0, 2, 2, 1, 0, 0])
        second = make([0, 2, 2, 1, 0, 0])
        result = simplify_candidates([first, second])
        assert len(result) == 1
        assert result[0] is first

    def test_differing_fret_is_kept(self):
        candidates = [make([0, 2, 2, 1, 0, 0]), make([None, 2, 2, 1, 0, 4])]
        assert len(simplify_candidates(candidates)) == 2

    def test_order_is_preserved(self):
        candidates = [make([None, 7, 6, 4, 5, None]), make([0, 2, 2, 1, 0, 0])]
        assert keys(simplify_candidates(candidates)) == keys(candidates)


class TestSimilar:
    @pytest.mark.parametrize(
        ("first", "second", "expected"),
        [
            ((None, 2, 2, 1, 0, 0), (0, 2, 2, 1, 0, None), True),
            ((None, 2, 2, 1, 0, 0), (None, 2, 2, 1, 0, 0), True),
            ((None, 2, 2, 1, 0, 0), (None, 2, 2, 1, 0, 4), False),
            ((None, 2, None, None), (3, None, 2, None), False),
        ],
    )
    def test_is_similar(self, first, second, expected):
        assert is_similar(first, second) is expected

    def test_worse_rated_is_dropped(self):
        better = make([None, 2, 2, 1, 0, 0], rating=5)
        worse = make([0, 2, 2, 1, 0, None], rating=6)
        other = make([None, 7, 6, 4, 5, None], rating=9)
        assert remove_similar_candidates([worse, other, better]) == [other, better]

    def test_tie_keeps_earlier(self):
        first = make([None, 2, 2, 1, 0, 0], rating=5)
        second = make([0, 2, 2, 1, 0, None], rating=5)
        assert remove_similar_candidates([first, second]) == [first]


class TestSort:
    def test_by_rating_then_frets(self):
        a = make([0, 2, 2, 1, 0, 0], rating=5)
        b = make([None, 0, 2, 2, 2, 0], rating=4)
        c = make([0, 0, 2, 2, 2, 0], rating=5)
        assert sort_candidates([a, b, c]) == [b, c, a]

    def test_muted_sorts_as_zero(self):
        assert candidate_sort_key(make([None, 3, 2, 0, 1, 0], rating=1)) == (1, (0, 3, 2, 0, 1, 0))


class TestChordDetailRating:
    def test_unrated_until_fingered(self):
        detail = ChordDetail(chord=E_MAJOR, notes=(None,) * 6, frets=(0, 2, 2, 1, 0, 0))
        assert math.isnan(detail.rating)
        assert detail.fingering is None
        assert detail.fret_key == (0, 2, 2, 1, 0, 0)

    def test_fingering_sets_rating(self):
        detail = make([None, 0, 2, 2, 2, 0])
        detail.omits_rating = 1
        detail.attach_fingering(ChordFingering((IDLE,) * 5, 4.5))
        assert detail.rating == 5.5
        assert detail.fret_key[0] is None
