"""Candidate pruning and ordering.

Two passes remove redundant voicings:

* ``simplify_candidates`` drops a voicing when another one plays the same
  frets on all of its strings plus at least one more (and collapses exact
  duplicates).
* ``remove_similar_candidates`` keeps only the best-rated voicing among
  those that agree on every string they both sound.
"""

from __future__ import annotations

from itertools import combinations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from chord_fretting.fretting.models import ChordDetail

FretKey = tuple["int | None", ...]


def is_similar(first: FretKey, second: FretKey) -> bool:
    """Check that two patterns share a sounding string and differ only where one is muted.

    Examples
    --------
    >>> is_similar((None, 3, 2, 0), (3, 3, 2, None))
    True
    >>> is_similar((None, 3, None, None), (3, None, 2, None))
    False
    """
    shared = False
    for a, b in zip(first, second, strict=True):
        if a is None or b is None:
            continue
        if a != b:
            return False
        shared = True
    return shared


def _muted_subsets(key: FretKey) -> set[FretKey]:
    sounding = [i for i, fret in enumerate(key) if fret is not None]
    subsets = set()
    for count in range(1, len(sounding)):
        for muted in combinations(sounding, count):
            subsets.add(tuple(None if i in muted else fret for i, fret in enumerate(key)))
    return subsets


def simplify_candidates(candidates: Sequence[ChordDetail]) -> list[ChordDetail]:
    """Keep only voicings that are not a muted subset of another voicing.

    Exact duplicates collapse to their first occurrence. Order is preserved.

    Parameters
    ----------
    candidates : Sequence[ChordDetail]
        Voicings in discovery order.

    Returns
    -------
    list[ChordDetail]
        The surviving voicings.
    """
    keys = [candidate.fret_key for candidate in candidates]

    covered: set[FretKey] = set()
    for key in set(keys):
        covered |= _muted_subsets(key)

    result = []
    emitted: set[FretKey] = set()
    for candidate, key in zip(candidates, keys, strict=True):
        if key in covered or key in emitted:
            continue
        emitted.add(key)
        result.append(candidate)
    return result


def candidate_sort_key(candidate: ChordDetail) -> tuple[float, tuple[int, ...]]:
    """Sort by rating, then by frets (muted counted as 0)."""
    return candidate.rating, tuple(0 if fret is None else fret for fret in candidate.fret_key)


def remove_similar_candidates(candidates: Sequence[ChordDetail]) -> list[ChordDetail]:
    """Drop voicings similar to a better-rated one.

    Ties keep the earlier voicing. Order of the survivors is preserved.
    """
    ranked = sorted(range(len(candidates)), key=lambda i: candidates[i].rating)

    kept_keys: list[FretKey] = []
    kept: set[int] = set()
    for index in ranked:
        key = candidates[index].fret_key
        if any(is_similar(key, other) for other in kept_keys):
            continue
        kept_keys.append(key)
        kept.add(index)
    return [candidate for i, candidate in enumerate(candidates) if i in kept]


def sort_candidates(candidates: Sequence[ChordDetail]) -> list[ChordDetail]:
    """Return the voicings sorted by ``candidate_sort_key``."""
    return sorted(candidates, key=candidate_sort_key)
