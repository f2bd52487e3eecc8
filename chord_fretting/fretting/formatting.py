"""Plain-text and JSON-ready views of resolved voicings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from chord_fretting.fretting.models import FINGER_NAMES, fret_key

if TYPE_CHECKING:
    from collections.abc import Sequence

    from chord_fretting.fretting.models import ChordDetail, ChordFingering, FingerRange

FINGER_LABELS = ("T", "1", "2", "3", "4")


def format_frets(frets: Sequence[float]) -> str:
    """Format a fret pattern in tab-diagram order, "x" for muted strings.

    Examples
    --------
    >>> nan = float("nan")
    >>> format_frets([nan, 3, 2, 0, 1, 0])
    'x32010'
    >>> format_frets([nan, 10, 12, 12, 11, 10])
    'x 10 12 12 11 10'
    """
    key = fret_key(frets)
    parts = ["x" if fret is None else str(fret) for fret in key]
    separator = " " if any(fret is not None and fret > 9 for fret in key) else ""
    return separator.join(parts)


def format_finger(label: str, finger: FingerRange) -> str:
    """Format one finger as "label@fret:string" (or "label@fret:from-to" for a barre)."""
    if finger.is_idle:
        return f"{label}-"
    strings = f"{finger.from_string}-{finger.to_string}" if finger.is_barre else str(finger.from_string)
    return f"{label}@{int(finger.fret)}:{strings}"


def format_fingering(fingering: ChordFingering) -> str:
    """Summarise a fingering, thumb first.

    Examples
    --------
    >>> from chord_fretting.fretting.models import IDLE, ChordFingering, FingerRange
    >>> fingers = (IDLE, FingerRange.barre(3, 1, 5), IDLE, FingerRange.barre(5, 2, 4), IDLE)
    >>> format_fingering(ChordFingering(fingers, 13.2))
    'T- 1@3:1-5 2- 3@5:2-4 4-'
    """
    return " ".join(format_finger(label, finger) for label, finger in zip(FINGER_LABELS, fingering.fingers, strict=True))


def detail_to_dict(detail: ChordDetail) -> dict[str, Any]:
    """Convert a voicing into plain JSON-serialisable data.

    Muted strings are ``None`` in ``frets`` and ``notes``; idle fingers are
    left out of ``fingers``.
    """
    fingers = []
    if detail.fingering is not None:
        for name, finger in zip(FINGER_NAMES, detail.fingering.fingers, strict=True):
            if finger.is_idle:
                continue
            fingers.append({
                "finger": name,
                "fret": int(finger.fret),
                "from_string": finger.from_string,
                "to_string": finger.to_string,
            })

    return {
        "chord": str(detail.chord),
        "frets": list(detail.fret_key),
        "notes": [None if note is None else str(note) for note in detail.notes],
        "omits": [{"interval": str(o.interval), "rating": o.rating} for o in detail.omitted_intervals],
        "fingers": fingers,
        "rating": round(detail.rating, 2),
    }
