"""Instrument registry.

This module provides ``InstrumentInfo`` (a tuning plus its resolving
options) and the read-only registry of preset instruments, built once at
import time.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from chord_fretting.config import (
    BANJO_OPTIONS,
    GUITAR_OPTIONS,
    MANDOLIN_OPTIONS,
    UKULELE_NOT_PREFERRED_INVERSION_OPTIONS,
    UKULELE_OPTIONS,
    ChordResolvingOptions,
)
from chord_fretting.tuning import Tuning, get_tuning

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True)
class InstrumentInfo:
    """A playable instrument configuration.

    Parameters
    ----------
    key : str
        Registry key (e.g., "guitar-standard").
    group : str
        Display group (e.g., "Guitar").
    name : str
        Display name (e.g., "Guitar, standard tuning").
    tuning : Tuning
        Open-string pitches.
    options : ChordResolvingOptions
        Search bounds used by the fretting resolver.
    common : bool
        Whether the instrument is listed among the commonly used ones.
    """

    key: str
    group: str
    name: str
    tuning: Tuning
    options: ChordResolvingOptions = GUITAR_OPTIONS
    common: bool = True

    @classmethod
    def custom(cls, tuning: Tuning, options: ChordResolvingOptions = GUITAR_OPTIONS) -> InstrumentInfo:
        """Wrap an ad-hoc tuning, e.g. for tests or user-defined tunings."""
        name = tuning.name or tuning.descriptor()
        return cls(key="custom", group="Custom", name=name, tuning=tuning, options=options)

    @property
    def string_count(self) -> int:
        return self.tuning.string_count

    @property
    def tuning_descriptor(self) -> str:
        return self.tuning.descriptor()


_INSTRUMENTS: tuple[InstrumentInfo, ...] = (
    InstrumentInfo("guitar-standard", "Guitar", "Guitar, standard", get_tuning("guitar", "standard")),
    InstrumentInfo("guitar-standard-eflat", "Guitar", "Guitar, half step down", get_tuning("guitar", "standard e♭")),
    InstrumentInfo("guitar-standard-d", "Guitar", "Guitar, whole step down", get_tuning("guitar", "standard d")),
    InstrumentInfo("guitar-drop-d", "Guitar", "Guitar, drop D", get_tuning("guitar", "drop d")),
    InstrumentInfo("guitar-dadgad", "Guitar", "Guitar, DADGAD", get_tuning("guitar", "dadgad")),
    InstrumentInfo("guitar-drop-c", "Guitar", "Guitar, drop C", get_tuning("guitar", "drop c"), common=False),
    InstrumentInfo("guitar-drop-b", "Guitar", "Guitar, drop B", get_tuning("guitar", "drop b"), common=False),
    InstrumentInfo(
        "guitar-double-drop-d", "Guitar", "Guitar, double drop D", get_tuning("guitar", "double drop d"), common=False
    ),
    InstrumentInfo("guitar-open-a", "Guitar", "Guitar, open A", get_tuning("guitar", "open a"), common=False),
    InstrumentInfo("guitar-open-c", "Guitar", "Guitar, open C", get_tuning("guitar", "open c"), common=False),
    InstrumentInfo("guitar-open-d", "Guitar", "Guitar, open D", get_tuning("guitar", "open d"), common=False),
    InstrumentInfo("guitar-open-e", "Guitar", "Guitar, open E", get_tuning("guitar", "open e"), common=False),
    InstrumentInfo("guitar-open-g", "Guitar", "Guitar, open G", get_tuning("guitar", "open g"), common=False),
    InstrumentInfo(
        "guitar-all-fourths", "Guitar", "Guitar, all fourths", get_tuning("guitar", "all fourths"), common=False
    ),
    InstrumentInfo(
        "ukulele-standard", "Ukulele", "Ukulele, standard", get_tuning("ukulele", "soprano standard"), UKULELE_OPTIONS
    ),
    InstrumentInfo(
        "ukulele-standard-a",
        "Ukulele",
        "Ukulele, whole step up",
        get_tuning("ukulele", "soprano standard a"),
        UKULELE_OPTIONS,
    ),
    InstrumentInfo(
        "ukulele-low-g",
        "Ukulele",
        "Ukulele, low G",
        get_tuning("ukulele", "low g"),
        UKULELE_NOT_PREFERRED_INVERSION_OPTIONS,
    ),
    InstrumentInfo(
        "guitalele", "Ukulele", "Guitalele", get_tuning("ukulele", "guitalele"), UKULELE_NOT_PREFERRED_INVERSION_OPTIONS
    ),
    InstrumentInfo(
        "ukulele-baritone",
        "Ukulele",
        "Baritone ukulele",
        get_tuning("ukulele", "baritone"),
        UKULELE_OPTIONS,
        common=False,
    ),
    InstrumentInfo("baritone-guitar-a", "Baritone guitar", "Baritone guitar, A-A", get_tuning("guitar", "baritone a")),
    InstrumentInfo("baritone-guitar-b", "Baritone guitar", "Baritone guitar, B-B", get_tuning("guitar", "baritone b")),
    InstrumentInfo(
        "baritone-guitar-bflat",
        "Baritone guitar",
        "Baritone guitar, B♭-B♭",
        get_tuning("guitar", "baritone b♭"),
        common=False,
    ),
    InstrumentInfo("tenor-banjo-a", "Banjo", "Tenor banjo, fifths", get_tuning("banjo", "tenor fifth"), BANJO_OPTIONS),
    InstrumentInfo(
        "tenor-banjo-b", "Banjo", "Tenor banjo, Chicago", get_tuning("banjo", "tenor chicago"), BANJO_OPTIONS, False
    ),
    InstrumentInfo(
        "tenor-banjo-bflat", "Banjo", "Tenor banjo, Irish", get_tuning("banjo", "tenor irish"), BANJO_OPTIONS, False
    ),
    InstrumentInfo(
        "mandolin-standard", "Mandolin", "Mandolin, standard", get_tuning("mandolin", "standard"), MANDOLIN_OPTIONS
    ),
    InstrumentInfo("mandola", "Mandolin", "Mandola", get_tuning("mandolin", "mandola"), MANDOLIN_OPTIONS),
    InstrumentInfo("tenor-mandolin", "Mandolin", "Tenor mandolin", get_tuning("mandolin", "tenor"), MANDOLIN_OPTIONS),
)

INSTRUMENTS: Mapping[str, InstrumentInfo] = MappingProxyType({info.key: info for info in _INSTRUMENTS})

DEFAULT_INSTRUMENT = INSTRUMENTS["guitar-standard"]


def get_instrument(key: str) -> InstrumentInfo:
    """Look up a preset instrument by key.

    Examples
    --------
    >>> get_instrument("ukulele-standard").tuning_descriptor
    'G4 C4 E4 A4'

    Raises
    ------
    ValueError
        If the key is not recognized.
    """
    if key in INSTRUMENTS:
        return INSTRUMENTS[key]
    msg = f"Unknown instrument: {key}"
    raise ValueError(msg)


def instrument_groups(*, common_only: bool = False) -> dict[str, list[InstrumentInfo]]:
    """Group the preset instruments by display group, in registration order."""
    groups: dict[str, list[InstrumentInfo]] = {}
    for info in _INSTRUMENTS:
        if common_only and not info.common:
            continue
        groups.setdefault(info.group, []).append(info)
    return groups
