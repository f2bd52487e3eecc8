#!/usr/bin/env python3
"""CLI tool to list the playable voicings of a chord.

Usage:
    python examples/fret_chord.py <chord> [--instrument KEY] [--limit N] [--json]

Examples:
    python examples/fret_chord.py E
    python examples/fret_chord.py Am7/G --instrument ukulele-standard
    python examples/fret_chord.py A:min7 --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from chord_fretting import (
    detail_to_dict,
    format_fingering,
    format_frets,
    get_instrument,
    instrument_groups,
    parse_chord,
    resolve,
)
from chord_fretting.instruments import INSTRUMENTS


def list_instruments() -> str:
    """Return the instrument keys grouped by display group."""
    lines = []
    for group, instruments in instrument_groups().items():
        lines.append(f"{group}:")
        lines.extend(f"  {info.key:<24} {info.tuning_descriptor}" for info in instruments)
    return "\n".join(lines)


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Find and rank the fingerings of a chord",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Instruments:
{list_instruments()}
        """,
    )
    parser.add_argument(
        "chord",
        help='Chord in pychord ("Am7/G") or Harte ("A:min7/b7") notation',
    )
    parser.add_argument(
        "-i", "--instrument",
        default="guitar-standard",
        choices=sorted(INSTRUMENTS),
        metavar="KEY",
        help="Instrument key (default: guitar-standard)",
    )
    parser.add_argument(
        "-n", "--limit",
        type=int,
        default=10,
        help="Number of voicings to show (default: 10, 0 for all)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print JSON instead of text",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log resolver statistics to stderr",
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        chord = parse_chord(args.chord)
    except ValueError as e:
        print(f"Error parsing chord: {e}", file=sys.stderr)
        return 1

    instrument = get_instrument(args.instrument)
    details = resolve(chord, instrument)
    if args.limit > 0:
        details = details[: args.limit]

    if args.json:
        print(json.dumps([detail_to_dict(d) for d in details], indent=2, ensure_ascii=False))
        return 0

    if not details:
        print(f"No fretting found for {chord} on {instrument.name}")
        return 0

    print(f"{chord} on {instrument.name} ({instrument.tuning_descriptor})")
    for detail in details:
        omits = ", ".join(str(i) for i in detail.omits)
        suffix = f"  no {omits}" if omits else ""
        print(f"  {format_frets(detail.frets):<18} {detail.rating:6.2f}  {format_fingering(detail.fingering)}{suffix}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
