"""
Convert bumps results between the tabular and notation formats.

This script reads a results file (tabular .csv or notation .txt), decodes
every event in it and writes the events back out in the requested format,
optionally rendering a position chart for each event.

Usage:
    python3 convert.py "Results Data/town_2020.csv" --to notation
    python3 convert.py "Results Data/town_2020_men.txt" --to flat --output-dir converted
    python3 convert.py "Results Data/town_2020_men.txt" --to notation --plot
"""

import argparse
import sys
import warnings
from pathlib import Path
from typing import List

from bumps_results import analyze_bumps


def event_stem(event: analyze_bumps.Event) -> str:
    """Build a filesystem-friendly name for an event."""
    return f"{event.short_name}_{event.gender}_{event.year}".replace(" ", "_")


def write_outputs(events: List[analyze_bumps.Event], data_file: Path,
                  target: str, output_dir: Path) -> List[Path]:
    """
    Write events in the target format.

    Args:
        events: Decoded events.
        data_file: Source file, used to name tabular output.
        target: "flat" or "notation".
        output_dir: Directory for output files.

    Returns:
        Paths of the files written.
    """
    if target == "flat":
        output_path = output_dir / f"{data_file.stem}.csv"
        output_path.write_text(analyze_bumps.write_flat(events), encoding="utf-8")
        return [output_path]

    written = []
    for event in events:
        output_path = output_dir / f"{event_stem(event)}.txt"
        output_path.write_text(analyze_bumps.write_notation(event), encoding="utf-8")
        written.append(output_path)
    return written


def main():
    parser = argparse.ArgumentParser(
        description="Convert bumps results between tabular and notation formats"
    )
    parser.add_argument(
        "data_file",
        type=str,
        help="Path to a results file (.csv tabular, anything else notation)"
    )
    parser.add_argument(
        "--to",
        type=str,
        required=True,
        choices=["flat", "notation"],
        help="Output format"
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default="converted",
        help="Output directory for converted files (default: converted)"
    )
    parser.add_argument(
        "--plot",
        action="store_true",
        help="Also save a PNG position chart for each event"
    )

    args = parser.parse_args()

    data_file = Path(args.data_file)
    if not data_file.exists():
        print(f"Error: Data file not found: {data_file}")
        sys.exit(1)

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    print(f"\n{'='*70}")
    print("Converting Bumps Results")
    print(f"{'='*70}")
    print(f"Data file: {data_file}")
    print(f"Output format: {args.to}")
    print(f"Output directory: {output_dir}")
    print(f"{'='*70}")

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", analyze_bumps.BumpsDataWarning)
        try:
            events = analyze_bumps.load_events(data_file)
            written = write_outputs(events, data_file, args.to, output_dir)
            payloads = [analyze_bumps.build_event_payload(event) for event in events]
        except analyze_bumps.BumpsError as exc:
            print(f"\nError: {exc}")
            sys.exit(1)

    for warning in caught:
        print(f"Warning: {warning.message}")

    for i, (event, payload) in enumerate(zip(events, payloads)):
        summary = analyze_bumps.summarize_event(event, i)
        print(f"  {summary['set']} {summary['year']} ({summary['gender']}): "
              f"{summary['crews']} crews in {summary['divisions']} divisions, "
              f"{summary['days']} days")

        if args.plot:
            plot_path = output_dir / f"{event_stem(event)}.png"
            analyze_bumps.plot_position_trails(payload, plot_path)
            written.append(plot_path)

    print(f"\n{'='*70}")
    print("Conversion Complete!")
    print(f"{'='*70}")
    print("Results saved to:")
    for path in written:
        print(f"  - {path}")
    print(f"{'='*70}\n")


if __name__ == "__main__":
    main()
