#!/usr/bin/env python3
"""
FuelTrack command line tools

Work with fuel logs and receipt photos without running the API:
- Print the mileage history for an exported JSON list of fuel logs
- Print the numeric candidates read from a receipt or meter photo

Usage:
    python scripts/fuel_report.py history logs.json
    python scripts/fuel_report.py scan receipt.jpg --lang eng
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

from fueltrack.calculations import derive_history  # noqa: E402
from fueltrack.exceptions import FuelTrackError, RecordValidationError  # noqa: E402
from fueltrack.services.candidate_service import extract_candidates_from_image  # noqa: E402
from fueltrack.utils.ocr import TesseractRecognizer  # noqa: E402


def load_records(path):
    """Read a JSON export and check it holds a list of fuel log objects."""
    try:
        records = json.loads(Path(path).read_text())
    except ValueError as e:
        raise RecordValidationError(f"{path} is not valid JSON", [str(e)]) from e

    if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
        raise RecordValidationError(f"{path} must contain a JSON list of fuel log objects")
    return records


def history_command(args):
    """Print the derived history of a JSON export."""
    records = load_records(args.file)
    result = derive_history(records)

    print(f"{'Date':<26} {'Odometer':>10} {'Fuel':>8} {'Distance':>10} {'Mileage':>8}")
    for entry in result['history']:
        print(
            f"{str(entry.get('date', '')):<26} {str(entry.get('odometer')):>10} {str(entry.get('fuel_amount')):>8} "
            f"{entry['distance']:>10.1f} {entry['mileage']:>8.2f}"
        )

    stats = result['stats']
    if stats is None:
        print("\nAt least 2 fill-ups are needed for statistics")
        return

    print(f"\nTotal distance: {stats['total_distance']:.1f}")
    print(f"Average mileage: {stats['avg_mileage']}")
    print(f"Last mileage: {stats['last_mileage']}")
    print(f"Fuel: {stats['total_fuel']}  Cost: {stats['total_cost']}  Fill-ups: {stats['fill_up_count']}")


def scan_command(args):
    """Print numeric candidates found in an image."""
    image_bytes = Path(args.image).read_bytes()
    candidates = extract_candidates_from_image(image_bytes, TesseractRecognizer(lang=args.lang))

    if not candidates:
        print("No numbers found")
        return

    for rank, candidate in enumerate(candidates, start=1):
        print(f"{rank:>3}. {candidate}")


def main():
    parser = argparse.ArgumentParser(description='FuelTrack command line tools')
    subparsers = parser.add_subparsers(dest='command', required=True)

    history_parser = subparsers.add_parser('history', help='Print mileage history for a JSON export')
    history_parser.add_argument('file', help='JSON file containing a list of fuel logs')
    history_parser.set_defaults(func=history_command)

    scan_parser = subparsers.add_parser('scan', help='List numbers read from a receipt or meter photo')
    scan_parser.add_argument('image', help='Image file')
    scan_parser.add_argument('--lang', default=None, help='Tesseract language (default: OCR_LANG)')
    scan_parser.set_defaults(func=scan_command)

    args = parser.parse_args()
    try:
        args.func(args)
    except FuelTrackError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
