#!/usr/bin/env python3
"""
Unified CLI for the pocket calculator and VIN lookup tools.

Commands:
  calc     - Run keypad presses through the calculator
  check    - Normalize and validate a VIN
  scan     - Find a VIN in OCR text
  decode   - Look up a VIN with NHTSA vPIC
  recents  - List recently decoded VINs
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from tabulate import tabulate

from pockettools import (
    CalcState,
    DecodeError,
    VinField,
    action_for_key,
    decode_vin,
    extract_vin,
    format_number,
    is_decodable,
    load_recents,
    normalize_vin,
    push_recent,
    save_recents,
    transition,
    validate_vin,
    INITIAL_STATE,
)
from pockettools.config import default_recents_file

NO_VIN_MESSAGE = "Couldn't find a VIN. Try closer focus / better lighting."

# =============================================================================
# Formatting helpers
# =============================================================================


def format_accumulator(value: Optional[float]) -> str:
    """Format the accumulator for display."""
    return format_number(value) if value is not None else "-"


def split_keys(args: List[str]) -> List[str]:
    """Split command line arguments into single keypad presses."""
    return [ch for arg in args for ch in arg if not ch.isspace()]


def make_trace_table(keys: List[str], states: List[CalcState]) -> List[List[str]]:
    """Convert a key sequence and the states it produced to table rows."""
    rows = []
    for key, state in zip(keys, states):
        rows.append(
            [
                key,
                state.display,
                format_accumulator(state.accumulator),
                state.pending_operator.value if state.pending_operator else "-",
                state.phase.name.lower(),
            ]
        )
    return rows


def make_fields_table(fields: List[VinField]) -> List[List[str]]:
    """Convert decoded fields to table rows."""
    return [[f.label, f.value] for f in fields]


# =============================================================================
# Calc command
# =============================================================================


def cmd_calc(args):
    """Run keypad presses through the calculator."""
    keys = split_keys(args.keys)
    try:
        actions = [action_for_key(k) for k in keys]
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    state = INITIAL_STATE
    states = []
    for action in actions:
        state = transition(state, action)
        states.append(state)

    if args.trace:
        headers = ["Key", "Display", "Accumulator", "Operator", "Phase"]
        print(tabulate(make_trace_table(keys, states), headers=headers, tablefmt="simple"))
        print()

    print(state.display)
    return 0


# =============================================================================
# Check command
# =============================================================================


def cmd_check(args):
    """Normalize and validate a VIN."""
    vin = normalize_vin(args.text)
    error = validate_vin(vin)

    print(f"VIN: {vin or '-'}")
    if error:
        print(f"Invalid: {error.value}")
        return 1
    if not vin:
        print("Nothing to check.")
        return 1
    print("Valid.")
    return 0


# =============================================================================
# Scan command
# =============================================================================


def cmd_scan(args):
    """Find a VIN in OCR text from a file or stdin."""
    if args.file:
        if not args.file.exists():
            print(f"Error: File not found: {args.file}")
            return 1
        text = args.file.read_text()
    else:
        text = sys.stdin.read()

    found = extract_vin(text)
    if found is None:
        print(NO_VIN_MESSAGE)
        return 1

    print(found)
    return 0


# =============================================================================
# Decode command
# =============================================================================


def cmd_decode(args):
    """Look up a VIN and remember it."""
    vin = normalize_vin(args.vin)
    error = validate_vin(vin)
    if error or not is_decodable(vin):
        print(f"Error: {error.value if error else 'Enter a 17-character VIN.'}")
        return 1

    try:
        fields = decode_vin(vin)
    except DecodeError as e:
        print(f"Lookup failed: {e}")
        return 1

    print(f"VIN: {vin}")
    print()
    print(tabulate(make_fields_table(fields), headers=["Field", "Value"], tablefmt="simple"))

    if args.dry_run:
        print()
        print("(dry run - recents not updated)")
        return 0

    recents = push_recent(load_recents(args.recents_file), vin)
    save_recents(args.recents_file, recents)
    return 0


# =============================================================================
# Recents command
# =============================================================================


def cmd_recents(args):
    """List recently decoded VINs."""
    if args.clear:
        save_recents(args.recents_file, [])
        print("Recents cleared.")
        return 0

    recents = load_recents(args.recents_file)
    if not recents:
        print("No recent VINs.")
        return 0

    rows = [[i, vin] for i, vin in enumerate(recents, start=1)]
    print(tabulate(rows, headers=["#", "VIN"], tablefmt="simple"))
    return 0


# =============================================================================
# Main
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Pocket calculator and VIN lookup",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s calc 3 + 4 x 2 =
  %(prog)s calc --trace "50%%"
  %(prog)s check " 1hgcm82633a004352 "
  %(prog)s scan ocr.txt
  %(prog)s decode 1HGCM82633A004352
  %(prog)s recents

Keys: digits . + - x / = %% C, with ~ for sign toggle.
""",
    )
    parser.add_argument(
        "--recents-file",
        type=Path,
        default=None,
        help="Path to recents YAML file (default: $POCKET_RECENTS_FILE or ~/.pockettools/recents.yaml)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Calc subcommand
    calc_parser = subparsers.add_parser(
        "calc", help="Run keypad presses through the calculator"
    )
    calc_parser.add_argument(
        "keys",
        nargs="+",
        help="Keys to press; multi-character arguments are split into single keys",
    )
    calc_parser.add_argument(
        "--trace",
        action="store_true",
        help="Show the state after every key",
    )

    # Check subcommand
    check_parser = subparsers.add_parser("check", help="Normalize and validate a VIN")
    check_parser.add_argument("text", type=str, help="VIN as typed")

    # Scan subcommand
    scan_parser = subparsers.add_parser("scan", help="Find a VIN in OCR text")
    scan_parser.add_argument(
        "file",
        type=Path,
        nargs="?",
        help="Text file with OCR output (default: stdin)",
    )

    # Decode subcommand
    decode_parser = subparsers.add_parser("decode", help="Look up a VIN")
    decode_parser.add_argument("vin", type=str, help="VIN to decode")
    decode_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Decode without updating recents",
    )

    # Recents subcommand
    recents_parser = subparsers.add_parser("recents", help="List recently decoded VINs")
    recents_parser.add_argument(
        "--clear",
        action="store_true",
        help="Remove all recent VINs",
    )

    return parser


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.recents_file is None:
        args.recents_file = default_recents_file()

    # Dispatch to command handler
    if args.command == "calc":
        return cmd_calc(args)
    elif args.command == "check":
        return cmd_check(args)
    elif args.command == "scan":
        return cmd_scan(args)
    elif args.command == "decode":
        return cmd_decode(args)
    elif args.command == "recents":
        return cmd_recents(args)

    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
