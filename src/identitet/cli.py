"""
Command line validation of Swedish personal identity numbers.

Usage:
    identitet 198507099805 8507099805
    identitet --long 850709-9805
    identitet --now 2019-07-13 19121212+1212
    python -m identitet --no-coordination 198507699802
"""

import argparse
import logging
import sys
from datetime import date
from typing import Optional, Sequence

from identitet.clock import current_time
from identitet.config import normalize_log_level, settings
from identitet.errors import InvalidIdentityNumber
from identitet.personnummer import ParseOptions, parse

logger = logging.getLogger(__name__)


def _reference_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Not a YYYY-MM-DD date: {value}")


def _log_level(value: str) -> str:
    try:
        return normalize_log_level(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="identitet",
        description="Validate and format Swedish personal identity numbers",
    )
    parser.add_argument("numbers", nargs="+", help="Numbers to check")
    parser.add_argument("--long", action="store_true", help="Print the 12 digit form")
    parser.add_argument(
        "--now", type=_reference_date, help="Reference date (default: today)"
    )
    parser.add_argument(
        "--no-coordination",
        action="store_true",
        help="Reject samordningsnummer",
    )
    parser.add_argument(
        "--log-level", type=_log_level, default=settings.log_level, help="Logging level"
    )
    return parser


def describe(
    number: str, options: ParseOptions, now: Optional[date], long_format: bool
) -> tuple[bool, str]:
    """Validity and a one line report for a single number."""
    reference = current_time(now)
    try:
        pnr = parse(number, options=options, now=reference)
    except InvalidIdentityNumber:
        return False, f"{number}: invalid"

    sex = "M" if pnr.is_male() else "F"
    line = f"{number}: valid {pnr.format(long_format)} age={pnr.get_age(reference)} sex={sex}"
    if pnr.is_coordination_number():
        line += " coordination"
    return True, line


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    options = ParseOptions.from_settings(settings)
    if args.no_coordination:
        options = ParseOptions(allow_coordination_number=False)

    all_valid = True
    for number in args.numbers:
        valid, line = describe(number, options, args.now, args.long)
        all_valid = all_valid and valid
        print(line)

    logger.debug("Checked %d numbers", len(args.numbers))
    return 0 if all_valid else 1


if __name__ == "__main__":
    sys.exit(main())
