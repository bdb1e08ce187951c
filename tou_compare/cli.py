"""Command line entry point.

Given a usage export and the current flat rate per kWh, calculates what the
same usage would have cost on time-of-use rates.
"""

from __future__ import annotations

import argparse
import logging
import sys
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Sequence

from . import __version__
from .costs import TouConsistencyError
from .locations import TouLocation, resolve_tou_rates
from .reporting import build_comparison_report, format_report
from .usage import UsageFileError, read_usage_from_csv

logger = logging.getLogger(__name__)

EXIT_DATA_ERROR = 1


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        tou_rates = resolve_tou_rates(
            args.tou_location,
            off=args.off_peak_rate,
            mid=args.mid_peak_rate,
            peak=args.peak_rate,
        )
    except ValueError as exc:
        parser.error(str(exc))
    logger.debug("Using TOU rates %s", tou_rates)

    try:
        entries = read_usage_from_csv(args.usage_csv)
        report = build_comparison_report(entries, args.current_rate, tou_rates)
    except (UsageFileError, TouConsistencyError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_DATA_ERROR

    for line in format_report(report, breakdown=args.breakdown):
        print(line, file=sys.stderr)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tou-compare",
        description=(
            "Compare Seattle City Light TOU rates. Given your usage data and your "
            "current flat rate, calculates the total cost of the same usage on TOU rates."
        ),
    )
    parser.add_argument(
        "usage_csv",
        type=Path,
        help=(
            'CSV file with fine-grained usage data, exported with the "Green Button" '
            'under "View Usage" > "View Usage Details".'
        ),
    )
    parser.add_argument(
        "current_rate",
        type=_decimal,
        help="Your current flat rate in dollars per kWh, as shown on your bill.",
    )
    rates = parser.add_argument_group(
        "TOU rates",
        "Give your location to use the built-in rates, or all three rates if they "
        "have changed since this tool was released.",
    )
    rates.add_argument(
        "-l",
        "--tou-location",
        type=TouLocation,
        choices=list(TouLocation),
        metavar="{" + ",".join(location.value for location in TouLocation) + "}",
        help='Your location; "other" is Burien, SeaTac, Shoreline, Uninc. King County.',
    )
    for short, name in (("-o", "off-peak"), ("-m", "mid-peak"), ("-p", "peak")):
        rates.add_argument(
            short,
            f"--{name}-rate",
            type=_decimal,
            help=f"Your {name} TOU rate in dollars per kWh.",
        )
    parser.add_argument(
        "--breakdown",
        action="store_true",
        help="Also print net kWh and cost per TOU period.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _decimal(raw: str) -> Decimal:
    try:
        value = Decimal(raw)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid decimal value: {raw!r}") from None
    if not value.is_finite():
        raise argparse.ArgumentTypeError(f"invalid decimal value: {raw!r}")
    return value


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
