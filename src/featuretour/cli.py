# src/featuretour/cli.py
"""
Command-line interface for the feature tour
"""

import argparse
import logging
import sys

from .config import TourConfig
from .enums import Section
from .sections import run_tour
from . import __version__


def configure_logging(verbose: bool) -> None:
    """Send package diagnostics to stderr so they never mix with tour output."""
    logger = logging.getLogger("featuretour")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    ))
    logger.addHandler(handler)


def non_negative_int(text: str) -> int:
    """argparse type for counts that may be zero but not negative."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{text}'")
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    section_list = "\n".join(f"  {s.number:>2}. {s.title}" for s in Section)
    parser = argparse.ArgumentParser(
        description="featuretour: a printed walk through functional programming features",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Sections:
{section_list}

Examples:
  featuretour                          # Run the whole tour
  featuretour --section 7 --section 9  # Run only streams and maps
  featuretour --section 8 --size 10000 # Small parallel sort comparison
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'featuretour v{__version__}'
    )

    parser.add_argument(
        '--section',
        type=int,
        action='append',
        choices=[s.number for s in Section],
        metavar='N',
        help='Run only section N (may be repeated)'
    )

    parser.add_argument(
        '--size',
        type=non_negative_int,
        default=TourConfig.parallel_sort_size,
        metavar='COUNT',
        help='Number of identifiers sorted in the parallel streams section'
    )

    parser.add_argument(
        '--workers',
        type=non_negative_int,
        default=0,
        help='Worker processes for the parallel sort (0 = one per logical core)'
    )

    parser.add_argument(
        '--no-zones',
        action='store_true',
        help='Do not print every available time zone id'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable detailed logging'
    )
    return parser


def main(argv=None):
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    config = TourConfig(
        parallel_sort_size=args.size,
        workers=args.workers,
        show_all_zones=not args.no_zones,
        verbose=args.verbose,
    )
    if args.section:
        config.sections = tuple(args.section)

    run_tour(config)


if __name__ == "__main__":
    main()
