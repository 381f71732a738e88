"""Argument parsing functionality for versrange."""

import argparse

from constants import Constants


def _add_common_options(parser):
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=Constants.LOG_LEVELS,
                        default=None)
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML)",
                        action="store",
                        type=str)


def parse_args(argv=None):
    """Parses the arguments passed to the program.

    Args:
        argv (list, optional): Arguments to parse instead of ``sys.argv[1:]``.

    Returns:
        argparse.Namespace: Parsed arguments; ``COMMAND`` names the subcommand.
    """
    parser = argparse.ArgumentParser(
        prog="versrange",
        description="Check, validate and simplify vers version ranges",
        add_help=True,
    )
    _add_common_options(parser)

    subparsers = parser.add_subparsers(dest="COMMAND", required=True)

    contains = subparsers.add_parser("contains", help="Check whether versions are inside a range")
    contains.add_argument("RANGE", help="vers range, e.g. vers:npm/>=1.0.0|<2.0.0")
    contains.add_argument("VERSIONS", nargs="+", help="Versions to check")
    contains.add_argument("--error-on-miss",
                          dest="ERROR_ON_MISS",
                          help="Exit with a non-zero status code if any version is outside the range.",
                          action="store_true")

    validate = subparsers.add_parser("validate", help="Validate the constraint order of a range")
    validate.add_argument("RANGE", help="vers range")

    simplify = subparsers.add_parser("simplify", help="Remove redundant constraints from a range")
    simplify.add_argument("RANGE", help="vers range")

    split = subparsers.add_parser("split", help="Split a range into independent sub-ranges")
    split.add_argument("RANGE", help="vers range")

    overlaps = subparsers.add_parser("overlaps", help="Check whether two ranges overlap")
    overlaps.add_argument("RANGE", help="First vers range")
    overlaps.add_argument("OTHER", help="Second vers range")
    overlaps.add_argument("--error-on-miss",
                          dest="ERROR_ON_MISS",
                          help="Exit with a non-zero status code if the ranges do not overlap.",
                          action="store_true")

    compare = subparsers.add_parser("compare", help="Compare two versions of a scheme")
    compare.add_argument("SCHEME", help="Versioning scheme, e.g. deb, rpm, npm")
    compare.add_argument("LEFT", help="First version")
    compare.add_argument("RIGHT", help="Second version")

    return parser.parse_args(argv)
