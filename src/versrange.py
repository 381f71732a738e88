"""versrange - command line front end for vers version ranges.

    Returns:
        int: Exit code
"""
import logging
import sys

from args import parse_args
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from constants import ConfigError, ExitCodes, load_yaml_config
from vers import Vers
from vers.convert import apply_config
from versioning import VersError, for_scheme

logger = logging.getLogger(__name__)


def _bool(value):
    return "true" if value else "false"


def cmd_contains(args):
    """Print whether each version is inside the range."""
    vers = Vers.parse(args.RANGE)
    missed = False
    for version in args.VERSIONS:
        inside = vers.contains(version)
        missed = missed or not inside
        print(f"{version}\t{_bool(inside)}")
    if missed and args.ERROR_ON_MISS:
        return ExitCodes.EXIT_MISS.value
    return ExitCodes.SUCCESS.value


def cmd_validate(args):
    """Print the range if its constraints are in a valid order."""
    print(Vers.parse(args.RANGE).validate())
    return ExitCodes.SUCCESS.value


def cmd_simplify(args):
    """Print the simplified range."""
    print(Vers.parse(args.RANGE).simplify())
    return ExitCodes.SUCCESS.value


def cmd_split(args):
    """Print each independent sub-range on its own line."""
    for part in Vers.parse(args.RANGE).split():
        print(part)
    return ExitCodes.SUCCESS.value


def cmd_overlaps(args):
    """Print whether the two ranges overlap."""
    overlap = Vers.parse(args.RANGE).overlaps_with(Vers.parse(args.OTHER))
    print(_bool(overlap))
    if not overlap and args.ERROR_ON_MISS:
        return ExitCodes.EXIT_MISS.value
    return ExitCodes.SUCCESS.value


def cmd_compare(args):
    """Print <, = or > for two versions of a scheme."""
    result = for_scheme(args.SCHEME, args.LEFT).compare_to(for_scheme(args.SCHEME, args.RIGHT))
    print("<" if result < 0 else ">" if result > 0 else "=")
    return ExitCodes.SUCCESS.value


COMMANDS = {
    "contains": cmd_contains,
    "validate": cmd_validate,
    "simplify": cmd_simplify,
    "split": cmd_split,
    "overlaps": cmd_overlaps,
    "compare": cmd_compare,
}


def run(argv=None):
    """Run the CLI and return the exit code instead of exiting."""
    args = parse_args(argv)

    try:
        config = load_yaml_config(args.CONFIG)
        configure_logging(args.LOG_LEVEL or config.get("log_level"))
        apply_config(config)
    except ConfigError as exc:
        configure_logging(args.LOG_LEVEL)
        logging.error("%s", exc)
        return ExitCodes.INVALID_INPUT.value

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(event="function_entry", component="cli", action=args.COMMAND),
        )

    try:
        return COMMANDS[args.COMMAND](args)
    except VersError as exc:
        logging.error("%s", exc)
        return ExitCodes.INVALID_INPUT.value


def main():
    """Main function of the program."""
    sys.exit(run())


if __name__ == "__main__":
    main()
