"""Print a few sample log lines with the console formatter, `python -m console_formatter --help`."""

import argparse
import logging
import sys

from console_formatter.logging import TRACE, add_console_formatter
from console_formatter.themes import THEMES


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="console_formatter", description=__doc__)
    parser.add_argument("--prefix", default="[", help="Text written before each line")
    parser.add_argument("--timestamp-format", default="%H:%M:%S ", help="strftime pattern of the timestamp")
    parser.add_argument("--utc", action="store_true", help="Use UTC instead of local time")
    parser.add_argument("--theme", choices=sorted(THEMES), default="code", help="Color theme of the messages")
    parser.add_argument("--all-levels", action="store_true", help="Also log trace, debug, error and critical")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logger = logging.getLogger("console_formatter.demo")
    logger.setLevel(TRACE)
    logger.propagate = False
    handler = add_console_formatter(
        logger,
        stream=sys.stdout,
        prefix=args.prefix,
        timestamp_format=args.timestamp_format,
        use_utc_timestamp=args.utc,
        color_theme=args.theme,
    )
    try:
        string1 = "Peter"
        string2 = "Emma"
        if args.all_levels:
            logger.log(TRACE, "This is a trace message")
            logger.debug("This is a debug message")
        logger.info(
            "This is an information message: {string1} and {string2}", {"string1": string1, "string2": string2}
        )
        logger.warning("This is a warning message")
        if args.all_levels:
            logger.error("This is an error message with {count} {kind} values", {"count": 3, "kind": None})
            logger.critical("This is a critical message, enabled={enabled}", {"enabled": True})
    finally:
        logger.removeHandler(handler)
        handler.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
