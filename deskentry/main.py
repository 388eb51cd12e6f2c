"""Entry point for deskentry: list the applications described by .desktop files."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from deskentry import __app_name__, __version__
from deskentry.core.config import Config
from deskentry.core.discovery import discover_entries
from deskentry.core.errors import ParseError
from deskentry.core.logger import get_logger, setup_logging
from deskentry.core.output import format_json, format_plain

_log = get_logger("main")

OPTION_KEYS = ("show_id", "show_name", "show_path", "delimiter",
               "null_delimiter", "null", "json", "strict")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=__app_name__,
        description="List applications from XDG .desktop files.",
    )
    parser.add_argument("-i", "--id", dest="show_id", action=argparse.BooleanOptionalAction,
                        default=None, help="Print AppID.")
    parser.add_argument("-p", "--path", dest="show_path", action=argparse.BooleanOptionalAction,
                        default=None, help="Print Path.")
    parser.add_argument("-n", "--name", dest="show_name", action=argparse.BooleanOptionalAction,
                        default=None, help="Print Name.")
    parser.add_argument("-d", "--delimiter", default=None,
                        help="Delimiter for printed attributes.")
    parser.add_argument("-z", "--null-delimiter", action="store_true", default=None,
                        help="Use the null character as a delimiter for printed attributes.")
    parser.add_argument("-0", "--null", action="store_true", default=None,
                        help="Separate results by the null character.")
    parser.add_argument("-j", "--json", action="store_true", default=None,
                        help="Output as JSON array (NoDisplay entries are omitted, as in plain output).")
    parser.add_argument("--dir", dest="dirs", action="append", default=None, metavar="DIR",
                        help="Scan DIR instead of the XDG applications directories (repeatable).")
    parser.add_argument("--strict", action="store_true", default=None,
                        help="Abort on the first file that fails to parse.")
    parser.add_argument("--save-defaults", action="store_true",
                        help="Store the options given on this command line as defaults and exit.")
    parser.add_argument("--reset-defaults", action="store_true",
                        help="Restore the built-in defaults and exit.")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Also log to stderr.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _resolve(args: argparse.Namespace, config: Config) -> argparse.Namespace:
    """Fill options not given on the command line from the config file."""
    for key in OPTION_KEYS:
        if getattr(args, key) is None:
            setattr(args, key, config.get(key))
    if args.dirs is None:
        args.dirs = config.get("data_dirs") or None
    return args


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose)
    config = Config()

    if args.reset_defaults:
        config.reset()
        _log.info("Defaults reset")
        return 0

    args = _resolve(args, config)

    if args.save_defaults:
        values = {key: getattr(args, key) for key in OPTION_KEYS}
        values["data_dirs"] = list(args.dirs or [])
        config.update(values)
        _log.info("Saved defaults: %s", values)
        return 0

    try:
        result = discover_entries(args.dirs, strict=args.strict)
    except (ParseError, OSError) as exc:
        _log.error("Aborting: %s", exc)
        print(f"failed to parse desktop entries: {exc}", file=sys.stderr)
        return 1

    for path, exc in result.errors:
        print(f"warning: skipped {path}: {exc}", file=sys.stderr)

    if args.json:
        sys.stdout.write(format_json(result.entries))
    else:
        sys.stdout.write(format_plain(
            result.entries,
            show_id=args.show_id,
            show_name=args.show_name,
            show_path=args.show_path,
            delimiter="\0" if args.null_delimiter else args.delimiter,
            separator="\0" if args.null else "\n",
        ))
    return 0


if __name__ == "__main__":
    sys.exit(main())
