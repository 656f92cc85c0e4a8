"""Command-line inspection of a configuration directory.

Usage:
    python -m gconfig -path ./config -profile dev show
    python -m gconfig -path ./config -profile dev get server.port --type int
"""
import argparse
import json
import logging
import sys
from typing import List, Optional

from gconfig.exceptions import GConfigError
from gconfig.loader import load
from gconfig.logging import configure_logging
from gconfig.store import ConfigStore


logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_KEY_NOT_FOUND = 2

VALUE_TYPES = ("str", "int", "float", "bool", "list")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gconfig", description="Inspect layered .properties configuration")
    parser.add_argument("-path", "--path", dest="path", default=None, help="Config directory (default: GC_PATH)")
    parser.add_argument("-profile", "--profile", dest="profile", default=None, help="Active profile (default: GC_PROFILE)")
    parser.add_argument("--strict", action="store_true", help="Fail on malformed lines and bad values")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        type=str.upper,
        help="Log level (default: WARNING)",
    )
    parser.add_argument("--log-json", action="store_true", help="Emit JSON log lines")

    subparsers = parser.add_subparsers(dest="command", required=True)

    get_parser = subparsers.add_parser("get", help="Print one resolved value")
    get_parser.add_argument("key")
    get_parser.add_argument("--type", dest="value_type", choices=VALUE_TYPES, default="str")

    show_parser = subparsers.add_parser("show", help="Print every effective key")
    show_parser.add_argument("--json", dest="as_json", action="store_true", help="Print as a JSON object")

    return parser


def _format_value(store: ConfigStore, key: str, value_type: str) -> str:
    if value_type == "int":
        return str(store.get_int(key))
    if value_type == "float":
        return str(store.get_float(key))
    if value_type == "bool":
        return str(store.get_bool(key)).lower()
    if value_type == "list":
        return "\n".join(store.get_list(key))
    return store.get_string(key)


def _show(store: ConfigStore, as_json: bool) -> None:
    values = {key: store.get_string(key) for key in store.keys()}
    if as_json:
        print(json.dumps(values, indent=2, sort_keys=True))
        return
    for key, value in values.items():
        print(f"{key}={value}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    configure_logging(
        level=logging.getLevelName(args.log_level),
        json_format=args.log_json,
    )

    try:
        store = load(path=args.path, profile=args.profile, argv=[], strict=args.strict)

        if args.command == "get":
            if not store.exists(args.key):
                print(f"Key not found: {args.key}", file=sys.stderr)
                return EXIT_KEY_NOT_FOUND
            print(_format_value(store, args.key, args.value_type))
        else:
            _show(store, args.as_json)

    except GConfigError as e:
        logger.error(f"Configuration error: {e.message}", extra=e.to_dict())
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
