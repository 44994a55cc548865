"""CLI entrypoint for linkdeco."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from html import escape
from pathlib import Path

from linkdeco import __version__
from linkdeco.config import load_settings, load_snapshot, validate_settings_file
from linkdeco.constants.branding import CLI_DESCRIPTION
from linkdeco.constants.config import SETTINGS_FILENAME
from linkdeco.constants.reporting import JSON_INDENT, SCHEMA_VERSION
from linkdeco.engine import DecorationEngine
from linkdeco.exceptions import ConfigError, LinkDecoError
from linkdeco.exceptions.validation import format_errors
from linkdeco.rendering import link_classes, render_fragments

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="linkdeco",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser("validate", help="Check a settings file for rule errors")
    validate.add_argument(
        "-s",
        "--settings",
        type=Path,
        default=Path(SETTINGS_FILENAME),
        help=f"Settings file, YAML or JSON (default: {SETTINGS_FILENAME})",
    )

    decorate = subparsers.add_parser("decorate", help="Resolve the decoration for one metadata snapshot")
    decorate.add_argument(
        "-s",
        "--settings",
        type=Path,
        default=Path(SETTINGS_FILENAME),
        help=f"Settings file, YAML or JSON (default: {SETTINGS_FILENAME})",
    )
    decorate.add_argument(
        "-m",
        "--snapshot",
        type=Path,
        required=True,
        help="Snapshot file with tags, frontmatter and basename",
    )
    decorate.add_argument("--html", action="store_true", help="Print rendered fragment markup instead of JSON")
    decorate.add_argument(
        "--surface",
        choices=["reading", "live-preview"],
        default="reading",
        help="Link class set used with --html (default: reading)",
    )
    decorate.add_argument("-v", "--verbose", action="store_true", help="Log per-rule diagnostics")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if getattr(args, "verbose", False) else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    if args.command == "validate":
        return _handle_validate(args)
    if args.command == "decorate":
        return _handle_decorate(args)

    parser.error(f"Unsupported command: {args.command}")
    return 2


def _handle_validate(args: argparse.Namespace) -> int:
    errors = validate_settings_file(args.settings)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Settings are valid.")
    return 0


def _handle_decorate(args: argparse.Namespace) -> int:
    try:
        settings = load_settings(args.settings)
        snapshot = load_snapshot(args.snapshot)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except LinkDecoError as exc:
        print(f"Decorator error: {exc}", file=sys.stderr)
        return 1

    engine = DecorationEngine(settings.rules)
    outcome = engine.decorate(snapshot)
    logger.debug("%d match(es), %d fragment(s)", len(outcome.matches), len(outcome.fragments))

    if args.html:
        classes = escape(link_classes(outcome.css_class, surface=args.surface))
        print(f'class="{classes}"')
        for markup in render_fragments(outcome.fragments):
            print(markup)
        return 0

    payload = {"schema_version": SCHEMA_VERSION, "rules_fingerprint": engine.fingerprint(), **outcome.to_dict()}
    print(json.dumps(payload, indent=JSON_INDENT, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
