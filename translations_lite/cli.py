"""Command line interface for translations-lite."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Iterable

from .errors import (
    DuplicateMessageError,
    ExtractorUnavailableError,
    OptionsError,
    TranslationFileError,
)
from .extract import load_extractor
from .loaders import load_config
from .manager import TranslationsManager
from .options import ManagerOptions


def parse_locales(raw: str) -> list[str]:
    """Parse a comma separated list of locales."""

    locales = [item.strip() for item in raw.split(",") if item.strip()]
    if not locales:
        raise argparse.ArgumentTypeError("Provide at least one locale")
    return locales


def _normalise_keys(config: dict[str, Any]) -> dict[str, Any]:
    """Map camelCase config keys onto field names."""

    aliases = {
        field.alias: name
        for name, field in ManagerOptions.model_fields.items()
        if field.alias
    }
    return {aliases.get(key, key): value for key, value in config.items()}


def build_options(args: argparse.Namespace) -> dict[str, Any]:
    """Merge the config file with command line overrides."""

    options = _normalise_keys(load_config(args.config))
    overrides = {
        "messages_dir": args.messages_dir,
        "source": args.source,
        "translations_dir": args.translations_dir,
        "locales": args.locales,
        "default_locale": args.default_locale,
        "run_log": args.run_log,
    }
    options.update(
        {key: value for key, value in overrides.items() if value is not None}
    )
    if args.sort_keys:
        options["sort_keys"] = True
    if args.strict_duplicates:
        options["strict_duplicates"] = True
    return options


def _make_manager(args: argparse.Namespace) -> TranslationsManager:
    options = build_options(args)
    config_ref = options.pop("extractor", None)
    extractor_ref = args.extractor or config_ref
    extractor = load_extractor(extractor_ref) if extractor_ref else None
    return TranslationsManager(options, extractor=extractor)


def cmd_check(args: argparse.Namespace) -> int:
    manager = _make_manager(args)
    manager.report(short=args.short, color=args.color)
    return 0 if manager.is_clean else 1


def cmd_sync(args: argparse.Namespace) -> int:
    manager = _make_manager(args)
    manager.report(short=args.short, color=args.color)
    manager.write_files()
    return 0


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML or JSON file with manager options.",
    )
    parser.add_argument(
        "--messages-dir",
        type=Path,
        help="Directory with JSON arrays of extracted messages.",
    )
    parser.add_argument("--source", help="Glob pattern of source files to extract.")
    parser.add_argument(
        "--extractor",
        help="Extractor callable as 'module:function' (used with --source).",
    )
    parser.add_argument(
        "--translations-dir",
        type=Path,
        help="Directory holding one JSON file per locale.",
    )
    parser.add_argument(
        "--locales",
        type=parse_locales,
        help="Comma separated locales, e.g. en,de.",
    )
    parser.add_argument("--default-locale", help="Locale holding default texts.")
    parser.add_argument(
        "--sort-keys",
        action="store_true",
        help="Write translation keys in alphabetical order.",
    )
    parser.add_argument(
        "--strict-duplicates",
        action="store_true",
        help="Fail when one message id has two different default texts.",
    )
    parser.add_argument(
        "--short",
        action="store_true",
        help="Print only the summary line per locale.",
    )
    parser.add_argument(
        "--color",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Force coloured output on or off (default: auto).",
    )
    parser.add_argument("--run-log", type=Path, help="Append run events to this JSONL.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="translations-lite",
        description="Keep locale JSON files in sync with extracted messages.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parser_check = subparsers.add_parser(
        "check", help="Report differences; exit 1 when files are out of date"
    )
    _add_common_arguments(parser_check)
    parser_check.set_defaults(func=cmd_check)

    parser_sync = subparsers.add_parser(
        "sync", help="Report differences and rewrite translation files"
    )
    _add_common_arguments(parser_sync)
    parser_sync.set_defaults(func=cmd_sync)

    return parser


def main(argv: Iterable[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return args.func(args)
    except (
        OptionsError,
        ExtractorUnavailableError,
        DuplicateMessageError,
        TranslationFileError,
    ) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
