"""CLI entry point for inspecting and editing StoryDesk app prefs."""

from __future__ import annotations
import argparse
import asyncio
import json
import logging
import sys
from typing import Any

from config import settings
from core.json_file import JsonFileStore
from gui.app.app_prefs import AppPrefName, AppPrefs
from gui.app.bootstrap import configure_logging
from gui.app.scratch_files import cleanup_scratch_files

_PREF_CHOICES = [name.value for name in AppPrefName]


def _parse_value(raw: str) -> Any:
    """Parse a JSON value, treating anything that is not JSON as a plain string."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


async def _load_prefs(args: argparse.Namespace) -> AppPrefs:
    # Command-line pref overrides are not applied here; the CLI shows what is stored.
    prefs = AppPrefs(JsonFileStore(args.prefs_dir), args={})
    await prefs.load()
    return prefs


async def cmd_list(args: argparse.Namespace) -> None:
    prefs = await _load_prefs(args)
    print(json.dumps(prefs.as_dict(), indent=2, ensure_ascii=False))


async def cmd_get(args: argparse.Namespace) -> None:
    prefs = await _load_prefs(args)
    print(json.dumps(prefs.get(args.name), ensure_ascii=False))


async def cmd_set(args: argparse.Namespace) -> None:
    prefs = await _load_prefs(args)
    await prefs.set(args.name, _parse_value(args.value))
    print(json.dumps({args.name: prefs.get(args.name)}, ensure_ascii=False))


async def cmd_cleanup_scratch(args: argparse.Namespace) -> None:
    prefs = await _load_prefs(args)
    removed = cleanup_scratch_files(prefs)
    print(json.dumps([str(p) for p in removed], indent=2, ensure_ascii=False))


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="storydesk-prefs")
    p.add_argument(
        "--prefs-dir",
        default=settings.PREFS_DIR,
        help=f"Directory containing {settings.APP_PREFS_FILENAME}",
    )
    p.add_argument("--verbose", action="store_true", help="Log pref resolution to stderr")
    sub = p.add_subparsers(dest="command", required=True)

    list_cmd = sub.add_parser("list", help="Print all app prefs as JSON")
    list_cmd.set_defaults(func=cmd_list)

    get_cmd = sub.add_parser("get", help="Print one app pref")
    get_cmd.add_argument("name", choices=_PREF_CHOICES)
    get_cmd.set_defaults(func=cmd_get)

    set_cmd = sub.add_parser("set", help="Set and save one app pref")
    set_cmd.add_argument("name", choices=_PREF_CHOICES)
    set_cmd.add_argument("value", help="JSON value; non-JSON text is stored as a string")
    set_cmd.set_defaults(func=cmd_set)

    cleanup = sub.add_parser("cleanup-scratch", help="Delete stale scratch files")
    cleanup.set_defaults(func=cmd_cleanup_scratch)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(logging.INFO if args.verbose else logging.WARNING)
    try:
        asyncio.run(args.func(args))
    except OSError as e:
        print(f"storydesk-prefs: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
