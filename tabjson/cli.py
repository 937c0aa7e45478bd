"""Command line interface for tabjson."""

import argparse
import os
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import Settings
from .converter import TableConverter
from .exceptions import TabJsonError, ResourceError
from .history import HistoryManager, create_history_store
from .parsers import EmptyInputError
from .schemas import BorderDetection
from .tools import (
    format_json,
    minify_json,
    encode_base64,
    decode_base64,
    timestamp_to_datetime,
    datetime_to_timestamp,
    current_timestamp,
)
from .utils import set_level


def _read_input(path: Optional[str]) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ResourceError(f"Cannot read {path}: {e.strerror or e}") from e


def _print_text(console: Console, text: str) -> None:
    console.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)


def _load_settings(args: argparse.Namespace) -> Settings:
    overrides = {}
    if getattr(args, "indent", None) is not None:
        overrides["indent"] = args.indent
    if getattr(args, "border_detection", None) is not None:
        overrides["border_detection"] = args.border_detection
    if getattr(args, "no_history", False):
        overrides["history_enabled"] = False
    settings = Settings.from_env(env_file=args.env_file, **overrides)
    set_level(settings.log_level)
    return settings


def default_history_dir() -> Path:
    """Per-user history directory used when TABJSON_HISTORY_DIR is unset"""
    cache_home = os.environ.get("XDG_CACHE_HOME") or Path.home() / ".cache"
    return Path(cache_home) / "tabjson"


def _open_history(settings: Settings) -> HistoryManager:
    store = create_history_store(settings, default_dir=default_history_dir())
    return HistoryManager(store, max_items=settings.history_max_items)


def _cmd_convert(args: argparse.Namespace, console: Console) -> int:
    settings = _load_settings(args)
    text = _read_input(args.file)
    if not text.strip():
        raise EmptyInputError()

    history = _open_history(settings) if settings.history_enabled else None
    try:
        converter = TableConverter.from_settings(settings, history=history)
        result = converter.convert(text)
    finally:
        if history is not None:
            history.store.close()

    if not result.ok:
        raise TabJsonError(result.error)

    if args.output == "json":
        _print_text(console, result.output)
    elif args.output == "csv":
        _print_text(console, converter.table.to_dataframe().to_csv(index=False).rstrip("\n"))
    else:
        table = Table(show_lines=False)
        for header in dict.fromkeys(converter.table.headers):
            table.add_column(escape(header))
        for row in converter.table.rows:
            table.add_row(*("NULL" if value is None else escape(str(value)) for value in row.values()))
        console.print(table)
    return 0


def _cmd_history(args: argparse.Namespace, console: Console) -> int:
    settings = _load_settings(args)
    history = _open_history(settings)
    try:
        if args.action == "clear":
            history.clear()
            console.print("History cleared")
        elif args.action == "show":
            try:
                item = history.get(args.index)
            except IndexError as e:
                raise TabJsonError(str(e)) from e
            _print_text(console, item.formatted)
        else:
            items = history.load()
            if not items:
                console.print("No history")
                return 0
            table = Table("#", "Name")
            for index, item in enumerate(items):
                table.add_row(str(index), escape(item.name))
            console.print(table)
    finally:
        history.store.close()
    return 0


def _cmd_json(args: argparse.Namespace, console: Console) -> int:
    settings = _load_settings(args)
    text = _read_input(args.file)
    if args.action == "minify":
        _print_text(console, minify_json(text))
    else:
        _print_text(console, format_json(text, indent=settings.indent))
    return 0


def _cmd_base64(args: argparse.Namespace, console: Console) -> int:
    _load_settings(args)
    text = _read_input(args.file)
    if args.action == "decode":
        _print_text(console, decode_base64(text))
    else:
        _print_text(console, encode_base64(text))
    return 0


def _cmd_timestamp(args: argparse.Namespace, console: Console) -> int:
    _load_settings(args)
    if args.from_date is not None:
        view = datetime_to_timestamp(args.from_date)
    elif args.value is not None:
        view = timestamp_to_datetime(args.value)
    else:
        view = current_timestamp()

    table = Table(show_header=False)
    table.add_row("timestamp", str(view.timestamp))
    table.add_row("local", view.local)
    table.add_row("iso", view.iso)
    console.print(table)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tabjson", description="Convert textual table dumps to JSON")
    parser.add_argument("--env-file", default=None, help="Read TABJSON_* settings from this .env file")
    sub = parser.add_subparsers(dest="command", required=True)

    convert = sub.add_parser("convert", help="Convert a bordered or delimited table to JSON")
    convert.add_argument("file", nargs="?", help="Input file (default: stdin)")
    convert.add_argument("--indent", type=int, default=None)
    convert.add_argument("--output", choices=["json", "csv", "table"], default="json")
    convert.add_argument(
        "--border-detection",
        choices=[mode.value for mode in BorderDetection],
        default=None,
    )
    convert.add_argument("--no-history", action="store_true", help="Do not remember this conversion")
    convert.set_defaults(handler=_cmd_convert)

    history = sub.add_parser("history", help="List, show or clear remembered conversions")
    history_sub = history.add_subparsers(dest="action", required=True)
    history_sub.add_parser("list")
    show = history_sub.add_parser("show")
    show.add_argument("index", type=int)
    history_sub.add_parser("clear")
    history.set_defaults(handler=_cmd_history)

    json_cmd = sub.add_parser("json", help="Format or minify JSON")
    json_cmd.add_argument("action", choices=["format", "minify"])
    json_cmd.add_argument("file", nargs="?")
    json_cmd.add_argument("--indent", type=int, default=None)
    json_cmd.set_defaults(handler=_cmd_json)

    b64 = sub.add_parser("base64", help="Encode or decode Base64 text")
    b64.add_argument("action", choices=["encode", "decode"])
    b64.add_argument("file", nargs="?")
    b64.set_defaults(handler=_cmd_base64)

    ts = sub.add_parser("timestamp", help="Convert between Unix timestamps and dates")
    ts.add_argument("value", nargs="?", help="Seconds or milliseconds since the epoch")
    ts.add_argument("--from-date", default=None, help="Date to convert to a timestamp")
    ts.set_defaults(handler=_cmd_timestamp)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    console = Console()
    err_console = Console(stderr=True)
    try:
        return args.handler(args, console)
    except TabJsonError as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
