# comparetable/cli.py

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from . import __version__
from .config import ReportConfig, default_state_path, env_prefers_dark
from .io.store import JsonFileStore
from .report.pipeline import run_report
from .theme import ThemeController


def _add_common_flags(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output (errors still printed).",
    )


def _add_theme_flags(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--state",
        default=None,
        help="JSON file holding the persisted theme (default: $COMPARETABLE_STATE or ~/.config/comparetable/state.json)",
    )
    p.add_argument(
        "--prefers-dark",
        dest="prefers_dark",
        action="store_true",
        help="Treat the system colour scheme as dark (also: COMPARETABLE_PREFERS_DARK=1)",
    )


def _state_store(args: argparse.Namespace) -> JsonFileStore:
    path = Path(args.state).expanduser() if args.state else default_state_path()
    return JsonFileStore(path)


# -----------------------
# command implementations
# -----------------------

def _cmd_render(args: argparse.Namespace) -> int:
    in_dir = Path(args.input).resolve()
    out_dir = Path(args.out).resolve() if args.out else in_dir

    config = ReportConfig(
        title=args.title,
        output_name=args.name,
        raw_html=args.raw_html,
    )

    return run_report(
        in_dir=in_dir,
        out_dir=out_dir,
        config=config,
        data_path=Path(args.data).resolve() if args.data else None,
        notes_path=Path(args.notes).resolve() if args.notes else None,
        store=_state_store(args),
        prefers_dark=args.prefers_dark or env_prefers_dark(),
        quiet=args.quiet,
    )


def _cmd_theme(args: argparse.Namespace) -> int:
    controller = ThemeController(
        _state_store(args),
        prefers_dark=args.prefers_dark or env_prefers_dark(),
    )
    controller.resolve()
    if args.action == "toggle":
        controller.toggle()

    print(f"{controller.theme.value} {controller.indicator}")
    return 0


# -----------------------
# parser wiring
# -----------------------

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="comparetable",
        description="Comparison table + footnotes HTML renderer",
    )
    p.add_argument("--version", action="store_true", help="Print version and exit.")
    p.add_argument("--verbose", action="store_true", help="Enable debug logging on stderr.")

    sub = p.add_subparsers(dest="cmd")

    # render
    pr = sub.add_parser("render", help="Render data.csv + notes.csv into an HTML page.")
    pr.add_argument(
        "--in",
        dest="input",
        required=True,
        help="Directory containing data.csv and notes.csv",
    )
    pr.add_argument("--data", default=None, help="Path to the data CSV (overrides --in/data.csv)")
    pr.add_argument("--notes", default=None, help="Path to the notes CSV (overrides --in/notes.csv)")
    pr.add_argument(
        "--out",
        default=None,
        help="Directory to write the HTML page (defaults to --in)",
    )
    pr.add_argument("--name", default="index.html", help="Output file name (default: index.html)")
    pr.add_argument("--title", default="Comparison", help="Page title (default: Comparison)")
    pr.add_argument("--raw-html", dest="raw_html", action="store_true", help="Insert header/cell text without HTML escaping")
    _add_theme_flags(pr)
    _add_common_flags(pr)
    pr.set_defaults(_fn=_cmd_render)

    # theme
    pt = sub.add_parser("theme", help="Show or toggle the persisted light/dark theme.")
    pt.add_argument("action", nargs="?", choices=["show", "toggle"], default="show")
    _add_theme_flags(pt)
    pt.set_defaults(_fn=_cmd_theme)

    return p


# -----------------------
# entrypoint
# -----------------------

def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(__version__)
        return 0

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )

    if not getattr(args, "cmd", None):
        parser.print_help(sys.stderr)
        return 2

    fn = getattr(args, "_fn", None)
    if fn is None:
        parser.print_help(sys.stderr)
        return 2

    try:
        return int(fn(args))
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130
