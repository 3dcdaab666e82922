"""Command-line front door for worldviewer.

Loads a container (world directory or ``.mcworld``/zip archive), applies the
requested expansions, scroll offsets, and selection, then prints the visible
tree rows followed by the selection preview.
"""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from pathlib import Path

from .backend import RecordSource, container_ref_for_path, load_records_file, make_container_reader
from .entry_model import DirectoryEntry, StructuralPath, parse_entry_path, walk_entries
from .errors import BackendFailure
from .runtime import BrowserSession, Preview, config
from .tree_model import format_tree_rows
from .ui_theme import UITheme, available_theme_names, normalize_theme_name, resolve_theme


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _scroll_request(value: str) -> tuple[StructuralPath, int]:
    """argparse type for ``PATH=OFFSET`` window scroll requests."""
    raw_path, sep, raw_offset = value.rpartition("=")
    if not sep or not raw_path:
        raise argparse.ArgumentTypeError(f"expected PATH=OFFSET, got {value!r}")
    try:
        offset = int(raw_offset)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid scroll offset: {raw_offset!r}") from exc
    return parse_entry_path(raw_path), max(0, offset)


def _default_viewport_rows() -> int:
    """Resolve default window height from current terminal size."""
    term = shutil.get_terminal_size((80, 24))
    return max(1, term.lines - 4)


def _static_record_source(records: list[dict[str, object]] | None) -> RecordSource | None:
    """Serve the same preloaded record list for every container."""
    if records is None:
        return None

    def record_source(_ref: object) -> list[dict[str, object]]:
        return records

    return record_source


def _expand_with_ancestors(session: BrowserSession, path: StructuralPath) -> None:
    for depth in range(2, len(path) + 1):
        session.expansion.expand(path[:depth])


def _expand_all(session: BrowserSession) -> None:
    for path, entry in walk_entries(session.tree):
        if isinstance(entry, DirectoryEntry):
            session.expansion.expand(path)


def _save_preferences(args: argparse.Namespace) -> None:
    """Persist explicitly passed display options to the config file."""
    if args.threshold is not None:
        config.save_window_threshold(args.threshold)
    if args.theme is not None:
        config.save_theme_name(normalize_theme_name(args.theme))
    if args.sizes is not None:
        config.save_show_size_labels(args.sizes)


def render_preview(preview: Preview, theme: UITheme) -> str:
    """Render the preview block shown below the tree rows."""
    reset = theme.reset
    lines = [f"{theme.preview_heading}Preview{reset}"]
    if preview.title:
        lines.append(f"{theme.preview_heading}{preview.title}{reset}")
    lines.append(f"{theme.preview_text}{preview.text}{reset}")
    return "\n".join(lines) + "\n"


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and print the container tree for a path.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    parser = argparse.ArgumentParser(
        description="Browse a world container: nested files plus its key-value records as a db/ directory."
    )
    parser.add_argument("path", nargs="?", default=None, help="World directory or archive. Defaults to current directory.")
    parser.add_argument("--records", metavar="FILE", help="JSON list of {name, size} or {key_hex, size} records.")
    parser.add_argument("--expand", metavar="PATH", action="append", default=[], help="Expand PATH (e.g. root/db).")
    parser.add_argument("--expand-all", action="store_true", help="Expand every directory.")
    parser.add_argument("--select", metavar="PATH", help="Select PATH and print its preview.")
    parser.add_argument(
        "--scroll",
        metavar="PATH=OFFSET",
        type=_scroll_request,
        action="append",
        default=[],
        help="Scroll the child window of directory PATH to row OFFSET.",
    )
    parser.add_argument("--rows", type=_positive_int, default=None, help="Rows per child window (default: terminal height).")
    parser.add_argument("--threshold", type=_positive_int, default=None, help="Child count above which directories are windowed.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--sizes",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Show or hide file size labels.",
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Persist the given --threshold, --theme and --sizes/--no-sizes as defaults.",
    )
    parser.add_argument("--verbose", action="store_true", help="Log load progress to stderr.")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.save:
        _save_preferences(args)

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")

    records: list[dict[str, object]] | None = None
    if args.records is not None:
        try:
            records = load_records_file(Path(args.records))
        except BackendFailure as exc:
            raise SystemExit(exc.reason) from exc

    session = BrowserSession(
        make_container_reader(_static_record_source(records)),
        window_threshold=args.threshold or config.load_window_threshold(),
        window_padding=config.load_window_padding(),
    )
    try:
        ref = container_ref_for_path(path)
    except BackendFailure as exc:
        raise SystemExit(exc.reason) from exc

    request = session.open(ref)
    session.wait(request)
    if session.error is not None:
        raise SystemExit(f"Failed to open {path}: {session.error}")

    if args.expand_all:
        _expand_all(session)
    for raw_path in args.expand:
        _expand_with_ancestors(session, parse_entry_path(raw_path))
    for scroll_path, offset in args.scroll:
        session.scroll(scroll_path, offset)

    theme = resolve_theme(args.theme or config.load_theme_name(), no_color=args.no_color)
    viewport_rows = args.rows if args.rows is not None else _default_viewport_rows()
    lines = format_tree_rows(
        session.visible_rows(viewport_rows),
        session.expansion,
        show_size_labels=config.load_show_size_labels() if args.sizes is None else args.sizes,
        theme=theme,
    )
    sys.stdout.write("\n".join(lines) + "\n")

    if args.select is not None:
        preview = session.select_path(parse_entry_path(args.select))
        if preview is None:
            raise SystemExit(f"Entry not found: {args.select}")
        sys.stdout.write("\n" + render_preview(preview, theme))


if __name__ == "__main__":
    main()
