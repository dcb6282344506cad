"""
imgui-styles command line.

Usage:
    python -m imgui_styles list
    python -m imgui_styles show dracula
    python -m imgui_styles check-font path/to/font.ttf
    python -m imgui_styles --loglevel DEBUG check-font
"""

import sys
import argparse


def _format_value(value) -> str:
    if isinstance(value, tuple):
        return "(" + ", ".join(f"{c:.2f}" for c in value) + ")"
    return f"{value:.2f}"


def _cmd_list(args) -> int:
    from .theme import DEFAULT_THEME_ID, THEMES

    for theme_id, theme in THEMES.items():
        marker = "*" if theme_id == DEFAULT_THEME_ID else " "
        print(f"{marker} {theme_id:<24} {theme.name}")
    return 0


def _cmd_show(args) -> int:
    from .theme import THEMES

    theme = THEMES.get(args.theme)
    if theme is None:
        print(f"Unknown theme id: {args.theme}", file=sys.stderr)
        return 2

    print(f"{theme.name} ({theme.id})")
    if theme.source:
        print(f"source: {theme.source}")
    print(f"font size: {theme.font_size:g}px")
    print()
    print(f"colors ({len(theme.colors)}):")
    for role, rgba in theme.colors.items():
        print(f"  {role.name:<26} {_format_value(rgba)}")
    print(f"metrics ({len(theme.metrics)}):")
    for metric, value in theme.metrics.items():
        print(f"  {metric.field:<26} {_format_value(value)}")
    return 0


def _cmd_check_font(args) -> int:
    from .core.errors import MalformedFontData
    from .fonts import DEFAULT_FONT, FontAsset
    from .fonts.sfnt import validate_font_data

    try:
        asset = FontAsset.from_file(args.path) if args.path else DEFAULT_FONT
    except OSError as e:
        print(f"Cannot read font: {e}", file=sys.stderr)
        return 1

    try:
        tables = validate_font_data(asset.data)
    except MalformedFontData as e:
        print(f"{asset.name}: invalid font: {e}", file=sys.stderr)
        return 1

    print(f"{asset.name}: {len(asset.data)} bytes, {len(tables)} tables ({', '.join(sorted(tables))})")
    return 0


def main(argv=None):
    """Main entry point for the imgui-styles command line."""
    parser = argparse.ArgumentParser(
        prog="imgui_styles",
        description="imgui-styles - preset Dear ImGui themes and bundled font"
    )
    parser.add_argument(
        "-l", "--loglevel",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Set logging level (default: WARNING)"
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write log records to this file"
    )
    parser.add_argument(
        "--log-console",
        action="store_true",
        help="Also log to console (stderr)"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List built-in themes (* marks the default)")
    list_parser.set_defaults(func=_cmd_list)

    show_parser = subparsers.add_parser("show", help="Print a theme's colors and metrics")
    show_parser.add_argument("theme", help="Theme id, see 'list'")
    show_parser.set_defaults(func=_cmd_show)

    font_parser = subparsers.add_parser("check-font", help="Validate a TrueType/OpenType file")
    font_parser.add_argument(
        "path",
        nargs="?",
        help="Font file to check (default: the bundled font)"
    )
    font_parser.set_defaults(func=_cmd_check_font)

    args = parser.parse_args(argv)

    from .logging import setup_logging
    setup_logging(
        level=args.loglevel,
        log_file=args.log_file,
        console=args.log_console
    )

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
