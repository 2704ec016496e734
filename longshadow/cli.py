"""CLI entry point for longshadow."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

from . import __version__
from .config import CSS_PRECISION, DEFAULT_LAYER_COUNT, DEFAULT_PROPERTY, LOG_LEVEL, SHADOW_PROPERTIES


def app(argv: list[str] | None = None) -> None:
    """Console script entrypoint."""
    raise SystemExit(main(argv))


def _add_shadow_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--direction", "-d", required=True, help='Angle (e.g. 45, 45deg, 0.25turn) or keyword ("to bottom right")')
    p.add_argument("--length", "-l", required=True, help="Offset of the last layer (e.g. 50px, 3em; bare numbers use px)")
    p.add_argument("--color", "-c", required=True, help="Shadow color (#rrggbb, #rrggbbaa, rgb(), rgba())")
    p.add_argument("--fade", "-f", default=None, help='Fade target: "transparent" or a color (default: no fade)')
    p.add_argument("--layers", "-n", type=int, default=DEFAULT_LAYER_COUNT, help="Number of shadow layers")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="longshadow",
        description="Generate long-shadow layer stacks for text-shadow and box-shadow.",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"longshadow {__version__}",
    )
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Logging level (DEBUG, INFO, WARNING, ...)")

    sub = parser.add_subparsers(dest="cmd", required=True)

    p_css = sub.add_parser("css", help="Print a CSS shadow declaration")
    _add_shadow_args(p_css)
    p_css.add_argument("--property", "-p", dest="prop", choices=SHADOW_PROPERTIES, default=DEFAULT_PROPERTY)
    p_css.add_argument("--selector", "-s", default=None, help="Wrap the declaration in a rule for this selector")
    p_css.add_argument("--precision", type=int, default=CSS_PRECISION, help="Decimal places for offsets and alpha")

    p_layers = sub.add_parser("layers", help="Print the generated layers as JSON")
    _add_shadow_args(p_layers)
    p_layers.add_argument("--indent", type=int, default=None, help="JSON indentation")

    sub.add_parser("directions", help="List direction keywords and their angles")

    args = parser.parse_args(argv)

    _setup_logging(args.log_level)

    if args.cmd == "css":
        return _cmd_css(args)
    if args.cmd == "layers":
        return _cmd_layers(args)
    if args.cmd == "directions":
        return _cmd_directions(args)

    parser.print_help()
    return 2


def _setup_logging(level: str) -> None:
    # no-op once the root logger has handlers
    if logging.getLogger().handlers:
        return
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


def _generate(args: Any) -> list:
    from .shadow.generator import generate

    return generate(
        args.direction,
        args.length,
        args.color,
        fade=args.fade,
        layer_count=args.layers,
    )


def _cmd_css(args: Any) -> int:
    from .css.render import declaration, rule
    from .shadow.errors import ShadowError

    try:
        layers = _generate(args)
        if args.selector:
            text = rule(args.selector, layers, args.prop, args.precision)
        else:
            text = declaration(layers, args.prop, args.precision) + "\n"
    except ShadowError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print(text, end="")
    return 0


def _cmd_layers(args: Any) -> int:
    from .shadow.errors import ShadowError

    try:
        layers = _generate(args)
    except ShadowError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    payload = [layer.model_dump(mode="json") for layer in layers]
    print(json.dumps(payload, indent=args.indent, ensure_ascii=False))
    return 0


def _cmd_directions(args: Any) -> int:
    from .shadow.directions import KEYWORD_ANGLES

    for keyword, degrees in KEYWORD_ANGLES.items():
        print(f"  {keyword.value:16} {degrees:g}deg")
    return 0


if __name__ == "__main__":
    app()
