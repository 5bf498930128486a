"""
tokenkit command line.

Resolves tokens for a platform and prints them, or the output of one
accessor, as JSON.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from tokenkit.config import load_config
from tokenkit.context import TokenContext

logger = logging.getLogger("tokenkit.cli")


def get_context(args: argparse.Namespace) -> TokenContext:
    try:
        config = load_config(Path(args.config) if args.config else None)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Could not load configuration: {e}")
        sys.exit(1)

    updates: dict[str, Any] = {}
    if args.platform:
        updates["platform"] = args.platform.strip().lower()
    if args.overlay_dir:
        updates["overlay_dir"] = Path(args.overlay_dir)
    if updates:
        config = config.model_copy(update=updates)

    logging.basicConfig(level=config.log_level)
    return TokenContext.create(config=config)


def emit(value: Any) -> None:
    print(json.dumps(value, indent=2, sort_keys=True, default=dict))


def handle_resolve(ctx: TokenContext, args: argparse.Namespace) -> None:
    if args.path:
        missing = object()
        value = ctx.accessor.resolve_token(args.path, missing)
        if value is missing:
            logger.error(f"Token path '{args.path}' not found for platform '{ctx.platform}'.")
            sys.exit(1)
        emit(value)
    else:
        emit(ctx.tokens)


def handle_typography(ctx: TokenContext, args: argparse.Namespace) -> None:
    options = {
        "weight": args.weight,
        "size": args.size,
        "color": args.color,
        "italic": args.italic,
    }
    emit(ctx.accessor.get_typography(args.variant, options).as_style())


def handle_component(ctx: TokenContext, args: argparse.Namespace) -> None:
    emit(ctx.accessor.get_component_tokens(args.name))


def handle_elevation(ctx: TokenContext, args: argparse.Namespace) -> None:
    emit(ctx.accessor.get_elevation(args.level))


def handle_material(ctx: TokenContext, args: argparse.Namespace) -> None:
    emit(ctx.accessor.get_material(args.type))


HANDLERS = {
    "resolve": handle_resolve,
    "typography": handle_typography,
    "component": handle_component,
    "elevation": handle_elevation,
    "material": handle_material,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Inspect resolved design tokens")
    parser.add_argument("--config", help="Path to a YAML config file")
    parser.add_argument("--platform", help="Platform to resolve (ios, android, ...)")
    parser.add_argument("--overlay-dir", help="Directory of <platform>.yaml overlays")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # resolve
    resolve_parser = subparsers.add_parser("resolve", help="Print the resolved token tree")
    resolve_parser.add_argument("--path", help="Dotted token path, e.g. colors.primary")

    # typography
    typo_parser = subparsers.add_parser("typography", help="Print a flattened text style")
    typo_parser.add_argument("variant", help="Typography variant, e.g. body or h1")
    typo_parser.add_argument("--weight", help="Named weight override")
    typo_parser.add_argument("--size", type=float, help="Font size override")
    typo_parser.add_argument("--color", help="Color override")
    typo_parser.add_argument("--italic", action="store_true", help="Use italic style")

    # component
    component_parser = subparsers.add_parser("component", help="Print component tokens")
    component_parser.add_argument("name", help="Component name, e.g. button")

    # elevation
    elevation_parser = subparsers.add_parser("elevation", help="Print elevation props")
    elevation_parser.add_argument("level", nargs="?", default="none")

    # material
    material_parser = subparsers.add_parser("material", help="Print material props")
    material_parser.add_argument("type", nargs="?", default="none")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    ctx = get_context(args)
    for warning in ctx.warnings:
        logger.warning(f"[{warning.code}] {warning.message}")

    HANDLERS[args.command](ctx, args)


if __name__ == "__main__":
    main()
