"""CLI argument parsing and main entry point."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import atlas_composer.config as ac_config
import atlas_composer.runtime as ac_runtime
from atlas_composer.composer import AtlasComposer
from atlas_composer.config_defaults import (
    DEFAULT_BASE_NAME,
    DEFAULT_COLUMNS,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_SPACING,
)
from atlas_composer.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence


def _non_negative_int(text: str) -> int:
    """Argparse type accepting integers >= 0."""
    try:
        value = int(text)
    except ValueError as exc:
        msg = f"invalid integer: {text!r}"
        raise argparse.ArgumentTypeError(msg) from exc
    if value < 0:
        msg = f"must be zero or positive, got {value}"
        raise argparse.ArgumentTypeError(msg)
    return value


def _positive_int(text: str) -> int:
    """Argparse type accepting integers >= 1."""
    value = _non_negative_int(text)
    if value == 0:
        msg = "must be positive, got 0"
        raise argparse.ArgumentTypeError(msg)
    return value


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the command-line interface."""
    p = argparse.ArgumentParser(
        prog="atlas-composer",
        description=(
            "Pack images onto a uniform grid and export a PNG texture "
            "plus a Tiled tileset JSON descriptor."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  atlas-composer grass.png dirt.png water.png --columns 3\n"
            "  atlas-composer sprites/*.png --spacing 2 --name hero "
            "--output build/\n"
            "  atlas-composer *.png --tile-width 32 --tile-height 32 "
            "--preview\n"
        ),
    )
    p.add_argument(
        "images", nargs="*", type=Path,
        help="Images to place, in grid order")
    p.add_argument(
        "--version", action="store_true",
        help="Print the version and exit")

    layout = p.add_argument_group("layout")
    layout.add_argument(
        "--spacing", type=_non_negative_int, default=argparse.SUPPRESS,
        help=f"Pixels between cells (default: {DEFAULT_SPACING})")
    layout.add_argument(
        "--columns", type=_positive_int, default=argparse.SUPPRESS,
        help=f"Cells per row (default: {DEFAULT_COLUMNS})")
    layout.add_argument(
        "--tile-width", type=_non_negative_int, default=argparse.SUPPRESS,
        help="Cell width applied after loading; defaults to the widest image")
    layout.add_argument(
        "--tile-height", type=_non_negative_int, default=argparse.SUPPRESS,
        help=("Cell height applied after loading; defaults to the tallest "
              "image"))

    output = p.add_argument_group("output")
    output.add_argument(
        "--name", type=str, default=argparse.SUPPRESS,
        help=f"Base name for exported files (default: {DEFAULT_BASE_NAME})")
    output.add_argument(
        "--output", type=str, default=argparse.SUPPRESS,
        help=f"Export directory (default: {DEFAULT_OUTPUT_DIR})")
    output.add_argument(
        "--preview", action="store_true", default=argparse.SUPPRESS,
        help="Open the composite in the system image viewer")

    cfg = p.add_argument_group("config")
    cfg.add_argument(
        "--config", type=str,
        help="Path to config.toml file")
    cfg.add_argument(
        "--validate-config-only", action="store_true",
        help="Validate config file and exit without composing")

    return p


def log_parameters(
    images: Sequence[Path],
    cfg: ac_config.ComposerConfig,
    args: argparse.Namespace,
) -> None:
    """Log all effective parameters."""
    logger.info("Input images: %d", len(images))
    if getattr(args, "config", None):
        logger.info("Loaded config from: %s", args.config)
    logger.info("Output Directory: %s", cfg.output.directory)
    logger.info("Base Name: %s", cfg.output.name)
    logger.info("Columns: %d", cfg.layout.columns)
    logger.info("Spacing: %d", cfg.layout.spacing)
    logger.info(
        "Tile Size Override: %s x %s",
        cfg.layout.tile_width if cfg.layout.tile_width is not None
        else "auto",
        cfg.layout.tile_height if cfg.layout.tile_height is not None
        else "auto",
    )


def run_from_args(args: argparse.Namespace) -> int:
    """Compose and export from parsed arguments; returns an exit code."""
    base_cfg: ac_config.ComposerConfig | None = None
    if args.config:
        base_cfg = ac_config.ConfigLoader.load(args.config)
        if args.validate_config_only:
            logger.info("Config %s validated successfully.", args.config)
            return 0

    cfg = ac_config.build_config_from_cli(vars(args), base_config=base_cfg)
    ac_runtime.validate_base_name(cfg.output.name)
    ac_runtime.validate_input_paths(args.images)
    log_parameters(args.images, cfg, args)

    composer = AtlasComposer.from_config(cfg)
    decoded = composer.add_images(args.images)
    if decoded.failures:
        logger.warning(
            "%d of %d images could not be decoded",
            len(decoded.failures), len(args.images),
        )
    composer.set_cell_size(
        width=cfg.layout.tile_width,
        height=cfg.layout.tile_height,
    )

    descriptor = composer.descriptor()
    logger.info(
        "Composite: %dx%d, %d tiles of %dx%d",
        descriptor.imagewidth, descriptor.imageheight,
        descriptor.tilecount, descriptor.tilewidth, descriptor.tileheight,
    )

    if cfg.output.preview:
        if len(composer):
            composer.render().show(title=descriptor.name)
        else:
            logger.warning("Nothing to preview: no images decoded")

    report = ac_runtime.export_atlas(
        composer,
        choose_directory=lambda: ac_runtime.setup_output_directory(
            cfg.output.directory,
        ),
    )
    if report is None or not report.ok:
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command-line interface."""
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)

    if args.version:
        print(ac_runtime.resolve_project_version())  # noqa: T201
        return 0

    if not args.validate_config_only and not args.images:
        arg_parser.error("the following arguments are required: images")
    if args.validate_config_only and not args.config:
        arg_parser.error("--validate-config-only requires --config")

    try:
        return run_from_args(args)
    except (FileNotFoundError, ValueError) as exc:
        arg_parser.error(str(exc))
    return 2  # pragma: no cover


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
