"""Bead pattern generator - command line entry point."""

import argparse
import sys
from pathlib import Path

from bead_pattern.config_manager import ConfigManager
from bead_pattern.errors import PatternError
from bead_pattern.image_processing import PatternProcessor, material_list, save_pattern
from bead_pattern.models import AUTO, RenderStyle


def _height_arg(value: str):
    if value.lower() == AUTO:
        return AUTO
    return int(value)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bead-pattern",
        description="Convert an image into a fuse-bead pattern",
    )
    parser.add_argument("image", help="Input image path")
    parser.add_argument("-W", "--width", type=int, default=None,
                        help="Grid width in beads (default: from config, 29)")
    parser.add_argument("-H", "--height", type=_height_arg, default=None,
                        help="Grid height in beads or 'auto' (default: from config)")
    parser.add_argument("-p", "--palette", default=None,
                        help="JSON palette file (default: built-in Perler palette)")
    parser.add_argument("--style", choices=[s.value for s in RenderStyle], default=None,
                        help="Draw beads as circles or squares")
    parser.add_argument("-c", "--cell-size", type=int, default=None,
                        help="Output cell size in pixels")
    parser.add_argument("--no-labels", action="store_true",
                        help="Omit row/column labels on the exported image")
    parser.add_argument("-o", "--output", default=".",
                        help="Output directory (default: current directory)")
    parser.add_argument("--save-config", action="store_true",
                        help="Remember these settings as the new defaults")
    parser.add_argument("--config", type=Path, default=None,
                        help="Config file path (default: ~/.bead_pattern_config.json)")
    return parser


def main(argv=None) -> int:
    """Run the image -> pattern -> export pipeline."""
    args = build_parser().parse_args(argv)

    config_manager = ConfigManager(args.config) if args.config else ConfigManager()
    config = config_manager.load()

    # Command line values override saved settings
    if args.width is not None:
        config.grid_width = args.width
    if args.height is not None:
        config.grid_height = args.height
    if args.palette is not None:
        config.palette_file = args.palette
    if args.style is not None:
        config.render_style = RenderStyle(args.style)
    if args.cell_size is not None:
        config.cell_size = args.cell_size
    if args.no_labels:
        config.show_labels = False

    try:
        palette = config_manager.load_palette(config)
        processor = PatternProcessor(config, palette)
        pattern = processor.process(args.image)

        print("\nMaterials:")
        for color, count in material_list(pattern, palette):
            print(f"  {color.id:<6} {color.name:<16} {color.hex}  x{count}")

        output_path = save_pattern(
            pattern,
            args.output,
            cell_size=config.cell_size,
            style=config.render_style,
            show_labels=config.show_labels,
        )
    except (PatternError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Saved pattern to {output_path}")

    if args.save_config:
        ok, error = config_manager.save(config)
        if not ok:
            print(f"Warning: Could not save config file: {error}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
