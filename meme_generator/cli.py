"""
Command-line interface for the meme generator
"""
import argparse
import logging
import os
import sys

from .config import Config
from .core import caption_placement
from .editor import MemeEditor
from .services.errors import ExportError


def layer_overrides(args, position):
    """Collect the caption options shared by both layers plus one position."""
    return {
        'font_size': args.font_size,
        'color': args.color,
        'stroke_color': args.stroke_color,
        'stroke_width': args.stroke_width,
        'vertical_position': position,
    }


def find_default_config(cwd=None):
    """Cerca config.yml o config.yaml nella directory ``cwd``"""
    cwd = cwd or os.getcwd()
    for name in ('config.yml', 'config.yaml'):
        candidate = os.path.join(cwd, name)
        if os.path.exists(candidate):
            return candidate
    return None


def print_layout(editor, scale):
    """Dry-run: stampa la posizione delle didascalie in anteprima ed export"""
    image = editor.image
    print(f"Image: {image.width}x{image.height}")
    for label, k in (('Preview', 1), ('Export', scale)):
        width, height = int(round(image.width * k)), int(round(image.height * k))
        print(f"\n{label} {width}x{height}")
        for which in ('top', 'bottom'):
            layer = editor.document.layer(which)
            if layer.is_empty:
                print(f"- {which}: [empty]")
                continue
            p = caption_placement(layer, width, height, image.height)
            print(f"- {which}: '{layer.content}' x={p.x:.1f} baseline={p.y:.1f} "
                  f"font={p.font_px}px stroke={p.stroke_px:g}px")


def build_parser():
    parser = argparse.ArgumentParser(description='Meme generator: captions an image and exports a PNG')
    parser.add_argument('--config', type=str, help='Path to the YAML configuration file')
    parser.add_argument('--image', type=str, required=True, help='Image file path or http(s) URL')
    parser.add_argument('--top', type=str, help='Top caption text')
    parser.add_argument('--bottom', type=str, help='Bottom caption text')
    parser.add_argument('--font-size', type=float, help='Font size in points at the image native height')
    parser.add_argument('--color', type=str, help='Fill color (e.g. #FFFFFF)')
    parser.add_argument('--stroke-color', type=str, help='Outline color (e.g. #000000)')
    parser.add_argument('--stroke-width', type=float, help='Outline width, 0 disables the outline')
    parser.add_argument('--top-position', type=float, help='Top caption baseline, percent of height')
    parser.add_argument('--bottom-position', type=float, help='Bottom caption baseline, percent of height')
    parser.add_argument('--scale', type=float, help='Export scale factor (default 2)')
    parser.add_argument('--font', type=str, dest='font_path', help='Path to a TrueType font')
    parser.add_argument('--output-dir', type=str, help='Output directory for the exported PNG')
    parser.add_argument('--dry-run', action='store_true', help='Print the caption layout without writing files')
    return parser


def main(argv=None):
    """Funzione principale CLI"""
    # Minimal logging setup; services use logging for diagnostics.
    logging.basicConfig(level=logging.INFO)
    args = build_parser().parse_args(argv)

    # Carica configurazione (se non viene passato --config prova config.yml o config.yaml)
    config = Config(config_file=args.config or find_default_config())
    top = layer_overrides(args, args.top_position)
    top['content'] = args.top
    bottom = layer_overrides(args, args.bottom_position)
    bottom['content'] = args.bottom
    config.update_from_args({
        'output_dir': args.output_dir,
        'export_scale': args.scale,
        'font_path': args.font_path,
        'top_text': top,
        'bottom_text': bottom,
    })

    errors = []
    try:
        editor = MemeEditor(config, on_error=errors.append)
    except ValueError as e:
        print(f"Invalid caption settings: {e}")
        return 1

    editor.select_image(args.image)
    if editor.image is None:
        reason = errors[-1] if errors else 'unknown error'
        print(f"Error loading image: {reason}")
        return 1

    if args.dry_run:
        print_layout(editor, config.get('export_scale', 2))
        return 0

    if not editor.preview.available:
        reason = editor.preview.error or (errors[-1] if errors else 'unknown error')
        print(f"Preview unavailable: {reason}")
        return 1

    try:
        path = editor.save()
    except ExportError as e:
        print(f"Export error: {e}")
        return 1
    print(f"✓ Meme saved: {path}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
