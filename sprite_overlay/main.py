#!/usr/bin/env python
"""
Sprite Overlay CLI - Procedural effect layers for pixel art sprites

Usage:
    sprite-overlay <input_image> --effect <name> [options]

Examples:
    sprite-overlay torch.png --effect flame                        # Default flame colors
    sprite-overlay torch.png -e flame -c "#FF4500" "#FFD700"       # Custom gradient
    sprite-overlay knife.png -e drip --composite                   # Drip drawn over sprite
    sprite-overlay shield.png --preset rust --seed 7               # Reproducible preset
    sprite-overlay tiles.png --slice 16                            # Cut a sheet into tiles
"""

import argparse
import sys
from pathlib import Path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='sprite-overlay',
        description="Procedural overlay layers for pixel art sprites",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Available Overlays:
  flame      - Ragged flame tongues rising off the top edge (alias: fire, burn)
  drip       - Drips running down off the bottom edge (alias: melt, bleed)
  glow       - Banded halo diffusing outward (alias: aura, halo)
  corrosion  - Rust/acid patches spreading over the sprite (alias: rust, acid)

Examples:
  %(prog)s torch.png --effect flame
  %(prog)s gem.png --effect glow --colors "#FFFFFF" "#00FFFF40"
  %(prog)s armor.png --effect corrosion --iterations 6 --seeds 4
  %(prog)s --list-presets
  %(prog)s sheet.png --slice 32 -o tiles/
        """
    )

    parser.add_argument(
        'input',
        type=str,
        nargs='?',  # Optional for --list-presets
        default=None,
        help='Input sprite image (PNG, GIF, etc.)'
    )

    parser.add_argument(
        '-o', '--output',
        type=str,
        default=None,
        help='Output path (auto-generated if not specified)'
    )

    parser.add_argument(
        '-e', '--effect',
        type=str,
        default=None,
        help='Overlay to generate: flame, drip, glow, corrosion (or an alias)'
    )

    parser.add_argument(
        '-c', '--colors',
        type=str,
        nargs='+',
        default=None,
        help='Overlay colors as #RRGGBB[AA] or r,g,b[,a] (gradient start and end)'
    )

    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Random seed for reproducible output'
    )

    parser.add_argument(
        '--composite',
        action='store_true',
        help='Write the overlay composited atop the sprite'
    )

    parser.add_argument(
        '--preset',
        type=str,
        default=None,
        help='Use a preset for effect, colors and tuning'
    )

    parser.add_argument(
        '--list-presets',
        action='store_true',
        help='List available presets and exit'
    )

    parser.add_argument(
        '--gradient-size',
        type=int,
        default=None,
        help='Number of gradient steps (flame/drip/glow)'
    )

    parser.add_argument(
        '--thinning',
        type=float,
        default=None,
        help='Chance (0-1) to skip a growing pixel (flame/drip/glow)'
    )

    parser.add_argument(
        '--iterations',
        type=int,
        default=None,
        help='Automaton steps (corrosion)'
    )

    parser.add_argument(
        '--seeds',
        type=int,
        default=None,
        help='Starting corroded cells (corrosion)'
    )

    parser.add_argument(
        '--slice',
        type=int,
        default=None,
        metavar='TILE_SIZE',
        help='Slice the input spritesheet into TILE_SIZE tiles instead'
    )

    parser.add_argument(
        '--remove-bg',
        action='store_true',
        help='Remove a flat background color before generating'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Show tracebacks on errors'
    )

    return parser


def list_presets_command() -> None:
    from sprite_overlay.core.presets import get_preset_manager
    from sprite_overlay.procedural import get_overlay
    manager = get_preset_manager()

    # Group under the overlay each preset resolves to, aliases included
    groups = {}
    for name in manager.list_all():
        preset = manager.get(name)
        try:
            effect = get_overlay(preset.effect).name
        except ValueError:
            effect = preset.effect
        groups.setdefault(effect, []).append(preset)

    print("Available Overlay Presets:\n")

    order = ['flame', 'drip', 'glow', 'corrosion']
    for effect in order + sorted(set(groups) - set(order)):
        if effect not in groups:
            continue
        print(f"  [{effect.upper()}]")
        for preset in groups[effect]:
            print(f"    {preset.name:<16} - {preset.description}")
        print()

    print(f"Total: {len(manager.list_all())} presets")
    print("\nUsage: --preset <name>")


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_presets:
        list_presets_command()
        sys.exit(0)

    if not args.input:
        print("Error: Input file is required")
        print("Usage: sprite-overlay <input_image> --effect <name>")
        print("       sprite-overlay --list-presets")
        sys.exit(1)

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: Input file not found: {args.input}")
        sys.exit(1)

    # Import here to keep --help fast
    from sprite_overlay import overlay, slice_sheet

    try:
        if args.slice is not None:
            print(f"Slicing: {args.input} ({args.slice}x{args.slice} tiles)")
            paths = slice_sheet(args.input, args.slice, output_dir=args.output)
            print(f"Tiles: {len(paths)}")
            print("Done!")
            return

        if not args.effect and not args.preset:
            print("Error: --effect or --preset is required")
            sys.exit(1)

        params = {
            'gradient_size': args.gradient_size,
            'thinning': args.thinning,
            'iterations': args.iterations,
            'seeds': args.seeds,
        }
        params = {k: v for k, v in params.items() if v is not None}

        if args.preset:
            print(f"Using preset: {args.preset}")
        print(f"Applying: {args.effect or args.preset} to {args.input}")

        output = overlay(
            args.input,
            effect=args.effect,
            output_path=args.output,
            colors=args.colors,
            seed=args.seed,
            composite=args.composite,
            preset=args.preset,
            remove_background=args.remove_bg,
            **params
        )

        print(f"Output: {output}")
        print("Done!")

    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        sys.exit(1)


if __name__ == '__main__':
    main()
