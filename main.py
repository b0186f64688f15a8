#!/usr/bin/env python3
"""
raycaster - A Python Ray Casting Renderer

Main entry point for rendering scenes.
"""

import argparse
import logging
import sys
from pathlib import Path

from raycaster.camera import Camera
from raycaster.renderer import Renderer, RenderSettings
from raycaster.scene_parser import SceneParseError, default_scene, load_scene


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description='raycaster - A Python Ray Casting Renderer',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  python main.py --output render.png
  python main.py --width 800 --height 400 --threads 4 --output wide.png
  python main.py --scene scenes/two_spheres.yaml --output scene.png
        '''
    )

    parser.add_argument('--width', type=int, default=None, help='Image width (default: 200)')
    parser.add_argument('--height', type=int, default=None, help='Image height (default: 100)')
    parser.add_argument('--threads', type=int, default=None, help='Number of threads (0=auto)')
    parser.add_argument('--output', type=str, default='output/render.png', help='Output filename')
    parser.add_argument('--scene', type=str, default=None,
                        help='Scene file (YAML or JSON); built-in scene if omitted')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable info logging')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s'
    )

    # Create scene
    if args.scene:
        try:
            world, camera, settings = load_scene(args.scene)
        except SceneParseError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
    else:
        world, camera, settings = default_scene(), Camera(), RenderSettings()

    # Command line flags override the scene file
    try:
        settings = RenderSettings(
            width=args.width if args.width is not None else settings.width,
            height=args.height if args.height is not None else settings.height,
            num_threads=args.threads if args.threads is not None else settings.num_threads,
            rows_per_task=settings.rows_per_task
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # Print header
    print("=" * 60)
    print("raycaster")
    print("=" * 60)

    print(f"\nRender Settings:")
    print(f"  Resolution: {settings.width}x{settings.height}")
    print(f"  Threads: {settings.num_threads}")
    print(f"  Objects in scene: {len(world)}")

    renderer = Renderer(settings)

    # Progress tracking
    last_progress = [0]

    def progress_callback(progress: float):
        pct = int(progress * 100)
        if pct > last_progress[0]:
            last_progress[0] = pct
            bar_len = 40
            filled = int(bar_len * progress)
            bar = '█' * filled + '░' * (bar_len - filled)
            print(f'\rRendering: [{bar}] {pct}%', end='', flush=True)

    renderer.set_progress_callback(progress_callback)

    # Render
    print("\nRendering...")
    image = renderer.render(world, camera)

    elapsed = renderer.last_render_time
    print(f"\nRender completed in {elapsed:.2f} seconds")
    if elapsed > 0:
        print(f"  Rays per second: {(settings.width * settings.height) / elapsed:.0f}")

    # Ensure output directory exists
    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    # Save image
    print(f"\nSaving to: {args.output}")
    renderer.save_image(image, args.output)

    print("\nDone!")
    return 0


if __name__ == '__main__':
    sys.exit(main())
