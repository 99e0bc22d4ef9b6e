#!/usr/bin/env python3
"""Render the five-sphere demo scene.

This script renders the demo scene end to end: it builds the scene and
camera, samples every pixel of the canvas through the recursive tracer and
saves the result.

Usage:
    python -m examples.render_spheres [options]

Options:
    --width WIDTH                Image width in pixels (default: 320)
    --height HEIGHT              Image height in pixels (default: 180)
    --depth DEPTH                Maximum reflection bounces (default: 5)
    --fov FOV                    Field of view in degrees (default: 30)
    --light-intensity INTENSITY  Emission of the light sphere (default: 3.0)
    --output OUTPUT              Output file path (default: spheres.ppm)
    --cpu                        Force the Taichi CPU backend
    --quiet                      Suppress progress output

Example:
    python -m examples.render_spheres --width 640 --height 360 --output spheres.png
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

import taichi as ti


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the five-sphere demo scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=320,
        help="Image width in pixels (default: 320)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=180,
        help="Image height in pixels (default: 180)",
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=5,
        help="Maximum reflection bounces (default: 5)",
    )
    parser.add_argument(
        "--fov",
        type=float,
        default=30.0,
        help="Field of view in degrees (default: 30)",
    )
    parser.add_argument(
        "--light-intensity",
        type=float,
        default=3.0,
        help="Emission of the light sphere (default: 3.0)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="spheres.ppm",
        help="Output file path (default: spheres.ppm)",
    )
    parser.add_argument(
        "--cpu",
        action="store_true",
        help="Force the Taichi CPU backend",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args(argv)


def render_spheres(
    width: int = 320,
    height: int = 180,
    max_depth: int = 5,
    fov: float = 30.0,
    light_intensity: float = 3.0,
    output_path: str = "spheres.ppm",
    quiet: bool = False,
) -> Path:
    """Render the demo scene and save it to a file.

    Taichi must be initialized before calling this function.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        max_depth: Maximum reflection bounces per primary ray.
        fov: Camera field of view in degrees.
        light_intensity: Emission of the light sphere on every channel.
        output_path: Output file path; the suffix selects the format.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    # Lazy imports to allow Taichi initialization first
    from src.minitrace.core.canvas import Canvas
    from src.minitrace.core.tracer import create_renderer
    from src.minitrace.scene.spheres import SpheresSceneParams, create_spheres_scene

    if not quiet:
        print(f"Creating demo scene ({width}x{height})...")

    params = SpheresSceneParams(light_intensity=light_intensity, fov=fov)
    scene, camera = create_spheres_scene(params)

    canvas = Canvas(width, height)
    render = create_renderer(scene, camera, max_depth)

    if not quiet:
        print(f"Tracing {len(scene)} objects with up to {max_depth} bounces...")

    start_time = time.time()

    def progress_callback(current: int, target: int) -> None:
        if not quiet:
            elapsed = time.time() - start_time
            progress_pct = (current / target) * 100 if target > 0 else 0
            columns_per_sec = current / elapsed if elapsed > 0 else 0
            print(
                f"\r  Progress: {current}/{target} columns "
                f"({progress_pct:.1f}%) - {columns_per_sec:.1f} columns/s",
                end="",
                flush=True,
            )

    canvas.draw(render, callback=progress_callback)

    if not quiet:
        print()  # Newline after progress

    output_file = Path(output_path)
    canvas.save(str(output_file))

    total_time = time.time() - start_time
    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {total_time:.2f}s")

    return output_file


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Initialize Taichi
    # Use GPU if available, fall back to CPU
    if args.cpu:
        ti.init(arch=ti.cpu)
    else:
        try:
            ti.init(arch=ti.gpu)
            if not args.quiet:
                print("Using GPU backend")
        except Exception:
            ti.init(arch=ti.cpu)
            if not args.quiet:
                print("Using CPU backend")

    try:
        render_spheres(
            width=args.width,
            height=args.height,
            max_depth=args.depth,
            fov=args.fov,
            light_intensity=args.light_intensity,
            output_path=args.output,
            quiet=args.quiet,
        )
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
