#!/usr/bin/env python3
"""Render a demo scene or a YAML scene file.

Without ``--scene`` this builds a small room in Python: a checkered
reflective floor, a striped back wall and three spheres (one glass, one
mirror-like, one with a rings pattern) lit by a single point light.

Usage:
    python -m examples.render_scene [options]

Options:
    --scene PATH        YAML scene file (default: built-in demo scene)
    --width WIDTH       Image width in pixels (default: 320)
    --height HEIGHT     Image height in pixels (default: 180)
    --depth DEPTH       Reflection recursion depth (default: WHITTED_RECURSION_DEPTH)
    --aa METHOD         Anti-aliasing method: none, stochastic, multisampling
    --aa-level LEVEL    Anti-aliasing samples per pixel (default: 4)
    --tolerance TOL     Multisampling error tolerance (default: 0.05)
    --workers N         Render worker processes (default: WHITTED_RENDER_WORKERS)
    --seed SEED         Seed for anti-aliasing offsets
    --output OUTPUT     Output file path, .png or .ppm (default: scene.png)
    --log-level LEVEL   Log level (default: INFO)

Example:
    python -m examples.render_scene --width 640 --height 360 --aa multisampling
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
from pathlib import Path

from whitted import config
from whitted.camera import AAMethod, AntiAliasing, Camera
from whitted.core import Color, Matrix, Point, Vec3
from whitted.core.matrix import Axis
from whitted.core.scheduler import RenderError
from whitted.geometry import Plane, Sphere, glass_sphere
from whitted.logging_config import setup_logging
from whitted.materials import Checkers, Material, Rings, Stripes
from whitted.preview import save_png, save_ppm
from whitted.scene import PointLight, SceneError, World, load_scene

logger = logging.getLogger("whitted.examples.render_scene")


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a demo scene or a YAML scene file.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--scene",
        type=str,
        default=None,
        help="YAML scene file (default: built-in demo scene)",
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
        default=config.RECURSION_DEPTH,
        help=f"Reflection recursion depth (default: {config.RECURSION_DEPTH})",
    )
    parser.add_argument(
        "--aa",
        choices=["none", "stochastic", "multisampling"],
        default="none",
        help="Anti-aliasing method (default: none)",
    )
    parser.add_argument(
        "--aa-level",
        type=int,
        default=4,
        help="Anti-aliasing samples per pixel (default: 4)",
    )
    parser.add_argument(
        "--tolerance",
        type=float,
        default=0.05,
        help="Multisampling error tolerance (default: 0.05)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Render worker processes (default: WHITTED_RENDER_WORKERS)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for anti-aliasing offsets",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="scene.png",
        help="Output file path, .png or .ppm (default: scene.png)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Log level (default: INFO)",
    )
    return parser.parse_args()


def create_demo_scene(width: int, height: int) -> tuple[Camera, World]:
    """Build the demo room and a camera looking into it."""
    floor = Plane(
        material=Material(
            pattern=Checkers(Color(0.35, 0.35, 0.35), Color(0.65, 0.65, 0.65)),
            specular=0.0,
            reflective=0.3,
        )
    )
    back_wall = Plane(
        transform=Matrix.translation(0.0, 0.0, 5.0) @ Matrix.rotation(Axis.X, math.pi / 2),
        material=Material(
            pattern=Stripes(
                (Color(0.9, 0.55, 0.4), Color(0.95, 0.85, 0.7)),
                Matrix.rotation(Axis.Y, math.pi / 2) @ Matrix.scaling(0.5, 0.5, 0.5),
            ),
            specular=0.0,
        ),
    )

    glass = glass_sphere().with_transform(Matrix.translation(-0.5, 1.0, 0.5))
    mirror = Sphere(
        transform=Matrix.translation(1.5, 0.5, -0.5) @ Matrix.scaling(0.5, 0.5, 0.5),
        material=Material(color=Color(0.1, 0.1, 0.1), diffuse=0.3, reflective=0.9),
    )
    ringed = Sphere(
        transform=Matrix.translation(-1.5, 0.33, -0.75) @ Matrix.scaling(0.33, 0.33, 0.33),
        material=Material(
            pattern=Rings(
                (Color(1.0, 0.8, 0.1), Color(0.2, 0.4, 0.9)),
                Matrix.scaling(0.2, 0.2, 0.2),
            ),
            diffuse=0.7,
            specular=0.3,
        ),
    )

    world = World(
        [floor, back_wall, glass, mirror, ringed],
        [PointLight(Point(-10.0, 10.0, -10.0), Color.white())],
    )
    camera = Camera(width, height, math.pi / 3).with_transform(
        Matrix.view_transform(Point(0.0, 1.5, -5.0), Point(0.0, 1.0, 0.0), Vec3(0.0, 1.0, 0.0))
    )
    return camera, world


def render_scene(args: argparse.Namespace) -> Path:
    """Render according to ``args`` and save the image.

    Returns:
        Path to the saved image file.
    """
    if args.scene is not None:
        camera, world = load_scene(args.scene)
        if camera is None:
            raise SceneError(f"{args.scene} does not define a camera")
    else:
        camera, world = create_demo_scene(args.width, args.height)

    if args.aa != "none":
        method = AAMethod.MULTISAMPLING if args.aa == "multisampling" else AAMethod.STOCHASTIC
        camera = camera.with_antialiasing(
            AntiAliasing(method, level=args.aa_level, tolerance=args.tolerance)
        )

    canvas = camera.render(world, args.depth, workers=args.workers, seed=args.seed)

    output_file = Path(args.output)
    if output_file.suffix.lower() == ".ppm":
        save_ppm(canvas, output_file)
    else:
        save_png(canvas, output_file)
    logger.info("Saved to: %s", output_file.absolute())
    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()
    setup_logging(args.log_level)

    try:
        render_scene(args)
        return 0
    except (RenderError, OSError, ValueError) as e:
        logger.error("Error: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
