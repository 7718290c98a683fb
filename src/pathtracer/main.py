# main.py
"""Command line entry point.

Usage
-----
    pathtracer model.obj --spp 100 --width 480 --height 270 -o output.png
    pathtracer --scene spheres --spp 20 -o spheres.png
"""
import argparse
import logging
import sys
from typing import List, Optional
from pathtracer.core.errors import InvalidInputError
from pathtracer.core.utils import seed_rng
from pathtracer.geometry.world import HittableList
from pathtracer.renderer.raytracer import DEFAULT_HEIGHT, DEFAULT_SAMPLES, DEFAULT_WIDTH, Renderer
from pathtracer.renderer.tone_mapping import check_output_path, save_image
from pathtracer.scenes import SCENES, mesh_scene

logger = logging.getLogger("pathtracer")

def setup_logging(level: str = "INFO") -> None:
    """Configure logging for command line runs."""
    fmt = "%(name)s [%(levelname)s] %(message)s"
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=fmt,
        stream=sys.stdout,
    )

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(
        prog="pathtracer",
        description="Monte-Carlo path tracer for OBJ models and built-in scenes",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="OBJ file to render (required for --scene mesh)",
    )
    parser.add_argument(
        "--scene",
        choices=["mesh"] + sorted(SCENES),
        default=None,
        help="Scene to render (default: mesh when INPUT is given, else spheres)",
    )
    parser.add_argument(
        "-s", "--spp",
        type=int,
        default=DEFAULT_SAMPLES,
        help=f"Number of samples per pixel (default: {DEFAULT_SAMPLES})",
    )
    parser.add_argument(
        "-W", "--width",
        type=int,
        default=DEFAULT_WIDTH,
        help=f"Rendered image width (default: {DEFAULT_WIDTH})",
    )
    parser.add_argument(
        "-H", "--height",
        type=int,
        default=DEFAULT_HEIGHT,
        help=f"Rendered image height (default: {DEFAULT_HEIGHT})",
    )
    parser.add_argument(
        "-o", "--output",
        default="output.png",
        help="Output image path (default: output.png)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Worker threads (default: chosen by the thread pool)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for reproducible renders",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: INFO)",
    )
    return parser.parse_args(argv)

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)

    scene_name = args.scene or ("mesh" if args.input else "spheres")
    aspect_ratio = args.width / args.height if args.height > 0 else 1.0

    try:
        renderer = Renderer(args.width, args.height, args.spp,
                            workers=args.workers, seed=args.seed)
        check_output_path(args.output)
        # Scene generation draws from the main thread's generator.
        seed_rng(args.seed)
        if scene_name == "mesh":
            if not args.input:
                raise InvalidInputError("the mesh scene needs an OBJ file")
            objects, camera = mesh_scene(args.input, aspect_ratio)
        else:
            objects, camera = SCENES[scene_name](aspect_ratio)
        world = HittableList(objects).build_bvh()
    except (InvalidInputError, FileNotFoundError) as e:
        logger.error("%s", e)
        return 2

    image = renderer.render(camera, world)
    save_image(image, args.output)
    logger.info("Done")
    return 0

if __name__ == "__main__":
    sys.exit(main())
