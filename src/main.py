# main.py
import math
import sys
import configargparse
from camera.camera import Camera
from renderer.raytracer import MAX_DEPTH, Renderer
from scenes import SCENES

# Resolution scale and recursion depth per quality level
QUALITY_LEVELS = {
    "draft": {"scale": 0.25, "depth": 1},
    "balanced": {"scale": 0.5, "depth": 3},
    "final": {"scale": 1.0, "depth": MAX_DEPTH},
}


def get_options(argv=None):
    parser = configargparse.ArgumentParser(description="Whitted-style ray tracer")
    parser.add_argument("--config", is_config_file=True, help="Config file path")
    parser.add_argument("--scene",    default="checkered_cube", choices=sorted(SCENES), help="Scene to render")
    parser.add_argument("--width",    default=800, type=int, help="Output width in pixels at final quality")
    parser.add_argument("--height",   default=400, type=int, help="Output height in pixels at final quality")
    parser.add_argument("--fov",      default=60.0, type=float, help="Horizontal field of view in degrees")
    parser.add_argument("--quality",  default="final", choices=sorted(QUALITY_LEVELS), help="Resolution/depth preset")
    parser.add_argument("--depth",    default=None, type=int, help="Reflection/refraction depth (overrides --quality)")
    parser.add_argument("--workers",  default=None, type=int, help="Worker processes (default: CPU count)")
    parser.add_argument("--output",   default="canvas.ppm", help="Output image (.ppm, or any format Pillow writes)")
    parser.add_argument("--tone_map", default="clamp", choices=["clamp", "reinhard"], help="Tone mapping operator")
    parser.add_argument("--exposure", default=1.0, type=float, help="Exposure for reinhard tone mapping")
    parser.add_argument("--preview",  default=False, action="store_true", help="Show the result in a pygame window")
    return parser.parse_args(argv)


def run(opts) -> int:
    quality = QUALITY_LEVELS[opts.quality]
    width = max(1, int(opts.width * quality["scale"]))
    height = max(1, int(opts.height * quality["scale"]))
    depth = opts.depth if opts.depth is not None else quality["depth"]
    tone_params = {"exposure": opts.exposure} if opts.tone_map == "reinhard" else {}

    print("\n=== Creating World ===")
    world, view = SCENES[opts.scene]()
    print(f"Scene: {opts.scene} ({len(world.shapes)} shapes, {len(world.lights)} lights)")
    print(f"Quality: {opts.quality}, {width}x{height}, depth {depth}")

    camera = Camera(width, height, math.radians(opts.fov)).set_transform(view)
    renderer = Renderer(max_depth=depth, workers=opts.workers, verbose=True)
    canvas = renderer.render(camera, world)

    canvas.save(opts.output, opts.tone_map, **tone_params)
    print(f"Saved {opts.output}")

    if opts.preview:
        # Imported lazily so headless renders never initialise SDL
        from renderer.preview import show_preview
        show_preview(canvas, title=f"Ray Tracer - {opts.scene}",
                     tone_map=opts.tone_map, **tone_params)
    return 0


def main(argv=None) -> int:
    opts = get_options(argv)
    try:
        return run(opts)
    except (ValueError, OSError) as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
