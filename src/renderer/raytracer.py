# renderer/raytracer.py
import os
import time
from concurrent.futures import ProcessPoolExecutor
from typing import List, Optional, Tuple
from camera.camera import Camera
from core.vector import Vector3
from geometry.world import World
from renderer.canvas import Canvas

# Recursion limit for reflection and refraction
MAX_DEPTH = 5
PROGRESS_EVERY = 50

# Read-only scene held by each worker process, set once by the pool initializer
_worker_scene: Optional[Tuple[Camera, World, int]] = None


def _init_worker(camera: Camera, world: World, max_depth: int):
    global _worker_scene
    _worker_scene = (camera, world, max_depth)


def render_row(camera: Camera, world: World, y: int, max_depth: int) -> List[Vector3]:
    return [world.color_at(camera.ray_for_pixel(x, y), max_depth)
            for x in range(camera.hsize)]


def _render_row_task(y: int) -> Tuple[int, List[Vector3]]:
    camera, world, max_depth = _worker_scene
    return y, render_row(camera, world, y, max_depth)


class Renderer:
    """
    Renders a world through a camera into a Canvas.

    Rows are independent: with more than one worker each process gets its own
    copy of the scene and sends back finished rows, which only the parent
    writes into the canvas.
    """
    def __init__(self, max_depth: int = MAX_DEPTH, workers: Optional[int] = None,
                 verbose: bool = False):
        if max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")
        self.max_depth = max_depth
        self.workers = workers if workers is not None else (os.cpu_count() or 1)
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")
        self.verbose = verbose

    def render(self, camera: Camera, world: World) -> Canvas:
        canvas = Canvas(camera.hsize, camera.vsize)
        start = time.perf_counter()
        if self.verbose:
            print("\n=== Rendering ===")
            print(f"Resolution: {camera.hsize}x{camera.vsize}")
            print(f"Shapes: {len(world.shapes)}, lights: {len(world.lights)}")
            print(f"Max depth: {self.max_depth}, workers: {self.workers}")

        if self.workers == 1:
            for y in range(camera.vsize):
                canvas.write_row(y, render_row(camera, world, y, self.max_depth))
                self._report(y + 1, camera.vsize)
        else:
            with ProcessPoolExecutor(max_workers=self.workers,
                                     initializer=_init_worker,
                                     initargs=(camera, world, self.max_depth)) as pool:
                for done, (y, row) in enumerate(pool.map(_render_row_task, range(camera.vsize)), 1):
                    canvas.write_row(y, row)
                    self._report(done, camera.vsize)

        if self.verbose:
            print(f"Rendered in {time.perf_counter() - start:.2f}s")
        return canvas

    def _report(self, done: int, total: int):
        if self.verbose and (done % PROGRESS_EVERY == 0 or done == total):
            print(f"Rows: {done}/{total}")
