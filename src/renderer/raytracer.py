# renderer/raytracer.py
import os
import random
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Callable, Optional

import numpy as np

from camera.camera import Camera
from renderer.tone_mapping import write_color

RowCallback = Callable[[int, bytes], None]

# Per-process scene state, installed once by the pool initializer.
_worker_camera = None
_worker_world = None


def _init_worker(camera: Camera, world):
    global _worker_camera, _worker_world
    _worker_camera = camera
    _worker_world = world


def render_row(camera: Camera, world, j: int, seed: int) -> bytes:
    """
    Renders scanline j with its own generator and returns width * 3 bytes.
    """
    rng = random.Random(seed)
    row = bytearray()
    for i in range(camera.width):
        write_color(row, camera.pixel_color(i, j, world, rng))
    return bytes(row)


def _render_row_in_worker(j: int, seed: int):
    return j, render_row(_worker_camera, _worker_world, j, seed)


def row_seeds(height: int, seed: Optional[int] = None) -> list:
    """
    Independent generator seeds, one per scanline. With seed=None fresh
    entropy is drawn from the OS.
    """
    children = np.random.SeedSequence(seed).spawn(height)
    return [int(child.generate_state(1, dtype=np.uint64)[0]) for child in children]


class Renderer:
    """
    Row-parallel CPU path tracer. Scanlines are independent, so each one is
    rendered by a worker process with its own random generator and gathered
    into the output grid when it completes.
    """
    def __init__(self, camera: Camera, workers: Optional[int] = None,
                 seed: Optional[int] = None, verbose: bool = False):
        self.camera = camera
        self.workers = workers if workers is not None else (os.cpu_count() or 1)
        self.seed = seed
        self.verbose = verbose

    def render(self, world, on_row: Optional[RowCallback] = None) -> np.ndarray:
        """
        Renders world and returns a (height, width, 3) uint8 array, top row first.
        """
        camera = self.camera
        height, width = camera.height, camera.width
        pixels = np.zeros((height, width, 3), dtype=np.uint8)
        seeds = row_seeds(height, self.seed)

        if self.verbose:
            print(f"Rendering {width}x{height}, {camera.samples_per_pixel} samples/pixel, "
                  f"max depth {camera.max_depth}, {len(world)} objects, {self.workers} worker(s)")
        start = time.perf_counter()

        done = 0
        for j, row in self._iter_rows(world, seeds):
            pixels[j] = np.frombuffer(row, dtype=np.uint8).reshape(width, 3)
            done += 1
            if on_row is not None:
                on_row(j, row)
            if self.verbose:
                print(f"\rRunning... {done}/{height} rows", end="", flush=True)

        if self.verbose:
            print(f"\rDone in {time.perf_counter() - start:.2f}s.          ")
        return pixels

    def render_bytes(self, world, on_row: Optional[RowCallback] = None) -> bytes:
        """The rendered image as a flat row-major RGB byte buffer."""
        return self.render(world, on_row).tobytes()

    def _iter_rows(self, world, seeds: list):
        if self.workers <= 1 or len(seeds) <= 1:
            for j, seed in enumerate(seeds):
                yield j, render_row(self.camera, world, j, seed)
            return

        with ProcessPoolExecutor(max_workers=self.workers, initializer=_init_worker,
                                 initargs=(self.camera, world)) as executor:
            futures = [executor.submit(_render_row_in_worker, j, seed)
                       for j, seed in enumerate(seeds)]
            for future in as_completed(futures):
                yield future.result()
