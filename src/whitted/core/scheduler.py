"""Row-parallel render scheduler.

Rendering is split into one task per image row, run on a process pool so rows
are shaded in parallel despite the GIL. Each task receives the camera and
world by value, computes its row into a private (width, 3) array and returns
it; the calling process gathers the finished rows and writes them into the
canvas once every task has completed. Workers never touch the canvas, so no
lock is needed. Everything handed to a worker (camera, world, shapes,
materials, patterns, generators) must be picklable.

Anti-aliasing offsets are drawn from one ``numpy.random.Generator`` per row,
all spawned from a single ``SeedSequence``. The random stream a row sees
depends only on the seed and the row index, never on which worker ran it or
in what order, so a fixed seed reproduces the same image.

If any row raises, the remaining tasks are cancelled and the render fails
with ``RenderError``; no partial canvas is returned.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import Future, ProcessPoolExecutor, as_completed
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt

from whitted import config
from whitted.preview.canvas import Canvas

if TYPE_CHECKING:
    from whitted.camera.camera import Camera
    from whitted.scene.world import World

logger = logging.getLogger(__name__)


class RenderError(RuntimeError):
    """Raised when a render cannot be completed.

    The exception that made a row fail is attached as ``__cause__``.
    """


def render_row(
    camera: Camera,
    world: World,
    depth: int,
    y: int,
    rng: np.random.Generator,
) -> npt.NDArray[np.float64]:
    """Compute every pixel of row ``y``.

    With anti-aliasing disabled each pixel gets one ray through its center.
    Pixels without a ray (singular camera transform) stay black.

    Returns:
        Array of shape (camera.hsize, 3).
    """
    row = np.zeros((camera.hsize, 3), dtype=np.float64)
    antialiasing = camera.antialiasing

    for x in range(camera.hsize):
        if antialiasing.enabled:
            color = antialiasing.sample(x, y, world, depth, camera, rng)
        else:
            ray = camera.ray_for_pixel(x, y)
            color = world.color_at(ray, depth) if ray is not None else None
        if color is not None:
            row[x] = color.to_array()

    return row


def render_image(
    camera: Camera,
    world: World,
    depth: int,
    *,
    workers: int | None = None,
    seed: int | None = None,
) -> Canvas:
    """Render ``world`` through ``camera`` on a process pool.

    Args:
        camera: The camera to render through.
        world: The scene.
        depth: Reflection recursion budget.
        workers: Worker process count. Defaults to ``WHITTED_RENDER_WORKERS``.
        seed: Seed for per-row random generators.

    Returns:
        The rendered canvas.

    Raises:
        RenderError: If any row failed.
        ValueError: If ``workers`` is not positive.
    """
    if workers is None:
        workers = config.RENDER_WORKERS
    if workers <= 0:
        raise ValueError(f"workers must be positive, got {workers}")

    width, height = camera.hsize, camera.vsize
    row_seeds = np.random.SeedSequence(seed).spawn(height)

    logger.info(
        "Rendering %dx%d (depth=%d, workers=%d, %r)",
        width,
        height,
        depth,
        workers,
        camera.antialiasing,
    )
    start_time = time.perf_counter()

    rows: dict[int, npt.NDArray[np.float64]] = {}
    with ProcessPoolExecutor(max_workers=workers) as executor:
        futures: dict[Future[npt.NDArray[np.float64]], int] = {
            executor.submit(
                render_row, camera, world, depth, y, np.random.default_rng(row_seeds[y])
            ): y
            for y in range(height)
        }
        for future in as_completed(futures):
            y = futures[future]
            try:
                rows[y] = future.result()
            except Exception as exc:
                logger.error("Row %d failed: %s", y, exc)
                for pending in futures:
                    pending.cancel()
                raise RenderError(f"Rendering row {y} failed") from exc

    canvas = Canvas(width, height)
    for y, row in rows.items():
        canvas.write_row(y, row)

    logger.info("Rendered %dx%d in %.2fs", width, height, time.perf_counter() - start_time)
    return canvas
