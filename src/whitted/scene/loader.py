"""YAML scene description loader.

A scene file is a YAML list of ``add`` items:

    - add: camera
      hsize: 100
      vsize: 50
      fov: 1.0472
      from: [0, 1.5, -5]
      to: [0, 1, 0]
      up: [0, 1, 0]
      aa:
        method: multisampling
        level: 4
        tolerance: 0.05

    - add: light
      type: point
      at: [-10, 10, -10]
      intensity: [1, 1, 1]

    - add: sphere
      transform:
        - [translate, 1.5, 0.5, -0.5]
        - [scale, 0.5, 0.5, 0.5]
      material:
        color: [0.5, 1, 0.1]
        diffuse: 0.7
        pattern:
          type: stripes
          colors:
            - [1, 1, 1]
            - [0, 0, 0]

Transform entries are multiplied together in the order written, so the last
entry is the first applied to the shape: in the example above the sphere is
scaled first and translated second. Supported transform entries
are ``scale``, ``translate``, ``rotate-x``, ``rotate-y``, ``rotate-z`` and
``shear``. Unknown entries are skipped with a warning.

Pattern types: ``stripes``, ``gradient``, ``rings``, ``checkers`` (each with a
``colors`` list and an optional ``transform``) and ``blended`` (with
``pattern1`` and ``pattern2``).

Example:
    >>> from whitted.scene.loader import load_scene
    >>> camera, world = load_scene("scene.yml")
    >>> canvas = camera.render(world)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from whitted.camera.antialias import AAMethod, AntiAliasing
from whitted.camera.camera import Camera
from whitted.core.color import Color
from whitted.core.matrix import Axis, Matrix
from whitted.core.tuples import Point, Vec3
from whitted.geometry.plane import Plane
from whitted.geometry.shape import Shape
from whitted.geometry.sphere import Sphere
from whitted.materials.material import Material
from whitted.materials.patterns import Blended, Checkers, Gradient, Pattern, Rings, Stripes
from whitted.scene.light import PointLight
from whitted.scene.world import World

logger = logging.getLogger(__name__)

_SHAPES: dict[str, type[Shape]] = {
    "sphere": Sphere,
    "plane": Plane,
}

_AA_METHODS = {
    "stochastic": AAMethod.STOCHASTIC,
    "random": AAMethod.STOCHASTIC,
    "multisampling": AAMethod.MULTISAMPLING,
    "msaa": AAMethod.MULTISAMPLING,
}

_ROTATIONS = {
    "rotate-x": Axis.X,
    "rotate-y": Axis.Y,
    "rotate-z": Axis.Z,
}

_COLOR_PATTERNS = ("stripes", "striped", "ring", "rings", "gradient", "checkers", "checkered")

# Material keys that map directly onto float fields.
_MATERIAL_FLOATS = (
    "ambient",
    "diffuse",
    "specular",
    "shininess",
    "reflective",
    "transparency",
    "refractive_index",
)


class SceneError(ValueError):
    """Raised when a scene description is malformed."""


# =============================================================================
# Entry points
# =============================================================================


def load_scene(path: str | Path) -> tuple[Camera | None, World]:
    """Load a scene from a YAML file.

    Returns:
        ``(camera, world)``. The camera is None if the file has no camera
        item.

    Raises:
        SceneError: If the file is not a valid scene description.
        OSError: If the file cannot be read.
    """
    with open(path, encoding="utf-8") as f:
        return parse_scene(f.read())


def parse_scene(text: str) -> tuple[Camera | None, World]:
    """Parse a scene from YAML text. See ``load_scene``."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SceneError(f"Invalid YAML: {exc}") from exc
    return build_scene(data)


def build_scene(items: Any) -> tuple[Camera | None, World]:
    """Build a camera and world from already-parsed scene items.

    Entries without an ``add`` key are ignored. A later camera item replaces
    an earlier one.
    """
    if items is None:
        items = []
    if not isinstance(items, list):
        raise SceneError("A scene must be a list of items")

    camera: Camera | None = None
    world = World()

    for item in items:
        if not isinstance(item, Mapping):
            raise SceneError(f"Scene items must be mappings, got {item!r}")
        kind = item.get("add")
        if kind is None:
            continue
        if not isinstance(kind, str):
            raise SceneError(f"Item type must be a string, got {kind!r}")
        if kind == "camera":
            camera = make_camera(item)
        elif kind == "light":
            world.add_light(make_light(item))
        elif kind in _SHAPES:
            world.add_shape(make_shape(item))
        else:
            raise SceneError(f"Unknown item type: {kind!r}")

    logger.debug(
        "Loaded scene with %d shapes, %d lights, camera=%s",
        len(world.shapes),
        len(world.lights),
        camera is not None,
    )
    return camera, world


# =============================================================================
# Items
# =============================================================================


def make_camera(item: Mapping[str, Any]) -> Camera:
    hsize = _int(_required(item, "hsize"), "hsize")
    vsize = _int(_required(item, "vsize"), "vsize")
    fov = _float(_required(item, "fov"), "fov")
    view = Matrix.view_transform(
        _point(_required(item, "from")),
        _point(_required(item, "to")),
        _vector(_required(item, "up")),
    )
    try:
        return Camera(hsize, vsize, fov, view, make_antialiasing(item.get("aa")))
    except ValueError as exc:
        raise SceneError(f"Invalid camera: {exc}") from exc


def make_antialiasing(data: Mapping[str, Any] | None) -> AntiAliasing:
    """Build an anti-aliasing configuration from an ``aa`` mapping.

    A missing mapping gives the default (disabled) configuration.
    """
    if data is None:
        return AntiAliasing()
    if not isinstance(data, Mapping):
        raise SceneError("'aa' must be a mapping")

    name = str(data.get("method", "stochastic")).lower()
    if name not in _AA_METHODS:
        raise SceneError(f"Unknown anti-aliasing method: {name!r}")

    defaults = AntiAliasing()
    try:
        return AntiAliasing(
            method=_AA_METHODS[name],
            level=_int(data.get("level", defaults.level), "level"),
            tolerance=_float(data.get("tolerance", defaults.tolerance), "tolerance"),
        )
    except ValueError as exc:
        raise SceneError(f"Invalid anti-aliasing settings: {exc}") from exc


def make_light(item: Mapping[str, Any]) -> PointLight:
    light_type = item.get("type", "point")
    if light_type != "point":
        raise SceneError(f"Unknown light type: {light_type!r}")
    return PointLight(_point(_required(item, "at")), _color(_required(item, "intensity")))


def make_shape(item: Mapping[str, Any]) -> Shape:
    shape_cls = _SHAPES[item["add"]]
    return shape_cls(
        transform=make_transform(item.get("transform")),
        material=make_material(item.get("material")),
    )


def make_material(data: Mapping[str, Any] | None) -> Material:
    """Build a material, starting from the baseline for any missing key."""
    if data is None:
        return Material()
    if not isinstance(data, Mapping):
        raise SceneError("'material' must be a mapping")

    kwargs: dict[str, Any] = {}
    if "color" in data:
        kwargs["color"] = _color(data["color"])
    if "pattern" in data:
        kwargs["pattern"] = make_pattern(data["pattern"])
    for key in _MATERIAL_FLOATS:
        if key in data:
            kwargs[key] = _float(data[key], key)

    try:
        return Material(**kwargs)
    except ValueError as exc:
        raise SceneError(f"Invalid material: {exc}") from exc


def make_pattern(data: Mapping[str, Any]) -> Pattern:
    if not isinstance(data, Mapping):
        raise SceneError("'pattern' must be a mapping")

    pattern_type = data.get("type")
    transform = make_transform(data.get("transform"))

    if pattern_type in ("blend", "blended"):
        return Blended(
            make_pattern(_required(data, "pattern1")),
            make_pattern(_required(data, "pattern2")),
            transform,
        )

    if pattern_type not in _COLOR_PATTERNS:
        raise SceneError(f"Unknown pattern type: {pattern_type!r}")

    colors = [_color(c) for c in _required(data, "colors")]
    try:
        if pattern_type in ("stripes", "striped"):
            return Stripes(tuple(colors), transform)
        if pattern_type in ("ring", "rings"):
            return Rings(tuple(colors), transform)
        if pattern_type == "gradient":
            return Gradient(*_pair(colors, pattern_type), transform)
        return Checkers(*_pair(colors, pattern_type), transform)
    except ValueError as exc:
        raise SceneError(f"Invalid {pattern_type} pattern: {exc}") from exc


def make_transform(steps: Sequence[Sequence[Any]] | None) -> Matrix:
    """Multiply transform steps left to right.

    The product is ``steps[0] @ steps[1] @ ...``, so the last step is the
    first one applied to a point.
    """
    total = Matrix.identity()
    if steps is None:
        return total

    for step in steps:
        if not step:
            raise SceneError("Empty transform entry")
        name, args = step[0], [_float(v, str(step[0])) for v in step[1:]]
        try:
            if name == "scale":
                matrix = Matrix.scaling(*args)
            elif name == "translate":
                matrix = Matrix.translation(*args)
            elif name in _ROTATIONS:
                matrix = Matrix.rotation(_ROTATIONS[name], *args)
            elif name == "shear":
                matrix = Matrix.shear(*args)
            else:
                logger.warning("Unknown transformation %r, skipping", name)
                continue
        except TypeError as exc:
            raise SceneError(f"Wrong number of arguments for {name!r}: {args}") from exc
        total = total @ matrix

    return total


# =============================================================================
# Values
# =============================================================================


def _required(data: Mapping[str, Any], key: str) -> Any:
    if key not in data:
        raise SceneError(f"Missing required key {key!r} in {dict(data)!r}")
    return data[key]


def _float(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SceneError(f"{name!r} must be a number, got {value!r}")
    return float(value)


def _int(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise SceneError(f"{name!r} must be an integer, got {value!r}")
    return value


def _triple(value: Any, name: str) -> tuple[float, float, float]:
    if not isinstance(value, Sequence) or isinstance(value, str) or len(value) != 3:
        raise SceneError(f"{name} must be a list of three numbers, got {value!r}")
    x, y, z = (_float(v, name) for v in value)
    return x, y, z


def _point(value: Any) -> Point:
    return Point(*_triple(value, "point"))


def _vector(value: Any) -> Vec3:
    return Vec3(*_triple(value, "vector"))


def _color(value: Any) -> Color:
    return Color(*_triple(value, "color"))


def _pair(colors: list[Color], pattern_type: str) -> tuple[Color, Color]:
    if len(colors) < 2:
        raise SceneError(f"{pattern_type} pattern needs two colors, got {len(colors)}")
    return colors[0], colors[1]
