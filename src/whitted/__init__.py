"""Whitted-style CPU ray tracer.

This package renders scenes of spheres and planes lit by point lights, with
Phong shading, hard shadows, recursive mirror reflection and procedural
color patterns. Rows are rendered in parallel on a process pool.

Subpackages:
    core: Tuples, matrices, colors, rays, intersections and the render scheduler
    geometry: Shape primitives (sphere, plane) and their intersection math
    materials: Materials, procedural patterns and the Phong lighting model
    scene: Lights, the world, hit precomputation and the YAML scene loader
    camera: Pinhole camera and anti-aliasing strategies
    preview: Canvas buffer and PNG/PPM export
"""

__version__ = "0.1.0"
