import logging
from time import time

from polyfractal.geometry import InvalidInputError, centroid, total_shapes
from polyfractal.shape import Polygon
from polyfractal.transforms import compute_center
from polyfractal.vector import Vector2, array_to_points, points_to_array


def spawn_child(parent, vertex, scale, transform_type):
    """Derive the child shape for one vertex of `parent`."""
    new_center = compute_center(parent.center, vertex, scale, transform_type)
    offsets = points_to_array(parent.vertices) - parent.center.to_array()
    new_vertices = new_center.to_array() + offsets * scale
    return Polygon(new_center, array_to_points(new_vertices))


def generate(seed, scale, transform_type, generations, should_stop=None):
    """
    Yield the seed shape followed by every shape of the fractal, depth first.

    Each shape spawns one child per vertex, down to `generations` levels below the seed.
    Children are yielded before their own descendants, and a child's subtree is finished
    before its next sibling. `should_stop` is polled before every child; once it returns
    True the iteration ends.
    """
    yield seed
    if generations <= 0:
        return

    # Each entry is (parent, index of the next vertex to spawn from, depth of the parent).
    stack = [(seed, 0, 0)]
    while stack:
        parent, index, depth = stack.pop()
        if index >= len(parent.vertices):
            continue
        if should_stop is not None and should_stop():
            logging.info("Fractal generation cancelled.")
            return
        stack.append((parent, index + 1, depth))

        child = spawn_child(parent, parent.vertices[index], scale, transform_type)
        yield child
        if depth + 1 < generations:
            stack.append((child, 0, depth + 1))


def seed_polygon(points):
    """Build the generation 0 shape from the user's points."""
    if len(points) < 2:
        raise InvalidInputError(f"At least 2 points are needed to create a fractal, got {len(points)}.")
    points = tuple(Vector2(float(x), float(y)) for x, y in points)
    return Polygon(centroid(points), points)


def generate_fractal(points, parameters, should_stop=None):
    """Seed a fractal from `points` and yield all of its shapes for the given parameters."""
    seed = seed_polygon(points)
    expected = total_shapes(len(seed.vertices), parameters.generations)
    logging.info(
        f"Starting fractal generation: type={parameters.transform_type.label}, "
        f"generations={parameters.generations}, scale={parameters.scale}, shapes={expected}"
    )
    start_time = time()
    count = 0
    for shape in generate(seed, parameters.scale, parameters.transform_type, parameters.generations, should_stop):
        count += 1
        yield shape
    logging.info(f"Fractal generation produced {count} shapes in {time() - start_time:.2f} seconds.")


def draw_fractal(points, parameters, target, should_stop=None):
    """Generate a fractal and draw every shape onto `target`. Returns the number of shapes drawn."""
    count = 0
    for shape in generate_fractal(points, parameters, should_stop):
        shape.draw(target)
        count += 1
    return count
