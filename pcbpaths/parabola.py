"""Turning a parabolic arc into a chain of straight segments."""

from __future__ import annotations

from typing import List, Sequence, Tuple

Point = Tuple[float, float]


def discretize(point: Sequence[float], segment: Sequence[Sequence[float]],
               max_dist: float, discretization: Sequence[Sequence[float]]) -> List[Point]:
    """Sample the parabola of points equidistant from a point and a segment.

    The arc runs from discretization[0] to discretization[1], both of which
    lie on the parabola.  The returned points start and end with those two
    and no chord between neighbours strays more than max_dist from the arc.
    """
    if len(discretization) != 2:
        raise ValueError("discretization must hold exactly the two endpoints")
    start, end = (tuple(p) for p in discretization)
    (low_x, low_y), (high_x, high_y) = segment
    point_x, point_y = point

    # Move the segment's start to the origin and its direction onto the x axis.
    segm_vec_x = high_x - low_x
    segm_vec_y = high_y - low_y
    sqr_segment_length = segm_vec_x * segm_vec_x + segm_vec_y * segm_vec_y
    if sqr_segment_length == 0:
        raise ValueError("segment has zero length")

    def projection(p: Sequence[float]) -> float:
        vec_dot = (p[0] - low_x) * segm_vec_x + (p[1] - low_y) * segm_vec_y
        return vec_dot / sqr_segment_length

    projection_start = sqr_segment_length * projection(start)
    projection_end = sqr_segment_length * projection(end)

    point_vec_x = point_x - low_x
    point_vec_y = point_y - low_y
    rot_x = segm_vec_x * point_vec_x + segm_vec_y * point_vec_y
    rot_y = segm_vec_x * point_vec_y - segm_vec_y * point_vec_x
    if rot_y == 0:
        raise ValueError("point lies on the line through the segment")

    def parabola_y(x: float) -> float:
        return ((x - rot_x) * (x - rot_x) + rot_y * rot_y) / (rot_y + rot_y)

    result: List[Point] = [start]
    pending = [projection_end]
    cur_x = projection_start
    cur_y = parabola_y(cur_x)
    max_dist_transformed = max_dist * max_dist * sqr_segment_length

    while pending:
        new_x = pending[-1]
        new_y = parabola_y(new_x)
        if new_x == cur_x:
            dist = 0.0
            mid_x = new_x
        else:
            # The point of the arc furthest from the chord.
            mid_x = (new_y - cur_y) / (new_x - cur_x) * rot_y + rot_x
            mid_y = parabola_y(mid_x)
            dist = (new_y - cur_y) * (mid_x - cur_x) - (new_x - cur_x) * (mid_y - cur_y)
            dist = dist * dist / ((new_y - cur_y) ** 2 + (new_x - cur_x) ** 2)
        if dist <= max_dist_transformed:
            pending.pop()
            inter_x = (segm_vec_x * new_x - segm_vec_y * new_y) / sqr_segment_length + low_x
            inter_y = (segm_vec_x * new_y + segm_vec_y * new_x) / sqr_segment_length + low_y
            result.append((inter_x, inter_y))
            cur_x, cur_y = new_x, new_y
        else:
            pending.append(mid_x)

    result[-1] = end
    return result