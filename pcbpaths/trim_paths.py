"""Removing backtracked segments from the ends or middle of toolpaths."""

from __future__ import annotations

import math
from collections import Counter
from typing import Iterable, List, Sequence, Tuple

Point = Tuple[float, float]
Linestring = List[Point]
Path = Tuple[Linestring, bool]
_Key = Tuple[Tuple[Point, ...], bool]


def _key(points: Iterable[Sequence[float]], reversible: bool) -> _Key:
    return tuple(tuple(p) for p in points), bool(reversible)


def _take_segment(start: Point, end: Point, haystack: Counter) -> bool:
    """Remove one matching segment from haystack, returning whether one was found.

    Directional segments are preferred; a reversible one matches either way.
    """
    for candidate in (((start, end), False), ((start, end), True), ((end, start), True)):
        if haystack.get(candidate, 0) > 0:
            haystack[candidate] -= 1
            return True
    return False


def _trim_path(points: Linestring, backtracks: Counter) -> Linestring:
    """Trim one linestring, consuming the backtracks that were used."""
    n = len(points)
    if n < 2:
        return points

    remaining = Counter(backtracks)
    remove_from_start = 0
    length_from_start = 0.0
    for i in range(n - 1):
        if not _take_segment(points[i], points[i + 1], remaining):
            break
        remove_from_start = i + 1
        length_from_start += math.dist(points[i], points[i + 1])

    remove_from_end = n
    length_from_end = 0.0
    for i in range(n - 1, 0, -1):
        if not _take_segment(points[i - 1], points[i], remaining):
            break
        remove_from_end = i
        length_from_end += math.dist(points[i - 1], points[i])

    longest = 0.0
    longest_start = 0
    longest_end = 0
    if points[0] == points[-1]:
        # A loop may do better by dropping a stretch from its middle.
        current = 0
        while current + 1 != n:
            remaining = Counter(backtracks)
            while current + 1 != n and not _take_segment(points[current], points[current + 1], remaining):
                current += 1
            if current + 1 == n:
                break
            run_length = math.dist(points[current], points[current + 1])
            run_start = current
            run_end = current + 1
            current += 1
            while current + 1 != n and _take_segment(points[current], points[current + 1], remaining):
                run_end = current + 1
                run_length += math.dist(points[current], points[current + 1])
                current += 1
            if run_length > longest:
                longest = run_length
                longest_start = run_start
                longest_end = run_end

    if length_from_start + length_from_end > longest:
        for i in range(remove_from_end - 1, n - 1):
            _take_segment(points[i], points[i + 1], backtracks)
        for i in range(remove_from_start):
            _take_segment(points[i], points[i + 1], backtracks)
        trimmed = points[:remove_from_end]
        return trimmed[remove_from_start:]

    for i in range(longest_start, longest_end):
        _take_segment(points[i], points[i + 1], backtracks)
    return points[longest_end:] + points[1:longest_start + 1]


def trim_paths(toolpaths: Iterable[Tuple[Sequence[Sequence[float]], bool]],
               backtracks: Iterable[Tuple[Sequence[Sequence[float]], bool]]) -> List[Path]:
    """Return the toolpaths with segments matching backtracks removed.

    Each toolpath and backtrack is a (points, reversible) pair; backtracks
    are expected to be straight segments of two points.  Backtracks make
    an Eulerian circuit but only a path is needed, so the longest stretches
    that repeat a backtrack are dropped.  Paths left with fewer than two
    points are discarded.
    """
    paths: List[Path] = [([tuple(p) for p in ls], bool(rev)) for ls, rev in toolpaths]
    remaining = Counter(_key(ls, rev) for ls, rev in backtracks)
    if not remaining:
        return paths

    result: List[Path] = []
    for points, reversible in paths:
        points = _trim_path(points, remaining)
        if reversible:
            points = _trim_path(points[::-1], remaining)[::-1]
        if len(points) >= 2:
            result.append((points, reversible))
    return result