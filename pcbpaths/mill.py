"""Settings for the tools that mill, cut and drill a board."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(kw_only=True)
class Mill:
    feed: float = 0.0
    vertfeed: float = 0.0
    speed: int = 0
    zchange: float = 0.0
    zsafe: float = 0.0
    zwork: float = 0.0
    tolerance: float = 0.0
    explicit_tolerance: bool = False
    backside: bool = False
    spinup_time: float = 0.0
    spindown_time: float = 0.0
    pre_milling_gcode: str = ""
    post_milling_gcode: str = ""


@dataclass(kw_only=True)
class RoutingMill(Mill):
    optimise: float = 0.0
    eulerian_paths: bool = False
    path_finding_limit: int = 0
    g0_vertical_speed: float = 0.0
    g0_horizontal_speed: float = 0.0
    backtrack: float = 0.0
    stepsize: float = 0.0
    offset: float = 0.0  # Stay away from the traces by this amount.


@dataclass(kw_only=True)
class Isolator(RoutingMill):
    # Each element is a tool diameter and its overlap width, both in inches.
    tool_diameters_and_overlap_widths: List[Tuple[float, float]] = field(default_factory=list)
    extra_passes: int = 0
    voronoi: bool = False
    preserve_thermal_reliefs: bool = False
    isolation_width: float = 0.0


@dataclass(kw_only=True)
class Cutter(RoutingMill):
    tool_diameter: float = 0.0
    bridges_num: int = 0
    bridges_height: float = 0.0
    bridges_width: float = 0.0


@dataclass(kw_only=True)
class Driller(Mill):
    pass