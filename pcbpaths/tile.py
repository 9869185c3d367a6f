"""G-code that repeats one board several times in a grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, TextIO

from .units import Software

_CALL_SUB = {
    Software.LINUXCNC: "o{0} call",
    Software.MACH4: "M98 P{0}",
    Software.MACH3: "M98 P{0}",
}
_SET_X0 = {
    Software.LINUXCNC: "G92 X[#5420-[{0:f}]]",
    Software.MACH4: "G00 X{0:f}\nG92 X0",
    Software.MACH3: "G00 X{0:f}\nG92 X0",
}
_SET_Y0 = {
    Software.LINUXCNC: "G92 Y[#5421-[{0:f}]]",
    Software.MACH4: "G00 Y{0:f}\nG92 Y0",
    Software.MACH3: "G00 Y{0:f}\nG92 Y0",
}


@dataclass
class TileInfo:
    software: Software
    enabled: bool
    tile_x: int
    tile_y: int
    board_width: float
    board_height: float
    for_x_num: int
    for_y_num: int


@dataclass
class Tiling:
    """Writes the wrapper that turns a board's g-code into a tiled run."""

    tile_info: TileInfo
    cfactor: float
    tile_var: int
    gcode_end: str = ""

    def header(self, out: TextIO) -> None:
        info = self.tile_info
        if not info.enabled:
            return
        if info.software is Software.LINUXCNC:
            out.write(f"\no{self.tile_var} sub ( Main subroutine )\n\n")
        elif info.software in (Software.MACH3, Software.MACH4):
            self._tile_sequence(out)
            out.write(f"{self.gcode_end}\nO{self.tile_var} ( Main subroutine )\n\n")

    def footer(self, out: TextIO) -> None:
        info = self.tile_info
        if info.enabled:
            if info.software is Software.LINUXCNC:
                out.write(f"\no{self.tile_var} endsub\n\n")
                self._tile_sequence(out)
                out.write(self.gcode_end)
            elif info.software in (Software.MACH3, Software.MACH4):
                out.write("\nM99\n\n")
        if not info.enabled or info.software is Software.CUSTOM:
            out.write(self.gcode_end)

    def _tile_sequence(self, out: TextIO) -> None:
        info = self.tile_info
        call_sub = _CALL_SUB[info.software].format(self.tile_var)
        set_x0 = _SET_X0[info.software]
        set_y0 = _SET_Y0[info.software]
        width = info.board_width * self.cfactor
        height = info.board_height * self.cfactor

        for row in range(info.tile_y):
            out.write(call_sub + "\n")
            step = width if row % 2 == 0 else -width
            for _ in range(info.tile_x - 1):
                out.write(set_x0.format(step) + "\n")
                out.write(call_sub + "\n")
            if row < info.tile_y - 1:
                out.write(set_y0.format(height) + "\n")

        out.write(set_y0.format(-height * (info.tile_y - 1)) + "\n")
        if info.tile_y % 2:
            out.write(set_x0.format(-width * (info.tile_x - 1)) + "\n")


def generate_tile_info(options: Mapping[str, Any], board_height: float,
                       board_width: float) -> TileInfo:
    """Build tiling settings from the "tile-x", "tile-y" and "software" options."""
    tile_x = int(options["tile-x"])
    tile_y = int(options["tile-y"])
    software = options.get("software")
    if software is None:
        software = Software.CUSTOM
    if software is Software.CUSTOM:
        for_x_num, for_y_num = tile_x, tile_y
    else:
        for_x_num, for_y_num = 1, 1
    return TileInfo(
        software=software,
        enabled=tile_x > 1 or tile_y > 1,
        tile_x=tile_x,
        tile_y=tile_y,
        board_width=board_width,
        board_height=board_height,
        for_x_num=for_x_num,
        for_y_num=for_y_num,
    )