import io

import pytest

from pcbpaths.tile import Tiling, generate_tile_info
from pcbpaths.units import Software


def make_tiling(software, tile_x, tile_y, tile_var=1, end="END"):
    info = generate_tile_info(
        {"tile-x": tile_x, "tile-y": tile_y, "software": software}, 10.0, 20.0
    )
    return Tiling(info, 1.0, tile_var, gcode_end=end)


def render(tiling):
    header = io.StringIO()
    footer = io.StringIO()
    tiling.header(header)
    tiling.footer(footer)
    return header.getvalue(), footer.getvalue()


def test_generate_tile_info_disabled_for_single_tile():
    info = generate_tile_info({"tile-x": 1, "tile-y": 1}, 10.0, 20.0)
    assert info.enabled is False
    assert info.software is Software.CUSTOM
    assert info.board_height == 10.0
    assert info.board_width == 20.0


def test_generate_tile_info_custom_loops():
    info = generate_tile_info({"tile-x": 3, "tile-y": 2, "software": Software.CUSTOM}, 1.0, 1.0)
    assert info.enabled is True
    assert (info.for_x_num, info.for_y_num) == (3, 2)


def test_generate_tile_info_controller_software_uses_subroutines():
    info = generate_tile_info({"tile-x": 3, "tile-y": 2, "software": Software.LINUXCNC}, 1.0, 1.0)
    assert (info.for_x_num, info.for_y_num) == (1, 1)


def test_disabled_writes_only_end():
    header, footer = render(make_tiling(Software.LINUXCNC, 1, 1))
    assert header == ""
    assert footer == "END"


def test_custom_writes_only_end():
    header, footer = render(make_tiling(Software.CUSTOM, 2, 2))
    assert header == ""
    assert footer == "END"


def test_linuxcnc_header():
    header, _ = render(make_tiling(Software.LINUXCNC, 2, 2, tile_var=3))
    assert header == "\no3 sub ( Main subroutine )\n\n"


def test_linuxcnc_footer_structure():
    _, footer = render(make_tiling(Software.LINUXCNC, 3, 2, tile_var=3))
    assert footer.startswith("\no3 endsub\n\n")
    assert footer.endswith("END")
    assert footer.count("o3 call") == 3 * 2


def test_linuxcnc_single_row_sequence():
    _, footer = render(make_tiling(Software.LINUXCNC, 2, 1))
    assert footer == (
        "\no1 endsub\n\n"
        "o1 call\n"
        "G92 X[#5420-[20.000000]]\n"
        "o1 call\n"
        "G92 Y[#5421-[-0.000000]]\n"
        "G92 X[#5420-[-20.000000]]\n"
        "END"
    )


@pytest.mark.parametrize("software", [Software.MACH3, Software.MACH4])
def test_mach_header_and_footer(software):
    header, footer = render(make_tiling(software, 2, 3, tile_var=5))
    assert footer == "\nM99\n\n"
    assert header.count("M98 P5") == 2 * 3
    assert header.endswith("END\nO5 ( Main subroutine )\n\n")


def test_even_rows_return_without_x_move():
    _, footer = render(make_tiling(Software.LINUXCNC, 2, 2))
    lines = footer.splitlines()
    assert lines[-1] == "END"
    assert lines[-2].startswith("G92 Y[#5421-[")
    assert sum(line.startswith("G92 X") for line in lines) == 2