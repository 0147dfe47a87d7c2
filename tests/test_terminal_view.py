import io

from grid_pathfinder.core.grid import GridModel
from grid_pathfinder.systems.pathfinding import search
from grid_pathfinder.utils.cli.terminal_view import TerminalView, get_view


def test_render_lines_without_result():
    grid = GridModel(2, 3, (0, 0), (1, 2))
    grid.toggle_obstacle((0, 1))
    assert TerminalView().render_lines(grid) == ["S#.", "..E"]


def test_render_lines_paints_path_and_visited():
    grid = GridModel(3, 3, (0, 0), (2, 2))
    result = search(grid)
    assert TerminalView().render_lines(grid, result) == [
        "S++",
        "*++",
        "**E",
    ]


def test_render_writes_status_line():
    grid = GridModel(1, 3, (0, 0), (0, 2))
    grid.toggle_obstacle((0, 1))
    out = io.StringIO()
    get_view().render(grid, search(grid), stream=out)
    assert out.getvalue() == "S#E\nno path, visited 1 cells\n"


def test_colour_output_wraps_glyphs():
    grid = GridModel(1, 2, (0, 0), (0, 1))
    line = TerminalView(colour=True).render_lines(grid)[0]
    assert "\x1b[32mS" in line and line.endswith("\x1b[0m")
