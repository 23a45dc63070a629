"""Map state: points, view placement and the effects of keys and buttons."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum, IntEnum

WIDTH = 1000
HEIGHT = 1000

RED = 0xFF0000
GREEN = 0x00FF00
BLUE = 0x0000FF
BLACK = 0x000000
WHITE = 0xFFFFFF

ON_KEYDOWN = 2
ON_KEYUP = 3
ON_MOUSEMOVE = 6
ON_EXPOSE = 12
ON_DESTROY = 17
CLOSE_WINDOW = 17

MOVE_STEP = 10
HEIGHT_STEP = 1.5


class Projection(str, Enum):
    """How the map is projected onto the screen."""

    ISO = "I"
    PARALLEL = "P"


class Key(IntEnum):
    """Key codes the viewer reacts to."""

    A = 0
    S = 1
    D = 2
    G = 5
    B = 11
    W = 13
    R = 15
    I = 34  # noqa: E741
    P = 35
    ESC = 53
    PLUS = 69
    MINUS = 78
    LEFT = 123
    RIGHT = 124
    DOWN = 125
    UP = 126


class MouseButton(IntEnum):
    """Mouse buttons the viewer reacts to."""

    WHEEL_UP = 4
    WHEEL_DOWN = 5


@dataclass
class Point:
    """A map point: screen position, height and colour."""

    x: int = 0
    y: int = 0
    z: int = 0
    height: int = 0
    color: int = 0


_KEY_COLORS = {Key.R: RED, Key.G: GREEN, Key.B: BLUE}
_KEY_PROJECTIONS = {Key.I: Projection.ISO, Key.P: Projection.PARALLEL}

_PARALLEL_MOVES = (
    ({Key.LEFT, Key.A}, -MOVE_STEP, 0),
    ({Key.RIGHT, Key.D}, MOVE_STEP, 0),
    ({Key.DOWN, Key.S}, 0, MOVE_STEP),
    ({Key.UP, Key.W}, 0, -MOVE_STEP),
)

_ISO_MOVES = (
    ({Key.LEFT, Key.UP, Key.A, Key.W}, -MOVE_STEP, 0),
    ({Key.LEFT, Key.DOWN, Key.A, Key.S}, 0, MOVE_STEP),
    ({Key.RIGHT, Key.DOWN, Key.D, Key.S}, MOVE_STEP, 0),
    ({Key.RIGHT, Key.UP, Key.D, Key.W}, 0, -MOVE_STEP),
)


@dataclass
class MapView:
    """A grid of points together with how it is placed on the screen."""

    coord: list[list[Point]]
    x_nbrs: int
    y_nbrs: int
    width: int
    height: int
    tile_size: int
    start_point: Point = field(default_factory=Point)
    end_point: Point = field(default_factory=Point)
    multiplier: int = 1
    zoom: int = 0
    projection: Projection = Projection.ISO

    def _shift(self, dx: int, dy: int) -> None:
        for point in (self.start_point, self.end_point):
            point.x += dx
            point.y += dy

    def change_color(self, color: int) -> None:
        """Give every point of the map the same colour."""
        for row in self.coord:
            for point in row:
                point.color = color

    def color_map(self, keysym: int) -> None:
        """Recolour the map red, green or blue for the R, G and B keys."""
        color = _KEY_COLORS.get(keysym)
        if color is not None:
            self.change_color(color)

    def change_projection(self, keysym: int) -> None:
        """Switch to isometric for I and to parallel for P."""
        projection = _KEY_PROJECTIONS.get(keysym)
        if projection is not None:
            self.projection = projection

    def change_height(self, keysym: int) -> None:
        """Raise or lower the height multiplier for PLUS and MINUS.

        The multiplier stays an integer, truncated towards zero.
        """
        if keysym == Key.MINUS:
            self.multiplier = int(self.multiplier - HEIGHT_STEP)
        elif keysym == Key.PLUS:
            self.multiplier = int(self.multiplier + HEIGHT_STEP)

    def _apply_moves(self, keysym: int, moves) -> None:
        for keys, dx, dy in moves:
            if keysym in keys:
                self._shift(dx, dy)

    def move_parallel(self, keysym: int) -> None:
        """Move the map along the screen axes."""
        self._apply_moves(keysym, _PARALLEL_MOVES)

    def move_iso(self, keysym: int) -> None:
        """Move the map along the diagonals of the isometric view."""
        self._apply_moves(keysym, _ISO_MOVES)

    def move(self, keysym: int) -> None:
        """Move the map in the way that suits the current projection."""
        if self.projection is Projection.ISO:
            self.move_iso(keysym)
        if self.projection is Projection.PARALLEL:
            self.move_parallel(keysym)

    def zoom_step(self, button: int) -> None:
        """Zoom in for a wheel-up and out for a wheel-down button."""
        if button == MouseButton.WHEEL_UP:
            self.zoom += 1
        if button == MouseButton.WHEEL_DOWN:
            self.zoom -= 1


def init_view(grid: Iterable[Sequence[Point]]) -> MapView:
    """Place a grid of points in the middle of the window.

    The grid fills the central half of the window; a non-square grid is
    centred on it.
    """
    rows = [list(row) for row in grid]
    if not rows:
        raise ValueError("a map needs at least one row")
    x_nbrs = len(rows[0])
    if any(len(row) != x_nbrs for row in rows):
        raise ValueError("every row of a map must have the same length")
    y_nbrs = len(rows)

    start = Point(int(WIDTH * 0.25), int(HEIGHT * 0.25))
    end = Point(int(WIDTH * 0.75), int(HEIGHT * 0.75))
    width = end.x - start.x
    height = end.y - start.y
    if x_nbrs > y_nbrs:
        tile_size = width // x_nbrs
    else:
        tile_size = height // y_nbrs
    if x_nbrs != y_nbrs:
        start.x += width // 2 - x_nbrs // 2 * tile_size
        start.y += height // 2 - y_nbrs // 2 * tile_size

    return MapView(
        coord=rows,
        x_nbrs=x_nbrs,
        y_nbrs=y_nbrs,
        width=width,
        height=height,
        tile_size=tile_size,
        start_point=start,
        end_point=end,
    )