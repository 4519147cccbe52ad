"""Grid ray casting and textured column drawing into a pixel buffer."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Optional, Sequence

from .game import GameState

logger = logging.getLogger(__name__)

CROSSHAIR_COLOR = 0x39FF14
_SHADE_MASK = 8355711
_FAR = 1e30
_MIN_DIST = 1e-9


def _as_signed(color: int) -> int:
    color &= 0xFFFFFFFF
    return color - (1 << 32) if color & 0x80000000 else color


@dataclass(frozen=True)
class Texture:
    """A ``width`` x ``height`` image stored row by row."""

    width: int
    height: int
    pixels: Sequence[int]

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("texture size must be positive")
        if len(self.pixels) != self.width * self.height:
            raise ValueError("pixel count does not match texture size")

    def color_at(self, x: int, y: int) -> int:
        """Return the colour at column ``x``, row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"texel ({x}, {y}) outside texture")
        return self.pixels[self.width * y + x]


@dataclass
class Framebuffer:
    """A screen-sized pixel buffer, row by row."""

    width: int
    height: int
    pixels: Optional[list[int]] = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("framebuffer size must be positive")
        if self.pixels is None:
            self.pixels = [0] * (self.width * self.height)
        elif len(self.pixels) != self.width * self.height:
            raise ValueError("pixel count does not match framebuffer size")

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set the pixel at column ``x``, row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside framebuffer")
        self.pixels[self.width * y + x] = color

    def clear(self, color: int = 0) -> None:
        """Fill the whole buffer with ``color``."""
        self.pixels[:] = [color] * (self.width * self.height)


@dataclass
class Ray:
    """The state of one screen column's ray through the map grid."""

    camera_x: float
    dir_x: float
    dir_y: float
    map_x: int
    map_y: int
    deltadist_x: float
    deltadist_y: float
    sidedist_x: float = 0.0
    sidedist_y: float = 0.0
    step_x: int = 0
    step_y: int = 0
    side: int = 0
    hit: bool = False
    wall_height: int = 0
    drw_start: int = 0
    drw_end: int = 0


def _start_ray(state: GameState, column: float, width: int) -> Ray:
    player = state.player
    camera_x = 2 * column / width - 1
    dir_x = player.dir_x + player.plane_x * camera_x
    dir_y = player.dir_y + player.plane_y * camera_x
    return Ray(
        camera_x=camera_x,
        dir_x=dir_x,
        dir_y=dir_y,
        map_x=int(player.pos_x),
        map_y=int(player.pos_y),
        deltadist_x=_FAR if dir_x == 0 else abs(1 / dir_x),
        deltadist_y=_FAR if dir_y == 0 else abs(1 / dir_y),
    )


def _set_side_dist(ray: Ray, pos_x: float, pos_y: float) -> None:
    if ray.dir_x < 0:
        ray.step_x = -1
        ray.sidedist_x = (pos_x - ray.map_x) * ray.deltadist_x
    else:
        ray.step_x = 1
        ray.sidedist_x = (1 - (pos_x - ray.map_x)) * ray.deltadist_x
    if ray.dir_y < 0:
        ray.step_y = -1
        ray.sidedist_y = (pos_y - ray.map_y) * ray.deltadist_y
    else:
        ray.step_y = 1
        ray.sidedist_y = (1 - (pos_y - ray.map_y)) * ray.deltadist_y


def _march(state: GameState, ray: Ray) -> None:
    while not ray.hit:
        if ray.sidedist_x < ray.sidedist_y:
            ray.sidedist_x += ray.deltadist_x
            ray.map_x += ray.step_x
            ray.side = 0
        else:
            ray.sidedist_y += ray.deltadist_y
            ray.map_y += ray.step_y
            ray.side = 1
        if not 0 <= ray.map_y < state.map_height:
            logger.debug("ray map_y out of bounds: %d", ray.map_y)
            ray.hit = True
            break
        line = state.maplines[ray.map_y]
        if not 0 <= ray.map_x < len(line):
            logger.debug("ray map_x out of bounds: %d (line length %d)",
                         ray.map_x, len(line))
            ray.hit = True
            break
        if line[ray.map_x] != "0":
            ray.hit = True


def cast_ray(state: GameState, column: float, width: int) -> Ray:
    """Trace the ray for screen ``column`` until it meets a wall or the map edge."""
    if width <= 0:
        raise ValueError("width must be positive")
    ray = _start_ray(state, column, width)
    _set_side_dist(ray, state.player.pos_x, state.player.pos_y)
    _march(state, ray)
    return ray


def _texture_index(ray: Ray) -> int:
    if ray.side == 0 and ray.dir_x > 0:
        return 2
    if ray.side == 0 and ray.dir_x < 0:
        return 3
    if ray.side == 1 and ray.dir_y > 0:
        return 1
    if ray.side == 1 and ray.dir_y < 0:
        return 0
    return -1


class Renderer:
    """Draws frames of a :class:`GameState` into a :class:`Framebuffer`.

    ``textures`` holds the four wall textures (indices 0-3) and, optionally,
    an overlay drawn on top of every frame (index 4).
    """

    def __init__(self, state: GameState, textures: Sequence[Texture],
                 floor: int, ceiling: int, width: int, height: int) -> None:
        if len(textures) < 4:
            raise ValueError("at least four wall textures are required")
        self.state = state
        self.textures = list(textures)
        self.floor = floor
        self.ceiling = ceiling
        self.width = width
        self.height = height
        self.framebuffer = Framebuffer(width, height)

    def render_frame(self) -> Framebuffer:
        """Advance the game by one frame and draw it."""
        self.state.update()
        self.framebuffer.clear(0)
        for x in range(self.width):
            ray = cast_ray(self.state, x, self.width)
            self._wall_extent(ray)
            tex_x = self._texture_column(ray)
            self._fill_column(ray, x, self.floor)
            self._fill_column(ray, x, self.ceiling)
            self._draw_wall(ray, tex_x, x)
        self._draw_crosshair()
        self._draw_overlay()
        return self.framebuffer

    def _wall_extent(self, ray: Ray) -> None:
        if ray.side == 0:
            ray.sidedist_x -= ray.deltadist_x
            dist = ray.sidedist_x
        else:
            ray.sidedist_y -= ray.deltadist_y
            dist = ray.sidedist_y
        half = self.height // 2
        ray.wall_height = int(self.height / max(dist, _MIN_DIST))
        ray.drw_start = max(half - (3 * ray.wall_height) // 4, 0)
        ray.drw_end = half + ray.wall_height // 4
        if ray.drw_end > self.height:
            ray.drw_end = self.height - 1

    def _texture_column(self, ray: Ray) -> int:
        player = self.state.player
        if ray.side == 0:
            wall_x = player.pos_y + ray.sidedist_x * ray.dir_y
        else:
            wall_x = player.pos_x + ray.sidedist_y * ray.dir_x
        wall_x -= math.floor(wall_x)
        tex_width = self.textures[0].width
        tex_x = int(wall_x * tex_width)
        if (ray.side == 0 and ray.dir_x < 0) or (ray.side == 1 and ray.dir_y > 0):
            tex_x = tex_width - (tex_x + 1)
        return tex_x

    def _fill_column(self, ray: Ray, x: int, color: int) -> None:
        if color == self.ceiling:
            start, end = 0, ray.drw_end
        elif color == self.floor:
            start, end = ray.drw_start, self.height - 1
        else:
            return
        for y in range(start, end):
            self.framebuffer.put_pixel(x, y, color)

    def _draw_wall(self, ray: Ray, tex_x: int, x: int) -> None:
        index = _texture_index(ray)
        if index < 0:
            logger.debug("no texture for ray at column %d", x)
            return
        if ray.drw_start >= ray.drw_end:
            return
        texture = self.textures[index]
        if not 0 <= tex_x < texture.width:
            logger.debug("texture column out of range: %d", tex_x)
            return
        step = texture.height / ray.wall_height
        tex_pos = (ray.drw_start - self.height // 2
                   + (3 * ray.wall_height) // 4) * step
        for y in range(ray.drw_start, ray.drw_end):
            tex_y = int(tex_pos) % texture.height
            tex_pos += step
            color = texture.color_at(tex_x, tex_y)
            if ray.side == 1:
                color = (color >> 1) & _SHADE_MASK
            if not (0 <= y < self.height and 0 <= x < self.width):
                logger.debug("write outside buffer at (%d, %d)", x, y)
                return
            self.framebuffer.put_pixel(x, y, color)

    def _plot(self, x: int, y: int, color: int) -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            self.framebuffer.put_pixel(x, y, color)

    def _draw_crosshair(self) -> None:
        cx, cy = self.width // 2, self.height // 2
        for y in (*range(cy - 20, cy - 7), *range(cy + 7, cy + 20)):
            self._plot(cx, y, CROSSHAIR_COLOR)
        for x in (*range(cx - 20, cx - 7), *range(cx + 7, cx + 20)):
            self._plot(x, cy, CROSSHAIR_COLOR)

    def _draw_overlay(self) -> None:
        if len(self.textures) < 5:
            return
        overlay = self.textures[4]
        source = overlay.pixels
        target = self.framebuffer.pixels
        limit = min(len(source), len(target))
        for y in range(self.height - 1):
            for x in range(self.width - 1):
                offset = overlay.width * y + x
                if offset >= limit:
                    continue
                color = source[offset]
                if _as_signed(color) > 0:
                    target[offset] = color