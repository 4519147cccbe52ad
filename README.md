# cubraycast

A small, dependency-free raycasting engine for grid maps, with what sits
around it: an XPM image reader, player movement with wall collision, a
software framebuffer renderer, and a few text helpers.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `cubraycast.game`: `Player`, `GameState`, `Action` and `QuitRequested`.
  `GameState.press(action)` and `GameState.release(action)` track which
  actions are held; `GameState.update()` applies one frame of them (move
  forward/backward, strafe, rotate). `GameState.try_move(dx, dy)` moves the
  player unless the target tile, checked with a collision radius, is a wall
  (`'1'`), empty space (`' '`) or off the map; a blocked move does not slide.
  Pressing `Action.QUIT` raises `QuitRequested`. `Player.rotate(angle)` turns
  the view direction and camera plane and keeps `dir` within `[0, 2*pi)`.
- `cubraycast.render`: `Texture`, `Framebuffer`, `Ray`, `cast_ray` and
  `Renderer`. `cast_ray(state, column, width)` steps through the grid with
  a DDA until it meets a non-`'0'` tile or the edge of the map.
  `Renderer.render_frame()` calls `state.update()`, clears the framebuffer
  and draws ceiling, floor and textured walls (walls hit on a horizontal
  side are darkened), then a crosshair and, if a fifth texture is given, an
  overlay whose positive pixels are copied over the frame. Pixels are packed
  `0xRRGGBB` integers.
- `cubraycast.xpm`: `load_xpm(path)`, `parse_xpm_text(text)` and
  `parse_xpm_lines(lines)` decode XPM images into an `XpmImage` with
  `width`, `height` and `pixels` (0xAARRGGBB, rows top to bottom; the colour
  `none` becomes `0xFF000000`). `text_to_rgb` resolves `#rrggbb` values and
  colour names; `strip_comments` blanks C-style comments outside quoted
  strings. Malformed input raises `XpmError`.
- `cubraycast.colornames`: `lookup_color(name)` resolves X11 colour names
  without regard to case, returning `None` for unknown names.
- `cubraycast.linereader`: `LineReader(stream, buffer_size=13)` reads lines
  from a text or binary stream in fixed-size chunks; `read_line()` returns
  `None` at end of stream, and the reader is iterable.
- `cubraycast.printf`: `format_printf`, `printf` and `to_hex` cover a small
  printf subset (`%c %s %p %d %i %u %x %X %%`).
- `cubraycast.wordtab`: `find`, `find_outside_quotes` and `split_words`.
- `cubraycast.textutil`: `atoi`, `itoa`, `split`, `strtrim`, `substr`,
  `strnstr` and `strncmp`.

## Example

```python
from cubraycast.game import Action, GameState, Player
from cubraycast.render import Renderer, Texture
from cubraycast.xpm import load_xpm

maplines = [
    "11111",
    "10001",
    "10001",
    "11111",
]
player = Player(pos_x=2.5, pos_y=2.5, dir_x=0.0, dir_y=-1.0,
                plane_x=0.66, plane_y=0.0)
state = GameState(maplines=maplines, player=player)

textures = []
for path in ("north.xpm", "south.xpm", "east.xpm", "west.xpm"):
    image = load_xpm(path)
    textures.append(Texture(image.width, image.height, image.pixels))

renderer = Renderer(state, textures, floor=0x444444, ceiling=0x87CEEB,
                    width=640, height=480)

state.press(Action.FORWARD)
frame = renderer.render_frame()   # a Framebuffer; frame.pixels is a flat list
```

## What this package does not do

It opens no window, reads no keyboard and runs no game loop: the caller maps
its own input to `Action` values, calls `render_frame()` each frame and shows
`Framebuffer.pixels` with a display library of its choice. It also has no
reader for scene or map description files; map lines, player start and
colours are passed in directly. There is no command-line program.