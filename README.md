# voxelcast

voxelcast renders block worlds loaded from VXL map files (512 × 512 × 64
voxels). It casts one ray per pixel through the voxel grid in pure Python, and
a pygame window lets you fly through the map.

## Installation

```
pip install .
```

To run the tests, install the test extra as well:

```
pip install ".[test]"
pytest
```

## Running the viewer

```
voxelcast
```

By default the viewer loads `./maps/DragonsReach.vxl` and places the player at
a fixed starting point. Options:

| Option        | Default            | Meaning                                  |
|---------------|--------------------|------------------------------------------|
| `--maps-dir`  | `./maps`           | directory holding `.vxl` maps            |
| `--map`       | `DragonsReach.vxl` | map in that directory to load first      |
| `--width`     | `640`              | window width in pixels                   |
| `--height`    | `480`              | window height in pixels                  |
| `--scale`     | `8`                | window pixels per rendered pixel         |

The world is rendered at `width / scale` by `height / scale` pixels and
scaled up to fill the window. `--scale` must be positive, and the window must
be at least one rendered pixel in each direction.

Controls:

| Key              | Action                                              |
|------------------|-----------------------------------------------------|
| W / S            | move forward / backward                             |
| A / D            | strafe left / right                                 |
| Q / E            | move up / down                                      |
| Arrow up/down    | look up / down (clamped between straight up and down) |
| Arrow left/right | turn left / right                                   |
| N                | load the next `.vxl` map in the maps directory      |
| Escape           | quit (closing the window also quits)                |

Maps are cycled in alphabetical order of their file names. Every 60 frames
the viewer prints the frame time, the frame rate and the player's position and
direction.

## Using the library

```python
from voxelcast.world import Blockworld
from voxelcast.vxl import load_map
from voxelcast.render import Frame, render_frame

world = Blockworld()
load_map("maps/example.vxl", world)

frame = Frame(80, 60)
render_frame(frame, world)
rgba = frame.to_bytes()
```

Only `voxelcast.app.main` needs pygame and a display; the other modules work
without one.

Modules:

- `voxelcast.geometry`: immutable `Point`, `Vec3` and `Angle3`. `Vec3`
  supports `+`, `-`, scaling with `*`, rotations in degrees (`rotate`,
  `rotate_x`, `rotate_y`, `rotate_z`), `normalize`, `to_nearest_point` and
  `to_point_trunc`. `Angle3` holds a polar `theta` and an azimuthal `phi` in
  degrees, with `normalize`, `clamp_to_view`, `rotate_phi`, `rotate_theta`,
  `reset_theta` and `to_cartesian(r)`.
- `voxelcast.colors`: `Color`, an RGBA colour whose channels must lie in
  0..255, and `composite_over(front, back)` for alpha compositing.
- `voxelcast.world`: `Block` and `Blockworld`, a fixed-size grid of blocks
  plus the player's `player_pos` and `player_dir`. `get` and `get_raw` return
  `None` for air and for positions outside the grid; `set` ignores positions
  outside the grid. `set_size` resizes and clears the grid, and `randomize`
  places a small wall of randomly coloured blocks.
- `voxelcast.vxl`: `parse_vxl` decodes VXL data into a `VxlMap` (`is_solid`,
  `color_at`, `solid_voxels`), raising `VxlFormatError` on truncated or
  malformed data. `populate_world` and `load_map` fill a `Blockworld` from a
  map; blocks on the bottom layer are marked reflective.
- `voxelcast.render`: `Frame`, an RGBA pixel buffer storing premultiplied
  colours, and `render_frame`, the ray caster. Rays walk at most 250 cells;
  reflective blocks mirror the ray vertically and tint what it hits next.
  Rows are written bottom-up, so row 0 of the buffer is the bottom of the view.
- `voxelcast.app`: the viewer (`main`), the keyboard `Action` enum,
  `handle_inputs`, which moves the player, and `cycle_map`, which loads the
  next map in a directory.

## Limitations

Rendering is done entirely on the CPU in Python, one ray per pixel, so the
viewer is slow; a large `--scale` keeps the rendered frame small. There is no
way to edit or save maps: VXL files are only read.