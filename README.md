# gameframe

The platform-independent core of a small real-time game framework, in plain
Python with no third-party dependencies.

## Modules

- `gameframe.vector`: dataclasses `Vector2`, `Vector3` and `Vector4`. They
  support element-wise `+ - * /` with a vector of the same type or with a
  number, both as new values and in place (`+=` and so on). Vectors can be
  iterated over their components. The module also has `AABB` (a `min` and
  `max` corner), `dot`, `length` and `normalize`. `dot` and `length` take
  one vector (against itself) or two. `normalize` returns a copy of a zero
  vector unchanged.
- `gameframe.matrix`: `Matrix4x4`, a 4x4 matrix of rows (`m`) that is all
  zeros by default. It supports `+`, `-` and the matrix product with `*` or
  `@`, each also in place. `Matrix4x4.from_rows` builds one from nested
  sequences.
- `gameframe.transforms`: matrix builders for the row-vector convention:
  - `make_identity_4x4`, `make_translate_matrix` and `make_scale_matrix`
  - `make_rotate_x_matrix`, `make_rotate_y_matrix` and `make_rotate_z_matrix`
  - `make_rotate_matrix`, which computes X * (Y * Z)
  - `make_affine_matrix`, which applies scale, then rotate, then translate
  - `make_viewport_matrix`, `make_perspective_fov_matrix` and
    `make_orthographic_matrix`
  - `transpose_matrix` and `transform_normal`
  - `inverse_4x4`, which returns an all-zero matrix for a near-singular input
- `gameframe.easing`: `lerp` for two numbers or two vectors of one type,
  `slerp` for `Vector3`, and `clamp_min_zero`.
- `gameframe.randomness`: uniform random floats and vectors between bounds
  (`random_float` and `random_vector2/3/4`). The `random_range_*` functions
  draw values within a spread around a centre. Each function takes an
  optional `random.Random` for reproducible results. A range whose low end
  is above its high end raises `ValueError`.
- `gameframe.world_transform`: `WorldTransform`, with `translate`, `rotate`,
  `scale`, `offset` and an optional `parent`.
  - `update_matrix` recomputes `world_matrix`.
  - `forward`, `up`, `right` and `world_translate` read rows of that matrix.
  - `reset` restores the defaults.
- `gameframe.renderer`: `LayerType` and `Renderer`. `add_draw` queues a
  callable on a layer, for the on-screen or the off-screen queue. `draw` and
  `off_screen_draw` run the queued callables layer by layer in ascending
  order, then empty the queue. After each layer they call an optional
  depth-clear callback.
- `gameframe.scene`: `BaseScene`, `SceneType` and `SceneManager`. Scene
  classes are supplied as factories per `SceneType`, in the constructor or
  with `register`. `change_scene` creates and initialises a new scene, and
  the manager forwards `update`, `draw` and `imgui` to it. If no factory is
  registered for `SceneType.TITLE`, the manager uses the `GAME` factory.
- `gameframe.debug_log`: `output_log` writes to the `logging` debug level.
  `convert_string` turns UTF-8 bytes into text or text into UTF-8 bytes, and
  replaces malformed input.
- `gameframe.descriptors`: `DescriptorAllocator` and its fixed-size
  subclasses:

  | Class        | Slots | Shader-visible |
  |--------------|-------|----------------|
  | `RtvManager` | 3     | no             |
  | `DsvManager` | 2     | no             |
  | `SrvManager` | 512   | yes            |

  Each one hands out slot indices in order, computes CPU and GPU handle
  addresses, and records a `ViewDesc` for every view written into a slot.
  `allocate` raises `RuntimeError` when the heap is full.
- `gameframe.input_state`: `InputState` and `MouseState`. Pass 256 key
  values and a `MouseState` snapshot to `update` each frame. You can then
  ask for push, release, trigger-push and trigger-release on keys and on the
  four mouse buttons. `mouse_position` and `mouse_velocity` read the cursor
  and movement.
- `gameframe.audio`:
  - `load_wav_file` reads RIFF/WAVE files into `SoundData`. It skips `bext`,
    `junk`, `JUNK` and `LIST` chunks before the data chunk, and raises
    `WavFormatError` on malformed input.
  - `Audio` keeps named sounds loaded from a sound directory (default
    `Resource/Sound/SE`) and tracks their playing `SoundInstance`s.
    `update` drops the instances that have finished.
  - Playback goes through a `Voice`. The default `TimedVoice` produces no
    sound: it counts as playing for the length of the samples.

## Example

```python
import math
from gameframe.vector import Vector3
from gameframe.transforms import make_affine_matrix, inverse_4x4, make_identity_4x4
from gameframe.renderer import LayerType, Renderer

m = make_affine_matrix(Vector3(1, 1, 1), Vector3(0, math.pi / 2, 0), Vector3(0, 3, 0))
product = m @ inverse_4x4(m)  # close to make_identity_4x4()

order = []
renderer = Renderer()
renderer.add_draw(LayerType.OBJECT, False, lambda: order.append("object"))
renderer.add_draw(LayerType.BACK_GROUND, False, lambda: order.append("background"))
renderer.draw()
assert order == ["background", "object"]
```

## What it does not do

This package has no window, no graphics device and no sound output.

- The renderer only runs the callables you queue.
- The descriptor managers only compute indices and addresses and record
  view descriptions.
- The input state only interprets the snapshots you pass in.
- The audio registry only keeps track of what would be playing.

The package does not provide concrete game scenes, and there is no command
to start a game.

## Running the tests

```
pip install -e .[test]
pytest
```