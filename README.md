# meshforge

meshforge builds simple triangle meshes, a cube or a UV sphere, and writes
them as ASCII STL files. It can also cut an existing ASCII STL mesh in two
along a plane. The library also has a small camera and viewport model for
looking at meshes. It covers view presets, orbit, pan and zoom, projection
matrices and cursor rays. A scene controller maps keyboard and mouse events
onto that state.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Command line

The `meshforge` command takes a command name and then `--key value` pairs.
Points and vectors are three numbers with a separator character before,
between and after them, for example `(0,0,0)`. Quote them so the shell
does not interpret the brackets.

Generate a sphere of radius `R` centred at `origin`. The sphere has 20
latitude and 20 longitude divisions:

```
meshforge sphere --R 2 --origin "(0,0,0)" --filepath sphere.stl
```

Generate an axis-aligned cube with side length `L` centred at `origin`:

```
meshforge cube --L 1.5 --origin "(1,2,3)" --filepath cube.stl
```

Split a mesh with the plane that passes through `origin` and has normal
`direction`. The part on the side the normal points to goes to `output1`.
The rest goes to `output2`. Triangles that cross the plane are cut along it.

```
meshforge Split --input Assets/sphere.stl --origin "(0,0,0)" --direction "(0,0,1)" --output1 top.stl --output2 bottom.stl
```

Command names are case-sensitive: `sphere`, `cube` and `Split`.

Generated and split meshes are written into the `Assets` directory under the
current working directory. That directory must already exist. The `--input`
path of `Split` is read as given. On success the command prints a message to
standard output. On failure it prints `Error: ...` to standard error.

### Exit status

| Code | Meaning                                                              |
|------|----------------------------------------------------------------------|
| 0    | success                                                              |
| 1    | no command or an unknown command; non-positive size; zero-length normal |
| 2    | empty output path, unreadable or empty input, output cannot be written |
| 3    | missing arguments, or a badly formed number, point or vector         |
| 4    | the plane does not cut the mesh                                      |

## Library use

```python
from meshforge.stl import Vec, read_stl, write_stl
from meshforge.commands import generate_cube, generate_sphere
from meshforge.split import split_mesh

cube = generate_cube(2.0, Vec(0.0, 0.0, 0.0))
above, below = split_mesh(cube, Vec(0.0, 0.0, 0.0), Vec(0.0, 0.0, 1.0))
write_stl(above, "top.stl", directory=".")
```

### Meshes and STL files (`meshforge.stl`)

A mesh is a flat list of `STLVertex` values, each holding a `pos` and a
`normal` `Vec`. Each run of three vertices forms one triangle.

- `read_stl(path)` loads an ASCII STL file. It raises `OSError` if the file
  cannot be opened.
- `write_stl(soup, filename, directory="Assets")` writes the mesh and returns
  the path it wrote. It recomputes the facet normals from the vertex
  positions. It raises `ValueError` if the vertex count is not a multiple of
  three.
- `calculate_normal(v1, v2, v3)` gives the unit normal of a triangle. For a
  degenerate triangle it gives the zero vector.

### Commands (`meshforge.commands`, `meshforge.split`, `meshforge.cli`)

- `generate_cube(length, origin)` returns 12 triangles.
- `generate_sphere(radius, origin)` returns the triangles of a UV sphere.
- `parse_vec(text)` reads a vector such as `"(1,2,3)"`. It raises
  `ValueError` on malformed input.
- `split_mesh(mesh, origin, normal)` returns `(above, below)`.
  `is_above_plane` and `intersect_edge_with_plane` are the helpers it uses.
- `Cube`, `Sphere` and `Split` are `Command` objects. Each one takes an
  `output_dir` (default `"Assets"`). Their `execute(args)` takes a mapping of
  argument names to strings and returns the success message. On failure it
  raises `CommandError`, whose `code` is the exit status.
- `Application` registers commands by name with `register(command)`. Its
  `execute(argv)` runs them and returns an exit status. `main(argv=None)` is
  the `meshforge` entry point.

### Viewing (`meshforge.camera`, `meshforge.viewport`, `meshforge.scene`)

- `Camera` holds numpy `eye`, `target` and `up` vectors.
  - View presets: `set_front_view`, `set_top_view`, `set_rear_view`,
    `set_right_view`, `set_left_view`, `set_bottom_view`, `set_iso_view`.
  - Moves: `orbit`, `pan`, `zoom`, `translate`, `rotate`, `transform`,
    `set_distance_to_target`, `set_eye_target_up`.
  - Queries: `view_matrix`, `forward`, `right`, `distance_to_target`.
  - Module-level helpers: `look_at`, `rotation_matrix`,
    `translation_matrix`.
- `Viewport` wraps a camera.
  - Settings: `fov` (default 60), `z_near`, `z_far`, `width`, `height` and
    `parallel_projection`.
  - `projection_matrix()` gives a perspective or orthographic projection.
  - `cursor_ray(x, y)` turns a window position into a world-space `Ray`.
  - The functions `perspective`, `ortho` and `unproject` are also available
    on their own.
- `SceneController` holds the model position, the material colour, the
  `RenderMode` and a `Viewport`.
  - `on_key(key, action)`: the arrow keys move the model. `R`/`T`, `G`/`H`
    and `B`/`N` raise or lower the red, green and blue channels of the
    colour, which stays within 0 to 1. `1`, `2` and `3` select the
    triangles, edges or vertices render mode. `F1` to `F7` select the camera
    view presets. `F8` toggles parallel projection.
  - `on_mouse_button` and `on_mouse_move`: dragging with the left button
    orbits the camera, and dragging with the right button pans it.
  - `on_scroll`: scrolling zooms.
  - `move_camera(offset)`: moves the camera by an offset given in its own
    right, up and forward directions.
- `load_model(argument, assets_dir)` loads a model. A name with a path
  separator is read as given; a bare name is looked up in `assets_dir`. If
  nothing loads it falls back to `default_model()`, a square pyramid.

## What it does not do

meshforge has no window and no renderer. `SceneController` and `Viewport`
keep the state a viewer needs and compute its matrices and rays, but nothing
in the package opens a window or draws the mesh. Only ASCII STL is read and
written; binary STL is not supported.