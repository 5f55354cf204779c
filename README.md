# morphosis

Building blocks for exploring four-dimensional quaternion fractals:

- membership tests for quaternion Julia and Mandelbrot sets,
- the marching-cubes lookup tables,
- helpers to flatten, rescale and compute normals for triangle meshes,
- an orbiting camera and keyboard-driven viewer state,
- derivation of a Julia constant from a binary matrix file by way of a
  SHA-256 digest.

## Installation

```
pip install .
```

Python 3.10 or newer is required. There are no runtime dependencies; the
`test` extra installs pytest.

## Command line

```
morphosis 0.05 -0.2 0.8 0.0 0.0   # step size, then q.x q.y q.z q.w
morphosis -d                      # default parameters
morphosis -m data.mat             # derive q from a binary matrix file
```

With a step size and four quaternion components, the command asks for the
number of iterations. If the step size is outside 0.00001 to 1, it asks for
a new one until it lies between 0.00001 and 0.5; for a value entered there
below 0.02 it asks whether to proceed (0), enter a new value (1) or exit (2).

With `-m`, the file must hold 36 lines of 6-bit binary values in
12-character fields. The six 6x6 layers are averaged, the averaged matrix is
hashed with SHA-256 and the digest gives the quaternion, which is printed as
`x:`, `y:`, `z:`, `w:`. The command then asks for the step size (checked as
above) and the number of iterations.

`-d` uses the defaults: step size 0.05, 6 iterations, c = (-0.2, 0.8, 0, 0).

In every case the command finishes by printing a summary of the parameters
and the viewer controls. Errors (bad arguments, unreadable or malformed
files) are printed and the command exits with status 1.

## Library

```python
from morphosis.quaternion import Quat
from morphosis.sampling import Formula, JuliaParams, sample_julia_formula

julia = JuliaParams(max_iter=8, c=Quat(-0.2, 0.8, 0.0, 0.0))
inside = sample_julia_formula(julia, (0.1, 0.2, 0.0), Formula.STANDARD)  # 1.0 or 0.0
```

Modules:

- `morphosis.quaternion`: complex helpers on Python `complex` values
  (`cadd`, `cmult`, `cdiv`, `carg`, `csqrt`, `cexp`, `clog`, `cpow`, ...)
  and the `Quat` dataclass with `quat_mult`, `quat_sum`, `quat_conjugate`,
  `quat_mod`, and the Hamilton-product variants `quat_mult_d`,
  `quat_sum_d`, `quat_mod_d`.
- `morphosis.sampling`: `JuliaParams`, `Formula`, and the samplers
  `sample_julia_formula`, `sample_mandelbrot`, `sample_julia_deep_zoom`.
  Each returns `1.0` for a point that stays bounded and `0.0` for one that
  escapes.
- `morphosis.tables`: `EDGE_TABLE`, `TRIANGLE_TABLE`, `intersected_edges`
  and `triangle_edges` for an 8-bit cube index.
- `morphosis.matrix`: `binary_to_int`, `parse_matrix_lines`,
  `read_matrix_file`, `mean_matrix`, and `read_int_matrix`, which builds the
  string to hash from 1296 whitespace-separated integers.
- `morphosis.coords`: `MatrixParameters`, `generate_number`,
  `coords_from_hash`, `matrix_to_string`, `hash_mean_matrix`,
  `hash_matrix_string`.
- `morphosis.geometry`: `flatten_triangles`, `scale_points` (map a box into
  [-0.75, 0.75]) and `vertex_normals`.
- `morphosis.camera`: `RenderMode` and `Camera` with `zoom_in`, `zoom_out`,
  `scroll`, `press`, `drag`, `release` and `update_position`.
- `morphosis.controls`: `Key`, `FractalType` and `Viewer`, whose
  `process_input(pressed, now)` applies held keys and returns the messages
  they produce, and `parameter_info()` for the parameter summary.
- `morphosis.settings`: `FractalSettings`, `ErrorKind`, `MorphosisError`,
  `error_message` and `check_step_size`.

## What it does not do

- It does not sample a grid or build a mesh from it; the tables and
  geometry helpers are provided, but there is no surface extraction step.
- It opens no window and draws nothing. `Viewer` and `Camera` hold the
  state an interactive viewer would use, driven by the caller.
- It writes no mesh files.
- `-p` (poem input) is rejected with an argument error.