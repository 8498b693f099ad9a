# aengine

Building blocks for a small 3D animation engine, written with NumPy.

## Modules

- `aengine.mathutils`: vector, quaternion and transform helpers. Quaternions are
  numpy arrays ordered `(w, x, y, z)`. Matrices act on column vectors, so a 4x4
  transform keeps its translation in the last column.
  - `from_to_rotation(from_, to)` gives the rotation that takes one direction onto
    another. Zero-length or (anti)parallel inputs give the identity.
  - `look_at_rotation(forward, up)` gives a rotation whose local z axis points
    along `forward`.
  - `face_normal(v0, v1, v2)` gives the unit normal of a triangle.
  - `quat_from_matrix(matrix)` converts a rotation matrix to a quaternion.
  - `decompose_transform(transform)` returns a `DecomposedTransform` named tuple
    of `position`, `rotation` and `scale`.
  - `angle_axis(angle, axis)` builds a quaternion and `rotate(quat, vector)`
    applies one to a vector.
- `aengine.dampers`: smooth approach of a value to a target.
  - `damper_exp(position, target, dt, half_life)` and
    `damper_exp_alpha(dt, half_life)` provide exponential damping.
  - `damper_spring(position, velocity, goal_position, goal_velocity, dt,
    stiffness=20.0, damping=5.0)` is a critically, under- or over-damped spring.
    It returns `(position, velocity)`.
  - `fast_neg_exp` and `fast_atan` are the cheap approximations the dampers use.
  - Scalars give scalars back. Sequences and arrays are damped per component and
    come back as numpy arrays.
- `aengine.visgeometry`: vertex positions for debug shapes, as `(n, 3)` arrays.
  - `grid_points` returns segment endpoints for a grid on the xz plane. Its last
    four points are the two axis lines.
  - `bone_vertices` flattens `(start, end)` pairs into segment endpoints.
  - `arrow_strips`, `directional_light_strips`, `cube_strips`, `aabb_strips` and
    `wire_sphere_strips` return line strips.
  - Colour constants: `RED`, `GREEN`, `BLUE`, `YELLOW`, `PURPLE`, `WHITE`, `GREY`
    and `BLACK`.
- `aengine.meshdata`: mesh records and loading.
  - The records are the `Vertex`, `Texture` and `Mesh` dataclasses. A vertex
    carries `MAX_BONES` (4) bone slots.
  - `Mesh` checks that its indices are in range. `Mesh.triangles()` yields the
    vertices of each triangle.
  - `plane_primitive()` returns the unit plane on the xz plane, facing +y.
  - `load_obj(path)` reads a Wavefront OBJ file into one `Mesh` per object or
    group that has faces. Polygons are fan-triangulated. Triangles without
    normals get their face normal. Malformed lines raise `ValueError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Rotating a vector:

```python
import math
from aengine.mathutils import angle_axis, rotate

q = angle_axis(math.pi / 2, (0.0, 0.0, 1.0))
rotate(q, (1.0, 0.0, 0.0))   # approximately [0, 1, 0]
```

A spring damper stepped once per frame:

```python
from aengine.dampers import damper_spring

x, v = 0.0, 0.0
for _ in range(60):
    x, v = damper_spring(x, v, 1.0, 0.0, 1 / 60, 20.0, 5.0)
```

Reading a model:

```python
from aengine.meshdata import load_obj

for mesh in load_obj("models/teapot.obj"):
    print(mesh.identifier, len(mesh.vertices), len(mesh.indices) // 3)
```

## What it does not do

- The package draws nothing and has no graphics, window or GPU code.
  `aengine.visgeometry` only computes the points that a renderer would draw.
- `load_obj` is the only model reader. FBX and other formats, skeletons and
  animation clips are not read.
- There is no asset cache or texture loading. `Texture` is a plain record of an
  id and a path.
- There is no spatial search structure.