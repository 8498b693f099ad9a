"""Vertex, texture and mesh records, the plane primitive and a Wavefront OBJ reader.

Vector attributes of a vertex are 4-tuples of floats. Positions carry ``w = 1``
and normals carry ``w = 0``. Texture coordinates hold the first uv set in
``xy`` and an optional second set in ``zw``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterator

from aengine.mathutils import face_normal

__all__ = [
    "MAX_BONES",
    "Vec4",
    "Vertex",
    "Texture",
    "Mesh",
    "load_obj",
    "plane_primitive",
]

MAX_BONES = 4

Vec4 = tuple[float, float, float, float]

_ZERO4: Vec4 = (0.0, 0.0, 0.0, 0.0)


def _zero_ids() -> tuple[int, ...]:
    return (0,) * MAX_BONES


def _zero_weights() -> tuple[float, ...]:
    return (0.0,) * MAX_BONES


@dataclass
class Vertex:
    """One mesh vertex with rendering and skinning attributes."""

    position: Vec4 = _ZERO4
    normal: Vec4 = _ZERO4
    tex_coords: Vec4 = _ZERO4
    color: Vec4 = _ZERO4
    bone_ids: tuple[int, ...] = field(default_factory=_zero_ids)
    bone_weights: tuple[float, ...] = field(default_factory=_zero_weights)

    def __post_init__(self) -> None:
        for name in ("position", "normal", "tex_coords", "color"):
            value = tuple(float(c) for c in getattr(self, name))
            if len(value) != 4:
                raise ValueError(f"{name} must have 4 components, got {len(value)}")
            setattr(self, name, value)
        self.bone_ids = tuple(int(i) for i in self.bone_ids)
        self.bone_weights = tuple(float(w) for w in self.bone_weights)
        if len(self.bone_ids) != MAX_BONES or len(self.bone_weights) != MAX_BONES:
            raise ValueError(f"a vertex carries exactly {MAX_BONES} bone slots")


@dataclass
class Texture:
    """A texture handle and the path it was loaded from."""

    id: int = 0
    path: str = ""


@dataclass
class Mesh:
    """Indexed triangle mesh, named by ``identifier`` within ``model_path``."""

    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    identifier: str = ""
    model_path: str = ""

    def __post_init__(self) -> None:
        self.vertices = list(self.vertices)
        self.indices = [int(i) for i in self.indices]
        count = len(self.vertices)
        if any(i < 0 or i >= count for i in self.indices):
            raise ValueError("mesh index out of range of its vertices")

    def triangles(self) -> Iterator[tuple[Vertex, Vertex, Vertex]]:
        """Yield the vertices of each indexed triangle."""
        it = iter(self.indices)
        for a, b, c in zip(it, it, it):
            yield self.vertices[a], self.vertices[b], self.vertices[c]


def plane_primitive() -> Mesh:
    """The unit plane on the xz plane, facing +y, as two triangles."""
    up: Vec4 = (0.0, 1.0, 0.0, 0.0)
    vertices = [
        Vertex((0.5, 0.0, 0.5, 1.0), up, (1.0, 1.0, 1.0, 1.0)),
        Vertex((0.5, 0.0, -0.5, 1.0), up, (1.0, 0.0, 1.0, 1.0)),
        Vertex((-0.5, 0.0, -0.5, 1.0), up, (0.0, 0.0, 1.0, 1.0)),
        Vertex((-0.5, 0.0, 0.5, 1.0), up, (0.0, 1.0, 1.0, 1.0)),
    ]
    return Mesh(vertices, [0, 1, 3, 1, 2, 3], "plane", "::planePrimitive")


@dataclass
class _Shape:
    name: str
    faces: list[list[tuple[int, int | None, int | None]]] = field(default_factory=list)


def _resolve(token: str, count: int, line_no: int) -> int:
    try:
        value = int(token)
    except ValueError:
        raise ValueError(f"line {line_no}: bad index {token!r}") from None
    if value == 0:
        raise ValueError(f"line {line_no}: index 0 is not valid")
    index = value - 1 if value > 0 else count + value
    if not 0 <= index < count:
        raise ValueError(f"line {line_no}: index {value} out of range")
    return index


def _floats(parts: list[str], minimum: int, line_no: int) -> list[float]:
    if len(parts) < minimum:
        raise ValueError(f"line {line_no}: expected at least {minimum} numbers")
    try:
        return [float(p) for p in parts]
    except ValueError:
        raise ValueError(f"line {line_no}: bad number") from None


def _parse_obj(text: str):
    positions: list[tuple[float, float, float]] = []
    normals: list[tuple[float, float, float]] = []
    texcoords: list[tuple[float, float]] = []
    shapes: list[_Shape] = []
    current = _Shape("")

    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        keyword, _, rest = line.partition(" ")
        parts = rest.split()
        if keyword == "v":
            x, y, z = _floats(parts, 3, line_no)[:3]
            positions.append((x, y, z))
        elif keyword == "vn":
            x, y, z = _floats(parts, 3, line_no)[:3]
            normals.append((x, y, z))
        elif keyword == "vt":
            values = _floats(parts, 1, line_no)
            texcoords.append((values[0], values[1] if len(values) > 1 else 0.0))
        elif keyword == "f":
            if len(parts) < 3:
                raise ValueError(f"line {line_no}: a face needs at least 3 vertices")
            corners = []
            for token in parts:
                fields = token.split("/")
                if len(fields) > 3:
                    raise ValueError(f"line {line_no}: bad face vertex {token!r}")
                v = _resolve(fields[0], len(positions), line_no)
                vt = (
                    _resolve(fields[1], len(texcoords), line_no)
                    if len(fields) > 1 and fields[1]
                    else None
                )
                vn = (
                    _resolve(fields[2], len(normals), line_no)
                    if len(fields) > 2 and fields[2]
                    else None
                )
                corners.append((v, vt, vn))
            # fan triangulation
            for i in range(1, len(corners) - 1):
                current.faces.append([corners[0], corners[i], corners[i + 1]])
        elif keyword in ("o", "g"):
            if current.faces:
                shapes.append(current)
            current = _Shape(rest.strip())
    if current.faces:
        shapes.append(current)
    return positions, normals, texcoords, shapes


def load_obj(path) -> list[Mesh]:
    """Read a Wavefront OBJ file; one mesh per object or group that has faces.

    Polygons are fan-triangulated. Triangles without normals get their face
    normal; missing texture coordinates are left at zero.
    """
    with open(path, encoding="utf-8") as handle:
        text = handle.read()
    positions, normals, texcoords, shapes = _parse_obj(text)
    model_path = os.fspath(path)

    meshes = []
    for shape in shapes:
        vertices: list[Vertex] = []
        for face in shape.faces:
            triangle = []
            without_normal = False
            for v, vt, vn in face:
                x, y, z = positions[v]
                if vn is None:
                    without_normal = True
                    normal: Vec4 = _ZERO4
                else:
                    nx, ny, nz = normals[vn]
                    normal = (nx, ny, nz, 0.0)
                if vt is None:
                    uv: Vec4 = _ZERO4
                else:
                    u, w = texcoords[vt]
                    uv = (u, w, 1.0, 1.0)
                triangle.append(Vertex((x, y, z, 1.0), normal, uv))
            if without_normal:
                n = face_normal(*(vert.position[:3] for vert in triangle))
                computed: Vec4 = (float(n[0]), float(n[1]), float(n[2]), 0.0)
                for vert in triangle:
                    vert.normal = computed
            vertices.extend(triangle)
        meshes.append(Mesh(vertices, list(range(len(vertices))), shape.name, model_path))
    return meshes