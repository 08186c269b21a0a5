"""Mesh data: vertices, index lists and a Wavefront OBJ loader."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from .log import get_engine_logger
from .uassert import ensure

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]


def _vector(values: Iterable[float], size: int) -> tuple[float, ...]:
    result = tuple(float(v) for v in values)
    if len(result) != size:
        raise ValueError(f"expected {size} components, got {len(result)}")
    return result


@dataclass(frozen=True)
class Vertex:
    """One mesh vertex; equal vertices share an index in a model."""

    position: Vec3 = (0.0, 0.0, 0.0)
    color: Vec3 = (0.0, 0.0, 0.0)
    normal: Vec3 = (0.0, 0.0, 0.0)
    uv: Vec2 = (0.0, 0.0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", _vector(self.position, 3))
        object.__setattr__(self, "color", _vector(self.color, 3))
        object.__setattr__(self, "normal", _vector(self.normal, 3))
        object.__setattr__(self, "uv", _vector(self.uv, 2))


@dataclass
class _ObjData:
    positions: list[Vec3] = field(default_factory=list)
    colors: list[Vec3] = field(default_factory=list)
    normals: list[Vec3] = field(default_factory=list)
    texcoords: list[Vec2] = field(default_factory=list)
    # Each corner is (vertex_index, texcoord_index, normal_index); -1 means absent.
    corners: list[tuple[int, int, int]] = field(default_factory=list)


def _resolve(token: str, count: int, line_number: int) -> int:
    if not token:
        return -1
    index = int(token)
    if index > 0:
        resolved = index - 1
    elif index < 0:
        resolved = count + index
    else:
        raise ValueError(f"line {line_number}: index 0 is not allowed")
    if not 0 <= resolved < count:
        raise ValueError(f"line {line_number}: index {index} is out of range")
    return resolved


def _parse_obj(text: str) -> _ObjData:
    data = _ObjData()
    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.split("#", 1)[0].strip()
        if not line:
            continue
        keyword, *fields = line.split()
        if keyword == "v":
            values = [float(v) for v in fields]
            if len(values) < 3:
                raise ValueError(f"line {line_number}: vertex needs three coordinates")
            data.positions.append((values[0], values[1], values[2]))
            if len(values) >= 6:
                data.colors.append((values[3], values[4], values[5]))
            else:
                data.colors.append((1.0, 1.0, 1.0))
        elif keyword == "vn":
            values = [float(v) for v in fields]
            if len(values) < 3:
                raise ValueError(f"line {line_number}: normal needs three components")
            data.normals.append((values[0], values[1], values[2]))
        elif keyword == "vt":
            values = [float(v) for v in fields]
            if not values:
                raise ValueError(f"line {line_number}: texture coordinate is empty")
            data.texcoords.append((values[0], values[1] if len(values) > 1 else 0.0))
        elif keyword == "f":
            if len(fields) < 3:
                raise ValueError(f"line {line_number}: face needs at least three corners")
            face = []
            for token in fields:
                parts = token.split("/")
                parts += [""] * (3 - len(parts))
                vertex_index = _resolve(parts[0], len(data.positions), line_number)
                ensure(vertex_index >= 0, f"line {line_number}: face corner has no vertex")
                texcoord_index = _resolve(parts[1], len(data.texcoords), line_number)
                normal_index = _resolve(parts[2], len(data.normals), line_number)
                face.append((vertex_index, texcoord_index, normal_index))
            for k in range(1, len(face) - 1):
                data.corners.extend((face[0], face[k], face[k + 1]))
    return data


@dataclass
class ModelBuilder:
    """Collects unique vertices and the indices that refer to them."""

    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    model_name: str = ""
    _lookup: dict[Vertex, int] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        for index, vertex in enumerate(self.vertices):
            self._lookup.setdefault(vertex, index)

    @property
    def vertex_count(self) -> int:
        """Number of distinct vertices."""
        return len(self.vertices)

    @property
    def index_count(self) -> int:
        """Number of indices."""
        return len(self.indices)

    def add_vertex(self, vertex: Vertex) -> int:
        """Append an index for ``vertex``, storing it first if it is new; return the index."""
        index = self._lookup.get(vertex)
        if index is None:
            index = len(self.vertices)
            self._lookup[vertex] = index
            self.vertices.append(vertex)
        self.indices.append(index)
        return index

    def load_model(self, filepath: str | Path) -> None:
        """Replace the contents with the triangles of a Wavefront OBJ file."""
        self.model_name = str(filepath)
        try:
            text = Path(filepath).read_text(encoding="utf-8")
        except OSError:
            ensure(False, f"Failed to load model: {filepath}")
        data = _parse_obj(text)

        self.vertices.clear()
        self.indices.clear()
        self._lookup.clear()

        for vertex_index, texcoord_index, normal_index in data.corners:
            self.add_vertex(
                Vertex(
                    position=data.positions[vertex_index],
                    color=data.colors[vertex_index],
                    normal=data.normals[normal_index] if normal_index >= 0 else (0.0, 0.0, 0.0),
                    uv=data.texcoords[texcoord_index] if texcoord_index >= 0 else (0.0, 0.0),
                )
            )
        get_engine_logger().info("Vertex count: %d", len(self.vertices))


_CUBE_FACES: Sequence[tuple[Vec3, Sequence[Vec3]]] = (
    # left face (white)
    ((0.9, 0.9, 0.9), ((-0.5, -0.5, -0.5), (-0.5, 0.5, 0.5), (-0.5, -0.5, 0.5), (-0.5, 0.5, -0.5))),
    # right face (yellow)
    ((0.8, 0.8, 0.1), ((0.5, -0.5, -0.5), (0.5, 0.5, 0.5), (0.5, -0.5, 0.5), (0.5, 0.5, -0.5))),
    # top face (orange, the y axis points down)
    ((0.9, 0.6, 0.1), ((-0.5, -0.5, -0.5), (0.5, -0.5, 0.5), (-0.5, -0.5, 0.5), (0.5, -0.5, -0.5))),
    # bottom face (red)
    ((0.8, 0.1, 0.1), ((-0.5, 0.5, -0.5), (0.5, 0.5, 0.5), (-0.5, 0.5, 0.5), (0.5, 0.5, -0.5))),
    # nose face (blue)
    ((0.1, 0.1, 0.8), ((-0.5, -0.5, 0.5), (0.5, 0.5, 0.5), (-0.5, 0.5, 0.5), (0.5, -0.5, 0.5))),
    # tail face (green)
    ((0.1, 0.8, 0.1), ((-0.5, -0.5, -0.5), (0.5, 0.5, -0.5), (-0.5, 0.5, -0.5), (0.5, -0.5, -0.5))),
)

_CUBE_INDICES = (
    0, 1, 2, 0, 3, 1, 4, 5, 6, 4, 7, 5, 8, 9, 10, 8, 11, 9, 12, 13,
    14, 12, 15, 13, 16, 17, 18, 16, 19, 17, 20, 21, 22, 20, 23, 21,
)


def create_cube_builder() -> ModelBuilder:
    """Return a 1x1x1 cube centred at the origin with one colour per face."""
    vertices = [
        Vertex(position=position, color=color)
        for color, positions in _CUBE_FACES
        for position in positions
    ]
    return ModelBuilder(vertices=vertices, indices=list(_CUBE_INDICES), model_name="Cube")