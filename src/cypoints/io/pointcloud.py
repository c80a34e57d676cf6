"""Point-cloud export for generated surfaces.

Only vertices are written: the generator produces an unconnected grid of
points, so PLY files carry a single ``vertex`` element and no faces.
"""

from __future__ import annotations

import json
import math
from typing import Any, Dict, Iterable, List, Optional, Sequence

import numpy as np

from cypoints import __version__
from cypoints.surface import Point3

__all__ = ['points_array', 'write_xyz', 'write_ply', 'write_json', 'SCHEMA_ID']

SCHEMA_ID = "cypoints-pointcloud-v0.1"

_PLY_FORMATS = {
    True: 'binary_little_endian',
    False: 'ascii',
}


def points_array(points: Iterable[Point3]) -> np.ndarray:
    """Return the points as an ``(N, 3)`` float64 array."""
    arr = np.asarray(list(points), dtype=np.float64)
    if arr.size == 0:
        return np.zeros((0, 3), dtype=np.float64)
    return arr.reshape(-1, 3)


def _open(path_or_file, mode: str):
    """Return ``(stream, close_when_done)`` for a path or an open stream."""
    if hasattr(path_or_file, 'write'):
        return path_or_file, False
    if 'b' in mode:
        return open(path_or_file, mode), True
    return open(path_or_file, mode, encoding='ascii'), True


def write_xyz(points: Sequence[Point3], path_or_file) -> None:
    """Write one ``x y z`` line per point."""
    stream, close_when_done = _open(path_or_file, 'w')
    try:
        for x, y, z in points:
            print(f"{x!r} {y!r} {z!r}", file=stream)
    finally:
        if close_when_done:
            stream.close()


def _ply_header(count: int, binary: bool, comment: Optional[str]) -> str:
    lines = ["ply", f"format {_PLY_FORMATS[binary]} 1.0"]
    if comment:
        lines.append(f"comment {comment}")
    lines.extend([
        f"element vertex {count}",
        "property float x",
        "property float y",
        "property float z",
        "end_header",
    ])
    return "\n".join(lines) + "\n"


def write_ply(points: Sequence[Point3], path_or_file, *, binary: bool = True,
              comment: Optional[str] = 'cypoints') -> None:
    """Write ``points`` as a vertex-only PLY file.

    ``path_or_file`` can be a filesystem path or an open binary stream.
    Binary output stores little-endian float32 coordinates; ASCII output
    stores shortest round-trip decimal text.
    """
    arr = points_array(points)
    header = _ply_header(len(arr), binary, comment).encode('ascii')

    stream, close_when_done = _open(path_or_file, 'wb')
    try:
        stream.write(header)
        if binary:
            stream.write(arr.astype('<f4').tobytes())
        else:
            for x, y, z in arr.tolist():
                stream.write(f"{x!r} {y!r} {z!r}\n".encode('ascii'))
    finally:
        if close_when_done:
            stream.close()


def _bbox_or_none(arr: np.ndarray) -> Optional[List[float]]:
    if arr.shape[0] == 0:
        return None
    lo = arr.min(axis=0)
    hi = arr.max(axis=0)
    return [float(lo[0]), float(lo[1]), float(lo[2]),
            float(hi[0]), float(hi[1]), float(hi[2])]


def _finite_or_none(value: float) -> Optional[float]:
    return float(value) if math.isfinite(value) else None


def pointcloud_document(result) -> Dict[str, Any]:
    """Build the JSON document for a ``SurfaceResult``."""
    arr = points_array(result.points)
    request = result.request
    return {
        "schema": SCHEMA_ID,
        "generator": {"name": "cypoints", "version": __version__},
        "request": {
            "n": request.n,
            "alpha": request.alpha,
            "subdivisions": request.subdivisions,
        },
        "pointCount": int(arr.shape[0]),
        "order": ["k1", "k2", "i", "j"],
        "boundingBox": _bbox_or_none(arr),
        "zRange": [_finite_or_none(result.z_min), _finite_or_none(result.z_max)],
        "points": arr.tolist(),
    }


def write_json(result, path_or_file, *, indent: Optional[int] = None) -> None:
    """Write a ``SurfaceResult`` as a point-cloud JSON document."""
    doc = pointcloud_document(result)
    stream, close_when_done = _open(path_or_file, 'w')
    try:
        json.dump(doc, stream, indent=indent)
    finally:
        if close_when_done:
            stream.close()
