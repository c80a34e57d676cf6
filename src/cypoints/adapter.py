"""Request boundary: text in, generated surface or error text out.

``handle_request`` returns a tagged ``Success``/``Failure`` so callers can
branch without looking at strings. ``format_response`` is the only place the
result is turned into the plugin wire text, and ``generate_calabi_yau`` is the
byte-level entry point used by the document pipeline.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Union

from cypoints.errors import Failure, RequestError, Result, Success, error_empty_surface
from cypoints.request import SurfaceRequest, parse_request
from cypoints.surface import Point3, flatten, generate_surface, z_range

__all__ = [
    'ERROR_PREFIX',
    'SurfaceResult',
    'run_request',
    'handle_request',
    'format_value',
    'format_response',
    'generate_calabi_yau',
]

logger = logging.getLogger(__name__)

ERROR_PREFIX = "Error: "


@dataclass(frozen=True)
class SurfaceResult:
    """Generated points of one request together with their z range."""

    request: SurfaceRequest
    points: List[Point3]
    z_min: float
    z_max: float

    @property
    def point_count(self) -> int:
        return len(self.points)

    def coordinates(self) -> List[float]:
        """Flat coordinate list followed by ``z_min`` and ``z_max``."""
        values = flatten(self.points)
        values.append(self.z_min)
        values.append(self.z_max)
        return values


def run_request(request: SurfaceRequest) -> SurfaceResult:
    """Generate the surface for an already parsed request.

    Raises ``RequestError`` (R007) when no points are produced.
    """
    points = generate_surface(request.n, request.alpha, request.subdivisions)
    if not points:
        raise error_empty_surface()
    z_min, z_max = z_range(points)
    return SurfaceResult(request=request, points=points, z_min=z_min, z_max=z_max)


def handle_request(data: Union[bytes, bytearray, str]) -> Result:
    """Parse and serve ``data``, returning ``Success`` or ``Failure``."""
    try:
        request = parse_request(data)
        result = run_request(request)
    except RequestError as err:
        logger.info("rejected request (%s): %s", err.kind.code, err.message)
        return Failure(err)
    logger.debug("generated %d points for %s", result.point_count, request.to_text())
    return Success(result)


def format_value(value: float) -> str:
    """Shortest decimal text that reads back as the same float."""
    return repr(float(value))


def format_response(result: Result) -> str:
    """Serialize a result to the plugin wire text."""
    if isinstance(result, Failure):
        return ERROR_PREFIX + result.message
    return ",".join(format_value(v) for v in result.value.coordinates())


def generate_calabi_yau(data: bytes) -> bytes:
    """Byte-level plugin entry point.

    Returns the comma-separated coordinates and z range on success, or
    ``b"Error: <reason>"`` on failure.
    """
    return format_response(handle_request(data)).encode('ascii')
