"""Pydantic models for the cypoints HTTP service."""
from typing import List, Optional, Tuple
from pydantic import BaseModel, Field

__all__ = [
    "SurfaceRequestModel",
    "SurfaceResponse",
    "ErrorResponse",
    "HealthResponse",
]


class SurfaceRequestModel(BaseModel):
    """Echo of the request that produced a surface."""
    n: int
    alpha: float
    subdivisions: int

    model_config = {"title": "SurfaceRequest"}


class SurfaceResponse(BaseModel):
    """Generated points in emission order (k1, k2, i, j)."""
    request: SurfaceRequestModel
    point_count: int
    points: List[Tuple[float, float, float]]
    z_min: float
    z_max: float

    model_config = {"title": "SurfaceResponse"}


class ErrorResponse(BaseModel):
    """Error body for rejected requests."""
    code: str
    kind: str
    message: str
    field: Optional[str] = None

    model_config = {"title": "ErrorResponse"}


class HealthResponse(BaseModel):
    status: str = Field(default="ok")
    version: str
