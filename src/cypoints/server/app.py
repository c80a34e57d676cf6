"""cypoints HTTP service - FastAPI backend."""

from fastapi import FastAPI, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from cypoints import __version__
from cypoints.adapter import format_response, handle_request
from cypoints.errors import Failure
from .models import ErrorResponse, HealthResponse, SurfaceRequestModel, SurfaceResponse

app = FastAPI(title="cypoints Surface Server", version=__version__)

# CORS middleware (allow all origins for dev)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


@app.get("/api/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(version=__version__)


@app.post("/api/generate")
async def generate(request: Request) -> Response:
    """Plugin contract: request text in, coordinate text (or error text) out."""
    body = await request.body()
    result = await run_in_threadpool(handle_request, body)
    text = format_response(result)
    return Response(content=text.encode("ascii"), media_type="text/plain")


@app.get(
    "/api/surface",
    response_model=SurfaceResponse,
    responses={400: {"model": ErrorResponse}},
)
def get_surface(n: str, alpha: str, subdivisions: str) -> SurfaceResponse:
    """Generate a surface and return it as structured JSON.

    Declared without ``async`` so FastAPI runs it in its threadpool.
    """
    result = handle_request(f"{n},{alpha},{subdivisions}")
    if isinstance(result, Failure):
        raise HTTPException(status_code=400, detail=result.error.to_json())

    surface = result.value
    return SurfaceResponse(
        request=SurfaceRequestModel(
            n=surface.request.n,
            alpha=surface.request.alpha,
            subdivisions=surface.request.subdivisions,
        ),
        point_count=surface.point_count,
        points=surface.points,
        z_min=surface.z_min,
        z_max=surface.z_max,
    )
