"""FastAPI main application."""

from fastapi import FastAPI, HTTPException, Query, Response
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import List, Literal, Optional, Tuple
import structlog
import time

from .. import __version__
from ..config import settings
from ..core.errors import InvalidConfigurationError, RenderError
from ..core.heightfield import HeightField
from ..render.image import encode_png
from ..utils.log_setup import configure_logging
from ..utils.random import RandomSource

configure_logging()

logger = structlog.get_logger()

MAX_SEED = 2**64 - 1

# Initialize FastAPI app
app = FastAPI(
    title="Heightfield API",
    description="Fractal noise heightmap generation",
    version=__version__,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request/Response models
class HeightmapRequest(BaseModel):
    """Request to generate a heightmap."""

    width: int = Field(settings.default_width, ge=1, le=settings.max_map_width, description="Columns")
    height: int = Field(settings.default_height, ge=1, le=settings.max_map_height, description="Rows")
    min_height: float = Field(settings.default_min_height, description="Height of a normalized 0")
    max_height: float = Field(settings.default_max_height, description="Height of a normalized 1")
    octave_count: int = Field(settings.default_octave_count, ge=0, le=16, description="Refinement octaves")
    seed: Optional[int] = Field(None, ge=0, le=MAX_SEED, description="Seed for reproducible output")
    formats: List[Literal["table", "html", "image"]] = Field(
        default=["table"], description="Renderings to include in the response"
    )


class HeightmapResponse(BaseModel):
    """Generated heightmap and its renderings."""

    size: Tuple[int, int]
    height_range: Tuple[float, float]
    octave_count: int
    seed: int
    min_value: float
    max_value: float
    generation_time_seconds: float
    table: Optional[str] = None
    html: Optional[str] = None
    data_uri: Optional[str] = None


def build_heightfield(
    width: int,
    height: int,
    min_height: float,
    max_height: float,
    octave_count: int,
    seed: int,
) -> HeightField:
    """Construct and generate a heightfield, mapping bad parameters to HTTP 400."""
    try:
        field = HeightField(width, height, min_height, max_height, octave_count)
    except InvalidConfigurationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    field.generate_seeded(seed)
    return field


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Heightfield API",
        "version": __version__,
        "status": "running"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post("/heightmaps", response_model=HeightmapResponse)
def generate_heightmap(request: HeightmapRequest):
    """
    Generate a heightmap.

    When no seed is given one is drawn from OS entropy and returned, so the
    same map can be requested again.
    """
    logger.info("Heightmap requested", request=request.model_dump())

    seed = request.seed if request.seed is not None else RandomSource().next_u64()

    start = time.perf_counter()
    field = build_heightfield(
        request.width,
        request.height,
        request.min_height,
        request.max_height,
        request.octave_count,
        seed,
    )
    elapsed = time.perf_counter() - start

    response = HeightmapResponse(
        size=field.size,
        height_range=field.height_range,
        octave_count=field.octave_count,
        seed=seed,
        min_value=float(field.data.min()),
        max_value=float(field.data.max()),
        generation_time_seconds=elapsed,
    )

    try:
        if "table" in request.formats:
            response.table = field.to_table()
        if "html" in request.formats:
            response.html = field.to_html_table()
        if "image" in request.formats:
            response.data_uri = field.to_data_uri()
    except RenderError as e:
        logger.error("Heightmap rendering failed", seed=seed, error=str(e))
        raise HTTPException(status_code=500, detail="Rendering failed")

    return response


@app.get("/heightmaps/{seed}/image")
def get_heightmap_image(
    seed: int,
    width: int = Query(settings.default_width, ge=1, le=settings.max_map_width),
    height: int = Query(settings.default_height, ge=1, le=settings.max_map_height),
    octave_count: int = Query(settings.default_octave_count, ge=0, le=16),
):
    """Return the grayscale PNG for a seed."""
    if not 0 <= seed <= MAX_SEED:
        raise HTTPException(status_code=400, detail="Seed must be an unsigned 64-bit integer")

    field = build_heightfield(
        width,
        height,
        settings.default_min_height,
        settings.default_max_height,
        octave_count,
        seed,
    )

    try:
        png = encode_png(field.to_image())
    except RenderError as e:
        logger.error("Heightmap rendering failed", seed=seed, error=str(e))
        raise HTTPException(status_code=500, detail="Rendering failed")

    return Response(content=png, media_type="image/png")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
