"""FastAPI main application."""

import logging
from typing import Dict, List, Optional

import structlog
from fastapi import Depends, FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

from ..config import settings
from ..core.analysis import map_statistics
from ..core.errors import ConfigError, GenerationError
from ..core.map_maker import DungeonMap, MapMaker, MapConfig, roll_config
from ..core.movement import walkable_neighbors
from ..core.tiles import Location
from ..utils.random import new_seed

# Configure logging
logging.basicConfig(format="%(message)s", level=settings.log_level.upper())

renderer = (
    structlog.processors.JSONRenderer()
    if settings.log_format == "json"
    else structlog.dev.ConsoleRenderer()
)
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        renderer,
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()

app = FastAPI(
    title="Dungeon Generator API",
    description="Sector-based procedural dungeon generation",
    version="0.1.0",
)


# Request/Response models
class DungeonRequest(BaseModel):
    """Request to generate a new dungeon. Omitted fields are rolled from settings."""

    seed: Optional[str] = Field(None, description="Random seed for reproducible generation")
    width: Optional[int] = Field(None, ge=1, le=1024, description="Map width in tiles")
    height: Optional[int] = Field(None, ge=1, le=1024, description="Map height in tiles")
    rows: Optional[int] = Field(None, ge=1, le=64, description="Sector rows")
    columns: Optional[int] = Field(None, ge=1, le=64, description="Sector columns")
    rooms: Optional[int] = Field(None, ge=1, description="Target number of real rooms")


class Point(BaseModel):
    x: int
    y: int


class RoomInfo(BaseModel):
    """A real room's footprint."""

    id: int
    left: int
    bottom: int
    width: int
    height: int


class DungeonResponse(BaseModel):
    """A generated dungeon."""

    seed: str
    width: int
    height: int
    rows: int
    columns: int
    rooms: int
    spawn: Point
    exit: Point
    tiles: List[str] = Field(..., description="Rows top first, '.' ground and '#' wall")
    real_rooms: List[RoomInfo]
    connections: List[List[int]]
    merged: List[List[int]]
    statistics: Dict[str, float]


class TileResponse(BaseModel):
    x: int
    y: int
    category: str


class ViewportResponse(BaseModel):
    center: Point
    radius: int
    rows: List[List[str]] = Field(..., description="Tile categories, top row first")


class MovesResponse(BaseModel):
    origin: Point
    moves: List[Point]


def build_dungeon(seed: str, request: DungeonRequest) -> DungeonMap:
    """
    Generate the dungeon for a seed and optional overrides.

    The configuration is always rolled from the seeded PRNG first so that a
    seed with the same overrides reproduces the same map.
    """
    maker = MapMaker(MapConfig(), seed)
    overrides = request.model_dump(exclude={"seed"}, exclude_none=True)
    try:
        config = roll_config(settings.map_ranges(), maker.prng)
        for name, value in overrides.items():
            setattr(config, name, value)
        maker.config = config
        return maker.make()
    except ConfigError as e:
        logger.warning("Invalid dungeon configuration", seed=seed, error=str(e))
        raise HTTPException(status_code=400, detail=str(e))
    except GenerationError as e:
        logger.error("Dungeon generation failed", seed=seed, error=str(e))
        raise HTTPException(status_code=500, detail=str(e))


def to_response(dungeon: DungeonMap) -> DungeonResponse:
    config = dungeon.config
    return DungeonResponse(
        seed=dungeon.seed,
        width=config.width,
        height=config.height,
        rows=config.rows,
        columns=config.columns,
        rooms=len(dungeon.real_ids),
        spawn=Point(x=dungeon.spawn.x, y=dungeon.spawn.y),
        exit=Point(x=dungeon.exit.x, y=dungeon.exit.y),
        tiles=dungeon.grid.to_ascii(),
        real_rooms=[
            RoomInfo(id=r.id, left=r.left, bottom=r.bottom, width=r.width, height=r.height)
            for r in dungeon.real_rooms
        ],
        connections=[list(c) for c in dungeon.connections],
        merged=[list(c) for c in dungeon.merged],
        statistics=map_statistics(dungeon.grid, dungeon.spawn, dungeon.rooms),
    )


def overrides_from_query(
    width: Optional[int] = Query(None, ge=1, le=1024),
    height: Optional[int] = Query(None, ge=1, le=1024),
    rows: Optional[int] = Query(None, ge=1, le=64),
    columns: Optional[int] = Query(None, ge=1, le=64),
    rooms: Optional[int] = Query(None, ge=1),
) -> DungeonRequest:
    """Overrides passed as query parameters, shared by every GET endpoint."""
    return DungeonRequest(width=width, height=height, rows=rows, columns=columns, rooms=rooms)


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Dungeon Generator API",
        "version": "0.1.0",
        "status": "running",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post("/dungeons/generate", response_model=DungeonResponse)
async def generate_dungeon(request: DungeonRequest):
    """Generate a dungeon. The returned seed regenerates it via GET /dungeons/{seed}."""
    seed = request.seed or new_seed()
    logger.info("Dungeon generation requested", seed=seed, request=request.model_dump(exclude_none=True))
    return to_response(build_dungeon(seed, request))


@app.get("/dungeons/{seed}", response_model=DungeonResponse)
async def get_dungeon(seed: str, overrides: DungeonRequest = Depends(overrides_from_query)):
    """Re-derive a dungeon from its seed."""
    return to_response(build_dungeon(seed, overrides))


@app.get("/dungeons/{seed}/tiles", response_model=TileResponse)
async def get_tile(
    seed: str, x: int, y: int, overrides: DungeonRequest = Depends(overrides_from_query)
):
    """Tile category at a coordinate; coordinates outside the grid report out_of_bounds."""
    dungeon = build_dungeon(seed, overrides)
    category = dungeon.grid.category(y, x)
    return TileResponse(x=x, y=y, category=category.value)


@app.get("/dungeons/{seed}/viewport", response_model=ViewportResponse)
async def get_viewport(
    seed: str,
    x: int,
    y: int,
    radius: int = Query(4, ge=0, le=32),
    overrides: DungeonRequest = Depends(overrides_from_query),
):
    """Square window of tile categories around a center tile."""
    dungeon = build_dungeon(seed, overrides)
    window = dungeon.grid.window(Location(x, y), radius)
    return ViewportResponse(
        center=Point(x=x, y=y),
        radius=radius,
        rows=[[category.value for category in row] for row in window],
    )


@app.get("/dungeons/{seed}/moves", response_model=MovesResponse)
async def get_moves(
    seed: str, x: int, y: int, overrides: DungeonRequest = Depends(overrides_from_query)
):
    """Tiles an actor standing at (x, y) can step to; diagonal corner cuts are refused."""
    dungeon = build_dungeon(seed, overrides)
    origin = Location(x, y)
    return MovesResponse(
        origin=Point(x=x, y=y),
        moves=[Point(x=loc.x, y=loc.y) for loc in walkable_neighbors(dungeon.grid, origin)],
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
