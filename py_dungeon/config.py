"""Configuration management."""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings

from .core.map_maker import MapRanges
from .core.sectors import MIN_SECTOR_HEIGHT, MIN_SECTOR_WIDTH


class Settings(BaseSettings):
    """Application settings pulled from ``DUNGEON_*`` environment variables."""

    # Map generation
    map_width: int = Field(default=56, ge=7, description="Map width in tiles")
    map_height: int = Field(default=32, ge=6, description="Map height in tiles")
    min_columns: int = Field(default=3, ge=1, description="Minimum sector columns")
    max_columns: int = Field(default=4, ge=1, description="Maximum sector columns")
    min_rows: int = Field(default=2, ge=1, description="Minimum sector rows")
    max_rows: int = Field(default=4, ge=1, description="Maximum sector rows")
    min_rooms: int = Field(default=2, ge=1, description="Minimum number of real rooms")
    dummy_skip_chance: float = Field(
        default=0.5, ge=0.0, le=1.0, description="Chance a dummy room adds no connections"
    )
    merge_chance: float = Field(
        default=0.1, ge=0.0, le=1.0, description="Chance two eligible rooms merge"
    )

    # API
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: str = Field(default="json", description="Logging format (plain or json)")

    class Config:
        env_prefix = "DUNGEON_"
        env_file = ".env"
        extra = "ignore"

    @model_validator(mode="after")
    def check_generation_ranges(self) -> "Settings":
        """Reject ranges that cannot roll a valid lattice."""
        if self.min_columns > self.max_columns:
            raise ValueError(f"min_columns {self.min_columns} exceeds max_columns {self.max_columns}")
        if self.min_rows > self.max_rows:
            raise ValueError(f"min_rows {self.min_rows} exceeds max_rows {self.max_rows}")
        if self.map_width // self.max_columns < MIN_SECTOR_WIDTH:
            raise ValueError(
                f"map_width {self.map_width} is too narrow for {self.max_columns} columns "
                f"(sectors need {MIN_SECTOR_WIDTH} tiles)"
            )
        if self.map_height // self.max_rows < MIN_SECTOR_HEIGHT:
            raise ValueError(
                f"map_height {self.map_height} is too short for {self.max_rows} rows "
                f"(sectors need {MIN_SECTOR_HEIGHT} tiles)"
            )
        return self

    def map_ranges(self) -> MapRanges:
        """Generation ranges the host re-rolls for every map."""
        return MapRanges(
            width=self.map_width,
            height=self.map_height,
            min_columns=self.min_columns,
            max_columns=self.max_columns,
            min_rows=self.min_rows,
            max_rows=self.max_rows,
            min_rooms=self.min_rooms,
            dummy_skip_chance=self.dummy_skip_chance,
            merge_chance=self.merge_chance,
        )


settings = Settings()
