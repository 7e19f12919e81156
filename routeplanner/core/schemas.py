import re
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

Category = Literal["attraction", "restaurant", "activity", "transport"]
Level = Literal["low", "medium", "high"]

START_TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


class CamelModel(BaseModel):
    """Base model that reads and writes the camelCase wire format."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Activity(CamelModel):
    id: str = Field(..., min_length=1, max_length=100)
    name: str = Field(..., min_length=1, max_length=200)
    location: str = Field("", max_length=300)
    opening_hours: str = Field("", description="Display-only, e.g. '09:00-17:00'")
    estimated_duration: int = Field(..., ge=0, le=24 * 60, description="Minutes")
    category: Category
    crowd_level: Level
    energy_required: Level
    weather_dependent: bool
    priority: int

    # Filled in while a route is being optimized
    coordinates: tuple[float, float] | None = Field(
        None, description="(longitude, latitude)"
    )
    travel_times: list[int] | None = Field(
        None,
        description=(
            "Minutes to every activity of the optimized order, aligned by index "
            "with the order they were computed against"
        ),
    )
    suggested_times: list[str] | None = None
    notes: str | None = None

    @field_validator("id", "name", "location", mode="before")
    @classmethod
    def strip_text(cls, v):
        """Runs before the length checks, so blank values fail them."""
        if isinstance(v, str):
            return v.strip()
        return v


class BreakSuggestion(CamelModel):
    time: str
    type: Literal["rest", "food", "bathroom"]
    location: str
    reason: str
    duration: int | None = None


class TransportationOption(CamelModel):
    from_: str = Field(..., alias="from")
    to: str
    mode: Literal["walking", "transit", "rideshare"]
    duration: str | None = None
    distance: str | None = None
    estimated_cost: str | None = None
    instructions: list[str] | None = Field(
        None, description="Plain-text steps; provider markup is stripped"
    )
    note: str | None = None


class RouteOptimization(CamelModel):
    """Route envelope returned by one optimization run."""

    optimized_order: list[Activity] = Field(default_factory=list)
    total_walking_time: int = 0
    total_duration: int = 0
    energy_distribution: str = ""
    suggestions: list[str] = Field(default_factory=list)
    breaks: list[BreakSuggestion] = Field(default_factory=list)
    transportation_options: list[TransportationOption] = Field(default_factory=list)
    real_travel_times: bool = False


class RouteRequest(CamelModel):
    """Schema for a route optimization request."""

    activities: list[Activity] = Field(default_factory=list, max_length=50)
    start_time: str = Field("09:00", description="24-hour 'HH:MM'")
    energy_level: Level = "medium"
    include_breaks: bool = True
    weather_backup: bool = True
    destination: str = Field("", max_length=200)
    trip_day: int = Field(1, ge=1, le=365)

    @field_validator("start_time")
    @classmethod
    def validate_start_time(cls, v: str) -> str:
        """Validate 24-hour HH:MM format."""
        v = v.strip()
        if not START_TIME_PATTERN.match(v):
            raise ValueError("Invalid start time. Expected 'HH:MM' (24-hour)")
        return v

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        return v.strip()

    @field_validator("activities")
    @classmethod
    def validate_unique_ids(cls, v: list[Activity]) -> list[Activity]:
        """Activity ids identify stops in the optimized order, so they must be unique."""
        seen: set[str] = set()
        for activity in v:
            if activity.id in seen:
                raise ValueError(f"Duplicate activity id: {activity.id}")
            seen.add(activity.id)
        return v


class CatalogRequest(CamelModel):
    """Schema for building template activities from trip interests."""

    destination: str = Field("", max_length=200)
    interests: list[str] = Field(default_factory=list, max_length=20)

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        return v.strip()

    @field_validator("interests")
    @classmethod
    def normalize_interests(cls, v: list[str]) -> list[str]:
        return [interest.strip().lower() for interest in v if interest.strip()]


class RouteExportRequest(CamelModel):
    optimization: RouteOptimization
    start_time: str = "09:00"
    date: str | None = Field(None, description="Display date; defaults to today")

    @field_validator("start_time")
    @classmethod
    def validate_start_time(cls, v: str) -> str:
        v = v.strip()
        if not START_TIME_PATTERN.match(v):
            raise ValueError("Invalid start time. Expected 'HH:MM' (24-hour)")
        return v


class ExportedStop(CamelModel):
    order: int
    time: str
    name: str
    location: str
    duration: str
    notes: str


class RouteExport(CamelModel):
    date: str
    start_time: str
    activities: list[ExportedStop] = Field(default_factory=list)
    breaks: list[BreakSuggestion] = Field(default_factory=list)
    total_time: str
    walking_time: str
