"""Data models for brew-buddy."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

BEVERAGE_TYPES = ("TEA", "COFFEE", "OTHER")
UNKNOWN_TYPE = "Unknown"


class _WireModel(BaseModel):
    # Backends commonly send numeric ids.
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, coerce_numbers_to_str=True)


class Beverage(_WireModel):
    """A single catalog record as returned by the data source."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type: str | None = None
    brand: str | None = None
    tags: tuple[str, ...] | None = None
    brew_time_min_sec: int | None = Field(default=None, ge=0)
    brew_time_max_sec: int | None = Field(default=None, ge=0)
    image_resource_ref: str | None = None
    image_url: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @model_validator(mode="after")
    def _check_brew_time_range(self) -> "Beverage":
        low, high = self.brew_time_min_sec, self.brew_time_max_sec
        if low is not None and high is not None and low > high:
            raise ValueError("brewTimeMinSec must not exceed brewTimeMaxSec")
        return self


class BeveragePage(_WireModel):
    """Response envelope of the bulk-fetch endpoint."""

    content: list[Beverage] = Field(default_factory=list)
    total_elements: int = 0
    total_pages: int = 0
    size: int = 0
    number: int = 0


class FilterCriteria(BaseModel):
    """Current selection of the catalog filters."""

    model_config = ConfigDict(frozen=True)

    type_filter: str | None = None
    brand_filter: str | None = None
    tags: frozenset[str] = frozenset()
    search_text: str = ""

    @property
    def is_empty(self) -> bool:
        return not (self.type_filter or self.brand_filter or self.tags or self.search_text.strip())


class Facets(BaseModel):
    """Selectable values for each filter dimension."""

    types: list[str] = Field(default_factory=list)
    brands: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)


class TypeDistributionEntry(BaseModel):
    type: str
    count: int
    percentage: float


class TagFrequencyEntry(BaseModel):
    tag: str
    count: int


class UsageSummary(BaseModel):
    """Overview counters plus both distributions of a collection."""

    total_beverages: int = 0
    type_count: int = 0
    unique_tag_count: int = 0
    type_distribution: list[TypeDistributionEntry] = Field(default_factory=list)
    tag_frequency: list[TagFrequencyEntry] = Field(default_factory=list)


class ChartDatum(BaseModel):
    """One bar of a horizontal bar chart."""

    label: str
    value: float
    color: str
    width_percent: float
    label_inside: bool
    share_percent: float = 0.0
