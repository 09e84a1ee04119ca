import math
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator
from pydantic.alias_generators import to_camel


class Shipment(BaseModel):
    """One entry of the shipment catalog (testData.json)."""

    model_config = ConfigDict(extra="allow")

    load_id: Union[str, int]
    origin: str
    destination: str
    loadboard_rate: float
    weight: float
    miles: float
    equipment_type: str
    commodity_type: str

    @field_validator("load_id", mode="before")
    @classmethod
    def coerce_load_id_to_str(cls, v):
        return str(v)


class Driver(BaseModel):
    model_config = ConfigDict(extra="allow")

    status: Optional[str] = None


class TopRoute(BaseModel):
    route: str
    rate: float
    load_id: str


class MetricsSnapshot(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, validate_by_name=True)

    total_loads: int
    total_revenue: float
    average_rate: float
    average_weight: float
    total_miles: float
    average_miles: float
    equipment_breakdown: dict[str, int]
    commodity_breakdown: dict[str, int]
    top_routes: list[TopRoute]
    active_drivers: int
    total_drivers: int
    timestamp: str

    @field_serializer("average_rate", "average_weight", "average_miles", when_used="json")
    def nan_as_null(self, v: float) -> Optional[float]:
        # JSON has no NaN; an empty catalog reports null averages
        return None if math.isnan(v) else v
