from typing import Optional, Union
from pydantic import BaseModel, field_validator


class DealRequest(BaseModel):
    load_id: Optional[Union[str, int]] = None
    start_location: Optional[str] = None
    end_location: Optional[str] = None
    call_id: Optional[int] = None
    initial_price: Optional[float] = None
    agreed_price: Optional[float] = None

    @field_validator("load_id", mode="before")
    @classmethod
    def coerce_load_id_to_str(cls, v):
        if v is not None:
            return str(v)
        return v


class DealResponse(BaseModel):
    id: int
    load_id: str
    start_location: str
    end_location: str
    call_id: Optional[int] = None
    initial_price: Optional[float] = None
    agreed_price: Optional[float] = None
    created_at: str


class DealDetailResponse(DealResponse):
    """Deal joined with the call it came from; call fields are null when
    the call is missing or was deleted."""

    call_sentiment: Optional[str] = None
    call_dba: Optional[str] = None
    call_datetime: Optional[str] = None
    call_outcome: Optional[str] = None
