from typing import Optional, Union
from pydantic import BaseModel, field_validator

from app.models.deal import DealResponse

# The only outcome value with behaviour attached: it requires deal terms.
AGREEMENT_OUTCOME = "yes"


class CallUpdateRequest(BaseModel):
    sentiment: Optional[str] = None
    dba: Optional[str] = None
    datetime: Optional[str] = None
    outcome: Optional[str] = None
    call_outcome: Optional[str] = None


class CallCreateRequest(CallUpdateRequest):
    # Deal terms, only read when outcome == "yes"
    load_id: Optional[Union[str, int]] = None
    start_location: Optional[str] = None
    end_location: Optional[str] = None
    initial_price: Optional[float] = None
    agreed_price: Optional[float] = None

    @field_validator("load_id", mode="before")
    @classmethod
    def coerce_load_id_to_str(cls, v):
        if v is not None:
            return str(v)
        return v


class CallResponse(BaseModel):
    id: int
    sentiment: str
    dba: str
    datetime: str
    outcome: str
    call_outcome: Optional[str] = None
    created_at: str


class CallCreateResponse(BaseModel):
    call: CallResponse
    deal: Optional[DealResponse] = None
