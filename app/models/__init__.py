from app.models.call import (
    AGREEMENT_OUTCOME,
    CallCreateRequest,
    CallUpdateRequest,
    CallResponse,
    CallCreateResponse,
)
from app.models.deal import DealRequest, DealResponse, DealDetailResponse
from app.models.metrics import Shipment, Driver, TopRoute, MetricsSnapshot

__all__ = [
    "AGREEMENT_OUTCOME",
    "CallCreateRequest",
    "CallUpdateRequest",
    "CallResponse",
    "CallCreateResponse",
    "DealRequest",
    "DealResponse",
    "DealDetailResponse",
    "Shipment",
    "Driver",
    "TopRoute",
    "MetricsSnapshot",
]
