from fastapi import APIRouter, Depends

from app.config import Settings
from app.db.catalog import load_drivers, load_shipments, read_catalog
from app.models.metrics import MetricsSnapshot
from app.services.metrics_service import compute_snapshot
from app.routes._auth import get_app_settings

router = APIRouter(tags=["Metrics"])


@router.get("/api/metrics", response_model=MetricsSnapshot)
async def metrics(settings: Settings = Depends(get_app_settings)):
    """Fresh summary of the shipment catalog and driver roster."""
    shipments = load_shipments(settings.shipments_path)
    drivers = load_drivers(settings.drivers_path)
    return compute_snapshot(shipments, drivers)


@router.get("/api/data")
async def shipment_data(settings: Settings = Depends(get_app_settings)):
    """The raw shipment catalog."""
    return read_catalog(settings.shipments_path)


@router.get("/data", include_in_schema=False)
async def shipment_data_legacy(settings: Settings = Depends(get_app_settings)):
    return read_catalog(settings.shipments_path)
