from fastapi import APIRouter, Depends

from app.config import Settings
from app.routes._auth import get_app_settings

router = APIRouter()


@router.get("/", include_in_schema=False)
async def root():
    return {"message": "Welcome to the Negotiation Ledger API"}


@router.get("/health", tags=["Health"])
async def health(settings: Settings = Depends(get_app_settings)):
    return {"status": "healthy", "service": settings.app_name}
