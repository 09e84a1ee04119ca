from fastapi import APIRouter, Depends, Security

from app.db.connection import Database
from app.models.deal import DealRequest, DealResponse, DealDetailResponse
from app.services.deal_service import (
    create_deal,
    list_deals,
    get_deal,
    update_deal,
    delete_deal,
)
from app.routes._auth import get_database, verify_api_key

router = APIRouter(prefix="/api/deals", tags=["Deals"])


@router.post(
    "",
    response_model=DealResponse,
    status_code=201,
    dependencies=[Security(verify_api_key)],
)
async def create_deal_route(req: DealRequest, db: Database = Depends(get_database)):
    """Record deal terms, optionally linked to an existing call."""
    return create_deal(db, req)


@router.get("", response_model=list[DealDetailResponse])
async def list_deals_route(db: Database = Depends(get_database)):
    """All deals, newest first, with the linked call's sentiment, dba and outcome."""
    return list_deals(db)


@router.get("/{deal_id}", response_model=DealDetailResponse)
async def get_deal_route(deal_id: int, db: Database = Depends(get_database)):
    return get_deal(db, deal_id)


@router.put(
    "/{deal_id}",
    response_model=DealDetailResponse,
    dependencies=[Security(verify_api_key)],
)
async def update_deal_route(
    deal_id: int, req: DealRequest, db: Database = Depends(get_database)
):
    return update_deal(db, deal_id, req)


@router.delete("/{deal_id}", dependencies=[Security(verify_api_key)])
async def delete_deal_route(deal_id: int, db: Database = Depends(get_database)):
    delete_deal(db, deal_id)
    return {"message": "Deal deleted successfully"}
