from fastapi import APIRouter, Depends, Security

from app.db.connection import Database
from app.models.call import (
    CallCreateRequest,
    CallUpdateRequest,
    CallResponse,
    CallCreateResponse,
)
from app.services.call_service import (
    create_call,
    list_calls,
    get_call,
    update_call,
    delete_call,
)
from app.routes._auth import get_database, verify_api_key

router = APIRouter(prefix="/api/calls", tags=["Calls"])


@router.post(
    "",
    response_model=CallCreateResponse,
    status_code=201,
    dependencies=[Security(verify_api_key)],
)
async def create_call_route(req: CallCreateRequest, db: Database = Depends(get_database)):
    """
    Log a call outcome. When outcome is "yes" the deal terms
    (load_id, start_location, end_location) are required and a linked
    deal is created alongside the call.
    """
    return create_call(db, req)


@router.get("", response_model=list[CallResponse])
async def list_calls_route(db: Database = Depends(get_database)):
    """All calls, most recent conversation first."""
    return list_calls(db)


@router.get("/{call_id}", response_model=CallResponse)
async def get_call_route(call_id: int, db: Database = Depends(get_database)):
    return get_call(db, call_id)


@router.put(
    "/{call_id}",
    response_model=CallResponse,
    dependencies=[Security(verify_api_key)],
)
async def update_call_route(
    call_id: int, req: CallUpdateRequest, db: Database = Depends(get_database)
):
    """Replace a call's fields. Does not create or remove deals."""
    return update_call(db, call_id, req)


@router.delete("/{call_id}", dependencies=[Security(verify_api_key)])
async def delete_call_route(call_id: int, db: Database = Depends(get_database)):
    delete_call(db, call_id)
    return {"message": "Call deleted successfully"}
