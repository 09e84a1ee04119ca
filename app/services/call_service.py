import logging

from app.db.connection import Database
from app.db.repositories.call_repo import (
    insert_call,
    get_call_by_id,
    get_all_calls,
    update_call as update_call_row,
    delete_call as delete_call_row,
)
from app.db.repositories.deal_repo import insert_deal
from app.errors import NotFound
from app.models.call import (
    AGREEMENT_OUTCOME,
    CallCreateRequest,
    CallUpdateRequest,
    CallResponse,
    CallCreateResponse,
)
from app.models.deal import DealResponse
from app.services.deal_service import DEAL_REQUIRED
from app.services.validation import require_fields

log = logging.getLogger(__name__)

CALL_REQUIRED = ("sentiment", "dba", "datetime", "outcome")
_CALL_FIELDS = CALL_REQUIRED + ("call_outcome",)


def create_call(db: Database, req: CallCreateRequest) -> CallCreateResponse:
    """Record a call and, for an agreed outcome, its deal.

    Both rows are written in one transaction: if the outcome is "yes" and
    the deal terms are incomplete, nothing is persisted.
    """
    data = req.model_dump()
    require_fields(data, CALL_REQUIRED)
    call_data = {k: data[k] for k in _CALL_FIELDS}

    with db.connection() as conn:
        call = insert_call(conn, call_data)
        log.info("Call inserted: id=%s dba=%s outcome=%s",
                 call["id"], call["dba"], call["outcome"])

        if call["outcome"] != AGREEMENT_OUTCOME:
            return CallCreateResponse(call=CallResponse(**call))

        # Raising here rolls back the call insert above
        require_fields(
            data,
            DEAL_REQUIRED,
            message=f'When outcome is "{AGREEMENT_OUTCOME}", deal fields are required',
            call={k: call_data[k] for k in _CALL_FIELDS},
        )
        deal = insert_deal(
            conn,
            {
                "load_id": data["load_id"],
                "start_location": data["start_location"],
                "end_location": data["end_location"],
                "call_id": call["id"],
                "initial_price": data.get("initial_price"),
                "agreed_price": data.get("agreed_price"),
            },
        )
        log.info("Deal inserted for call: deal_id=%s call_id=%s load_id=%s",
                 deal["id"], call["id"], deal["load_id"])

    return CallCreateResponse(call=CallResponse(**call), deal=DealResponse(**deal))


def list_calls(db: Database) -> list[CallResponse]:
    with db.connection() as conn:
        rows = get_all_calls(conn)
    return [CallResponse(**r) for r in rows]


def get_call(db: Database, call_id: int) -> CallResponse:
    with db.connection() as conn:
        row = get_call_by_id(conn, call_id)
    if row is None:
        raise NotFound("Call not found")
    return CallResponse(**row)


def update_call(db: Database, call_id: int, req: CallUpdateRequest) -> CallResponse:
    # Full replacement. An outcome changed to "yes" does not create a deal.
    data = req.model_dump()
    with db.connection() as conn:
        if get_call_by_id(conn, call_id) is None:
            raise NotFound("Call not found")
        require_fields(data, CALL_REQUIRED)
        update_call_row(conn, call_id, data)
        row = get_call_by_id(conn, call_id)
    log.info("Call updated: id=%s outcome=%s", call_id, row["outcome"])
    return CallResponse(**row)


def delete_call(db: Database, call_id: int) -> None:
    # Deals pointing at this call are left in place
    with db.connection() as conn:
        if not delete_call_row(conn, call_id):
            raise NotFound("Call not found")
    log.info("Call deleted: id=%s", call_id)
