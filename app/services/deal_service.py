import logging
import sqlite3
from typing import Optional

from app.db.connection import Database
from app.db.repositories.call_repo import call_exists
from app.db.repositories.deal_repo import (
    insert_deal,
    get_deal_by_id,
    get_all_deals,
    update_deal as update_deal_row,
    delete_deal as delete_deal_row,
)
from app.errors import NotFound, ValidationError
from app.models.deal import DealRequest, DealResponse, DealDetailResponse
from app.services.validation import require_fields

log = logging.getLogger(__name__)

DEAL_REQUIRED = ("load_id", "start_location", "end_location")


def _check_call_reference(conn: sqlite3.Connection, call_id: Optional[int]) -> None:
    """Write-time existence check; later call deletions are not tracked."""
    if call_id is not None and not call_exists(conn, call_id):
        raise ValidationError("Referenced call_id does not exist", fields=["call_id"])


def create_deal(db: Database, req: DealRequest) -> DealResponse:
    data = req.model_dump()
    require_fields(data, DEAL_REQUIRED)
    with db.connection() as conn:
        _check_call_reference(conn, data["call_id"])
        deal = insert_deal(conn, data)
    log.info("Deal inserted: id=%s load_id=%s call_id=%s",
             deal["id"], deal["load_id"], deal["call_id"])
    return DealResponse(**deal)


def list_deals(db: Database) -> list[DealDetailResponse]:
    with db.connection() as conn:
        rows = get_all_deals(conn)
    return [DealDetailResponse(**r) for r in rows]


def get_deal(db: Database, deal_id: int) -> DealDetailResponse:
    with db.connection() as conn:
        row = get_deal_by_id(conn, deal_id)
    if row is None:
        raise NotFound("Deal not found")
    return DealDetailResponse(**row)


def update_deal(db: Database, deal_id: int, req: DealRequest) -> DealDetailResponse:
    data = req.model_dump()
    with db.connection() as conn:
        if get_deal_by_id(conn, deal_id) is None:
            raise NotFound("Deal not found")
        require_fields(data, DEAL_REQUIRED)
        _check_call_reference(conn, data["call_id"])
        update_deal_row(conn, deal_id, data)
        row = get_deal_by_id(conn, deal_id)
    log.info("Deal updated: id=%s call_id=%s", deal_id, row["call_id"])
    return DealDetailResponse(**row)


def delete_deal(db: Database, deal_id: int) -> None:
    with db.connection() as conn:
        if not delete_deal_row(conn, deal_id):
            raise NotFound("Deal not found")
    log.info("Deal deleted: id=%s", deal_id)
