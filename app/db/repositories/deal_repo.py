import sqlite3
from datetime import datetime, timezone
from typing import Optional

_DEAL_COLUMNS = (
    "load_id",
    "start_location",
    "end_location",
    "call_id",
    "initial_price",
    "agreed_price",
)


def insert_deal(conn: sqlite3.Connection, deal: dict) -> dict:
    deal["created_at"] = datetime.now(timezone.utc).isoformat()
    cur = conn.execute(
        """INSERT INTO deals
           (load_id, start_location, end_location, call_id,
            initial_price, agreed_price, created_at)
           VALUES (?,?,?,?,?,?,?)""",
        tuple(deal.get(c) for c in _DEAL_COLUMNS) + (deal["created_at"],),
    )
    deal["id"] = cur.lastrowid
    return deal


def get_deal_by_id(conn: sqlite3.Connection, deal_id: int) -> Optional[dict]:
    row = conn.execute(
        """SELECT d.*,
                  c.sentiment AS call_sentiment,
                  c.dba       AS call_dba,
                  c.datetime  AS call_datetime,
                  c.outcome   AS call_outcome
           FROM deals d
           LEFT JOIN calls c ON d.call_id = c.id
           WHERE d.id = ?""",
        (deal_id,),
    ).fetchone()
    return dict(row) if row else None


def get_all_deals(conn: sqlite3.Connection) -> list[dict]:
    rows = conn.execute(
        """SELECT d.*,
                  c.sentiment AS call_sentiment,
                  c.dba       AS call_dba,
                  c.outcome   AS call_outcome
           FROM deals d
           LEFT JOIN calls c ON d.call_id = c.id
           ORDER BY d.created_at DESC, d.id DESC"""
    ).fetchall()
    return [dict(r) for r in rows]


def update_deal(conn: sqlite3.Connection, deal_id: int, fields: dict) -> bool:
    cur = conn.execute(
        """UPDATE deals
           SET load_id = ?, start_location = ?, end_location = ?,
               call_id = ?, initial_price = ?, agreed_price = ?
           WHERE id = ?""",
        tuple(fields.get(c) for c in _DEAL_COLUMNS) + (deal_id,),
    )
    return cur.rowcount > 0


def delete_deal(conn: sqlite3.Connection, deal_id: int) -> bool:
    cur = conn.execute("DELETE FROM deals WHERE id = ?", (deal_id,))
    return cur.rowcount > 0
