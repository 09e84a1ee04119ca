import sqlite3
from datetime import datetime, timezone
from typing import Optional

_CALL_COLUMNS = ("sentiment", "dba", "datetime", "outcome", "call_outcome")


def insert_call(conn: sqlite3.Connection, call: dict) -> dict:
    call["created_at"] = datetime.now(timezone.utc).isoformat()
    cur = conn.execute(
        """INSERT INTO calls
           (sentiment, dba, datetime, outcome, call_outcome, created_at)
           VALUES (?,?,?,?,?,?)""",
        (
            call["sentiment"],
            call["dba"],
            call["datetime"],
            call["outcome"],
            call.get("call_outcome"),
            call["created_at"],
        ),
    )
    call["id"] = cur.lastrowid
    return call


def get_call_by_id(conn: sqlite3.Connection, call_id: int) -> Optional[dict]:
    row = conn.execute("SELECT * FROM calls WHERE id = ?", (call_id,)).fetchone()
    return dict(row) if row else None


def call_exists(conn: sqlite3.Connection, call_id: int) -> bool:
    row = conn.execute("SELECT 1 FROM calls WHERE id = ?", (call_id,)).fetchone()
    return row is not None


def get_all_calls(conn: sqlite3.Connection) -> list[dict]:
    rows = conn.execute(
        "SELECT * FROM calls ORDER BY datetime DESC, id DESC"
    ).fetchall()
    return [dict(r) for r in rows]


def update_call(conn: sqlite3.Connection, call_id: int, fields: dict) -> bool:
    cur = conn.execute(
        """UPDATE calls
           SET sentiment = ?, dba = ?, datetime = ?, outcome = ?, call_outcome = ?
           WHERE id = ?""",
        tuple(fields.get(c) for c in _CALL_COLUMNS) + (call_id,),
    )
    return cur.rowcount > 0


def delete_call(conn: sqlite3.Connection, call_id: int) -> bool:
    cur = conn.execute("DELETE FROM calls WHERE id = ?", (call_id,))
    return cur.rowcount > 0
