from app.db.connection import Database


def init_db(db: Database) -> None:
    with db.connection() as conn:
        conn.executescript("""
            CREATE TABLE IF NOT EXISTS calls (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                sentiment TEXT NOT NULL,
                dba TEXT NOT NULL,
                datetime TEXT NOT NULL,
                outcome TEXT NOT NULL,
                call_outcome TEXT,
                created_at TEXT NOT NULL
            );

            CREATE TABLE IF NOT EXISTS deals (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                load_id TEXT NOT NULL,
                start_location TEXT NOT NULL,
                end_location TEXT NOT NULL,
                call_id INTEGER,
                initial_price REAL,
                agreed_price REAL,
                created_at TEXT NOT NULL
            );

            CREATE INDEX IF NOT EXISTS idx_deals_call_id ON deals (call_id);
            CREATE INDEX IF NOT EXISTS idx_calls_datetime ON calls (datetime);
        """)
