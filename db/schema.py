from __future__ import annotations

import sqlite3


def bootstrap(conn: sqlite3.Connection) -> None:
    """Create the companies snapshot table and its indexes (idempotent)."""
    cur = conn.cursor()

    cur.execute(
        (
            "CREATE TABLE IF NOT EXISTS companies (\n"
            "  company_code TEXT PRIMARY KEY,\n"
            "  company_name TEXT NOT NULL,\n"
            "  level INTEGER NOT NULL,\n"
            "  country TEXT NOT NULL,\n"
            "  city TEXT NOT NULL,\n"
            "  founded_year INTEGER NOT NULL,\n"
            "  annual_revenue REAL NOT NULL,\n"
            "  employees INTEGER NOT NULL,\n"
            "  efficiency REAL NOT NULL,\n"
            "  position INTEGER NOT NULL,\n"
            "  exported_at TEXT NOT NULL\n"
            ")"
        )
    )
    # Dashboard dimensions
    cur.execute("CREATE INDEX IF NOT EXISTS idx_companies_level ON companies(level);")
    cur.execute("CREATE INDEX IF NOT EXISTS idx_companies_country ON companies(country);")
    cur.execute("CREATE INDEX IF NOT EXISTS idx_companies_city ON companies(city);")
    conn.commit()
