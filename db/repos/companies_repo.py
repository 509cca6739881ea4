from __future__ import annotations

import sqlite3
from datetime import datetime, timezone
from typing import Iterable, Optional

from models import FlatCompanyView


_COLUMNS = (
    "company_code, company_name, level, country, city, founded_year, "
    "annual_revenue, employees, efficiency"
)


class CompaniesRepo:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def replace_all(self, views: Iterable[FlatCompanyView]) -> int:
        """Replace the snapshot with the given views in one transaction.

        Returns the number of rows written. Row position keeps the
        flattened (pre-order) order.
        """
        exported_at = datetime.now(timezone.utc).isoformat(timespec="seconds")
        rows = [
            (
                v.code, v.name, v.level, v.country, v.city, v.founded_year,
                v.annual_revenue, v.employees, v.efficiency, position, exported_at,
            )
            for position, v in enumerate(views)
        ]
        with self.conn:
            self.conn.execute("DELETE FROM companies")
            self.conn.executemany(
                f"INSERT INTO companies ({_COLUMNS}, position, exported_at) "
                "VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
                rows,
            )
        return len(rows)

    def count(self) -> int:
        cur = self.conn.cursor()
        cur.execute("SELECT COUNT(*) FROM companies")
        return int(cur.fetchone()[0])

    def get(self, code: str) -> Optional[FlatCompanyView]:
        cur = self.conn.cursor()
        cur.execute(f"SELECT {_COLUMNS} FROM companies WHERE company_code = ?", (code,))
        row = cur.fetchone()
        if not row:
            return None
        return FlatCompanyView(
            code=row[0],
            name=row[1],
            level=row[2],
            country=row[3],
            city=row[4],
            founded_year=row[5],
            annual_revenue=row[6],
            employees=row[7],
            efficiency=row[8],
        )
