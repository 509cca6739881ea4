"""
CSV record source for the company hierarchy.

Reads the two files the dashboard ships with:

- companies.csv: company_code, company_name, level, country, city,
  founded_year, annual_revenue, employees
- relationships.csv: company_code, parent_company (empty for the root)
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Dict, Iterator, List, Tuple

from pydantic import ValidationError

from models import CompanyRecord, RelationRecord
from services.errors import RecordLoadError
from utils.number_parsing import parse_int, parse_number

logger = logging.getLogger(__name__)

INT_COLUMNS = ("level", "founded_year", "employees")
FLOAT_COLUMNS = ("annual_revenue",)


def _read_rows(path: Path, encoding: str) -> Iterator[Tuple[int, Dict[str, str]]]:
    """Yield (line number, row) pairs; header is line 1."""
    try:
        with path.open("r", encoding=encoding, newline="") as f:
            reader = csv.DictReader(f)
            for row in reader:
                yield reader.line_num, {
                    (k or "").strip(): (v.strip() if isinstance(v, str) else v)
                    for k, v in row.items()
                }
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise RecordLoadError(f"cannot read {path}: {e}") from e


def _coerce_company_row(row: Dict[str, str]) -> Dict[str, object]:
    out: Dict[str, object] = dict(row)
    for col in INT_COLUMNS:
        if col in out:
            out[col] = parse_int(out[col])
    for col in FLOAT_COLUMNS:
        if col in out:
            out[col] = parse_number(out[col])
    return out


class CsvRecordSource:
    def __init__(self, companies_path: str | Path, relations_path: str | Path, encoding: str = "utf-8") -> None:
        self.companies_path = Path(companies_path)
        self.relations_path = Path(relations_path)
        self.encoding = encoding

    def load_companies(self) -> Dict[str, CompanyRecord]:
        companies: Dict[str, CompanyRecord] = {}
        for line, row in _read_rows(self.companies_path, self.encoding):
            try:
                record = CompanyRecord.model_validate(_coerce_company_row(row))
            except (ValueError, ValidationError) as e:
                raise RecordLoadError(f"{self.companies_path}:{line}: invalid company row: {e}") from e
            if record.code in companies:
                raise RecordLoadError(f"{self.companies_path}:{line}: duplicate company_code {record.code}")
            companies[record.code] = record
        logger.debug("Loaded %d companies from %s", len(companies), self.companies_path)
        return companies

    def load_relations(self) -> List[RelationRecord]:
        relations: List[RelationRecord] = []
        for line, row in _read_rows(self.relations_path, self.encoding):
            try:
                relations.append(RelationRecord.model_validate(row))
            except ValidationError as e:
                raise RecordLoadError(f"{self.relations_path}:{line}: invalid relation row: {e}") from e
        logger.debug("Loaded %d relations from %s", len(relations), self.relations_path)
        return relations
