from __future__ import annotations

from typing import Dict, List, Protocol

from models import CompanyRecord, RelationRecord


class RecordSourcePort(Protocol):
    def load_companies(self) -> Dict[str, CompanyRecord]:
        ...

    def load_relations(self) -> List[RelationRecord]:
        ...
